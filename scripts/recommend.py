"""
scripts/recommend.py
────────────────────────────────────────────────────────────────────────
Compute a recommendation from the command line and print it as JSON
(same camelCase shape the API returns):

    python -m scripts.recommend --weight 70 --height 175 --age 28 \
        --sex male --activity moderate --goal weight_loss

Add `--meals --diet vegan` to include the closest catalogue meals per slot.
Errors go to stderr as `{"error": {"kind": ..., "message": ...}}`, exit 2.
"""
from __future__ import annotations

import json
import logging
import sys
from argparse import ArgumentParser, ArgumentTypeError
from typing import Sequence

from dotenv import load_dotenv
load_dotenv()

from config import settings
from core.errors import NutritionError
from core.meal_recommender import MealRecommender
from core.nutrition_calc import ActivityLevel, DietType, GoalType, NutritionalCalculator
from api.v1.schemas import MealRecResponse, RecResponse


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ArgumentTypeError(f"expected a whole number, got {raw!r}") from None
    if value < 1:
        raise ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _parser() -> ArgumentParser:
    ap = ArgumentParser(description="Daily calories, macros and meal split")
    ap.add_argument("--weight", type=float, required=True, help="kg")
    ap.add_argument("--height", type=float, required=True, help="cm")
    ap.add_argument("--age", type=int, required=True, help="years")
    ap.add_argument("--sex", default="other", help="male | female | other")
    ap.add_argument(
        "--activity", required=True,
        help=" | ".join(a.value for a in ActivityLevel),
    )
    ap.add_argument(
        "--goal", default=GoalType.general.value,
        help=" | ".join(g.value for g in GoalType),
    )
    ap.add_argument("--diet", default=DietType.veg.value, help="veg | non_veg | vegan")
    ap.add_argument("--meals", action="store_true", help="also match catalogue meals")
    ap.add_argument("-k", type=_positive_int, default=settings.meal_options_per_slot,
                    help="meal options per slot")
    return ap


def run(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    logging.basicConfig(level=settings.log_level.upper())

    try:
        diet = DietType.parse(args.diet)
        result = NutritionalCalculator().recommend({
            "profile": {
                "weight_kg": args.weight,
                "height_cm": args.height,
                "age_years": args.age,
                "sex": args.sex,
                "activity_level": args.activity,
            },
            "goal_type": args.goal,
            "diet_type": diet.value,
        })
    except NutritionError as exc:
        print(json.dumps(exc.to_dict()), file=sys.stderr)
        return 2

    rec = RecResponse.model_validate(result)
    if args.meals:
        meals = MealRecommender().recommend_meals(result, diet, k=args.k)
        out = MealRecResponse(recommendation=rec, diet_type=diet, meals=meals)
    else:
        out = rec
    print(json.dumps(out.model_dump(mode="json", by_alias=True), indent=2))
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":  # pragma: no cover
    main()
