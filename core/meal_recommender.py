"""
core/meal_recommender.py
────────────────────────────────────────────────────────────────────────
Slot-by-slot meal matcher.

Responsibilities
----------------
1.   `filter_meals()` – keep options for one diet type and one meal slot.
2.   `calculate_meal_scores()` – absolute kcal distance between each
     option and the slot's calorie allocation.
3.   `recommend_meals()` – the k closest options for every slot of a
     `RecommendationResult.meal_distribution`.

The class does NOT compute targets – that is
`core.nutrition_calc.NutritionalCalculator`'s job.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

import numpy as np
import pandas as pd

from core.catalog import meal_options_frame
from core.nutrition_calc import DietType, RecommendationResult

_LOG = logging.getLogger(__name__)

# distribution slot → catalogue meal_type
SLOT_TO_MEAL_TYPE = {
    "breakfast": "breakfast",
    "lunch": "lunch",
    "dinner": "dinner",
    "snacks": "snack",
}


class MealRecommender:
    def __init__(self, meals_df: pd.DataFrame | None = None) -> None:
        self._meals = (meals_df if meals_df is not None else meal_options_frame()).copy()

    # ─────────────────────────────── filter ───────────────────────── #
    def filter_meals(self, diet_type: DietType, meal_type: str) -> pd.DataFrame:
        df = self._meals
        df = df[df["diet_type"] == diet_type.value]
        df = df[df["meal_type"].str.lower() == meal_type.lower()]
        return df.reset_index(drop=True)

    # ──────────────────────────── scoring ─────────────────────────── #
    def calculate_meal_scores(self, df: pd.DataFrame, target_kcal: float) -> pd.DataFrame:
        """
        Score = |calories − target_kcal|. Lower score = better match.
        """
        if "calories" not in df.columns:
            raise KeyError("Meal DataFrame missing column: calories")

        kcal = df["calories"].to_numpy(dtype=float)
        return df.assign(score=np.abs(kcal - float(target_kcal)))

    # ──────────────────────────── wrapper ─────────────────────────── #
    def recommend_meals(
        self,
        result: RecommendationResult,
        diet_type: DietType,
        k: int = 3,
    ) -> Dict[str, List[Dict[str, Any]]]:
        if k < 1:
            raise ValueError(f"k must be at least 1, got {k}")
        out: Dict[str, List[Dict[str, Any]]] = {}
        for slot, target in result.meal_distribution.as_dict().items():
            filtered = self.filter_meals(diet_type, SLOT_TO_MEAL_TYPE[slot])
            if filtered.empty:
                _LOG.warning("no %s options for slot %s", diet_type.value, slot)
                out[slot] = []
                continue

            scored = self.calculate_meal_scores(filtered, target)
            # stable sort keeps catalogue order between equal scores
            best = scored.sort_values("score", kind="mergesort").head(k)
            out[slot] = best.to_dict("records")
        return out
