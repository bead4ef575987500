"""
Slot matcher – verify ranking against the worked-example distribution
(breakfast 514 · lunch 720 · dinner 617 · snacks 206).
"""
import logging

import pandas as pd
import pytest

from core.meal_recommender import MealRecommender
from core.nutrition_calc import (
    DietType,
    Macros,
    MealDistribution,
    RecommendationResult,
)

RESULT = RecommendationResult(
    daily_calories=2057,
    macros=Macros(protein_grams=206, carb_grams=154, fat_grams=69),
    meal_distribution=MealDistribution(breakfast=514, lunch=720, dinner=617, snacks=206),
)

r = MealRecommender()


def test_filter_meals_by_diet_and_slot():
    df = r.filter_meals(DietType.vegan, "snack")
    assert set(df["id"]) == {"g-s1", "g-s2"}


def test_scores_are_absolute_kcal_distance():
    df = r.calculate_meal_scores(r.filter_meals(DietType.veg, "breakfast"), 514)
    scores = dict(zip(df["id"], df["score"]))
    assert scores == {"v-b1": 134.0, "v-b2": 6.0, "v-b3": 64.0}


def test_recommend_meals_ranks_closest_first():
    out = r.recommend_meals(RESULT, DietType.veg, k=2)

    assert list(out) == ["breakfast", "lunch", "dinner", "snacks"]
    assert [m["id"] for m in out["breakfast"]] == ["v-b2", "v-b3"]
    assert [m["id"] for m in out["lunch"]] == ["v-l2", "v-l1"]
    assert [m["id"] for m in out["dinner"]] == ["v-d1", "v-d2"]
    assert [m["id"] for m in out["snacks"]] == ["v-s2", "v-s1"]


def test_k_caps_each_slot():
    out = r.recommend_meals(RESULT, DietType.non_veg, k=1)
    assert all(len(opts) == 1 for opts in out.values())


def test_slot_without_options_is_empty(caplog):
    no_snacks = pd.DataFrame(
        [
            {"id": "x1", "name": "Idli", "description": "", "meal_type": "breakfast",
             "diet_type": "vegan", "calories": 300, "protein": 8, "carbs": 60, "fats": 2},
        ]
    )
    with caplog.at_level(logging.WARNING, logger="core.meal_recommender"):
        out = MealRecommender(no_snacks).recommend_meals(RESULT, DietType.vegan)
    assert [m["id"] for m in out["breakfast"]] == ["x1"]
    assert out["snacks"] == []
    assert "no vegan options for slot snacks" in caplog.text


@pytest.mark.parametrize("k", [0, -1])
def test_k_must_be_positive(k):
    with pytest.raises(ValueError):
        r.recommend_meals(RESULT, DietType.veg, k=k)
