"""
core/catalog.py
────────────────────────────────────────────────────────────────────────
Read-only storefront catalogue:

* `DIET_PLANS`   – the subscription plans shown on the plans page
* `PLAN_TYPES`   – the four goal-based plans with their monthly price
* `MEAL_OPTIONS` – per-slot meal options, tagged with a diet type

`filter_plans()` applies the plans-page filters (search text, diet type,
calorie range) on a DataFrame view of `DIET_PLANS`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

import pandas as pd

from core.errors import PlanNotFound

_LOG = logging.getLogger(__name__)

DEFAULT_MIN_CALORIES = 0
DEFAULT_MAX_CALORIES = 5000

_IMG = "https://images.pexels.com/photos/{}/pexels-photo-{}.jpeg?auto=compress&cs=tinysrgb&w=1260&h=750&dpr=1"

# ────────────────────────────────────────────────────────────────────
DIET_PLANS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Vegetarian Starter Plan",
        "description": "Perfect for those just starting their vegetarian journey. "
                       "Balanced nutrition with delicious plant-based options.",
        "calories": 1500,
        "diet_type": "Vegetarian",
        "price": 1200,
        "image_url": _IMG.format(1640770, 1640770),
    },
    {
        "id": "2",
        "name": "High Protein Non-Veg Plan",
        "description": "Protein-rich plan with lean meats, perfect for those looking "
                       "to build muscle and stay fit.",
        "calories": 2000,
        "diet_type": "Non-Vegetarian",
        "price": 1500,
        "image_url": _IMG.format(1633525, 1633525),
    },
    {
        "id": "3",
        "name": "Vegan Delight",
        "description": "A complete plant-based meal plan with all essential nutrients "
                       "and protein sources.",
        "calories": 1800,
        "diet_type": "Vegan",
        "price": 1350,
        "image_url": _IMG.format(1643383, 1643383),
    },
    {
        "id": "4",
        "name": "Weight Loss Special",
        "description": "Low-calorie meals that don't compromise on taste. "
                       "Designed for effective weight management.",
        "calories": 1200,
        "diet_type": "Vegetarian",
        "price": 1400,
        "image_url": _IMG.format(1211887, 1211887),
    },
    {
        "id": "5",
        "name": "Keto Non-Veg Plan",
        "description": "High-fat, low-carb meal plan with meat options for those "
                       "following a ketogenic diet.",
        "calories": 2200,
        "diet_type": "Non-Vegetarian",
        "price": 1700,
        "image_url": _IMG.format(2097090, 2097090),
    },
    {
        "id": "6",
        "name": "Athletic Performance",
        "description": "Balanced macros with higher calories for active individuals "
                       "and athletes.",
        "calories": 2500,
        "diet_type": "Non-Vegetarian",
        "price": 1800,
        "image_url": _IMG.format(1410235, 1410235),
    },
]

PLAN_TYPES: List[Dict[str, Any]] = [
    {
        "type": "weight_loss",
        "title": "Weight Loss Plan",
        "description": "Scientifically designed for effective weight loss",
        "monthly_price": 2000,
    },
    {
        "type": "weight_gain",
        "title": "Weight Gain Plan",
        "description": "Balanced nutrition for healthy weight gain",
        "monthly_price": 2200,
    },
    {
        "type": "muscle_gain",
        "title": "Muscle Gain Plan",
        "description": "High-protein diet for muscle building",
        "monthly_price": 2500,
    },
    {
        "type": "general",
        "title": "General Plan",
        "description": "Well-balanced diet for overall health",
        "monthly_price": 1800,
    },
]


def _meal(id_, name, description, meal_type, diet_type, kcal, protein, carbs, fats):
    return {
        "id": id_,
        "name": name,
        "description": description,
        "meal_type": meal_type,
        "diet_type": diet_type,
        "calories": kcal,
        "protein": protein,
        "carbs": carbs,
        "fats": fats,
    }


MEAL_OPTIONS: List[Dict[str, Any]] = [
    # ── veg ──────────────────────────────────────────────────────────
    _meal("v-b1", "Masala Oats with Veggies", "Rolled oats, peas, carrots, curry leaves", "breakfast", "veg", 380, 14, 58, 9),
    _meal("v-b2", "Paneer Bhurji Toast", "Scrambled paneer on multigrain toast", "breakfast", "veg", 520, 28, 44, 24),
    _meal("v-b3", "Moong Dal Chilla", "Two lentil crepes with mint chutney", "breakfast", "veg", 450, 24, 56, 12),
    _meal("v-l1", "Rajma Chawal Bowl", "Kidney-bean curry with brown rice and salad", "lunch", "veg", 640, 24, 102, 14),
    _meal("v-l2", "Palak Paneer & Phulka", "Spinach paneer with two whole-wheat phulkas", "lunch", "veg", 720, 34, 70, 32),
    _meal("v-l3", "Vegetable Pulao & Raita", "Basmati pulao with cucumber raita", "lunch", "veg", 560, 16, 92, 14),
    _meal("v-d1", "Dal Tadka & Jeera Rice", "Yellow dal with cumin rice", "dinner", "veg", 590, 22, 96, 12),
    _meal("v-d2", "Paneer Tikka Platter", "Grilled paneer, peppers and quinoa", "dinner", "veg", 660, 38, 48, 34),
    _meal("v-s1", "Roasted Makhana", "Spiced fox nuts", "snack", "veg", 150, 5, 22, 5),
    _meal("v-s2", "Greek Yogurt & Berries", "Hung curd with seasonal berries", "snack", "veg", 210, 15, 24, 6),
    # ── non_veg ──────────────────────────────────────────────────────
    _meal("n-b1", "Egg White Omelette", "Three egg whites, spinach, whole-wheat toast", "breakfast", "non_veg", 360, 30, 32, 11),
    _meal("n-b2", "Chicken Keema Paratha", "Minced chicken stuffed paratha with curd", "breakfast", "non_veg", 560, 36, 50, 22),
    _meal("n-l1", "Tandoori Chicken & Quinoa Khichdi", "Grilled chicken with quinoa khichdi", "lunch", "non_veg", 610, 48, 52, 20),
    _meal("n-l2", "Fish Curry & Rice", "Coastal fish curry with steamed rice", "lunch", "non_veg", 740, 42, 84, 24),
    _meal("n-l3", "Chicken Biryani (lean)", "Brown-rice biryani with breast meat", "lunch", "non_veg", 820, 46, 96, 26),
    _meal("n-d1", "Grilled Fish & Sauteed Greens", "Basa fillet with garlic greens", "dinner", "non_veg", 480, 44, 18, 24),
    _meal("n-d2", "Butter Chicken & Phulka", "Light butter chicken with two phulkas", "dinner", "non_veg", 690, 46, 54, 30),
    _meal("n-s1", "Boiled Egg Chaat", "Two eggs with onion, tomato and chaat masala", "snack", "non_veg", 180, 13, 6, 11),
    _meal("n-s2", "Chicken Tikka Bites", "Six pieces of grilled chicken tikka", "snack", "non_veg", 240, 32, 4, 10),
    # ── vegan ────────────────────────────────────────────────────────
    _meal("g-b1", "Poha with Peanuts", "Flattened rice, peanuts, lemon", "breakfast", "vegan", 400, 10, 64, 12),
    _meal("g-b2", "Tofu Scramble Wrap", "Turmeric tofu scramble in a millet wrap", "breakfast", "vegan", 490, 26, 50, 20),
    _meal("g-l1", "Chana Masala & Brown Rice", "Chickpea curry with brown rice", "lunch", "vegan", 680, 24, 110, 16),
    _meal("g-l2", "Soya Chunk Pulao", "Soya chunks cooked with basmati and veggies", "lunch", "vegan", 600, 36, 80, 14),
    _meal("g-d1", "Tofu Stir-Fry & Millet", "Tofu, broccoli and foxtail millet", "dinner", "vegan", 560, 30, 62, 20),
    _meal("g-d2", "Mixed Dal Khichdi", "Lentil-rice khichdi with vegetables", "dinner", "vegan", 620, 24, 100, 12),
    _meal("g-s1", "Sprouts Salad", "Moong sprouts, cucumber, lemon", "snack", "vegan", 160, 11, 26, 2),
    _meal("g-s2", "Peanut Chikki Bar", "Jaggery peanut bar", "snack", "vegan", 230, 8, 24, 12),
]


# ───────────────────────── plan lookups ─────────────────────────────
def plans_frame() -> pd.DataFrame:
    return pd.DataFrame(DIET_PLANS)


def meal_options_frame() -> pd.DataFrame:
    return pd.DataFrame(MEAL_OPTIONS)


def filter_plans(
    query: str | None = None,
    diet_type: str | None = None,
    min_calories: float = DEFAULT_MIN_CALORIES,
    max_calories: float = DEFAULT_MAX_CALORIES,
) -> List[Dict[str, Any]]:
    """
    Same filters as the plans page:
    search text in name/description, exact diet type, inclusive kcal range.
    """
    df = plans_frame()

    if query:
        needle = query.strip()
        hit = (
            df["name"].str.contains(needle, case=False, regex=False)
            | df["description"].str.contains(needle, case=False, regex=False)
        )
        df = df[hit]

    if diet_type:
        df = df[df["diet_type"] == diet_type]

    df = df[(df["calories"] >= min_calories) & (df["calories"] <= max_calories)]

    if df.empty:
        _LOG.info(
            "no plans match q=%r diet_type=%r kcal=[%s, %s]",
            query, diet_type, min_calories, max_calories,
        )
    return df.to_dict("records")


def get_plan(plan_id: str) -> Dict[str, Any]:
    for plan in DIET_PLANS:
        if plan["id"] == plan_id:
            return dict(plan)
    raise PlanNotFound(f"No diet plan with id {plan_id!r}")
