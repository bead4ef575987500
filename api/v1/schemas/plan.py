from __future__ import annotations
from typing import Literal

from .base import CamelModel

PlanDietType = Literal["Vegetarian", "Non-Vegetarian", "Vegan"]


class DietPlanOut(CamelModel):
    id: str
    name: str
    description: str
    calories: int
    diet_type: PlanDietType
    price: int
    image_url: str


class PlanTypeOut(CamelModel):
    type: str
    title: str
    description: str
    monthly_price: int
