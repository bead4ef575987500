# api/v1/schemas/rec.py
from __future__ import annotations
from typing import Any, Dict, List

from pydantic import AliasChoices, BaseModel, Field, field_validator

from core.nutrition_calc import DietType
from .base import CamelModel


# ───────────────────────── request ─────────────────────────
class ProfileIn(BaseModel):
    # numerics stay loose here; the calculator owns the positivity checks
    weight_kg: float | None = Field(
        None, validation_alias=AliasChoices("weightKg", "weight_kg", "weight")
    )
    height_cm: float | None = Field(
        None, validation_alias=AliasChoices("heightCm", "height_cm", "height")
    )
    age_years: float | None = Field(
        None, validation_alias=AliasChoices("ageYears", "age_years", "age")
    )
    sex: str | None = Field(None, validation_alias=AliasChoices("sex", "gender"))
    activity_level: str | None = Field(
        None, validation_alias=AliasChoices("activityLevel", "activity_level")
    )


class RecRequest(BaseModel):
    profile: ProfileIn
    # anything unrecognised (including non-strings) falls back to "general"
    goal_type: Any = Field(
        None,
        validation_alias=AliasChoices("goalType", "goal_type", "plan_type"),
        examples=["weight_loss", "weight_gain", "muscle_gain", "general"],
    )
    diet_type: DietType | None = Field(
        None, validation_alias=AliasChoices("dietType", "diet_type")
    )

    @field_validator("diet_type", mode="before")
    @classmethod
    def _dash_alias(cls, v: Any) -> Any:
        # storefront sends "non-veg"
        return v.strip().lower().replace("-", "_") if isinstance(v, str) else v

    def as_engine_request(self) -> dict[str, Any]:
        return {
            "profile": self.profile.model_dump(),
            "goal_type": self.goal_type,
            "diet_type": self.diet_type.value if self.diet_type else None,
        }


# ───────────────────────── response ────────────────────────
class MacrosOut(CamelModel):
    protein_grams: int
    carb_grams: int
    fat_grams: int


class MealDistributionOut(CamelModel):
    breakfast: int
    lunch: int
    dinner: int
    snacks: int


class RecResponse(CamelModel):
    daily_calories: int
    macros: MacrosOut
    meal_distribution: MealDistributionOut


class MealOptionOut(CamelModel):
    id: str
    name: str
    description: str
    meal_type: str
    diet_type: str
    calories: float
    protein: float
    carbs: float
    fats: float
    score: float


class MealRecResponse(CamelModel):
    recommendation: RecResponse
    diet_type: DietType
    meals: Dict[str, List[MealOptionOut]]
