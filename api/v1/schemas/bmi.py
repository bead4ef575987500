from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field

from core.nutrition_calc import BmiCategory
from .base import CamelModel


class BmiIn(BaseModel):
    height_cm: float | None = Field(
        None, validation_alias=AliasChoices("heightCm", "height_cm", "height")
    )
    weight_kg: float | None = Field(
        None, validation_alias=AliasChoices("weightKg", "weight_kg", "weight")
    )


class BmiOut(CamelModel):
    bmi: float
    category: BmiCategory
    advice: str
