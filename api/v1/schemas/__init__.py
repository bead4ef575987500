"""Re-export individual schema modules for easy imports."""

from .base import ErrorResponse
from .bmi import BmiIn, BmiOut
from .plan import DietPlanOut, PlanDietType, PlanTypeOut
from .rec import MealRecResponse, RecRequest, RecResponse

__all__ = [
    "ErrorResponse",
    "BmiIn",
    "BmiOut",
    "DietPlanOut",
    "PlanDietType",
    "PlanTypeOut",
    "MealRecResponse",
    "RecRequest",
    "RecResponse",
]
