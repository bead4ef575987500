"""
core/nutrition_calc.py
────────────────────────────────────────────────────────────────────────
Calorie + macro recommendation engine used by the storefront:

1. BMR  (Mifflin–St Jeor)
2. Daily calorie need (activity multiplier)
3. Goal-adjusted calorie target
4. Macro grams from goal-specific ratios
5. Per-meal calorie split (breakfast / lunch / dinner / snacks)

Plus the profile page's BMI calculator. Everything here is pure: no I/O,
no caching, identical input → identical output.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from core.errors import InvalidProfile, InvalidRequest, UnknownActivityLevel

Logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────
#  Enumerations
# ──────────────────────────────────────────────────────────────────────
class ActivityLevel(str, Enum):
    sedentary = "sedentary"
    light = "light"
    moderate = "moderate"
    active = "active"
    very_active = "very_active"


class GoalType(str, Enum):
    weight_loss = "weight_loss"
    weight_gain = "weight_gain"
    muscle_gain = "muscle_gain"
    general = "general"


class DietType(str, Enum):
    veg = "veg"
    non_veg = "non_veg"
    vegan = "vegan"

    @classmethod
    def parse(cls, raw: Any) -> "DietType":
        """Accepts the storefront spelling `non-veg` as well."""
        if isinstance(raw, DietType):
            return raw
        key = str(raw or "").strip().lower().replace("-", "_")
        try:
            return cls(key)
        except ValueError:
            raise InvalidRequest(
                f"dietType must be one of veg, non_veg, vegan; got {raw!r}"
            ) from None


class BmiCategory(str, Enum):
    underweight = "underweight"
    normal = "normal"
    overweight = "overweight"
    obese = "obese"


# ──────────────────────────────────────────────────────────────────────
#  Constants
# ──────────────────────────────────────────────────────────────────────
ACTIVITY_MULTIPLIERS: dict[str, float] = {
    ActivityLevel.sedentary.value: 1.2,
    ActivityLevel.light.value: 1.375,
    ActivityLevel.moderate.value: 1.55,
    ActivityLevel.active.value: 1.725,
    ActivityLevel.very_active.value: 1.9,
}

GOAL_CALORIE_FACTORS: dict[str, float] = {
    GoalType.weight_loss.value: 0.80,   # 20 % deficit
    GoalType.weight_gain.value: 1.20,   # 20 % surplus
    GoalType.muscle_gain.value: 1.15,   # 15 % surplus
    GoalType.general.value: 1.00,
}

# (protein, carbs, fat) – each row sums to 1.0
MACRO_RATIOS: dict[str, tuple[float, float, float]] = {
    GoalType.muscle_gain.value: (0.35, 0.45, 0.20),
    GoalType.weight_loss.value: (0.40, 0.30, 0.30),
}
DEFAULT_MACRO_RATIOS: tuple[float, float, float] = (0.30, 0.40, 0.30)

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9

MEAL_SHARES: dict[str, float] = {
    "breakfast": 0.25,
    "lunch": 0.35,
    "dinner": 0.30,
    "snacks": 0.10,
}

_BMI_BANDS: list[tuple[float, BmiCategory, str]] = [
    (18.5, BmiCategory.underweight,
     "Underweight - Our nutritionist will help you gain healthy weight"),
    (25.0, BmiCategory.normal,
     "Normal weight - We'll help you maintain your healthy weight"),
    (30.0, BmiCategory.overweight,
     "Overweight - Our plans can help you reach a healthier weight"),
    (math.inf, BmiCategory.obese,
     "Obese - We recommend consulting with a healthcare professional"),
]


def round_half_up(value: float) -> int:
    """Nearest integer, .5 rounds up (unlike the built-in `round`)."""
    return int(math.floor(value + 0.5))


# ──────────────────────────────────────────────────────────────────────
#  Profile dataclass
# ──────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class UserBiometricProfile:
    weight_kg: float
    height_cm: float
    age_years: int
    sex: str = "other"               # "male" | anything else → "other"
    activity_level: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "weight_kg", _positive("weightKg", self.weight_kg))
        object.__setattr__(self, "height_cm", _positive("heightCm", self.height_cm))
        age = _positive("ageYears", self.age_years)
        if not age.is_integer():
            raise InvalidProfile(f"ageYears must be a whole number, got {self.age_years!r}")
        object.__setattr__(self, "age_years", int(age))
        object.__setattr__(self, "sex", _normalise_sex(self.sex))
        if self.activity_level is not None:
            object.__setattr__(
                self, "activity_level", str(self.activity_level).strip().lower()
            )

    @property
    def is_male(self) -> bool:
        return self.sex == "male"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "UserBiometricProfile":
        if not isinstance(data, Mapping):
            raise InvalidProfile("profile is required")
        return cls(
            weight_kg=data.get("weight_kg"),
            height_cm=data.get("height_cm"),
            age_years=data.get("age_years"),
            sex=data.get("sex"),
            activity_level=data.get("activity_level"),
        )


def _positive(name: str, value: Any) -> float:
    if value is None:
        raise InvalidProfile(f"{name} is required")
    if isinstance(value, bool):
        raise InvalidProfile(f"{name} must be a number, got {value!r}")
    try:
        num = float(value)
    except (TypeError, ValueError):
        raise InvalidProfile(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(num) or num <= 0:
        raise InvalidProfile(f"{name} must be a positive number, got {value!r}")
    return num


def _finite(name: str, value: float) -> float:
    # positive inputs can still overflow once combined
    if not math.isfinite(value):
        raise InvalidProfile(f"{name} is out of range for this profile")
    return value


def _normalise_sex(raw: Any) -> str:
    if isinstance(raw, Enum):
        raw = raw.value
    return "male" if str(raw or "").strip().lower() == "male" else "other"


# ──────────────────────────────────────────────────────────────────────
#  Result dataclasses
# ──────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Macros:
    protein_grams: int
    carb_grams: int
    fat_grams: int


@dataclass(frozen=True)
class MealDistribution:
    breakfast: int
    lunch: int
    dinner: int
    snacks: int

    def as_dict(self) -> dict[str, int]:
        return {
            "breakfast": self.breakfast,
            "lunch": self.lunch,
            "dinner": self.dinner,
            "snacks": self.snacks,
        }


@dataclass(frozen=True)
class RecommendationResult:
    daily_calories: int
    macros: Macros
    meal_distribution: MealDistribution


@dataclass(frozen=True)
class BmiResult:
    bmi: float
    category: BmiCategory
    advice: str


# ──────────────────────────────────────────────────────────────────────
#  Calculator
# ──────────────────────────────────────────────────────────────────────
class NutritionalCalculator:
    """Source-of-truth for daily kcal, macros and the per-meal split."""

    # --------------- public entrypoint --------------------------------
    def recommend(self, request: Mapping[str, Any]) -> RecommendationResult:
        """
        `request` carries `profile` (snake_case keys), `goal_type` and
        `diet_type`. Diet type is accepted but does not change the numbers.
        """
        profile = UserBiometricProfile.from_mapping(request.get("profile"))
        bmr = self.compute_bmr(profile)
        need = self.compute_daily_calorie_need(bmr, profile.activity_level)
        result = self.build_recommendation(request.get("goal_type"), need)
        Logger.debug(
            "recommendation bmr=%.2f need=%.2f goal=%s diet=%s → %d kcal",
            bmr, need, request.get("goal_type"), request.get("diet_type"),
            result.daily_calories,
        )
        return result

    # --------------- BMR / daily need --------------------------------
    def compute_bmr(self, profile: UserBiometricProfile) -> float:
        try:
            base = 10 * profile.weight_kg + 6.25 * profile.height_cm - 5 * profile.age_years
        except OverflowError:
            raise InvalidProfile("profile values are too large to compute a BMR") from None
        return _finite("bmr", base + (5 if profile.is_male else -161))

    def compute_daily_calorie_need(self, bmr: float, activity_level: Any) -> float:
        if isinstance(activity_level, Enum):
            activity_level = activity_level.value
        key = str(activity_level).strip().lower() if activity_level is not None else None
        multiplier = ACTIVITY_MULTIPLIERS.get(key) if key else None
        if multiplier is None:
            raise UnknownActivityLevel(
                f"activityLevel must be one of {', '.join(ACTIVITY_MULTIPLIERS)}; "
                f"got {activity_level!r}"
            )
        return _finite("dailyCalorieNeed", bmr * multiplier)

    # --------------- Target + macros + meals -------------------------
    def build_recommendation(
        self, goal_type: Any, daily_calorie_need: float
    ) -> RecommendationResult:
        goal = goal_type.value if isinstance(goal_type, Enum) else goal_type
        if goal is not None and not isinstance(goal, str):
            goal = str(goal)
        if goal not in GOAL_CALORIE_FACTORS:
            Logger.warning("unrecognised goalType %r – using default ratios", goal_type)

        kcal = _finite(
            "targetCalories", daily_calorie_need * GOAL_CALORIE_FACTORS.get(goal, 1.0)
        )
        prot_pc, carbs_pc, fat_pc = MACRO_RATIOS.get(goal, DEFAULT_MACRO_RATIOS)

        macros = Macros(
            protein_grams=round_half_up(kcal * prot_pc / KCAL_PER_G_PROTEIN),
            carb_grams=round_half_up(kcal * carbs_pc / KCAL_PER_G_CARBS),
            fat_grams=round_half_up(kcal * fat_pc / KCAL_PER_G_FAT),
        )
        meals = MealDistribution(
            **{slot: round_half_up(kcal * share) for slot, share in MEAL_SHARES.items()}
        )
        return RecommendationResult(
            daily_calories=round_half_up(kcal),
            macros=macros,
            meal_distribution=meals,
        )

    # --------------- BMI ---------------------------------------------
    def compute_bmi(self, height_cm: Any, weight_kg: Any) -> BmiResult:
        height_m = _positive("heightCm", height_cm) / 100
        weight = _positive("weightKg", weight_kg)
        area = height_m * height_m
        if area == 0:
            raise InvalidProfile(f"heightCm is too small to compute a BMI, got {height_cm!r}")
        bmi = round(_finite("bmi", weight / area), 2)
        _, category, advice = next(band for band in _BMI_BANDS if bmi < band[0])
        return BmiResult(bmi=bmi, category=category, advice=advice)
