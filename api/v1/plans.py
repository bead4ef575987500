# api/v1/plans.py
from __future__ import annotations

from fastapi import APIRouter, Query, status

from core import catalog
from api.v1.schemas import DietPlanOut, ErrorResponse, PlanDietType, PlanTypeOut

router = APIRouter()


# ───────────────────────── list / filter ────────────────────
@router.get(
    "",
    response_model=list[DietPlanOut],
    status_code=status.HTTP_200_OK,
    summary="Diet plans filtered by search text, diet type and calorie range",
)
def list_plans(
    q: str | None = Query(None, description="matched against name and description"),
    diet_type: PlanDietType | None = Query(None),
    min_calories: float = Query(catalog.DEFAULT_MIN_CALORIES, ge=0),
    max_calories: float = Query(catalog.DEFAULT_MAX_CALORIES, ge=0),
) -> list[DietPlanOut]:
    rows = catalog.filter_plans(q, diet_type, min_calories, max_calories)
    return [DietPlanOut.model_validate(r) for r in rows]


# ───────────────────────── plan types ───────────────────────
@router.get("/types", response_model=list[PlanTypeOut])
def list_plan_types() -> list[PlanTypeOut]:
    return [PlanTypeOut.model_validate(t) for t in catalog.PLAN_TYPES]


# ───────────────────────── fetch one ────────────────────────
@router.get(
    "/{plan_id}",
    response_model=DietPlanOut,
    responses={404: {"model": ErrorResponse}},
)
def fetch_plan(plan_id: str) -> DietPlanOut:
    return DietPlanOut.model_validate(catalog.get_plan(plan_id))
