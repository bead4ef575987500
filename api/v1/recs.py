# api/v1/recs.py
from __future__ import annotations

import logging

from fastapi import APIRouter, status

from config import settings
from core.meal_recommender import MealRecommender
from core.nutrition_calc import DietType, NutritionalCalculator
from api.v1.schemas import ErrorResponse, MealRecResponse, RecRequest, RecResponse

_LOG = logging.getLogger(__name__)

router = APIRouter()
_calc = NutritionalCalculator()
_meals = MealRecommender()

_ERRORS = {400: {"model": ErrorResponse}}


@router.post(
    "",
    response_model=RecResponse,
    status_code=status.HTTP_200_OK,
    responses=_ERRORS,
    summary="Daily calories, macros and per-meal split for a profile",
)
def recommend(body: RecRequest) -> RecResponse:
    result = _calc.recommend(body.as_engine_request())
    return RecResponse.model_validate(result)


@router.post(
    "/meals",
    response_model=MealRecResponse,
    status_code=status.HTTP_200_OK,
    responses=_ERRORS,
    summary="Recommendation plus the closest catalogue meals per slot",
)
def recommend_with_meals(body: RecRequest) -> MealRecResponse:
    result = _calc.recommend(body.as_engine_request())

    # no preference given → vegetarian, same default as the plans page
    diet = body.diet_type or DietType.veg
    meals = _meals.recommend_meals(result, diet, k=settings.meal_options_per_slot)
    _LOG.debug(
        "meal match diet=%s sizes=%s",
        diet.value, {slot: len(opts) for slot, opts in meals.items()},
    )
    return MealRecResponse(
        recommendation=RecResponse.model_validate(result),
        diet_type=diet,
        meals=meals,
    )
