from __future__ import annotations

from fastapi import APIRouter, status

from core.nutrition_calc import NutritionalCalculator
from api.v1.schemas import BmiIn, BmiOut, ErrorResponse

router = APIRouter()
_calc = NutritionalCalculator()


@router.post(
    "",
    response_model=BmiOut,
    status_code=status.HTTP_200_OK,
    responses={400: {"model": ErrorResponse}},
)
def bmi(body: BmiIn) -> BmiOut:
    return BmiOut.model_validate(_calc.compute_bmi(body.height_cm, body.weight_kg))
