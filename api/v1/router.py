# api/v1/router.py
from fastapi import APIRouter

from . import bmi, plans, recs

api_router = APIRouter()

api_router.include_router(recs.router, prefix="/recommendations", tags=["Recommendations"])
api_router.include_router(bmi.router, prefix="/bmi", tags=["Profile"])
api_router.include_router(plans.router, prefix="/plans", tags=["Plans"])
