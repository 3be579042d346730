"""
Meal catalog API route.
"""

from fastapi import APIRouter

from ...meals import MealCatalog
from ...schemas import Envelope, Meal
from ..responses import envelope

router = APIRouter()


@router.get("/meals", response_model=Envelope[list[Meal]])
async def get_meals():
    """List meals with calories computed from their ingredients."""
    return envelope("/meals", MealCatalog().get_meals())
