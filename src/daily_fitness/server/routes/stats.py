"""
Running statistics API route.
"""

from fastapi import APIRouter

from ...db import repo
from ...schemas import Envelope, Stats
from ...stats import collect_stats
from ..responses import envelope

router = APIRouter()


@router.get("/stats", response_model=Envelope[Stats])
async def get_stats():
    """Running statistics and streaks."""
    days = await repo.running_rows_ordered_by_date()
    return envelope("/stats", collect_stats(days))
