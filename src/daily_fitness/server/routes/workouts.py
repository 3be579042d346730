"""
Workout results, progression summary and exercise catalog API routes.
"""

from __future__ import annotations

from fastapi import APIRouter

from ...schemas import Envelope, Exercise, WorkoutResultOut
from ...services import WorkoutService
from ...services.entry_service import resolve_date
from ..responses import envelope

router = APIRouter()


@router.get("/workouts/{date}", response_model=Envelope[list[WorkoutResultOut]])
async def get_workouts_by_date(date: str):
    """Workout results recorded on a date (YYYY-MM-DD or ``today``)."""
    results = await WorkoutService().results_for_date(resolve_date(date))
    items = [
        WorkoutResultOut(exercise=r.exercise, execution=r.execution, volume=r.volume)
        for r in results
    ]
    return envelope(f"/workouts/{date}", items)


@router.get("/summary", response_model=Envelope[dict[str, list[int]]])
async def get_summary():
    """Map of exercise/execution to its volume history, oldest first."""
    summary = await WorkoutService().workouts_summary()
    return envelope("/summary", summary)


@router.get("/exercises", response_model=Envelope[list[Exercise]])
async def get_exercises():
    """List all available exercises."""
    exercises = await WorkoutService().list_exercises()
    return envelope("/exercises", [Exercise(name=ex.name) for ex in exercises])
