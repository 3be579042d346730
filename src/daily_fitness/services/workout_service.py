"""
Service for the exercise catalog, workout validation and progression summary.
"""

import logging
from collections.abc import Sequence

from ..db import repo
from ..result import Result
from ..workout import (
    Exercise,
    ExerciseCatalog,
    WorkoutResult,
    summarize_workouts,
    validate_workout,
)


class WorkoutService:
    """Service for handling workout-related operations."""

    async def load_catalog(self) -> ExerciseCatalog:
        """
        Build the catalog from stored rows.

        Raises ``UnknownExecutionKind`` when a row names an execution kind the
        application does not know; callers must not turn that into a 4xx.
        """
        names = await repo.list_exercise_names()
        return ExerciseCatalog.from_names(names)

    async def list_exercises(self) -> list[Exercise]:
        catalog = await self.load_catalog()
        return catalog.list_exercises()

    async def validate_workout(self, results: Sequence[str]) -> Result[None]:
        """Validate result strings against the current catalog, collecting every error."""
        catalog = await self.load_catalog()
        return validate_workout(results, catalog)

    async def workouts_summary(self) -> dict[str, list[int]]:
        """Per ``exercise/execution`` value series over the whole history, oldest first."""
        history = await repo.all_workout_results_ordered_by_date()
        summary = summarize_workouts(history)
        logging.debug("Workout summary covers %d exercises", len(summary))
        return summary

    async def results_for_date(self, date: str) -> list[WorkoutResult]:
        return await repo.get_workout_results_by_date(date)
