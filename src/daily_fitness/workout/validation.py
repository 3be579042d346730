"""
Validation of ``"<exercise>/<execution> <volume>"`` workout result strings.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..result import Result
from .catalog import ExerciseCatalog
from .records import WorkoutResult

logger = logging.getLogger(__name__)


def validate_workout(results: Sequence[str], catalog: ExerciseCatalog) -> Result[None]:
    """
    Check every result string against the catalog and its volume grammar.

    All problems are collected; the returned failure carries every message in
    input order so callers can report them in one response.
    """
    errors: list[str] = []

    for result in results:
        parts = result.split(" ", 1)
        if len(parts) != 2:
            errors.append(f"Invalid workout result format: {result}")
            continue

        key, volume = parts
        exercise = catalog.get(key)
        if exercise is None:
            errors.append(f"Unknown exercise/execution: {key}")
            continue

        if not exercise.grammar.fullmatch(volume):
            errors.append(f"Invalid volume format for {key}: {volume}")

    if errors:
        logger.debug("Workout validation failed with %d error(s): %s", len(errors), errors)
        return Result.fail(errors)
    return Result.success()


def split_workout_result(result: str) -> WorkoutResult:
    """
    Split an accepted result string into its stored parts, volume kept verbatim.

    Only call on strings that passed ``validate_workout``.
    """
    key, volume = result.split(" ", 1)
    exercise, execution = key.split("/", 1)
    return WorkoutResult(exercise=exercise, execution=execution, volume=volume)
