"""
Workout volume catalog, codec, validation and summary aggregation.
"""

from .catalog import Exercise, ExerciseCatalog, ExecutionKind, UnknownExecutionKind, grammar_for
from .records import WorkoutResult, WorkoutResultRecord
from .summary import summarize_workouts
from .validation import split_workout_result, validate_workout
from .volume import parse_holds, parse_max_hold, parse_max_set, parse_reps

__all__ = [
    "ExecutionKind",
    "Exercise",
    "ExerciseCatalog",
    "UnknownExecutionKind",
    "WorkoutResult",
    "WorkoutResultRecord",
    "grammar_for",
    "parse_holds",
    "parse_max_hold",
    "parse_max_set",
    "parse_reps",
    "split_workout_result",
    "summarize_workouts",
    "validate_workout",
]
