"""
Services layer for daily fitness business logic.
"""

from .entry_service import EntryService
from .workout_service import WorkoutService

__all__ = ["EntryService", "WorkoutService"]
