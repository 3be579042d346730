"""
Service for creating, updating and reporting daily entries.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from ..db import repo
from ..result import Result
from ..schemas import (
    DailyEntry,
    DailyEntryInput,
    DailyEntryUpdate,
    RunningInput,
    Schedule,
    WorkoutInput,
)
from .workout_service import WorkoutService

MONTHS = ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec")
WEEKDAYS = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")


def resolve_date(value: str, today: dt.date | None = None) -> str:
    """Map the ``today`` alias to an ISO date; other values pass through."""
    if value == "today":
        return (today or dt.date.today()).isoformat()
    return value


def iso_week(day: dt.date) -> str:
    """``YYYY-WW`` using the ISO week-numbering year."""
    year, week, _ = day.isocalendar()
    return f"{year}-{week:02d}"


def calendar_fields(day: dt.date) -> dict[str, Any]:
    return {
        "date": day.isoformat(),
        "week": iso_week(day),
        "year": day.year,
        "month": MONTHS[day.month - 1],
        "day": WEEKDAYS[day.weekday()],
    }


def diary_heading(date: str) -> str:
    """``2026-01-15`` -> ``Thu, 15 Jan 2026``."""
    day = dt.date.fromisoformat(date)
    return f"{WEEKDAYS[day.weekday()].title()}, {day.day:02d} {MONTHS[day.month - 1].title()} {day.year}"


class EntryService:
    """Service for handling daily entry operations."""

    def __init__(self, workouts: WorkoutService | None = None):
        self.workouts = workouts or WorkoutService()

    async def list_entries(self) -> list[DailyEntry]:
        return await repo.list_entries()

    async def get_entry(self, date: str) -> DailyEntry | None:
        return await repo.get_entry(resolve_date(date))

    async def create_entry(
        self, entry: DailyEntryInput, today: dt.date | None = None
    ) -> Result[list[str]]:
        """
        Validate and store a daily entry with its workout results.

        Returns a report of what was recorded, or every validation error.
        """
        day = entry.date or today or dt.date.today()
        running = entry.running or RunningInput(schedule=Schedule.VOID)

        if running.track_id is not None:
            track = await repo.get_track(running.track_id)
            if track is None:
                return Result.fail([f"Running track with ID {running.track_id} does not exist"])

        workout = entry.workout or WorkoutInput(schedule=Schedule.VOID)
        validation = await self.workouts.validate_workout(workout.results or [])
        if not validation.ok:
            return Result.fail(validation.errors)

        routine = entry.workout.routine if entry.workout and entry.workout.routine is not None else "rest"
        results = workout.results or []
        record_results = entry.workout is not None and routine != "rest" and bool(results)

        fields = calendar_fields(day)
        fields.update(
            track_id=running.track_id,
            running_schedule=running.schedule,
            running_progress=running.progress,
            running_performance=running.performance,
            workout_schedule=entry.workout.schedule if entry.workout else Schedule.ADHOC,
            workout_routine=routine,
            weight=entry.weight,
            last_meal=entry.last_meal,
            stretching=entry.stretching,
            stairs=entry.stairs,
            diary=entry.diary,
        )

        try:
            count = await repo.insert_entry(fields, results if record_results else [])
        except SQLAlchemyError as e:
            logging.exception("Failed to create daily entry for %s", fields["date"])
            reason = getattr(e, "orig", None) or e
            return Result.fail([f"Failed to create daily entry: {reason}"])

        logging.info("Created daily entry %s", fields["date"])
        if record_results:
            return Result.success([f"Recorded {count} workout results"])
        return Result.success(["No workout results to record"])

    async def update_entry(self, date: str, entry_update: DailyEntryUpdate) -> bool:
        """Update only the fields present in the request. False if nothing was changed."""
        changes = entry_update.model_dump(exclude_unset=True)
        query_date = resolve_date(date)
        logging.info("Updating daily entry for %s with: %s", query_date, changes)
        return await repo.update_entry(query_date, changes)

    async def update_diary(self, date: str, diary: str) -> bool:
        return await repo.update_entry(resolve_date(date), {"diary": diary})

    async def build_diary(self) -> str:
        """All diary notes as plain text, oldest first."""
        text = ""
        for date, diary in await repo.list_diary():
            text += f"{diary_heading(date)}\n{diary}\n\n"
        return text.strip()

    async def week_summary(self, week: str) -> list[DailyEntry] | None:
        entries = await repo.get_week_entries(week)
        return entries or None
