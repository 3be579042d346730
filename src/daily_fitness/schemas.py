"""
Pydantic models for the REST API payloads.

Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

import datetime as dt
import enum
from typing import Any, Generic, Literal, TypeVar
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class Schedule(str, enum.Enum):
    """Whether an activity was planned, ad hoc, imported from old notes, or absent."""

    REGULAR = "regular"
    ADHOC = "adhoc"
    LEGACY = "legacy"
    VOID = "void"


class ProgressUnit(str, enum.Enum):
    """Unit in which progress along a running track is recorded."""

    KM = "km"
    FLIGHT = "flight"
    POLE = "pole"


Month = Literal["jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec"]
Weekday = Literal["mon", "tue", "wed", "thu", "fri", "sat", "sun"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StrictCamelModel(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class Links(BaseModel):
    """Navigation links; ``self`` is always present, extra string links allowed."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    self_link: str = Field(alias="self")


class Envelope(BaseModel, Generic[T]):
    links: Links
    result: T


class ErrorResponse(BaseModel):
    error: str
    details: list[str] | None = None


class Message(BaseModel):
    message: str


class CreatedReport(BaseModel):
    message: str
    report: list[str]


class Track(CamelModel):
    id: str
    name: str
    length: float = Field(description="Track distance")
    url: str
    progress_unit: ProgressUnit

    @field_validator("url")
    @classmethod
    def url_must_be_absolute(cls, v: str) -> str:
        u = urlparse(v)
        if not (u.scheme and u.netloc):
            raise ValueError("Invalid URL")
        return v


class Running(CamelModel):
    schedule: Schedule
    track: Track | None
    progress: str | None
    performance: float | None = Field(None, ge=0, le=5)


class WorkoutResultOut(CamelModel):
    exercise: str
    execution: str
    volume: str


class Workout(CamelModel):
    schedule: Schedule
    routine: str | None = None
    results: list[WorkoutResultOut] | None = None


class DailyEntry(CamelModel):
    date: str
    week: str = Field(description="ISO week as YYYY-WW")
    year: int
    month: Month
    day: Weekday
    running: Running
    workout: Workout
    weight: float | None = None
    last_meal: str | None = None
    stretching: str | None = None
    stairs: str | None = None
    diary: str | None = None


class DailyEntryUpdate(CamelModel):
    weight: float | None = None
    last_meal: str | None = None
    stretching: str | None = None
    stairs: str | None = None
    diary: str | None = None


class DiaryUpdate(BaseModel):
    diary: str


class RunningInput(StrictCamelModel):
    schedule: Schedule
    track_id: str | None = None
    progress: str | None = None
    performance: float | None = Field(None, ge=0, le=4)


class WorkoutInput(CamelModel):
    schedule: Schedule
    routine: str | None = None
    results: list[str] | None = Field(
        None,
        description='Format: "exercise/execution volume", e.g. "squats/set3x 22+22+22"',
    )


class DailyEntryInput(StrictCamelModel):
    date: dt.date | None = Field(None, description="Defaults to today if omitted")
    running: RunningInput | None = None
    workout: WorkoutInput | None = None
    weight: float | None = None
    last_meal: str | None = None
    stretching: str | None = None
    stairs: str | None = None
    diary: str | None = None


class DailyYamlInput(StrictCamelModel):
    """Compact YAML entry: ``run: "schedule trackId progress performance"``, ``workout: "schedule routine"``."""

    date: str | None = None
    run: str | None = None
    workout: str | None = None
    results: list[str] | None = None
    weight: float | None = None
    last_meal: str | None = None
    stretching: str | None = None
    stairs: str | None = None
    diary: str | None = None

    @field_validator("date", mode="before")
    @classmethod
    def date_to_str(cls, v: Any) -> Any:
        # YAML loads bare 2026-01-15 as a date
        if isinstance(v, dt.date):
            return v.isoformat()
        return v


class Streak(BaseModel):
    count: int = 0
    distance: float = 0.0


class Stats(CamelModel):
    best_running_streak: Streak
    current_running_streak: Streak
    total: Streak


class Exercise(BaseModel):
    name: str


class MealIngredient(BaseModel):
    id: str
    name: str
    quantity: str
    kcal: int


class Meal(BaseModel):
    id: str
    name: str
    kcal: int
    ingredients: list[MealIngredient]


class Health(BaseModel):
    status: Literal["ok"] = "ok"
    timestamp: dt.datetime
    uptime: float
