"""
SQLAlchemy ORM models for the daily fitness database tables.
"""

from __future__ import annotations

import enum

from sqlalchemy import (
    Enum as SAEnum,
)
from sqlalchemy import (
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from ..schemas import ProgressUnit, Schedule


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


def _str_enum(enum_cls: type[enum.Enum], name: str) -> SAEnum:
    return SAEnum(
        enum_cls,
        name=name,
        native_enum=False,  # critical for SQLite
        create_constraint=True,
        validate_strings=True,
        values_callable=lambda e: [m.value for m in e],
    )


class ExerciseRow(Base):
    """Catalog entry such as ``squats/set3x``."""

    __tablename__ = "exercises"
    name: Mapped[str] = mapped_column(String(120), primary_key=True)

    def __repr__(self) -> str:
        return f"<ExerciseRow name={self.name}>"


class RunningTrack(Base):
    """A route that daily runs are recorded against."""

    __tablename__ = "running_tracks"
    id: Mapped[str] = mapped_column(String(120), primary_key=True)
    name: Mapped[str] = mapped_column(String(200))
    length: Mapped[float] = mapped_column(Float)
    url: Mapped[str] = mapped_column(String(500))
    progress_unit: Mapped[ProgressUnit] = mapped_column(
        _str_enum(ProgressUnit, "progress_unit"), nullable=False
    )

    def __repr__(self) -> str:
        return f"<RunningTrack id={self.id} length={self.length} unit={self.progress_unit.value}>"


class DailyEntryRow(Base):
    """One calendar day of running, workout and body notes."""

    __tablename__ = "daily_entries"
    date: Mapped[str] = mapped_column(String(10), primary_key=True)  # YYYY-MM-DD
    week: Mapped[str] = mapped_column(String(7), index=True)  # YYYY-WW
    year: Mapped[int] = mapped_column(Integer)
    month: Mapped[str] = mapped_column(String(3))
    day: Mapped[str] = mapped_column(String(3))
    track_id: Mapped[str | None] = mapped_column(
        ForeignKey("running_tracks.id"), nullable=True, index=True
    )
    running_schedule: Mapped[Schedule] = mapped_column(
        _str_enum(Schedule, "running_schedule"), default=Schedule.VOID
    )
    running_progress: Mapped[str | None] = mapped_column(String(32), nullable=True)
    running_performance: Mapped[float | None] = mapped_column(Float, nullable=True)
    workout_schedule: Mapped[Schedule] = mapped_column(
        _str_enum(Schedule, "workout_schedule"), default=Schedule.ADHOC
    )
    workout_routine: Mapped[str | None] = mapped_column(String(120), nullable=True)
    weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    last_meal: Mapped[str | None] = mapped_column(String(32), nullable=True)
    stretching: Mapped[str | None] = mapped_column(String(120), nullable=True)
    stairs: Mapped[str | None] = mapped_column(String(32), nullable=True)
    diary: Mapped[str | None] = mapped_column(Text, nullable=True)

    track: Mapped[RunningTrack | None] = relationship("RunningTrack")
    workout_results: Mapped[list[WorkoutResultRow]] = relationship(
        "WorkoutResultRow",
        back_populates="entry",
        cascade="all, delete-orphan",
        order_by="WorkoutResultRow.id",
    )

    def __repr__(self) -> str:
        return f"<DailyEntryRow date={self.date} week={self.week}>"


class WorkoutResultRow(Base):
    """A single ``exercise/execution volume`` result; volume kept as entered."""

    __tablename__ = "workout_results"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    daily_entry_date: Mapped[str] = mapped_column(ForeignKey("daily_entries.date"), index=True)
    exercise: Mapped[str] = mapped_column(String(120))
    execution: Mapped[str] = mapped_column(String(32))
    volume: Mapped[str] = mapped_column(String(64))

    entry: Mapped[DailyEntryRow] = relationship("DailyEntryRow", back_populates="workout_results")

    def __repr__(self) -> str:
        return (
            f"<WorkoutResultRow date={self.daily_entry_date} "
            f"{self.exercise}/{self.execution} {self.volume}>"
        )
