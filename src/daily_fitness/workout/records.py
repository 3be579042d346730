"""Typed workout result shapes decoded at the storage boundary."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WorkoutResult:
    exercise: str
    execution: str
    volume: str

    @property
    def key(self) -> str:
        return f"{self.exercise}/{self.execution}"


@dataclass(frozen=True)
class WorkoutResultRecord(WorkoutResult):
    """A persisted workout result together with the date of its daily entry."""

    date: str = ""

    def as_result(self) -> WorkoutResult:
        return WorkoutResult(exercise=self.exercise, execution=self.execution, volume=self.volume)
