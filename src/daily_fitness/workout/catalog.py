"""
Static exercise catalog and the volume grammar of each execution kind.
"""

from __future__ import annotations

import enum
import re
from collections.abc import Iterable
from dataclasses import dataclass


class UnknownExecutionKind(RuntimeError):
    """The catalog references an execution kind outside the fixed enumeration."""


class ExecutionKind(str, enum.Enum):
    """How the volume of an exercise is measured."""

    SET3X = "set3x"  # reps for three sets, e.g. 22+22+22
    HOLD3X = "hold3x"  # seconds held for three sets, e.g. 30s+30s+30s
    MAXSET = "maxset"  # max reps in one set, e.g. 15
    MAXHOLD = "maxhold"  # max hold duration, e.g. 45s

    @classmethod
    def parse(cls, value: str | ExecutionKind) -> ExecutionKind:
        try:
            return cls(value)
        except ValueError:
            raise UnknownExecutionKind(f"Unknown execution type: {value}") from None

    @property
    def grammar(self) -> re.Pattern[str]:
        return _GRAMMARS[self]


# Whole-string patterns for fullmatch; ASCII so only 0-9 count as digits
_GRAMMARS: dict[ExecutionKind, re.Pattern[str]] = {
    ExecutionKind.SET3X: re.compile(r"(\d+)(\+\d+){2}", re.ASCII),
    ExecutionKind.HOLD3X: re.compile(r"(\d+s)(\+\d+s){2}", re.ASCII),
    ExecutionKind.MAXSET: re.compile(r"\d+", re.ASCII),
    ExecutionKind.MAXHOLD: re.compile(r"\d+s", re.ASCII),
}


def grammar_for(kind: str | ExecutionKind) -> re.Pattern[str]:
    """
    Return the volume matcher for an execution kind, to be used with ``fullmatch``.

    Raises ``UnknownExecutionKind`` for values outside the enumeration; that is a
    configuration fault of the catalog, not a validation failure.
    """
    return ExecutionKind.parse(kind).grammar


@dataclass(frozen=True)
class Exercise:
    """A catalog entry such as ``squats/set3x``."""

    exercise: str
    execution: ExecutionKind

    @property
    def name(self) -> str:
        return f"{self.exercise}/{self.execution.value}"

    @property
    def grammar(self) -> re.Pattern[str]:
        return self.execution.grammar

    @classmethod
    def from_name(cls, name: str) -> Exercise:
        exercise, sep, execution = name.partition("/")
        if not sep:
            raise UnknownExecutionKind(f"Unknown execution type in catalog entry: {name}")
        return cls(exercise=exercise, execution=ExecutionKind.parse(execution))


class ExerciseCatalog:
    """
    Immutable set of known exercises keyed by ``exercise/execution``.

    Built from the raw catalog rows; an entry with an unknown execution kind
    fails construction so a malformed catalog never reaches request handling.
    """

    def __init__(self, exercises: Iterable[Exercise]):
        self._exercises: dict[str, Exercise] = {ex.name: ex for ex in exercises}

    @classmethod
    def from_names(cls, names: Iterable[str]) -> ExerciseCatalog:
        return cls(Exercise.from_name(name) for name in names)

    def list_exercises(self) -> list[Exercise]:
        return list(self._exercises.values())

    def get(self, key: str) -> Exercise | None:
        return self._exercises.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._exercises

    def __len__(self) -> int:
        return len(self._exercises)

    def __repr__(self) -> str:
        return f"<ExerciseCatalog size={len(self._exercises)}>"
