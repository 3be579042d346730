"""
Explicit success/failure values for operations that report user-input problems.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of an operation: a value on success, the full error list on failure."""

    value: T | None = None
    errors: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    @classmethod
    def success(cls, value: T | None = None) -> Result[T]:
        return cls(value=value)

    @classmethod
    def fail(cls, errors: Iterable[str]) -> Result[T]:
        errs = tuple(errors)
        if not errs:
            raise ValueError("A failed result needs at least one error message")
        return cls(errors=errs)
