"""
Reduction of workout history into per-exercise progression series.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from decimal import ROUND_HALF_UP, Decimal

from .catalog import ExecutionKind, UnknownExecutionKind
from .records import WorkoutResult
from .volume import parse_holds, parse_max_hold, parse_max_set, parse_reps

logger = logging.getLogger(__name__)


def round_half_away_from_zero(value: Decimal | float) -> int:
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _mean(values: list[int]) -> int | None:
    if not values:
        return None
    return round_half_away_from_zero(Decimal(sum(values)) / Decimal(len(values)))


_REDUCERS: dict[ExecutionKind, Callable[[str], int | None]] = {
    ExecutionKind.SET3X: lambda volume: _mean(parse_reps(volume)),
    ExecutionKind.HOLD3X: lambda volume: _mean(parse_holds(volume)),
    ExecutionKind.MAXSET: parse_max_set,
    ExecutionKind.MAXHOLD: parse_max_hold,
}


def volume_value(result: WorkoutResult) -> int | None:
    """Single number for one result: rounded set/hold average or the max value."""
    try:
        kind = ExecutionKind.parse(result.execution)
    except UnknownExecutionKind:
        logger.warning("Skipping %s: unknown execution kind", result.key)
        return None
    return _REDUCERS[kind](result.volume)


def summarize_workouts(results: Iterable[WorkoutResult]) -> dict[str, list[int]]:
    """
    Group results by ``exercise/execution`` and map each to its value series.

    ``results`` must already be ordered by date ascending; that order is kept.
    Results whose volume decodes to nothing still register their key.
    """
    summary: dict[str, list[int]] = {}
    for result in results:
        values = summary.setdefault(result.key, [])
        value = volume_value(result)
        if value is None:
            logger.debug("No value for %s volume %r", result.key, result.volume)
            continue
        values.append(value)
    return summary
