"""Running streak statistics."""

import logging
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from .schemas import Stats, Streak

logger = logging.getLogger(__name__)

# (track_id, track_length, progress_unit, running_progress)
RunningDay = tuple[str | None, float | None, str | None, str | None]


def _round1(value: float) -> float:
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def day_distance(length: float | None, unit: str | None, progress: str | None) -> float:
    """Distance run on one day: km progress read as a number unless ``full``, the full track otherwise."""
    if unit == "km" and progress != "full":
        if progress is None:
            return 0.0
        try:
            return float(progress)
        except ValueError:
            logger.warning("Unreadable km progress %r, counting 0", progress)
            return 0.0
    return length or 0.0


def collect_stats(days: Iterable[RunningDay]) -> Stats:
    """
    Walk entries oldest first. A day without a track ends the current streak;
    the longest streak by day count is the best one.
    """
    current = Streak()
    best = Streak()
    total = Streak()

    for track_id, length, unit, progress in days:
        if track_id is None:
            if current.count > best.count:
                best = current
            current = Streak()
            continue
        distance = day_distance(length, unit, progress)
        current.count += 1
        current.distance += distance
        total.count += 1
        total.distance += distance

    if current.count > best.count:
        best = current.model_copy()

    return Stats(
        best_running_streak=Streak(count=best.count, distance=_round1(best.distance)),
        current_running_streak=Streak(count=current.count, distance=_round1(current.distance)),
        total=Streak(count=total.count, distance=_round1(total.distance)),
    )
