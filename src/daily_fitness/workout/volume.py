"""
Decoding of compact volume strings into numbers.

Malformed ``+``-separated segments are dropped rather than rejected; stored
history predates the current grammars and is read as leniently as it was
written.
"""

import re

HOLD_SEGMENT_RE = re.compile(r"(\d+)s", re.ASCII)


def parse_reps(text: str) -> list[int]:
    """Split ``10+12+8`` into ``[10, 12, 8]``, skipping segments that are not integers."""
    reps: list[int] = []
    for segment in text.split("+"):
        try:
            reps.append(int(segment.strip()))
        except ValueError:
            continue
    return reps


def parse_holds(text: str) -> list[int]:
    """Split ``30s+45s`` into ``[30, 45]``, skipping segments without the seconds suffix."""
    holds: list[int] = []
    for segment in text.split("+"):
        m = HOLD_SEGMENT_RE.fullmatch(segment.strip())
        if m:
            holds.append(int(m.group(1)))
    return holds


def parse_max_set(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


def parse_max_hold(text: str) -> int | None:
    try:
        return int(text.strip().removesuffix("s"))
    except ValueError:
        return None
