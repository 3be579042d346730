"""
Decoding of daily entry payloads posted as JSON or compact YAML.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

import yaml
from pydantic import ValidationError

from .result import Result
from .schemas import DailyEntryInput, DailyYamlInput

logger = logging.getLogger(__name__)

YAML_CONTENT_TYPES = ("application/yaml", "application/x-yaml", "text/yaml", "text/x-yaml")


def format_validation_errors(errors: Sequence[Mapping[str, Any]]) -> list[str]:
    """``["running.schedule - Input should be ...", ...]``"""
    return [f"{'.'.join(str(part) for part in issue['loc'])} - {issue['msg']}" for issue in errors]


def load_yaml(text: str | bytes) -> Result[Any]:
    try:
        return Result.success(yaml.safe_load(text))
    except yaml.YAMLError as e:
        return Result.fail([f"Invalid YAML: {e}"])


def parse_daily_entry_json(data: Any) -> Result[DailyEntryInput]:
    try:
        return Result.success(DailyEntryInput.model_validate(data))
    except ValidationError as e:
        return Result.fail(format_validation_errors(e.errors()))


def parse_daily_entry_yaml(data: Any) -> Result[DailyEntryInput]:
    """
    Expand the compact YAML form into a regular entry input.

    ``run: "regular park-loop full 3"`` becomes the running block and
    ``workout: "regular bodyweight"`` the workout block; strings with the wrong
    number of parts are ignored, as in the hand-written daily notes.
    """
    logger.debug("Parsing daily entry input from YAML data: %s", data)
    try:
        compact = DailyYamlInput.model_validate(data)
    except ValidationError as e:
        return Result.fail(format_validation_errors(e.errors()))

    entry: dict[str, Any] = {
        "date": compact.date,
        "weight": compact.weight,
        "last_meal": compact.last_meal,
        "stretching": compact.stretching,
        "stairs": compact.stairs,
        "diary": compact.diary,
    }

    if compact.run is not None:
        run_parts = compact.run.split(" ")
        if len(run_parts) == 4:
            schedule, track_id, progress, performance = run_parts
            entry["running"] = {
                "schedule": schedule,
                "track_id": track_id,
                "progress": progress,
                "performance": performance,
            }

    if compact.workout is not None:
        workout_parts = compact.workout.split(" ")
        if len(workout_parts) == 2:
            schedule, routine = workout_parts
            entry["workout"] = {
                "schedule": schedule,
                "routine": routine,
                "results": compact.results,
            }

    return parse_daily_entry_json(entry)
