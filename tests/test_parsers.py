import datetime as dt

import yaml

from daily_fitness.parsers import load_yaml, parse_daily_entry_json, parse_daily_entry_yaml
from daily_fitness.schemas import Schedule

COMPACT_ENTRY = """
date: 2026-01-15
run: regular park-loop 1.5 3
workout: regular bodyweight
results:
  - squats/set3x 22+22+22
  - frontPlank/maxhold 45s
weight: 75.5
lastMeal: "19:30"
diary: Felt good.
"""


def test_yaml_compact_strings_expand():
    parsed = parse_daily_entry_yaml(yaml.safe_load(COMPACT_ENTRY))

    assert parsed.ok
    entry = parsed.value
    assert entry.date == dt.date(2026, 1, 15)
    assert entry.running.schedule is Schedule.REGULAR
    assert entry.running.track_id == "park-loop"
    assert entry.running.progress == "1.5"
    assert entry.running.performance == 3
    assert entry.workout.schedule is Schedule.REGULAR
    assert entry.workout.routine == "bodyweight"
    assert entry.workout.results == ["squats/set3x 22+22+22", "frontPlank/maxhold 45s"]
    assert entry.weight == 75.5
    assert entry.last_meal == "19:30"


def test_yaml_compact_strings_with_wrong_arity_are_ignored():
    parsed = parse_daily_entry_yaml({"date": "2026-01-15", "run": "regular park-loop", "workout": "rest"})

    assert parsed.ok
    assert parsed.value.running is None
    assert parsed.value.workout is None


def test_yaml_unknown_key_rejected():
    parsed = parse_daily_entry_yaml({"date": "2026-01-15", "mood": "great"})

    assert not parsed.ok
    assert parsed.errors[0].startswith("mood - ")


def test_yaml_bad_schedule_reported_with_path():
    parsed = parse_daily_entry_yaml({"run": "sometimes park-loop full 3"})

    assert not parsed.ok
    assert parsed.errors[0].startswith("running.schedule - ")


def test_load_yaml_syntax_error():
    loaded = load_yaml("date: [2026-01-15")

    assert not loaded.ok
    assert loaded.errors[0].startswith("Invalid YAML:")


def test_json_entry_camel_case():
    parsed = parse_daily_entry_json(
        {
            "date": "2026-01-15",
            "running": {"schedule": "adhoc", "trackId": "park-loop", "progress": "full", "performance": 4},
            "lastMeal": "18:00",
        }
    )

    assert parsed.ok
    assert parsed.value.running.track_id == "park-loop"
    assert parsed.value.last_meal == "18:00"


def test_json_entry_performance_out_of_range():
    parsed = parse_daily_entry_json({"running": {"schedule": "regular", "performance": 5}})

    assert not parsed.ok
    assert parsed.errors[0].startswith("running.performance - ")


def test_fractional_performance():
    parsed = parse_daily_entry_yaml({"date": "2026-01-15", "run": "regular park-loop full 2.5"})

    assert parsed.ok
    assert parsed.value.running.performance == 2.5
