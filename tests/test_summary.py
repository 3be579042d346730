from decimal import Decimal

from daily_fitness.workout import WorkoutResult, summarize_workouts
from daily_fitness.workout.summary import round_half_away_from_zero, volume_value


def _r(key: str, volume: str) -> WorkoutResult:
    exercise, execution = key.split("/")
    return WorkoutResult(exercise=exercise, execution=execution, volume=volume)


def test_set3x_series_in_order():
    history = [_r("squats/set3x", "10+10+10"), _r("squats/set3x", "12+12+12"), _r("squats/set3x", "14+14+14")]
    assert summarize_workouts(history) == {"squats/set3x": [10, 12, 14]}


def test_maxhold_series():
    history = [_r("frontPlank/maxhold", "30s"), _r("frontPlank/maxhold", "45s")]
    assert summarize_workouts(history) == {"frontPlank/maxhold": [30, 45]}


def test_mixed_kinds_grouped_by_key():
    history = [
        _r("squats/set3x", "20+21+22"),
        _r("sidePlanks/hold3x", "30s+40s+50s"),
        _r("pullUps/maxset", "8"),
        _r("squats/set3x", "22+22+23"),
    ]
    assert summarize_workouts(history) == {
        "squats/set3x": [21, 22],
        "sidePlanks/hold3x": [40],
        "pullUps/maxset": [8],
    }


def test_mean_rounds_half_away_from_zero():
    # (10 + 11) / 2 = 10.5
    assert volume_value(_r("squats/set3x", "10+11")) == 11
    assert round_half_away_from_zero(Decimal("2.5")) == 3
    assert round_half_away_from_zero(Decimal("-2.5")) == -3
    assert round_half_away_from_zero(2.4) == 2


def test_unknown_kind_contributes_nothing():
    summary = summarize_workouts([_r("lunges/superset", "5"), _r("pullUps/maxset", "8")])
    assert summary["lunges/superset"] == []
    assert summary["pullUps/maxset"] == [8]


def test_undecodable_volume_is_skipped():
    summary = summarize_workouts([_r("squats/set3x", "x+y+z"), _r("squats/set3x", "9+9+9")])
    assert summary == {"squats/set3x": [9]}


def test_summary_is_idempotent():
    history = [_r("squats/set3x", "10+10+10"), _r("frontPlank/maxhold", "30s")]
    assert summarize_workouts(history) == summarize_workouts(history)
