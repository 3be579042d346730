import pytest

from daily_fitness.workout import ExerciseCatalog, WorkoutResult, split_workout_result, validate_workout


@pytest.fixture
def catalog() -> ExerciseCatalog:
    return ExerciseCatalog.from_names(
        ["squats/set3x", "sidePlanks/hold3x", "pullUps/maxset", "frontPlank/maxhold"]
    )


def test_valid_results_pass(catalog):
    result = validate_workout(
        ["squats/set3x 22+22+22", "sidePlanks/hold3x 30s+30s+30s", "pullUps/maxset 8", "frontPlank/maxhold 45s"],
        catalog,
    )
    assert result.ok
    assert result.errors == ()


def test_empty_batch_passes(catalog):
    assert validate_workout([], catalog).ok


def test_wrong_arity_reports_key(catalog):
    result = validate_workout(["squats/set3x 22+22"], catalog)
    assert not result.ok
    assert result.errors == ("Invalid volume format for squats/set3x: 22+22",)


def test_missing_space(catalog):
    result = validate_workout(["badformat"], catalog)
    assert result.errors == ("Invalid workout result format: badformat",)


def test_unknown_exercise(catalog):
    result = validate_workout(["unknown/exec 5"], catalog)
    assert result.errors == ("Unknown exercise/execution: unknown/exec",)


def test_only_first_space_splits(catalog):
    result = validate_workout(["pullUps/maxset 8 extra"], catalog)
    assert result.errors == ("Invalid volume format for pullUps/maxset: 8 extra",)


def test_collects_every_error_in_order(catalog):
    result = validate_workout(
        ["badformat", "squats/set3x 22+22+22", "unknown/exec 5", "frontPlank/maxhold 45"],
        catalog,
    )
    assert result.errors == (
        "Invalid workout result format: badformat",
        "Unknown exercise/execution: unknown/exec",
        "Invalid volume format for frontPlank/maxhold: 45",
    )


def test_split_workout_result_keeps_volume_verbatim():
    assert split_workout_result("squats/set3x 22+22+22") == WorkoutResult(
        exercise="squats", execution="set3x", volume="22+22+22"
    )


def test_trailing_newline_rejected(catalog):
    result = validate_workout(["squats/set3x 22+22+22\n", "pullUps/maxset 8\n"], catalog)

    assert result.errors == (
        "Invalid volume format for squats/set3x: 22+22+22\n",
        "Invalid volume format for pullUps/maxset: 8\n",
    )


def test_non_ascii_digits_rejected(catalog):
    result = validate_workout(["pullUps/maxset ٨", "frontPlank/maxhold ٣٠s"], catalog)

    assert result.errors == (
        "Invalid volume format for pullUps/maxset: ٨",
        "Invalid volume format for frontPlank/maxhold: ٣٠s",
    )
