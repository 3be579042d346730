import pytest

from daily_fitness.db import repo
from daily_fitness.schemas import ProgressUnit, Schedule, Track


def _fields(date: str, week: str, **extra):
    fields = {
        "date": date,
        "week": week,
        "year": int(date[:4]),
        "month": "jan",
        "day": "mon",
        "running_schedule": Schedule.VOID,
        "workout_schedule": Schedule.REGULAR,
        "workout_routine": "bodyweight",
    }
    fields.update(extra)
    return fields


@pytest.mark.asyncio
async def test_init_db_seeds_exercise_catalog(db):
    names = await repo.list_exercise_names()

    assert len(names) == 10
    assert names == sorted(names)
    assert "squats/set3x" in names
    # seeding again adds nothing
    assert await repo.seed_exercises(repo._load_catalog_seed()) == 0


@pytest.mark.asyncio
async def test_init_db_runs_migrations_on_file_database(tmp_path, monkeypatch):
    await repo.close_db()
    monkeypatch.setattr(repo.SETTINGS, "DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'fitness.sqlite'}")
    try:
        await repo.init_db()
        assert len(await repo.list_exercise_names()) == 10
    finally:
        await repo.close_db()

    # idempotent schema: a second startup on the same file succeeds
    try:
        await repo.init_db()
        assert len(await repo.list_exercise_names()) == 10
    finally:
        await repo.close_db()


def test_migration_files_are_found():
    names = [p.name for p in repo._migration_paths()]
    assert names[0] == "001_initial_schema.sql"


def test_is_memory_sqlite():
    assert repo._is_memory_sqlite("sqlite+aiosqlite:///:memory:")
    assert repo._is_memory_sqlite("sqlite+aiosqlite://")
    assert not repo._is_memory_sqlite("sqlite+aiosqlite:///./db.local.sqlite")


@pytest.mark.asyncio
async def test_workout_results_ordered_by_date(db):
    await repo.insert_entry(_fields("2026-01-14", "2026-03"))
    await repo.insert_entry(_fields("2026-01-12", "2026-03"))

    assert await repo.insert_workout_results("2026-01-14", ["squats/set3x 14+14+14"]) == 1
    assert await repo.insert_workout_results("2026-01-12", ["squats/set3x 10+10+10", "pullUps/maxset 5"]) == 2

    history = await repo.all_workout_results_ordered_by_date()

    assert [(r.date, r.key, r.volume) for r in history] == [
        ("2026-01-12", "squats/set3x", "10+10+10"),
        ("2026-01-12", "pullUps/maxset", "5"),
        ("2026-01-14", "squats/set3x", "14+14+14"),
    ]
    day = await repo.get_workout_results_by_date("2026-01-12")
    assert [r.volume for r in day] == ["10+10+10", "5"]


@pytest.mark.asyncio
async def test_insert_entry_is_all_or_nothing(db):
    with pytest.raises(ValueError):
        await repo.insert_entry(_fields("2026-01-12", "2026-03"), ["squats/set3x 10+10+10", "badformat"])

    assert await repo.get_entry("2026-01-12") is None
    assert await repo.all_workout_results_ordered_by_date() == []


@pytest.mark.asyncio
async def test_entry_roundtrip_with_track(db):
    await repo.create_track(
        Track(id="park", name="Park", length=2.5, url="https://maps.example.com/park", progress_unit=ProgressUnit.KM)
    )
    await repo.insert_entry(
        _fields("2026-01-12", "2026-03", track_id="park", running_schedule=Schedule.REGULAR, running_progress="full"),
        ["frontPlank/maxhold 45s"],
    )

    entry = await repo.get_entry("2026-01-12")

    assert entry is not None
    assert entry.running.track.id == "park"
    assert entry.running.schedule is Schedule.REGULAR
    assert entry.workout.results[0].volume == "45s"
    assert await repo.running_rows_ordered_by_date() == [("park", 2.5, "km", "full")]


@pytest.mark.asyncio
async def test_update_entry(db):
    await repo.insert_entry(_fields("2026-01-12", "2026-03"))

    assert await repo.update_entry("2026-01-12", {"weight": 74.2, "diary": "Easy day."})
    assert not await repo.update_entry("2026-01-13", {"weight": 74.2})
    assert not await repo.update_entry("2026-01-12", {})

    entry = await repo.get_entry("2026-01-12")
    assert entry.weight == 74.2
    assert await repo.list_diary() == [("2026-01-12", "Easy day.")]


@pytest.mark.asyncio
async def test_entries_listing_order(db):
    await repo.insert_entry(_fields("2026-01-12", "2026-03"))
    await repo.insert_entry(_fields("2026-01-19", "2026-04"))
    await repo.insert_entry(_fields("2026-01-13", "2026-03"))

    assert [e.date for e in await repo.list_entries()] == ["2026-01-19", "2026-01-13", "2026-01-12"]
    assert [e.date for e in await repo.get_week_entries("2026-03")] == ["2026-01-12", "2026-01-13"]
    assert await repo.get_week_entries("2025-01") == []
