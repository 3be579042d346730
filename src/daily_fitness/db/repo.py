"""
Async SQLAlchemy repository for daily fitness database operations.

Rows are decoded into API schemas or workout records here so that nothing
above this module touches ORM objects.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Callable, Sequence
from functools import wraps
from importlib import resources
from pathlib import Path
from typing import Any, TypeVar

from sqlalchemy import select, update
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import selectinload
from sqlalchemy.pool import StaticPool

from ..config import SETTINGS
from ..schemas import DailyEntry, Running, Track, Workout, WorkoutResultOut
from ..workout import WorkoutResult, WorkoutResultRecord, split_workout_result
from .models import Base, DailyEntryRow, ExerciseRow, RunningTrack, WorkoutResultRow

_engine: AsyncEngine | None = None
_session: async_sessionmaker[AsyncSession] | None = None

# Type variable for the retry decorator
F = TypeVar("F", bound=Callable[..., Any])


def retry_on_connection_error(max_retries: int = 3, delay: float = 0.1):
    """
    Decorator to retry database reads on transient connection errors,
    such as a locked SQLite file.
    """

    def decorator(func: F) -> F:
        @wraps(func)
        async def wrapper(*args, **kwargs):
            for attempt in range(max_retries):
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    transient = any(
                        keyword in str(e).lower()
                        for keyword in ["database is locked", "connection", "timeout"]
                    )
                    if not transient or attempt == max_retries - 1:
                        raise
                    wait_time = delay * (2**attempt)
                    logging.warning(
                        "Database error on attempt %d/%d, retrying in %.2fs: %s",
                        attempt + 1,
                        max_retries,
                        wait_time,
                        e,
                    )
                    await asyncio.sleep(wait_time)
            raise RuntimeError("Retry mechanism failed unexpectedly")

        return wrapper  # type: ignore

    return decorator


def _is_memory_sqlite(db_url: str) -> bool:
    url_obj = make_url(db_url)
    return url_obj.drivername.startswith("sqlite") and (
        url_obj.database in {":memory:", "", None} or ":memory:" in db_url
    )


def _migration_paths() -> list[Any]:
    """Packaged ``.sql`` migrations, falling back to the source tree."""
    paths: list[Any] = []
    try:
        pkg_migrations = resources.files("daily_fitness").joinpath("migrations")
        if pkg_migrations.is_dir():
            paths.extend(p for p in pkg_migrations.iterdir() if p.name.endswith(".sql"))
    except (ModuleNotFoundError, FileNotFoundError):
        pass

    if not paths:
        fs_dir = Path(__file__).resolve().parents[1] / "migrations"
        if fs_dir.is_dir():
            paths = [p for p in fs_dir.iterdir() if p.suffix == ".sql"]
    return sorted(paths, key=lambda p: p.name)


async def _run_migrations(conn: Any, paths: list[Any]) -> None:
    """Execute .sql migration files sequentially."""
    for path in paths:
        logging.debug("Applying migration %s", path.name)
        sql = path.read_text(encoding="utf-8")
        for stmt in sql.split(";"):
            stmt = stmt.strip()
            if stmt:
                await conn.run_sync(lambda sync_conn, s=stmt: sync_conn.exec_driver_sql(s))  # type: ignore


def _load_catalog_seed() -> list[str]:
    """Exercise names shipped with the package in ``data/exercises.json``."""
    data_file = Path(__file__).resolve().parents[1] / "data" / "exercises.json"
    with open(data_file, encoding="utf-8") as f:
        return [str(name) for name in json.load(f)]


async def init_db() -> None:
    """
    Initialize the async database engine and sessionmaker, create tables if
    needed and seed the exercise catalog.
    """
    global _engine, _session
    if _engine:
        return
    if not SETTINGS.DATABASE_URL:
        logging.error("DATABASE_URL is required for DB initialization.")
        raise RuntimeError("DATABASE_URL is required")
    db_url = SETTINGS.DATABASE_URL
    memory = _is_memory_sqlite(db_url)
    engine_kwargs: dict[str, Any] = {"echo": False}
    if memory:
        # One shared connection, otherwise every checkout sees an empty database
        engine_kwargs["poolclass"] = StaticPool
        engine_kwargs["connect_args"] = {"check_same_thread": False}
    _engine = create_async_engine(db_url, **engine_kwargs)
    _session = async_sessionmaker(_engine, expire_on_commit=False)
    async with _engine.begin() as conn:
        paths = [] if memory else _migration_paths()
        if paths:
            await _run_migrations(conn, paths)
        else:
            await conn.run_sync(Base.metadata.create_all)
    added = await seed_exercises(_load_catalog_seed())
    if added:
        logging.info("Seeded %d exercises into the catalog", added)


def get_session() -> async_sessionmaker[AsyncSession]:
    """
    Get the async sessionmaker. Raises if DB is not initialized.
    """
    if not _session:
        raise RuntimeError("DB not initialized; call init_db() first")
    return _session


async def close_db() -> None:
    """Dispose of the database engine and reset session state."""

    global _engine, _session
    if _engine:
        await _engine.dispose()
    _engine = None
    _session = None


# ---- Row decoding -----------------------------------------------------------


def _row_to_track(row: RunningTrack) -> Track:
    return Track(
        id=row.id,
        name=row.name,
        length=row.length,
        url=row.url,
        progress_unit=row.progress_unit,
    )


def _row_to_workout_result(row: WorkoutResultRow) -> WorkoutResult:
    return WorkoutResult(exercise=row.exercise, execution=row.execution, volume=row.volume)


def _row_to_daily_entry(row: DailyEntryRow) -> DailyEntry:
    results = [
        WorkoutResultOut(exercise=r.exercise, execution=r.execution, volume=r.volume)
        for r in row.workout_results
    ]
    return DailyEntry(
        date=row.date,
        week=row.week,
        year=row.year,
        month=row.month,  # type: ignore[arg-type]
        day=row.day,  # type: ignore[arg-type]
        running=Running(
            schedule=row.running_schedule,
            track=_row_to_track(row.track) if row.track else None,
            progress=row.running_progress,
            performance=row.running_performance,
        ),
        workout=Workout(
            schedule=row.workout_schedule,
            routine=row.workout_routine,
            results=results or None,
        ),
        weight=row.weight,
        last_meal=row.last_meal,
        stretching=row.stretching,
        stairs=row.stairs,
        diary=row.diary,
    )


def _entry_query():
    return select(DailyEntryRow).options(
        selectinload(DailyEntryRow.track), selectinload(DailyEntryRow.workout_results)
    )


# ---- Exercise catalog -------------------------------------------------------


async def list_exercise_names() -> list[str]:
    """Raw catalog rows, each ``<exercise>/<execution>``."""
    sessmaker = get_session()
    async with sessmaker() as s:
        res = await s.execute(select(ExerciseRow.name).order_by(ExerciseRow.name))
        return list(res.scalars().all())


async def seed_exercises(names: Sequence[str]) -> int:
    """Insert catalog names that are not stored yet. Returns the number added."""
    sessmaker = get_session()
    async with sessmaker() as s:
        res = await s.execute(select(ExerciseRow.name))
        existing = set(res.scalars().all())
        missing = [n for n in dict.fromkeys(names) if n not in existing]
        s.add_all(ExerciseRow(name=n) for n in missing)
        await s.commit()
        return len(missing)


# ---- Workout results --------------------------------------------------------


@retry_on_connection_error(max_retries=3, delay=0.1)
async def all_workout_results_ordered_by_date() -> list[WorkoutResultRecord]:
    """Every stored workout result, oldest entry first, insertion order within a day."""
    sessmaker = get_session()
    async with sessmaker() as s:
        res = await s.execute(
            select(WorkoutResultRow).order_by(
                WorkoutResultRow.daily_entry_date.asc(), WorkoutResultRow.id.asc()
            )
        )
        return [
            WorkoutResultRecord(
                exercise=row.exercise,
                execution=row.execution,
                volume=row.volume,
                date=row.daily_entry_date,
            )
            for row in res.scalars().all()
        ]


async def get_workout_results_by_date(date: str) -> list[WorkoutResult]:
    sessmaker = get_session()
    async with sessmaker() as s:
        res = await s.execute(
            select(WorkoutResultRow)
            .where(WorkoutResultRow.daily_entry_date == date)
            .order_by(WorkoutResultRow.id)
        )
        return [_row_to_workout_result(row) for row in res.scalars().all()]


def _result_rows(date: str, results: Sequence[str]) -> list[WorkoutResultRow]:
    rows = []
    for text in results:
        r = split_workout_result(text)
        rows.append(
            WorkoutResultRow(
                daily_entry_date=date,
                exercise=r.exercise,
                execution=r.execution,
                volume=r.volume,
            )
        )
    return rows


async def insert_workout_results(date: str, results: Sequence[str]) -> int:
    """
    Persist already validated ``exercise/execution volume`` strings for a day.
    All rows are written in one transaction. Returns the number inserted.
    """
    sessmaker = get_session()
    async with sessmaker() as s:
        async with s.begin():
            s.add_all(_result_rows(date, results))
    return len(results)


# ---- Running tracks ---------------------------------------------------------


async def list_tracks() -> list[Track]:
    sessmaker = get_session()
    async with sessmaker() as s:
        res = await s.execute(select(RunningTrack).order_by(RunningTrack.id))
        return [_row_to_track(row) for row in res.scalars().all()]


async def get_track(track_id: str) -> Track | None:
    sessmaker = get_session()
    async with sessmaker() as s:
        row = await s.get(RunningTrack, track_id)
        return _row_to_track(row) if row else None


async def create_track(track: Track) -> None:
    sessmaker = get_session()
    async with sessmaker() as s:
        s.add(
            RunningTrack(
                id=track.id,
                name=track.name,
                length=track.length,
                url=track.url,
                progress_unit=track.progress_unit,
            )
        )
        await s.commit()


# ---- Daily entries ----------------------------------------------------------


async def list_entries() -> list[DailyEntry]:
    """All daily entries, newest first."""
    sessmaker = get_session()
    async with sessmaker() as s:
        res = await s.execute(_entry_query().order_by(DailyEntryRow.date.desc()))
        return [_row_to_daily_entry(row) for row in res.scalars().all()]


async def get_entry(date: str) -> DailyEntry | None:
    sessmaker = get_session()
    async with sessmaker() as s:
        res = await s.execute(_entry_query().where(DailyEntryRow.date == date))
        row = res.scalar_one_or_none()
        return _row_to_daily_entry(row) if row else None


async def get_week_entries(week: str) -> list[DailyEntry]:
    sessmaker = get_session()
    async with sessmaker() as s:
        res = await s.execute(
            _entry_query().where(DailyEntryRow.week == week).order_by(DailyEntryRow.date.asc())
        )
        return [_row_to_daily_entry(row) for row in res.scalars().all()]


async def insert_entry(fields: dict[str, Any], results: Sequence[str] = ()) -> int:
    """
    Insert a daily entry row and its workout results in a single transaction.
    Returns the number of workout results written.
    """
    sessmaker = get_session()
    async with sessmaker() as s:
        async with s.begin():
            s.add(DailyEntryRow(**fields))
            # Parent row first so the results' foreign key resolves
            await s.flush()
            s.add_all(_result_rows(fields["date"], results))
    return len(results)


async def update_entry(date: str, changes: dict[str, Any]) -> bool:
    """Apply column changes to one entry. Returns False when nothing matched."""
    if not changes:
        return False
    sessmaker = get_session()
    async with sessmaker() as s:
        res = await s.execute(
            update(DailyEntryRow).where(DailyEntryRow.date == date).values(**changes)
        )
        await s.commit()
        return (res.rowcount or 0) > 0


async def list_diary() -> list[tuple[str, str]]:
    """``(date, diary)`` pairs of entries with diary text, oldest first."""
    sessmaker = get_session()
    async with sessmaker() as s:
        res = await s.execute(
            select(DailyEntryRow.date, DailyEntryRow.diary)
            .where(DailyEntryRow.diary.is_not(None))
            .order_by(DailyEntryRow.date.asc())
        )
        return [(row[0], row[1]) for row in res.all()]


async def running_rows_ordered_by_date() -> list[tuple[str | None, float | None, str | None, str | None]]:
    """``(track_id, track_length, progress_unit, running_progress)`` per entry, oldest first."""
    sessmaker = get_session()
    async with sessmaker() as s:
        res = await s.execute(
            select(
                DailyEntryRow.track_id,
                RunningTrack.length,
                RunningTrack.progress_unit,
                DailyEntryRow.running_progress,
            )
            .join(RunningTrack, DailyEntryRow.track_id == RunningTrack.id, isouter=True)
            .order_by(DailyEntryRow.date.asc())
        )
        return [
            (
                track_id,
                length,
                unit.value if unit is not None else None,
                progress,
            )
            for track_id, length, unit, progress in res.all()
        ]
