import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

import pytest_asyncio

from daily_fitness.db import repo


@pytest_asyncio.fixture
async def db():
    """Fresh in-memory database with the seeded exercise catalog."""
    await repo.close_db()
    await repo.init_db()
    yield repo
    await repo.close_db()
