#!/usr/bin/env python3
"""
Reset database script for local development.
This script will drop all tables, recreate them and reseed the exercise catalog.
"""

import asyncio
import os
import sys
from pathlib import Path

# Add the src directory to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# Set default environment variables for local development
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./db.local.sqlite")

from sqlalchemy import text

from daily_fitness.db import repo
from daily_fitness.db.models import Base


async def reset_database():
    """Reset the database by dropping all tables and recreating them."""
    print("🔄 Resetting database...")

    await repo.init_db()

    engine = repo._engine
    if not engine:
        print("❌ Failed to initialize database engine")
        return

    async with engine.begin() as conn:
        print("🗑️  Dropping all tables...")
        await conn.run_sync(Base.metadata.drop_all)

        print("🏗️  Creating tables from models...")
        await conn.run_sync(Base.metadata.create_all)

    added = await repo.seed_exercises(repo._load_catalog_seed())
    print(f"🏋️  Seeded {added} exercises")

    async with engine.connect() as conn:
        result = await conn.execute(text("SELECT name FROM sqlite_master WHERE type='table'"))
        print("✅ Database reset complete!")
        print("📊 Tables created:")
        for table in result.fetchall():
            print(f"   - {table[0]}")

    await repo.close_db()


if __name__ == "__main__":
    asyncio.run(reset_database())
