#!/usr/bin/env python3
"""
Import daily entries from YAML files written in the compact daily-notes format.

Each file holds a list of entries such as:

    - date: 2026-01-15
      run: regular park-loop full 3
      workout: regular bodyweight
      results:
        - squats/set3x 22+22+22
        - frontPlank/maxhold 45s
      weight: 75.5
      diary: Felt good.

Usage: python scripts/import_entries.py [DIRECTORY]   (default: data.local)
"""

import asyncio
import os
import sys
from pathlib import Path

# Add the src directory to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./db.local.sqlite")

import yaml

from daily_fitness.db import repo
from daily_fitness.logging_setup import setup_logging
from daily_fitness.parsers import parse_daily_entry_yaml
from daily_fitness.services import EntryService


async def import_file(service: EntryService, path: Path) -> tuple[int, int]:
    """Import one YAML file. Returns (imported, skipped)."""
    entries = yaml.safe_load(path.read_text(encoding="utf-8")) or []
    print(f"📥 Loading {len(entries)} daily entries from {path}...")

    imported = 0
    skipped = 0
    for raw in entries:
        if not isinstance(raw, dict):
            print(f"⚠️  Skipping non-mapping item: {raw!r}")
            skipped += 1
            continue
        parsed = parse_daily_entry_yaml(raw)
        if not parsed.ok or parsed.value is None:
            print(f"⚠️  Skipping {raw.get('date', '?')}: {'; '.join(parsed.errors)}")
            skipped += 1
            continue
        created = await service.create_entry(parsed.value)
        if not created.ok:
            print(f"⚠️  Skipping {raw.get('date', '?')}: {'; '.join(created.errors)}")
            skipped += 1
            continue
        imported += 1
    return imported, skipped


async def main(directory: Path) -> None:
    setup_logging()
    await repo.init_db()
    service = EntryService()
    total_imported = 0
    total_skipped = 0
    try:
        for path in sorted(directory.glob("*.yml")) + sorted(directory.glob("*.yaml")):
            imported, skipped = await import_file(service, path)
            total_imported += imported
            total_skipped += skipped
    finally:
        await repo.close_db()
    print(f"✅ Import complete: {total_imported} entries imported, {total_skipped} skipped")


if __name__ == "__main__":
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("data.local")
    asyncio.run(main(target))
