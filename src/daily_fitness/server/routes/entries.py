"""
Daily entry, diary and weekly summary API routes.
"""

from __future__ import annotations

import datetime as dt
import json
import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import PlainTextResponse

from ...parsers import YAML_CONTENT_TYPES, load_yaml, parse_daily_entry_json, parse_daily_entry_yaml
from ...schemas import (
    CreatedReport,
    DailyEntry,
    DailyEntryUpdate,
    DiaryUpdate,
    Envelope,
    Message,
)
from ...services import EntryService
from ..responses import ERROR_RESPONSES, envelope, error_response

router = APIRouter()

_CREATE_ENTRY_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {
                "schema": {"$ref": "#/components/schemas/DailyEntryInput"},
            },
            "application/yaml": {
                "schema": {
                    "type": "object",
                    "description": (
                        'YAML format with compact strings. run: "schedule trackId progress '
                        'performance", workout: "schedule routine"'
                    ),
                },
            },
        },
    }
}


def _neighbour_links(date: str) -> dict[str, str]:
    day = dt.date.fromisoformat(date)
    return {
        "previous": f"/entries/{(day - dt.timedelta(days=1)).isoformat()}",
        "next": f"/entries/{(day + dt.timedelta(days=1)).isoformat()}",
    }


@router.get("/entries", response_model=Envelope[list[DailyEntry]])
async def get_entries():
    """List all daily entries, newest first."""
    return envelope("/entries", await EntryService().list_entries())


@router.post(
    "/entries",
    status_code=201,
    response_model=Envelope[CreatedReport],
    responses={400: ERROR_RESPONSES[400], 415: {"description": "Unsupported media type"}},
    openapi_extra=_CREATE_ENTRY_BODY,
)
async def create_entry(request: Request):
    """Create a daily entry from JSON or compact YAML."""
    content_type = request.headers.get("content-type", "application/json").split(";")[0].strip()
    body = await request.body()

    if content_type in YAML_CONTENT_TYPES:
        loaded = load_yaml(body)
        parsed = parse_daily_entry_yaml(loaded.value) if loaded.ok else loaded
    elif content_type == "application/json":
        try:
            data = json.loads(body or b"null")
        except json.JSONDecodeError as e:
            return error_response(400, "Invalid input", [f"Invalid JSON: {e.msg}"])
        parsed = parse_daily_entry_json(data)
    else:
        return error_response(415, f"Unsupported content type: {content_type}")

    if not parsed.ok or parsed.value is None:
        return error_response(400, "Invalid input", list(parsed.errors))

    created = await EntryService().create_entry(parsed.value)
    if not created.ok:
        logging.info("Rejected daily entry: %s", created.errors)
        return error_response(400, "Failed to create daily entry", list(created.errors))

    return envelope(
        "/entries",
        CreatedReport(message="Daily entry created successfully", report=created.value or []),
    )


@router.get(
    "/entries/{date}",
    response_model=Envelope[DailyEntry],
    responses={404: ERROR_RESPONSES[404]},
)
async def get_entry(date: str):
    """Get a daily entry by date (YYYY-MM-DD or ``today``) with previous/next links."""
    entry = await EntryService().get_entry(date)
    if entry is None:
        raise HTTPException(status_code=404, detail="Entry not found")
    return envelope(f"/entries/{date}", entry, **_neighbour_links(entry.date))


@router.patch(
    "/entries/{date}",
    response_model=Envelope[Message],
    responses={404: ERROR_RESPONSES[404]},
)
async def update_entry(date: str, entry_update: DailyEntryUpdate):
    """Update a daily entry."""
    updated = await EntryService().update_entry(date, entry_update)
    if not updated:
        raise HTTPException(status_code=404, detail="Entry not found")
    return envelope(f"/entries/{date}", Message(message="Daily entry updated successfully"))


@router.post(
    "/entries/{date}/diary",
    response_model=Envelope[Message],
    responses={404: ERROR_RESPONSES[404]},
)
async def update_diary(date: str, diary_update: DiaryUpdate):
    """Replace the diary text of a daily entry."""
    updated = await EntryService().update_diary(date, diary_update.diary)
    if not updated:
        raise HTTPException(status_code=404, detail="Entry not found")
    return envelope(f"/entries/{date}/diary", Message(message="Diary updated successfully"))


@router.get("/diary", response_class=PlainTextResponse)
async def get_diary() -> str:
    """Get all diary entries as plain text."""
    return await EntryService().build_diary()


@router.get(
    "/week/{week}",
    response_model=Envelope[list[DailyEntry]],
    responses={404: ERROR_RESPONSES[404]},
)
async def get_week(week: str):
    """Daily entries of an ISO week given as YYYY-WW, e.g. 2026-07."""
    entries = await EntryService().week_summary(week)
    if entries is None:
        raise HTTPException(status_code=404, detail="Week not found")
    return envelope(f"/week/{week}", entries)

