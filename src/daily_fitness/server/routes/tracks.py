"""
Running track API routes.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException
from sqlalchemy.exc import SQLAlchemyError

from ...db import repo
from ...schemas import Envelope, Message, Track
from ..responses import ERROR_RESPONSES, envelope, error_response

router = APIRouter()


@router.get("/tracks", response_model=Envelope[list[Track]])
async def get_tracks():
    """List all running tracks."""
    tracks = await repo.list_tracks()
    return envelope("/tracks", tracks)


@router.post(
    "/tracks",
    status_code=201,
    response_model=Envelope[Message],
    responses={500: ERROR_RESPONSES[500]},
)
async def create_track(track: Track):
    """Create a running track."""
    try:
        await repo.create_track(track)
    except SQLAlchemyError as e:
        logging.exception("Failed to create track %s: %s", track.id, e)
        return error_response(500, "Failed to create track", [str(getattr(e, "orig", None) or e)])
    return envelope("/tracks", Message(message="Track created successfully"))


@router.get(
    "/tracks/{track_id}",
    response_model=Envelope[Track],
    responses={404: ERROR_RESPONSES[404]},
)
async def get_track(track_id: str):
    """Get a running track by ID."""
    track = await repo.get_track(track_id)
    if track is None:
        raise HTTPException(status_code=404, detail="Track not found")
    return envelope(f"/tracks/{track_id}", track)
