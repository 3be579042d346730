"""
Daily Fitness Tracker FastAPI server main entrypoint.
Handles CORS, error handling, the OpenAPI document and API routers.
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Any

import psutil
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .. import __version__
from ..config import SETTINGS
from ..db import close_db, init_db
from ..logging_setup import setup_logging
from ..parsers import format_validation_errors
from ..schemas import DailyEntryInput, Envelope, Health
from ..services import WorkoutService
from .responses import envelope, error_response
from .routes.entries import router as r_entries
from .routes.meals import router as r_meals
from .routes.stats import router as r_stats
from .routes.tracks import router as r_tracks
from .routes.workouts import router as r_workouts

API_TITLE = "Daily Fitness Tracker API"
API_DESCRIPTION = (
    "Personal fitness tracking REST API for daily entries including running, workouts, "
    "weight, meals, stretching, stairs, and diary notes."
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    try:
        await init_db()
        logging.info("Database initialized")
        # A catalog row with an unknown execution kind must stop startup
        catalog = await WorkoutService().load_catalog()
        logging.info("Exercise catalog loaded with %d exercises", len(catalog))
        logging.info("FastAPI server startup completed")
    except Exception as e:
        logging.exception("FastAPI startup failed: %s", e)
        raise

    yield

    try:
        await close_db()
        logging.info("FastAPI server shutdown completed")
    except Exception as e:
        logging.exception("FastAPI shutdown failed: %s", e)


app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=__version__,
    openapi_url="/api",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=SETTINGS.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def custom_openapi() -> dict[str, Any]:
    """
    OpenAPI document with the JSON entry input schema registered as a component;
    POST /entries reads its body by hand to accept YAML as well.
    """
    if app.openapi_schema:
        return app.openapi_schema
    schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )
    components = schema.setdefault("components", {}).setdefault("schemas", {})
    entry_input = DailyEntryInput.model_json_schema(
        by_alias=True, ref_template="#/components/schemas/{model}"
    )
    components.update(entry_input.pop("$defs", {}))
    components["DailyEntryInput"] = entry_input
    app.openapi_schema = schema
    return schema


app.openapi = custom_openapi  # type: ignore[method-assign]


@app.exception_handler(StarletteHTTPException)
async def http_exc_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exc_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(400, "Invalid input", format_validation_errors(exc.errors()))


@app.exception_handler(Exception)
async def global_exc_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler: log and return a generic error response.
    """
    logging.exception("Unhandled error in %s: %s", request.url, exc)
    return error_response(500, "Internal server error")


@app.get("/health", response_model=Envelope[Health])
async def health():
    """Health check with process uptime."""
    uptime = time.time() - psutil.Process().create_time()
    return envelope("/health", Health(timestamp=datetime.now(UTC), uptime=round(uptime, 3)))


# Routers for API endpoints
app.include_router(r_entries, tags=["entries"])
app.include_router(r_tracks, tags=["tracks"])
app.include_router(r_workouts, tags=["workouts"])
app.include_router(r_stats, tags=["stats"])
app.include_router(r_meals, tags=["meals"])
