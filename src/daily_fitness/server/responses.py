"""
Response envelope helpers shared by the API routes.

Success bodies are ``{"links": {"self": ...}, "result": ...}``; error bodies are
``{"error": ..., "details": [...]}``.
"""

from __future__ import annotations

from typing import Any

from fastapi.responses import JSONResponse

from ..schemas import Envelope, ErrorResponse, Links

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Validation error"},
    404: {"model": ErrorResponse, "description": "Not found"},
    500: {"model": ErrorResponse, "description": "Server error"},
}


def links(self_path: str, **extra: str) -> Links:
    return Links.model_validate({"self": self_path, **extra})


def envelope(self_path: str, result: Any, **extra_links: str) -> Envelope[Any]:
    return Envelope[Any](links=links(self_path, **extra_links), result=result)


def error_response(status_code: int, error: str, details: list[str] | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(body.model_dump(exclude_none=True), status_code=status_code)
