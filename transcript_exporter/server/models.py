"""Pydantic response models and the request example for the HTTP export API.

WHY: The FastAPI endpoints need typed schemas for response serialization
and automatic OpenAPI documentation.

HOW: The request body is taken as a plain JSON object and handed to
core.validation.parse_transcript() unchanged, the same path the CLI uses.
No pydantic coercion runs on it, so a "1.5" string or a boolean timestamp
is rejected instead of silently converted, and recognizer keys the IR does
not model survive into the JSON export. TRANSCRIPT_EXAMPLE documents the
body in /docs.

RULES:
- All response models use Field(description=...) for OpenAPI documentation
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request example
# ---------------------------------------------------------------------------


TRANSCRIPT_EXAMPLE: Dict[str, Any] = {
    "text": " Hello world.",
    "chunks": [
        {"text": " Hello", "timestamp": [0.0, 0.5]},
        {"text": " world.", "timestamp": [0.5, 1.0]},
    ],
}


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class FormatInfo(BaseModel):
    """Description of an available output format."""

    key: str = Field(description="Format identifier used in export URLs.")
    name: str = Field(description="Human-readable format name.")
    filename: str = Field(description="Suggested download filename (e.g. 'subtitles.vtt').")
    media_type: str = Field(description="MIME type of the exported content.")


class ErrorResponse(BaseModel):
    """Standard error response body.

    RULES:
    - detail is always a human-readable error message
    """

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
