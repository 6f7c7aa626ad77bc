"""FastAPI application exposing transcript exports over HTTP.

WHY: The transcript viewer offers "Download JSON / VTT / SRT" buttons.
Other clients (scripts, automation tools, a web front end without a
JavaScript implementation of the pipeline) need the same artifacts over
HTTP, with the right media type and download filename.

HOW: POST /exports/{format_key} takes the transcript as the JSON body and
segmentation options as query parameters, runs export_transcript(), and
returns the content as an attachment. GET /formats lists the registered
formatters, GET /health is the liveness probe.

RULES:
- Unknown format key → 400; malformed transcript or options → 422
- The body reaches parse_transcript() as decoded, never coerced by pydantic
- Error responses use the ErrorResponse schema
- Every export is computed per request; nothing is stored
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Dict, List, Optional

from fastapi import Body, FastAPI, HTTPException, Query
from fastapi.responses import Response

from transcript_exporter import __version__
from transcript_exporter.config import API_HOST, API_PORT, configure_logging
from transcript_exporter.core.ir import Transcript
from transcript_exporter.core.segmenter import SegmentationConfig
from transcript_exporter.core.validation import TranscriptValidationError, parse_transcript
from transcript_exporter.formatters import (
    FORMATTERS,
    UnknownFormatError,
    create_formatter,
    export_transcript,
)
from transcript_exporter.server.models import (
    TRANSCRIPT_EXAMPLE,
    ErrorResponse,
    FormatInfo,
    HealthResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Transcript Exporter API",
    description=(
        "Export word-level speech-to-text transcripts as raw JSON, WebVTT "
        "and SRT subtitles. Post a transcript, get back a downloadable file."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Endpoints: Exports
# ---------------------------------------------------------------------------


@app.post(
    "/exports/{format_key}",
    tags=["exports"],
    summary="Export a transcript in one format",
    description=(
        "Validate the posted transcript and render it as the requested format. "
        "Subtitle formats group words into phrases at sentence punctuation, "
        "pauses longer than gap_threshold_s, and every max_phrase_length words."
    ),
    responses={
        200: {"description": "The exported file as an attachment."},
        400: {"model": ErrorResponse, "description": "Unknown format key"},
        422: {"model": ErrorResponse, "description": "Malformed transcript or options"},
    },
)
async def create_export(
    format_key: str,
    payload: Annotated[
        Dict[str, Any],
        Body(
            description="Word-level transcript: optional 'text' plus 'chunks' of "
                        "{text, timestamp: [start, end]}. Other keys are kept.",
            examples=[TRANSCRIPT_EXAMPLE],
        ),
    ],
    granularity: Annotated[
        Optional[str],
        Query(description="'phrase' (grouped cues) or 'word' (one cue per word)."),
    ] = None,
    max_phrase_length: Annotated[
        Optional[int],
        Query(description="Maximum words per phrase cue."),
    ] = None,
    gap_threshold_s: Annotated[
        Optional[float],
        Query(description="Pause in seconds that starts a new phrase."),
    ] = None,
) -> Response:
    if format_key not in FORMATTERS:
        raise HTTPException(status_code=400, detail=str(UnknownFormatError(format_key)))

    try:
        segmentation = _build_segmentation(granularity, max_phrase_length, gap_threshold_s)
        transcript = parse_transcript(payload)
    except TranscriptValidationError as exc:
        raise HTTPException(status_code=422, detail="Invalid transcript: {}".format(exc))
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    try:
        output = export_transcript(transcript, format_key, segmentation)
    except Exception:
        logger.exception("Export to %s failed", format_key)
        raise

    return Response(
        content=output.content,
        media_type=output.media_type,
        headers={"Content-Disposition": 'attachment; filename="{}"'.format(output.filename)},
    )


# ---------------------------------------------------------------------------
# Endpoints: Formats
# ---------------------------------------------------------------------------


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["formats"],
    summary="List available output formats",
    description="Returns every export format with its key, name, filename and media type.",
)
async def list_formats() -> List[FormatInfo]:
    empty = Transcript(chunks=())
    result = []
    for key in sorted(FORMATTERS):
        formatter = create_formatter(key)
        output = formatter.format(empty)[0]
        result.append(FormatInfo(
            key=key,
            name=formatter.name,
            filename=output.filename,
            media_type=output.media_type,
        ))
    return result


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness and readiness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


# ---------------------------------------------------------------------------
# Helpers (private)
# ---------------------------------------------------------------------------


def _build_segmentation(
    granularity: Optional[str],
    max_phrase_length: Optional[int],
    gap_threshold_s: Optional[float],
) -> SegmentationConfig:
    """Overlay the request's query options on the configured defaults."""
    defaults = SegmentationConfig()
    return SegmentationConfig(
        granularity=granularity if granularity is not None else defaults.granularity,
        max_phrase_length=(
            max_phrase_length if max_phrase_length is not None else defaults.max_phrase_length
        ),
        gap_threshold_s=(
            gap_threshold_s if gap_threshold_s is not None else defaults.gap_threshold_s
        ),
    )


def run_api() -> None:
    """Entry point for the transcript-export-api console script."""
    import uvicorn

    configure_logging()
    uvicorn.run(app, host=API_HOST, port=API_PORT)
