"""Transcript boundary validation: decoded JSON → Transcript IR.

WHY: Malformed recognizer output (a missing timestamp, a string where a
number belongs, an end before its start) would otherwise flow into the
time-code arithmetic and come out as garbled or NaN cues. Rejecting it
at the boundary, with the JSON path of the problem, makes the failure
obvious and keeps the rest of the core total.

HOW: Two passes. First the object is validated with jsonschema against
the bundled transcript schema (shape and types). Then each chunk is
checked for finite times and start <= end, and converted to a WordChunk.

RULES:
- The whole transcript is rejected on the first error; nothing partial
- Error messages name the JSON path, e.g. "chunks[3].timestamp"
- NaN/Infinity (accepted by Python's json module) are rejected
- Keys other than text/chunks and text/timestamp are kept as ``extra``
- Decreasing start times between chunks are accepted with a warning;
  the segmenter merges them as documented
"""

from __future__ import annotations

import copy
import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple, Union

import jsonschema
from jsonschema.exceptions import best_match

from transcript_exporter.core.ir import Transcript, WordChunk

logger = logging.getLogger(__name__)

_SCHEMA_PATH = Path(__file__).resolve().parent.parent / "schemas" / "transcript.schema.json"

_CACHED_SCHEMA: Optional[Dict[str, Any]] = None

# Keys the IR models directly; anything else is kept in ``extra``.
_TRANSCRIPT_KEYS = ("text", "chunks")
_CHUNK_KEYS = ("text", "timestamp")


class TranscriptValidationError(ValueError):
    """Raised when input data is not a well-formed transcript.

    Attributes:
        path: JSON path of the offending value ("" for the root object).
    """

    def __init__(self, message: str, path: str = "") -> None:
        self.path = path
        if path:
            message = "{}: {}".format(path, message)
        super().__init__(message)


def _get_schema() -> Dict[str, Any]:
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def _format_path(parts: Iterable[Union[str, int]]) -> str:
    """Render a jsonschema path deque as ``chunks[3].timestamp``."""
    out = ""
    for part in parts:
        if isinstance(part, int):
            out += "[{}]".format(part)
        elif out:
            out += ".{}".format(part)
        else:
            out = str(part)
    return out


def _extra_keys(obj: Dict[str, Any], known: Tuple[str, ...]) -> Dict[str, Any]:
    return {key: copy.deepcopy(value) for key, value in obj.items() if key not in known}


def parse_transcript(data: Any) -> Transcript:
    """Validate decoded JSON and build a Transcript.

    Args:
        data: The decoded transcript object, e.g. ``json.load(f)``.

    Returns:
        An immutable Transcript.

    Raises:
        TranscriptValidationError: If the data does not match the schema
            or a chunk has non-finite or reversed timestamps.
    """
    validator = jsonschema.Draft202012Validator(_get_schema())
    error = best_match(validator.iter_errors(data))
    if error is not None:
        raise TranscriptValidationError(error.message, _format_path(error.absolute_path))

    chunks = []
    previous_start = None  # type: Optional[float]
    for index, raw in enumerate(data["chunks"]):
        start, end = raw["timestamp"]
        path = "chunks[{}].timestamp".format(index)
        if not (math.isfinite(start) and math.isfinite(end)):
            raise TranscriptValidationError("timestamps must be finite numbers", path)
        if start > end:
            raise TranscriptValidationError(
                "start {} is after end {}".format(start, end), path
            )
        if previous_start is not None and start < previous_start:
            logger.warning(
                "Chunk %d starts at %s, before the previous chunk (%s); "
                "it will be merged into the open phrase",
                index, start, previous_start,
            )
        previous_start = start
        chunks.append(WordChunk(
            text=raw["text"],
            timestamp=(float(start), float(end)),
            extra=_extra_keys(raw, _CHUNK_KEYS),
        ))

    return Transcript(
        chunks=tuple(chunks),
        text=data.get("text"),
        extra=_extra_keys(data, _TRANSCRIPT_KEYS),
    )


def load_transcript(path: Union[str, Path]) -> Transcript:
    """Read a transcript JSON file and validate it.

    Raises:
        TranscriptValidationError: If the file is not valid JSON or not a
            well-formed transcript.
        OSError: If the file cannot be read.
    """
    with open(path, "r", encoding="utf-8") as f:
        raw = f.read()
    return loads_transcript(raw)


def loads_transcript(raw: str) -> Transcript:
    """Parse and validate a transcript from a JSON string."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise TranscriptValidationError("invalid JSON ({})".format(exc))
    return parse_transcript(data)
