"""Configuration defaults and .env loading.

WHY: Segmentation thresholds, the SRT media type and server settings are
tuning knobs that operators change without touching code. Keeping them
as plain module-level values makes them easy to find and override.

HOW: python-dotenv loads the .env file on import. Each constant reads its
environment variable with a documented fallback. Numeric values are
parsed once here so the rest of the package sees real ints and floats.

RULES:
- Every default can be overridden via an environment variable
- Malformed numeric overrides raise ValueError at import, naming the variable
- Phrase segmentation defaults: 12 chunks per phrase, 1.0 s gap threshold
- SRT media type defaults to the registered "application/x-subrip";
  set SRT_MEDIA_TYPE=text/srt for byte-for-byte parity with older exports
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv

# Load .env from the working directory
load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError("{} must be an integer, got {!r}".format(name, raw))


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError("{} must be a number, got {!r}".format(name, raw))


# ---------------------------------------------------------------------------
# Phrase segmentation
# ---------------------------------------------------------------------------

GRANULARITIES = ("word", "phrase")
"""Cue granularities: one cue per chunk, or punctuation/gap-grouped phrases."""

DEFAULT_GRANULARITY = os.getenv("TRANSCRIPT_GRANULARITY", "phrase").strip().lower()
DEFAULT_MAX_PHRASE_CHUNKS = _env_int("TRANSCRIPT_MAX_PHRASE_CHUNKS", 12)
DEFAULT_GAP_THRESHOLD_S = _env_float("TRANSCRIPT_GAP_THRESHOLD_S", 1.0)

# ---------------------------------------------------------------------------
# Output media types
# ---------------------------------------------------------------------------

JSON_MEDIA_TYPE = "application/json"
VTT_MEDIA_TYPE = "text/vtt"
SRT_MEDIA_TYPE = os.getenv("SRT_MEDIA_TYPE", "application/x-subrip").strip()

# ---------------------------------------------------------------------------
# Logging and HTTP server
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").strip().upper()
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = _env_int("API_PORT", 8000)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger for the CLI and API entry points.

    Library modules only create loggers; handlers are installed here so
    embedding applications keep control of their own logging setup.
    """
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
