"""Seconds → subtitle time codes for the WebVTT and SRT dialects.

WHY: Both subtitle dialects use the same fixed-width ``HH:MM:SS`` clock
with milliseconds; they differ only in the separator before the
milliseconds (dot for WebVTT, comma for SRT).

HOW: Decompose with floor division and modulo, then zero-pad. The
millisecond field is truncated, not rounded, so 1.9999 s renders as
``00:00:01.999``.

RULES:
- hours padded to at least 2 digits, never capped (100 h → "100:00:00.000")
- minutes/seconds 2 digits, milliseconds 3 digits
- Negative or non-finite input raises ValueError
"""

from __future__ import annotations

import math

VTT_SEPARATOR = "."
SRT_SEPARATOR = ","

_SEPARATORS = {
    "vtt": VTT_SEPARATOR,
    "srt": SRT_SEPARATOR,
}


def format_timecode(seconds: float, dialect: str) -> str:
    """Convert seconds to a time code for ``dialect`` ("vtt" or "srt").

    Raises:
        ValueError: If the dialect is unknown or seconds is negative,
            NaN or infinite.
    """
    if dialect not in _SEPARATORS:
        raise ValueError(
            "Unknown subtitle dialect '{}'. Available: {}".format(
                dialect, ", ".join(sorted(_SEPARATORS))
            )
        )
    if not math.isfinite(seconds) or seconds < 0:
        raise ValueError(
            "Time code requires a finite, non-negative number of seconds, got {!r}".format(seconds)
        )

    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)
    millis = int(math.floor((seconds % 1) * 1000))
    return "{:02d}:{:02d}:{:02d}{}{:03d}".format(
        hours, minutes, secs, _SEPARATORS[dialect], millis
    )


def format_vtt_time(seconds: float) -> str:
    """Convert seconds to WebVTT timestamp format: HH:MM:SS.mmm"""
    return format_timecode(seconds, "vtt")


def format_srt_time(seconds: float) -> str:
    """Convert seconds to SRT timestamp format: HH:MM:SS,mmm"""
    return format_timecode(seconds, "srt")
