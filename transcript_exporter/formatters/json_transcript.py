"""Raw JSON transcript formatter with one-line timestamp pairs.

WHY: The raw word-level transcript is the archival artifact. It keeps
every chunk, not just the phrases. Pretty-printed JSON is readable, but a
generic pretty-printer spreads each ``[start, end]`` pair over four lines,
adding three lines per word. Writing each pair on one line keeps one chunk
per four lines and makes the timing scannable.

HOW: A small recursive encoder mirrors two-space JSON pretty-printing and
writes every ``timestamp`` pair that sits at an indentation of four or
more spaces as ``[start end]`` directly, instead of reformatting generic
output afterwards.

RULES:
- Two-space indentation, one key or item per line, "[]"/"{}" when empty
- Integral floats print without a fractional part (1.0 → 1)
- Decimal notation down to 1e-6, exponent form below (1e-7); NaN and
  infinities in extra keys print as null
- Non-ASCII text is written as-is
- Collapsed pairs use ``separator`` between the numbers; the default is a
  single space with no comma: ``"timestamp": [1.2 1.6]``
- Output filename: "transcript.json", media type "application/json"
"""

from __future__ import annotations

import json
import math
from typing import Any, List

from transcript_exporter.config import JSON_MEDIA_TYPE
from transcript_exporter.core.ir import Transcript
from transcript_exporter.formatters.base import BaseFormatter, FormatterOutput

_INDENT = "  "

# Pairs are only collapsed at this indentation or deeper (chunk level).
_MIN_COLLAPSE_INDENT = 4


def _format_number(value: Any) -> str:
    """Render a number the way JavaScript's JSON.stringify does."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        return "null"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    # repr() switches to exponent form below 1e-4, JavaScript below 1e-6.
    mantissa, marker, exp = repr(value).partition("e")
    if not marker:
        return mantissa
    exponent = int(exp)
    if -7 < exponent < 0:
        sign = "-" if mantissa.startswith("-") else ""
        digits = mantissa.lstrip("-").replace(".", "")
        return "{}0.{}{}".format(sign, "0" * (-exponent - 1), digits)
    return "{}e{}{}".format(mantissa, "-" if exponent < 0 else "+", abs(exponent))


def _is_scalar(value: Any) -> bool:
    return not isinstance(value, (dict, list, tuple))


def _encode_scalar(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, (bool, int, float)):
        return _format_number(value)
    return json.dumps(value, ensure_ascii=False)


def _encode(value: Any, depth: int, separator: str) -> str:
    if isinstance(value, dict):
        if not value:
            return "{}"
        inner = _INDENT * (depth + 1)
        lines = []  # type: List[str]
        for key, item in value.items():
            prefix = "{}{}: ".format(inner, json.dumps(key, ensure_ascii=False))
            if (
                key == "timestamp"
                and len(inner) >= _MIN_COLLAPSE_INDENT
                and isinstance(item, (list, tuple))
                and len(item) == 2
                and all(_is_scalar(x) for x in item)
            ):
                lines.append("{}[{}{}{}]".format(
                    prefix, _encode_scalar(item[0]), separator, _encode_scalar(item[1]),
                ))
            else:
                lines.append(prefix + _encode(item, depth + 1, separator))
        return "{\n" + ",\n".join(lines) + "\n" + _INDENT * depth + "}"

    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        inner = _INDENT * (depth + 1)
        lines = [inner + _encode(item, depth + 1, separator) for item in value]
        return "[\n" + ",\n".join(lines) + "\n" + _INDENT * depth + "]"

    return _encode_scalar(value)


def transcript_to_json(transcript: Transcript, separator: str = " ") -> str:
    """Serialize the full transcript with collapsed timestamp pairs."""
    return _encode(transcript.to_dict(), 0, separator)


class JSONTranscriptFormatter(BaseFormatter):
    """Formatter that writes the word-level transcript as readable JSON.

    Args:
        separator: Text placed between the two numbers of a collapsed
            timestamp pair. Use ", " for strictly valid JSON.
    """

    def __init__(self, separator: str = " ") -> None:
        self.separator = separator

    @property
    def name(self) -> str:
        return "Transcript JSON"

    def format(self, transcript: Transcript) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                filename="transcript.json",
                content=transcript_to_json(transcript, self.separator),
                media_type=JSON_MEDIA_TYPE,
            )
        ]
