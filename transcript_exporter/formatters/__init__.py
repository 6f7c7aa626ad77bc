"""Output formatter registry, the pluggable format hub.

WHY: The CLI and the HTTP API need a single lookup to find the right
formatter by name. A central dict makes it trivial to add new formats:
create the formatter class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
create_formatter() instantiates one, passing the segmentation strategy to
every SubtitleFormatter subclass. export_transcript() runs a formatter and
returns its single output.

RULES:
- Keys are short lowercase identifiers used in CLI flags and URLs
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Optional, Type

from transcript_exporter.core.segmenter import SegmentationConfig
from transcript_exporter.formatters.base import FormatterOutput
from transcript_exporter.formatters.json_transcript import JSONTranscriptFormatter
from transcript_exporter.formatters.subtitles import SRTFormatter, SubtitleFormatter, WebVTTFormatter

if TYPE_CHECKING:
    from transcript_exporter.core.ir import Transcript
    from transcript_exporter.formatters.base import BaseFormatter

logger = logging.getLogger(__name__)

FORMATTERS: Dict[str, Type[BaseFormatter]] = {
    "json": JSONTranscriptFormatter,
    "vtt": WebVTTFormatter,
    "srt": SRTFormatter,
}


class UnknownFormatError(ValueError):
    """Raised for a format key that is not in FORMATTERS."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(
            "Unknown format '{}'. Available formats: {}".format(
                key, ", ".join(sorted(FORMATTERS))
            )
        )


def create_formatter(
    key: str,
    segmentation: Optional[SegmentationConfig] = None,
) -> BaseFormatter:
    """Instantiate the formatter registered under ``key``.

    Raises:
        UnknownFormatError: If no formatter is registered under ``key``.
    """
    if key not in FORMATTERS:
        raise UnknownFormatError(key)
    formatter_cls = FORMATTERS[key]
    if issubclass(formatter_cls, SubtitleFormatter):
        return formatter_cls(segmentation=segmentation)
    return formatter_cls()


def export_transcript(
    transcript: Transcript,
    key: str,
    segmentation: Optional[SegmentationConfig] = None,
) -> FormatterOutput:
    """Render ``transcript`` in the format registered under ``key``.

    Args:
        transcript: The validated transcript.
        key: Format key, one of FORMATTERS.
        segmentation: Phrase grouping for subtitle formats; ignored by
            the JSON formatter. Defaults to SegmentationConfig().

    Returns:
        The formatter's output file.

    Raises:
        UnknownFormatError: If ``key`` is not registered.
    """
    formatter = create_formatter(key, segmentation)
    output = formatter.format(transcript)[0]
    logger.debug(
        "Exported %d chunks as %s (%d chars)",
        len(transcript.chunks), formatter.name, len(output.content),
    )
    return output
