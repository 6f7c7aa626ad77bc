"""WebVTT and SRT subtitle formatters.

WHY: Video players load WebVTT (browsers, HTML5 <track>) or SRT (desktop
players, editing suites). Both are lists of numbered, time-ranged cues;
only the header and the millisecond separator differ, so both dialects
share one renderer.

HOW: The transcript's chunks are grouped into phrases by the segmenter
(or kept one per word, depending on the SegmentationConfig). Each phrase
becomes one cue block: index line, time range line, text line, blank
line. WebVTT output starts with the "WEBVTT" header and a blank line.

RULES:
- Cue index is the phrase's 1-based position; no renumbering
- Cue block: "<index>\\n<start> --> <end>\\n<text>\\n\\n"
- Empty phrase list: "WEBVTT\\n\\n" for WebVTT, "" for SRT
- Output is byte-identical for identical phrase sequences
- Filenames: "subtitles.vtt" (text/vtt), "subtitles.srt" (SRT_MEDIA_TYPE)
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from transcript_exporter.config import SRT_MEDIA_TYPE, VTT_MEDIA_TYPE
from transcript_exporter.core.ir import Phrase, Transcript
from transcript_exporter.core.segmenter import SegmentationConfig, segment_chunks
from transcript_exporter.core.timecode import format_timecode
from transcript_exporter.formatters.base import BaseFormatter, FormatterOutput

VTT_HEADER = "WEBVTT\n\n"


def render_cues(phrases: Sequence[Phrase], dialect: str) -> str:
    """Render phrases as cue blocks with time codes for ``dialect``."""
    blocks = []  # type: List[str]
    for index, phrase in enumerate(phrases, 1):
        blocks.append("{}\n{} --> {}\n{}\n\n".format(
            index,
            format_timecode(phrase.start, dialect),
            format_timecode(phrase.end, dialect),
            phrase.text,
        ))
    return "".join(blocks)


def to_vtt(phrases: Sequence[Phrase]) -> str:
    """Render a complete WebVTT document."""
    return VTT_HEADER + render_cues(phrases, "vtt")


def to_srt(phrases: Sequence[Phrase]) -> str:
    """Render a complete SRT document."""
    return render_cues(phrases, "srt")


class SubtitleFormatter(BaseFormatter):
    """Shared plumbing: segment the transcript, then render one document."""

    def __init__(self, segmentation: Optional[SegmentationConfig] = None) -> None:
        self.segmentation = segmentation if segmentation is not None else SegmentationConfig()

    def phrases(self, transcript: Transcript) -> List[Phrase]:
        return segment_chunks(transcript.chunks, self.segmentation)


class WebVTTFormatter(SubtitleFormatter):
    """Formatter that produces a WebVTT subtitle file."""

    @property
    def name(self) -> str:
        return "WebVTT Subtitles"

    def format(self, transcript: Transcript) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                filename="subtitles.vtt",
                content=to_vtt(self.phrases(transcript)),
                media_type=VTT_MEDIA_TYPE,
            )
        ]


class SRTFormatter(SubtitleFormatter):
    """Formatter that produces a SubRip (SRT) subtitle file."""

    @property
    def name(self) -> str:
        return "SRT Subtitles"

    def format(self, transcript: Transcript) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                filename="subtitles.srt",
                content=to_srt(self.phrases(transcript)),
                media_type=SRT_MEDIA_TYPE,
            )
        ]
