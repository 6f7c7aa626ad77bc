"""Transcript Exporter: word-level transcripts to JSON, WebVTT and SRT.

WHY: Speech recognizers emit a flat list of word chunks, each with its own
start/end time. Subtitle players and editors need numbered, time-ranged
cues, and archivists want the raw transcript in a readable JSON file.
This package turns one transcript into all three artifacts.

HOW: Three-stage pipeline: validate (core.validation), segment words into
phrases (core.segmenter), render (pluggable formatters). The CLI and the
HTTP API are thin shells around formatters.export_transcript().

RULES:
- Every formatter consumes the same Transcript IR
- Each export call is a pure function of its input; nothing is cached
- External data enters the core only through core.validation.parse_transcript
"""

__version__ = "0.1.0"
