"""Core intermediate representation, validation, segmentation and timing.

WHY: The core package holds the format-agnostic heart of the exporter:
the IR dataclasses, the boundary validator, the phrase segmenter and the
time-code arithmetic. Every formatter builds on these.

HOW: ir.py defines the data structures, validation.py builds them from
decoded JSON, segmenter.py groups chunks into phrases, timecode.py renders
seconds for subtitle dialects, playback.py answers "which word is
playing" questions for a player UI.

RULES:
- IR dataclasses are frozen; the core never mutates a Transcript
- No formatter-specific logic here
"""
