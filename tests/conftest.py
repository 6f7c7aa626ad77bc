"""Shared test fixtures for the transcript_exporter test suite.

WHY: Several test modules need the same small, hand-checked transcript.
Centralizing it here avoids duplication and keeps expected cue text and
timings in one place.

HOW: Pytest fixtures provide the raw recognizer dict and the validated
Transcript IR built from it.

RULES:
- SAMPLE_TRANSCRIPT has two sentences and one long pause:
    "Hello world." [0.0, 1.0]
    "How are you?" [1.0, 2.25]
    "Fine" [3.5, 4.0]  (1.25 s after "you?")
- Times are exact binary fractions so time codes are exact
"""

from typing import Any, Dict

import pytest

from transcript_exporter.core.ir import Transcript
from transcript_exporter.core.validation import parse_transcript


SAMPLE_TRANSCRIPT: Dict[str, Any] = {
    "text": " Hello world. How are you? Fine",
    "chunks": [
        {"text": " Hello",  "timestamp": [0.0, 0.5]},
        {"text": " world.", "timestamp": [0.5, 1.0]},
        {"text": " How",    "timestamp": [1.0, 1.25]},
        {"text": " are",    "timestamp": [1.25, 1.5]},
        {"text": " you?",   "timestamp": [1.5, 2.25]},
        {"text": " Fine",   "timestamp": [3.5, 4.0]},
    ],
}


@pytest.fixture
def sample_transcript_dict():
    """The raw recognizer dict; a fresh copy per test."""
    return {
        "text": SAMPLE_TRANSCRIPT["text"],
        "chunks": [dict(c, timestamp=list(c["timestamp"])) for c in SAMPLE_TRANSCRIPT["chunks"]],
    }


@pytest.fixture
def sample_transcript(sample_transcript_dict) -> Transcript:
    """Validated Transcript IR for SAMPLE_TRANSCRIPT."""
    return parse_transcript(sample_transcript_dict)
