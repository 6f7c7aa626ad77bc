"""Intermediate representation dataclasses for word-level transcripts.

WHY: Recognizers hand over a plain JSON object: a list of chunks, each a
word with a ``[start, end]`` timestamp pair. Formatters need typed access
to those words and to the phrases built from them. The IR gives every
stage the same, immutable view of the data.

HOW: Three frozen dataclasses:
  WordChunk:  one recognized token with its time span
  Transcript: the ordered chunks plus the optional full recognized text
  Phrase:     a run of chunks grouped into one subtitle cue

RULES:
- All times are float seconds
- WordChunk.text keeps recognizer whitespace; trimming happens downstream
- Transcript.to_dict() key order: "text" (when present), "chunks", then any
  other recognizer keys in source order; each chunk is "text", "timestamp",
  then its own extra keys
- Unknown keys, such as a top-level "language" or a per-chunk "speaker",
  are kept in ``extra`` and written back unchanged
- Phrase objects are derived per export call and never persisted
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class WordChunk:
    """A single recognized token with its start/end time.

    RULES:
    - timestamp: (start, end) in seconds, start <= end once validated
    - text: raw recognizer text, may carry a leading space (" world")
    """

    text: str
    timestamp: Tuple[float, float]
    extra: Dict[str, Any] = field(default_factory=dict, hash=False)

    @property
    def start(self) -> float:
        return self.timestamp[0]

    @property
    def end(self) -> float:
        return self.timestamp[1]

    def to_dict(self) -> Dict[str, Any]:
        data = {"text": self.text, "timestamp": [self.start, self.end]}  # type: Dict[str, Any]
        data.update(self.extra)
        return data


@dataclass(frozen=True)
class Transcript:
    """The complete word-level transcript handed over by the recognizer.

    WHY: This is the top-level container every formatter receives. The
    JSON export writes it back out, so the optional full ``text`` string
    that Whisper-style pipelines emit alongside the chunks is kept too.

    RULES:
    - chunks: ordered by start time as supplied; never re-sorted
    - text: None when the source object had no top-level "text"
    - extra: every other top-level key, in source order
    """

    chunks: Tuple[WordChunk, ...]
    text: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict, hash=False)

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready structure with a stable key order."""
        data = {}  # type: Dict[str, Any]
        if self.text is not None:
            data["text"] = self.text
        data["chunks"] = [chunk.to_dict() for chunk in self.chunks]
        data.update(self.extra)
        return data


@dataclass(frozen=True)
class Phrase:
    """A group of consecutive chunks displayed as one subtitle cue.

    RULES:
    - text: trimmed chunk texts joined by a single space
    - start: start of the first chunk, end: end of the last chunk
    """

    text: str
    start: float
    end: float
