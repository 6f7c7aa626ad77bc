"""Abstract base formatter and output container.

WHY: Every output format consumes the same Transcript IR but produces
different file content. This base class enforces a consistent interface
so the CLI and the HTTP API can work with any formatter generically.

HOW: BaseFormatter is an ABC with two requirements: a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a download filename with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list; every current formatter returns one item
- ``filename`` is the suggested download name, e.g. ``"subtitles.vtt"``
- Formatters never mutate the Transcript
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from transcript_exporter.core.ir import Transcript


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        filename: Suggested file name, e.g. ``"transcript.json"``.
        content: The file content as a string.
        media_type: MIME type for the content, e.g. ``"text/vtt"``.
    """

    filename: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all output formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'WebVTT Subtitles'."""

    @abstractmethod
    def format(self, transcript: Transcript) -> List[FormatterOutput]:
        """Convert the Transcript IR into one or more output files."""
