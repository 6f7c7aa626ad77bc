"""Player-facing lookups over transcript chunks.

WHY: A transcript view next to a media player underlines the word being
spoken, seeks when a word is clicked and shows the word's time span on
hover. Those rules belong with the data, not scattered through UI code.

RULES:
- A chunk is active when start <= current_time < end (end exclusive)
- Clicking a chunk seeks to its start
- Hover label: both times with two decimals, joined by " → "
"""

from __future__ import annotations

from typing import Optional, Sequence

from transcript_exporter.core.ir import WordChunk


def active_chunk_index(chunks: Sequence[WordChunk], current_time: float) -> Optional[int]:
    """Return the index of the first chunk playing at ``current_time``, or None."""
    for index, chunk in enumerate(chunks):
        if chunk.start <= current_time < chunk.end:
            return index
    return None


def seek_time(chunk: WordChunk) -> float:
    return chunk.start


def timestamp_label(chunk: WordChunk) -> str:
    return "{:.2f} → {:.2f}".format(chunk.start, chunk.end)
