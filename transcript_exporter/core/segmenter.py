"""Phrase segmentation: word chunks → subtitle phrases.

WHY: A cue per word flickers past too fast to read. Viewers need words
grouped into short phrases that break at sentence ends and at pauses,
and that never grow past a readable length.

HOW: A single left-to-right fold. The accumulator holds the chunks of the
phrase being built and its start time. For each incoming chunk,
should_close_phrase() inspects the last buffered chunk; when any trigger
fires, the buffer is emitted as a Phrase and a new buffer starts with the
incoming chunk. Leftover chunks are flushed at the end.

RULES:
- Punctuation trigger: last buffered text (trimmed) ends with ".", "!" or "?"
- Gap trigger: chunk.start - last.end > gap_threshold_s (strictly greater)
- Length trigger: buffer already holds max_phrase_length chunks
- Zero or negative gaps never close a phrase; chunks are not re-sorted
- Phrase.text joins trimmed chunk texts with a single space
- granularity="word" emits one phrase per chunk, no grouping
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from transcript_exporter.config import (
    DEFAULT_GAP_THRESHOLD_S,
    DEFAULT_GRANULARITY,
    DEFAULT_MAX_PHRASE_CHUNKS,
    GRANULARITIES,
)
from transcript_exporter.core.ir import Phrase, WordChunk

logger = logging.getLogger(__name__)

# Trimmed chunk text ending in one of these closes the phrase after it.
_SENTENCE_ENDINGS = (".", "!", "?")


@dataclass(frozen=True)
class SegmentationConfig:
    """How chunks are grouped into cues.

    RULES:
    - granularity: "word" (one cue per chunk) or "phrase" (grouped)
    - max_phrase_length: at least 1 chunk
    - gap_threshold_s: non-negative seconds
    """

    granularity: str = field(default=DEFAULT_GRANULARITY)
    max_phrase_length: int = field(default=DEFAULT_MAX_PHRASE_CHUNKS)
    gap_threshold_s: float = field(default=DEFAULT_GAP_THRESHOLD_S)

    def __post_init__(self) -> None:
        if self.granularity not in GRANULARITIES:
            raise ValueError(
                "Unknown granularity '{}'. Available: {}".format(
                    self.granularity, ", ".join(GRANULARITIES)
                )
            )
        if self.max_phrase_length < 1:
            raise ValueError(
                "max_phrase_length must be at least 1, got {}".format(self.max_phrase_length)
            )
        if self.gap_threshold_s < 0:
            raise ValueError(
                "gap_threshold_s must be non-negative, got {}".format(self.gap_threshold_s)
            )


@dataclass(frozen=True)
class PhraseAccumulator:
    """Fold state: the chunks of the open phrase and when it started."""

    buffer: Tuple[WordChunk, ...] = ()
    phrase_start: Optional[float] = None


def should_close_phrase(
    buffer: Tuple[WordChunk, ...],
    chunk: WordChunk,
    config: SegmentationConfig,
) -> bool:
    """Decide whether the open phrase ends before ``chunk``.

    Any one trigger is enough: sentence punctuation on the last buffered
    chunk, a pause longer than the gap threshold, or a full buffer.
    """
    if not buffer:
        return False
    last = buffer[-1]
    if last.text.strip().endswith(_SENTENCE_ENDINGS):
        return True
    if chunk.start - last.end > config.gap_threshold_s:
        return True
    return len(buffer) >= config.max_phrase_length


def build_phrase(buffer: Tuple[WordChunk, ...], phrase_start: float) -> Phrase:
    """Join buffered chunks into one Phrase ending at the last chunk's end."""
    return Phrase(
        text=" ".join(chunk.text.strip() for chunk in buffer),
        start=phrase_start,
        end=buffer[-1].end,
    )


def step(
    acc: PhraseAccumulator,
    chunk: WordChunk,
    config: SegmentationConfig,
) -> Tuple[PhraseAccumulator, Optional[Phrase]]:
    """Advance the fold by one chunk.

    Returns the next accumulator and the phrase closed by this chunk, if
    any. The input accumulator is left untouched.
    """
    if not acc.buffer or acc.phrase_start is None:
        return PhraseAccumulator(buffer=(chunk,), phrase_start=chunk.start), None

    if should_close_phrase(acc.buffer, chunk, config):
        closed = build_phrase(acc.buffer, acc.phrase_start)
        return PhraseAccumulator(buffer=(chunk,), phrase_start=chunk.start), closed

    return PhraseAccumulator(buffer=acc.buffer + (chunk,), phrase_start=acc.phrase_start), None


def segment_chunks(
    chunks: Iterable[WordChunk],
    config: Optional[SegmentationConfig] = None,
) -> List[Phrase]:
    """Group ordered word chunks into subtitle phrases.

    Args:
        chunks: Word chunks in playback order.
        config: Segmentation strategy. Defaults to SegmentationConfig().

    Returns:
        Phrases in playback order; empty input gives an empty list.
    """
    if config is None:
        config = SegmentationConfig()

    if config.granularity == "word":
        return [Phrase(text=c.text.strip(), start=c.start, end=c.end) for c in chunks]

    phrases = []  # type: List[Phrase]
    acc = PhraseAccumulator()
    for chunk in chunks:
        acc, closed = step(acc, chunk, config)
        if closed is not None:
            phrases.append(closed)

    if acc.buffer and acc.phrase_start is not None:
        phrases.append(build_phrase(acc.buffer, acc.phrase_start))

    logger.debug("Segmented transcript into %d phrases", len(phrases))
    return phrases
