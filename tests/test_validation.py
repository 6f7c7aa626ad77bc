"""Unit tests for transcript boundary validation (core.validation).

WHY: Validation is the only guard between recognizer output and the
time-code arithmetic. Every rejected shape must fail loudly with a path,
and every accepted transcript must come through unchanged.

RULES:
- Error messages are matched on the JSON path they name
"""

import json
import logging
import math

import pytest

from transcript_exporter.core.ir import Transcript, WordChunk
from transcript_exporter.core.validation import (
    TranscriptValidationError,
    load_transcript,
    loads_transcript,
    parse_transcript,
)


class TestParseTranscript:

    def test_builds_ir(self, sample_transcript_dict):
        transcript = parse_transcript(sample_transcript_dict)
        assert isinstance(transcript, Transcript)
        assert transcript.text == " Hello world. How are you? Fine"
        assert transcript.chunks[0] == WordChunk(text=" Hello", timestamp=(0.0, 0.5))
        assert len(transcript.chunks) == 6

    def test_round_trips_to_dict(self, sample_transcript_dict):
        assert parse_transcript(sample_transcript_dict).to_dict() == sample_transcript_dict

    def test_text_optional(self):
        transcript = parse_transcript({"chunks": [{"text": "hi", "timestamp": [1.2, 1.6]}]})
        assert transcript.text is None
        assert "text" not in transcript.to_dict()

    def test_empty_chunks(self):
        assert parse_transcript({"chunks": []}).chunks == ()

    def test_integer_timestamps_become_floats(self):
        transcript = parse_transcript({"chunks": [{"text": "a", "timestamp": [1, 2]}]})
        assert transcript.chunks[0].timestamp == (1.0, 2.0)
        assert isinstance(transcript.chunks[0].start, float)

    def test_unknown_keys_kept_as_extra(self):
        transcript = parse_transcript({
            "text": "a",
            "language": "en",
            "chunks": [{"text": "a", "timestamp": [0, 1], "speaker": 1, "confidence": 0.5}],
        })
        assert transcript.extra == {"language": "en"}
        assert transcript.chunks[0].extra == {"speaker": 1, "confidence": 0.5}

    def test_extra_keys_round_trip_to_dict(self):
        data = {
            "text": "a",
            "chunks": [{"text": "a", "timestamp": [0.0, 1.0], "speaker": "S1"}],
            "language": "en",
        }
        assert parse_transcript(data).to_dict() == data

    def test_extra_values_are_copied(self):
        data = {"chunks": [{"text": "a", "timestamp": [0.0, 1.0], "tags": ["x"]}]}
        transcript = parse_transcript(data)
        data["chunks"][0]["tags"].append("y")
        assert transcript.chunks[0].extra == {"tags": ["x"]}

    def test_zero_length_chunk_allowed(self):
        transcript = parse_transcript({"chunks": [{"text": "a", "timestamp": [2.0, 2.0]}]})
        assert transcript.chunks[0].start == transcript.chunks[0].end


class TestRejections:

    def test_not_an_object(self):
        with pytest.raises(TranscriptValidationError):
            parse_transcript([1, 2, 3])

    def test_missing_chunks(self):
        with pytest.raises(TranscriptValidationError, match="chunks"):
            parse_transcript({"text": "hi"})

    def test_missing_timestamp(self):
        with pytest.raises(TranscriptValidationError, match=r"chunks\[1\]"):
            parse_transcript({"chunks": [
                {"text": "a", "timestamp": [0.0, 0.5]},
                {"text": "b"},
            ]})

    def test_non_numeric_timestamp(self):
        with pytest.raises(TranscriptValidationError, match=r"chunks\[0\]\.timestamp\[1\]"):
            parse_transcript({"chunks": [{"text": "a", "timestamp": [0.0, "soon"]}]})

    def test_null_end_time(self):
        with pytest.raises(TranscriptValidationError):
            parse_transcript({"chunks": [{"text": "a", "timestamp": [0.0, None]}]})

    def test_wrong_timestamp_length(self):
        with pytest.raises(TranscriptValidationError, match=r"chunks\[0\]\.timestamp"):
            parse_transcript({"chunks": [{"text": "a", "timestamp": [0.0, 0.5, 1.0]}]})

    def test_negative_time(self):
        with pytest.raises(TranscriptValidationError):
            parse_transcript({"chunks": [{"text": "a", "timestamp": [-1.0, 0.5]}]})

    def test_start_after_end(self):
        with pytest.raises(TranscriptValidationError, match=r"chunks\[0\]\.timestamp: start 2.0 is after end 1.0"):
            parse_transcript({"chunks": [{"text": "a", "timestamp": [2.0, 1.0]}]})

    @pytest.mark.parametrize("bad", [math.nan, math.inf])
    def test_non_finite(self, bad):
        with pytest.raises(TranscriptValidationError, match="finite"):
            parse_transcript({"chunks": [{"text": "a", "timestamp": [0.0, bad]}]})

    def test_boolean_is_not_a_number(self):
        with pytest.raises(TranscriptValidationError):
            parse_transcript({"chunks": [{"text": "a", "timestamp": [True, 1.0]}]})

    def test_error_is_value_error_with_path(self):
        with pytest.raises(ValueError) as exc_info:
            parse_transcript({"chunks": [{"text": 5, "timestamp": [0.0, 1.0]}]})
        assert exc_info.value.path == "chunks[0].text"


class TestOrdering:

    def test_decreasing_start_accepted_with_warning(self, caplog):
        data = {"chunks": [
            {"text": "a", "timestamp": [1.0, 1.5]},
            {"text": "b", "timestamp": [0.5, 0.75]},
        ]}
        with caplog.at_level(logging.WARNING, logger="transcript_exporter.core.validation"):
            transcript = parse_transcript(data)
        assert len(transcript.chunks) == 2
        assert "Chunk 1 starts at 0.5" in caplog.text


class TestLoading:

    def test_loads_transcript(self, sample_transcript_dict):
        transcript = loads_transcript(json.dumps(sample_transcript_dict))
        assert len(transcript.chunks) == 6

    def test_loads_invalid_json(self):
        with pytest.raises(TranscriptValidationError, match="invalid JSON"):
            loads_transcript('{"chunks": [')

    def test_load_transcript_from_file(self, tmp_path, sample_transcript_dict):
        path = tmp_path / "transcript.json"
        path.write_text(json.dumps(sample_transcript_dict), encoding="utf-8")
        assert load_transcript(path).text == sample_transcript_dict["text"]

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_transcript(tmp_path / "missing.json")
