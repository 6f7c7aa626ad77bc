"""Tests for the command-line interface (cli.py).

WHY: The CLI is how transcripts are exported in scripts and batch jobs.
It must write the right files, never overwrite earlier output, and fail
with exit code 1 and a readable message on bad input.

HOW: main() is called with an explicit argv list against files in
pytest's tmp_path. stdout/stderr are captured with capsys.

RULES:
- No test reads or writes outside tmp_path
- Exit codes are checked through SystemExit
"""

import io
import json

import pytest

from transcript_exporter.cli import build_parser, main


@pytest.fixture
def transcript_file(tmp_path, sample_transcript_dict):
    path = tmp_path / "talk.json"
    path.write_text(json.dumps(sample_transcript_dict), encoding="utf-8")
    return path


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args(["talk.json"])
        assert args.input_file == "talk.json"
        assert args.formats is None
        assert args.stdout is False

    def test_rejects_unknown_granularity(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["talk.json", "--granularity", "sentence"])


class TestExport:

    def test_writes_all_formats_next_to_input(self, transcript_file, tmp_path):
        main([str(transcript_file)])
        assert (tmp_path / "transcript.json").is_file()
        assert (tmp_path / "subtitles.vtt").is_file()
        assert (tmp_path / "subtitles.srt").is_file()

    def test_selected_formats_only(self, transcript_file, tmp_path):
        main([str(transcript_file), "--formats", "srt"])
        assert (tmp_path / "subtitles.srt").is_file()
        assert not (tmp_path / "subtitles.vtt").exists()

    def test_srt_content(self, transcript_file, tmp_path):
        main([str(transcript_file), "--formats", "srt"])
        content = (tmp_path / "subtitles.srt").read_text(encoding="utf-8")
        assert content.startswith("1\n00:00:00,000 --> 00:00:01,000\nHello world.\n\n")

    def test_output_dir(self, transcript_file, tmp_path):
        out_dir = tmp_path / "out"
        out_dir.mkdir()
        main([str(transcript_file), "--formats", "vtt", "--output-dir", str(out_dir)])
        assert (out_dir / "subtitles.vtt").is_file()

    def test_conflict_gets_numeric_suffix(self, transcript_file, tmp_path):
        (tmp_path / "subtitles.srt").write_text("keep me", encoding="utf-8")
        main([str(transcript_file), "--formats", "srt"])
        assert (tmp_path / "subtitles.srt").read_text(encoding="utf-8") == "keep me"
        assert (tmp_path / "subtitles-2.srt").is_file()

    def test_word_granularity(self, transcript_file, tmp_path):
        main([str(transcript_file), "--formats", "srt", "--granularity", "word"])
        content = (tmp_path / "subtitles.srt").read_text(encoding="utf-8")
        assert content.count(" --> ") == 6

    def test_status_on_stderr(self, transcript_file, capsys):
        main([str(transcript_file), "--formats", "json"])
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Saved: transcript.json" in captured.err


class TestStdout:

    def test_prints_single_format(self, transcript_file, capsys):
        main([str(transcript_file), "--formats", "vtt", "--stdout"])
        out = capsys.readouterr().out
        assert out.startswith("WEBVTT\n\n1\n")

    def test_reads_stdin(self, monkeypatch, capsys, sample_transcript_dict):
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(sample_transcript_dict)))
        main(["-", "--formats", "json", "--stdout"])
        assert '"timestamp": [0 0.5]' in capsys.readouterr().out

    def test_stdout_needs_one_format(self, transcript_file, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(transcript_file), "--stdout"])
        assert exc_info.value.code == 1
        assert "exactly one format" in capsys.readouterr().err


class TestErrors:

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "nope.json")])
        assert exc_info.value.code == 1
        assert "File not found" in capsys.readouterr().err

    def test_invalid_transcript(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text('{"chunks": [{"text": "a", "timestamp": [2, 1]}]}', encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main([str(path)])
        assert exc_info.value.code == 1
        assert "chunks[0].timestamp" in capsys.readouterr().err
        assert not (tmp_path / "subtitles.srt").exists()

    def test_unknown_format(self, transcript_file, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(transcript_file), "--formats", "docx"])
        assert exc_info.value.code == 1
        assert "Unknown format 'docx'" in capsys.readouterr().err

    def test_invalid_phrase_length(self, transcript_file, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(transcript_file), "--max-phrase-length", "0"])
        assert exc_info.value.code == 1
        assert "max_phrase_length" in capsys.readouterr().err

    def test_missing_output_dir(self, transcript_file, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(transcript_file), "--output-dir", str(tmp_path / "nowhere")])
        assert exc_info.value.code == 1
        assert "Output directory does not exist" in capsys.readouterr().err
