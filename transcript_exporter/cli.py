"""Command-line interface for the Transcript Exporter.

WHY: Users need a simple way to turn a recognizer's word-level JSON into
subtitle files from the terminal or a shell script, without a browser.

HOW: Uses argparse to accept an input transcript (path or "-" for stdin),
output format selection, segmentation options and an output directory.
The transcript is validated, each selected formatter runs, and the files
are saved. Status messages go to stderr; with --stdout the single
selected artifact is printed instead of saved.

RULES:
- Positional argument: transcript JSON path, or "-" to read stdin
- --formats: comma-separated formatter keys (default: all registered)
- Output naming: formatter filename, numeric suffix on conflict
  (subtitles.srt → subtitles-2.srt); existing files are never overwritten
- --stdout requires exactly one format
- Exit codes: 0 = success, 1 = error
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from transcript_exporter.config import (
    DEFAULT_GAP_THRESHOLD_S,
    DEFAULT_GRANULARITY,
    DEFAULT_MAX_PHRASE_CHUNKS,
    GRANULARITIES,
    configure_logging,
)
from transcript_exporter.core.segmenter import SegmentationConfig
from transcript_exporter.core.validation import load_transcript, loads_transcript
from transcript_exporter.formatters import FORMATTERS, export_transcript
from transcript_exporter.formatters.base import FormatterOutput


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(filename: str, output_dir: Path) -> Path:
    """Resolve the output file path, adding a numeric suffix on conflict.

    RULES:
    - First attempt: {filename} (e.g. subtitles.srt)
    - Conflict: insert a counter before the extension (subtitles-2.srt)
    - Counter starts at 2 and increments
    """
    base_path = output_dir / filename
    if not base_path.exists():
        return base_path

    dot_idx = filename.rfind(".")
    if dot_idx > 0:
        name = filename[:dot_idx]
        ext = filename[dot_idx:]
    else:
        name = filename
        ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}-{}{}".format(name, counter, ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(output: FormatterOutput, output_dir: Path) -> Path:
    path = _resolve_output_path(output.filename, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def _parse_formats(raw: Optional[str]) -> List[str]:
    if not raw:
        return list(FORMATTERS.keys())
    keys = [f.strip().lower() for f in raw.split(",") if f.strip()]
    for key in keys:
        if key not in FORMATTERS:
            _fail("Unknown format '{}'. Available formats: {}".format(
                key, ", ".join(sorted(FORMATTERS.keys()))
            ))
    return keys


def run(args: argparse.Namespace) -> List[Path]:
    """Validate the transcript, run the selected formatters, save or print.

    Returns the saved paths (empty with --stdout).
    """
    format_keys = _parse_formats(args.formats)
    if args.stdout and len(format_keys) != 1:
        _fail("--stdout needs exactly one format, got {}".format(len(format_keys)))

    try:
        segmentation = SegmentationConfig(
            granularity=args.granularity,
            max_phrase_length=args.max_phrase_length,
            gap_threshold_s=args.gap_threshold,
        )
    except ValueError as e:
        _fail(str(e))

    try:
        if args.input_file == "-":
            transcript = loads_transcript(sys.stdin.read())
            default_dir = Path.cwd()
        else:
            input_path = Path(args.input_file).resolve()
            if not input_path.is_file():
                _fail("File not found: {}".format(input_path))
            transcript = load_transcript(input_path)
            default_dir = input_path.parent
    except (ValueError, OSError) as e:
        _fail(str(e))

    _status("Loaded {} chunks".format(len(transcript.chunks)))

    if args.stdout:
        output = export_transcript(transcript, format_keys[0], segmentation)
        sys.stdout.write(output.content)
        return []

    output_dir = Path(args.output_dir).resolve() if args.output_dir else default_dir
    if not output_dir.is_dir():
        _fail("Output directory does not exist: {}".format(output_dir))

    saved_files = []  # type: List[Path]
    for key in format_keys:
        output = export_transcript(transcript, key, segmentation)
        try:
            saved_path = _save_output(output, output_dir)
        except OSError as e:
            _fail("Could not write {}: {}".format(output.filename, e))
        saved_files.append(saved_path)
        _status("  Saved: {}".format(saved_path.name))

    _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))
    return saved_files


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without running the pipeline.
    """
    parser = argparse.ArgumentParser(
        prog="transcript-export",
        description="Export a word-level transcript as JSON, WebVTT and SRT.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the transcript JSON file, or '-' to read stdin.",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: all.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: next to the input file).",
    )

    parser.add_argument(
        "--granularity",
        choices=GRANULARITIES,
        default=DEFAULT_GRANULARITY,
        help="One subtitle cue per word or per phrase (default: %(default)s).",
    )

    parser.add_argument(
        "--max-phrase-length",
        type=int,
        default=DEFAULT_MAX_PHRASE_CHUNKS,
        help="Maximum words per phrase cue (default: %(default)s).",
    )

    parser.add_argument(
        "--gap-threshold",
        type=float,
        default=DEFAULT_GAP_THRESHOLD_S,
        help="Pause in seconds that starts a new phrase (default: %(default)s).",
    )

    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the single selected format to stdout instead of saving.",
    )

    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: LOG_LEVEL from the environment, or WARNING).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``transcript-export`` console script.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    run(args)


if __name__ == "__main__":
    main()
