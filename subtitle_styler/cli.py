"""Command-line interface for the Subtitle Styler.

WHY: Editors and scripts need to turn an SRT file into a styled ASS file
for a given video size without deploying the serverless step. The CLI
wires the same pipeline the request handler uses behind a single command.

HOW: Uses argparse to accept the input SRT, the target resolution, style
overrides, and converter settings. Builds an FFmpegConverter explicitly,
checks that it runs, renders the ASS and writes it next to the input (or
to --output). Status messages go to stderr.

RULES:
- Positional argument: input SRT file path
- --resolution is required, format WxH
- Default output: {stem}.ass next to the input
- Status output goes to stderr (not stdout)
- Exit 1 on input, engine or conversion errors; 130 on Ctrl-C
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from subtitle_styler.config import FFMPEG_BINARY, LOG_LEVEL, load_convert_timeout
from subtitle_styler.converters import ConversionError, FFmpegConverter
from subtitle_styler.core.ir import Resolution, StyleOverride
from subtitle_styler.pipeline import SubtitleStyler


def _status(msg: str) -> None:
    """Print a status message to stderr, flushed."""
    print(msg, file=sys.stderr, flush=True)


def _resolve_output_path(input_path: Path, output: Optional[str]) -> Path:
    if output:
        return Path(output).resolve()
    return input_path.with_suffix(".ass")


def _resolve_timeout(value: Optional[float]) -> Optional[float]:
    """Return the --timeout value, falling back to CONVERT_TIMEOUT_S."""
    if value is None:
        return load_convert_timeout()
    if value <= 0:
        raise ValueError("--timeout must be positive, got {}".format(value))
    return value


def _run(args: argparse.Namespace) -> int:
    """Execute the styling pipeline for parsed CLI arguments.

    RULES:
    - Validate input file and resolution before starting ffmpeg
    - The converter self-test runs before conversion
    - Returns the process exit code
    """
    input_path = Path(args.input_file).resolve()
    if not input_path.is_file():
        _status("Error: File not found: {}".format(input_path))
        return 1

    try:
        resolution = Resolution.parse(args.resolution)
        timeout_s = _resolve_timeout(args.timeout)
    except ValueError as e:
        _status("Error: {}".format(e))
        return 1

    output_path = _resolve_output_path(input_path, args.output)
    if not output_path.parent.is_dir():
        _status("Error: Output directory does not exist: {}".format(output_path.parent))
        return 1

    override = StyleOverride(
        font_name=args.font_name,
        font_size=args.font_size,
        text_height=args.text_height,
        font_weight=args.font_weight,
    )
    converter = FFmpegConverter(binary=args.ffmpeg, timeout_s=timeout_s)
    styler = SubtitleStyler(converter)

    try:
        converter.check_available()
        _status("Styling {} for {} video...".format(input_path.name, resolution))
        srt_text = input_path.read_text(encoding="utf-8")
        ass_text = styler.render(srt_text, resolution, override)
        output_path.write_text(ass_text, encoding="utf-8")
    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        return 130
    except (ConversionError, TimeoutError, ValueError, OSError) as e:
        _status("Error: {}".format(e))
        return 1

    _status("Saved: {}".format(output_path))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="subtitle_styler",
        description="Normalize an SRT file, convert it to ASS with ffmpeg, and "
                    "apply font styling and canvas scaling for a target video size.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the SRT file to style.",
    )

    parser.add_argument(
        "--resolution",
        required=True,
        help="Target video resolution as WxH, e.g. 1080x1920.",
    )

    parser.add_argument(
        "--output",
        default=None,
        help="Path for the ASS output (default: input path with .ass suffix).",
    )

    parser.add_argument("--font-name", default=None, help="Font family for all styles.")
    parser.add_argument("--font-size", type=int, default=None, help="Font size in canvas units.")
    parser.add_argument(
        "--font-weight",
        type=int,
        default=None,
        help="Bold field value (-1 for bold, or a weight such as 700).",
    )
    parser.add_argument(
        "--text-height",
        default=None,
        help="Vertical margin (MarginV) for all styles.",
    )

    parser.add_argument(
        "--ffmpeg",
        default=FFMPEG_BINARY,
        help="ffmpeg executable (default: %(default)s).",
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Conversion deadline in seconds (default: CONVERT_TIMEOUT_S or none).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``python -m subtitle_styler`` and the console script."""
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    parser = build_parser()
    args = parser.parse_args(argv)
    sys.exit(_run(args))


if __name__ == "__main__":
    main()
