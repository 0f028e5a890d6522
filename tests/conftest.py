"""Shared test fixtures for the subtitle_styler test suite.

WHY: Several test modules need the same ASS document (what ffmpeg writes
for an SRT input) and a converter that does not need ffmpeg installed.
Centralizing them keeps every test on the same reference document.

HOW: SAMPLE_ASS mirrors ffmpeg's SRT-to-ASS output: default 384x288
canvas, one 23-field Default style, and an Events section. FakeConverter
writes a fixed ASS document and records the SRT it was given.

RULES:
- SAMPLE_ASS must keep ffmpeg's exact PlayResX/PlayResY declarations
- FakeConverter never spawns a process
"""

from pathlib import Path
from typing import List, Optional

import pytest

from subtitle_styler.converters.base import BaseConverter, ConversionError


SAMPLE_STYLE_LINE = (
    "Style: Default,Arial,16,&Hffffff,&Hffffff,&H0,&H0,0,0,0,0,"
    "100,100,0,0,1,1,0,2,10,10,10,1"
)

SAMPLE_ASS = "\n".join([
    "[Script Info]",
    "; Script generated by FFmpeg/Lavc60.31.102",
    "ScriptType: v4.00+",
    "PlayResX: 384",
    "PlayResY: 288",
    "ScaledBorderAndShadow: yes",
    "YCbCr Matrix: None",
    "",
    "[V4+ Styles]",
    "Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, "
    "BackColour, Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, Angle, "
    "BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, MarginV, Encoding",
    SAMPLE_STYLE_LINE,
    "",
    "[Events]",
    "Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text",
    "Dialogue: 0,0:00:01.00,0:00:02.00,Default,,0,0,0,,Hello\\Nworld",
    "",
])

SAMPLE_SRT = (
    "1\n\n00:00:01,000 --> 00:00:02,000\n\nHello\n\nworld\n\n\n"
    "2\n\n00:00:03,000 --> 00:00:04,000\nSecond\n\ncaption\n"
)


class FakeConverter(BaseConverter):
    """Converter double that writes a fixed ASS document."""

    def __init__(self, ass_text: str = SAMPLE_ASS, error: Optional[Exception] = None) -> None:
        self.ass_text = ass_text
        self.error = error
        self.received: List[str] = []
        self.checked = False

    @property
    def name(self) -> str:
        return "fake"

    def check_available(self) -> None:
        self.checked = True

    def convert(self, srt_path: Path, ass_path: Path) -> None:
        self.received.append(srt_path.read_text(encoding="utf-8"))
        if self.error is not None:
            raise self.error
        ass_path.write_bytes(self.ass_text.encode("utf-8"))


@pytest.fixture
def sample_ass():
    """ASS document as produced by ffmpeg for a two-cue SRT."""
    return SAMPLE_ASS


@pytest.fixture
def sample_srt():
    """Malformed SRT with stray blank lines inside both cues."""
    return SAMPLE_SRT


@pytest.fixture
def fake_converter():
    """A FakeConverter returning SAMPLE_ASS."""
    return FakeConverter()


@pytest.fixture
def failing_converter():
    """A FakeConverter that fails like ffmpeg on unreadable input."""
    return FakeConverter(error=ConversionError(
        "Failed ffmpeg convert subtitles.",
        "subtitles.srt: Invalid data found when processing input\n",
    ))


@pytest.fixture
def sample_style_line():
    """The Default style record inside SAMPLE_ASS."""
    return SAMPLE_STYLE_LINE


@pytest.fixture
def make_converter():
    """Factory for FakeConverter instances with a custom ASS document."""
    return FakeConverter
