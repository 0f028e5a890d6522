"""Styling pipeline: SRT text in, styled and rescaled ASS text out.

WHY: The engine stages must run in a fixed order around the external
converter. This module wires them together so the CLI, the request
handler and tests all run exactly the same sequence.

HOW: SubtitleStyler receives its converter in the constructor. render()
normalizes the cues, applies orientation casing, writes the SRT into a
fresh temporary directory, runs the converter, reads the ASS back as bytes
(keeping its CRLF line endings), then applies the style override and the
canvas rescale.

RULES:
- Stages run in order: normalize, orientation, convert, style, canvas
- Temporary files are always removed, on success or failure
- Every error propagates; no partial output, nothing retried
- No state is kept between render() calls
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import Optional

from subtitle_styler.converters.base import BaseConverter
from subtitle_styler.core.canvas import rescale_canvas
from subtitle_styler.core.cues import apply_orientation, normalize_cues
from subtitle_styler.core.ir import Resolution, StyleOverride
from subtitle_styler.core.styles import apply_style_override

logger = logging.getLogger(__name__)

SRT_FILENAME = "subtitles.srt"
ASS_FILENAME = "subtitles.ass"


class SubtitleStyler:
    """Run the full styling pipeline with an injected converter."""

    def __init__(self, converter: BaseConverter) -> None:
        self.converter = converter

    def prepare_cues(self, srt_text: str, resolution: Resolution) -> str:
        """Normalize cue text and apply orientation casing."""
        srt = normalize_cues(srt_text)
        return apply_orientation(srt, resolution)

    def render(
        self,
        srt_text: str,
        resolution: Resolution,
        override: Optional[StyleOverride] = None,
    ) -> str:
        """Produce the final ASS document for ``srt_text``.

        Args:
            srt_text: Raw SRT text as fetched from storage.
            resolution: Target video frame size.
            override: Optional font/margin overrides.

        Returns:
            The styled ASS document.

        Raises:
            ConversionError: If the converter fails.
            ConversionTimeoutError: If the converter exceeds its deadline.
            StyleRecordError: If a Style record is malformed.
            CanvasPreconditionError: If the default canvas is not declared.
        """
        override = override or StyleOverride()
        srt = self.prepare_cues(srt_text, resolution)
        logger.debug(
            "Prepared %d chars of SRT for %s video (vertical=%s)",
            len(srt), resolution, resolution.is_vertical,
        )

        with tempfile.TemporaryDirectory(prefix="subtitle-styler-") as tmp:
            srt_path = Path(tmp) / SRT_FILENAME
            ass_path = Path(tmp) / ASS_FILENAME
            srt_path.write_text(srt, encoding="utf-8")

            self.converter.convert(srt_path, ass_path)
            ass = ass_path.read_bytes().decode("utf-8")

        if override.is_empty():
            logger.debug("No style override given; keeping converter styles")
        styled = apply_style_override(ass, override)
        return rescale_canvas(styled, resolution)
