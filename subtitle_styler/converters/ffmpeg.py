"""ffmpeg-backed SRT-to-ASS converter.

WHY: ffmpeg's subtitle muxer is the tool that later burns the ASS track
into video, so converting with the same tool guarantees the output is
something the burn step can read.

HOW: Each conversion runs one child process,
``ffmpeg -loglevel error -i <srt> <ass>``, with stderr captured. A
non-zero exit becomes ConversionError carrying that stderr verbatim. An
optional deadline is enforced by subprocess.run(timeout=...), which kills
the child before re-raising.

RULES:
- Constructed explicitly with its binary and timeout; no module singleton
- One child process per conversion, never retried
- stderr is surfaced verbatim in the raised error
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional

from subtitle_styler.converters.base import (
    BaseConverter,
    ConversionError,
    ConversionTimeoutError,
    ConverterUnavailableError,
)

logger = logging.getLogger(__name__)


class FFmpegConverter(BaseConverter):
    """Convert SRT to ASS by running the ffmpeg CLI.

    Args:
        binary: ffmpeg executable name or path.
        timeout_s: Deadline for a single conversion in seconds, or None.
    """

    def __init__(self, binary: str = "ffmpeg", timeout_s: Optional[float] = None) -> None:
        self.binary = binary
        self.timeout_s = timeout_s

    @property
    def name(self) -> str:
        return "ffmpeg"

    def _run(self, args: List[str]) -> subprocess.CompletedProcess:
        cmd = [self.binary] + args
        logger.debug("FFMPEG args: %s", " ".join(args))
        try:
            return subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                timeout=self.timeout_s,
            )
        except FileNotFoundError as e:
            raise ConverterUnavailableError(
                "ffmpeg binary not found: {}".format(self.binary)
            ) from e
        except subprocess.TimeoutExpired as e:
            logger.error("ffmpeg timed out after %ss", self.timeout_s)
            raise ConversionTimeoutError(
                "ffmpeg did not finish within {}s".format(self.timeout_s)
            ) from e

    def check_available(self) -> None:
        logger.debug("Testing ffmpeg commands")
        result = self._run(["-version"])
        if result.returncode != 0:
            raise ConverterUnavailableError("Failed initial ffmpeg test", result.stderr)

    def convert(self, srt_path: Path, ass_path: Path) -> None:
        result = self._run(["-loglevel", "error", "-i", str(srt_path), str(ass_path)])
        if result.returncode != 0:
            logger.error("ffmpeg exited with status %d", result.returncode)
            raise ConversionError(
                "Failed ffmpeg convert subtitles. in={} out={}".format(srt_path, ass_path),
                result.stderr,
            )
