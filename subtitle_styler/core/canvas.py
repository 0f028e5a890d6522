"""Canvas Rescaler: pick PlayResX/PlayResY matching the video's aspect ratio.

WHY: ASS font sizes and margins are expressed in canvas units, not pixels.
ffmpeg always declares a 384x288 canvas, so on a 9:16 video the renderer
stretches text that was sized for 4:3. Keeping the canvas *area* fixed while
matching the video's aspect ratio means a font size picked once looks the
same on landscape, portrait and square video.

HOW: With ratio = width / height and area = 384 * 288, solve
width * height = area and width / height = ratio:
  height = sqrt(area / ratio), width = ratio * height
Both are rounded half away from zero, then substituted for the default
declarations in the document.

RULES:
- Only the first ``PlayResX: 384`` / ``PlayResY: 288`` are replaced
- Missing defaults raise CanvasPreconditionError (the converter's output
  format changed); callers may catch it
"""

from __future__ import annotations

import logging
import math
import re
from typing import Tuple

from subtitle_styler.config import (
    DEFAULT_CANVAS_AREA,
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
)
from subtitle_styler.core.ir import Resolution

logger = logging.getLogger(__name__)

# The lookahead stops "PlayResX: 384" from matching "PlayResX: 3840".
_PLAY_RES_X_RE = re.compile(r"PlayResX: {}(?![0-9])".format(DEFAULT_CANVAS_WIDTH))
_PLAY_RES_Y_RE = re.compile(r"PlayResY: {}(?![0-9])".format(DEFAULT_CANVAS_HEIGHT))


class CanvasPreconditionError(ValueError):
    """Raised when the document does not declare the default canvas.

    RULES:
    - Signals an upstream format change, not bad user input
    - Message names both expected declarations
    """


def _round_half_away(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_canvas(resolution: Resolution) -> Tuple[int, int]:
    """Return (width, height) of a canvas with the video's aspect ratio.

    Example: 1920x1080 -> (443, 249); 1080x1920 -> (249, 443).
    """
    ratio = resolution.width / resolution.height
    height = math.sqrt(DEFAULT_CANVAS_AREA / ratio)
    width = ratio * height
    return _round_half_away(width), _round_half_away(height)


def rescale_canvas(document: str, resolution: Resolution) -> str:
    """Replace the default canvas declarations of an ASS document.

    Raises:
        CanvasPreconditionError: If ``PlayResX: 384`` or ``PlayResY: 288``
            is not present.
    """
    if not _PLAY_RES_X_RE.search(document) or not _PLAY_RES_Y_RE.search(document):
        raise CanvasPreconditionError(
            "Resolution in generated .ass file is not the expected "
            "PlayResX: {} / PlayResY: {}".format(DEFAULT_CANVAS_WIDTH, DEFAULT_CANVAS_HEIGHT)
        )

    new_x, new_y = compute_canvas(resolution)
    logger.debug("Canvas for %s video: %dx%d", resolution, new_x, new_y)

    result = _PLAY_RES_X_RE.sub("PlayResX: {}".format(new_x), document, count=1)
    result = _PLAY_RES_Y_RE.sub("PlayResY: {}".format(new_y), result, count=1)
    return result
