"""Configuration constants, format constants, and .env loading.

WHY: Centralizes every configurable value so it is easy to find, update,
and override. The ASS format constants (default canvas, style schema) are
plain data, not buried in logic, so a change in the converter's output
format is a one-line edit here.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level values. load_convert_timeout() gives a clear error when
the timeout variable is malformed.

RULES:
- FFMPEG_BINARY names the converter executable (default "ffmpeg")
- CONVERT_TIMEOUT_S is optional; unset means no deadline
- LOG_LEVEL defaults to INFO
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# ASS format constants
# ---------------------------------------------------------------------------

STYLES_SECTION_HEADER = "[V4+ Styles]"
STYLE_RECORD_PREFIX = "Style:"

STYLE_MIN_FIELDS = 23
"""Minimum number of comma-separated fields in a V4+ Style record."""

DEFAULT_CANVAS_WIDTH = 384
DEFAULT_CANVAS_HEIGHT = 288
"""PlayResX / PlayResY that ffmpeg writes when converting SRT to ASS."""

DEFAULT_CANVAS_AREA = DEFAULT_CANVAS_WIDTH * DEFAULT_CANVAS_HEIGHT

# ---------------------------------------------------------------------------
# Runtime defaults
# ---------------------------------------------------------------------------

FFMPEG_BINARY = os.getenv("FFMPEG_BINARY", "ffmpeg")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def load_convert_timeout() -> Optional[float]:
    """Load the conversion deadline (seconds) from the environment.

    RULES:
    - Unset or empty returns None (no deadline)
    - Raises ValueError for non-numeric or non-positive values
    """
    raw = os.getenv("CONVERT_TIMEOUT_S", "").strip()
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(
            "CONVERT_TIMEOUT_S must be a number of seconds, got {!r}".format(raw)
        ) from None
    if timeout <= 0:
        raise ValueError("CONVERT_TIMEOUT_S must be positive, got {!r}".format(raw))
    return timeout
