"""SRT cue normalization and orientation casing.

WHY: SRT files arrive hand-edited or exported from docs, with stray blank
lines inside cue text, missing blank separators between cues, and leading
whitespace. ffmpeg's SRT demuxer misreads such files (text lines vanish or
two cues merge). Repairing the layout first makes the conversion reliable.

HOW: normalize_cues() makes a single forward pass with one line of
lookahead. A bare integer line is held back as a pending index; it is only
written once the next non-empty line arrives, and if that line is a timing
line a blank separator is written before it. apply_orientation() then
upper-cases the text for vertical or square video.

RULES:
- Lines that strip to empty are always dropped
- Exactly one blank line between cues, none inside a cue
- Indices are never renumbered and timings never validated
- A bare integer on the last non-empty line is dropped (known behavior,
  kept because downstream consumers may depend on it)
- Never raises; empty input returns ""
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from subtitle_styler.core.ir import CueBlock, Resolution

logger = logging.getLogger(__name__)

TIMING_RE = re.compile(r"[0-9]{2}:[0-9]{2}:[0-9]{2},[0-9]{3} --> [0-9]{2}:[0-9]{2}:[0-9]{2},[0-9]{3}")
_INDEX_RE = re.compile(r"[+-]?[0-9]+")


def _is_index(line: str) -> bool:
    return _INDEX_RE.fullmatch(line) is not None


def normalize_cues(text: str) -> str:
    """Repair blank-line and whitespace faults in SRT text.

    Args:
        text: Raw SRT text, possibly malformed.

    Returns:
        Canonical SRT text without a trailing newline.
    """
    out: List[str] = []
    pending: Optional[str] = None

    for raw in text.split("\n"):
        line = raw.strip()
        if not line:
            continue

        if pending is not None:
            if out and TIMING_RE.search(line):
                out.append("")
            out.append(pending)
            pending = None

        if _is_index(line):
            pending = line
        else:
            out.append(line)

    if pending is not None:
        logger.debug("Dropping trailing bare index line %r", pending)

    return "\n".join(out)


def parse_cue_blocks(text: str) -> List[CueBlock]:
    """Split canonical SRT text into CueBlock objects.

    Expects the output of normalize_cues(). Blocks with fewer than two
    lines (index + timing) are skipped.
    """
    blocks: List[CueBlock] = []
    for chunk in text.split("\n\n"):
        lines = chunk.split("\n")
        if len(lines) < 2:
            continue
        blocks.append(CueBlock(index=lines[0], timing=lines[1], lines=lines[2:]))
    return blocks


def render_cue_blocks(blocks: List[CueBlock]) -> str:
    return "\n\n".join(block.render() for block in blocks)


def apply_orientation(text: str, resolution: Resolution) -> str:
    """Upper-case cue text for vertical or square video.

    Index and timing lines contain only digits and punctuation, so casing
    the whole document only affects cue text.
    """
    if resolution.is_vertical:
        return text.upper()
    return text
