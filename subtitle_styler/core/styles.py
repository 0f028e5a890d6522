"""Style Injector: rewrite font fields inside the ``[V4+ Styles]`` section.

WHY: ffmpeg writes a single ``Default`` style with its own font choices.
Callers want their brand font, size, weight and vertical margin burned into
the video, so those fields have to be rewritten after conversion.

HOW: Scan lines, tracking whether we are inside ``[V4+ Styles]``. Inside,
each ``Style:`` line is parsed into a StyleRecord, the override is applied,
and the record is written back. Every other line is copied unchanged.

RULES:
- Only ``Style:`` lines inside ``[V4+ Styles]`` are touched
- Any other ``[...]`` header ends the section
- Lines outside targeted records are preserved byte-for-byte
- A malformed record raises StyleRecordError; no partial output
"""

from __future__ import annotations

import logging
from typing import List

from subtitle_styler.config import STYLE_RECORD_PREFIX, STYLES_SECTION_HEADER
from subtitle_styler.core.ir import StyleOverride, StyleRecord

logger = logging.getLogger(__name__)


def apply_style_override(document: str, override: StyleOverride) -> str:
    """Apply ``override`` to every Style record of an ASS document.

    Args:
        document: ASS document text.
        override: Values to write; falsy values leave fields untouched.

    Returns:
        The document with its Style records rewritten.

    Raises:
        StyleRecordError: If a Style record is malformed or too short.
    """
    output: List[str] = []
    in_styles = False
    rewritten = 0

    for line in document.split("\n"):
        trimmed = line.strip()

        if trimmed == STYLES_SECTION_HEADER:
            in_styles = True
            output.append(line)
            continue

        if in_styles and trimmed.startswith("["):
            in_styles = False

        if in_styles and trimmed.startswith(STYLE_RECORD_PREFIX):
            record = override.apply(StyleRecord.parse(line))
            output.append(record.to_line())
            rewritten += 1
            continue

        output.append(line)

    logger.debug("Rewrote %d style record(s)", rewritten)
    return "\n".join(output)
