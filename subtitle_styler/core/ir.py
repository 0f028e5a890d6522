"""Intermediate representation dataclasses for cues, styles, and frames.

WHY: The engine moves text through three stages (cue repair, style
rewriting, canvas rescaling). Each stage needs a small typed view of the
text it touches: a cue block, a style record with named fields, the
caller's style overrides, and the target video frame. Keeping these in one
module makes the fixed ASS field offsets live in exactly one place.

HOW: Four dataclasses:
  CueBlock      — one SRT entry (index line, timing line, text lines)
  StyleRecord   — one ``Style:`` record with named accessors over raw fields
  StyleOverride — optional font/margin values supplied by the caller
  Resolution    — target video width x height, with orientation derived

RULES:
- All structures are ephemeral: built per call, discarded after output
- StyleRecord keeps every raw field string so untouched fields are
  re-emitted byte-for-byte
- Field offsets (font name 1, font size 2, bold/weight 7, MarginV 21)
  are defined only here
- Resolution dimensions are positive integers; square counts as vertical
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional

from subtitle_styler.config import STYLE_MIN_FIELDS, STYLE_RECORD_PREFIX

# V4+ Style field offsets (Name is 0)
FONT_NAME_FIELD = 1
FONT_SIZE_FIELD = 2
BOLD_FIELD = 7
MARGIN_V_FIELD = 21

_RESOLUTION_PART_RE = re.compile(r"[0-9]+")


class StyleRecordError(ValueError):
    """Raised when a ``Style:`` line does not match the V4+ record shape.

    RULES:
    - Message always includes the offending line verbatim
    """


class ResolutionFormatError(ValueError):
    """Raised when a ``WxH`` resolution string cannot be parsed."""


@dataclass
class CueBlock:
    """A single timed subtitle entry.

    RULES:
    - index: the index line as written (never renumbered)
    - timing: the raw ``HH:MM:SS,mmm --> HH:MM:SS,mmm`` line
    - lines: non-empty text lines in order
    """

    index: str
    timing: str
    lines: List[str] = field(default_factory=list)

    def render(self) -> str:
        return "\n".join([self.index, self.timing] + self.lines)


@dataclass
class StyleRecord:
    """Named-field view over one V4+ ``Style:`` record.

    WHY: Callers should say ``record.font_size = 48`` rather than poke
    ``fields[2]``. If the ASS schema ever shifts, only the offset
    constants above change.

    HOW: ``parse()`` splits the line on its first colon and the remainder
    on commas. The raw field strings (including any leading space ffmpeg
    writes after ``Style:``) are kept so ``to_line()`` reproduces them.
    """

    fields: List[str]

    @classmethod
    def parse(cls, line: str) -> "StyleRecord":
        """Parse a ``Style:`` line.

        Raises:
            StyleRecordError: If the line has no colon or fewer than
                STYLE_MIN_FIELDS comma-separated fields.
        """
        _, sep, body = line.partition(":")
        if not sep:
            raise StyleRecordError("invalid Style line: {}".format(line))

        fields = body.split(",")
        if len(fields) < STYLE_MIN_FIELDS:
            raise StyleRecordError("Style line too short: {}".format(line))
        return cls(fields=fields)

    def to_line(self) -> str:
        return STYLE_RECORD_PREFIX + ",".join(self.fields)

    @property
    def name(self) -> str:
        return self.fields[0].strip()

    @property
    def font_name(self) -> str:
        return self.fields[FONT_NAME_FIELD]

    @font_name.setter
    def font_name(self, value: str) -> None:
        self.fields[FONT_NAME_FIELD] = value

    @property
    def font_size(self) -> str:
        return self.fields[FONT_SIZE_FIELD]

    @font_size.setter
    def font_size(self, value: int) -> None:
        self.fields[FONT_SIZE_FIELD] = str(value)

    @property
    def font_weight(self) -> str:
        return self.fields[BOLD_FIELD]

    @font_weight.setter
    def font_weight(self, value: int) -> None:
        self.fields[BOLD_FIELD] = str(value)

    @property
    def margin_v(self) -> str:
        return self.fields[MARGIN_V_FIELD]

    @margin_v.setter
    def margin_v(self, value: str) -> None:
        self.fields[MARGIN_V_FIELD] = value


@dataclass
class StyleOverride:
    """Optional style values to write into every Style record.

    RULES:
    - A value is applied only when truthy: "" and 0 mean "leave as is"
    - text_height is passed through verbatim into the MarginV field
    - font_weight goes into the Bold field (libass reads >1 as a weight)
    """

    font_name: Optional[str] = None
    font_size: Optional[int] = None
    text_height: Optional[str] = None
    font_weight: Optional[int] = None

    def is_empty(self) -> bool:
        return not (self.font_name or self.font_size or self.text_height or self.font_weight)

    def apply(self, record: StyleRecord) -> StyleRecord:
        """Overwrite the provided fields of ``record`` in place and return it."""
        if self.font_name:
            record.font_name = self.font_name
        if self.font_size:
            record.font_size = self.font_size
        if self.text_height:
            record.margin_v = self.text_height
        if self.font_weight:
            record.font_weight = self.font_weight
        return record


@dataclass(frozen=True)
class Resolution:
    """Target video frame size in pixels."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ResolutionFormatError(
                "resolution must be positive, got {}x{}".format(self.width, self.height)
            )

    @property
    def is_vertical(self) -> bool:
        # Reels and shorts are sometimes square; keep their styling consistent.
        return self.height >= self.width

    @classmethod
    def parse(cls, value: str) -> "Resolution":
        """Parse a ``WxH`` string such as ``"1080x1920"``.

        Raises:
            ResolutionFormatError: If the string is not two positive
                integers separated by ``x``.
        """
        parts = value.split("x")
        if len(parts) != 2:
            raise ResolutionFormatError(
                "videoResolution is in bad format. Expected dimensions 2, got {}".format(len(parts))
            )
        if not all(_RESOLUTION_PART_RE.fullmatch(p) for p in parts):
            raise ResolutionFormatError(
                "videoResolution cannot be converted to 2 numbers: {!r}".format(value)
            )
        return cls(width=int(parts[0]), height=int(parts[1]))

    def __str__(self) -> str:
        return "{}x{}".format(self.width, self.height)
