"""Request payload model and handler for one styling job.

WHY: The styling step is triggered by an event payload naming where the
SRT lives, where the ASS should go, the target resolution, and optional
font settings. Validating that payload up front means a malformed
resolution aborts before any storage read or ffmpeg run.

HOW: StyleRequest is a pydantic model with the payload's camelCase field
names as aliases. handle_request() validates the event, runs the converter
self-test, fetches the SRT through the injected storage, renders it with
the injected styler, and stores the result.

RULES:
- videoResolution must be "WxH" with positive integers
- fontSize/fontWeight of 0 and empty fontName/textHeight mean "unset"
- Source and result are UTF-8
- Errors propagate to the caller; nothing is stored on failure
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from subtitle_styler.core.ir import Resolution, StyleOverride
from subtitle_styler.pipeline import SubtitleStyler
from subtitle_styler.storage import BaseStorage

logger = logging.getLogger(__name__)


class StyleRequest(BaseModel):
    """Payload for a single SRT-to-styled-ASS job."""

    model_config = ConfigDict(populate_by_name=True)

    bucket: str = Field(description="Bucket holding both source and destination.")
    source_key: str = Field(alias="sourceKey", description="Key of the SRT source.")
    dest_key: str = Field(alias="destKey", description="Key to write the ASS result to.")
    video_resolution: str = Field(
        alias="videoResolution",
        description="Target video size as 'WxH', e.g. '1080x1920'.",
    )
    font_name: Optional[str] = Field(default=None, alias="fontName")
    font_size: Optional[int] = Field(default=None, alias="fontSize")
    font_weight: Optional[int] = Field(default=None, alias="fontWeight")
    text_height: Optional[str] = Field(default=None, alias="textHeight")

    @field_validator("video_resolution")
    @classmethod
    def _check_resolution(cls, value: str) -> str:
        Resolution.parse(value)
        return value

    @property
    def resolution(self) -> Resolution:
        return Resolution.parse(self.video_resolution)

    @property
    def override(self) -> StyleOverride:
        return StyleOverride(
            font_name=self.font_name,
            font_size=self.font_size,
            text_height=self.text_height,
            font_weight=self.font_weight,
        )


def handle_request(
    event: Dict[str, Any],
    storage: BaseStorage,
    styler: SubtitleStyler,
) -> Dict[str, Any]:
    """Run one styling job described by ``event``.

    The converter self-test runs after validation and before the source
    is fetched, so a broken ffmpeg install fails without touching storage.

    Raises:
        pydantic.ValidationError: If the payload is malformed.
        ConverterUnavailableError: If the converter self-test fails.
    """
    request = StyleRequest.model_validate(event)
    logger.info(
        "Styling bucket=%s key=%s -> %s (%s)",
        request.bucket, request.source_key, request.dest_key, request.video_resolution,
    )

    styler.converter.check_available()
    srt_text = storage.get_bytes(request.bucket, request.source_key).decode("utf-8")
    ass_text = styler.render(srt_text, request.resolution, request.override)
    storage.put_bytes(request.bucket, request.dest_key, ass_text.encode("utf-8"))

    return {
        "bucket": request.bucket,
        "destKey": request.dest_key,
        "resolution": str(request.resolution),
        "length": len(ass_text),
    }
