"""SRT-to-ASS converters.

WHY: The conversion tool is the only blocking, external step in the
pipeline. Hiding it behind BaseConverter lets the pipeline take any
converter by constructor injection.

RULES:
- Every converter listed here must be importable without side effects
"""

from subtitle_styler.converters.base import (
    BaseConverter,
    ConversionError,
    ConversionTimeoutError,
    ConverterUnavailableError,
)
from subtitle_styler.converters.ffmpeg import FFmpegConverter

__all__ = [
    "BaseConverter",
    "ConversionError",
    "ConversionTimeoutError",
    "ConverterUnavailableError",
    "FFmpegConverter",
]
