"""Abstract SRT-to-ASS converter and its error types.

WHY: The conversion step is an external tool (ffmpeg in production). The
pipeline should not care which tool runs, and tests must be able to swap
in a fake that writes a known ASS document. This base class is the seam.

HOW: BaseConverter is an ABC with a ``name`` property, a
``check_available()`` self-test and a ``convert()`` method that reads an
SRT file and writes an ASS file.

RULES:
- Subclasses MUST implement ``name`` and ``convert()``
- ``convert()`` either writes ``ass_path`` or raises a ConversionError
- ``check_available()`` defaults to a no-op for in-process converters
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class ConversionError(Exception):
    """Raised when the conversion tool exits with an error.

    HOW: Wraps the tool's diagnostic output so callers can show it.

    RULES:
    - ``diagnostics`` is the tool's stderr, verbatim (may be empty)
    - The message always ends with the diagnostics
    """

    def __init__(self, message: str, diagnostics: str = "") -> None:
        self.diagnostics = diagnostics
        super().__init__("{} Logs:\n{}".format(message, diagnostics) if diagnostics else message)


class ConverterUnavailableError(ConversionError):
    """Raised when the conversion tool cannot be started."""


class ConversionTimeoutError(TimeoutError):
    """Raised when the conversion exceeds its deadline.

    RULES:
    - The child process has already been killed when this is raised
    """


class BaseConverter(ABC):
    """Abstract base for SRT-to-ASS converters."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable converter name, e.g. 'ffmpeg'."""

    def check_available(self) -> None:
        """Raise ConverterUnavailableError if the converter cannot run."""

    @abstractmethod
    def convert(self, srt_path: Path, ass_path: Path) -> None:
        """Convert the SRT file at ``srt_path`` into an ASS file at ``ass_path``.

        Raises:
            ConversionError: If the tool reports a failure.
            ConversionTimeoutError: If the tool exceeds its deadline.
        """
