"""Error taxonomy for configuration parsing."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Classification carried by every :class:`ConfigError`."""

    IO_ERROR = "io_error"
    MALFORMED_HEADER = "malformed_header"
    RESOURCE_EXHAUSTED = "resource_exhausted"
    INVALID_FORMAT = "invalid_format"
    # Allocation failures surface as MemoryError; kept for completeness.
    OUT_OF_MEMORY = "out_of_memory"


class ConfigError(Exception):
    """Base class for parser and converter failures.

    Attributes:
        kind: The :class:`ErrorKind` of the failure.
        filename: File being parsed, when known.
        line: 1-based line number, when known.
    """

    kind: ErrorKind = ErrorKind.IO_ERROR

    def __init__(self, message: str, *, filename: str | None = None, line: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.filename = filename
        self.line = line

    def __str__(self) -> str:
        if self.filename is None:
            return self.message
        if self.line is None:
            return f"{self.filename}: {self.message}"
        return f"{self.filename}:{self.line}: {self.message}"


class ConfigIOError(ConfigError):
    """A file or directory could not be opened or read."""

    kind = ErrorKind.IO_ERROR


class MalformedHeaderError(ConfigError):
    """A section header line lacks its closing bracket."""

    kind = ErrorKind.MALFORMED_HEADER


class SectionLimitError(ConfigError):
    """More distinct sections than the section table can hold."""

    kind = ErrorKind.RESOURCE_EXHAUSTED


class InvalidFormatError(ConfigError, ValueError):
    """A converter rejected the shape of an rvalue."""

    kind = ErrorKind.INVALID_FORMAT
