"""Exceptions raised by the ingestion pipeline."""

from typing import Optional


class IngestError(Exception):
    """Base class for errors surfaced to callers of profingest."""


class CapacityExceeded(IngestError):
    """The decoded text is too large to be materialized as a single string."""

    def __init__(self, byte_length: int):
        self.byte_length = byte_length
        super().__init__(
            f"String exceeds maximum string length. Buffer size is: {byte_length} bytes"
        )


class MalformedJSON(IngestError, ValueError):
    """The content is not a valid JSON document.

    Position attributes are None when the underlying parser does not report them.
    """

    def __init__(
        self,
        message: str,
        pos: Optional[int] = None,
        lineno: Optional[int] = None,
        colno: Optional[int] = None,
    ):
        self.pos = pos
        self.lineno = lineno
        self.colno = colno
        if lineno is not None and colno is not None:
            message = f"{message} (line {lineno}, column {colno})"
        super().__init__(message)


class UnreadableSource(IngestError, OSError):
    """Acquiring the raw bytes of a source failed."""

    def __init__(self, name: str, reason: str):
        self.name = name
        super().__init__(f"Cannot read {name}: {reason}")
