"""Core data models for decoded text."""

from dataclasses import dataclass
from enum import Enum


class EncodingTag(Enum):
    """Text encodings recognised by byte-order-mark sniffing."""

    UTF8 = "utf-8"
    UTF16_LE = "utf-16le"
    UTF16_BE = "utf-16be"


@dataclass(frozen=True)
class DecodedText:
    """A buffer decoded into an ordered sequence of bounded chunks."""

    encoding: EncodingTag
    byte_length: int
    chunks: tuple[str, ...]

    @property
    def chunk_count(self) -> int:
        return len(self.chunks)
