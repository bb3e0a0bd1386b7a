"""Text content backed by a byte buffer decoded into bounded chunks."""

from typing import Any, Iterator, Optional

from profingest.config import DEFAULT_CONFIG, DecoderConfig
from profingest.content.chunk_decoder import decode_chunks
from profingest.content.json_parse import parse_json_bytes, parse_json_text
from profingest.errors import CapacityExceeded
from profingest.models import EncodingTag


class BufferBackedTextFileContent:
    """Text operations over a buffer whose text may exceed the string capacity.

    Profiles can be larger than the longest string other tools in the pipeline
    accept, so the decoded text is kept as a sequence of chunks of at most
    config.chunk_size characters. When the whole buffer fits in one chunk every
    operation works on that single string directly.
    """

    def __init__(self, data: bytes, config: Optional[DecoderConfig] = None):
        self._config = config or DEFAULT_CONFIG
        self._decoded = decode_chunks(data, self._config)

    @property
    def encoding(self) -> EncodingTag:
        return self._decoded.encoding

    @property
    def byte_length(self) -> int:
        return self._decoded.byte_length

    @property
    def chunk_count(self) -> int:
        return self._decoded.chunk_count

    def split(self, separator: str) -> list[str]:
        """Split the full text by separator.

        The last fragment of the text seen so far is prepended to the next
        chunk before splitting it, so a separator cut in two by a chunk
        boundary is still found.
        """
        chunks = self._decoded.chunks
        if separator == "":
            return [ch for chunk in chunks for ch in chunk]

        parts = chunks[0].split(separator)
        for chunk in chunks[1:]:
            if not chunk:
                continue
            pending = parts.pop()
            parts.extend((pending + chunk).split(separator))
        return parts

    def as_string(self) -> str:
        if self._decoded.chunk_count == 1:
            return self._decoded.chunks[0]
        raise CapacityExceeded(self._decoded.byte_length)

    def parse_as_json(self) -> Any:
        if self._decoded.chunk_count == 1:
            return parse_json_text(self._decoded.chunks[0])
        return parse_json_bytes(self._utf8_pieces())

    def _utf8_pieces(self) -> Iterator[bytes]:
        """Yield the decoded text as UTF-8, one chunk at a time."""
        for chunk in self._decoded.chunks:
            yield chunk.encode("utf-8")
