"""Capacity-bounded decoding of byte buffers into text chunks."""

import codecs
import logging

from profingest.config import DecoderConfig
from profingest.models import DecodedText, EncodingTag
from profingest.utils.encoding import detect_encoding

logger = logging.getLogger(__name__)

# The utf-16 codec reads the byte-order mark itself to pick the byte order and
# drops it, the same way utf-8-sig drops a UTF-8 mark.
_CODEC_NAMES = {
    EncodingTag.UTF8: "utf-8-sig",
    EncodingTag.UTF16_LE: "utf-16",
    EncodingTag.UTF16_BE: "utf-16",
}


def decode_chunks(data: bytes, config: DecoderConfig) -> DecodedText:
    """Decode a buffer window by window into bounded text chunks.

    Each window of config.chunk_size bytes produces exactly one chunk. Decoder
    state carries from one window to the next, so a multi-byte sequence cut by
    a window boundary is emitted whole in the later chunk.

    Args:
        data: Raw buffer content
        config: Decoder settings

    Returns:
        DecodedText whose chunks concatenate to the single-pass decode of data
    """
    encoding = detect_encoding(data)
    if config.stream_decoding:
        chunks = _decode_streaming(data, encoding, config.chunk_size)
    else:
        logger.warning("No stream-aware decoder available. Decoding text as ASCII.")
        chunks = _decode_ascii(data, config.chunk_size)

    logger.debug(f"Decoded {len(data)} bytes as {encoding.value} into {len(chunks)} chunk(s)")
    return DecodedText(encoding=encoding, byte_length=len(data), chunks=tuple(chunks))


def _decode_streaming(data: bytes, encoding: EncodingTag, chunk_size: int) -> list[str]:
    decoder = codecs.getincrementaldecoder(_CODEC_NAMES[encoding])(errors="replace")
    view = memoryview(data)

    chunks: list[str] = []
    for offset in range(0, len(data), chunk_size):
        chunks.append(decoder.decode(view[offset : offset + chunk_size], final=False))

    # Flush a dangling partial sequence at the very end of the buffer
    tail = decoder.decode(b"", final=True)
    if not chunks:
        chunks.append(tail)
    elif tail:
        chunks[-1] += tail
    return chunks


def _decode_ascii(data: bytes, chunk_size: int) -> list[str]:
    """Map every byte to the code point of the same value.

    Only correct for 7-bit ASCII; other bytes come out as Latin-1 characters.
    """
    view = memoryview(data)
    window = bytearray(min(chunk_size, len(data)))

    chunks: list[str] = []
    for offset in range(0, len(data), chunk_size):
        filled = min(chunk_size, len(data) - offset)
        window[:filled] = view[offset : offset + filled]
        chunks.append(window[:filled].decode("latin-1"))
    return chunks or [""]
