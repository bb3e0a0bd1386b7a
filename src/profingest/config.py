"""Decoder configuration, resolved once at import time."""

import codecs
import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Window size in bytes. Stays below the longest string V8 can hold
# (2^28 - 16 chars on 32 bit systems, 2^29 - 24 on 64 bit).
CHUNK_SIZE = 1 << 27

ASCII_DECODE_ENV = "PROFINGEST_ASCII_DECODE"

_STREAM_CODECS = ("utf-8-sig", "utf-16")


@dataclass(frozen=True)
class DecoderConfig:
    """Settings shared by every chunk decoder.

    chunk_size: bytes fed to the decoder per window; each window yields one chunk.
    stream_decoding: whether incremental decoders are usable. When False, bytes
        are decoded one code point per byte (only correct for ASCII).
    """

    chunk_size: int = CHUNK_SIZE
    stream_decoding: bool = True

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")


def probe_stream_decoding() -> bool:
    """Check that an incremental decoder exists for every supported codec."""
    for name in _STREAM_CODECS:
        try:
            codecs.getincrementaldecoder(name)
        except LookupError:
            logger.debug(f"No incremental decoder for {name}")
            return False
    return True


def resolve_config() -> DecoderConfig:
    """Build the process-wide decoder configuration.

    Setting PROFINGEST_ASCII_DECODE=1 forces the degraded one-byte-per-character path.
    """
    forced_ascii = os.environ.get(ASCII_DECODE_ENV, "").strip().lower() in {"1", "true", "yes"}
    return DecoderConfig(stream_decoding=not forced_ascii and probe_stream_decoding())


DEFAULT_CONFIG = resolve_config()
