"""zlib / gzip decompression."""

import zlib

# Adding 32 to the window bits lets zlib detect a zlib or gzip header itself.
_AUTO_HEADER_WBITS = zlib.MAX_WBITS | 32


def inflate(data: bytes) -> bytes:
    """Decompress a zlib or gzip stream, including concatenated gzip members.

    Raises:
        zlib.error: If the data is not compressed, is truncated, or has trailing garbage.
    """
    parts = []
    remaining = data
    while True:
        decompressor = zlib.decompressobj(_AUTO_HEADER_WBITS)
        parts.append(decompressor.decompress(remaining))
        if not decompressor.eof:
            raise zlib.error("incomplete or truncated stream")
        remaining = decompressor.unused_data
        if not remaining:
            break
    return b"".join(parts)
