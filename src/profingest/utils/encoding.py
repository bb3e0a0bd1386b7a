"""Byte-order-mark based encoding detection."""

from profingest.models import EncodingTag

# Leading bytes -> encoding. Anything else is treated as UTF-8.
BYTE_ORDER_MARKS = {
    b"\xff\xfe": EncodingTag.UTF16_LE,
    b"\xfe\xff": EncodingTag.UTF16_BE,
}


def detect_encoding(data: bytes | memoryview) -> EncodingTag:
    """Detect the text encoding of a buffer from its byte-order mark.

    Args:
        data: Raw buffer content

    Returns:
        The detected encoding. Buffers of 2 bytes or fewer are always UTF-8.
    """
    if len(data) <= 2:
        return EncodingTag.UTF8
    return BYTE_ORDER_MARKS.get(bytes(data[:2]), EncodingTag.UTF8)
