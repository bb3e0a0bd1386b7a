"""Text contents over decoded profile data."""

from profingest.content.buffer_backed import BufferBackedTextFileContent
from profingest.content.chunk_decoder import decode_chunks
from profingest.content.string_backed import StringBackedTextFileContent

__all__ = ["BufferBackedTextFileContent", "StringBackedTextFileContent", "decode_chunks"]
