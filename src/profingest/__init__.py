"""Ingestion of large, possibly compressed profile files of unknown encoding."""

from profingest.config import CHUNK_SIZE, DEFAULT_CONFIG, DecoderConfig
from profingest.content import BufferBackedTextFileContent, StringBackedTextFileContent
from profingest.errors import CapacityExceeded, IngestError, MalformedJSON, UnreadableSource
from profingest.models import EncodingTag
from profingest.protocols import ProfileDataSource, TextFileContent
from profingest.sources import MaybeCompressedDataReader, TextProfileDataSource

__all__ = [
    "CHUNK_SIZE",
    "DEFAULT_CONFIG",
    "DecoderConfig",
    "BufferBackedTextFileContent",
    "StringBackedTextFileContent",
    "CapacityExceeded",
    "IngestError",
    "MalformedJSON",
    "UnreadableSource",
    "EncodingTag",
    "ProfileDataSource",
    "TextFileContent",
    "MaybeCompressedDataReader",
    "TextProfileDataSource",
]
