"""Profile data sources for profingest."""

from profingest.sources.maybe_compressed import MaybeCompressedDataReader
from profingest.sources.text import TextProfileDataSource

__all__ = ["MaybeCompressedDataReader", "TextProfileDataSource"]
