"""Protocol definitions for interchangeable components."""

from profingest.protocols.content import TextFileContent
from profingest.protocols.source import ProfileDataSource

__all__ = ["ProfileDataSource", "TextFileContent"]
