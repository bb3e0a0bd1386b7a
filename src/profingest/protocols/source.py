"""Protocol for profile input sources."""

from typing import Protocol, runtime_checkable

from profingest.protocols.content import TextFileContent


@runtime_checkable
class ProfileDataSource(Protocol):
    """Protocol for profile input sources.

    Implementations back the data with a file, an in-memory buffer or a text
    literal. Uses structural subtyping - no inheritance required.
    """

    async def name(self) -> str:
        """Return the display name used for imports and exports."""
        ...

    async def read_as_bytes(self) -> bytes:
        """Return the canonical (decompressed if needed) bytes."""
        ...

    async def read_as_text(self) -> TextFileContent:
        """Return text operations over the canonical bytes."""
        ...
