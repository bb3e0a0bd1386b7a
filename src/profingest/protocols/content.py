"""Protocol for decoded text content."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TextFileContent(Protocol):
    """Text operations over decoded file content.

    Implementations may keep the text as one string or as several chunks;
    callers cannot tell the difference except that as_string() may refuse
    to materialize very large text.
    """

    def split(self, separator: str) -> list[str]:
        """Split the full text by separator."""
        ...

    def as_string(self) -> str:
        """Return the whole text as one string.

        Raises CapacityExceeded when the text is too large for one string.
        """
        ...

    def parse_as_json(self) -> Any:
        """Parse the text as a JSON document.

        Raises MalformedJSON when the content is not valid JSON.
        """
        ...
