"""Text content held as one resident string."""

from typing import Any

from profingest.content.json_parse import parse_json_text


class StringBackedTextFileContent:
    """Text operations directly over a single string.

    The string is assumed to be representable; no capacity checks apply.
    """

    def __init__(self, text: str):
        self._text = text

    def split(self, separator: str) -> list[str]:
        if separator == "":
            return list(self._text)
        return self._text.split(separator)

    def as_string(self) -> str:
        return self._text

    def parse_as_json(self) -> Any:
        return parse_json_text(self._text)
