"""JSON parsing for text held as one string or as a byte stream."""

import io
import json
from decimal import Decimal
from typing import Any, Iterable, Iterator

import ijson
from ijson.common import JSONError

from profingest.errors import MalformedJSON


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_json_text(text: str) -> Any:
    """Parse a JSON document held in a single string."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise MalformedJSON(e.msg, pos=e.pos, lineno=e.lineno, colno=e.colno) from e
    except ValueError as e:
        raise MalformedJSON(str(e)) from e


class PieceReader(io.RawIOBase):
    """Read-only binary stream over a sequence of byte pieces.

    Pieces are pulled lazily, so at most one of them needs to be alive at a time.
    """

    def __init__(self, pieces: Iterable[bytes | memoryview]):
        self._pieces: Iterator[bytes | memoryview] = iter(pieces)
        self._current = memoryview(b"")

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        while not self._current:
            piece = next(self._pieces, None)
            if piece is None:
                return 0
            self._current = memoryview(piece)

        size = min(len(buffer), len(self._current))
        buffer[:size] = self._current[:size]
        self._current = self._current[size:]
        return size


def parse_json_bytes(pieces: Iterable[bytes | memoryview]) -> Any:
    """Parse a UTF-8 encoded JSON document without decoding it to one string.

    Args:
        pieces: Consecutive slices of the UTF-8 document

    Returns:
        The parsed value, with the same types json.loads would produce
    """
    reader = PieceReader(pieces)
    try:
        values = list(ijson.items(reader, ""))
    except JSONError as e:
        raise MalformedJSON(str(e)) from e
    except UnicodeDecodeError as e:
        raise MalformedJSON(f"Invalid UTF-8 in JSON document: {e.reason}", pos=e.start) from e

    if not values:
        raise MalformedJSON("Expecting value: document is empty")
    return _decimals_to_floats(values[0])


def _decimals_to_floats(value: Any) -> Any:
    """Convert the Decimals ijson yields for fractional numbers, in place.

    Integers stay arbitrary precision and out-of-range floats become inf,
    as with json.loads.
    """
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (dict, list)):
        pending = [value]
        while pending:
            container = pending.pop()
            keys = container.keys() if isinstance(container, dict) else range(len(container))
            for key in keys:
                item = container[key]
                if isinstance(item, Decimal):
                    container[key] = float(item)
                elif isinstance(item, (dict, list)):
                    pending.append(item)
    return value
