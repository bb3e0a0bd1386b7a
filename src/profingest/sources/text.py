"""Source for text that is already decoded."""

from profingest.content import StringBackedTextFileContent


class TextProfileDataSource:
    """Profile data source over a text literal.

    There is no byte representation: read_as_bytes() returns an empty buffer.
    """

    def __init__(self, file_name: str, contents: str):
        self._file_name = file_name
        self._contents = contents

    async def name(self) -> str:
        return self._file_name

    async def read_as_bytes(self) -> bytes:
        return b""

    async def read_as_text(self) -> StringBackedTextFileContent:
        return StringBackedTextFileContent(self._contents)
