"""Source for byte content that may or may not be compressed."""

import asyncio
import logging
import os
from pathlib import Path
from typing import Awaitable, BinaryIO, Callable, Optional

from profingest.config import DecoderConfig
from profingest.content import BufferBackedTextFileContent
from profingest.errors import UnreadableSource
from profingest.utils.decompress import inflate
from profingest.utils.singleflight import SingleFlight

logger = logging.getLogger(__name__)


class MaybeCompressedDataReader:
    """Profile data source that transparently decompresses zlib/gzip input.

    Decompression is attempted once, on first need. If it fails for any reason
    the input is taken to be plain data and the raw bytes are used unchanged.
    """

    def __init__(
        self,
        name_producer: Callable[[], Awaitable[str]],
        data_producer: Callable[[], Awaitable[bytes]],
        *,
        decompress: Callable[[bytes], bytes] = inflate,
        config: Optional[DecoderConfig] = None,
    ):
        """Initialize the reader.

        Args:
            name_producer: Coroutine function returning the display name
            data_producer: Coroutine function returning the raw, maybe compressed, bytes
            decompress: Decompression primitive; any exception means "not compressed"
            config: Decoder settings for read_as_text(). Defaults to DEFAULT_CONFIG.
        """
        self._name = SingleFlight(name_producer)
        self._data_producer = data_producer
        self._uncompressed_data = SingleFlight(self._load_uncompressed)
        self._decompress = decompress
        self._config = config
        self._compressed: Optional[bool] = None

    @property
    def compressed(self) -> Optional[bool]:
        """Whether decompression succeeded; None until the bytes have been read."""
        return self._compressed

    async def name(self) -> str:
        return await self._name.get()

    async def read_as_bytes(self) -> bytes:
        return await self._uncompressed_data.get()

    async def read_as_text(self) -> BufferBackedTextFileContent:
        data = await self.read_as_bytes()
        return BufferBackedTextFileContent(data, self._config)

    async def _load_uncompressed(self) -> bytes:
        try:
            raw = await self._data_producer()
        except UnreadableSource:
            raise
        except Exception as e:
            raise UnreadableSource(await self.name(), str(e)) from e

        try:
            data = await asyncio.to_thread(self._decompress, raw)
        except Exception as e:
            logger.debug(f"Input is not compressed ({e}), using {len(raw)} raw bytes")
            self._compressed = False
            return raw

        logger.debug(f"Decompressed {len(raw)} bytes into {len(data)} bytes")
        self._compressed = True
        return data

    @classmethod
    def from_file(
        cls,
        file: str | os.PathLike | BinaryIO,
        *,
        config: Optional[DecoderConfig] = None,
    ) -> "MaybeCompressedDataReader":
        """Create a reader for a file path or an open binary file.

        The name is the file's own base name. Bytes are read in a worker thread.
        """
        if hasattr(file, "read"):
            name = Path(getattr(file, "name", "") or "").name
            read = file.read
        else:
            path = Path(file)
            name = path.name
            read = path.read_bytes

        async def read_name() -> str:
            return name

        async def read_data() -> bytes:
            try:
                return await asyncio.to_thread(read)
            except OSError as e:
                raise UnreadableSource(name, str(e)) from e

        return cls(read_name, read_data, config=config)

    @classmethod
    def from_bytes(
        cls,
        name: str,
        buffer: bytes,
        *,
        config: Optional[DecoderConfig] = None,
    ) -> "MaybeCompressedDataReader":
        """Create a reader for bytes already in memory."""

        async def read_name() -> str:
            return name

        async def read_data() -> bytes:
            return bytes(buffer)

        return cls(read_name, read_data, config=config)
