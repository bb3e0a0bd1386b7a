from __future__ import annotations

import asyncio
import gzip
import zlib

import pytest

from profingest.config import DecoderConfig
from profingest.content import BufferBackedTextFileContent, StringBackedTextFileContent
from profingest.errors import UnreadableSource
from profingest.protocols import ProfileDataSource
from profingest.sources import MaybeCompressedDataReader, TextProfileDataSource
from profingest.utils import inflate

TRACE = '[{"name": "main", "ph": "B", "ts": 0}, {"name": "main", "ph": "E", "ts": 1.5}]\n'


class CountingInflate:
    def __init__(self):
        self.calls = 0

    def __call__(self, data: bytes) -> bytes:
        self.calls += 1
        return inflate(data)


def _reader(data: bytes, decompress=inflate, name: str = "trace.json") -> MaybeCompressedDataReader:
    async def read_name() -> str:
        return name

    async def read_data() -> bytes:
        return data

    return MaybeCompressedDataReader(read_name, read_data, decompress=decompress)


def test_sources_satisfy_protocol():
    assert isinstance(MaybeCompressedDataReader.from_bytes("a", b""), ProfileDataSource)
    assert isinstance(TextProfileDataSource("a", ""), ProfileDataSource)


def test_plain_bytes_pass_through_unchanged():
    data = TRACE.encode("utf-8")
    source = MaybeCompressedDataReader.from_bytes("trace.json", data)

    assert asyncio.run(source.read_as_bytes()) == data


@pytest.mark.parametrize("compress", [gzip.compress, zlib.compress])
def test_compressed_round_trip(compress):
    source = MaybeCompressedDataReader.from_bytes("trace.json.gz", compress(TRACE.encode("utf-8")))

    async def read():
        return await source.name(), await source.read_as_text()

    name, content = asyncio.run(read())

    assert name == "trace.json.gz"
    assert content.as_string() == TRACE
    assert content.parse_as_json()[1]["ts"] == 1.5


def test_concatenated_gzip_members_are_joined():
    data = gzip.compress(b"first\n") + gzip.compress(b"second\n")
    assert inflate(data) == b"first\nsecond\n"


def test_truncated_stream_falls_back_to_raw_bytes():
    data = gzip.compress(TRACE.encode("utf-8"))[:-10]
    source = MaybeCompressedDataReader.from_bytes("trace.json.gz", data)

    assert asyncio.run(source.read_as_bytes()) == data


def test_corrupt_checksum_falls_back_to_raw_bytes():
    data = bytearray(zlib.compress(TRACE.encode("utf-8")))
    data[-1] ^= 0xFF
    source = MaybeCompressedDataReader.from_bytes("trace.json.z", bytes(data))

    assert asyncio.run(source.read_as_bytes()) == bytes(data)


def test_decompression_runs_once_for_repeated_reads():
    counter = CountingInflate()
    source = _reader(gzip.compress(TRACE.encode("utf-8")), decompress=counter)

    async def read_twice():
        return await source.read_as_bytes(), await source.read_as_bytes()

    first, second = asyncio.run(read_twice())

    assert first == second == TRACE.encode("utf-8")
    assert first is second
    assert counter.calls == 1


def test_failed_decompression_also_runs_once():
    counter = CountingInflate()
    source = _reader(b"not compressed", decompress=counter)

    async def read_twice():
        await source.read_as_bytes()
        return await source.read_as_bytes()

    assert asyncio.run(read_twice()) == b"not compressed"
    assert counter.calls == 1


def test_concurrent_readers_share_one_computation():
    counter = CountingInflate()
    fetches = 0

    async def read_name() -> str:
        return "trace.json.gz"

    async def read_data() -> bytes:
        nonlocal fetches
        fetches += 1
        await asyncio.sleep(0.01)
        return gzip.compress(TRACE.encode("utf-8"))

    source = MaybeCompressedDataReader(read_name, read_data, decompress=counter)

    async def read_concurrently():
        return await asyncio.gather(*(source.read_as_bytes() for _ in range(5)))

    results = asyncio.run(read_concurrently())

    assert fetches == 1
    assert counter.calls == 1
    assert all(result is results[0] for result in results)


def test_read_as_text_builds_fresh_content():
    source = MaybeCompressedDataReader.from_bytes("trace.json", TRACE.encode("utf-8"))

    async def read_twice():
        return await source.read_as_text(), await source.read_as_text()

    first, second = asyncio.run(read_twice())

    assert isinstance(first, BufferBackedTextFileContent)
    assert first is not second
    assert first.split("\n") == second.split("\n")


def test_config_is_passed_to_text_content():
    source = MaybeCompressedDataReader.from_bytes(
        "trace.json", TRACE.encode("utf-8"), config=DecoderConfig(chunk_size=8)
    )

    content = asyncio.run(source.read_as_text())

    assert content.chunk_count > 1
    assert content.parse_as_json()[0]["ph"] == "B"


def test_from_file_path(tmp_path):
    path = tmp_path / "profile.cpuprofile.gz"
    path.write_bytes(gzip.compress(TRACE.encode("utf-8")))
    source = MaybeCompressedDataReader.from_file(path)

    async def read():
        return await source.name(), await source.read_as_bytes()

    name, data = asyncio.run(read())

    assert name == "profile.cpuprofile.gz"
    assert data == TRACE.encode("utf-8")


def test_from_file_handle(tmp_path):
    path = tmp_path / "profile.txt"
    path.write_bytes(b"main;work 3\n")

    with path.open("rb") as f:
        source = MaybeCompressedDataReader.from_file(f)
        content = asyncio.run(source.read_as_text())

    assert asyncio.run(source.name()) == "profile.txt"
    assert content.split("\n") == ["main;work 3", ""]


def test_missing_file_is_unreadable(tmp_path):
    source = MaybeCompressedDataReader.from_file(tmp_path / "missing.json")

    async def read_twice():
        for _ in range(2):
            with pytest.raises(UnreadableSource, match="missing.json"):
                await source.read_as_bytes()

    asyncio.run(read_twice())


def test_read_error_from_producer_is_unreadable():
    async def read_name() -> str:
        return "socket"

    async def read_data() -> bytes:
        raise ConnectionResetError("peer went away")

    source = MaybeCompressedDataReader(read_name, read_data)

    with pytest.raises(UnreadableSource, match="socket: peer went away") as info:
        asyncio.run(source.read_as_bytes())
    assert isinstance(info.value.__cause__, ConnectionResetError)


def test_text_literal_source():
    source = TextProfileDataSource("pasted.txt", "main;a 1\nmain;b 2")

    async def read():
        return await source.name(), await source.read_as_bytes(), await source.read_as_text()

    name, data, content = asyncio.run(read())

    assert name == "pasted.txt"
    assert data == b""
    assert isinstance(content, StringBackedTextFileContent)
    assert content.split("\n") == ["main;a 1", "main;b 2"]
    assert content.as_string() == "main;a 1\nmain;b 2"


def test_any_producer_failure_is_unreadable():
    async def read_name() -> str:
        return "upload"

    async def read_data() -> bytes:
        raise RuntimeError("stream closed early")

    source = MaybeCompressedDataReader(read_name, read_data)

    with pytest.raises(UnreadableSource, match="upload: stream closed early") as info:
        asyncio.run(source.read_as_bytes())
    assert isinstance(info.value.__cause__, RuntimeError)


def test_compressed_flag_records_decompression_outcome():
    gzipped = MaybeCompressedDataReader.from_bytes("a.gz", gzip.compress(b"main 1\n"))
    plain = MaybeCompressedDataReader.from_bytes("a.txt", b"main 1\n")

    assert gzipped.compressed is None
    asyncio.run(gzipped.read_as_bytes())
    asyncio.run(plain.read_as_bytes())

    assert gzipped.compressed is True
    assert plain.compressed is False


def test_compressed_flag_does_not_depend_on_sizes():
    def same_size(data: bytes) -> bytes:
        return data.upper()

    source = _reader(b"main;work 1\n", decompress=same_size)
    data = asyncio.run(source.read_as_bytes())

    assert data == b"MAIN;WORK 1\n"
    assert source.compressed is True
