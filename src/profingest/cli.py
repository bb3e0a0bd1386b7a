"""CLI entry point for profingest."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from profingest.errors import CapacityExceeded, MalformedJSON, UnreadableSource
from profingest.sources import MaybeCompressedDataReader

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def _open(file: str) -> MaybeCompressedDataReader:
    path = Path(file)
    if not path.is_file():
        logger.error(f"File not found: {file}")
        sys.exit(1)
    return MaybeCompressedDataReader.from_file(path)


def info(file: str) -> None:
    """Show how a profile file is decompressed and decoded.

    Args:
        file: Path to the profile file
    """
    source = _open(file)

    async def collect():
        data = await source.read_as_bytes()
        content = await source.read_as_text()
        return await source.name(), data, content

    try:
        name, data, content = asyncio.run(collect())
    except UnreadableSource as e:
        logger.error(str(e))
        sys.exit(1)

    raw_size = Path(file).stat().st_size

    logger.info(f"Profile: {name}")
    logger.info(f"  Raw size: {raw_size} bytes")
    logger.info(f"  Size: {len(data)} bytes")
    logger.info(f"  Compressed: {'yes' if source.compressed else 'no'}")
    logger.info(f"  Encoding: {content.encoding.value}")
    logger.info(f"  Chunks: {content.chunk_count}")


def lines(file: str, separator: str = "\n") -> None:
    """Count the fragments of a profile file split by separator.

    Args:
        file: Path to the profile file
        separator: Separator passed to split()
    """
    source = _open(file)
    try:
        content = asyncio.run(source.read_as_text())
    except UnreadableSource as e:
        logger.error(str(e))
        sys.exit(1)

    logger.info(f"{len(content.split(separator))} fragments")


def parse_json(file: str) -> None:
    """Parse a profile file as JSON and summarize the top-level value.

    Args:
        file: Path to the profile file
    """
    source = _open(file)
    try:
        content = asyncio.run(source.read_as_text())
        value = content.parse_as_json()
    except (UnreadableSource, MalformedJSON) as e:
        logger.error(f"Cannot parse {file}: {e}")
        sys.exit(1)

    if isinstance(value, dict):
        logger.info(f"object with {len(value)} keys")
        for key in list(value)[:20]:
            logger.info(f"  {key}")
    elif isinstance(value, list):
        logger.info(f"array with {len(value)} items")
    else:
        logger.info(f"{type(value).__name__}: {value!r}")


def show(file: str) -> None:
    """Print the decoded text of a profile file.

    Args:
        file: Path to the profile file
    """
    source = _open(file)
    try:
        content = asyncio.run(source.read_as_text())
        text = content.as_string()
    except (UnreadableSource, CapacityExceeded) as e:
        logger.error(str(e))
        sys.exit(1)

    sys.stdout.write(text)


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="profingest",
        description="Inspect how profile files are decompressed and decoded",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # info command
    info_parser = subparsers.add_parser(
        "info",
        help="Show compression, encoding and chunking of a file",
    )
    info_parser.add_argument("file", help="Profile file path")

    # lines command
    lines_parser = subparsers.add_parser(
        "lines",
        help="Count the fragments produced by splitting the text",
    )
    lines_parser.add_argument("file", help="Profile file path")
    lines_parser.add_argument(
        "-s",
        "--separator",
        default="\n",
        help="Separator to split on (default: newline)",
    )

    # json command
    json_parser = subparsers.add_parser(
        "json",
        help="Parse the file as JSON and summarize it",
    )
    json_parser.add_argument("file", help="Profile file path")

    # show command
    show_parser = subparsers.add_parser(
        "show",
        help="Print the decoded text",
    )
    show_parser.add_argument("file", help="Profile file path")

    args = parser.parse_args()

    if args.command == "info":
        info(args.file)
    elif args.command == "lines":
        lines(args.file, args.separator)
    elif args.command == "json":
        parse_json(args.file)
    elif args.command == "show":
        show(args.file)


if __name__ == "__main__":
    main()
