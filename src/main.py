"""Main entry point for the mimemap command line tool."""

import os
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path

from dotenv import load_dotenv

from src.logging import configure_logging, get_logger
from src.mimemap import (
    MimeMapError,
    MimeTypes,
    generate_table,
    load_json_table,
    read_default_data,
    read_mime_types_file,
)
from src.mimemap.loader import DEFAULT_DATA_FILE

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


def build_parser() -> ArgumentParser:
    """Build the command line parser."""
    parser = ArgumentParser(
        prog="mimemap",
        description="Convert file extensions to MIME types and vice versa",
    )
    parser.add_argument(
        "--table",
        default=os.getenv("MIMEMAP_TABLE"),
        help="JSON mapping table to use instead of the built-in one (env: MIMEMAP_TABLE)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    mime = subparsers.add_parser("mime", help="Look up MIME types for an extension")
    mime.add_argument("extension")
    mime.add_argument("--all", action="store_true", help="Print every MIME type, not just the primary one")

    ext = subparsers.add_parser("ext", help="Look up extensions for a MIME type")
    ext.add_argument("mime_type")
    ext.add_argument("--all", action="store_true", help="Print every extension, not just the primary one")

    generate = subparsers.add_parser("generate", help="Convert a mime.types file to a JSON mapping table")
    generate.add_argument("source", nargs="?", help=f"mime.types file (default: built-in {DEFAULT_DATA_FILE})")
    generate.add_argument("-o", "--output", help="Output file (default: stdout)")

    return parser


def _lookup(args: Namespace) -> int:
    mime_types = MimeTypes(load_json_table(args.table) if args.table else None)

    if args.command == "mime":
        results = mime_types.get_all_mime_types(args.extension)
    else:
        results = mime_types.get_all_extensions(args.mime_type)

    if not results:
        return EXIT_NOT_FOUND

    for result in results if args.all else results[:1]:
        print(result)
    return EXIT_OK


def _generate(args: Namespace) -> int:
    if args.source:
        table = generate_table(read_mime_types_file(args.source), args.source)
    else:
        table = generate_table(read_default_data(), DEFAULT_DATA_FILE)

    output = table.to_json()
    if args.output:
        Path(args.output).write_text(output + "\n", encoding="utf-8")
        logger.info("Wrote mapping table to %s", args.output)
    else:
        print(output)
    return EXIT_OK


def run(argv: list[str] | None = None) -> int:
    """
    Run the command line tool.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:]).

    Returns:
        Process exit code.
    """
    args = build_parser().parse_args(argv)

    try:
        if args.command == "generate":
            return _generate(args)
        return _lookup(args)
    except (MimeMapError, OSError) as e:
        logger.error("%s", e)
        print(f"mimemap: {e}", file=sys.stderr)
        return EXIT_ERROR


def main() -> None:
    """Main entry point."""
    load_dotenv()
    # To enable debug logging, set environment variable: LOG_LEVEL=DEBUG
    configure_logging(os.getenv("LOG_LEVEL", "WARNING"))
    sys.exit(run())


if __name__ == "__main__":
    main()
