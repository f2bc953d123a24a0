"""Command-line entry point.

Usage:
    feedmark [--format {json,text}] [--dialect-only] FILE [FILE ...]
"""

import argparse
import json
import sys

from feedmark.config.settings import settings
from feedmark.documents import load_document_file
from feedmark.exceptions import FeedmarkError
from feedmark.models.feed_item import FeedItem
from feedmark.parsers.feed_parser import FeedParser
from feedmark.utils.logger import configure_logging, get_logger


def build_arg_parser() -> argparse.ArgumentParser:
    arg_parser = argparse.ArgumentParser(
        prog="feedmark",
        description="Normalize RSS, Atom and RDF feed files into title/link/summary items",
    )
    arg_parser.add_argument(
        "files",
        nargs="+",
        metavar="FILE",
        help="Feed document to read ('-' for standard input)",
    )
    arg_parser.add_argument(
        "--format",
        choices=("json", "text"),
        default="json",
        help="Output format (default: json)",
    )
    arg_parser.add_argument(
        "--dialect-only",
        action="store_true",
        help="Print the detected dialect instead of the items",
    )
    arg_parser.add_argument(
        "--log-level",
        default=None,
        help=f"Minimum log level (default: {settings.log_level})",
    )
    return arg_parser


def _render_text(items: list[FeedItem]) -> str:
    return "\n".join(f"{item.title}\t{item.link}" for item in items)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    args = build_arg_parser().parse_args(argv)

    configure_logging(
        log_level=args.log_level or settings.log_level,
        json_format=settings.log_json,
    )
    logger = get_logger("cli")

    parser = FeedParser()
    results: dict[str, object] = {}
    failed = False

    for path in args.files:
        try:
            doc = load_document_file(path)
        except FeedmarkError as e:
            logger.error("Feed could not be loaded", path=path, error=str(e))
            failed = True
            continue

        if args.dialect_only:
            results[path] = parser.detect(doc).value
        else:
            results[path] = parser.parse(doc)

    for path, result in results.items():
        if args.dialect_only:
            line = str(result)
            print(f"{path}\t{line}" if len(args.files) > 1 else line)
        elif args.format == "text":
            text = _render_text(result)
            if text:
                print(text)

    if results and not args.dialect_only and args.format == "json":
        payload = {
            path: [item.model_dump() for item in items] for path, items in results.items()
        }
        if len(args.files) == 1:
            payload = next(iter(payload.values()), [])
        print(json.dumps(payload, ensure_ascii=False, indent=2))

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
