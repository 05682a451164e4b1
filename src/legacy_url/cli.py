"""
Command-line interface.

Parses URLs given as arguments (or one per line on stdin with '-') and prints
each record as JSON.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, List, Optional

from legacy_url.config import get_config
from legacy_url.models import UrlModel
from legacy_url.parsing import parse

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    config = get_config()
    parser = argparse.ArgumentParser(
        description="Decompose URLs into legacy url.parse records."
    )
    parser.add_argument(
        "urls",
        nargs="*",
        help="URLs to parse ('-' reads one URL per line from stdin).",
    )
    parser.add_argument(
        "--decode-query",
        action=argparse.BooleanOptionalAction,
        default=config.parse.decode_query,
        help="Decode the query string into a mapping.",
    )
    parser.add_argument(
        "--slashes-denote-host",
        action=argparse.BooleanOptionalAction,
        default=config.parse.slashes_denote_host,
        help="Treat a leading '//' as an authority.",
    )
    parser.add_argument(
        "--exclude-none",
        action=argparse.BooleanOptionalAction,
        default=config.output.exclude_none,
        help="Omit absent fields from the output.",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=config.output.indent,
        help="JSON indentation, 0 for one record per line (defaults to config).",
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        help="Logging level (defaults to config).",
    )
    return parser.parse_args(argv)


def iter_inputs(urls: Iterable[str]) -> Iterable[str]:
    """Expand '-' into the lines of stdin."""
    for url in urls:
        if url == "-":
            for line in sys.stdin:
                line = line.rstrip("\n")
                if line.strip():
                    yield line
        else:
            yield url


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI."""
    args = parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if not args.urls:
        logger.error("No URL given")
        return 1

    indent = args.indent or None
    for raw in iter_inputs(args.urls):
        record = parse(
            raw,
            decode_query=args.decode_query,
            slashes_denote_host=args.slashes_denote_host,
        )
        model = UrlModel.from_record(raw, record)
        print(model.model_dump_json(indent=indent, exclude_none=args.exclude_none))

    return 0


if __name__ == "__main__":
    sys.exit(main())
