# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial

from __future__ import annotations

import argparse
import logging
import sys

from boundio.bounded import BoundedReader
from boundio.source import open_source
from boundio.util import DEFAULT_CHUNK_SIZE, copy

logger: logging.Logger = logging.getLogger("boundedcat")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print at most N bytes of a file to stdout."
    )
    parser.add_argument("uri", help="URI/path of the data to read.")
    parser.add_argument(
        "--max-bytes",
        type=int,
        default=-1,
        help="Stop after this many bytes; negative means no limit (default: -1).",
    )
    parser.add_argument(
        "--skip",
        type=int,
        default=0,
        help="Discard this many leading bytes first; they count against the limit.",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=DEFAULT_CHUNK_SIZE,
        help=f"Bytes per read call (default: {DEFAULT_CHUNK_SIZE}).",
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr.")
    args = parser.parse_args(argv)
    if args.chunk_size <= 0:
        parser.error("--chunk-size must be positive")
    return args


def run(args: argparse.Namespace, out) -> int:
    """Copy the bounded resource into `out`; return the number of bytes written."""
    source = open_source(args.uri)
    with BoundedReader(source, args.max_bytes, propagate_close=True) as reader:
        skipped = reader.skip(args.skip)
        logger.debug("skipped %d bytes of %s", skipped, args.uri)
        return copy(reader, out, chunk_size=args.chunk_size)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        run(args, sys.stdout.buffer)
    except OSError as error:
        print(f"[error] {error}", file=sys.stderr)
        return 1
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
