# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial

"""Convert data between buffer encodings, or search it.

Examples:
    python tools/bufconv.py --from utf8 --to base64 "hello"
    python tools/bufconv.py --from hex --to utf8 --input payload.hex
    python tools/bufconv.py --input image.png --to hex --length 16
    python tools/bufconv.py --from utf8 --find world "hello world"
"""

from __future__ import annotations

import argparse
import logging
import sys

from rawbuf.buffer import Buffer
from rawbuf.region import InvalidArgumentError


def load_buffer(args: argparse.Namespace) -> Buffer:
    """Build the input Buffer from a file (raw bytes) or the positional text."""
    if args.input:
        with open(args.input, "rb") as file:
            data = file.read()
        if args.source_encoding == "raw":
            return Buffer.from_bytes(data)
        return Buffer.from_string(data.decode("utf-8"), args.source_encoding)
    if args.text is None:
        raise InvalidArgumentError("either TEXT or --input is required")
    if args.source_encoding == "raw":
        return Buffer.from_string(args.text, "utf8")
    return Buffer.from_string(args.text, args.source_encoding)


def run(args: argparse.Namespace) -> str:
    buf = load_buffer(args)
    end = None if args.length is None else args.offset + args.length
    if args.find is not None:
        needle = Buffer.from_string(args.find, args.target_encoding)
        index = buf.index_of(needle, args.offset)
        return str(index)
    return buf.to_string(args.target_encoding, args.offset, end)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Re-encode text or file bytes between utf8, latin1, ascii, hex and base64."
    )
    parser.add_argument("text", nargs="?", help="Input text (ignored when --input is given).")
    parser.add_argument("--input", help="Read input bytes from this file instead.")
    parser.add_argument(
        "--from",
        dest="source_encoding",
        default="raw",
        help="Encoding of the input: raw (default, bytes as-is), utf8, latin1, ascii, hex, base64.",
    )
    parser.add_argument(
        "--to", dest="target_encoding", default="utf8", help="Encoding of the output (default: utf8)."
    )
    parser.add_argument("--offset", type=int, default=0, help="First byte to convert (default: 0).")
    parser.add_argument("--length", type=int, default=None, help="Number of bytes to convert.")
    parser.add_argument(
        "--find", default=None, help="Print the index of this needle (encoded with --to) instead."
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        output = run(args)
    except InvalidArgumentError as error:
        print(f"[error] {error}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as error:
        print(f"[error] {error}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
