#!/usr/bin/env python3
"""
Command line front end for the Huffman coder.

Compress or decompress INPUT_FILE and write the result to OUTPUT_FILE:

    huffman -c INPUT_FILE OUTPUT_FILE
    huffman -d INPUT_FILE OUTPUT_FILE
"""
import argparse
import logging
import sys
from pathlib import Path

from huffman_errors import HuffmanError
from huffman_service import HuffmanService

logger = logging.getLogger(__name__)


def make_stats(uncompressed_size, compressed_size):
    """Return the size report printed after compression."""
    if uncompressed_size:
        savings = (1 - compressed_size / uncompressed_size) * 100
    else:
        savings = 0.0

    lines = [
        f"{'Uncompressed size: ':>25}{uncompressed_size} bytes",
        f"{'Compressed size: ':>25}{compressed_size} bytes",
        f"{'Space savings: ':>25}{savings:.2f}%",
    ]
    return "\n".join(lines) + "\n"


def compress_file(service, input_path, output_path):
    input_path = Path(input_path)
    text = input_path.read_text(encoding="utf-8")
    # decompress_file writes the final newline back
    if text.endswith("\n"):
        text = text[:-1]
    compressed = service.compress(text)
    Path(output_path).write_bytes(compressed)
    logger.info("compressed %s -> %s", input_path, output_path)
    print(make_stats(input_path.stat().st_size, len(compressed)), end="")


def decompress_file(service, input_path, output_path):
    text = service.decompress(Path(input_path).read_bytes())
    # Encode before the output file is opened so a failure leaves nothing behind
    data = (text + "\n").encode("utf-8")
    Path(output_path).write_bytes(data)
    logger.info("decompressed %s -> %s", input_path, output_path)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="huffman",
        description="Compress or decompress INPUT_FILE and write to OUTPUT_FILE",
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("-c", dest="decompress", action="store_false", help="Compress")
    mode.add_argument("-d", dest="decompress", action="store_true", help="Decompress")
    parser.add_argument("input_file", help="File to read")
    parser.add_argument("output_file", help="File to write")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None):
    """Main entry point; returns the process exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    service = HuffmanService()
    try:
        if args.decompress:
            decompress_file(service, args.input_file, args.output_file)
        else:
            compress_file(service, args.input_file, args.output_file)
    except (HuffmanError, OSError, UnicodeError) as e:
        print(f"huffman: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
