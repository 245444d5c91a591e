# filename: huffman_cli.py

import argparse
import logging
import sys

from code_table import DEFAULT_OUTPUT
from errors import HuffmanError
from huffman_service import HuffmanService
from raster_source import load_grayscale


def build_parser():
    parser = argparse.ArgumentParser(
        prog="huffman-codes",
        description="Build a Huffman code for the pixel values of a grayscale image",
    )
    parser.add_argument("image", help="Path to the grayscale image file")
    parser.add_argument(
        "--output",
        default=DEFAULT_OUTPUT,
        help=f"Code table destination (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    svc = HuffmanService(output_path=args.output)
    try:
        grid = load_grayscale(args.image)
        report = svc.run(grid)
    except HuffmanError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Huffman codes have been written to '{svc.output_path}'.")
    for line in report.statistics.report_lines():
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
