# filename: code_table.py

import logging

from errors import OutputUnwritableError

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "huffman_codes.txt"

HEADER = "Pixel Value | Code Length | Huffman Code"
RULE = "-" * 39


def format_code_table(codes):
    """Render the code table, one row per symbol in ascending symbol order."""
    lines = [HEADER, RULE]
    for symbol in sorted(codes):
        entry = codes[symbol]
        lines.append(f"{symbol:>12}{entry.length:>13}{entry.bits:>15}")
    return "".join(line + "\n" for line in lines)


def write_code_table(codes, path=DEFAULT_OUTPUT):
    text = format_code_table(codes)
    try:
        with open(path, "w", encoding="ascii", newline="\n") as f:
            f.write(text)
    except OSError as e:
        raise OutputUnwritableError(f"could not open '{path}' for writing: {e}") from e
    logger.debug("wrote %d code table rows to %s", len(codes), path)
    return path
