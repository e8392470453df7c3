# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Command-line interface for rawifd

Dumps the header and every IFD entry of a TIFF-based raw file, with decoded
values for ASCII, SHORT, LONG and RATIONAL entries.

Copyright 2025 DNAi inc.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rawifd.core import RawIFD
from rawifd.exceptions import RawIFDError


def format_output(metadata: dict, format_type: str = "text") -> str:
    """
    Format parsed metadata for printing.

    Args:
        metadata: Dictionary returned by ``RawIFD.get_all_metadata``
        format_type: Output format ('text' or 'json')

    Returns:
        Formatted output string
    """
    if format_type == "json":
        return json.dumps(metadata, indent=2, ensure_ascii=False)

    header = metadata['header']
    lines = [
        f"TiffHeader(byte_order={header['byte_order']}, "
        f"magic={header['magic']}, ifd_start={header['ifd_start']})"
    ]
    for directory in metadata['directories']:
        lines.append("--- NEW IFD ----")
        for entry in directory['entries']:
            lines.append(
                f"{entry['name']} (tag={entry['tag']}, type={entry['type']}, "
                f"count={entry['count']}, offset={entry['offset']})"
            )
            if entry['value'] is None:
                lines.append("Unknown - Skip")
            else:
                lines.append(str(entry['value']))
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='rawifd',
        description='Dump the TIFF header and IFD entries of a raw image file'
    )
    parser.add_argument('file', type=str, help='Raw file to read (e.g. .arw)')
    parser.add_argument('-f', '--format', choices=['text', 'json'], default='text',
                        help='Output format (default: text)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    try:
        with RawIFD(Path(args.file)) as raw:
            metadata = raw.get_all_metadata()
    except (RawIFDError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_output(metadata, args.format))
    return 0
