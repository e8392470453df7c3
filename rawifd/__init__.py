# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
rawifd - TIFF structure reader for raw image files

Reads the header and image file directories of TIFF-based raw containers
such as Sony ARW, decoding ASCII, SHORT, LONG and RATIONAL entries.
All parsing is done by directly reading the binary file structure.

Copyright 2025 DNAi inc.
"""

__version__ = "0.1.0"
__author__ = "DNAi inc."

from rawifd.byte_stream import ByteOrder, ByteStream, unpack_value
from rawifd.core import RawIFD
from rawifd.directory import ImageFileDirectory, parse_directories
from rawifd.entry import TagEntry, TagType
from rawifd.exceptions import (
    BadMagicError,
    CyclicChainError,
    FormatError,
    InvalidMarkerError,
    MetadataReadError,
    RawIFDError,
    SeekFailureError,
    ShortReadError,
    TypeMismatchError,
    Utf8DecodeError,
)
from rawifd.header import TiffHeader, detect_byte_order, open_stream

__all__ = [
    "RawIFD",
    "ByteOrder",
    "ByteStream",
    "unpack_value",
    "TiffHeader",
    "detect_byte_order",
    "open_stream",
    "TagEntry",
    "TagType",
    "ImageFileDirectory",
    "parse_directories",
    "RawIFDError",
    "MetadataReadError",
    "ShortReadError",
    "SeekFailureError",
    "FormatError",
    "InvalidMarkerError",
    "BadMagicError",
    "CyclicChainError",
    "TypeMismatchError",
    "Utf8DecodeError",
]
