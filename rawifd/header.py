# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
TIFF header parsing

A TIFF-based raw file starts with a 2-byte byte order marker ("II" for
little-endian, "MM" for big-endian), the magic number 42 and the offset of
the first image file directory.

Copyright 2025 DNAi inc.
"""

import logging
from dataclasses import dataclass
from typing import BinaryIO

from rawifd.byte_stream import ByteOrder, ByteStream
from rawifd.exceptions import BadMagicError, InvalidMarkerError, ShortReadError

logger = logging.getLogger(__name__)

TIFF_MAGIC = 42

BYTE_ORDER_MARKERS = {
    b'II': ByteOrder.LITTLE_ENDIAN,
    b'MM': ByteOrder.BIG_ENDIAN,
}


def detect_byte_order(marker: bytes) -> ByteOrder:
    """
    Map the 2-byte marker at the start of the file to a byte order.

    Raises:
        InvalidMarkerError: If the marker is neither b'II' nor b'MM'
    """
    order = BYTE_ORDER_MARKERS.get(bytes(marker))
    if order is None:
        raise InvalidMarkerError(bytes(marker))
    return order


def open_stream(source: BinaryIO) -> ByteStream:
    """
    Read the byte order marker from ``source`` and wrap it in a ByteStream.

    The returned stream is positioned just after the marker, ready for
    ``TiffHeader.parse``.
    """
    marker = source.read(2)
    if len(marker) != 2:
        raise ShortReadError(2, len(marker))
    order = detect_byte_order(marker)
    logger.debug(f"Byte order marker {marker!r} -> {order.name}")
    return ByteStream(source, order)


@dataclass(frozen=True)
class TiffHeader:
    """Fixed-size TIFF header following the byte order marker."""

    magic: int
    ifd_start: int
    byte_order: ByteOrder = ByteOrder.LITTLE_ENDIAN

    @classmethod
    def parse(cls, stream: ByteStream) -> "TiffHeader":
        """
        Read the magic number and first directory offset.

        Args:
            stream: Stream positioned just after the byte order marker

        Returns:
            Parsed header

        Raises:
            BadMagicError: If the magic number is not 42
        """
        magic = stream.read_u16()
        ifd_start = stream.read_u32()

        if magic != TIFF_MAGIC:
            raise BadMagicError(magic)

        logger.debug(f"TIFF header: first IFD at offset {ifd_start}")
        return cls(magic=magic, ifd_start=ifd_start, byte_order=stream.order)
