# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Byte-order aware binary reader

Wraps a seekable binary source and reads fixed-width integers in a
selectable byte order. Values are unpacked with ``struct`` format codes
('B', 'H', 'I', 'Q' and their signed counterparts).

Copyright 2025 DNAi inc.
"""

import struct
from enum import Enum
from typing import BinaryIO, Union

from rawifd.exceptions import SeekFailureError, ShortReadError


class ByteOrder(Enum):
    """Byte order of multi-byte values; the value is the struct prefix."""
    LITTLE_ENDIAN = '<'
    BIG_ENDIAN = '>'


def unpack_value(fmt: str, data: bytes, order: ByteOrder) -> int:
    """
    Unpack a single fixed-width value from ``data`` in the given order.

    Args:
        fmt: struct format code for one value (e.g. 'H' or 'I')
        data: Exactly ``struct.calcsize(fmt)`` bytes
        order: Byte order to apply

    Returns:
        The unpacked integer
    """
    return struct.unpack(order.value + fmt, data)[0]


class ByteStream:
    """
    Binary reader holding a source and the byte order used to read from it.

    The stream owns the source for the duration of a parse. Every read and
    seek moves the source's cursor; nothing is buffered ahead.
    """

    def __init__(self, source: BinaryIO, order: ByteOrder):
        """
        Initialize the stream.

        Args:
            source: Seekable binary file-like object
            order: Initial byte order for default reads
        """
        self.source = source
        self.order = order

    def set_order(self, order: ByteOrder) -> None:
        """Change the byte order used by subsequent default reads."""
        self.order = order

    def read(self, fmt: str) -> int:
        """Read one value using the stream's current byte order."""
        return self.read_with_order(fmt, self.order)

    def read_with_order(self, fmt: str, order: ByteOrder) -> int:
        """
        Read one value using ``order`` for this call only.

        The stored byte order is left unchanged.

        Args:
            fmt: struct format code for one value
            order: Byte order for this read

        Returns:
            The unpacked integer

        Raises:
            ShortReadError: If the source ends before the value is complete
        """
        data = self.read_bytes(struct.calcsize(fmt))
        return unpack_value(fmt, data, order)

    def read_u16(self) -> int:
        return self.read('H')

    def read_u32(self) -> int:
        return self.read('I')

    def read_bytes(self, size: int) -> bytes:
        """
        Read exactly ``size`` bytes.

        Raises:
            ShortReadError: If fewer than ``size`` bytes are available
        """
        data = self.source.read(size)
        if len(data) != size:
            raise ShortReadError(size, len(data))
        return data

    def read_into(self, buffer: Union[bytearray, memoryview]) -> None:
        """Fill ``buffer`` completely from the source; a partial fill is an error."""
        buffer[:] = self.read_bytes(len(buffer))

    def seek(self, position: int, whence: int = 0) -> int:
        """
        Reposition the source with standard ``seek`` semantics.

        Args:
            position: Target offset
            whence: 0 (absolute), 1 (relative) or 2 (from end)

        Returns:
            The new absolute position

        Raises:
            SeekFailureError: If the source cannot seek there
        """
        try:
            return self.source.seek(position, whence)
        except (OSError, ValueError) as e:
            raise SeekFailureError(position, str(e)) from e

    def tell(self) -> int:
        return self.source.tell()
