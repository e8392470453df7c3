# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Image file directory entries

Each directory entry is a fixed 12-byte record: tag (2 bytes), type (2),
count (4) and value/offset (4). The value/offset field is always treated as
a file offset; small values stored inline are not unpacked.

Copyright 2025 DNAi inc.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

from rawifd.byte_stream import ByteStream
from rawifd.exceptions import TypeMismatchError, Utf8DecodeError
from rawifd.tags import get_tag_name

ENTRY_SIZE = 12


class TagType(IntEnum):
    """TIFF entry type codes decoded by the typed accessors"""
    ASCII = 2
    SHORT = 3
    LONG = 4
    RATIONAL = 5


DecodedValue = Union[str, int, float]


@dataclass(frozen=True)
class TagEntry:
    """One directory entry as stored on disk."""

    tag: int
    entry_type: int
    count: int
    offset: int
    position: Optional[int] = None

    @classmethod
    def parse(cls, stream: ByteStream) -> "TagEntry":
        """
        Read one 12-byte entry in the stream's byte order.

        No validation happens here; type and count are only checked by the
        typed accessors.
        """
        position = stream.tell()
        tag = stream.read_u16()
        entry_type = stream.read_u16()
        count = stream.read_u32()
        offset = stream.read_u32()
        return cls(tag=tag, entry_type=entry_type, count=count,
                   offset=offset, position=position)

    @property
    def tag_name(self) -> str:
        return get_tag_name(self.tag)

    def _require(self, tag_type: TagType) -> None:
        if self.entry_type != tag_type:
            raise TypeMismatchError(tag_type.name.lower(), self.entry_type)

    def seek_to(self, stream: ByteStream) -> None:
        stream.seek(self.offset)

    def read_as_bytes(self, stream: ByteStream) -> bytes:
        """Read ``count`` raw bytes at the entry's offset, whatever its type."""
        self.seek_to(stream)
        return stream.read_bytes(self.count)

    def to_short(self, stream: ByteStream) -> int:
        """Read one unsigned 16-bit value (type 3)."""
        self._require(TagType.SHORT)
        self.seek_to(stream)
        return stream.read_u16()

    def to_long(self, stream: ByteStream) -> int:
        """Read one unsigned 32-bit value (type 4)."""
        self._require(TagType.LONG)
        self.seek_to(stream)
        return stream.read_u32()

    def to_rational(self, stream: ByteStream) -> float:
        """
        Read a rational (type 5) as numerator / denominator.

        A zero denominator gives inf (or nan for 0/0) rather than an error.
        """
        self._require(TagType.RATIONAL)
        self.seek_to(stream)
        numerator = stream.read_u32()
        denominator = stream.read_u32()

        if denominator == 0:
            return float('nan') if numerator == 0 else float('inf')
        return numerator / denominator

    def to_ascii(self, stream: ByteStream) -> str:
        """
        Read ``count`` bytes of text (type 2) and decode them as UTF-8.

        The NUL terminator, if present, stays in the returned string.

        Raises:
            Utf8DecodeError: If the bytes are not valid UTF-8
        """
        self._require(TagType.ASCII)
        data = self.read_as_bytes(stream)
        try:
            return data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise Utf8DecodeError(self.offset, e.reason) from e

    def decode(self, stream: ByteStream) -> Optional[DecodedValue]:
        """
        Decode the value with the accessor matching ``entry_type``.

        Returns:
            The decoded value, or None for types without an accessor
        """
        if self.entry_type == TagType.ASCII:
            return self.to_ascii(stream)
        elif self.entry_type == TagType.SHORT:
            return self.to_short(stream)
        elif self.entry_type == TagType.LONG:
            return self.to_long(stream)
        elif self.entry_type == TagType.RATIONAL:
            return self.to_rational(stream)
        return None
