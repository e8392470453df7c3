# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Image file directory (IFD) chain walker

An IFD is a 2-byte entry count, that many 12-byte entries and a 4-byte
offset to the next IFD (0 ends the chain).

The walk returns directories tail-first: the last directory in the chain
comes first and the directory the walk started from comes last. Callers
that need file order should reverse the list or sort on ``offset``.

Copyright 2025 DNAi inc.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Set

from rawifd.byte_stream import ByteStream
from rawifd.entry import TagEntry
from rawifd.exceptions import CyclicChainError

logger = logging.getLogger(__name__)


@dataclass
class ImageFileDirectory:
    """Entries of one IFD in on-disk order."""

    entries: List[TagEntry] = field(default_factory=list)
    offset: Optional[int] = None
    next_offset: int = 0

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    @classmethod
    def read_one(cls, stream: ByteStream) -> "ImageFileDirectory":
        """Read a single IFD at the stream's current position."""
        offset = stream.tell()
        count = stream.read_u16()
        entries = [TagEntry.parse(stream) for _ in range(count)]
        next_offset = stream.read_u32()
        logger.debug(f"IFD at offset {offset}: {count} entries, next {next_offset}")
        return cls(entries=entries, offset=offset, next_offset=next_offset)

    @classmethod
    def parse(cls, stream: ByteStream) -> List["ImageFileDirectory"]:
        """
        Walk the IFD chain starting at the stream's current position.

        Returns:
            Every directory in the chain, tail-first

        Raises:
            CyclicChainError: If a next offset points at a directory already read
            MetadataReadError: If a read or seek fails; nothing partial is returned
        """
        directories: List[ImageFileDirectory] = []
        visited: Set[int] = set()

        while True:
            visited.add(stream.tell())
            directory = cls.read_one(stream)
            directories.append(directory)

            if directory.next_offset == 0:
                break
            if directory.next_offset in visited:
                raise CyclicChainError(directory.next_offset)
            stream.seek(directory.next_offset)

        directories.reverse()
        return directories


def parse_directories(stream: ByteStream, start: Optional[int] = None) -> List[ImageFileDirectory]:
    """
    Walk the IFD chain from ``start`` (or the current position).

    Args:
        stream: Stream to read from
        start: Absolute offset of the first IFD

    Returns:
        Directories tail-first, as ``ImageFileDirectory.parse`` returns them
    """
    if start is not None:
        stream.seek(start)
    return ImageFileDirectory.parse(stream)
