# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Core rawifd functionality

This module provides the main RawIFD class: it opens a TIFF-based raw file,
detects its byte order, parses the header and walks the IFD chain.

Copyright 2025 DNAi inc.
"""

import io
from pathlib import Path
from typing import Any, BinaryIO, Dict, List, Optional, Union

from rawifd.byte_stream import ByteStream
from rawifd.directory import ImageFileDirectory, parse_directories
from rawifd.entry import DecodedValue, TagEntry
from rawifd.exceptions import RawIFDError
from rawifd.header import TiffHeader, open_stream


class RawIFD:
    """
    Reader for the header and directories of a TIFF-based raw file.

    Example:
        >>> with RawIFD('image.arw') as raw:
        ...     header = raw.read_header()
        ...     for directory in raw.read_directories():
        ...         for entry in directory:
        ...             print(entry, raw.decode_entry(entry))
    """

    def __init__(
        self,
        file_path: Optional[Union[str, Path]] = None,
        file_data: Optional[bytes] = None
    ):
        """
        Initialize the reader and detect the file's byte order.

        Args:
            file_path: Path to the raw file
            file_data: Raw file data (alternative to file_path)

        Raises:
            FileNotFoundError: If the file does not exist
            InvalidMarkerError: If the file does not start with "II" or "MM"
        """
        self.file_path = Path(file_path) if file_path is not None else None
        self._header: Optional[TiffHeader] = None

        source: BinaryIO
        if self.file_path is not None:
            if not self.file_path.exists():
                raise FileNotFoundError(f"File not found: {file_path}")
            source = open(self.file_path, 'rb')
        elif file_data is not None:
            source = io.BytesIO(file_data)
        else:
            raise RawIFDError("No file path or file data provided")

        try:
            self.stream: ByteStream = open_stream(source)
        except Exception:
            source.close()
            raise

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        self.stream.source.close()

    def read_header(self) -> TiffHeader:
        """Parse the header that follows the byte order marker."""
        if self._header is None:
            self.stream.seek(2)
            self._header = TiffHeader.parse(self.stream)
        return self._header

    def read_directories(self) -> List[ImageFileDirectory]:
        """
        Walk the IFD chain starting at the header's first IFD offset.

        Returns:
            Directories tail-first (see ``rawifd.directory``)
        """
        header = self.read_header()
        return parse_directories(self.stream, header.ifd_start)

    def decode_entry(self, entry: TagEntry) -> Optional[DecodedValue]:
        """Decode an entry's value; None for types without an accessor."""
        return entry.decode(self.stream)

    def get_all_metadata(self) -> Dict[str, Any]:
        """
        Parse everything and return it as plain data.

        Returns:
            Dictionary with 'header' and 'directories' keys. Each entry
            carries its raw fields plus the decoded 'value' (None when the
            type is not decoded).
        """
        header = self.read_header()
        directories = []
        for directory in self.read_directories():
            entries = []
            for entry in directory:
                entries.append({
                    'tag': entry.tag,
                    'name': entry.tag_name,
                    'type': entry.entry_type,
                    'count': entry.count,
                    'offset': entry.offset,
                    'value': self.decode_entry(entry),
                })
            directories.append({
                'offset': directory.offset,
                'next_offset': directory.next_offset,
                'entries': entries,
            })

        return {
            'header': {
                'byte_order': header.byte_order.name,
                'magic': header.magic,
                'ifd_start': header.ifd_start,
            },
            'directories': directories,
        }
