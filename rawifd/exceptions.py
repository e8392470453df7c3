# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Exception classes for rawifd

Every failure the reader can raise is one of the classes below. Each carries
the structured fields that describe it, so callers can branch on the kind of
error instead of matching message text.

Copyright 2025 DNAi inc.
"""

from typing import Optional


class RawIFDError(Exception):
    """
    Base exception for all rawifd errors.

    All rawifd exceptions inherit from this class, allowing
    catch-all error handling around a parse.
    """
    def __init__(self, message: str = ""):
        """
        Initialize the exception with an optional error message.

        Args:
            message: Descriptive error message explaining what went wrong
        """
        self.message = message
        super().__init__(message)


class MetadataReadError(RawIFDError):
    """
    Raised when the underlying byte source cannot satisfy a read or seek.

    Always fatal for the parse that hit it.
    """
    pass


class ShortReadError(MetadataReadError):
    """Raised when fewer bytes remain than a read requires."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} bytes, got {actual} bytes")


class SeekFailureError(MetadataReadError):
    """Raised when the source cannot be repositioned to the requested offset."""

    def __init__(self, position: int, reason: str = ""):
        self.position = position
        self.reason = reason
        message = f"Cannot seek to offset {position}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class FormatError(RawIFDError):
    """
    Raised when the file does not follow the TIFF layout.

    This exception is raised when:
    - The byte order marker is neither "II" nor "MM"
    - The header magic number is not 42
    - The directory chain loops back on itself
    """
    pass


class InvalidMarkerError(FormatError):
    """Raised when the first two bytes are not a known byte order marker."""

    def __init__(self, marker: bytes):
        self.marker = marker
        super().__init__(f"Not a valid file: unknown byte order marker {marker!r}")


class BadMagicError(FormatError):
    """Raised when the header magic number is not 42."""

    def __init__(self, magic: int):
        self.magic = magic
        super().__init__(f"Not a TIFF file: magic number {magic} (expected 42)")


class CyclicChainError(FormatError):
    """Raised when a next-directory offset points at an already visited directory."""

    def __init__(self, offset: int):
        self.offset = offset
        super().__init__(f"Directory chain revisits offset {offset}")


class TypeMismatchError(RawIFDError):
    """
    Raised when a typed accessor is called on an entry of another type.

    Recoverable: dispatch on ``entry_type`` before calling the accessor.
    """

    def __init__(self, expected: str, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Entry is not {expected} (type code {actual})")


class Utf8DecodeError(RawIFDError):
    """Raised when an ASCII entry holds bytes that are not valid UTF-8."""

    def __init__(self, position: int, reason: Optional[str] = None):
        self.position = position
        self.reason = reason
        message = f"Invalid UTF-8 in text entry at offset {position}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
