"""Shared fixtures: synthetic TIFF-structured files built with struct."""

import struct

import pytest

ASCII, SHORT, LONG, RATIONAL, UNDEFINED = 2, 3, 4, 5, 7


def build_tiff(ifds, endian='<', marker=None, magic=42):
    """
    Assemble TIFF bytes from a list of IFDs.

    Each IFD is a list of (tag, type, count, payload) tuples. Payloads are
    stored right after their IFD and every entry's offset points at its
    payload. IFDs are chained in list order; the last one ends with 0.
    """
    if marker is None:
        marker = b'II' if endian == '<' else b'MM'
    first_ifd = 8 if ifds else 0
    out = bytearray(marker + struct.pack(endian + 'HI', magic, first_ifd))

    for index, entries in enumerate(ifds):
        data_offset = len(out) + 2 + 12 * len(entries) + 4
        table = bytearray(struct.pack(endian + 'H', len(entries)))
        data = bytearray()
        for tag, dtype, count, payload in entries:
            table += struct.pack(endian + 'HHII', tag, dtype, count, data_offset + len(data))
            data += payload
        next_offset = data_offset + len(data) if index + 1 < len(ifds) else 0
        table += struct.pack(endian + 'I', next_offset)
        out += table + data

    return bytes(out)


def sample_ifds(endian='<'):
    ifd0 = [
        (0x010F, ASCII, 5, b'SONY\x00'),
        (0x0100, SHORT, 1, struct.pack(endian + 'H', 6048)),
        (0x0111, LONG, 1, struct.pack(endian + 'I', 123456)),
        (0x011A, RATIONAL, 1, struct.pack(endian + 'II', 350, 1)),
        (0xC634, UNDEFINED, 4, b'\x01\x02\x03\x04'),
    ]
    ifd1 = [
        (0x0201, LONG, 1, struct.pack(endian + 'I', 4096)),
        (0x0202, LONG, 1, struct.pack(endian + 'I', 2048)),
    ]
    return [ifd0, ifd1]


@pytest.fixture
def sample_arw(tmp_path):
    """Little-endian two-IFD file shaped like the start of an ARW."""
    path = tmp_path / 'sample.arw'
    path.write_bytes(build_tiff(sample_ifds('<'), endian='<'))
    return path


@pytest.fixture
def sample_arw_be(tmp_path):
    path = tmp_path / 'sample_be.arw'
    path.write_bytes(build_tiff(sample_ifds('>'), endian='>'))
    return path
