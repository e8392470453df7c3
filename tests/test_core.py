"""Tests for the RawIFD reader."""

import math
import struct

import pytest

from rawifd.byte_stream import ByteOrder
from rawifd.core import RawIFD
from rawifd.exceptions import BadMagicError, InvalidMarkerError, RawIFDError
from tests.conftest import RATIONAL, build_tiff


class TestRawIFD:
    def test_header(self, sample_arw):
        with RawIFD(sample_arw) as raw:
            header = raw.read_header()
        assert header.magic == 42
        assert header.ifd_start == 8
        assert header.byte_order is ByteOrder.LITTLE_ENDIAN

    def test_directories_and_values(self, sample_arw):
        with RawIFD(sample_arw) as raw:
            thumbnail_ifd, main_ifd = raw.read_directories()
            values = {e.tag_name: raw.decode_entry(e) for e in main_ifd}
            thumb_values = [raw.decode_entry(e) for e in thumbnail_ifd]

        assert values == {
            'Make': 'SONY\x00',
            'ImageWidth': 6048,
            'StripOffsets': 123456,
            'XResolution': 350.0,
            'DNGPrivateData': None,
        }
        assert thumb_values == [4096, 2048]

    def test_big_endian_file(self, sample_arw_be):
        with RawIFD(sample_arw_be) as raw:
            assert raw.read_header().byte_order is ByteOrder.BIG_ENDIAN
            main_ifd = raw.read_directories()[-1]
            assert raw.decode_entry(main_ifd.entries[1]) == 6048

    def test_from_bytes(self):
        with RawIFD(file_data=build_tiff([[]])) as raw:
            assert len(raw.read_directories()) == 1

    def test_get_all_metadata(self, sample_arw):
        with RawIFD(sample_arw) as raw:
            metadata = raw.get_all_metadata()

        assert metadata['header'] == {
            'byte_order': 'LITTLE_ENDIAN',
            'magic': 42,
            'ifd_start': 8,
        }
        assert len(metadata['directories']) == 2
        main_ifd = metadata['directories'][1]
        assert main_ifd['offset'] == 8
        assert main_ifd['entries'][0] == {
            'tag': 0x010F,
            'name': 'Make',
            'type': 2,
            'count': 5,
            'offset': 74,
            'value': 'SONY\x00',
        }

    def test_zero_denominator_in_file(self):
        ifd = [(0x011A, RATIONAL, 1, struct.pack('<II', 72, 0))]
        with RawIFD(file_data=build_tiff([ifd])) as raw:
            entry = raw.read_directories()[0].entries[0]
            assert math.isinf(raw.decode_entry(entry))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RawIFD(tmp_path / 'missing.arw')

    def test_invalid_marker(self, tmp_path):
        path = tmp_path / 'bad.arw'
        path.write_bytes(b'NOT A TIFF FILE')
        with pytest.raises(InvalidMarkerError):
            RawIFD(path)

    def test_bad_magic(self):
        with RawIFD(file_data=build_tiff([[]], magic=43)) as raw:
            with pytest.raises(BadMagicError):
                raw.read_header()

    def test_no_input(self):
        with pytest.raises(RawIFDError):
            RawIFD()
