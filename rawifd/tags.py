# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Baseline TIFF tag names

Names for the standard tags found in IFD0/IFD1 of TIFF-based raw files.
Vendor tags are not listed; they are shown by number.

Copyright 2025 DNAi inc.
"""

TIFF_TAG_NAMES = {
    0x00FE: "NewSubfileType",
    0x00FF: "SubfileType",
    0x0100: "ImageWidth",
    0x0101: "ImageLength",
    0x0102: "BitsPerSample",
    0x0103: "Compression",
    0x0106: "PhotometricInterpretation",
    0x010E: "ImageDescription",
    0x010F: "Make",
    0x0110: "Model",
    0x0111: "StripOffsets",
    0x0112: "Orientation",
    0x0115: "SamplesPerPixel",
    0x0116: "RowsPerStrip",
    0x0117: "StripByteCounts",
    0x011A: "XResolution",
    0x011B: "YResolution",
    0x011C: "PlanarConfiguration",
    0x0128: "ResolutionUnit",
    0x0131: "Software",
    0x0132: "DateTime",
    0x013B: "Artist",
    0x0142: "TileWidth",
    0x0143: "TileLength",
    0x0144: "TileOffsets",
    0x0145: "TileByteCounts",
    0x014A: "SubIFDs",
    0x0201: "JPEGInterchangeFormat",
    0x0202: "JPEGInterchangeFormatLength",
    0x0213: "YCbCrPositioning",
    0x02BC: "XMLPacket",
    0x8298: "Copyright",
    0x8769: "ExifIFD",
    0x8825: "GPSInfo",
    0xC4A5: "PrintIM",
    0xC612: "DNGVersion",
    0xC634: "DNGPrivateData",
}


def get_tag_name(tag: int) -> str:
    """Return the tag's name, or its hex id for tags outside the baseline table."""
    return TIFF_TAG_NAMES.get(tag, f"Tag0x{tag:04X}")
