"""Signature checks for video formats."""

from __future__ import annotations

_EBML_MAGIC = b"\x1a\x45\xdf\xa3"
_MKV_HEADER = b"\x1a\x45\xdf\xa3\x93\x42\x82\x88matroska"
_ASF_GUID = b"\x30\x26\xb2\x75\x8e\x66\xcf\x11\xa6\xd9"

_MP4_BRANDS = frozenset(
    {
        b"avc1", b"dash", b"iso2", b"iso3", b"iso4", b"iso5", b"iso6",
        b"isom", b"mmp4", b"mp41", b"mp42", b"mp4v", b"mp71", b"MSNV",
        b"NDAS", b"NDSC", b"NSDC", b"NDSH", b"NDSM", b"NDSP", b"NDSS",
        b"NDXC", b"NDXH", b"NDXM", b"NDXP", b"NDXS", b"F4V ", b"F4P ",
    }
)


def is_avi(data: bytes) -> bool:
    """AVI video in a RIFF container."""
    return len(data) > 10 and data.startswith(b"RIFF") and data[8:11] == b"AVI"


def is_flv(data: bytes) -> bool:
    """Flash video."""
    return data.startswith(b"FLV\x01")


def is_m4v(data: bytes) -> bool:
    """MPEG-4 video as used by iTunes."""
    return data[4:11] == b"ftypM4V"


def is_mkv(data: bytes) -> bool:
    """Matroska video."""
    return data.startswith(_MKV_HEADER) or (len(data) > 38 and data[31:39] == b"matroska")


def is_mov(data: bytes) -> bool:
    """QuickTime movie."""
    if len(data) <= 15:
        return False
    return (
        data[:8] == b"\x00\x00\x00\x14ftyp"
        or data[4:8] in (b"moov", b"mdat")
        or data[12:16] == b"mdat"
    )


def is_mp4(data: bytes) -> bool:
    """MPEG-4 video with a known major brand."""
    return len(data) > 11 and data[4:8] == b"ftyp" and data[8:12] in _MP4_BRANDS


def is_mpeg(data: bytes) -> bool:
    """MPEG program or video stream."""
    return len(data) > 3 and data[:3] == b"\x00\x00\x01" and 0xB0 <= data[3] <= 0xBF


def is_webm(data: bytes) -> bool:
    """WebM video: any EBML document."""
    return data.startswith(_EBML_MAGIC)


def is_wmv(data: bytes) -> bool:
    """Windows Media video in an ASF container."""
    return data.startswith(_ASF_GUID)