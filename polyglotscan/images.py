"""Signature checks for image formats."""

from __future__ import annotations

import struct
from collections.abc import Iterator

_TIFF_LE = b"II*\x00"
_TIFF_BE = b"MM\x00*"
_CR2_MARKER = b"CR"
_JPEG2000 = b"\x00\x00\x00\x0cjP  \r\n\x87\n\x00"
_JXL_CODESTREAM = b"\xff\x0a"
_JXL_CONTAINER = b"\x00\x00\x00\x0cJXL \r\n\x87\n"
_ORA_HEADER = b"PK\x03\x04"
_ORA_MIMETYPE = b"mimetypeimage/openraster"


def _is_isobmff(data: bytes) -> bool:
    """Whether ``data`` opens with a complete ISO base media ``ftyp`` box."""
    if len(data) < 16 or data[4:8] != b"ftyp":
        return False
    (box_length,) = struct.unpack_from(">I", data, 0)
    return len(data) >= box_length


def _ftyp(data: bytes) -> tuple[bytes, Iterator[bytes]]:
    """Return the major brand and the compatible brands of an ``ftyp`` box."""
    (box_length,) = struct.unpack_from(">I", data, 0)
    major = data[8:12]
    compatible = (data[i:i + 4] for i in range(16, box_length, 4))
    return major, compatible


def _is_tiff_family(data: bytes) -> bool:
    return len(data) > 9 and data[:4] in (_TIFF_LE, _TIFF_BE)


def is_avif(data: bytes) -> bool:
    """AV1 image file, still or sequence."""
    if not _is_isobmff(data):
        return False
    brands = (b"avif", b"avis")
    major, compatible = _ftyp(data)
    return major in brands or any(brand in brands for brand in compatible)


def is_bmp(data: bytes) -> bool:
    """Windows bitmap."""
    return data.startswith(b"BM")


def is_cr2(data: bytes) -> bool:
    """Canon raw image: a TIFF carrying the CR marker."""
    return _is_tiff_family(data) and data[8:10] == _CR2_MARKER


def is_gif(data: bytes) -> bool:
    """GIF image."""
    return data.startswith(b"GIF")


def is_heif(data: bytes) -> bool:
    """HEIF image holding HEVC-coded content."""
    if not _is_isobmff(data):
        return False
    major, compatible = _ftyp(data)
    if major == b"heic":
        return True
    if major in (b"mif1", b"msf1"):
        return any(brand == b"heic" for brand in compatible)
    return False


def is_ico(data: bytes) -> bool:
    """Windows icon."""
    return data.startswith(b"\x00\x00\x01\x00")


def is_jpeg(data: bytes) -> bool:
    """JPEG image."""
    return data.startswith(b"\xff\xd8\xff")


def is_jpeg2000(data: bytes) -> bool:
    """JPEG 2000 image in a JP2 container."""
    return data.startswith(_JPEG2000)


def is_jxl(data: bytes) -> bool:
    """JPEG XL image, bare codestream or container."""
    return data.startswith(_JXL_CODESTREAM) or data.startswith(_JXL_CONTAINER)


def is_jxr(data: bytes) -> bool:
    """JPEG XR image."""
    return data.startswith(b"II\xbc")


def is_ora(data: bytes) -> bool:
    """OpenRaster image: a zip whose first entry is its mimetype."""
    return (
        len(data) > 57
        and data.startswith(_ORA_HEADER)
        and data[30:30 + len(_ORA_MIMETYPE)] == _ORA_MIMETYPE
    )


def is_png(data: bytes) -> bool:
    """PNG image."""
    return data.startswith(b"\x89PNG")


def is_psd(data: bytes) -> bool:
    """Photoshop document."""
    return data.startswith(b"8BPS")


def is_tiff(data: bytes) -> bool:
    """TIFF image that is not a Canon raw file."""
    return _is_tiff_family(data) and data[8:10] != _CR2_MARKER


def is_webp(data: bytes) -> bool:
    """WebP image."""
    return len(data) > 11 and data[8:12] == b"WEBP"