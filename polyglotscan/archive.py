"""Signature checks for archives, containers and related formats."""

from __future__ import annotations

import struct

_PDF_WINDOW = 1024
_ZSTD_MAGIC = b"\x28\xb5\x2f\xfd"
_ZSTD_SKIPPABLE_TAIL = b"\x2a\x4d\x18"


def _has(data: bytes, offset: int, signature: bytes) -> bool:
    return data[offset:offset + len(signature)] == signature


def is_7z(data: bytes) -> bool:
    """7-Zip archive."""
    return data.startswith(b"7z\xbc\xaf\x27\x1c")


def is_ar(data: bytes) -> bool:
    """Unix ``ar`` archive."""
    return data.startswith(b"!<arch>")


def is_bz2(data: bytes) -> bool:
    """bzip2 stream."""
    return data.startswith(b"BZh")


def is_cab(data: bytes) -> bool:
    """Microsoft or InstallShield cabinet."""
    return data.startswith(b"MSCF") or data.startswith(b"ISc(")


def is_cpio(data: bytes) -> bool:
    """cpio archive, binary or ASCII header."""
    if data[:2] in (b"\xc7\x71", b"\x71\xc7"):
        return True
    return len(data) > 5 and data[:5] == b"07070" and data[5:6] in (b"1", b"2", b"7")


def is_crx(data: bytes) -> bool:
    """Chrome extension package."""
    return data.startswith(b"Cr24")


def is_dcm(data: bytes) -> bool:
    """DICOM medical image."""
    return _has(data, 128, b"DICM")


def is_deb(data: bytes) -> bool:
    """Debian package."""
    return data.startswith(b"!<arch>\ndebian-binary")


def is_eot(data: bytes) -> bool:
    """Embedded OpenType font."""
    if len(data) <= 35 or data[34:36] != b"LP":
        return False
    return data[8:11] in (b"\x02\x00\x01", b"\x01\x00\x00", b"\x02\x00\x02")


def is_epub(data: bytes) -> bool:
    """EPUB book: a zip whose first entry is the epub mimetype."""
    return data.startswith(b"PK\x03\x04") and _has(
        data, 30, b"mimetypeapplication/epub+zip"
    )


def is_gz(data: bytes) -> bool:
    """gzip stream with deflate compression."""
    return data.startswith(b"\x1f\x8b\x08")


def is_lz(data: bytes) -> bool:
    """lzip stream."""
    return data.startswith(b"LZIP")


def is_msi(data: bytes) -> bool:
    """Compound file binary, as used by Windows installers."""
    return data.startswith(b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1")


def is_pdf(data: bytes) -> bool:
    """PDF header anywhere within the first kilobyte."""
    return b"%PDF-" in data[:_PDF_WINDOW]


def is_ps(data: bytes) -> bool:
    """PostScript document."""
    return data.startswith(b"%!")


def is_rar(data: bytes) -> bool:
    """RAR archive, version 1.5 or 5."""
    return data.startswith(b"Rar!\x1a\x07") and data[6:7] in (b"\x00", b"\x01")


def is_rpm(data: bytes) -> bool:
    """RPM package; the lead is 96 bytes long."""
    return len(data) > 96 and data.startswith(b"\xed\xab\xee\xdb")


def is_rtf(data: bytes) -> bool:
    """Rich Text Format document."""
    return data.startswith(b"{\\rtf")


def is_sqlite(data: bytes) -> bool:
    """SQLite database file."""
    return data.startswith(b"SQLi")


def is_swf(data: bytes) -> bool:
    """Flash movie, uncompressed or zlib-compressed."""
    return data[:1] in (b"C", b"F") and data[1:3] == b"WS"


def is_tar(data: bytes) -> bool:
    """tar archive with a ustar header."""
    return _has(data, 257, b"ustar")


def is_xz(data: bytes) -> bool:
    """xz stream."""
    return data.startswith(b"\xfd7zXZ\x00")


def is_z(data: bytes) -> bool:
    """Unix compress (.Z) stream."""
    return data[:2] in (b"\x1f\xa0", b"\x1f\x9d")


def is_zip(data: bytes) -> bool:
    """zip archive, including empty and spanned variants."""
    return (
        data.startswith(b"PK")
        and data[2:3] in (b"\x03", b"\x05", b"\x07")
        and data[3:4] in (b"\x04", b"\x06", b"\x08")
    )


def is_zst(data: bytes) -> bool:
    """Zstandard stream, possibly preceded by skippable frames."""
    frame = bytes(data)
    while True:
        if frame.startswith(_ZSTD_MAGIC):
            return True
        if len(frame) < 8 or frame[0] & 0xF0 != 0x50 or frame[1:4] != _ZSTD_SKIPPABLE_TAIL:
            return False
        (size,) = struct.unpack_from("<I", frame, 4)
        if len(frame) < 8 + size:
            return False
        frame = frame[8 + size:]