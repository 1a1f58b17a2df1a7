"""Checks for OpenDocument files."""

from __future__ import annotations

import enum

_ZIP_LOCAL_HEADER = b"PK\x03\x04"
_MIMETYPE_NAME_OFFSET = 0x1E
_MIMETYPE_SUBTYPE_OFFSET = 0x32


class _OdfType(enum.Enum):
    TEXT = b"vnd.oasis.opendocument.text"
    SPREADSHEET = b"vnd.oasis.opendocument.spreadsheet"
    PRESENTATION = b"vnd.oasis.opendocument.presentation"


def _has(data: bytes, offset: int, signature: bytes) -> bool:
    return data[offset:offset + len(signature)] == signature


def _odf_type(data: bytes) -> _OdfType | None:
    """Classify a zip by the mimetype entry that opens it."""
    if not data.startswith(_ZIP_LOCAL_HEADER):
        return None
    if not _has(data, _MIMETYPE_NAME_OFFSET, b"mimetype"):
        return None
    for kind in _OdfType:
        if _has(data, _MIMETYPE_SUBTYPE_OFFSET, kind.value):
            return kind
    return None


def is_odt(data: bytes) -> bool:
    """OpenDocument text."""
    return _odf_type(data) is _OdfType.TEXT


def is_ods(data: bytes) -> bool:
    """OpenDocument spreadsheet."""
    return _odf_type(data) is _OdfType.SPREADSHEET


def is_odp(data: bytes) -> bool:
    """OpenDocument presentation."""
    return _odf_type(data) is _OdfType.PRESENTATION