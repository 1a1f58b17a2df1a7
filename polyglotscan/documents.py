"""Checks for Microsoft Office documents, legacy and Open XML."""

from __future__ import annotations

import enum
import struct
import uuid

_ZIP_LOCAL_HEADER = b"PK\x03\x04"
_ZIP_NAME_OFFSET = 0x1E
_ZIP_SEARCH_RANGE = 6000

_CFB_MAGIC = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"
_CFB_DIR_ENTRY_SIZE = 128
_CFB_ROOT_STORAGE = 5


class _DocType(enum.Enum):
    DOC = enum.auto()
    DOCX = enum.auto()
    XLS = enum.auto()
    XLSX = enum.auto()
    PPT = enum.auto()
    PPTX = enum.auto()
    OOXML = enum.auto()


_CLSID_TYPES = {
    "00020900-0000-0000-c000-000000000046": _DocType.DOC,
    "00020906-0000-0000-c000-000000000046": _DocType.DOC,
    "00020810-0000-0000-c000-000000000046": _DocType.XLS,
    "00020820-0000-0000-c000-000000000046": _DocType.XLS,
    "64818d10-4f9b-11cf-86ea-00aa00b929e8": _DocType.PPT,
}

_OOXML_PREFIXES = (
    (b"word/", _DocType.DOCX),
    (b"ppt/", _DocType.PPTX),
    (b"xl/", _DocType.XLSX),
)

_OOXML_MARKERS = (b"[Content_Types].xml", b"_rels/.rels", b"docProps")


def _has(data: bytes, offset: int, signature: bytes) -> bool:
    return data[offset:offset + len(signature)] == signature


def _compound_type(data: bytes) -> _DocType | None:
    """Classify a compound file by the class id of its root storage."""
    if len(data) < 512 or not data.startswith(_CFB_MAGIC):
        return None
    (shift,) = struct.unpack_from("<H", data, 30)
    if shift not in (9, 12):
        return None
    (first_dir,) = struct.unpack_from("<I", data, 48)
    entry = (first_dir + 1) << shift
    if entry + _CFB_DIR_ENTRY_SIZE > len(data):
        return None
    if data[entry + 66] != _CFB_ROOT_STORAGE:
        return None
    clsid = uuid.UUID(bytes_le=bytes(data[entry + 80:entry + 96]))
    return _CLSID_TYPES.get(str(clsid))


def _ooxml_part(data: bytes, offset: int) -> _DocType | None:
    for prefix, kind in _OOXML_PREFIXES:
        if _has(data, offset, prefix):
            return kind
    return None


def _next_header(data: bytes, start: int) -> int | None:
    end = min(start + _ZIP_SEARCH_RANGE, len(data))
    if start >= end:
        return None
    found = data.find(_ZIP_LOCAL_HEADER, start, end)
    return None if found < 0 else found - start


def _ooxml_type(data: bytes) -> _DocType | None:
    """Classify a zip by the names of its first few entries."""
    if not data.startswith(_ZIP_LOCAL_HEADER):
        return None
    kind = _ooxml_part(data, _ZIP_NAME_OFFSET)
    if kind is not None:
        return kind
    if not any(_has(data, _ZIP_NAME_OFFSET, marker) for marker in _OOXML_MARKERS):
        return None
    if len(data) < 22:
        return None
    (compressed,) = struct.unpack_from("<I", data, 18)
    offset = compressed + 49

    for _ in range(2):
        step = _next_header(data, offset)
        if step is None:
            return None
        offset += step + 4 + 26

    kind = _ooxml_part(data, offset)
    if kind is not None:
        return kind

    offset += 26
    step = _next_header(data, offset)
    if step is None:
        return _DocType.OOXML
    offset += step + 4 + 26
    return _ooxml_part(data, offset) or _DocType.OOXML


def is_doc(data: bytes) -> bool:
    """Legacy Word document."""
    return _compound_type(data) is _DocType.DOC


def is_xls(data: bytes) -> bool:
    """Legacy Excel workbook."""
    return _compound_type(data) is _DocType.XLS


def is_ppt(data: bytes) -> bool:
    """Legacy PowerPoint presentation."""
    return _compound_type(data) is _DocType.PPT


def is_docx(data: bytes) -> bool:
    """Word Open XML document."""
    return _ooxml_type(data) is _DocType.DOCX


def is_xlsx(data: bytes) -> bool:
    """Excel Open XML workbook."""
    return _ooxml_type(data) is _DocType.XLSX


def is_pptx(data: bytes) -> bool:
    """PowerPoint Open XML presentation."""
    return _ooxml_type(data) is _DocType.PPTX