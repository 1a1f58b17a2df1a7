"""Signature checks for font files."""

from __future__ import annotations


def is_woff(data: bytes) -> bool:
    """WOFF font wrapping a TrueType outline."""
    return data.startswith(b"wOFF\x00\x01\x00\x00")


def is_woff2(data: bytes) -> bool:
    """WOFF2 font wrapping a TrueType outline."""
    return data.startswith(b"wOF2\x00\x01\x00\x00")


def is_ttf(data: bytes) -> bool:
    """TrueType font."""
    return data.startswith(b"\x00\x01\x00\x00\x00")


def is_otf(data: bytes) -> bool:
    """OpenType font with CFF outlines."""
    return data.startswith(b"OTTO\x00")