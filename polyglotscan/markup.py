"""Checks for text-based markup and scripts."""

from __future__ import annotations

_ASCII_WHITESPACE = b" \t\n\x0c\r"

_HTML_TAGS = (
    b"<!DOCTYPE HTML",
    b"<HTML",
    b"<HEAD",
    b"<SCRIPT",
    b"<IFRAME",
    b"<H1",
    b"<DIV",
    b"<FONT",
    b"<TABLE",
    b"<A",
    b"<STYLE",
    b"<TITLE",
    b"<B",
    b"<BODY",
    b"<BR",
    b"<P",
    b"<!--",
)


def _starts_with_ignore_case(data: bytes, prefix: bytes) -> bool:
    return data[:len(prefix)].upper() == prefix.upper() and len(data) >= len(prefix)


def is_html(data: bytes) -> bool:
    """HTML document opening with a known tag followed by a space or ``>``."""
    text = bytes(data).lstrip(_ASCII_WHITESPACE)
    return any(
        len(text) > len(tag)
        and _starts_with_ignore_case(text, tag)
        and text[len(tag)] in b" >"
        for tag in _HTML_TAGS
    )


def is_shellscript(data: bytes) -> bool:
    """Script starting with a ``#!`` line."""
    return len(data) > 2 and data[:2] == b"#!"


def is_xml(data: bytes) -> bool:
    """XML document with a declaration."""
    return _starts_with_ignore_case(bytes(data).lstrip(_ASCII_WHITESPACE), b"<?xml")