import pytest

from polyglotscan.markup import is_html, is_shellscript, is_xml


@pytest.mark.parametrize(
    "data",
    [
        b"<html><body></body></html>",
        b"<!DOCTYPE html>\n<html>",
        b"<!doctype html>",
        b"  \n\t<HTML lang=en>",
        b'<a href="x">link</a>',
        b"<!-- comment -->",
        b"<p>text</p>",
    ],
)
def test_html_accepted(data):
    assert is_html(data)


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"<html",
        b"<abbr>x</abbr>",
        b"plain text",
        b"\x0b<html>",
        b"<?xml version='1.0'?>",
    ],
)
def test_html_rejected(data):
    assert not is_html(data)


@pytest.mark.parametrize(
    "data",
    [
        b'<?xml version="1.0"?><root/>',
        b"<?XML version='1.0'?>",
        b"\r\n  <?xml",
    ],
)
def test_xml_accepted(data):
    assert is_xml(data)


@pytest.mark.parametrize("data", [b"", b"<?xm", b"<root/>", b"x<?xml"])
def test_xml_rejected(data):
    assert not is_xml(data)


def test_shellscript_accepted():
    assert is_shellscript(b"#!/bin/sh\necho hi\n")


@pytest.mark.parametrize("data", [b"", b"#!", b"# comment", b" #!/bin/sh"])
def test_shellscript_rejected(data):
    assert not is_shellscript(data)


def test_html_and_xml_exclusive_on_declaration():
    data = b"<?xml version='1.0'?><html>"
    assert is_xml(data) and not is_html(data)