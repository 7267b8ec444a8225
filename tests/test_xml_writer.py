from __future__ import annotations

import io
from xml.sax import SAXException

import pytest

from jnlpgen.writer.xml_writer import XmlWriter


def _render(indent, build) -> str:
    buffer = io.BytesIO()
    out = XmlWriter(buffer, indent=indent)
    out.start_document()
    build(out)
    out.end_document()
    return buffer.getvalue().decode("utf-8")


def _sample(out: XmlWriter) -> None:
    out.start_element("root", {"a": "1"})
    out.start_element("name")
    out.characters("x < y & z")
    out.end_element("name")
    out.add_element("empty", {"href": 'say "hi"'})
    out.start_element("group")
    out.add_element("leaf")
    out.end_element("group")
    out.end_element("root")


def test_indented_output() -> None:
    assert _render("  ", _sample) == (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<root a="1">\n'
        "  <name>x &lt; y &amp; z</name>\n"
        "  <empty href='say \"hi\"'/>\n"
        "  <group>\n"
        "    <leaf/>\n"
        "  </group>\n"
        "</root>\n"
    )


def test_compact_output() -> None:
    assert _render(None, _sample) == (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<root a="1"><name>x &lt; y &amp; z</name>'
        "<empty href='say \"hi\"'/><group><leaf/></group></root>"
    )


def test_attribute_order_is_preserved() -> None:
    def build(out: XmlWriter) -> None:
        out.add_element("e", {"z": "1", "a": "2", "m": "3"})

    assert '<e z="1" a="2" m="3"/>' in _render(None, build)


def test_non_ascii_text() -> None:
    def build(out: XmlWriter) -> None:
        out.start_element("title")
        out.characters("Café")
        out.end_element("title")

    assert "<title>Café</title>" in _render(None, build)


def test_mismatched_end_element() -> None:
    out = XmlWriter(io.BytesIO())
    out.start_document()
    out.start_element("a")

    with pytest.raises(SAXException):
        out.end_element("b")


def test_unclosed_document() -> None:
    out = XmlWriter(io.BytesIO())
    out.start_document()
    out.start_element("a")

    with pytest.raises(SAXException, match="unclosed"):
        out.end_document()


@pytest.mark.parametrize("text", ["A\x01B", "\x00", "tab\tok\x1f"])
def test_control_characters_in_text_are_rejected(text) -> None:
    out = XmlWriter(io.BytesIO())
    out.start_document()
    out.start_element("title")

    with pytest.raises(SAXException, match="not allowed in XML"):
        out.characters(text)


def test_control_characters_in_attributes_are_rejected() -> None:
    buffer = io.BytesIO()
    out = XmlWriter(buffer, indent=None)
    out.start_document()
    out.start_element("root")

    with pytest.raises(SAXException, match="attribute 'href'"):
        out.add_element("jar", {"href": "a\x0bb.jar"})

    out.end_element("root")
    out.end_document()
    assert buffer.getvalue().endswith(b"<root/>")


def test_whitespace_characters_are_allowed() -> None:
    def build(out: XmlWriter) -> None:
        out.start_element("text")
        out.characters("a\tb\r\nc")
        out.end_element("text")

    assert "<text>a\tb\r\nc</text>" in _render(None, build)
