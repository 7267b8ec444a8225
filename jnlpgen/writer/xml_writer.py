"""Streaming XML writer.

Thin layer over :class:`xml.sax.saxutils.XMLGenerator` that keeps track of
nesting so the output can be indented, collapses empty elements to
``<name/>`` and refuses to close an element that is not the innermost open
one. Text and attribute values holding characters XML 1.0 does not
allow are rejected with :class:`~xml.sax.SAXException`.
"""

from __future__ import annotations

import re
from typing import BinaryIO, Mapping, Optional
from xml.sax import SAXException
from xml.sax.saxutils import XMLGenerator
from xml.sax.xmlreader import AttributesImpl

DEFAULT_INDENT = "    "
DEFAULT_ENCODING = "UTF-8"

_INVALID_CHARS = re.compile(
    "[^\t\n\r\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


class XmlWriter:
    def __init__(
        self,
        out: BinaryIO,
        *,
        indent: Optional[str] = DEFAULT_INDENT,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        self._generator = XMLGenerator(
            out,
            encoding=encoding,
            short_empty_elements=True,
        )
        self._indent = indent
        self._open: list[str] = []
        # One flag per open element: has a child element been written yet.
        self._has_children: list[bool] = []

    def start_document(self) -> None:
        self._generator.startDocument()

    def end_document(self) -> None:
        if self._open:
            raise SAXException(
                f"Document ended with unclosed elements: {', '.join(self._open)}"
            )
        if self._indent is not None:
            self._generator.ignorableWhitespace("\n")
        self._generator.endDocument()

    def start_element(
        self,
        name: str,
        attributes: Optional[Mapping[str, str]] = None,
    ) -> None:
        attributes = dict(attributes or {})
        for attribute, value in attributes.items():
            _check_text(value, f"attribute {attribute!r} of {name!r}")

        if self._has_children:
            self._has_children[-1] = True
            self._new_line(len(self._open))

        self._generator.startElement(name, AttributesImpl(attributes))
        self._open.append(name)
        self._has_children.append(False)

    def add_element(
        self,
        name: str,
        attributes: Optional[Mapping[str, str]] = None,
    ) -> None:
        """Write an empty element."""

        self.start_element(name, attributes)
        self.end_element(name)

    def characters(self, text: str) -> None:
        _check_text(text, f"text of {self._open[-1]!r}" if self._open else "text")
        self._generator.characters(text)

    def end_element(self, name: str) -> None:
        if not self._open or self._open[-1] != name:
            current = self._open[-1] if self._open else None
            raise SAXException(
                f"Cannot close element {name!r}, innermost open element is {current!r}"
            )

        self._open.pop()
        if self._has_children.pop():
            self._new_line(len(self._open))
        self._generator.endElement(name)

    def _new_line(self, depth: int) -> None:
        if self._indent is not None:
            self._generator.ignorableWhitespace("\n" + self._indent * depth)


def _check_text(value: str, where: str) -> None:
    match = _INVALID_CHARS.search(value)
    if match:
        raise SAXException(
            f"Character {match.group()!r} is not allowed in XML ({where})"
        )
