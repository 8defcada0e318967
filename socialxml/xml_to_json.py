"""Conversion of XML text into JSON text, pretty-printed or minified."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from xml.dom import Node, minidom
from xml.parsers.expat import ExpatError

_OPEN_BRACKET = re.compile(r"[{\[]$")
_CLOSED_BRACKET = re.compile(r"(},|]|})$")
_INDENT_STEP = 4


@dataclass(frozen=True)
class _Style:
    newline: str
    separator: str


_PRETTY = _Style(newline="\n", separator=": ")
_MINIFIED = _Style(newline="", separator=":")


def _name(node: Node | None) -> str:
    return "" if node is None else node.nodeName


def _is_text(node: Node | None) -> bool:
    return node is not None and node.nodeType in (Node.TEXT_NODE, Node.CDATA_SECTION_NODE)


def _text(node: Node) -> str:
    """Concatenated text of all text descendants of a node."""
    if _is_text(node):
        return node.data
    return "".join(_text(child) for child in node.childNodes)


def _strip_blank_text(node: Node) -> None:
    for child in list(node.childNodes):
        if child.nodeType == Node.TEXT_NODE and not child.data.strip():
            node.removeChild(child)
        else:
            _strip_blank_text(child)


def _root_element(xml_text: str) -> Node | None:
    """The document element, or None when the text is not well-formed XML."""
    try:
        document = minidom.parseString(xml_text)
    except ExpatError:
        return None
    document.normalize()
    _strip_blank_text(document)
    return document.documentElement


@dataclass
class _JsonWriter:
    style: _Style
    parts: list[str] = field(default_factory=list)
    _stack: list[str] = field(default_factory=list)

    def emit(self, text: str) -> None:
        self.parts.append(text)

    def write_children(self, root: Node) -> None:
        current: Node | None = None
        child = root.firstChild
        while child is not None:
            if child.nodeType == Node.ELEMENT_NODE:
                current = child
                self._open(child)
                self._stack.append(child.nodeName)
            self.write_children(child)
            self._close(current)
            child = child.nextSibling

    def _open(self, element: Node) -> None:
        nl, sep = self.style.newline, self.style.separator
        name = element.nodeName
        first = element.firstChild
        next_name = _name(element.nextSibling)
        top = self._stack[-1] if self._stack else None

        if first is None:
            return
        if not _is_text(first):
            if top == name:
                self.emit("{" + nl)
            elif name == next_name:
                self.emit(f'"{name}"{sep}[{nl}{{{nl}')
            else:
                self.emit(f'"{name}"{sep}{{{nl}')
            return

        text = _text(element)
        if top == name:
            if name == next_name:
                self.emit(f'"{text}",{nl}')
            else:
                self.emit(f'"{text.strip()}"{nl}')
        elif name == next_name:
            self.emit(f'"{name}"{sep}[{nl}')
            self.emit(f'"{text.strip()}",{nl}')
        else:
            comma = "," if element.nextSibling is not None else ""
            self.emit(f'"{name}"{sep}"{text.strip()}"{comma}{nl}')

    def _close(self, element: Node | None) -> None:
        nl = self.style.newline
        name = _name(element)
        next_node = element.nextSibling if element is not None else None
        count = 0
        if _name(next_node) != name:
            while self._stack and self._stack[-1] == name:
                self._stack.pop()
                count += 1

        first_is_text = element is not None and _is_text(element.firstChild)
        if not ((element is not None and not first_is_text) or count > 1):
            return
        trailing = "," if next_node is not None else ""
        if count <= 1:
            self.emit("}" + trailing + nl)
        elif first_is_text:
            self.emit("]" + trailing + nl)
        else:
            self.emit("}" + nl + "]" + trailing + nl)


def _convert(xml_text: str, style: _Style) -> str:
    root = _root_element(xml_text)
    writer = _JsonWriter(style)
    nl, sep = style.newline, style.separator
    writer.emit(f'{{{nl}"{_name(root)}"{sep}{{{nl}')
    if root is not None:
        writer.write_children(root)
    writer.emit("}" + nl + "}")
    return "".join(writer.parts)


def xml_to_json(xml_text: str) -> str:
    """Convert XML text to indented JSON text; empty input gives an empty string."""
    if not xml_text:
        return ""
    return pretty_json(_convert(xml_text, _PRETTY))


def xml_to_json_minified(xml_text: str) -> str:
    """Convert XML text to JSON text without whitespace between tokens."""
    if not xml_text:
        return ""
    return _convert(xml_text, _MINIFIED)


def _lines(text: str) -> list[str]:
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def pretty_json(json_text: str) -> str:
    """Indent JSON text by four spaces per open bracket ending a line."""
    depth = 0
    out: list[str] = []
    for line in _lines(json_text):
        if _OPEN_BRACKET.search(line):
            out.append(" " * depth + line)
            depth += _INDENT_STEP
        elif _CLOSED_BRACKET.search(line):
            depth -= _INDENT_STEP
            out.append(" " * depth + line)
        else:
            out.append(" " * depth + line)
    return "\n".join(out)