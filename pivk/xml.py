"""A small parser for the XML subset used by scene description files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Union

_SPACES = frozenset(" \t\n\v\f\r")


class XmlSyntaxError(ValueError):
    """Raised when the text ends before a construct is complete."""


@dataclass
class XmlNode:
    """One element: tag name, attributes, child elements and text data."""

    name: str
    args: dict[str, str] = field(default_factory=dict)
    sub_nodes: list["XmlNode"] = field(default_factory=list)
    data: str = ""

    def find_elem(self, tag: str) -> Optional["XmlNode"]:
        """First child element with the given tag name, or None."""
        return next((node for node in self.sub_nodes if node.name == tag), None)

    def find_elems(self, tag: str) -> list["XmlNode"]:
        """All child elements with the given tag name, in document order."""
        return [node for node in self.sub_nodes if node.name == tag]


class _Reader:
    """Cursor over the document text."""

    def __init__(self, text: str, pos: int = 0):
        self._text = text
        self._pos = pos

    def _peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _skip_spaces(self) -> None:
        while self._peek() in _SPACES and self._peek() != "":
            self._pos += 1

    def _take_while(self, keep: Callable[[str], bool]) -> str:
        start = self._pos
        while True:
            ch = self._peek()
            if ch == "":
                raise XmlSyntaxError(f"unexpected end of text at offset {self._pos}")
            if not keep(ch):
                break
            self._pos += 1
        return self._text[start:self._pos]

    def _take_until(self, stop: str) -> str:
        end = self._text.find(stop, self._pos)
        if end < 0:
            raise XmlSyntaxError(f"expected {stop!r} after offset {self._pos}")
        result = self._text[self._pos:end]
        self._pos = end
        return result

    def _advance(self, count: int) -> None:
        self._pos += count
        if self._pos > len(self._text):
            raise XmlSyntaxError("unexpected end of text")

    def parse_level(self) -> list[XmlNode]:
        """Parse sibling elements until a closing tag or the end of text."""
        nodes: list[XmlNode] = []
        self._skip_spaces()
        while self._peek() == "<":
            self._pos += 1
            if self._peek() == "/":
                self._take_until(">")
                self._pos += 1
                break

            name = self._take_while(lambda c: c not in _SPACES and c not in ">/")
            args: dict[str, str] = {}
            while True:
                ch = self._peek()
                if ch == "":
                    raise XmlSyntaxError(f"unterminated tag <{name}>")
                if ch in ">/":
                    break
                self._pos += 1
                arg_name = self._take_until("=")
                self._advance(2)
                value = self._take_until('"')
                self._pos += 1
                args[arg_name] = value

            if self._peek() == "/":
                self._advance(2)
                self._skip_spaces()
                nodes.append(XmlNode(name, args))
                continue

            self._pos += 1
            self._skip_spaces()
            data = self._take_until("<")
            children = self.parse_level()
            nodes.append(XmlNode(name, args, children, data))
            self._skip_spaces()
        return nodes


def parse_text(text: str) -> list[XmlNode]:
    """Parse a document; its first line (the declaration) is skipped."""
    newline = text.find("\n")
    if newline < 0:
        raise XmlSyntaxError("document has no declaration line")
    return _Reader(text, newline + 1).parse_level()


def parse_file(path: Union[str, Path]) -> list[XmlNode]:
    """Read and parse a document from a file."""
    data = Path(path).read_bytes()
    return parse_text(data.decode("utf-8"))