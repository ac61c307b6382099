"""A growable text buffer with indentation-aware rendering helpers."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from enum import Enum
from typing import Any, Iterator

from . import textops
from .formatting import format_double, format_text
from .textops import ValueType

__all__ = ["LINE_BREAKER", "SEPARATOR", "Tag", "TextStack"]

LINE_BREAKER = "\n"
SEPARATOR = "   "


class Tag(str, Enum):
    """Common HTML tag names."""

    HTML = "html"
    BODY = "body"
    DIV = "div"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    H6 = "h6"
    P = "p"
    SPAN = "span"
    A = "a"
    IMG = "img"
    INPUT = "input"
    BUTTON = "button"
    TABLE = "table"
    TR = "tr"
    TD = "td"
    TH = "th"
    THEAD = "thead"
    TBODY = "tbody"
    TFOOT = "tfoot"
    UL = "ul"
    LI = "li"
    OL = "ol"
    FORM = "form"
    LABEL = "label"
    SELECT = "select"
    OPTION = "option"
    TEXTAREA = "textarea"
    SCRIPT = "script"
    STYLE = "style"
    META = "meta"
    LINK = "link"
    HEAD = "head"
    BASE = "base"
    BR = "br"
    HR = "hr"
    TITLE = "title"
    IFRAME = "iframe"
    NAV = "nav"
    HEADER = "header"
    FOOTER = "footer"
    SECTION = "section"
    ARTICLE = "article"
    ASIDE = "aside"
    DETAILS = "details"
    SUMMARY = "summary"
    DIALOG = "dialog"
    MENU = "menu"
    MENUITEM = "menuitem"
    MAIN = "main"
    CANVAS = "canvas"
    AUDIO = "audio"
    VIDEO = "video"
    SOURCE = "source"
    TRACK = "track"
    EMBED = "embed"
    PARAM = "param"

    def __str__(self) -> str:
        return self.value


class TextStack:
    """Accumulates text, tracking an indentation level for nested blocks.

    Methods named ``self_<op>`` change the stack in place; their plain
    counterparts return a new stack with the same layout settings.
    """

    def __init__(self, line_breaker: str = LINE_BREAKER, separator: str = SEPARATOR) -> None:
        self.rendered_text = ""
        self.line_breaker = line_breaker
        self.separator = separator
        self.ident_level = 0

    # construction -------------------------------------------------------

    @classmethod
    def from_string(cls, starter: str | None) -> TextStack:
        """Create an unindented stack holding ``starter``."""
        stack = cls("", "")
        if starter:
            stack.text(starter)
        return stack

    @classmethod
    def from_format(cls, fmt: str, *args: Any) -> TextStack:
        """Create an unindented stack holding ``fmt`` expanded with ``args``."""
        stack = cls("", "")
        stack.format(fmt, *args)
        return stack

    @classmethod
    def empty(cls) -> TextStack:
        """Create an unindented, empty stack."""
        return cls("", "")

    def __str__(self) -> str:
        return self.rendered_text

    def __len__(self) -> int:
        return len(self.rendered_text)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rendered_text!r})"

    # rendering ----------------------------------------------------------

    def text(self, element: str | None) -> None:
        """Append ``element``; ``None`` or empty text appends nothing."""
        if element:
            self.rendered_text += str(element)

    def segment(self) -> None:
        """Start a new line indented to the current level."""
        self.text(self.line_breaker)
        if self.ident_level > 0:
            self.text(self.separator * self.ident_level)

    def segment_text(self, element: str | None) -> None:
        """Start a new indented line and append ``element``."""
        self.segment()
        self.text(element)

    def format(self, fmt: str, *args: Any) -> None:
        """Append ``fmt`` expanded with ``args``."""
        self.text(format_text(fmt, *args))

    def segment_format(self, fmt: str, *args: Any) -> None:
        """Start a new indented line and append the formatted text."""
        self.segment()
        self.format(fmt, *args)

    def _write_opening(self, tag: str, fmt: str | None, args: tuple[Any, ...]) -> None:
        self.segment()
        self.text("<")
        self.text(str(tag))
        if fmt is not None:
            self.text(" ")
            self.format(fmt, *args)

    def open_format(self, tag: str, fmt: str | None = None, *args: Any) -> None:
        """Write an opening tag with formatted attributes and indent."""
        self._write_opening(tag, fmt, args)
        self.text(">")
        self.ident_level += 1

    def only_open_format(self, tag: str, fmt: str | None = None, *args: Any) -> None:
        """Write an opening tag with formatted attributes, without indenting."""
        self._write_opening(tag, fmt, args)
        self.text(">")

    def auto_close_format(self, tag: str, fmt: str | None = None, *args: Any) -> None:
        """Write a self-closing tag with formatted attributes."""
        self._write_opening(tag, fmt, args)
        self.text("/>")

    def open(self, tag: str | None) -> None:
        """Open ``tag``; with ``None`` only the indentation grows."""
        if tag is None:
            self.ident_level += 1
            return
        self.open_format(tag, None)

    def close(self, tag: str | None) -> None:
        """Close ``tag``; with ``None`` only the indentation shrinks."""
        self.ident_level -= 1
        if tag is None:
            return
        self.segment()
        self.text("</")
        self.text(str(tag))
        self.text(">")

    @contextmanager
    def scope(self, tag: str | None) -> Iterator[TextStack]:
        """Open ``tag`` on entry and close it when the block completes."""
        self.open(tag)
        yield self
        self.close(tag)

    @contextmanager
    def scope_format(self, tag: str, fmt: str | None, *args: Any) -> Iterator[TextStack]:
        """Open ``tag`` with formatted attributes and close it when the block completes."""
        self.open_format(tag, fmt, *args)
        yield self
        self.close(tag)

    # administration -----------------------------------------------------

    def _derive(self, text: str) -> TextStack:
        stack = TextStack(self.line_breaker, self.separator)
        stack.ident_level = self.ident_level
        stack.rendered_text = text
        return stack

    def clone(self) -> TextStack:
        """Return an independent copy."""
        return self._derive(self.rendered_text)

    def represent(self) -> str:
        """Write the text and a newline to standard output; return what was written."""
        line = f"{self.rendered_text}\n"
        sys.stdout.write(line)
        return line

    def restart(self) -> None:
        """Clear the text and the indentation, keeping the layout settings."""
        self.rendered_text = ""
        self.ident_level = 0

    # transformations ----------------------------------------------------

    def substr(self, start: int, end: int) -> TextStack:
        return self._derive(textops.substr(self.rendered_text, start, end))

    def self_substr(self, start: int, end: int) -> None:
        self.rendered_text = textops.substr(self.rendered_text, start, end)

    def pop(self, start: int, end: int) -> TextStack:
        return self._derive(textops.pop(self.rendered_text, start, end))

    def self_pop(self, start: int, end: int) -> None:
        self.rendered_text = textops.pop(self.rendered_text, start, end)

    def insert_at(self, point: int, element: str) -> TextStack:
        return self._derive(textops.insert_at(self.rendered_text, point, element))

    def self_insert_at(self, point: int, element: str) -> None:
        self.rendered_text = textops.insert_at(self.rendered_text, point, element)

    def replace(self, old: str, new: str) -> TextStack:
        return self._derive(textops.replace(self.rendered_text, old, new))

    def self_replace(self, old: str, new: str) -> None:
        self.rendered_text = textops.replace(self.rendered_text, old, new)

    def replace_long(self, old: str, value: int) -> TextStack:
        return self.replace(old, str(int(value)))

    def self_replace_long(self, old: str, value: int) -> None:
        self.self_replace(old, str(int(value)))

    def replace_double(self, old: str, value: float) -> TextStack:
        return self.replace(old, format_double(value))

    def self_replace_double(self, old: str, value: float) -> None:
        self.self_replace(old, format_double(value))

    def lower(self) -> TextStack:
        return self._derive(textops.lower(self.rendered_text))

    def self_lower(self) -> None:
        self.rendered_text = textops.lower(self.rendered_text)

    def upper(self) -> TextStack:
        return self._derive(textops.upper(self.rendered_text))

    def self_upper(self) -> None:
        self.rendered_text = textops.upper(self.rendered_text)

    def capitalize(self) -> TextStack:
        return self._derive(textops.capitalize(self.rendered_text))

    def self_capitalize(self) -> None:
        self.rendered_text = textops.capitalize(self.rendered_text)

    def reverse(self) -> TextStack:
        return self._derive(textops.reverse(self.rendered_text))

    def self_reverse(self) -> None:
        self.rendered_text = textops.reverse(self.rendered_text)

    def trim(self) -> TextStack:
        return self._derive(textops.trim(self.rendered_text))

    def self_trim(self) -> None:
        self.rendered_text = textops.trim(self.rendered_text)

    # queries ------------------------------------------------------------

    def index_of(self, element: str) -> int:
        return textops.index_of(self.rendered_text, element)

    def index_of_char(self, char: str) -> int:
        return textops.index_of_char(self.rendered_text, char)

    def starts_with(self, prefix: str) -> bool:
        return textops.starts_with(self.rendered_text, prefix)

    def ends_with(self, suffix: str) -> bool:
        return textops.ends_with(self.rendered_text, suffix)

    def equal(self, element: str) -> bool:
        """Tell whether the text is exactly ``element``."""
        return self.rendered_text == element

    def typeof(self) -> ValueType:
        return textops.typeof(self.rendered_text)

    def typeof_in_str(self) -> str:
        return textops.typeof_in_str(self.rendered_text)

    def is_a_num(self) -> bool:
        return textops.is_a_num(self.rendered_text)

    def parse_to_bool(self) -> bool:
        return textops.parse_to_bool(self.rendered_text)

    def parse_to_integer(self) -> int:
        return textops.parse_to_integer(self.rendered_text)

    def parse_to_double(self) -> float:
        return textops.parse_to_double(self.rendered_text)