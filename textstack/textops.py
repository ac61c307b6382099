"""String algorithms and type sniffing shared by text stacks.

Indices follow one convention throughout: values past the end are clamped
to the length, and negative values count from the end so that ``-1``
means "the end of the text" (see :func:`transform_index`).
"""

from __future__ import annotations

import re
import string
from enum import IntEnum

__all__ = [
    "ValueType",
    "transform_index",
    "substr",
    "pop",
    "insert_at",
    "replace",
    "index_of",
    "index_of_char",
    "starts_with",
    "ends_with",
    "lower",
    "upper",
    "capitalize",
    "reverse",
    "trim",
    "typeof",
    "typeof_in_str",
    "is_a_num",
    "parse_to_bool",
    "parse_to_integer",
    "parse_to_double",
]

TRIM_CHARACTERS = "\t\r\n "
_SCAN_WHITESPACE = " \t\n\v\f\r"

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

_FLOAT_PREFIX = re.compile(
    r"""
    [+-]?
    (?:
        0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?\d+)?
      | (?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?
      | inf(?:inity)?
      | nan(?:\([0-9a-z_]*\))?
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)
_INTEGER_PREFIX = re.compile(r"[+-]?\d+")


class ValueType(IntEnum):
    """Kinds of value a piece of text can hold."""

    LONG = 1
    DOUBLE = 2
    BOOL = 3
    STRING = 4


_TYPE_NAMES = {
    ValueType.BOOL: "bool",
    ValueType.STRING: "string",
    ValueType.LONG: "long",
    ValueType.DOUBLE: "double",
}


def transform_index(size: int, value: int) -> int:
    """Normalise ``value`` into the range ``0..size``."""
    if value >= size:
        value = size
    if value < 0:
        value = size + value + 1
    return max(value, 0)


def substr(text: str, start: int, end: int) -> str:
    """Return the characters between ``start`` and ``end``.

    When both indices normalise to the same position the single character
    at that position is returned (or nothing at the very end).
    """
    first = transform_index(len(text), start)
    last = transform_index(len(text), end)
    if first == last:
        return text[first:first + 1]
    return text[first:last]


def pop(text: str, start: int, end: int) -> str:
    """Remove the characters from ``start`` to ``end``, both inclusive."""
    first = transform_index(len(text), start)
    last = transform_index(len(text), end)
    if first > last:
        return text
    return text[:first] + text[last + 1:]


def insert_at(text: str, point: int, element: str) -> str:
    """Insert ``element`` at ``point``."""
    position = transform_index(len(text), point)
    return text[:position] + element + text[position:]


def replace(text: str, old: str, new: str) -> str:
    """Replace every non-overlapping ``old`` from left to right; empty ``old`` changes nothing."""
    if not old:
        return text
    return text.replace(old, new)


def index_of(text: str, element: str) -> int:
    """Return the first position of ``element`` or -1; an empty ``element`` is never found."""
    if not element:
        return -1
    return text.find(element)


def index_of_char(text: str, char: str) -> int:
    """Return the first position of the single character ``char`` or -1."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return text.find(char)


def starts_with(text: str, prefix: str) -> bool:
    """Tell whether ``text`` starts with ``prefix``."""
    return substr(text, 0, len(prefix)) == prefix


def ends_with(text: str, suffix: str) -> bool:
    """Tell whether ``text`` ends with ``suffix``."""
    return substr(text, len(text) - len(suffix), -1) == suffix


def lower(text: str) -> str:
    """Lower-case the ASCII letters of ``text``."""
    return text.translate(_TO_LOWER)


def upper(text: str) -> str:
    """Upper-case the ASCII letters of ``text``."""
    return text.translate(_TO_UPPER)


def capitalize(text: str) -> str:
    """Upper-case the first letter and every letter after a space; lower-case the rest."""
    if not text:
        return text
    rest = (
        upper(current) if previous == " " else lower(current)
        for previous, current in zip(text, text[1:])
    )
    return upper(text[0]) + "".join(rest)


def reverse(text: str) -> str:
    """Return ``text`` backwards."""
    return text[::-1]


def trim(text: str) -> str:
    """Strip tabs, carriage returns, newlines and spaces from both ends.

    Text made only of such characters is returned unchanged.
    """
    stripped = text.strip(TRIM_CHARACTERS)
    return stripped if stripped else text


def _scan_float(text: str) -> str | None:
    match = _FLOAT_PREFIX.match(text.lstrip(_SCAN_WHITESPACE))
    return match.group(0) if match else None


def typeof(text: str) -> ValueType:
    """Guess what kind of value ``text`` holds."""
    if not text:
        return ValueType.STRING
    if text in ("true", "false"):
        return ValueType.BOOL
    # Text of whitespace only ends the scan before any conversion is tried,
    # which does not count as a failed number.
    if text.lstrip(_SCAN_WHITESPACE) and _scan_float(text) is None:
        return ValueType.STRING
    if "." not in text:
        return ValueType.LONG
    return ValueType.DOUBLE


def typeof_in_str(text: str) -> str:
    """Return the name of the kind of value ``text`` holds."""
    return _TYPE_NAMES.get(typeof(text), "invalid")


def is_a_num(text: str) -> bool:
    """Tell whether ``text`` holds an integer or a double."""
    return typeof(text) in (ValueType.LONG, ValueType.DOUBLE)


def parse_to_bool(text: str) -> bool:
    """Return True only for the exact text ``true``."""
    return text == "true"


def parse_to_integer(text: str) -> int:
    """Parse the leading decimal integer of ``text``.

    Raises ValueError when no integer starts the text.
    """
    match = _INTEGER_PREFIX.match(text.lstrip(_SCAN_WHITESPACE))
    if match is None:
        raise ValueError(f"no integer at the start of {text!r}")
    return int(match.group(0))


def parse_to_double(text: str) -> float:
    """Parse the leading floating-point number of ``text``.

    Raises ValueError when no number starts the text.
    """
    token = _scan_float(text)
    if token is None:
        raise ValueError(f"no number at the start of {text!r}")
    unsigned = token.lstrip("+-")
    if unsigned[:2].lower() == "0x":
        return float.fromhex(token)
    return float(token.split("(", 1)[0])