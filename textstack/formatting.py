"""Expansion of the small printf-like format language used by text stacks.

Supported directives, checked in this order at every position:

``%d`` ``%i`` ``%ld``  integer
``%f`` ``%lf``         double, trailing zeros trimmed (see :func:`format_double`)
``%c``                 single character (an ``int`` code point or a ``str``)
``%b``                 boolean rendered as ``true`` / ``false``
``%sc`` ``%s``         string; ``None`` renders nothing
``%tc`` ``%t``         any object rendered through ``str()``; ``None`` renders nothing

Anything else, including a lone ``%``, is copied through unchanged.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator

__all__ = ["format_text", "format_double"]


def format_double(value: float) -> str:
    """Render ``value`` like ``%f`` but without superfluous trailing zeros.

    At least one digit is kept after the decimal point, so ``26.0`` stays
    ``"26.0"`` and ``1.81`` becomes ``"1.81"``.
    """
    text = f"{float(value):f}"
    if "." not in text:
        return text
    text = text.rstrip("0")
    if text.endswith("."):
        text += "0"
    return text


def _render_int(value: Any) -> str:
    return str(int(value))


def _render_double(value: Any) -> str:
    return format_double(value)


def _render_char(value: Any) -> str:
    char = chr(value) if isinstance(value, int) else str(value)[:1]
    # A NUL character terminates the text, so nothing is appended.
    return "" if char == "\0" else char


def _render_bool(value: Any) -> str:
    return str(bool(value)).lower()


def _render_string(value: Any) -> str:
    return "" if value is None else str(value)


_DIRECTIVES: tuple[tuple[str, Callable[[Any], str]], ...] = (
    ("%d", _render_int),
    ("%i", _render_int),
    ("%ld", _render_int),
    ("%f", _render_double),
    ("%lf", _render_double),
    ("%c", _render_char),
    ("%b", _render_bool),
    ("%sc", _render_string),
    ("%s", _render_string),
    ("%tc", _render_string),
    ("%t", _render_string),
)


def _next_argument(values: Iterator[Any], directive: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(
            f"not enough arguments for format directive {directive!r}"
        ) from None


def format_text(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text."""
    values = iter(args)
    parts: list[str] = []
    size = len(fmt)
    i = 0
    while i < size - 1:
        for token, render in _DIRECTIVES:
            if fmt.startswith(token, i):
                parts.append(render(_next_argument(values, token)))
                i += len(token)
                break
        else:
            parts.append(fmt[i])
            i += 1
    if i < size:
        parts.append(fmt[i:])
    return "".join(parts)