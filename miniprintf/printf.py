"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Any, Callable, Iterable, TextIO

from miniprintf.conversions import (
    format_char,
    format_hex,
    format_pointer,
    format_signed,
    format_string,
    format_unsigned,
)


class Conversion(Enum):
    """The conversion specifiers understood after a ``%``."""

    CHAR = "c"
    STRING = "s"
    POINTER = "p"
    DECIMAL = "d"
    INTEGER = "i"
    UNSIGNED = "u"
    HEX_LOWER = "x"
    HEX_UPPER = "X"
    PERCENT = "%"

    @property
    def takes_argument(self) -> bool:
        """Whether this conversion consumes an argument."""
        return self is not Conversion.PERCENT

    def render(self, value: Any = None) -> str:
        """Render ``value`` according to this conversion."""
        return _RENDERERS[self](value)


_RENDERERS: dict[Conversion, Callable[[Any], str]] = {
    Conversion.CHAR: format_char,
    Conversion.STRING: format_string,
    Conversion.POINTER: format_pointer,
    Conversion.DECIMAL: format_signed,
    Conversion.INTEGER: format_signed,
    Conversion.UNSIGNED: format_unsigned,
    Conversion.HEX_LOWER: lambda value: format_hex(value, False),
    Conversion.HEX_UPPER: lambda value: format_hex(value, True),
    Conversion.PERCENT: lambda _value: "%",
}


def convert(spec: str | Conversion, args: Iterable[Any]) -> str:
    """Render one conversion, taking its argument from the iterator ``args``.

    Unknown specifiers render as nothing and consume no argument.
    """
    try:
        conversion = Conversion(spec)
    except ValueError:
        return ""
    if not conversion.takes_argument:
        return conversion.render()
    try:
        value = next(iter(args))
    except StopIteration:
        raise TypeError(
            f"not enough arguments for %{conversion.value}"
        ) from None
    return conversion.render(value)


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the rendered ``args``."""
    values = iter(args)
    pieces = []
    pos = 0
    while True:
        index = fmt.find("%", pos)
        if index < 0:
            pieces.append(fmt[pos:])
            break
        pieces.append(fmt[pos:index])
        pieces.append(convert(fmt[index + 1 : index + 2], values))
        pos = index + 2
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (stdout by default); return its length."""
    text = sprintf(fmt, *args)
    out = sys.stdout if file is None else file
    out.write(text)
    return len(text)