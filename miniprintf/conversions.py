"""Rendering of single printf conversions into text."""

from __future__ import annotations

import operator

HEX_DIGITS = "0123456789abcdef"
DECIMAL_DIGITS = "0123456789"
NIL = "(nil)"
POINTER_PREFIX = "0x"

_INT_BITS = 32
_POINTER_BITS = 64


def _wrap_unsigned(value: int, bits: int) -> int:
    """Reduce ``value`` to an unsigned integer of ``bits`` bits."""
    return operator.index(value) % (1 << bits)


def _wrap_signed(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement signed integer of ``bits`` bits."""
    unsigned = _wrap_unsigned(value, bits)
    if unsigned >= 1 << (bits - 1):
        return unsigned - (1 << bits)
    return unsigned


def to_base(value: int, digits: str) -> str:
    """Write a non-negative integer using ``digits`` as the digit alphabet."""
    base = len(digits)
    if base < 2:
        raise ValueError("a base needs at least two digits")
    if len(set(digits)) != base:
        raise ValueError("digits must be distinct")
    number = operator.index(value)
    if number < 0:
        raise ValueError("value must not be negative")
    if number == 0:
        return digits[0]
    out = []
    while number:
        number, remainder = divmod(number, base)
        out.append(digits[remainder])
    return "".join(reversed(out))


def format_char(value: int | str) -> str:
    """Render a character given as a one-character string or a byte value."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("expected a single character")
        return value
    return chr(operator.index(value) % 256)


def format_string(value: str) -> str:
    """Render a string as-is."""
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value


def format_pointer(address: int | None) -> str:
    """Render an address in lower-case hex with a ``0x`` prefix, or ``(nil)``."""
    if address is None:
        return NIL
    number = _wrap_unsigned(address, _POINTER_BITS)
    if number == 0:
        return NIL
    return POINTER_PREFIX + to_base(number, HEX_DIGITS)


def format_signed(value: int) -> str:
    """Render a value as a signed 32-bit decimal integer."""
    number = _wrap_signed(value, _INT_BITS)
    sign = "-" if number < 0 else ""
    return sign + to_base(abs(number), DECIMAL_DIGITS)


def format_unsigned(value: int) -> str:
    """Render a value as an unsigned 32-bit decimal integer."""
    return to_base(_wrap_unsigned(value, _INT_BITS), DECIMAL_DIGITS)


def format_hex(value: int, uppercase: bool) -> str:
    """Render a value as an unsigned 32-bit hexadecimal integer."""
    digits = HEX_DIGITS.upper() if uppercase else HEX_DIGITS
    return to_base(_wrap_unsigned(value, _INT_BITS), digits)