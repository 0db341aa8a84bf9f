"""Rendering of values into text with '%' placeholders, and integer parsing."""

from __future__ import annotations

import operator
import struct

__all__ = [
    "format_bool",
    "format_integer",
    "format_float",
    "format_message",
    "int_from_string",
]

_DIGITS = "0123456789abcdef"
_UINT64_MAX = 2**64 - 1
_FRACTION_PRECISION = 2


def format_bool(value: bool) -> str:
    """Render a boolean as 'true' or 'false'."""
    return str(bool(value)).lower()


def format_integer(value: int, base: int = 10) -> str:
    """Render an integer in the given base (2 to 16, 0 meaning 10), lowercase digits."""
    value = operator.index(value)
    if base == 0:
        base = 10
    if not 2 <= base <= 16:
        raise ValueError(f"base must be between 2 and 16, got {base}")
    sign = ""
    if value < 0:
        sign = "-"
        value = -value
    if value == 0:
        return sign + "0"
    digits = []
    while value > 0:
        value, digit = divmod(value, base)
        digits.append(_DIGITS[digit])
    return sign + "".join(reversed(digits))


def format_float(value: float) -> str:
    """Render a float with two truncated fractional digits.

    Zero is written without a fraction, infinities as 'Infinity', NaN as
    'NaN', and magnitudes past the 64-bit unsigned range as '(...)'.
    """
    value = float(value)
    (bits,) = struct.unpack("<Q", struct.pack("<d", value))
    exponent = (bits >> 52) & 0x7FF
    mantissa = bits & ((1 << 52) - 1)
    negative = bool(bits >> 63)

    sign = "-" if negative else ""
    if exponent == 0x7FF:
        return sign + ("Infinity" if mantissa == 0 else "NaN")
    if exponent == 0 and mantissa == 0:
        return sign + "0"

    absolute = -value if negative else value
    if absolute > float(_UINT64_MAX):
        return sign + "(...)"

    fraction = absolute
    fraction_digits = []
    for _ in range(_FRACTION_PRECISION):
        fraction -= float(int(fraction))
        fraction *= 10.0
        fraction_digits.append(str(int(fraction)))
    return f"{sign}{format_integer(int(absolute))}.{''.join(fraction_digits)}"


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return format_bool(value)
    if isinstance(value, int):
        return format_integer(value)
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    if hasattr(value, "x") and hasattr(value, "y"):
        return f"{{ x = {format_float(value.x)}, y = {format_float(value.y)} }}"
    raise TypeError(f"cannot format value of type {type(value).__name__}")


def format_message(template: str, *args: object) -> str:
    """Replace each '%' in the template with the next argument, formatted by type.

    Booleans, integers, floats, strings, bytes and objects with 'x' and 'y'
    attributes are supported. Surplus arguments are ignored.
    """
    if not template:
        raise ValueError("format template must not be empty")
    pieces = template.split("%")
    placeholders = len(pieces) - 1
    if len(args) < placeholders:
        raise ValueError(
            f"template has {placeholders} placeholders but {len(args)} arguments were given"
        )
    parts = [pieces[0]]
    for argument, piece in zip(args, pieces[1:]):
        parts.append(_format_value(argument))
        parts.append(piece)
    return "".join(parts)


def int_from_string(text: str, base: int) -> int:
    """Parse an unsigned integer written with hexadecimal-style digits in the given base."""
    result = 0
    for char in text:
        try:
            digit = int(char, 16)
        except ValueError:
            raise ValueError(f"character {char!r} is not a digit") from None
        if digit >= base:
            raise ValueError(f"digit {char!r} is invalid in base {base}")
        result = result * base + digit
    return result