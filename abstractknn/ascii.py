"""Character classification for single ASCII bytes."""

from __future__ import annotations

import operator

__all__ = ["is_alpha", "is_decimal", "is_hexadecimal", "is_whitespace"]


def _code(c: int | str) -> int:
    """Return the byte value of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_decimal(c: int | str) -> bool:
    """True for ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_hexadecimal(c: int | str) -> bool:
    """True for ASCII hexadecimal digits in either case."""
    code = _code(c)
    return (
        ord("0") <= code <= ord("9")
        or ord("A") <= code <= ord("F")
        or ord("a") <= code <= ord("f")
    )


def is_whitespace(c: int | str) -> bool:
    """True for space, newline, carriage return and tab."""
    return _code(c) in (ord(" "), ord("\n"), ord("\r"), ord("\t"))