"""ASCII-only wide character classification and case mapping.

Each function accepts either an integer code point or a one-character
string. Characters outside the ASCII range never belong to any class and
are left unchanged by the case mappings. A negative code point such as
WEOF (-1) belongs to no class either.
"""

from __future__ import annotations

from typing import Union

WEOF = -1

CharLike = Union[int, str]

__all__ = [
    "WEOF",
    "is_alnum",
    "is_alpha",
    "is_blank",
    "is_cntrl",
    "is_digit",
    "is_graph",
    "is_lower",
    "is_print",
    "is_punct",
    "is_space",
    "is_upper",
    "is_xdigit",
    "to_lower",
    "to_upper",
]


def _code(wc: CharLike) -> int:
    if isinstance(wc, str):
        if len(wc) != 1:
            raise ValueError(f"expected a single character, got {wc!r}")
        return ord(wc)
    if isinstance(wc, bool) or not isinstance(wc, int):
        raise TypeError(f"expected an int or a one-character str, got {type(wc).__name__}")
    return wc


def _folded_letter(code: int) -> bool:
    folded = code & ~0x20
    return ord("A") <= folded <= ord("Z")


def _digit(code: int) -> bool:
    return ord("0") <= code <= ord("9")


def is_alnum(wc: CharLike) -> bool:
    """True for ASCII letters and decimal digits."""
    code = _code(wc)
    return _digit(code) or _folded_letter(code)


def is_alpha(wc: CharLike) -> bool:
    """True for ASCII letters."""
    return _folded_letter(_code(wc))


def is_blank(wc: CharLike) -> bool:
    """True for space and horizontal tab."""
    return _code(wc) in (ord(" "), ord("\t"))


def is_cntrl(wc: CharLike) -> bool:
    """True for the C0 control characters and DEL."""
    code = _code(wc)
    return (code & ~0x1F) == 0 or code == 0x7F


def is_digit(wc: CharLike) -> bool:
    """True for the decimal digits 0-9."""
    return _digit(_code(wc))


def is_graph(wc: CharLike) -> bool:
    """True for printable characters other than space."""
    return ord("!") <= _code(wc) <= ord("~")


def is_lower(wc: CharLike) -> bool:
    """True for ASCII lower-case letters."""
    return ord("a") <= _code(wc) <= ord("z")


def is_print(wc: CharLike) -> bool:
    """True for printable characters, space included."""
    return ord(" ") <= _code(wc) <= ord("~")


def is_punct(wc: CharLike) -> bool:
    """True for graphic characters that are neither letters nor digits."""
    code = _code(wc)
    return ord("!") <= code <= ord("~") and not (_digit(code) or _folded_letter(code))


def is_space(wc: CharLike) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return."""
    return _code(wc) in (0x20, 0x09, 0x0A, 0x0B, 0x0C, 0x0D)


def is_upper(wc: CharLike) -> bool:
    """True for ASCII upper-case letters."""
    return ord("A") <= _code(wc) <= ord("Z")


def is_xdigit(wc: CharLike) -> bool:
    """True for hexadecimal digits in either case."""
    code = _code(wc)
    folded = code & ~0x20
    return _digit(code) or ord("A") <= folded <= ord("F")


def _same_kind(wc: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(wc, str) else code


def to_lower(wc: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; return others unchanged."""
    code = _code(wc)
    if ord("A") <= code <= ord("Z"):
        code = code - ord("A") + ord("a")
    return _same_kind(wc, code)


def to_upper(wc: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; return others unchanged."""
    code = _code(wc)
    if ord("a") <= code <= ord("z"):
        code = code - ord("a") + ord("A")
    return _same_kind(wc, code)