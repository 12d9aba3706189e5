"""ASCII character classification, case mapping and integer/text conversion."""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_WHITESPACE = " \f\n\r\t\v"


def _code(c: CharLike) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError("expected a character or an integer code")


def _is_upper_code(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower_code(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_digit_code(code: int) -> bool:
    return ord("0") <= code <= ord("9")


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return _is_upper_code(code) or _is_lower_code(code)


def is_digit(c: CharLike) -> bool:
    """True for ASCII decimal digits."""
    return _is_digit_code(_code(c))


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    code = _code(c)
    return _is_digit_code(code) or _is_upper_code(code) or _is_lower_code(code)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def _map_case(c: CharLike, convert) -> CharLike:
    code = convert(_code(c))
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    return _map_case(c, lambda code: code + 32 if _is_upper_code(code) else code)


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    return _map_case(c, lambda code: code - 32 if _is_lower_code(code) else code)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first character that is not an ASCII digit; text
    with no digits yields 0.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    value = 0
    for ch in stripped:
        if not _is_digit_code(ord(ch)):
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def itoa(n: int) -> str:
    """Render an integer in decimal, with a leading minus when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("itoa expects an int")
    if n < 0:
        return "-" + _digits(-n)
    return _digits(n)


def _digits(n: int) -> str:
    if n == 0:
        return "0"
    out = []
    while n:
        n, rem = divmod(n, 10)
        out.append(chr(ord("0") + rem))
    return "".join(reversed(out))