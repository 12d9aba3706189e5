"""printf-style formatting and small writers for characters, strings and numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, Optional, TextIO

_LOWER_SYMBOLS = "0123456789abcdef"
_UPPER_SYMBOLS = "0123456789ABCDEF"
_NIL = "(nil)"
_NULL = "(null)"
_UINT_MASK = 0xFFFFFFFF


def format_number(n: int, base: int = 10, upper: bool = False) -> str:
    """Render ``n`` in ``base`` (2 to 16), with a leading minus when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("format_number expects an int")
    if not 2 <= base <= 16:
        raise ValueError(f"base must be between 2 and 16, got {base}")
    if n < 0:
        return "-" + format_number(-n, base, upper)
    symbols = _UPPER_SYMBOLS if upper else _LOWER_SYMBOLS
    digits = []
    while True:
        n, rem = divmod(n, base)
        digits.append(symbols[rem])
        if n == 0:
            break
    return "".join(reversed(digits))


def format_pointer(address: Optional[int]) -> str:
    """Render an address as ``0x`` and lower-case hex; a null address is ``(nil)``."""
    if not address:
        return _NIL
    if address < 0:
        raise ValueError("an address must not be negative")
    return "0x" + format_number(address, 16)


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _to_uint32(value: int) -> int:
    return value & _UINT_MASK


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _format_pointer_arg(value: Any) -> str:
    if value is None or isinstance(value, int):
        return format_pointer(value)
    return format_pointer(id(value))


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "c":
        return _format_char(_next_arg(args, spec))
    if spec == "s":
        value = _next_arg(args, spec)
        return _NULL if value is None else str(value)
    if spec == "p":
        return _format_pointer_arg(_next_arg(args, spec))
    if spec in ("d", "i"):
        return format_number(_to_int32(int(_next_arg(args, spec))), 10)
    if spec == "u":
        return format_number(_to_uint32(int(_next_arg(args, spec))), 10)
    if spec == "x":
        return format_number(_to_uint32(int(_next_arg(args, spec))), 16)
    if spec == "X":
        return format_number(_to_uint32(int(_next_arg(args, spec))), 16, upper=True)
    # "%%" and any unknown conversion both yield a bare percent sign.
    return "%"


def format_printf(fmt: str, *args: Any) -> str:
    """Expand the conversions %c %s %p %d %i %u %x %X and %% in ``fmt``.

    An unknown conversion becomes a bare ``%`` and takes no argument; a
    lone ``%`` at the end of ``fmt`` is dropped.
    """
    out = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        out.append(_convert(spec, remaining))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the expansion of ``fmt`` to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character to ``stream`` (standard output by default)."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _stream(stream).write(c)


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` to ``stream`` (standard output by default)."""
    if not isinstance(s, str):
        raise TypeError("put_str expects a str")
    _stream(stream).write(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline to ``stream``."""
    put_str(s, stream)
    _stream(stream).write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write ``n`` in decimal to ``stream``."""
    _stream(stream).write(format_number(n, 10))