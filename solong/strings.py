"""String helpers: searching, comparing, copying, slicing, trimming and splitting."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional

_TERMINATOR = "\0"


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _check_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: str) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(c)
    if c == _TERMINATOR:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(c)
    if c == _TERMINATOR:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference of the first unequal pair, or 0 when the
    compared parts are equal. The end of a string compares as code 0.
    """
    _check_non_negative(n, "n")
    for i in range(n):
        a = ord(first[i]) if i < len(first) else 0
        b = ord(second[i]) if i < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(big: str, little: str, n: int) -> Optional[int]:
    """Return the index of ``little`` within the first ``n`` characters of ``big``.

    An empty ``little`` is found at index 0. A match must lie wholly inside
    the first ``n`` characters.
    """
    _check_non_negative(n, "n")
    if not little:
        return 0
    index = big[:n].find(little)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text, truncated to ``size - 1`` characters, and the
    full length of ``src``.
    """
    _check_non_negative(size, "size")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    have; when ``size`` is no larger than ``dst``, ``dst`` is left unchanged
    and the length reported is ``size + len(src)``.
    """
    _check_non_negative(size, "size")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(s)


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return first + second


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start at or past the end yields an empty string.
    """
    _check_non_negative(start, "start")
    _check_non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strtrim(s: str, charset: str) -> str:
    """Remove every character in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def count_words(s: str, sep: str) -> int:
    """Count the non-empty runs of characters between ``sep`` characters."""
    return len(split(s, sep))


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    _check_char(sep)
    return [word for word in s.split(sep) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(
    s: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` for each element of ``s`` in place.

    When ``func`` returns a string, that element is replaced with it.
    """
    for index, ch in enumerate(list(s)):
        replacement = func(index, ch)
        if replacement is not None:
            s[index] = replacement