"""String helpers with C-library style semantics over Python strings."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest

_NUL = "\0"


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [piece for piece in s.split(sep) if piece]


def strchr(s: str, c: str) -> int | None:
    """Index of the first ``c`` in ``s``; the terminator ``"\\0"`` matches at ``len(s)``."""
    if c == _NUL:
        return len(s)
    index = s.find(c)
    return None if index == -1 else index


def strrchr(s: str, c: str) -> int | None:
    """Index of the last ``c`` in ``s``; the terminator ``"\\0"`` matches at ``len(s)``."""
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index == -1 else index


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    if not needle:
        return 0
    index = haystack[: max(length, 0)].find(needle)
    return None if index == -1 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch."""
    pairs = zip_longest(s1, s2, fillvalue=_NUL)
    for a, b in islice(pairs, max(n, 0)):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def same_string(a: str | None, b: str | None) -> bool:
    """True when both are ``None`` or both are equal strings."""
    if a is None or b is None:
        return a is None and b is None
    return a == b


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size``; return the copy and ``len(src)``."""
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size``.

    Returns the resulting string and the length the full result would have had.
    """
    if size <= len(dst):
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(src) + len(dst)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(buffer: MutableSequence, f: Callable[[int, object], object]) -> None:
    """Call ``f(index, item)`` over ``buffer``; a non-``None`` result replaces the item."""
    for index, item in enumerate(list(buffer)):
        replacement = f(index, item)
        if replacement is not None:
            buffer[index] = replacement