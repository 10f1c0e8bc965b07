"""A small mutable string type."""

from __future__ import annotations


class SString:
    """Mutable text with in-place editing operations."""

    __slots__ = ("_text",)

    def __init__(self, text: object = "") -> None:
        self._text = "" if text is None else str(text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SString):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        if other is None:
            return False
        return NotImplemented

    __hash__ = None  # mutable

    def __iadd__(self, other: object) -> SString:
        if other is not None:
            self._text += str(other)
        return self

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"SString({self._text!r})"

    def clear(self) -> None:
        """Make the string empty."""
        self._text = ""

    def cut(self, begin: int, end: int = 0) -> None:
        """Remove characters ``begin`` to ``end`` inclusive.

        An ``end`` of 0 or past the text cuts to the end.
        """
        length = len(self._text)
        if end >= length or end == 0:
            end = length - 1
        if begin > length or end <= begin:
            raise ValueError(f"cannot cut [{begin}, {end}] from text of length {length}")
        self._text = self._text[:begin] + self._text[end + 1:]

    def trim(self) -> None:
        """Strip leading and trailing spaces."""
        self._text = self._text.strip(" ")

    def substitute(self, src: str, dst: str) -> int:
        """Replace every occurrence of ``src`` with ``dst``; returns the count."""
        if not src or dst is None:
            raise ValueError("substitute needs a non-empty source and a replacement")
        instances = self.find(src)
        if instances:
            self._text = self._text.replace(src, dst)
        return instances

    def find(self, text: str | None) -> int:
        """Number of non-overlapping occurrences of ``text``."""
        if text is None:
            return 0
        return self._text.count(text)

    def substring(self, start: int, end: int = 0) -> SString:
        """Characters from ``start`` up to ``end``; an ``end`` of 0 means the end."""
        length = len(self._text)
        start = min(start, length)
        end = length if end == 0 else min(end, length)
        return SString(self._text[start:end])