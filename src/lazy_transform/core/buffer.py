"""Owned, growable output buffer."""

from __future__ import annotations

from typing import List


class TextBuffer:
    """Append-only text accumulator.

    Chunks are kept as-is and joined once in :meth:`getvalue`, so appending is
    amortized O(len(chunk)) regardless of how much has been written.
    """

    __slots__ = ("_chunks", "_length")

    def __init__(self, initial: str = "") -> None:
        self._chunks: List[str] = []
        self._length = 0
        if initial:
            self.push_str(initial)

    def push_str(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        if text:
            self._chunks.append(text)
            self._length += len(text)

    def push(self, char: str) -> None:
        if not isinstance(char, str):
            raise TypeError(f"expected str, got {type(char).__name__}")
        if len(char) != 1:
            raise ValueError("push expects a single character")
        self.push_str(char)

    def getvalue(self) -> str:
        if len(self._chunks) > 1:
            self._chunks = ["".join(self._chunks)]
        return self._chunks[0] if self._chunks else ""

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return self.getvalue()

    def __repr__(self) -> str:
        return f"TextBuffer({self.getvalue()!r})"


__all__ = ["TextBuffer"]
