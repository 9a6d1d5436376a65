"""Front-consuming cursor over the unprocessed suffix of a string."""

from __future__ import annotations

from typing import Callable, Optional


class CursorReleasedError(RuntimeError):
    """Raised when a cursor is used after its step invocation has ended."""

    def __init__(self, position: int) -> None:
        super().__init__(
            f"Remaining view at offset {position} was used after its step returned"
        )
        self.position = position


class Remaining:
    """Shrinking view ``source[position:]`` handed to one step invocation.

    Every ``unshift*`` method removes characters from the front and returns
    them. The view never copies ``source``; only the characters actually
    returned are sliced out.
    """

    __slots__ = ("_source", "_start", "_position", "_released")

    def __init__(self, source: str, position: int = 0) -> None:
        if position < 0 or position > len(source):
            raise ValueError(
                f"position {position} outside of source of length {len(source)}"
            )
        self._source = source
        self._start = position
        self._position = position
        self._released = False

    @property
    def position(self) -> int:
        """Absolute offset of the view's first character within the source."""

        return self._position

    @property
    def consumed(self) -> int:
        """Characters removed since this handle was created."""

        return self._position - self._start

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        self._released = True

    def _check(self) -> None:
        if self._released:
            raise CursorReleasedError(self._position)

    def peek(self, offset: int = 0) -> Optional[str]:
        self._check()
        if offset < 0:
            raise ValueError("offset must be non-negative")
        index = self._position + offset
        if index >= len(self._source):
            return None
        return self._source[index]

    def startswith(self, prefix: str) -> bool:
        self._check()
        return self._source.startswith(prefix, self._position)

    def unshift(self) -> Optional[str]:
        self._check()
        if self._position >= len(self._source):
            return None
        char = self._source[self._position]
        self._position += 1
        return char

    def unshift_n(self, count: int) -> str:
        self._check()
        if count < 0:
            raise ValueError("count must be non-negative")
        end = min(self._position + count, len(self._source))
        taken = self._source[self._position : end]
        self._position = end
        return taken

    def unshift_while(self, predicate: Callable[[str], bool]) -> str:
        self._check()
        end = self._position
        limit = len(self._source)
        while end < limit and predicate(self._source[end]):
            end += 1
        taken = self._source[self._position : end]
        self._position = end
        return taken

    def unshift_prefix(self, prefix: str) -> bool:
        self._check()
        if not prefix or not self._source.startswith(prefix, self._position):
            return False
        self._position += len(prefix)
        return True

    def __len__(self) -> int:
        self._check()
        return len(self._source) - self._position

    def __bool__(self) -> bool:
        self._check()
        return self._position < len(self._source)

    def __str__(self) -> str:
        self._check()
        return self._source[self._position :]

    def __repr__(self) -> str:
        state = "released" if self._released else "active"
        rest = self._source[self._position :]
        return f"<Remaining {state} at {self._position}: {rest!r}>"


__all__ = ["Remaining", "CursorReleasedError"]
