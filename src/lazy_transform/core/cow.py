"""Copy-on-write text values returned by the transform engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .buffer import TextBuffer


@dataclass(frozen=True, slots=True, eq=False)
class Cow:
    """Either a borrow of the caller's ``str`` or an owned, freshly built one.

    A borrowed value holds the exact object passed in, so ``cow.value is text``
    holds whenever no edit happened. Equality only looks at the text, like a
    Rust ``Cow``; use :attr:`is_borrowed` to tell the variants apart.
    """

    value: str
    owned: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(
                f"Cow wraps str values, not {type(self.value).__name__}"
            )

    @classmethod
    def borrowed(cls, text: str) -> "Cow":
        return cls(value=text, owned=False)

    @classmethod
    def from_owned(cls, buffer: Union[TextBuffer, str]) -> "Cow":
        if isinstance(buffer, TextBuffer):
            return cls(value=buffer.getvalue(), owned=True)
        return cls(value=buffer, owned=True)

    @property
    def is_borrowed(self) -> bool:
        return not self.owned

    @property
    def is_owned(self) -> bool:
        return self.owned

    def into_owned(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Cow):
            return self.value == other.value
        if isinstance(other, str):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        variant = "Owned" if self.owned else "Borrowed"
        return f"Cow.{variant}({self.value!r})"


__all__ = ["Cow"]
