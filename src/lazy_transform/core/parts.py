"""Outcomes a step function reports for the span it consumed."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Unchanged:
    """The consumed span appears verbatim in the output."""


@dataclass(frozen=True, slots=True)
class Changed:
    """The consumed span is replaced by ``replacement`` (possibly empty)."""

    replacement: str

    def __post_init__(self) -> None:
        if not isinstance(self.replacement, str):
            raise TypeError(
                f"replacement must be str, got {type(self.replacement).__name__}"
            )


UNCHANGED = Unchanged()

TransformedPart = Union[Unchanged, Changed]

__all__ = ["Unchanged", "Changed", "UNCHANGED", "TransformedPart"]
