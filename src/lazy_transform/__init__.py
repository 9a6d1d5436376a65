"""Lazy-copying, lazily allocated scanning ``str`` transformations.

Good for (un)escaping text, especially when most inputs come through
unchanged: the result borrows the input unless a step actually rewrites it.
"""

from .core import (
    UNCHANGED,
    Changed,
    Cow,
    CursorReleasedError,
    LazyStr,
    Remaining,
    ScanStats,
    StalledStepError,
    TextBuffer,
    TransformedPart,
    Unchanged,
    transform,
)
from .recipes import escape_double_quotes, unescape_backslashed_verbatim

__all__ = [
    "Changed",
    "Cow",
    "CursorReleasedError",
    "LazyStr",
    "Remaining",
    "ScanStats",
    "StalledStepError",
    "TextBuffer",
    "TransformedPart",
    "UNCHANGED",
    "Unchanged",
    "escape_double_quotes",
    "transform",
    "unescape_backslashed_verbatim",
]

__version__ = "0.0.6"
