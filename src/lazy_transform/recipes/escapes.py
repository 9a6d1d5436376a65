"""Backslash escaping built on the lazy transform engine."""

from __future__ import annotations

from lazy_transform.core import (
    UNCHANGED,
    Changed,
    Cow,
    Remaining,
    TransformedPart,
    transform,
)


def _escape_step(rest: Remaining) -> TransformedPart:
    char = rest.unshift()
    if char == "\\" or char == '"':
        return Changed("\\" + char)
    return UNCHANGED


def escape_double_quotes(text: str) -> Cow:
    """Replace ``\\`` with ``\\\\`` and ``"`` with ``\\"``.

    >>> str(escape_double_quotes('a "quoted" word'))
    'a \\\\"quoted\\\\" word'
    """

    return transform(text, _escape_step)


def unescape_backslashed_verbatim(text: str) -> Cow:
    """Replace a backslash followed by any character with that character.

    ``\\\\`` is consumed as a pair and leaves a single backslash behind, so
    applying this twice strips one more level. A trailing lone backslash is
    dropped.
    """

    escaped = False

    def step(rest: Remaining) -> TransformedPart:
        nonlocal escaped
        char = rest.unshift()
        if char == "\\" and not escaped:
            escaped = True
            return Changed("")
        escaped = False
        return UNCHANGED

    return transform(text, step)


__all__ = ["escape_double_quotes", "unescape_backslashed_verbatim"]
