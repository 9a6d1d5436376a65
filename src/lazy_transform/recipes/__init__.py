"""Ready-made transforms expressed as step functions."""

from .escapes import escape_double_quotes, unescape_backslashed_verbatim

__all__ = [
    "escape_double_quotes",
    "unescape_backslashed_verbatim",
]
