"""Copy-on-write scanning engine and the types it hands to step functions."""

from .buffer import TextBuffer
from .cow import Cow
from .cursor import CursorReleasedError, Remaining
from .engine import LazyStr, ScanStats, StalledStepError, StepFunction, transform
from .parts import UNCHANGED, Changed, TransformedPart, Unchanged

__all__ = [
    "Cow",
    "TextBuffer",
    "Remaining",
    "CursorReleasedError",
    "Unchanged",
    "Changed",
    "UNCHANGED",
    "TransformedPart",
    "StepFunction",
    "ScanStats",
    "StalledStepError",
    "LazyStr",
    "transform",
]
