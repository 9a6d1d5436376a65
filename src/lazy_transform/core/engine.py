"""Lazy-copying scanning transform over ``str`` values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from lazy_transform.runtime import telemetry

from .buffer import TextBuffer
from .cow import Cow
from .cursor import Remaining
from .parts import Changed, TransformedPart, Unchanged

StepFunction = Callable[[Remaining], TransformedPart]


@dataclass(slots=True)
class ScanStats:
    """Counters describing a single ``transform`` call."""

    steps: int = 0
    changed_steps: int = 0
    catch_up_copies: int = 0
    catch_up_length: int = 0
    divergence_offset: Optional[int] = None

    def reset(self) -> None:
        self.steps = 0
        self.changed_steps = 0
        self.catch_up_copies = 0
        self.catch_up_length = 0
        self.divergence_offset = None


class StalledStepError(RuntimeError):
    """Raised when a step function returns without consuming any input.

    This is a bug in the step function, not a data error: continuing would
    loop forever on the same offset.
    """

    def __init__(self, offset: int, step_index: int) -> None:
        super().__init__(
            f"Step {step_index} consumed nothing at offset {offset}; "
            "every step must remove at least one character"
        )
        self.offset = offset
        self.step_index = step_index


def transform(
    text: str, step: StepFunction, *, stats: Optional[ScanStats] = None
) -> Cow:
    """Transform ``text`` according to ``step`` as lazily as possible.

    ``step`` is called repeatedly with a :class:`Remaining` view over the
    unprocessed suffix (never empty). Each call must consume at least one
    character from the front of that view and return either ``UNCHANGED`` or
    ``Changed(replacement)`` for what it consumed.

    Nothing is copied until the first ``Changed``: at that point the scanned
    prefix is copied once into a :class:`TextBuffer`, and from then on each
    span is appended as it is consumed. If no step changes anything the
    result borrows ``text`` itself.

    Example::

        def double_a(rest):
            if rest.unshift() == "a":
                return Changed("aa")
            return UNCHANGED

        transform("abc", double_a)  # Cow.Owned('aabc')
        transform("bcd", double_a)  # Cow.Borrowed('bcd')
    """

    if not isinstance(text, str):
        raise TypeError(f"transform expects str, got {type(text).__name__}")
    if stats is None:
        stats = ScanStats()
    else:
        stats.reset()

    if not text:
        return Cow.borrowed(text)

    with telemetry.span("transform::scan", component="transform") as handle:
        handle.add_metadata("length", len(text))
        output = _scan(text, step, stats, telemetry.trace_steps_enabled())
        handle.add_metadata("steps", stats.steps)
        handle.add_metadata("result", "borrowed" if output is None else "owned")

    if output is None:
        return Cow.borrowed(text)
    return Cow.from_owned(output)


def _scan(
    text: str, step: StepFunction, stats: ScanStats, trace: bool
) -> Optional[TextBuffer]:
    length = len(text)
    position = 0
    output: Optional[TextBuffer] = None

    while position < length:
        span_start = position
        rest = Remaining(text, span_start)
        try:
            part = step(rest)
        finally:
            rest.release()

        if rest.consumed < 1:
            raise StalledStepError(span_start, stats.steps)
        position = rest.position
        stats.steps += 1

        if isinstance(part, Changed):
            if output is None:
                # Catch-up copy: the only time previously scanned text is copied.
                output = TextBuffer(text[:span_start])
                stats.catch_up_copies = 1
                stats.catch_up_length = span_start
                stats.divergence_offset = span_start
                telemetry.record_event(
                    "transform::diverged",
                    level="debug",
                    data={"offset": span_start, "length": length},
                )
            output.push_str(part.replacement)
            stats.changed_steps += 1
        elif isinstance(part, Unchanged):
            if output is not None:
                output.push_str(text[span_start:position])
        else:
            raise TypeError(
                "step functions must return Unchanged or Changed, "
                f"got {type(part).__name__}"
            )

        if trace:
            telemetry.record_event(
                "transform::step",
                level="debug",
                data={
                    "start": span_start,
                    "end": position,
                    "changed": isinstance(part, Changed),
                },
            )

    return output


class LazyStr(str):
    """``str`` subclass offering :func:`transform` as a method."""

    __slots__ = ()

    def transform(
        self, step: StepFunction, *, stats: Optional[ScanStats] = None
    ) -> Cow:
        return transform(self, step, stats=stats)


__all__ = [
    "LazyStr",
    "ScanStats",
    "StalledStepError",
    "StepFunction",
    "transform",
]
