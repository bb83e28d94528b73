"""S1 — Validator.

Gate on segment count and command order: M first, Z last, only C|L|V|H in
between. Later stages rely on these checks and do not repeat them.
"""

from __future__ import annotations

from collections.abc import Sequence

from pathnorm.engine.commands import COMMAND_LETTERS, MIDDLE_COMMANDS, CommandKind
from pathnorm.engine.context import PathContext, RawSegment
from pathnorm.engine.errors import (
    BoundaryCommandInvalid,
    InvalidMiddleCommand,
    MalformedMatch,
    TooFewSegments,
)
from pathnorm.engine.registry import Phase, stage

# M + at least one drawing command + Z
MIN_SEGMENTS = 3


def validate(segments: Sequence[RawSegment]) -> None:
    """Raise the first structural error found in ``segments``."""
    if len(segments) < MIN_SEGMENTS:
        raise TooFewSegments(len(segments), MIN_SEGMENTS)

    for i, seg in enumerate(segments):
        if len(seg.command) != 1 or seg.command not in COMMAND_LETTERS:
            raise MalformedMatch(i)

    first, last = segments[0].command, segments[-1].command
    if first != CommandKind.MOVE.value or last != CommandKind.CLOSE.value:
        raise BoundaryCommandInvalid(first, last)

    for i, seg in enumerate(segments[1:-1], start=1):
        if CommandKind(seg.command) not in MIDDLE_COMMANDS:
            raise InvalidMiddleCommand(i, seg.command)


@stage(
    id="S1.01",
    phase=Phase.VALIDATE,
    description="Check segment count and command order",
)
def validator(ctx: PathContext) -> None:
    validate(ctx.raw_segments)
