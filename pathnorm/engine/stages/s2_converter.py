"""S2 — Segment Converter.

Parse each segment's numbers with strict arity checks and expand V/H shorthand
into full (x, y) pairs using the previous segment's end point.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from pathnorm.engine.commands import CommandKind
from pathnorm.engine.context import PathContext, RawSegment
from pathnorm.engine.errors import ArityMismatch, NumberParseError
from pathnorm.engine.registry import Phase, stage

# Decimal or exponent notation, optional sign. No inf/nan/underscores.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(token: str, position: int, index: int | None = None) -> float:
    if not _NUMBER_RE.fullmatch(token):
        raise NumberParseError(token, position, index)
    value = float(token)
    # Out of double range parses as inf; treat like any other bad literal.
    if not np.isfinite(value):
        raise NumberParseError(token, position, index)
    return value


def convert_segment(segment: RawSegment) -> NDArray[np.float64]:
    """Parse the payload of one segment, without shorthand expansion."""
    kind = CommandKind(segment.command)
    tokens = segment.payload.split()
    if len(tokens) != kind.arity:
        raise ArityMismatch(kind.value, kind.arity, len(tokens), segment.index, segment.text)
    values = [parse_number(tok, pos, segment.index) for pos, tok in enumerate(tokens)]
    return np.array(values, dtype=np.float64)


def convert(segments: Sequence[RawSegment]) -> list[NDArray[np.float64]]:
    """Convert validated segments into numeric segments, dropping the final Z.

    V takes its x from the previous segment's second-to-last value and H its y
    from the previous segment's last value. Every converted segment ends in an
    (x, y) pair, so this also holds when the previous segment is the M.
    """
    result: list[NDArray[np.float64]] = []
    for seg in segments[:-1]:
        values = convert_segment(seg)
        kind = CommandKind(seg.command)
        if kind is CommandKind.VERTICAL:
            prev = result[-1]
            values = np.array([prev[-2], values[0]], dtype=np.float64)
        elif kind is CommandKind.HORIZONTAL:
            prev = result[-1]
            values = np.array([values[0], prev[-1]], dtype=np.float64)
        result.append(values)
    return result


@stage(
    id="S2.01",
    phase=Phase.CONVERT,
    description="Parse numbers and expand V/H shorthand",
)
def segment_converter(ctx: PathContext) -> None:
    ctx.segments = convert(ctx.raw_segments)
