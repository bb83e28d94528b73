"""S4 — Formatter. Render numeric segments as nested bracketed integer lists."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from pathnorm.engine.context import PathContext
from pathnorm.engine.registry import Phase, stage


def _format_value(value: float) -> str:
    # Adding 0.0 turns -0.0 into 0.0.
    return f"{value + 0.0:.0f}"


def format_segment(segment: NDArray[np.float64]) -> str:
    return "[" + ", ".join(_format_value(float(v)) for v in segment) + "]"


def format_segments(segments: Sequence[NDArray[np.float64]]) -> str:
    """Render ``[[a, b],\\n [c, d, ...]]``."""
    return "[" + ",\n ".join(format_segment(seg) for seg in segments) + "]"


def segments_to_lists(segments: Sequence[NDArray[np.float64]]) -> list[list[int]]:
    """Plain-int copy of rounded segments for structured output."""
    return [[int(v) for v in seg] for seg in segments]


@stage(
    id="S4.01",
    phase=Phase.FORMAT,
    description="Render segments as bracketed integer lists",
)
def formatter(ctx: PathContext) -> None:
    ctx.output = format_segments(ctx.segments)
