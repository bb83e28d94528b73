"""S3 — Rounder. Round every coordinate to the nearest integer, ties away from zero."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray

from pathnorm.engine.context import PathContext
from pathnorm.engine.registry import Phase, stage


def round_half_away(values: NDArray[np.float64]) -> NDArray[np.float64]:
    # np.round rounds half to even; x - trunc(x) is exact, so compare the fraction.
    whole = np.trunc(values)
    frac = values - whole
    return whole + np.where(np.abs(frac) >= 0.5, np.sign(values), 0.0)


def round_segments(segments: Iterable[NDArray[np.float64]]) -> None:
    """Round each segment array in place."""
    for seg in segments:
        seg[:] = round_half_away(seg)


@stage(
    id="S3.01",
    phase=Phase.ROUND,
    description="Round coordinates to integers",
)
def rounder(ctx: PathContext) -> None:
    round_segments(ctx.segments)
