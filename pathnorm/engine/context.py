"""PathContext — the single mutable state object flowing through all stages."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from pathnorm.engine.errors import PathError


@dataclass(frozen=True)
class RawSegment:
    """One command letter plus the raw text that followed it."""

    command: str
    payload: str = ""
    # Position in the tokenized sequence
    index: int = 0

    @property
    def text(self) -> str:
        return self.command + self.payload


@dataclass
class PathContext:
    """Shared state for one conversion run."""

    # Raw path data as supplied by the caller
    path_raw: str = ""
    # Tokenizer output, Z included
    raw_segments: list[RawSegment] = field(default_factory=list)
    # One float array per non-Z segment, V/H already expanded
    segments: list[NDArray[np.float64]] = field(default_factory=list)
    # Formatted result; stays empty when any stage fails
    output: str = ""

    # --- Pipeline metadata ---
    completed_stages: set[str] = field(default_factory=set)
    stage_timings_ms: dict[str, float] = field(default_factory=dict)
    error: PathError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def num_segments(self) -> int:
        return len(self.segments)
