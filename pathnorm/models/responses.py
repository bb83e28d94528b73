"""Structured (JSON) output models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from pathnorm.engine.context import PathContext
from pathnorm.engine.stages.s4_formatter import segments_to_lists


class ErrorDetail(BaseModel):
    kind: str
    message: str
    context: dict[str, Any] = Field(default_factory=dict)


class ConversionResponse(BaseModel):
    """Result of converting one path: either segments and text, or an error."""

    path: str
    segments: list[list[int]] | None = None
    text: str | None = None
    error: ErrorDetail | None = None
    processing_time_ms: float = 0.0

    @classmethod
    def from_context(cls, ctx: PathContext) -> ConversionResponse:
        elapsed = round(sum(ctx.stage_timings_ms.values()), 3)
        if ctx.error is not None:
            return cls(path=ctx.path_raw, error=ctx.error.to_detail(), processing_time_ms=elapsed)
        return cls(
            path=ctx.path_raw,
            segments=segments_to_lists(ctx.segments),
            text=ctx.output,
            processing_time_ms=elapsed,
        )
