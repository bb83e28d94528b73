"""Stage registry — every stage is a standalone function registered via decorator.

Usage:
    @stage(id="S2.01", phase=Phase.CONVERT, description="Parse numbers")
    def convert_stage(ctx: PathContext) -> None:
        ctx.segments = convert(ctx.raw_segments)

Stages run in phase order, then by ID within a phase.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from pathnorm.engine.context import PathContext

logger = logging.getLogger(__name__)


class Phase(enum.IntEnum):
    TOKENIZE = 0
    VALIDATE = 1
    CONVERT = 2
    ROUND = 3
    FORMAT = 4


@dataclass
class StageSpec:
    id: str
    phase: Phase
    fn: Callable[["PathContext"], None]
    description: str = ""


class StageRegistry:
    """Registry of pipeline stages."""

    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s (%s)", spec.id, spec.phase.name)

    def all(self) -> list[StageSpec]:
        return sorted(self._stages.values(), key=lambda s: (s.phase, s.id))


# Module-level singleton
_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(
    *,
    id: str,
    phase: Phase,
    description: str = "",
):
    """Decorator to register a stage function."""

    def decorator(fn: Callable[["PathContext"], None]):
        _registry.register(StageSpec(id=id, phase=phase, fn=fn, description=description))
        return fn

    return decorator
