"""Pipeline orchestrator — runs stages in phase order, stopping at the first error."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from pathnorm.engine.context import PathContext
from pathnorm.engine.errors import PathError
from pathnorm.engine.registry import StageRegistry, get_registry

logger = logging.getLogger(__name__)

_STAGES_PACKAGE = "pathnorm.engine.stages"


def register_stages() -> None:
    """Import all stage modules so @stage decorators fire."""
    package = importlib.import_module(_STAGES_PACKAGE)
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{_STAGES_PACKAGE}.{module_name}")


class Pipeline:
    """Orchestrates the conversion stages."""

    def __init__(self, registry: StageRegistry | None = None) -> None:
        if registry is None:
            register_stages()
            registry = get_registry()
        self.registry = registry

    def run(self, ctx: PathContext) -> PathContext:
        """Run every stage on ``ctx``.

        The first ``PathError`` is stored on ``ctx.error`` and ends the run;
        ``ctx.output`` is cleared so a failed run never carries partial output.
        """
        start = time.perf_counter()
        ordered = self.registry.all()

        for spec in ordered:
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
            except PathError as e:
                ctx.error = e
                ctx.output = ""
                logger.warning("  %s FAILED: %s", spec.id, e)
                break
            ctx.completed_stages.add(spec.id)
            elapsed = (time.perf_counter() - t0) * 1000
            ctx.stage_timings_ms[spec.id] = elapsed
            logger.debug("  %s completed in %.3fms", spec.id, elapsed)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline %s: %d/%d stages, %d segments in %.1fms",
            "complete" if ctx.ok else "aborted",
            len(ctx.completed_stages),
            len(ordered),
            ctx.num_segments,
            total,
        )
        return ctx


def create_pipeline() -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline()


def convert_path(path: str) -> PathContext:
    """Tokenize, validate, convert, round and format one path string."""
    return create_pipeline().run(PathContext(path_raw=path))
