"""pathnorm conversion engine."""

from pathnorm.engine.registry import stage, Phase, get_registry
from pathnorm.engine.context import PathContext, RawSegment
from pathnorm.engine.pipeline import Pipeline, convert_path

__all__ = [
    "stage",
    "Phase",
    "get_registry",
    "PathContext",
    "RawSegment",
    "Pipeline",
    "convert_path",
]
