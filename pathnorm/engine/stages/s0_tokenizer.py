"""S0 — Tokenizer.

Split raw path data into command segments: a command letter followed by every
character up to the next command letter.
"""

from __future__ import annotations

from pathnorm.engine.commands import COMMAND_LETTERS
from pathnorm.engine.context import PathContext, RawSegment
from pathnorm.engine.registry import Phase, stage


def tokenize(path: str) -> list[RawSegment]:
    """Scan ``path`` once, opening a new segment at each command letter.

    Text before the first command letter has no owning segment and is dropped.
    A string without command letters yields an empty list.
    """
    segments: list[RawSegment] = []
    command: str | None = None
    payload: list[str] = []

    for ch in path:
        if ch in COMMAND_LETTERS:
            if command is not None:
                segments.append(RawSegment(command, "".join(payload), len(segments)))
            command = ch
            payload = []
        elif command is not None:
            payload.append(ch)

    if command is not None:
        segments.append(RawSegment(command, "".join(payload), len(segments)))
    return segments


@stage(
    id="S0.01",
    phase=Phase.TOKENIZE,
    description="Split path data into command segments",
)
def tokenizer(ctx: PathContext) -> None:
    ctx.raw_segments = tokenize(ctx.path_raw)
