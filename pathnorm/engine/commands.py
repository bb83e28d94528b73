"""Path command alphabet and per-command argument counts."""

from __future__ import annotations

import enum


class CommandKind(str, enum.Enum):
    MOVE = "M"
    CUBIC = "C"
    LINE = "L"
    VERTICAL = "V"
    HORIZONTAL = "H"
    CLOSE = "Z"

    @property
    def arity(self) -> int:
        return _ARITY[self]


_ARITY: dict[CommandKind, int] = {
    CommandKind.MOVE: 2,
    CommandKind.CUBIC: 6,
    CommandKind.LINE: 2,
    CommandKind.VERTICAL: 1,
    CommandKind.HORIZONTAL: 1,
    CommandKind.CLOSE: 0,
}

COMMAND_LETTERS: frozenset[str] = frozenset(kind.value for kind in CommandKind)

# Commands allowed between the leading M and the trailing Z.
MIDDLE_COMMANDS: frozenset[CommandKind] = frozenset({
    CommandKind.CUBIC,
    CommandKind.LINE,
    CommandKind.VERTICAL,
    CommandKind.HORIZONTAL,
})


def arity(command: str | CommandKind) -> int:
    """Expected number of numeric arguments for a command letter."""
    return CommandKind(command).arity
