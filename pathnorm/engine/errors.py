"""Error taxonomy for path validation and conversion.

Every error aborts the whole conversion. The pipeline stores the first one on
``PathContext.error``; the CLI turns it into a non-zero exit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathnorm.models.responses import ErrorDetail


class PathError(ValueError):
    """Base class for every path validation or conversion failure."""

    kind = "PathError"

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def to_detail(self) -> ErrorDetail:
        from pathnorm.models.responses import ErrorDetail

        return ErrorDetail(kind=self.kind, message=self.message, context=self.context)


class TooFewSegments(PathError):
    kind = "TooFewSegments"

    def __init__(self, count: int, minimum: int = 3) -> None:
        super().__init__(
            f"expected at least {minimum} segments M1 2 C1 2 3 4 5 6Z, got {count}",
            count=count,
            minimum=minimum,
        )
        self.count = count


class MalformedMatch(PathError):
    kind = "MalformedMatch"

    def __init__(self, index: int) -> None:
        super().__init__(f"segment {index} is not a single command match", index=index)
        self.index = index


class BoundaryCommandInvalid(PathError):
    kind = "BoundaryCommandInvalid"

    def __init__(self, first: str, last: str) -> None:
        super().__init__(
            f"path must start with M and end with Z, got {first!r} ... {last!r}",
            first=first,
            last=last,
        )
        self.first = first
        self.last = last


class InvalidMiddleCommand(PathError):
    kind = "InvalidMiddleCommand"

    def __init__(self, index: int, command: str) -> None:
        super().__init__(
            f"segment {index}: expected one of C|L|V|H, got {command!r}",
            index=index,
            command=command,
        )
        self.index = index
        self.command = command


class ArityMismatch(PathError):
    kind = "ArityMismatch"

    def __init__(
        self,
        command: str,
        expected: int,
        actual: int,
        index: int | None = None,
        text: str = "",
    ) -> None:
        super().__init__(
            f"{command}: expected {expected} numbers, got {actual}" + (f" in {text!r}" if text else ""),
            command=command,
            text=text,
            expected=expected,
            actual=actual,
            index=index,
        )
        self.command = command
        self.expected = expected
        self.actual = actual


class NumberParseError(PathError):
    kind = "NumberParseError"

    def __init__(self, token: str, position: int, index: int | None = None) -> None:
        super().__init__(
            f"invalid number {token!r} at position {position}",
            token=token,
            position=position,
            index=index,
        )
        self.token = token
        self.position = position
