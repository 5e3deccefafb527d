"""Parse results and error types.

Grammar failures are ordinary return values. Only reading the input from
disk raises.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

_FOUND_WIDTH = 20


@dataclass(frozen=True)
class GrammarError:
    """The nearest unmet expectation.

    Line, column and the excerpt are computed from ``source`` when read.

    Attributes:
        expected: Description of the literal or construct that was expected.
        position: 0-based offset into the input.
        source: The parsed text; not part of equality or repr.
    """
    expected: str
    position: int
    source: str = field(default="", repr=False, compare=False)

    @property
    def line(self) -> int:
        return line_and_column(self.source, self.position)[0]

    @property
    def column(self) -> int:
        return line_and_column(self.source, self.position)[1]

    @property
    def found(self) -> str:
        """A short excerpt of the input at ``position``."""
        return self.source[self.position:self.position + _FOUND_WIDTH]

    def __str__(self) -> str:
        found = repr(self.found) if self.found else "end of input"
        return f"Line {self.line}, column {self.column}: expected {self.expected}, found {found}"


@dataclass(frozen=True)
class EnumLiteralError(GrammarError):
    """An unrecognised platform or build-configuration token."""
    text: str = ""
    enum_name: str = ""

    def __str__(self) -> str:
        return (
            f"Line {self.line}, column {self.column}: "
            f"could not parse '{self.text}' into a `{self.enum_name}`"
        )


class SolutionParseError(Exception):
    """Raised by ``Failure.unwrap()`` for callers that prefer exceptions."""

    def __init__(self, error: GrammarError) -> None:
        super().__init__(str(error))
        self.error = error


class SolutionReadError(Exception):
    """The solution file could not be read. Not a grammar failure."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to read {path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T
    position: int

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    error: GrammarError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        raise SolutionParseError(self.error)


def line_and_column(text: str, pos: int) -> tuple[int, int]:
    """Return the 1-based line and column of an offset."""
    line = text.count("\n", 0, pos) + 1
    column = pos - (text.rfind("\n", 0, pos) + 1) + 1
    return line, column


def fail(text: str, pos: int, expected: str) -> Failure:
    return Failure(GrammarError(expected, pos, text))


def fail_enum(text: str, pos: int, literal: str, enum_name: str) -> Failure:
    return Failure(EnumLiteralError(
        expected=f"a `{enum_name}` literal",
        position=pos,
        source=text,
        text=literal,
        enum_name=enum_name,
    ))
