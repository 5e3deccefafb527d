"""Grammar for Visual Studio solution files."""

from slnparse.grammar.document import parse_document
from slnparse.grammar.result import (
    EnumLiteralError,
    Failure,
    GrammarError,
    SolutionParseError,
    SolutionReadError,
    Success,
)

__all__ = [
    "parse_document",
    "EnumLiteralError",
    "Failure",
    "GrammarError",
    "SolutionParseError",
    "SolutionReadError",
    "Success",
]
