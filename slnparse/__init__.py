"""slnparse - Structured parser for Visual Studio solution files."""

from slnparse.config import ReaderConfig, SolutionFile
from slnparse.grammar.result import (
    EnumLiteralError,
    Failure,
    GrammarError,
    SolutionParseError,
    SolutionReadError,
    Success,
)
from slnparse.solution import load_solution, parse_file, parse_string

__version__ = "0.1.0"
__all__ = [
    "parse_string",
    "parse_file",
    "load_solution",
    "ReaderConfig",
    "SolutionFile",
    "EnumLiteralError",
    "Failure",
    "GrammarError",
    "SolutionParseError",
    "SolutionReadError",
    "Success",
]
