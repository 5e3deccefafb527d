"""Parse .sln files (custom text format, not XML)."""

from __future__ import annotations

import logging
import os

from slnparse.config import ReaderConfig, SolutionFile
from slnparse.grammar.document import parse_document
from slnparse.grammar.result import Failure, SolutionReadError, Success

logger = logging.getLogger(__name__)


def parse_string(text: str) -> Success[SolutionFile] | Failure:
    """Parse solution text into a SolutionFile.

    Returns a Success holding the document, or a Failure describing the
    nearest unmet expectation. Never returns a partial document.
    """
    result = parse_document(text)
    if not result.ok:
        logger.debug(f"Solution parse failed: {result.error}")
    return result


def read_solution_text(sln_path: str | os.PathLike, config: ReaderConfig | None = None) -> str:
    """Read the whole file as text.

    Raises:
        SolutionReadError: If the file is missing, unreadable or not decodable.
    """
    config = config or ReaderConfig()
    try:
        with open(sln_path, "r", encoding=config.encoding, errors=config.errors) as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SolutionReadError(str(sln_path), str(e)) from e


def parse_file(sln_path: str | os.PathLike, config: ReaderConfig | None = None) -> Success[SolutionFile] | Failure:
    """Read and parse a .sln file.

    Raises:
        SolutionReadError: If the file cannot be read. Grammar failures are
            returned as a Failure, not raised.
    """
    text = read_solution_text(sln_path, config)
    logger.debug(f"Read {len(text)} character(s) from {sln_path}")
    return parse_string(text)


def load_solution(sln_path: str | os.PathLike, config: ReaderConfig | None = None) -> SolutionFile:
    """Read and parse a .sln file, raising on any failure.

    Raises:
        SolutionReadError: If the file cannot be read.
        SolutionParseError: If the text is not a valid solution document.
    """
    return parse_file(sln_path, config).unwrap()
