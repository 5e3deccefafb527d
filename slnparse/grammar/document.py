"""Assemble a SolutionFile from the project and global-section parsers."""

from __future__ import annotations

import logging
from functools import partial

from slnparse.config import SolutionFile, SolutionGlobal
from slnparse.grammar.global_sections import parse_global_section
from slnparse.grammar.primitives import keyword, looking_at, repeat_until, skip_spaces
from slnparse.grammar.project import looking_at_project_start, parse_project
from slnparse.grammar.result import Failure, Success

logger = logging.getLogger(__name__)

GLOBAL_START = "Global"
GLOBAL_END = "EndGlobal"

_global_start = partial(keyword, word=GLOBAL_START)
_global_end = partial(keyword, word=GLOBAL_END)

_LINE_BREAKS = "\r\n\ufeff"


def _at_line_start(text: str, pos: int) -> bool:
    while pos > 0 and text[pos - 1] in " \t":
        pos -= 1
    return pos == 0 or text[pos - 1] in _LINE_BREAKS


def _skip_preamble(text: str, pos: int) -> int:
    """Skip the format banner and anything else before the first block.

    Stops at the first line that starts a project header or the Global block.
    """
    while pos < len(text):
        if _at_line_start(text, pos):
            if looking_at_project_start(text, pos) or looking_at(_global_start, text, pos):
                return pos
        pos += 1
    return pos


def parse_global(text: str, pos: int) -> Success[SolutionGlobal] | Failure:
    """Parse the single Global ... EndGlobal block."""
    start = _global_start(text, pos)
    if not start.ok:
        return start
    sections = repeat_until(text, start.position, parse_global_section, _global_end)
    if not sections.ok:
        return sections
    end = _global_end(text, sections.position)
    if not end.ok:
        return end
    return Success(SolutionGlobal(sections=tuple(sections.value)), end.position)


def parse_document(text: str) -> Success[SolutionFile] | Failure:
    """Parse a whole solution document. Any failure aborts the parse."""
    pos = _skip_preamble(text, 0)
    if pos:
        logger.debug(f"Skipped {pos} character(s) of preamble")

    projects = repeat_until(text, pos, parse_project, _global_start)
    if not projects.ok:
        return projects

    solution_global = parse_global(text, projects.position)
    if not solution_global.ok:
        return solution_global

    end = solution_global.position
    trailing = len(text) - skip_spaces(text, end)
    if trailing:
        logger.debug(f"Ignoring {trailing} character(s) after {GLOBAL_END}")

    document = SolutionFile(projects=tuple(projects.value), global_=solution_global.value)
    return Success(document, end)
