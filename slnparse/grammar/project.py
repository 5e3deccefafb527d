"""Parsers for Project(...) ... EndProject blocks."""

from __future__ import annotations

import logging
from functools import partial

from slnparse.config import ProjectSectionItems, SolutionItem, SolutionProject
from slnparse.grammar.enums import parse_pre_or_post_project
from slnparse.grammar.primitives import (
    CLOSE_PAREN,
    COMMA,
    EQUALS,
    char,
    framed,
    keyword,
    literal,
    parse_guid,
    parse_key_value_line,
    parse_quoted,
    parse_quoted_string,
    repeat_until,
    section_header,
    skip_spaces,
)
from slnparse.grammar.result import Failure, Success

logger = logging.getLogger(__name__)

PROJECT_START = "Project("
PROJECT_END = "EndProject"
SOLUTION_ITEMS_HEADER = "ProjectSection(SolutionItems)"
PROJECT_SECTION_END = "EndProjectSection"

_parse_quoted_guid = parse_quoted(parse_guid)
_section_header = partial(section_header, title=SOLUTION_ITEMS_HEADER, marker=parse_pre_or_post_project)
_section_footer = partial(keyword, word=PROJECT_SECTION_END)
_project_footer = partial(keyword, word=PROJECT_END)


def _parse_solution_item(text: str, pos: int) -> Success[SolutionItem] | Failure:
    result = parse_key_value_line(text, pos)
    if not result.ok:
        return result
    name, path = result.value
    return Success(SolutionItem(name=name, path=path), result.position)


def parse_project_section(text: str, pos: int) -> Success[ProjectSectionItems] | Failure:
    """Parse a ProjectSection(SolutionItems) block."""
    result = framed(text, pos, _section_header, _parse_solution_item, _section_footer)
    if not result.ok:
        return result
    pre_or_post, items = result.value
    return Success(ProjectSectionItems(items=tuple(items), pre_or_post=pre_or_post), result.position)


def parse_project_header(text: str, pos: int) -> Success[tuple] | Failure:
    """Parse ``Project("{type}") = "path", "relative path", "{guid}"``.

    Returns ``(project_type_guid, path, relative_path, guid)``.
    """
    start = literal(text, skip_spaces(text, pos), PROJECT_START)
    if not start.ok:
        return start
    type_guid = _parse_quoted_guid(text, start.position)
    if not type_guid.ok:
        return type_guid
    closed = char(text, type_guid.position, CLOSE_PAREN)
    if not closed.ok:
        return closed
    eq = char(text, skip_spaces(text, closed.position), EQUALS)
    if not eq.ok:
        return eq

    fields = []
    pos = eq.position
    for parser, separator in (
        (parse_quoted_string, COMMA),
        (parse_quoted_string, COMMA),
        (_parse_quoted_guid, None),
    ):
        value = parser(text, skip_spaces(text, pos))
        if not value.ok:
            return value
        pos = value.position
        if separator is not None:
            sep = char(text, pos, separator)
            if not sep.ok:
                return sep
            pos = sep.position
        fields.append(value.value)

    path, relative_path, guid = fields
    return Success((type_guid.value, path, relative_path, guid), pos)


def looking_at_project_start(text: str, pos: int) -> bool:
    return parse_project_header(text, pos).ok


def parse_project(text: str, pos: int) -> Success[SolutionProject] | Failure:
    """Parse one project block including its project sections."""
    header = parse_project_header(text, pos)
    if not header.ok:
        return header
    project_type_guid, path, relative_path, guid = header.value

    sections = repeat_until(text, header.position, parse_project_section, _project_footer)
    if not sections.ok:
        return sections
    end = _project_footer(text, sections.position)
    if not end.ok:
        return end

    logger.debug(f"Parsed project {path} ({guid}) with {len(sections.value)} section(s)")
    project = SolutionProject(
        project_type_guid=project_type_guid,
        path=path,
        relative_path=relative_path,
        guid=guid,
        sections=tuple(sections.value),
    )
    return Success(project, end.position)
