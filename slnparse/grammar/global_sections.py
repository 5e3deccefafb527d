"""Parsers for the GlobalSection(...) blocks inside Global ... EndGlobal.

Four kinds are recognised. The dispatcher tries their headers in a fixed
order and commits to the first that matches; any other kind fails the parse.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable

from slnparse.config import (
    GlobalSection,
    NestedProject,
    NestedProjectsSection,
    ProjectConfigurationPlatform,
    ProjectConfigurationPlatformsSection,
    SolutionConfigurationPlatform,
    SolutionConfigurationPlatformsSection,
    SolutionPropertiesSection,
    SolutionProperty,
)
from slnparse.grammar.enums import (
    parse_build_configuration,
    parse_platform,
    parse_pre_or_post_solution,
)
from slnparse.grammar.primitives import (
    DOT,
    EQUALS,
    PIPE,
    Parser,
    char,
    chars_until,
    framed,
    keyword,
    literal,
    parse_guid,
    parse_key_value_line,
    rest_of_line,
    section_header,
    skip_spaces,
)
from slnparse.grammar.result import Failure, Success, fail

logger = logging.getLogger(__name__)

GLOBAL_SECTION_END = "EndGlobalSection"

_footer = partial(keyword, word=GLOBAL_SECTION_END)


def _title(kind: str) -> str:
    return f"GlobalSection({kind})"


# --- Records ---

def _parse_solution_configuration_platform(
    text: str, pos: int,
) -> Success[SolutionConfigurationPlatform] | Failure:
    # Debug|Any CPU = Debug|Any CPU
    # The configuration comes from the left, the platform from the right;
    # everything between the first two pipes is read and dropped.
    config = parse_build_configuration(text, skip_spaces(text, pos))
    if not config.ok:
        return config
    pipe = char(text, config.position, PIPE)
    if not pipe.ok:
        return pipe
    middle = chars_until(text, pipe.position, PIPE)
    if not middle.ok:
        return middle
    raw = rest_of_line(text, middle.position)
    platform = parse_platform(text, middle.position, raw.value)
    if not platform.ok:
        return platform
    record = SolutionConfigurationPlatform(configuration=config.value, platform=platform.value)
    return Success(record, raw.position)


def _parse_project_configuration_platform(
    text: str, pos: int,
) -> Success[ProjectConfigurationPlatform] | Failure:
    # {GUID}.Debug|Any CPU.ActiveCfg = Debug|Any CPU
    # project_configuration keeps "Any CPU.ActiveCfg = Debug" verbatim.
    guid = parse_guid(text, skip_spaces(text, pos))
    if not guid.ok:
        return guid
    dot = char(text, guid.position, DOT)
    if not dot.ok:
        return dot
    config = parse_build_configuration(text, dot.position)
    if not config.ok:
        return config
    pipe = char(text, config.position, PIPE)
    if not pipe.ok:
        return pipe
    label = chars_until(text, pipe.position, PIPE)
    if not label.ok:
        return label
    raw = rest_of_line(text, label.position)
    platform = parse_platform(text, label.position, raw.value)
    if not platform.ok:
        return platform
    record = ProjectConfigurationPlatform(
        project_guid=guid.value,
        build_configuration=config.value,
        project_configuration=label.value,
        platform=platform.value,
    )
    return Success(record, raw.position)


def _parse_solution_property(text: str, pos: int) -> Success[SolutionProperty] | Failure:
    result = parse_key_value_line(text, pos)
    if not result.ok:
        return result
    name, value = result.value
    return Success(SolutionProperty(name=name, value=value), result.position)


def _parse_nested_project(text: str, pos: int) -> Success[NestedProject] | Failure:
    child = parse_guid(text, skip_spaces(text, pos))
    if not child.ok:
        return child
    eq = char(text, skip_spaces(text, child.position), EQUALS)
    if not eq.ok:
        return eq
    parent = parse_guid(text, skip_spaces(text, eq.position))
    if not parent.ok:
        return parent
    return Success(NestedProject(child_guid=child.value, parent_guid=parent.value), parent.position)


# --- Sections ---

@dataclass(frozen=True)
class GlobalSectionGrammar:
    """One recognised GlobalSection kind: its record parser and result type."""
    kind: str
    record: Parser
    build: Callable[..., GlobalSection]

    @property
    def title(self) -> str:
        return _title(self.kind)

    def parse(self, text: str, pos: int) -> Success[GlobalSection] | Failure:
        header = partial(section_header, title=self.title, marker=parse_pre_or_post_solution)
        result = framed(text, pos, header, self.record, _footer)
        if not result.ok:
            return result
        pre_or_post, records = result.value
        logger.debug(f"Parsed {self.title} with {len(records)} record(s)")
        return Success(self.build(pre_or_post, tuple(records)), result.position)


SOLUTION_CONFIGURATION_PLATFORMS = GlobalSectionGrammar(
    "SolutionConfigurationPlatforms",
    _parse_solution_configuration_platform,
    SolutionConfigurationPlatformsSection,
)
PROJECT_CONFIGURATION_PLATFORMS = GlobalSectionGrammar(
    "ProjectConfigurationPlatforms",
    _parse_project_configuration_platform,
    ProjectConfigurationPlatformsSection,
)
SOLUTION_PROPERTIES = GlobalSectionGrammar(
    "SolutionProperties",
    _parse_solution_property,
    SolutionPropertiesSection,
)
NESTED_PROJECTS = GlobalSectionGrammar(
    "NestedProjects",
    _parse_nested_project,
    NestedProjectsSection,
)

parse_solution_configuration_platforms = SOLUTION_CONFIGURATION_PLATFORMS.parse
parse_project_configuration_platforms = PROJECT_CONFIGURATION_PLATFORMS.parse
parse_solution_properties = SOLUTION_PROPERTIES.parse
parse_nested_projects = NESTED_PROJECTS.parse

# Trial order decides which grammar wins on ambiguous input
GLOBAL_SECTION_GRAMMARS = (
    SOLUTION_CONFIGURATION_PLATFORMS,
    PROJECT_CONFIGURATION_PLATFORMS,
    SOLUTION_PROPERTIES,
    NESTED_PROJECTS,
)


def parse_global_section(text: str, pos: int) -> Success[GlobalSection] | Failure:
    """Parse one global section of any recognised kind."""
    start = skip_spaces(text, pos)
    for grammar in GLOBAL_SECTION_GRAMMARS:
        if literal(text, start, grammar.title).ok:
            return grammar.parse(text, pos)
    expected = " or ".join(f"'{g.title}'" for g in GLOBAL_SECTION_GRAMMARS)
    return fail(text, start, expected)
