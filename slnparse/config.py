"""Core data types and configuration for solution parsing."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Union


def invariant_equal(a: str, b: str) -> bool:
    """Case-insensitive comparison used by every closed enum."""
    return a.casefold() == b.casefold()


class LiteralParseError(ValueError):
    """Raised when text is not one of an enum's literals."""

    def __init__(self, text: str, enum_name: str) -> None:
        super().__init__(f"Could not parse '{text}' into a `{enum_name}`")
        self.text = text
        self.enum_name = enum_name


class _LiteralEnum(str, Enum):
    """Closed enum whose values are the literal tokens found in .sln files."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def try_parse(cls, text: str):
        for member in cls:
            if invariant_equal(member.value, text):
                return member
        return None

    @classmethod
    def parse(cls, text: str):
        member = cls.try_parse(text)
        if member is None:
            raise LiteralParseError(text, cls.__name__)
        return member


class PlatformKind(_LiteralEnum):
    X86 = "x86"
    X64 = "x64"
    ANY_CPU = "Any CPU"


class BuildConfigurationKind(_LiteralEnum):
    # Real solutions may declare other configurations; only these two are recognised.
    DEBUG = "Debug"
    RELEASE = "Release"


class PreOrPostProject(_LiteralEnum):
    PRE_PROJECT = "preProject"
    POST_PROJECT = "postProject"


class PreOrPostSolution(_LiteralEnum):
    PRE_SOLUTION = "preSolution"
    POST_SOLUTION = "postSolution"


@dataclass(frozen=True)
class SolutionItem:
    """A file reference attached to a solution folder."""
    name: str
    path: str


@dataclass(frozen=True)
class ProjectSectionItems:
    """A ProjectSection(SolutionItems) block."""
    items: tuple[SolutionItem, ...]
    pre_or_post: PreOrPostProject


@dataclass(frozen=True)
class SolutionProperty:
    name: str
    value: str


@dataclass(frozen=True)
class SolutionConfigurationPlatform:
    configuration: BuildConfigurationKind
    platform: PlatformKind


@dataclass(frozen=True)
class ProjectConfigurationPlatform:
    """Maps a project's build context onto a configuration/platform pair.

    ``project_configuration`` is the raw text between the two pipes of the
    record, e.g. ``"Any CPU.ActiveCfg = Debug"``.
    """
    project_guid: uuid.UUID
    build_configuration: BuildConfigurationKind
    project_configuration: str
    platform: PlatformKind


@dataclass(frozen=True)
class NestedProject:
    child_guid: uuid.UUID
    parent_guid: uuid.UUID


@dataclass(frozen=True)
class SolutionConfigurationPlatformsSection:
    pre_or_post: PreOrPostSolution
    configuration_platforms: tuple[SolutionConfigurationPlatform, ...] = ()


@dataclass(frozen=True)
class ProjectConfigurationPlatformsSection:
    pre_or_post: PreOrPostSolution
    configuration_platforms: tuple[ProjectConfigurationPlatform, ...] = ()


@dataclass(frozen=True)
class SolutionPropertiesSection:
    pre_or_post: PreOrPostSolution
    properties: tuple[SolutionProperty, ...] = ()


@dataclass(frozen=True)
class NestedProjectsSection:
    pre_or_post: PreOrPostSolution
    projects: tuple[NestedProject, ...] = ()


GlobalSection = Union[
    SolutionConfigurationPlatformsSection,
    ProjectConfigurationPlatformsSection,
    SolutionPropertiesSection,
    NestedProjectsSection,
]

GLOBAL_SECTION_TYPES = (
    SolutionConfigurationPlatformsSection,
    ProjectConfigurationPlatformsSection,
    SolutionPropertiesSection,
    NestedProjectsSection,
)


@dataclass(frozen=True)
class SolutionGlobal:
    sections: tuple[GlobalSection, ...] = ()


# Solution folders are virtual projects used to organise the tree
SOLUTION_FOLDER_GUID = uuid.UUID("2150E333-8FDC-42A3-9474-1A3956D46DE8")


@dataclass(frozen=True)
class SolutionProject:
    """A Project(...) ... EndProject entry.

    ``path`` holds the first quoted field (the display name in files written
    by Visual Studio) and ``relative_path`` the second.
    """
    project_type_guid: uuid.UUID
    path: str
    relative_path: str
    guid: uuid.UUID
    sections: tuple[ProjectSectionItems, ...] = ()

    @property
    def is_solution_folder(self) -> bool:
        return self.project_type_guid == SOLUTION_FOLDER_GUID


@dataclass(frozen=True)
class SolutionFile:
    projects: tuple[SolutionProject, ...]
    global_: SolutionGlobal = field(default_factory=SolutionGlobal)

    def find_project(self, guid: uuid.UUID | str) -> SolutionProject | None:
        """Return the first project with the given GUID, or None."""
        if isinstance(guid, str):
            guid = uuid.UUID(guid)
        for project in self.projects:
            if project.guid == guid:
                return project
        return None

    def sections_of(self, kind: type) -> list:
        """Return the global sections of one variant, in source order."""
        if kind not in GLOBAL_SECTION_TYPES:
            raise TypeError(f"Not a global section type: {kind!r}")
        return [s for s in self.global_.sections if isinstance(s, kind)]

    @property
    def properties(self) -> dict[str, str]:
        # Later duplicates win, matching how the values would be read back
        return {
            prop.name: prop.value
            for section in self.sections_of(SolutionPropertiesSection)
            for prop in section.properties
        }

    @property
    def nested_projects(self) -> list[NestedProject]:
        return [
            edge
            for section in self.sections_of(NestedProjectsSection)
            for edge in section.projects
        ]

    @property
    def configuration_platforms(self) -> list[SolutionConfigurationPlatform]:
        return [
            cp
            for section in self.sections_of(SolutionConfigurationPlatformsSection)
            for cp in section.configuration_platforms
        ]

    @property
    def project_configuration_platforms(self) -> list[ProjectConfigurationPlatform]:
        return [
            cp
            for section in self.sections_of(ProjectConfigurationPlatformsSection)
            for cp in section.configuration_platforms
        ]


@dataclass
class ReaderConfig:
    """How parse_file reads a solution from disk."""
    encoding: str = "utf-8-sig"
    errors: str = "strict"
