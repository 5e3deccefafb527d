"""Tests for project and project-section parsing."""

from __future__ import annotations

import uuid

from slnparse.config import PreOrPostProject, SolutionItem
from slnparse.grammar.project import (
    looking_at_project_start,
    parse_project,
    parse_project_section,
)

CSHARP = uuid.UUID("FAE04EC0-301F-11D3-BF4B-00C04F79EFBC")
FOLDER = uuid.UUID("2150E333-8FDC-42A3-9474-1A3956D46DE8")
APP = uuid.UUID("33333333-3333-3333-3333-333333333333")

PROJECT_LINE = (
    'Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = "App", "src\\App\\App.csproj", '
    '"{33333333-3333-3333-3333-333333333333}"\n'
)


class TestProjectSection:
    def test_items_in_order(self):
        text = (
            "\tProjectSection(SolutionItems) = preProject\n"
            "\t\tREADME.md = README.md\n"
            "\t\t.editorconfig = .editorconfig\n"
            "\tEndProjectSection\n"
        )
        result = parse_project_section(text, 0)
        assert result.ok
        section = result.value
        assert section.pre_or_post is PreOrPostProject.PRE_PROJECT
        assert section.items == (
            SolutionItem(name="README.md", path="README.md"),
            SolutionItem(name=".editorconfig", path=".editorconfig"),
        )

    def test_empty_section(self):
        text = "ProjectSection(SolutionItems) = postProject\nEndProjectSection\n"
        result = parse_project_section(text, 0)
        assert result.value.items == ()
        assert result.value.pre_or_post is PreOrPostProject.POST_PROJECT

    def test_unsupported_section_kind(self):
        text = "ProjectSection(ProjectDependencies) = postProject\nEndProjectSection\n"
        result = parse_project_section(text, 0)
        assert not result.ok
        assert "ProjectSection(SolutionItems)" in result.error.expected

    def test_missing_terminator(self):
        text = "ProjectSection(SolutionItems) = preProject\n\t\ta = a\n"
        result = parse_project_section(text, 0)
        assert not result.ok
        assert result.error.expected == "'EndProjectSection'"


class TestProject:
    def test_positional_fields(self):
        result = parse_project(PROJECT_LINE + "EndProject\n", 0)
        assert result.ok
        project = result.value
        assert project.project_type_guid == CSHARP
        assert project.path == "App"
        assert project.relative_path == "src\\App\\App.csproj"
        assert project.guid == APP
        assert project.sections == ()
        assert not project.is_solution_folder

    def test_multiple_sections_keep_order(self):
        text = (
            'Project("{2150E333-8FDC-42A3-9474-1A3956D46DE8}") = "Items", "Items", '
            '"{11111111-1111-1111-1111-111111111111}"\n'
            "\tProjectSection(SolutionItems) = preProject\n"
            "\t\tfirst.txt = first.txt\n"
            "\tEndProjectSection\n"
            "\tProjectSection(SolutionItems) = postProject\n"
            "\t\tsecond.txt = second.txt\n"
            "\tEndProjectSection\n"
            "EndProject\n"
        )
        project = parse_project(text, 0).value
        assert project.is_solution_folder
        assert project.project_type_guid == FOLDER
        assert [s.items[0].name for s in project.sections] == ["first.txt", "second.txt"]
        assert [s.pre_or_post for s in project.sections] == [
            PreOrPostProject.PRE_PROJECT,
            PreOrPostProject.POST_PROJECT,
        ]

    def test_missing_field_fails(self):
        text = 'Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = "App", "App.csproj"\nEndProject\n'
        result = parse_project(text, 0)
        assert not result.ok
        assert result.error.expected == "','"
        assert result.error.line == 1

    def test_unquoted_guid_fails(self):
        text = (
            'Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = "App", "App.csproj", '
            "{33333333-3333-3333-3333-333333333333}\nEndProject\n"
        )
        assert not parse_project(text, 0).ok

    def test_missing_end_project(self):
        result = parse_project(PROJECT_LINE + "Global\nEndGlobal\n", 0)
        assert not result.ok
        assert result.error.line == 2

    def test_lookahead_does_not_need_body(self):
        assert looking_at_project_start(PROJECT_LINE, 0)
        assert not looking_at_project_start("Global\n", 0)
