"""Tests for whole-document parsing and the entry points."""

from __future__ import annotations

import os
import uuid

import pytest

from slnparse import (
    Failure,
    ReaderConfig,
    SolutionParseError,
    SolutionReadError,
    Success,
    load_solution,
    parse_file,
    parse_string,
)
from slnparse.config import (
    BuildConfigurationKind,
    NestedProjectsSection,
    PlatformKind,
    SolutionConfigurationPlatformsSection,
    SolutionPropertiesSection,
)
from slnparse.grammar.result import EnumLiteralError

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")
SAMPLE_SLN = os.path.join(FIXTURES_DIR, "sample", "Sample.sln")
BROKEN_SLN = os.path.join(FIXTURES_DIR, "sample", "Broken.sln")

SINGLE_PROJECT = (
    'Project("{AAAAAAAA-0000-0000-0000-000000000001}") = "App", "App\\App.csproj", '
    '"{BBBBBBBB-0000-0000-0000-000000000002}"\n'
    "EndProject\n"
    "Global\n"
    "EndGlobal\n"
)

BANNER = (
    "\n"
    "Microsoft Visual Studio Solution File, Format Version 12.00\n"
    "# Visual Studio Version 17\n"
    "VisualStudioVersion = 17.0.31903.59\n"
)


class TestMinimalDocuments:
    def test_empty_global(self):
        result = parse_string("Global\nEndGlobal\n")
        assert isinstance(result, Success)
        assert result.value.projects == ()
        assert result.value.global_.sections == ()

    def test_banner_only(self):
        result = parse_string(BANNER + "Global\nEndGlobal\n")
        assert result.ok
        assert result.value.projects == ()

    def test_single_project(self):
        solution = parse_string(SINGLE_PROJECT).unwrap()
        assert len(solution.projects) == 1
        project = solution.projects[0]
        assert project.project_type_guid == uuid.UUID("AAAAAAAA-0000-0000-0000-000000000001")
        assert project.path == "App"
        assert project.relative_path == "App\\App.csproj"
        assert project.guid == uuid.UUID("BBBBBBBB-0000-0000-0000-000000000002")
        assert project.sections == ()
        assert solution.global_.sections == ()

    def test_byte_order_mark_and_crlf(self):
        text = "\ufeff" + (BANNER + SINGLE_PROJECT).replace("\n", "\r\n")
        assert len(parse_string(text).unwrap().projects) == 1

    def test_text_after_end_global_is_ignored(self):
        assert parse_string("Global\nEndGlobal\ntrailing junk\n").ok

    def test_banner_mentioning_global_mid_line(self):
        text = "# Global settings follow\nGlobal\nEndGlobal\n"
        assert parse_string(text).ok

    def test_malformed_first_project_is_treated_as_preamble(self):
        # Text before the first well-formed project header is skipped unread
        text = (
            'Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = "App", "App.csproj"\n'
            "EndProject\n"
            "Global\n"
            "EndGlobal\n"
        )
        result = parse_string(text)
        assert result.ok
        assert result.value.projects == ()

    def test_malformed_later_project_fails(self):
        text = SINGLE_PROJECT.replace(
            "Global\n",
            'Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = "Lib", "Lib.csproj"\n'
            "EndProject\nGlobal\n",
            1,
        )
        result = parse_string(text)
        assert not result.ok
        assert result.error.line == 3


class TestFailures:
    def test_unknown_global_section(self):
        text = (
            "Global\n"
            "\tGlobalSection(Unknown) = preSolution\n"
            "\tEndGlobalSection\n"
            "EndGlobal\n"
        )
        result = parse_string(text)
        assert isinstance(result, Failure)
        assert result.error.line == 2
        assert "GlobalSection(SolutionProperties)" in result.error.expected

    def test_missing_global_block(self):
        result = parse_string(SINGLE_PROJECT.replace("Global\nEndGlobal\n", ""))
        assert not result.ok
        assert result.error.expected == "'Global'"

    def test_missing_end_global(self):
        result = parse_string("Global\n")
        assert not result.ok
        assert result.error.expected == "'EndGlobal'"

    def test_no_partial_document(self):
        text = SINGLE_PROJECT.replace(
            "Global\n",
            "Global\n\tGlobalSection(SolutionConfigurationPlatforms) = preSolution\n"
            "\t\tDebug|Itanium = Debug|Itanium\n\tEndGlobalSection\n",
        )
        result = parse_string(text)
        assert not hasattr(result, "value")
        assert isinstance(result.error, EnumLiteralError)

    def test_unwrap_raises(self):
        with pytest.raises(SolutionParseError) as exc:
            parse_string("not a solution").unwrap()
        assert exc.value.error.line == 1
        assert "expected 'Global'" in str(exc.value)


class TestNoCrossReferenceValidation:
    def test_duplicate_project_guids(self):
        solution = parse_string(SINGLE_PROJECT.replace(
            "EndProject\n", "EndProject\n" + SINGLE_PROJECT.split("Global")[0], 1,
        )).unwrap()
        assert len(solution.projects) == 2
        assert solution.projects[0].guid == solution.projects[1].guid

    def test_dangling_references(self):
        text = (
            "Global\n"
            "\tGlobalSection(NestedProjects) = preSolution\n"
            "\t\t{AAAAAAAA-0000-0000-0000-000000000001} = {BBBBBBBB-0000-0000-0000-000000000002}\n"
            "\tEndGlobalSection\n"
            "\tGlobalSection(ProjectConfigurationPlatforms) = postSolution\n"
            "\t\t{CCCCCCCC-0000-0000-0000-000000000003}.Debug|x86.ActiveCfg = Debug|x86\n"
            "\tEndGlobalSection\n"
            "EndGlobal\n"
        )
        solution = parse_string(text).unwrap()
        assert solution.projects == ()
        assert len(solution.nested_projects) == 1
        assert solution.project_configuration_platforms[0].platform is PlatformKind.X86


class TestSampleSolution:
    @pytest.fixture(autouse=True)
    def setup(self):
        self.solution = load_solution(SAMPLE_SLN)

    def test_projects(self):
        paths = [p.path for p in self.solution.projects]
        assert paths == ["Solution Items", "src", "App", "Lib"]
        assert [p.is_solution_folder for p in self.solution.projects] == [True, True, False, False]

    def test_solution_items(self):
        items = self.solution.projects[0].sections[0].items
        assert [i.name for i in items] == ["README.md", "build\\Directory.Build.props"]

    def test_section_order(self):
        kinds = [type(s).__name__ for s in self.solution.global_.sections]
        assert kinds == [
            "SolutionConfigurationPlatformsSection",
            "ProjectConfigurationPlatformsSection",
            "SolutionPropertiesSection",
            "NestedProjectsSection",
        ]

    def test_queries(self):
        assert self.solution.properties == {"HideSolutionNode": "FALSE"}
        assert len(self.solution.sections_of(NestedProjectsSection)) == 1
        assert len(self.solution.sections_of(SolutionPropertiesSection)) == 1
        configs = self.solution.sections_of(SolutionConfigurationPlatformsSection)[0]
        assert [(c.configuration, c.platform) for c in configs.configuration_platforms] == [
            (BuildConfigurationKind.DEBUG, PlatformKind.ANY_CPU),
            (BuildConfigurationKind.DEBUG, PlatformKind.X64),
            (BuildConfigurationKind.RELEASE, PlatformKind.ANY_CPU),
        ]
        lib = self.solution.find_project("44444444-4444-4444-4444-444444444444")
        assert lib is not None and lib.path == "Lib"
        assert self.solution.find_project(uuid.uuid4()) is None

    def test_sections_of_rejects_other_types(self):
        with pytest.raises(TypeError):
            self.solution.sections_of(str)


class TestParseFile:
    def test_missing_file_is_read_error(self):
        with pytest.raises(SolutionReadError) as exc:
            parse_file("/nonexistent/path.sln")
        assert exc.value.path == "/nonexistent/path.sln"

    def test_grammar_failure_is_returned(self):
        result = parse_file(BROKEN_SLN)
        assert not result.ok
        assert result.error.line == 5

    def test_decode_failure_is_read_error(self, tmp_path):
        sln = tmp_path / "bad.sln"
        sln.write_bytes(b"\xff\xfe\x00Global")
        with pytest.raises(SolutionReadError):
            parse_file(sln, ReaderConfig(encoding="utf-8"))

    def test_encoding_option(self, tmp_path):
        sln = tmp_path / "latin.sln"
        sln.write_bytes(
            "Global\n\tGlobalSection(SolutionProperties) = preSolution\n"
            "\t\tOwner = José\n\tEndGlobalSection\nEndGlobal\n".encode("latin-1")
        )
        solution = parse_file(sln, ReaderConfig(encoding="latin-1")).unwrap()
        assert solution.properties["Owner"] == "José"
