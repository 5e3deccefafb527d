"""JSON serialisation of a parsed solution."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from slnparse.config import (
    NestedProjectsSection,
    ProjectConfigurationPlatformsSection,
    SolutionConfigurationPlatformsSection,
    SolutionFile,
    SolutionProject,
    SolutionPropertiesSection,
)
from slnparse.project_types import describe_project_type


def _project_to_dict(project: SolutionProject) -> dict[str, Any]:
    return {
        "guid": str(project.guid),
        "type_guid": str(project.project_type_guid),
        "type": describe_project_type(project.project_type_guid),
        "path": project.path,
        "relative_path": project.relative_path,
        "sections": [
            {
                "pre_or_post": section.pre_or_post.value,
                "items": [{"name": i.name, "path": i.path} for i in section.items],
            }
            for section in project.sections
        ],
    }


def _section_to_dict(section) -> dict[str, Any]:
    if isinstance(section, SolutionConfigurationPlatformsSection):
        return {
            "kind": "SolutionConfigurationPlatforms",
            "pre_or_post": section.pre_or_post.value,
            "records": [
                {"configuration": cp.configuration.value, "platform": cp.platform.value}
                for cp in section.configuration_platforms
            ],
        }
    if isinstance(section, ProjectConfigurationPlatformsSection):
        return {
            "kind": "ProjectConfigurationPlatforms",
            "pre_or_post": section.pre_or_post.value,
            "records": [
                {
                    "project_guid": str(cp.project_guid),
                    "build_configuration": cp.build_configuration.value,
                    "project_configuration": cp.project_configuration,
                    "platform": cp.platform.value,
                }
                for cp in section.configuration_platforms
            ],
        }
    if isinstance(section, SolutionPropertiesSection):
        return {
            "kind": "SolutionProperties",
            "pre_or_post": section.pre_or_post.value,
            "records": [{"name": p.name, "value": p.value} for p in section.properties],
        }
    if isinstance(section, NestedProjectsSection):
        return {
            "kind": "NestedProjects",
            "pre_or_post": section.pre_or_post.value,
            "records": [
                {"child": str(e.child_guid), "parent": str(e.parent_guid)}
                for e in section.projects
            ],
        }
    raise TypeError(f"Unhandled global section: {section!r}")


def document_to_dict(solution: SolutionFile) -> dict[str, Any]:
    """Build a JSON-ready dict from a SolutionFile."""
    return {
        "version": "1.0",
        "stats": {
            "projects": len(solution.projects),
            "solution_folders": sum(1 for p in solution.projects if p.is_solution_folder),
            "global_sections": len(solution.global_.sections),
        },
        "projects": [_project_to_dict(p) for p in solution.projects],
        "global_sections": [_section_to_dict(s) for s in solution.global_.sections],
    }


def write_output(solution: SolutionFile, output_path: str) -> None:
    """Write the parsed solution to a JSON file."""
    data = document_to_dict(solution)
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(data, f, indent=2, default=str)
