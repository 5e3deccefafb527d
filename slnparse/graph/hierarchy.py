"""Solution folder hierarchy backed by networkx.DiGraph."""

from __future__ import annotations

import logging
import uuid
from typing import Iterator

import networkx as nx

from slnparse.config import NestedProject, SolutionFile, SolutionProject
from slnparse.project_types import describe_project_type

logger = logging.getLogger(__name__)


class SolutionHierarchy:
    """Parent/child relations between projects declared in NestedProjects.

    Edges run parent -> child. Nothing is rejected: duplicate parents,
    cycles and references to undeclared projects are kept and can be
    queried.
    """

    def __init__(self) -> None:
        self.graph = nx.DiGraph()

    @classmethod
    def from_solution(cls, solution: SolutionFile) -> SolutionHierarchy:
        hierarchy = cls()
        for project in solution.projects:
            hierarchy.add_project(project)
        for edge in solution.nested_projects:
            hierarchy.add_nesting(edge)
        return hierarchy

    # --- Node addition ---

    def add_project(self, project: SolutionProject) -> None:
        self.graph.add_node(
            project.guid,
            declared=True,
            path=project.path,
            relative_path=project.relative_path,
            project_type=describe_project_type(project.project_type_guid),
            is_folder=project.is_solution_folder,
        )

    def add_nesting(self, edge: NestedProject) -> None:
        for guid in (edge.parent_guid, edge.child_guid):
            if not self.graph.has_node(guid):
                logger.warning(f"Nested project references undeclared project {guid}")
                self.graph.add_node(guid, declared=False)
        self.graph.add_edge(edge.parent_guid, edge.child_guid, edge_type="CONTAINS")

    # --- Queries ---

    def parent_of(self, guid: uuid.UUID) -> uuid.UUID | None:
        """Return the first declared parent, or None for a root."""
        parents = list(self.graph.predecessors(guid))
        return parents[0] if parents else None

    def children_of(self, guid: uuid.UUID) -> list[uuid.UUID]:
        return list(self.graph.successors(guid))

    def roots(self) -> list[uuid.UUID]:
        return [n for n in self.graph.nodes if self.graph.in_degree(n) == 0]

    def ancestors(self, guid: uuid.UUID) -> list[uuid.UUID]:
        """Return parents from nearest to furthest, stopping if a cycle repeats."""
        result = []
        seen = {guid}
        parent = self.parent_of(guid)
        while parent is not None and parent not in seen:
            result.append(parent)
            seen.add(parent)
            parent = self.parent_of(parent)
        return result

    def find_cycles(self) -> list[list[uuid.UUID]]:
        return [list(cycle) for cycle in nx.simple_cycles(self.graph)]

    def is_forest(self) -> bool:
        """True when every project has at most one parent and there are no cycles."""
        if self.graph.number_of_nodes() == 0:
            return True
        return nx.is_branching(self.graph)

    def undeclared(self) -> list[uuid.UUID]:
        return [n for n, d in self.graph.nodes(data=True) if not d.get("declared")]

    def label(self, guid: uuid.UUID) -> str:
        data = self.graph.nodes[guid]
        return data.get("path") or str(guid)

    def walk(self) -> Iterator[tuple[int, uuid.UUID]]:
        """Yield ``(depth, guid)`` depth-first from each root, in declaration order."""
        visited: set[uuid.UUID] = set()
        stack = [(0, root) for root in reversed(self.roots())]
        while stack:
            depth, node = stack.pop()
            if node in visited:
                continue
            visited.add(node)
            yield depth, node
            for child in reversed(self.children_of(node)):
                stack.append((depth + 1, child))

    def project_count(self) -> int:
        return sum(1 for _, d in self.graph.nodes(data=True) if d.get("declared"))

    def folder_count(self) -> int:
        return sum(1 for _, d in self.graph.nodes(data=True) if d.get("is_folder"))
