"""slnparse CLI - Inspect Visual Studio solution files."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from slnparse.config import ReaderConfig, SolutionFile
from slnparse.graph.hierarchy import SolutionHierarchy
from slnparse.grammar.result import SolutionReadError
from slnparse.output import write_output
from slnparse.solution import parse_file


@click.group()
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """slnparse - Read the structure of a .sln file."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _load(path: str, encoding: str, console: Console) -> SolutionFile:
    """Parse the file, printing the failure and exiting with status 1."""
    try:
        result = parse_file(path, ReaderConfig(encoding=encoding))
    except SolutionReadError as e:
        console.print(f"[red]Read error:[/red] {escape(str(e))}")
        raise SystemExit(1)
    if not result.ok:
        console.print(f"[red]Parse error:[/red] {escape(str(result.error))}")
        raise SystemExit(1)
    return result.value


def _summary_table(solution: SolutionFile, name: str) -> Table:
    table = Table(title=f"Solution: {name}", show_edge=False)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    folders = sum(1 for p in solution.projects if p.is_solution_folder)
    table.add_row("Projects", str(len(solution.projects) - folders))
    table.add_row("Solution folders", str(folders))
    table.add_row("Global sections", str(len(solution.global_.sections)))

    configs = solution.configuration_platforms
    if configs:
        table.add_row(
            "Configurations",
            ", ".join(f"{cp.configuration}|{cp.platform}" for cp in configs),
        )
    table.add_row("Project mappings", str(len(solution.project_configuration_platforms)))
    table.add_row("Nested projects", str(len(solution.nested_projects)))
    return table


@cli.command("parse")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", "output_path", default=None, help="Write the parsed model as JSON")
@click.option("--encoding", default="utf-8-sig", help="Text encoding of the solution file")
@click.option("--quiet", is_flag=True, help="Suppress all output except errors")
def parse_cmd(path: str, output_path: str | None, encoding: str, quiet: bool) -> None:
    """Parse a solution file and summarise its contents."""
    console = Console()
    solution = _load(path, encoding, console)

    if output_path:
        write_output(solution, output_path)

    if not quiet:
        console.print(_summary_table(solution, Path(path).name))
        if output_path:
            console.print(f"[green]Output written to:[/green] {output_path}")


@cli.command("tree")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--encoding", default="utf-8-sig", help="Text encoding of the solution file")
def tree_cmd(path: str, encoding: str) -> None:
    """Print the solution folder hierarchy."""
    console = Console()
    solution = _load(path, encoding, console)
    hierarchy = SolutionHierarchy.from_solution(solution)

    root = Tree(f"[bold]{Path(path).name}[/bold]")
    branches: dict[int, Tree] = {-1: root}
    for depth, guid in hierarchy.walk():
        label = escape(hierarchy.label(guid))
        if hierarchy.graph.nodes[guid].get("is_folder"):
            label = f"[blue]{label}/[/blue]"
        branches[depth] = branches[depth - 1].add(label)
    console.print(root)

    for cycle in hierarchy.find_cycles():
        console.print(f"[yellow]Cycle:[/yellow] {' -> '.join(str(g) for g in cycle)}")


if __name__ == "__main__":
    cli()
