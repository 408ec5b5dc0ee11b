"""Click CLI with check and graph subcommands."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from cyclic_dependencies import __version__
from cyclic_dependencies.analysis.package_graph import graph_to_dict
from cyclic_dependencies.errors import CyclicDependenciesError
from cyclic_dependencies.formatter import OutputFormat, render_cycles, write_dot_file
from cyclic_dependencies.models import DetectionConfig
from cyclic_dependencies.pipeline import build_workspace_graph, detect_workspace_cycles

_FORMAT_CHOICES = [fmt.value for fmt in OutputFormat]

_workspace_argument = click.argument(
    "workspace",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
)
_gitignore_option = click.option(
    "--no-gitignore", is_flag=True, help="Also report packages matched by the root .gitignore",
)


@click.group()
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Enable debug logging")
def cli(debug: bool):
    """cyclic-dependencies: Find circular dependencies between workspace packages."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@_workspace_argument
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(_FORMAT_CHOICES), default=OutputFormat.TEXT.value, show_default=True,
    help="Output format",
)
@click.option("--verbose", "-v", is_flag=True, help="Print every cycle in full")
@click.option("--image", "-i", is_flag=True, help="Write cycles.dot (and cycles.png with Graphviz)")
@click.option("--reject", is_flag=True, help="Exit with status 1 when cycles are found")
@_gitignore_option
@click.pass_context
def check(
    ctx: click.Context,
    workspace: Path,
    output_format: str,
    verbose: bool,
    image: bool,
    reject: bool,
    no_gitignore: bool,
):
    """Detect dependency cycles between the packages of a workspace."""
    config = DetectionConfig(workspace_root=workspace, respect_gitignore=not no_gitignore)

    def progress(stage: str, current: int, total: int):
        if current == total:
            click.echo(f"  {stage}: {current}/{total}", err=True)

    try:
        result = detect_workspace_cycles(config, progress=progress if verbose else None)
    except CyclicDependenciesError as e:
        raise click.ClickException(str(e))

    render_cycles(result.cycles, OutputFormat(output_format), verbose=verbose)

    if image and result.has_cycles:
        dot_path, png_path = write_dot_file(result.cycles, workspace)
        click.echo(f"DOT file generated: {dot_path}", err=True)
        if png_path:
            click.echo(f"Cycle visualization generated: {png_path}", err=True)
        else:
            click.echo("Failed to generate visualization (is Graphviz installed?)", err=True)

    if reject and result.has_cycles:
        ctx.exit(1)


@cli.command()
@_workspace_argument
@_gitignore_option
def graph(workspace: Path, no_gitignore: bool):
    """Print the workspace package graph as JSON."""
    config = DetectionConfig(workspace_root=workspace, respect_gitignore=not no_gitignore)
    try:
        package_graph = build_workspace_graph(config)
    except CyclicDependenciesError as e:
        raise click.ClickException(str(e))
    click.echo(json.dumps(graph_to_dict(package_graph), indent=2))


if __name__ == "__main__":
    cli()
