"""Detailed cycle report — unique cycles, involved files, critical dependencies."""

from __future__ import annotations

from typing import Sequence

import click
from rich.console import Console
from rich.table import Table

from cyclic_dependencies.analysis.report import (
    critical_dependencies,
    find_cycle_start,
    group_cycles_by_start,
    shortest_cycle,
)
from cyclic_dependencies.models import Cycle

_RULE = "-" * 27


def _echo_cycle_body(cycle: Cycle, heading: str) -> None:
    click.echo(heading)
    click.echo(f"  {' -> '.join(cycle.nodes)}")
    click.echo("Files involved:")
    for path in cycle.manifest_paths:
        click.echo(f"  - {path}")
    click.echo("Critical dependencies causing the cycle:")
    for dependency in critical_dependencies(cycle):
        click.echo(f"  - {dependency}")


def build_cycle_table(cycle: Cycle, title: str) -> Table:
    table = Table(title=title)
    table.add_column("Modules", justify="left")
    table.add_column("Files", justify="left")

    last = len(cycle.nodes) - 1
    for index, (module, path) in enumerate(zip(cycle.nodes, cycle.manifest_paths)):
        arrow = " ↓" if index < last else ""
        table.add_row(f"{module}{arrow}", f"{path}{arrow}")
    return table


def print_cycle_report(
    cycles: Sequence[Cycle],
    verbose: bool = False,
    console: Console | None = None,
) -> None:
    """Print the shortest cycle of each start group, then one table per group.

    With ``verbose`` every detected cycle is listed first.
    """
    console = console or Console()

    if verbose:
        click.echo("Full Cycle Report:")
        click.echo(click.style(f">> {len(cycles)} cycles found in workspace.", fg="red"))
        for cycle in cycles:
            start = find_cycle_start(cycle.nodes)
            click.echo(_RULE)
            click.echo(f"Cycle starts at: {start}")
            _echo_cycle_body(cycle, "Cycle details:")
        click.echo(_RULE)

    groups = group_cycles_by_start(cycles)
    summary = click.style(f">> {len(groups)} unique cycles found in workspace.", fg="red")

    click.echo(summary)
    for index, (start, group) in enumerate(groups.items(), start=1):
        click.echo(_RULE)
        click.echo(click.style(f"[Cycle {index}]: ", fg="red") + click.style(start, fg="yellow"))
        _echo_cycle_body(shortest_cycle(group), "Package Graph:")
    click.echo(_RULE)

    click.echo(summary)
    for start, group in groups.items():
        click.echo()
        console.print(build_cycle_table(shortest_cycle(group), f"Cycle: {start}"))
