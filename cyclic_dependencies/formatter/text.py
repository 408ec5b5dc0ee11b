"""Plain-text cycle output."""

from __future__ import annotations

import json
from typing import Sequence

import click

from cyclic_dependencies.models import Cycle

NO_CYCLES_MESSAGE = "No cyclic dependencies found in workspace"
CYCLES_MESSAGE = "Cyclic dependencies found in workspace"

_SEPARATOR = "-" * 50


def format_cycles(cycles: Sequence[Cycle]) -> dict:
    """Return ``{"results": [...], "message": ...}`` with one result per cycle."""
    if not cycles:
        return {"results": [], "message": NO_CYCLES_MESSAGE}

    results = [
        {
            "initial_module": cycle.start,
            "cycle": " -> \n".join(cycle.nodes),
            "files": " -> \n".join(cycle.manifest_paths),
        }
        for cycle in cycles
    ]
    return {"results": results, "message": CYCLES_MESSAGE}


def print_verbose_cycles(cycles: Sequence[Cycle]) -> None:
    click.echo(f"\n{CYCLES_MESSAGE}: \n")
    click.echo(f"{_SEPARATOR}\n")
    for result in format_cycles(cycles)["results"]:
        click.echo(f"[ Cycle: {result['initial_module']} ]\n")
        click.echo(f"Modules: \n{result['cycle']}\n")
        click.echo(f"Files: \n{result['files']}\n")
        click.echo(f"{_SEPARATOR}\n")


def print_cycles(cycles: Sequence[Cycle], verbose: bool = True) -> None:
    """Print cycles as a block per cycle, or as a single summary line."""
    if not cycles:
        click.echo(f"\n{NO_CYCLES_MESSAGE}\n")
        return

    if verbose:
        print_verbose_cycles(cycles)
        return

    chains = [" -> ".join(cycle.nodes) for cycle in cycles]
    click.echo(f"\n{CYCLES_MESSAGE}: {chains}")


def cycles_to_json(cycles: Sequence[Cycle]) -> str:
    return json.dumps([cycle.to_dict() for cycle in cycles], indent=2)
