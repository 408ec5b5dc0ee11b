"""Formatter registry."""

from __future__ import annotations

import enum
from typing import Sequence

import click

from cyclic_dependencies.formatter.dot import generate_dot, write_dot_file
from cyclic_dependencies.formatter.report import print_cycle_report
from cyclic_dependencies.formatter.text import (
    NO_CYCLES_MESSAGE,
    cycles_to_json,
    format_cycles,
    print_cycles,
)
from cyclic_dependencies.models import Cycle


class OutputFormat(enum.Enum):
    TEXT = "text"
    REPORT = "report"
    JSON = "json"


def render_cycles(cycles: Sequence[Cycle], output_format: OutputFormat, verbose: bool = False) -> None:
    """Write ``cycles`` to stdout in the requested format."""
    if output_format is OutputFormat.JSON:
        click.echo(cycles_to_json(cycles))
    elif not cycles:
        click.echo(NO_CYCLES_MESSAGE)
    elif output_format is OutputFormat.REPORT:
        print_cycle_report(cycles, verbose=verbose)
    else:
        print_cycles(cycles, verbose=verbose)


__all__ = [
    "OutputFormat",
    "cycles_to_json",
    "format_cycles",
    "generate_dot",
    "print_cycle_report",
    "print_cycles",
    "render_cycles",
    "write_dot_file",
]
