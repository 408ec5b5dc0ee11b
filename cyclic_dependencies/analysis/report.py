"""Cycle report helpers — cycle starts, critical edges, shortest cycle per start."""

from __future__ import annotations

from typing import Sequence

from cyclic_dependencies.models import Cycle


def find_cycle_start(nodes: Sequence[str]) -> str | None:
    """Return the first package name that appears twice in ``nodes``."""
    seen: set[str] = set()
    for name in nodes:
        if name in seen:
            return name
        seen.add(name)
    return None


def critical_dependencies(cycle: Cycle) -> list[str]:
    """Describe each manifest-to-manifest edge that makes up the cycle."""
    files = cycle.manifest_paths
    return [f"{files[i]} imports {files[i + 1]}" for i in range(len(files) - 1)]


def group_cycles_by_start(cycles: Sequence[Cycle]) -> dict[str, list[Cycle]]:
    groups: dict[str, list[Cycle]] = {}
    for cycle in cycles:
        start = find_cycle_start(cycle.nodes) or cycle.start
        groups.setdefault(start, []).append(cycle)
    return groups


def shortest_cycle(cycles: Sequence[Cycle]) -> Cycle:
    """First cycle with the fewest edges."""
    if not cycles:
        raise ValueError("shortest_cycle() requires at least one cycle")
    return min(cycles, key=len)


def unique_cycles(cycles: Sequence[Cycle]) -> list[Cycle]:
    """Shortest cycle of each start group, in order of first appearance."""
    return [shortest_cycle(group) for group in group_cycles_by_start(cycles).values()]
