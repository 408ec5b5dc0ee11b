"""Cycle detector — enumerates dependency cycles with a three-color DFS.

Every node starts ``UNVISITED``. A node becomes ``IN_PROGRESS`` while it is on
the active DFS path and ``DONE`` once all of its edges are explored. An edge
to an ``IN_PROGRESS`` node is a back edge and closes a cycle; edges to
``DONE`` nodes are ignored.

Roots are taken in sorted name order so the output does not depend on the
order manifests were read in. The traversal keeps an explicit frame stack,
so deep workspaces never hit the interpreter recursion limit.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterator

from cyclic_dependencies.models import Cycle, DependencyEdge, PackageGraph

logger = logging.getLogger(__name__)


class Color(enum.Enum):
    UNVISITED = "unvisited"
    IN_PROGRESS = "in_progress"
    DONE = "done"


@dataclass
class _Frame:
    name: str
    manifest_path: str
    edges: Iterator[DependencyEdge]


def find_cycles(graph: PackageGraph) -> list[Cycle]:
    """Return every back-edge cycle in ``graph``.

    A cycle is reported once, from the DFS tree that first closes it, starting
    at the first node of the active path that belongs to it. Rotations are not
    canonicalized.
    """
    roots = sorted(graph)
    colors = {name: Color.UNVISITED for name in roots}
    cycles: list[Cycle] = []

    for root in roots:
        if colors[root] is Color.UNVISITED:
            _explore(graph, root, colors, cycles)

    logger.info("Cycle detection complete: %d cycle(s) in %d packages", len(cycles), len(roots))
    return cycles


def _explore(
    graph: PackageGraph,
    root: str,
    colors: dict[str, Color],
    cycles: list[Cycle],
) -> None:
    """Depth-first traversal of everything still unvisited below ``root``."""
    stack: list[_Frame] = []
    # index of each IN_PROGRESS node within ``stack``
    positions: dict[str, int] = {}

    def enter(name: str) -> None:
        node = graph[name]
        colors[name] = Color.IN_PROGRESS
        positions[name] = len(stack)
        stack.append(_Frame(name, node.manifest_path, iter(node.dependencies)))

    enter(root)

    while stack:
        frame = stack[-1]
        edge = next(frame.edges, None)

        if edge is None:
            stack.pop()
            del positions[frame.name]
            colors[frame.name] = Color.DONE
            continue

        # Unknown targets have no color and are skipped.
        target_color = colors.get(edge.target_name)

        if target_color is Color.UNVISITED:
            enter(edge.target_name)
        elif target_color is Color.IN_PROGRESS:
            on_path = stack[positions[edge.target_name]:]
            cycle = Cycle(
                nodes=tuple(f.name for f in on_path) + (edge.target_name,),
                manifest_paths=tuple(f.manifest_path for f in on_path) + (edge.target_manifest_path,),
            )
            logger.debug("Back edge %s -> %s closes %s", frame.name, edge.target_name, " -> ".join(cycle.nodes))
            cycles.append(cycle)
