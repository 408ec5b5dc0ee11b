"""Package graph builder — links workspace packages through their declared dependencies."""

from __future__ import annotations

import logging
from typing import Mapping

from cyclic_dependencies.models import (
    DependencyEdge,
    PackageGraph,
    PackageNode,
    PackageRecord,
)

logger = logging.getLogger(__name__)


class PackageGraphBuilder:
    """Build a PackageGraph from the records returned by the manifest reader."""

    def build(self, packages: Mapping[str, PackageRecord]) -> PackageGraph:
        graph: PackageGraph = {}

        for name, record in packages.items():
            node = PackageNode(manifest_path=record.manifest_path)

            # Declared order is kept and nothing is de-duplicated: a name listed
            # under both dependencies and devDependencies yields two edges.
            for dependency in record.declared_dependencies:
                target = packages.get(dependency)
                if target is None:
                    continue
                node.dependencies.append(DependencyEdge(
                    target_name=dependency,
                    target_manifest_path=target.manifest_path,
                ))

            graph[name] = node

        logger.info(
            "Package graph complete: %d nodes, %d edges",
            len(graph), sum(len(n.dependencies) for n in graph.values()),
        )
        return graph


def build_package_graph(packages: Mapping[str, PackageRecord]) -> PackageGraph:
    return PackageGraphBuilder().build(packages)


def graph_to_dict(graph: PackageGraph) -> dict[str, dict]:
    """Serialize the graph for JSON output and debugging."""
    return {
        name: {
            "path": node.manifest_path,
            "dependencies": [
                {"name": edge.target_name, "path": edge.target_manifest_path}
                for edge in node.dependencies
            ],
        }
        for name, node in graph.items()
    }
