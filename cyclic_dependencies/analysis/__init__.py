"""Manifest reading, graph building and cycle detection."""

from __future__ import annotations

from cyclic_dependencies.analysis.cycles import find_cycles
from cyclic_dependencies.analysis.manifest_reader import (
    PackageManifest,
    read_manifest,
    read_manifests,
    read_manifests_async,
)
from cyclic_dependencies.analysis.package_graph import (
    PackageGraphBuilder,
    build_package_graph,
    graph_to_dict,
)

__all__ = [
    "PackageGraphBuilder",
    "PackageManifest",
    "build_package_graph",
    "find_cycles",
    "graph_to_dict",
    "read_manifest",
    "read_manifests",
    "read_manifests_async",
]
