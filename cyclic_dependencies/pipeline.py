"""Detection pipeline: discover -> read -> build graph -> find cycles."""

from __future__ import annotations

from typing import Callable

from cyclic_dependencies.analysis.cycles import find_cycles
from cyclic_dependencies.analysis.manifest_reader import read_manifests
from cyclic_dependencies.analysis.package_graph import PackageGraphBuilder
from cyclic_dependencies.discovery import find_workspace_packages
from cyclic_dependencies.models import DetectionConfig, DetectionResult, PackageGraph


ProgressCallback = Callable[[str, int, int], None]

_builder = PackageGraphBuilder()


def run_discovery(config: DetectionConfig, progress: ProgressCallback | None = None) -> list[str]:
    """Stage 1: Locate workspace manifests."""
    if progress:
        progress("Discovering", 0, 1)
    manifest_paths = find_workspace_packages(
        config.workspace_root,
        skip_dirs=config.skip_dirs,
        respect_gitignore=config.respect_gitignore,
    )
    if progress:
        progress("Discovering", 1, 1)
    return manifest_paths


def build_workspace_graph(
    config: DetectionConfig,
    progress: ProgressCallback | None = None,
) -> PackageGraph:
    """Stages 1-3 only, for callers that want the graph without cycles."""
    return _run(config, progress, detect=False).graph


def detect_workspace_cycles(
    config: DetectionConfig,
    progress: ProgressCallback | None = None,
) -> DetectionResult:
    """Run the full detection pipeline."""
    return _run(config, progress, detect=True)


def _run(config: DetectionConfig, progress: ProgressCallback | None, detect: bool) -> DetectionResult:
    result = DetectionResult()

    # Stage 1: Discover
    result.manifest_paths = run_discovery(config, progress)

    # Stage 2: Read
    total = len(result.manifest_paths)
    if progress:
        progress("Reading manifests", 0, total)
    result.packages = read_manifests(result.manifest_paths, root=config.workspace_root)
    if progress:
        progress("Reading manifests", total, total)

    # Stage 3: Build
    if progress:
        progress("Building graph", 0, 1)
    result.graph = _builder.build(result.packages)
    if progress:
        progress("Building graph", 1, 1)

    # Stage 4: Detect
    if detect:
        if progress:
            progress("Finding cycles", 0, 1)
        result.cycles = find_cycles(result.graph)
        if progress:
            progress("Finding cycles", 1, 1)

    return result
