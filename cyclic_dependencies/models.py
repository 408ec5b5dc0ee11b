"""Data models for workspace cycle detection."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_SKIP_DIRS = [
    "node_modules", ".git", ".yarn", ".pnpm-store",
    "bower_components", ".next", ".turbo", ".venv", "venv",
]


@dataclass(frozen=True)
class PackageRecord:
    """A workspace package as read from its manifest."""
    name: str
    manifest_path: str
    # runtime dependencies first, then development dependencies
    declared_dependencies: tuple[str, ...] = ()


@dataclass(frozen=True)
class DependencyEdge:
    """A dependency on another package of the same workspace."""
    target_name: str
    target_manifest_path: str


@dataclass
class PackageNode:
    manifest_path: str
    dependencies: list[DependencyEdge] = field(default_factory=list)


PackageGraph = dict[str, PackageNode]


@dataclass(frozen=True)
class Cycle:
    """A circular path through the package graph.

    ``nodes`` starts and ends with the same package name. ``manifest_paths``
    is index-aligned with ``nodes``: entry ``i`` is the manifest declaring the
    edge that leads to ``nodes[i + 1]``, the last entry being the manifest of
    the package the cycle closes on.
    """
    nodes: tuple[str, ...]
    manifest_paths: tuple[str, ...]

    @property
    def start(self) -> str:
        return self.nodes[0]

    def __len__(self) -> int:
        return len(self.nodes) - 1

    def to_dict(self) -> dict:
        return {
            "cycle": list(self.nodes),
            "dependency_paths": list(self.manifest_paths),
        }


@dataclass
class DetectionConfig:
    """Configuration for a detection run."""
    workspace_root: Path = field(default_factory=lambda: Path("."))
    respect_gitignore: bool = True
    skip_dirs: list[str] = field(default_factory=lambda: list(DEFAULT_SKIP_DIRS))


@dataclass
class DetectionResult:
    """Everything produced by one detection run."""
    manifest_paths: list[str] = field(default_factory=list)
    packages: dict[str, PackageRecord] = field(default_factory=dict)
    graph: PackageGraph = field(default_factory=dict)
    cycles: list[Cycle] = field(default_factory=list)

    @property
    def has_cycles(self) -> bool:
        return bool(self.cycles)
