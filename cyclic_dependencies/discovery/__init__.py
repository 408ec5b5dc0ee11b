"""Workspace discovery — finds the package manifests that make up a workspace."""

from __future__ import annotations

from cyclic_dependencies.discovery.finder import find_workspace_packages, load_gitignore_patterns
from cyclic_dependencies.discovery.workspace import determine_workspace_patterns, load_root_manifest

__all__ = [
    "determine_workspace_patterns",
    "find_workspace_packages",
    "load_gitignore_patterns",
    "load_root_manifest",
]
