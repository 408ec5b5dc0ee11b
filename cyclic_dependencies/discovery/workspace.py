"""Workspace definition loading — npm/yarn ``workspaces`` or ``pnpm-workspace.yaml``."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml

from cyclic_dependencies.errors import DiscoveryError, ManifestParseError

logger = logging.getLogger(__name__)

ROOT_MANIFEST = "package.json"
PNPM_WORKSPACE_FILE = "pnpm-workspace.yaml"


def load_root_manifest(root: Path) -> dict:
    manifest_path = root / ROOT_MANIFEST
    if not manifest_path.is_file():
        raise DiscoveryError("Missing package.json in working directory")
    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ManifestParseError(ROOT_MANIFEST, str(e)) from e
    if not isinstance(data, dict):
        raise ManifestParseError(ROOT_MANIFEST, "top-level value must be an object")
    return data


def _as_pattern_list(value: object, source: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(p, str) for p in value):
        raise DiscoveryError(f"Workspace packages in {source} must be a list of glob patterns")
    return list(value)


def _load_pnpm_patterns(root: Path) -> list[str] | None:
    workspace_file = root / PNPM_WORKSPACE_FILE
    if not workspace_file.is_file():
        return None
    try:
        definition = yaml.safe_load(workspace_file.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise DiscoveryError(f"Invalid {PNPM_WORKSPACE_FILE}: {e}") from e
    if not isinstance(definition, dict) or "packages" not in definition:
        return None
    return _as_pattern_list(definition["packages"], PNPM_WORKSPACE_FILE)


def determine_workspace_patterns(root: Path) -> list[str]:
    """Return the workspace glob patterns declared for ``root``.

    Looks at ``workspaces`` in the root package.json first (array form, then
    the ``{"packages": [...]}`` object form), then at ``pnpm-workspace.yaml``.

    Raises:
        DiscoveryError: No root package.json, or no workspace definition.
    """
    manifest = load_root_manifest(root)
    workspaces = manifest.get("workspaces")

    if isinstance(workspaces, dict):
        workspaces = workspaces.get("packages")

    if workspaces:
        patterns = _as_pattern_list(workspaces, ROOT_MANIFEST)
        logger.debug("Workspace patterns from %s: %s", ROOT_MANIFEST, patterns)
        return patterns

    patterns = _load_pnpm_patterns(root)
    if patterns is None:
        raise DiscoveryError("Missing workspace definition")

    logger.debug("Workspace patterns from %s: %s", PNPM_WORKSPACE_FILE, patterns)
    return patterns
