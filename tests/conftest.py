"""Shared fixtures: on-disk npm/pnpm workspaces under tmp_path."""

import json
from pathlib import Path

import pytest


def package_manifest(name, dependencies=(), dev_dependencies=()):
    manifest = {"name": name, "version": "1.0.0"}
    if dependencies:
        manifest["dependencies"] = {dep: "*" for dep in dependencies}
    if dev_dependencies:
        manifest["devDependencies"] = {dep: "*" for dep in dev_dependencies}
    return manifest


def write_json(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def make_workspace(tmp_path):
    """Create a workspace root with one package.json per entry of ``packages``.

    ``packages`` maps a package directory (relative to the root) to its
    manifest dict. ``workspaces`` goes into the root package.json unless
    None is passed.
    """

    def _make(packages, workspaces=("packages/*",)):
        root_manifest = {"name": "root", "private": True}
        if workspaces is not None:
            root_manifest["workspaces"] = list(workspaces)
        write_json(tmp_path / "package.json", root_manifest)
        for directory, manifest in packages.items():
            write_json(tmp_path / directory / "package.json", manifest)
        return tmp_path

    return _make


@pytest.fixture
def ring_workspace(make_workspace):
    """Seven packages where only d, e and f form a ring."""
    return make_workspace({
        "packages/a": package_manifest("a", ["b"]),
        "packages/b": package_manifest("b", ["c"]),
        "packages/c": package_manifest("c", ["d"]),
        "packages/d": package_manifest("d", ["e"]),
        "packages/e": package_manifest("e", ["f"]),
        "packages/f": package_manifest("f", ["d"]),
        "packages/g": package_manifest("g", ["a"]),
    })
