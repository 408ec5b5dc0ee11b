"""Manifest finder — expands workspace patterns into package.json paths."""

from __future__ import annotations

import fnmatch
import logging
import os
import re
from pathlib import Path, PurePosixPath, PureWindowsPath

from cyclic_dependencies.discovery.workspace import ROOT_MANIFEST, determine_workspace_patterns
from cyclic_dependencies.errors import DiscoveryError
from cyclic_dependencies.models import DEFAULT_SKIP_DIRS

logger = logging.getLogger(__name__)

_BRACE_GROUP = re.compile(r"\{([^{}]*)\}")


def load_gitignore_patterns(root: Path) -> list[str]:
    """Read the root .gitignore as a list of fnmatch patterns.

    Negated entries are not supported and are skipped.
    """
    gitignore = root / ".gitignore"
    if not gitignore.is_file():
        return []

    patterns: list[str] = []
    for line in gitignore.read_text(encoding="utf-8", errors="replace").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("!"):
            logger.debug("Ignoring negated .gitignore entry %r", line)
            continue
        pattern = line.strip("/")
        if pattern:
            patterns.append(pattern)
    return patterns


def _expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` alternatives, innermost group first."""
    match = _BRACE_GROUP.search(pattern)
    if match is None:
        return [pattern]
    head, tail = pattern[:match.start()], pattern[match.end():]
    expanded: list[str] = []
    for option in match.group(1).split(","):
        expanded.extend(_expand_braces(f"{head}{option}{tail}"))
    return expanded


def _pattern_parts(pattern: str) -> tuple[str, ...]:
    """Split a workspace pattern into path segments relative to the root."""
    pattern = pattern.strip()
    if pattern.startswith("/") or PureWindowsPath(pattern).is_absolute():
        raise DiscoveryError(f"Workspace pattern {pattern!r} must be relative")
    return tuple(part for part in PurePosixPath(pattern).parts if part != ".")


def _match_parts(parts: tuple[str, ...], pattern: tuple[str, ...]) -> bool:
    if not pattern:
        return not parts
    head, rest = pattern[0], pattern[1:]
    if head == "**":
        return any(_match_parts(parts[i:], rest) for i in range(len(parts) + 1))
    return bool(parts) and fnmatch.fnmatchcase(parts[0], head) and _match_parts(parts[1:], rest)


def _may_contain_match(parts: tuple[str, ...], pattern: tuple[str, ...]) -> bool:
    for index, part in enumerate(parts):
        if index >= len(pattern):
            return False
        if pattern[index] == "**":
            return True
        if not fnmatch.fnmatchcase(part, pattern[index]):
            return False
    return True


def _should_skip(name: str, skip_dirs: list[str]) -> bool:
    return any(fnmatch.fnmatch(name, pattern) for pattern in skip_dirs)


def _is_gitignored(rel_path: PurePosixPath, patterns: list[str]) -> bool:
    text = rel_path.as_posix()
    for pattern in patterns:
        if "/" in pattern:
            if fnmatch.fnmatch(text, pattern) or fnmatch.fnmatch(text, f"{pattern}/*"):
                return True
        elif any(fnmatch.fnmatch(part, pattern) for part in rel_path.parts):
            return True
    return False


def _is_excluded(rel_path: PurePosixPath, patterns: list[str]) -> bool:
    package_dir = rel_path.parent.as_posix()
    for pattern in patterns:
        pattern = pattern.strip().rstrip("/")
        if fnmatch.fnmatch(package_dir, pattern) or fnmatch.fnmatch(rel_path.as_posix(), pattern):
            return True
    return False


def find_workspace_packages(
    root: Path = Path("."),
    skip_dirs: list[str] | None = None,
    respect_gitignore: bool = True,
) -> list[str]:
    """Locate every workspace package manifest under ``root``.

    Returns sorted POSIX paths relative to ``root``. Patterns may use ``*``,
    ``**`` and ``{a,b}`` alternatives; patterns prefixed with ``!`` exclude
    packages. Directories matching ``skip_dirs`` and, when
    ``respect_gitignore`` is set, entries of the root .gitignore are pruned
    from the walk and never reported.
    """
    root = root.resolve()
    skip_dirs = DEFAULT_SKIP_DIRS if skip_dirs is None else skip_dirs
    patterns = determine_workspace_patterns(root)

    includes = [
        _pattern_parts(expanded)
        for p in patterns if not p.startswith("!")
        for expanded in _expand_braces(p)
    ]
    excludes = [
        "/".join(_pattern_parts(expanded))
        for p in patterns if p.startswith("!")
        for expanded in _expand_braces(p[1:])
    ]
    ignored = load_gitignore_patterns(root) if respect_gitignore else []

    found: set[str] = set()
    for dirpath, dirnames, filenames in os.walk(root):
        rel_dir = PurePosixPath(Path(dirpath).relative_to(root).as_posix())
        parts = tuple(part for part in rel_dir.parts if part != ".")

        # Prune in place so skipped trees are never entered
        dirnames[:] = sorted(
            d for d in dirnames
            if not _should_skip(d, skip_dirs)
            and not (ignored and _is_gitignored(rel_dir / d, ignored))
            and any(_may_contain_match(parts + (d,), p) for p in includes)
        )

        if ROOT_MANIFEST not in filenames:
            continue
        if not any(_match_parts(parts, p) for p in includes):
            continue
        rel_path = rel_dir / ROOT_MANIFEST
        if _is_excluded(rel_path, excludes):
            continue
        if ignored and _is_gitignored(rel_path, ignored):
            continue
        found.add(rel_path.as_posix())

    manifests = sorted(found)
    logger.info("Found %d workspace manifests under %s", len(manifests), root)
    return manifests
