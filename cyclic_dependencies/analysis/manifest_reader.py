"""Manifest reader — parses workspace package.json files into PackageRecords."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cyclic_dependencies.errors import ManifestParseError, ManifestReadError
from cyclic_dependencies.models import PackageRecord

logger = logging.getLogger(__name__)


class PackageManifest(BaseModel):
    """The subset of a package.json the detector cares about."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str = Field(min_length=1)
    # version specifiers are never inspected
    dependencies: dict[str, Any] | None = None
    dev_dependencies: dict[str, Any] | None = Field(default=None, alias="devDependencies")

    def dependency_names(self) -> tuple[str, ...]:
        runtime = list(self.dependencies or {})
        development = list(self.dev_dependencies or {})
        return tuple(runtime + development)


def _describe_validation_error(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        location = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{location}: {err['msg']}")
    return "; ".join(parts)


def read_manifest(manifest_path: str, root: Path | None = None) -> PackageRecord:
    """Read and validate a single manifest.

    Relative paths are resolved against ``root`` when given; the returned
    record keeps ``manifest_path`` exactly as passed in.
    """
    file_path = Path(manifest_path)
    if root is not None and not file_path.is_absolute():
        file_path = root / file_path

    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ManifestParseError(manifest_path, f"not UTF-8 text ({e.reason})") from e
    except OSError as e:
        raise ManifestReadError(manifest_path, e.strerror or str(e)) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestParseError(manifest_path, str(e)) from e

    try:
        manifest = PackageManifest.model_validate(data)
    except ValidationError as e:
        raise ManifestParseError(manifest_path, _describe_validation_error(e)) from e

    record = PackageRecord(
        name=manifest.name,
        manifest_path=manifest_path,
        declared_dependencies=manifest.dependency_names(),
    )
    logger.debug(
        "Read %s (%s, %d declared dependencies)",
        manifest_path, record.name, len(record.declared_dependencies),
    )
    return record


async def read_manifests_async(
    manifest_paths: Sequence[str],
    root: Path | None = None,
) -> dict[str, PackageRecord]:
    """Read all manifests concurrently, one worker thread per file.

    The first failure cancels the remaining reads and propagates; no partial
    mapping is ever returned. When two manifests share a name the later one
    in ``manifest_paths`` wins.
    """
    tasks = [
        asyncio.create_task(asyncio.to_thread(read_manifest, path, root))
        for path in manifest_paths
    ]
    try:
        records = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        raise

    packages: dict[str, PackageRecord] = {}
    for record in records:
        if record.name in packages:
            logger.debug(
                "Package name %r declared by both %s and %s; keeping %s",
                record.name, packages[record.name].manifest_path,
                record.manifest_path, record.manifest_path,
            )
        packages[record.name] = record

    logger.info("Read %d manifests (%d packages)", len(records), len(packages))
    return packages


def read_manifests(
    manifest_paths: Sequence[str],
    root: Path | None = None,
) -> dict[str, PackageRecord]:
    """Blocking wrapper around :func:`read_manifests_async`.

    Must not be called from inside a running event loop.
    """
    return asyncio.run(read_manifests_async(manifest_paths, root))
