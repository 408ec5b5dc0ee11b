"""Exceptions raised while discovering and reading workspace manifests."""

from __future__ import annotations


class CyclicDependenciesError(Exception):
    """Base class for all errors raised by cyclic-dependencies."""


class DiscoveryError(CyclicDependenciesError):
    """The workspace root manifest or workspace definition is missing."""


class ManifestReadError(CyclicDependenciesError):
    """A manifest file could not be read from disk.

    Attributes:
        path: Manifest path as it was requested
        reason: Underlying OS error message
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        self.message = f"Cannot read manifest {path}: {reason}"
        super().__init__(self.message)


class ManifestParseError(CyclicDependenciesError):
    """A manifest file is not valid JSON or lacks required fields.

    Attributes:
        path: Manifest path as it was requested
        details: Parser or validation error description
    """

    def __init__(self, path: str, details: str):
        self.path = path
        self.details = details
        self.message = f"Invalid manifest {path}: {details}"
        super().__init__(self.message)
