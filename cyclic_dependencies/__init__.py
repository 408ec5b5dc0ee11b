"""Detect circular dependencies between the packages of a JavaScript workspace."""

__version__ = "0.1.0"
