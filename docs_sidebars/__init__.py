"""Declarative navigation sidebars for documentation sites.

This package builds named, ordered sidebar trees from a hand-authored
definition, validates them against the set of documents in a docs directory,
and exposes the read-only registry to the site build.

Exports
-------
- ``build_registry``: turn a literal sidebar definition into a registry.
- ``validate_registry``: collect every violation against a document corpus.
- ``app`` / ``main``: the ``sidebars`` command line.

Examples
--------
>>> from docs_sidebars import build_registry, validate_registry
>>> registry = build_registry({"docsSidebar": ["intro"]})
>>> validate_registry(registry, {"intro"}).ok
True
"""

from __future__ import annotations

from .builder import build_registry
from .cli import app, main
from .models import (
    CategoryNode,
    LeafItem,
    MalformedNodeError,
    SidebarRegistry,
    SidebarTree,
)
from .validator import (
    SidebarValidationError,
    ValidationReport,
    Violation,
    ViolationKind,
    validate_registry,
)

__all__ = [
    "CategoryNode",
    "LeafItem",
    "MalformedNodeError",
    "SidebarRegistry",
    "SidebarTree",
    "SidebarValidationError",
    "ValidationReport",
    "Violation",
    "ViolationKind",
    "app",
    "build_registry",
    "main",
    "validate_registry",
]
