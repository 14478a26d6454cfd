"""Check a sidebar registry against its structural and referential rules.

Validation walks every sidebar in declaration order, depth-first and left to
right, and collects every problem it finds instead of stopping at the first
one so authors can fix a definition in a single pass:

- ``UnknownReference``: a document id (leaf or category link) that the corpus
  does not contain;
- ``DuplicateTreeName``: a sidebar name declared more than once;
- ``EmptyUnlinkedCategory``: a category with neither children nor a link.

Every violation is fatal; callers publishing a site should use
:meth:`ValidationReport.raise_for_violations`.

Examples
--------
>>> from docs_sidebars.builder import build_registry
>>> from docs_sidebars.validator import validate_registry
>>> registry = build_registry(
...     {"docsSidebar": [{"category": "Getting Started",
...                       "items": ["install", "quickstart"]}]}
... )
>>> report = validate_registry(registry, {"install"})
>>> [violation.describe() for violation in report.violations]
["docsSidebar/0/1: unknown document 'quickstart'"]
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import enum
import typing as typ

from .corpus import DocumentCorpus, as_corpus
from .models import (
    CategoryNode,
    DocumentReference,
    LeafItem,
    Node,
    PathSegment,
    SidebarError,
    format_location,
)

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .models import SidebarRegistry, SidebarTree


class ViolationKind(enum.Enum):
    """Categories of registry problems."""

    UNKNOWN_REFERENCE = "UnknownReference"
    DUPLICATE_TREE_NAME = "DuplicateTreeName"
    EMPTY_UNLINKED_CATEGORY = "EmptyUnlinkedCategory"


class ValidationState(enum.Enum):
    """Outcome of validating a registry."""

    VALID = "valid"
    INVALID = "invalid"


@dc.dataclass(frozen=True, slots=True)
class Violation:
    """A single problem found in the registry.

    Attributes
    ----------
    kind : ViolationKind
        What went wrong.
    tree : str
        Name of the sidebar holding the problem.
    path : tuple[int | str, ...]
        Index chain from the sidebar root. Category links end in ``"link"``;
        duplicate sidebar names hold the declaration positions of the first
        and the repeated sidebar.
    value : str
        The offending document id, sidebar name, or category label.
    """

    kind: ViolationKind
    tree: str
    path: tuple[PathSegment, ...]
    value: str

    @property
    def location(self) -> str:
        return format_location(self.tree, self.path)

    def describe(self) -> str:
        """Return a one-line, human-readable account of the violation."""
        match self.kind:
            case ViolationKind.UNKNOWN_REFERENCE:
                return f"{self.location}: unknown document '{self.value}'"
            case ViolationKind.DUPLICATE_TREE_NAME:
                first, repeated = self.path
                return (
                    f"{self.tree}: sidebar declared more than once "
                    f"(positions {first} and {repeated})"
                )
            case ViolationKind.EMPTY_UNLINKED_CATEGORY:
                return (
                    f"{self.location}: category '{self.value}' has no items "
                    "and no link"
                )
        raise AssertionError(self.kind)  # pragma: no cover - exhaustive match


class SidebarValidationError(SidebarError):
    """Raised when a registry has one or more violations."""

    def __init__(self, violations: cabc.Sequence[Violation]) -> None:
        self.violations = tuple(violations)
        lines = [violation.describe() for violation in self.violations]
        count = len(lines)
        noun = "violation" if count == 1 else "violations"
        super().__init__("\n".join([f"{count} sidebar {noun}:", *lines]))


@dc.dataclass(frozen=True, slots=True)
class ValidationReport:
    """Result of :func:`validate_registry`."""

    violations: tuple[Violation, ...] = ()

    @property
    def state(self) -> ValidationState:
        if self.violations:
            return ValidationState.INVALID
        return ValidationState.VALID

    @property
    def ok(self) -> bool:
        return self.state is ValidationState.VALID

    def raise_for_violations(self) -> None:
        """Raise :class:`SidebarValidationError` unless the registry is valid."""
        if self.violations:
            raise SidebarValidationError(self.violations)


def validate_registry(
    registry: SidebarRegistry,
    corpus: DocumentCorpus | cabc.Iterable[DocumentReference],
) -> ValidationReport:
    """Collect every violation in ``registry`` against ``corpus``.

    Parameters
    ----------
    registry : SidebarRegistry
        Sidebars produced by :func:`docs_sidebars.builder.build_registry`.
    corpus : DocumentCorpus or Iterable[str]
        Known document ids, either as an object exposing ``contains_id`` or as
        a plain collection.

    Returns
    -------
    ValidationReport
        All violations in walk order; empty when the registry is valid.
    """
    known = as_corpus(corpus)
    violations: list[Violation] = []
    first_positions: dict[str, int] = {}
    for tree in registry.trees:
        if tree.name in first_positions:
            violations.append(
                Violation(
                    kind=ViolationKind.DUPLICATE_TREE_NAME,
                    tree=tree.name,
                    path=(first_positions[tree.name], tree.position),
                    value=tree.name,
                )
            )
        else:
            first_positions[tree.name] = tree.position
        violations.extend(_check_tree(tree, known))
    return ValidationReport(violations=tuple(violations))


def _check_tree(
    tree: SidebarTree, corpus: DocumentCorpus
) -> cabc.Iterator[Violation]:
    for index, node in enumerate(tree.items):
        yield from _check_node(tree.name, (index,), node, corpus)


def _check_node(
    tree: str,
    path: tuple[PathSegment, ...],
    node: Node,
    corpus: DocumentCorpus,
) -> cabc.Iterator[Violation]:
    match node:
        case LeafItem(doc_id=doc_id):
            if not corpus.contains_id(doc_id):
                yield Violation(ViolationKind.UNKNOWN_REFERENCE, tree, path, doc_id)
        case CategoryNode(label=label, link=link, children=children):
            if link is None and not children:
                yield Violation(
                    ViolationKind.EMPTY_UNLINKED_CATEGORY, tree, path, label
                )
            if link is not None and not corpus.contains_id(link):
                yield Violation(
                    ViolationKind.UNKNOWN_REFERENCE, tree, (*path, "link"), link
                )
            for index, child in enumerate(children):
                yield from _check_node(tree, (*path, index), child, corpus)


__all__ = [
    "SidebarValidationError",
    "ValidationReport",
    "ValidationState",
    "Violation",
    "ViolationKind",
    "validate_registry",
]
