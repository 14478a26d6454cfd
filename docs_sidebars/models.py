"""Typed dataclasses describing navigation sidebars and their registry.

A sidebar is a named, ordered sequence of nodes. Each node is either a
:class:`LeafItem` pointing at a single document or a :class:`CategoryNode`
grouping further nodes under a label. The :class:`SidebarRegistry` holds every
declared sidebar in declaration order and is handed to the rendering pipeline
once validation succeeds.

Examples
--------
>>> from docs_sidebars.models import CategoryNode, LeafItem, SidebarRegistry
>>> from docs_sidebars.models import SidebarTree
>>> tree = SidebarTree(
...     name="docsSidebar",
...     items=(CategoryNode(label="Start", children=(LeafItem("install"),)),),
... )
>>> registry = SidebarRegistry(trees=(tree,))
>>> registry.list_tree_names()
('docsSidebar',)
>>> registry.get_tree("docsSidebar").items[0].collapsed
True
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

DocumentReference: typ.TypeAlias = str
PathSegment: typ.TypeAlias = int | str


def format_location(tree: str, path: cabc.Sequence[PathSegment]) -> str:
    """Render ``tree`` and an index chain as ``tree/0/1``."""
    return "/".join([tree, *(str(segment) for segment in path)])


class SidebarError(ValueError):
    """Base class for sidebar definition problems."""


class MalformedNodeError(SidebarError):
    """Raised when a declared node does not match a recognized shape."""

    def __init__(
        self, message: str, *, tree: str, path: cabc.Sequence[PathSegment] = ()
    ) -> None:
        self.tree = tree
        self.path = tuple(path)
        self.reason = message
        super().__init__(f"{self.location}: {message}")

    @property
    def location(self) -> str:
        """Return the ``tree/index/...`` location of the offending node."""
        return format_location(self.tree, self.path)


@dc.dataclass(frozen=True, slots=True)
class LeafItem:
    """A document used directly as a navigation entry."""

    kind: typ.ClassVar[str] = "doc"

    doc_id: DocumentReference
    label: str | None = None


@dc.dataclass(frozen=True, slots=True)
class CategoryNode:
    """A labelled, collapsible group of navigation entries.

    Attributes
    ----------
    label : str
        Display text, unique among the category's siblings.
    children : tuple[Node, ...]
        Child nodes in display order.
    collapsed : bool
        Whether the category renders collapsed initially.
    link : str or None
        Document the label itself navigates to; ``None`` leaves the label
        inert so it only expands and collapses.
    """

    kind: typ.ClassVar[str] = "category"

    label: str
    children: tuple[Node, ...] = ()
    collapsed: bool = True
    link: DocumentReference | None = None


Node: typ.TypeAlias = LeafItem | CategoryNode


@dc.dataclass(frozen=True, slots=True)
class SidebarTree:
    """A named, ordered sequence of root nodes."""

    name: str
    items: tuple[Node, ...]
    position: int = 0


@dc.dataclass(frozen=True, slots=True)
class SidebarRegistry:
    """Every declared sidebar, kept in declaration order.

    Duplicated names are retained so the validator can report them; lookups
    resolve to the first declaration.
    """

    trees: tuple[SidebarTree, ...] = ()

    def get_tree(self, name: str) -> SidebarTree:
        """Return the sidebar declared under ``name``."""
        for tree in self.trees:
            if tree.name == name:
                return tree
        available = ", ".join(self.list_tree_names())
        msg = f"Unknown sidebar '{name}'. Known sidebars: {available}"
        raise KeyError(msg)

    def list_tree_names(self) -> tuple[str, ...]:
        """Return sidebar names in declaration order without repeats."""
        return tuple(dict.fromkeys(tree.name for tree in self.trees))

    def __contains__(self, name: object) -> bool:
        return any(tree.name == name for tree in self.trees)

    def __len__(self) -> int:
        return len(self.trees)

    def iter_references(
        self,
    ) -> cabc.Iterator[tuple[str, tuple[PathSegment, ...], DocumentReference]]:
        """Yield ``(tree, path, doc_id)`` for every document reference.

        References are produced depth-first, left to right. A category link is
        yielded before the category's children with ``"link"`` appended to its
        path.
        """
        for tree in self.trees:
            for index, node in enumerate(tree.items):
                yield from _iter_node_references(tree.name, (index,), node)


def _iter_node_references(
    tree: str, path: tuple[PathSegment, ...], node: Node
) -> cabc.Iterator[tuple[str, tuple[PathSegment, ...], DocumentReference]]:
    match node:
        case LeafItem(doc_id=doc_id):
            yield tree, path, doc_id
        case CategoryNode(link=link, children=children):
            if link is not None:
                yield tree, (*path, "link"), link
            for index, child in enumerate(children):
                yield from _iter_node_references(tree, (*path, index), child)


__all__ = [
    "CategoryNode",
    "DocumentReference",
    "LeafItem",
    "MalformedNodeError",
    "Node",
    "PathSegment",
    "SidebarError",
    "SidebarRegistry",
    "SidebarTree",
    "format_location",
]
