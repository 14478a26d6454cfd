"""Build a :class:`~docs_sidebars.models.SidebarRegistry` from literal data.

The input is the hand-authored sidebar definition, either a mapping of sidebar
names to node lists or a list of ``{"name": ..., "items": [...]}``
declarations. Bare strings are document ids; mappings describe documents or
categories. Declaration order is kept at every level.

The first malformed node aborts the build with a
:class:`~docs_sidebars.models.MalformedNodeError` naming its location.

Examples
--------
>>> from docs_sidebars.builder import build_registry
>>> registry = build_registry(
...     {"docsSidebar": [{"category": "Getting Started", "items": ["install"]}]}
... )
>>> registry.get_tree("docsSidebar").items[0].children[0].doc_id
'install'
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ._constants import (
    CATEGORY_KEYS,
    CATEGORY_TYPE,
    DECLARATION_KEYS,
    DOC_KEYS,
    DOC_TYPE,
)
from .models import (
    CategoryNode,
    LeafItem,
    MalformedNodeError,
    Node,
    PathSegment,
    SidebarRegistry,
    SidebarTree,
)

ROOT = "<root>"


def build_registry(definition: object) -> SidebarRegistry:
    """Build every sidebar declared in ``definition``.

    Parameters
    ----------
    definition : Mapping or Sequence
        Either ``{name: [node, ...]}`` or a sequence of
        ``{"name": name, "items": [node, ...]}`` declarations. Only the
        sequence form can declare the same name twice.

    Returns
    -------
    SidebarRegistry
        Sidebars in declaration order.

    Raises
    ------
    MalformedNodeError
        If the definition or any node in it has an unrecognized shape.
    """
    trees = [
        SidebarTree(
            name=name,
            items=_build_children(items, tree=name, path=()),
            position=position,
        )
        for position, (name, items) in enumerate(_iter_declarations(definition))
    ]
    return SidebarRegistry(trees=tuple(trees))


def _iter_declarations(definition: object) -> cabc.Iterator[tuple[str, object]]:
    """Yield ``(name, items)`` for every declared sidebar."""
    match definition:
        case cabc.Mapping():
            for index, (name, items) in enumerate(definition.items()):
                yield _require_tree_name(name, (index,)), items
        case cabc.Sequence() if not isinstance(definition, str | bytes):
            for index, declaration in enumerate(definition):
                yield _parse_declaration(declaration, index)
        case _:
            msg = "sidebar definition must be a mapping or a list of declarations"
            raise MalformedNodeError(msg, tree=ROOT)


def _parse_declaration(declaration: object, index: int) -> tuple[str, object]:
    if not isinstance(declaration, cabc.Mapping):
        msg = "sidebar declaration must be a mapping with 'name' and 'items'"
        raise MalformedNodeError(msg, tree=ROOT, path=(index,))
    _reject_unknown_keys(declaration, DECLARATION_KEYS, tree=ROOT, path=(index,))
    name = _require_tree_name(declaration.get("name"), (index,))
    if "items" not in declaration:
        msg = "sidebar declaration is missing 'items'"
        raise MalformedNodeError(msg, tree=name)
    return name, declaration["items"]


def _require_tree_name(value: object, path: tuple[PathSegment, ...]) -> str:
    if not isinstance(value, str) or not value.strip():
        msg = f"sidebar name must be a non-empty string, got {value!r}"
        raise MalformedNodeError(msg, tree=ROOT, path=path)
    return value


def _build_children(
    items: object, *, tree: str, path: tuple[PathSegment, ...]
) -> tuple[Node, ...]:
    """Build an ordered node sequence, rejecting duplicate sibling labels."""
    if isinstance(items, str | bytes) or not isinstance(items, cabc.Sequence):
        msg = f"items must be a list, got {type(items).__name__}"
        raise MalformedNodeError(msg, tree=tree, path=path)
    nodes: list[Node] = []
    seen_labels: set[str] = set()
    for index, raw in enumerate(items):
        node = build_node(raw, tree=tree, path=(*path, index))
        if isinstance(node, CategoryNode):
            if node.label in seen_labels:
                msg = f"duplicate category label '{node.label}' among siblings"
                raise MalformedNodeError(msg, tree=tree, path=(*path, index))
            seen_labels.add(node.label)
        nodes.append(node)
    return tuple(nodes)


def build_node(
    raw: object, *, tree: str, path: cabc.Sequence[PathSegment] = ()
) -> Node:
    """Build a single node declared at ``tree``/``path``."""
    location = tuple(path)
    match raw:
        case str():
            return LeafItem(_require_text(raw, "document id", tree, location))
        case cabc.Mapping():
            kind = _node_type(raw, tree=tree, path=location)
            if kind == DOC_TYPE:
                return _build_leaf(raw, tree=tree, path=location)
            return _build_category(raw, tree=tree, path=location)
        case _:
            msg = (
                "node must be a document id or a mapping, "
                f"got {type(raw).__name__}"
            )
            raise MalformedNodeError(msg, tree=tree, path=location)


def _node_type(
    raw: cabc.Mapping[str, typ.Any], *, tree: str, path: tuple[PathSegment, ...]
) -> str:
    declared = raw.get("type")
    if declared is None:
        if "category" in raw:
            return CATEGORY_TYPE
        if "id" in raw:
            return DOC_TYPE
        msg = "node mapping needs a 'type', 'category', or 'id' key"
        raise MalformedNodeError(msg, tree=tree, path=path)
    if not isinstance(declared, str) or declared not in {DOC_TYPE, CATEGORY_TYPE}:
        msg = f"unsupported node type {declared!r}"
        raise MalformedNodeError(msg, tree=tree, path=path)
    return declared


def _build_leaf(
    raw: cabc.Mapping[str, typ.Any], *, tree: str, path: tuple[PathSegment, ...]
) -> LeafItem:
    _reject_unknown_keys(raw, DOC_KEYS, tree=tree, path=path)
    doc_id = _require_text(raw.get("id"), "document id", tree, path)
    label = raw.get("label")
    if label is not None:
        label = _require_text(label, "label", tree, path)
    return LeafItem(doc_id=doc_id, label=label)


def _build_category(
    raw: cabc.Mapping[str, typ.Any], *, tree: str, path: tuple[PathSegment, ...]
) -> CategoryNode:
    _reject_unknown_keys(raw, CATEGORY_KEYS, tree=tree, path=path)
    if "category" in raw and "label" in raw:
        msg = "category declares both 'category' and 'label'"
        raise MalformedNodeError(msg, tree=tree, path=path)
    label = _require_text(
        raw.get("category", raw.get("label")), "category label", tree, path
    )
    collapsed = raw.get("collapsed", True)
    if not isinstance(collapsed, bool):
        msg = f"'collapsed' must be a boolean, got {collapsed!r}"
        raise MalformedNodeError(msg, tree=tree, path=path)
    return CategoryNode(
        label=label,
        children=_build_children(raw.get("items", []), tree=tree, path=path),
        collapsed=collapsed,
        link=_build_link(raw.get("link"), tree=tree, path=path),
    )


def _build_link(
    raw: object, *, tree: str, path: tuple[PathSegment, ...]
) -> str | None:
    match raw:
        case None:
            return None
        case str():
            return _require_text(raw, "category link", tree, path)
        case cabc.Mapping() if raw.get("type", DOC_TYPE) == DOC_TYPE:
            _reject_unknown_keys(raw, {"type", "id"}, tree=tree, path=path)
            return _require_text(raw.get("id"), "category link", tree, path)
        case _:
            msg = f"category link must be a document id, got {raw!r}"
            raise MalformedNodeError(msg, tree=tree, path=path)


def _require_text(
    value: object, what: str, tree: str, path: tuple[PathSegment, ...]
) -> str:
    if not isinstance(value, str) or not value.strip():
        msg = f"{what} must be a non-empty string, got {value!r}"
        raise MalformedNodeError(msg, tree=tree, path=path)
    return value


def _reject_unknown_keys(
    raw: cabc.Mapping[str, typ.Any],
    allowed: cabc.Set[str],
    *,
    tree: str,
    path: tuple[PathSegment, ...],
) -> None:
    unknown = [str(key) for key in raw if key not in allowed]
    if unknown:
        msg = f"unrecognized keys: {', '.join(sorted(unknown))}"
        raise MalformedNodeError(msg, tree=tree, path=path)


__all__ = ["build_node", "build_registry"]
