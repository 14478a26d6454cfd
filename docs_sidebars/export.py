"""Serialize a sidebar registry for the site rendering pipeline.

The plain-data form mirrors the Docusaurus sidebar schema: document entries
without a label collapse back to bare id strings, and categories become
``{"type": "category", ...}`` mappings. Feeding the output of
:func:`registry_to_data` back into
:func:`~docs_sidebars.builder.build_registry` yields an equal registry.
"""

from __future__ import annotations

import typing as typ

import msgspec.json as msgspec_json

from ._constants import CATEGORY_TYPE, DOC_TYPE
from .models import CategoryNode, LeafItem, Node

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .models import SidebarRegistry

NodeData: typ.TypeAlias = str | dict[str, typ.Any]


def node_to_data(node: Node) -> NodeData:
    """Return the plain-data form of a single node."""
    match node:
        case LeafItem(doc_id=doc_id, label=None):
            return doc_id
        case LeafItem(doc_id=doc_id, label=label):
            return {"type": DOC_TYPE, "id": doc_id, "label": label}
        case CategoryNode():
            payload: dict[str, typ.Any] = {
                "type": CATEGORY_TYPE,
                "label": node.label,
                "collapsed": node.collapsed,
            }
            if node.link is not None:
                payload["link"] = {"type": DOC_TYPE, "id": node.link}
            payload["items"] = [node_to_data(child) for child in node.children]
            return payload
    raise TypeError(node)  # pragma: no cover - exhaustive match


def registry_to_data(
    registry: SidebarRegistry,
) -> dict[str, list[NodeData]] | list[dict[str, typ.Any]]:
    """Return the registry as plain data.

    A registry with unique sidebar names becomes a ``{name: items}`` mapping.
    One that still holds repeated names (that is, one that failed validation)
    becomes a list of ``{"name": ..., "items": [...]}`` declarations so that no
    sidebar is dropped.
    """
    declarations = [
        (tree.name, [node_to_data(node) for node in tree.items])
        for tree in registry.trees
    ]
    if len(registry.list_tree_names()) == len(declarations):
        return dict(declarations)
    return [{"name": name, "items": items} for name, items in declarations]


def encode_registry(registry: SidebarRegistry) -> bytes:
    """Encode the registry as UTF-8 JSON."""
    return msgspec_json.encode(registry_to_data(registry))


__all__ = ["encode_registry", "node_to_data", "registry_to_data"]
