"""Unit tests for exporting sidebar registries as plain data and JSON."""

from __future__ import annotations

import msgspec.json as msgspec_json

from docs_sidebars.builder import build_registry
from docs_sidebars.export import encode_registry, registry_to_data

DEFINITION = {
    "docsSidebar": [
        "intro",
        {
            "category": "Getting Started",
            "link": "getting-started/index",
            "items": [
                "getting-started/quick-start",
                {"type": "doc", "id": "getting-started/installation", "label": "Install"},
            ],
        },
    ],
    "guidesSidebar": [
        {"category": "How-To Guides", "collapsed": False, "items": ["guides/b", "guides/a"]},
    ],
}


def test_registry_to_data_uses_docusaurus_shapes() -> None:
    """Unlabelled docs become strings; categories become typed mappings."""
    data = registry_to_data(build_registry(DEFINITION))

    assert data == {
        "docsSidebar": [
            "intro",
            {
                "type": "category",
                "label": "Getting Started",
                "collapsed": True,
                "link": {"type": "doc", "id": "getting-started/index"},
                "items": [
                    "getting-started/quick-start",
                    {
                        "type": "doc",
                        "id": "getting-started/installation",
                        "label": "Install",
                    },
                ],
            },
        ],
        "guidesSidebar": [
            {
                "type": "category",
                "label": "How-To Guides",
                "collapsed": False,
                "items": ["guides/b", "guides/a"],
            }
        ],
    }


def test_exported_data_rebuilds_an_equal_registry() -> None:
    """Rebuilding from exported data keeps order and content."""
    registry = build_registry(DEFINITION)

    assert build_registry(registry_to_data(registry)) == registry


def test_repeated_names_export_as_declarations() -> None:
    """Registries with repeated names keep every sidebar in list form."""
    registry = build_registry(
        [{"name": "a", "items": ["x"]}, {"name": "a", "items": ["y"]}]
    )

    assert registry_to_data(registry) == [
        {"name": "a", "items": ["x"]},
        {"name": "a", "items": ["y"]},
    ]


def test_encode_registry_preserves_key_order() -> None:
    """The JSON document lists sidebars and items in declaration order."""
    payload = encode_registry(build_registry(DEFINITION))

    assert payload.index(b'"docsSidebar"') < payload.index(b'"guidesSidebar"')
    assert payload.index(b'"guides/b"') < payload.index(b'"guides/a"')
    assert msgspec_json.decode(payload) == registry_to_data(build_registry(DEFINITION))
