"""Literal keys recognized in sidebar definitions.

Both the terse form (``{"category": "Label", "items": [...]}``) and the
Docusaurus form (``{"type": "category", "label": "Label", ...}``) are accepted;
these constants keep the builder, exporter, and tests in agreement.

Examples
--------
>>> from docs_sidebars import _constants
>>> _constants.CATEGORY_TYPE
'category'
>>> sorted(_constants.CATEGORY_KEYS)[:2]
['category', 'collapsed']
"""

DOC_TYPE = "doc"
CATEGORY_TYPE = "category"

DOC_KEYS = frozenset({"type", "id", "label"})
CATEGORY_KEYS = frozenset({"type", "category", "label", "items", "collapsed", "link"})
DECLARATION_KEYS = frozenset({"name", "items"})

DOC_SUFFIXES = (".md", ".mdx")
