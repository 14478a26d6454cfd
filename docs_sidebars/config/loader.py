"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ..builder import build_registry
from .helpers import (
    _build_navbar,
    _optional_str,
    _safe_yaml,
    load_sidebar_definition,
)
from .models import SiteConfig, SiteConfigError


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the docs site and its sidebars.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML site configuration (for example,
        ``config/site.yaml``). Relative ``docs_dir`` and ``sidebar_path``
        values are resolved against the file's directory.

    Returns
    -------
    SiteConfig
        Parsed configuration holding the built (not yet validated) sidebar
        registry and the navbar entries.

    Raises
    ------
    FileNotFoundError
        If the configuration file, or a referenced sidebar file, does not
        exist.
    SiteConfigError
        If required fields are missing, both or neither of ``sidebars`` and
        ``sidebar_path`` are given, or a navbar entry mounts an undeclared
        sidebar.
    MalformedNodeError
        If the sidebar definition contains a node of unrecognized shape.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from docs_sidebars.config import load_site_config
    >>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> site.sidebars.list_tree_names()  # doctest: +SKIP
    ('docsSidebar', 'generatorsSidebar', 'guidesSidebar')
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    with path.open("r", encoding="utf-8") as handle:
        loaded = _safe_yaml().load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise SiteConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    title = _optional_str(raw.get("title"))
    if not title:
        msg = "Site configuration requires a 'title'."
        raise SiteConfigError(msg)

    base_dir = path.parent
    docs_dir = base_dir / Path(raw.get("docs_dir", "docs"))
    sidebar_path, definition = _resolve_sidebar_definition(raw, base_dir)
    registry = build_registry(definition)

    navbar = _build_navbar(raw.get("navbar"))
    for item in navbar:
        if item.mounts_sidebar and item.sidebar_id not in registry:
            known = ", ".join(registry.list_tree_names())
            msg = (
                f"Navbar entry '{item.label}' mounts unknown sidebar "
                f"'{item.sidebar_id}'. Known sidebars: {known}"
            )
            raise SiteConfigError(msg)

    return SiteConfig(
        title=title,
        tagline=_optional_str(raw.get("tagline")) or "",
        docs_dir=docs_dir,
        sidebars=registry,
        navbar=navbar,
        sidebar_path=sidebar_path,
    )


def _resolve_sidebar_definition(
    raw: typ.Mapping[str, typ.Any], base_dir: Path
) -> tuple[Path | None, typ.Any]:
    """Return the sidebar file path (if any) and the raw sidebar definition."""
    inline = raw.get("sidebars")
    sidebar_path = raw.get("sidebar_path")
    if inline is not None and sidebar_path:
        msg = "Configure sidebars inline or via 'sidebar_path', not both."
        raise SiteConfigError(msg)
    if sidebar_path:
        resolved = base_dir / Path(sidebar_path)
        return resolved, load_sidebar_definition(resolved)
    if not inline:
        msg = "No sidebars defined in site configuration."
        raise SiteConfigError(msg)
    return None, inline


__all__ = ["load_site_config"]
