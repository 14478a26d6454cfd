"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .models import NavbarItemConfig, SiteConfigError

DOC_SIDEBAR_TYPE = "docSidebar"
SIDEBAR_SUFFIXES = (".yaml", ".yml", ".json")


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _safe_yaml() -> YAML:
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    return loader


def load_sidebar_definition(path: Path) -> typ.Any:
    """Read a standalone sidebar definition from a YAML or JSON file.

    JSON files go through the same YAML 1.2 loader, so a sidebar name
    declared twice in either format is rejected instead of silently keeping
    the last declaration.

    Parameters
    ----------
    path : Path
        File ending in ``.yaml``, ``.yml``, or ``.json``.

    Returns
    -------
    Any
        The decoded definition, ready for
        :func:`docs_sidebars.builder.build_registry`.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    SiteConfigError
        If the suffix is unsupported, or the file cannot be parsed or repeats
        a mapping key.
    """
    if not path.exists():
        msg = f"Sidebar file '{path}' not found."
        raise FileNotFoundError(msg)
    if path.suffix.lower() not in SIDEBAR_SUFFIXES:
        msg = f"Unsupported sidebar file type '{path.suffix}' for '{path}'."
        raise SiteConfigError(msg)
    with path.open("r", encoding="utf-8") as handle:
        try:
            return _safe_yaml().load(handle)
        except YAMLError as exc:
            msg = f"Sidebar file '{path}' could not be parsed: {exc}"
            raise SiteConfigError(msg) from exc


def _build_navbar(entries: object) -> list[NavbarItemConfig]:
    """Build navbar entries from the ``navbar`` list."""
    match entries:
        case None:
            return []
        case list() as items:
            pass
        case _:
            msg = "Navbar configuration must be a list."
            raise SiteConfigError(msg)
    navbar: list[NavbarItemConfig] = []
    for index, entry in enumerate(items):
        if not isinstance(entry, dict):
            msg = f"Navbar entry {index} must be a mapping."
            raise SiteConfigError(msg)
        label = _optional_str(entry.get("label"))
        if not label:
            msg = f"Navbar entry {index} requires a 'label'."
            raise SiteConfigError(msg)
        position = _optional_str(entry.get("position")) or "left"
        if entry.get("type") == DOC_SIDEBAR_TYPE:
            sidebar_id = _optional_str(entry.get("sidebar_id"))
            if not sidebar_id:
                msg = f"Navbar entry '{label}' requires a 'sidebar_id'."
                raise SiteConfigError(msg)
            navbar.append(
                NavbarItemConfig(label=label, position=position, sidebar_id=sidebar_id)
            )
            continue
        href = _optional_str(entry.get("href"))
        if not href:
            msg = f"Navbar entry '{label}' requires an 'href' or a sidebar."
            raise SiteConfigError(msg)
        navbar.append(NavbarItemConfig(label=label, position=position, href=href))
    return navbar


__all__ = [
    "DOC_SIDEBAR_TYPE",
    "SIDEBAR_SUFFIXES",
    "_build_navbar",
    "_optional_str",
    "_safe_yaml",
    "load_sidebar_definition",
]
