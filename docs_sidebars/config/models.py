"""Typed dataclasses describing the docs site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from ..models import SidebarRegistry


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class NavbarItemConfig:
    """A navbar entry, either mounting a sidebar or linking elsewhere.

    Entries with ``sidebar_id`` set open the first document of that sidebar;
    the others link to ``href``.
    """

    label: str
    position: str = "left"
    sidebar_id: str | None = None
    href: str | None = None

    @property
    def mounts_sidebar(self) -> bool:
        return self.sidebar_id is not None


@dc.dataclass(slots=True)
class SiteConfig:
    """Site metadata, navbar, and the built sidebar registry."""

    title: str
    docs_dir: Path
    sidebars: SidebarRegistry
    navbar: list[NavbarItemConfig] = dc.field(default_factory=list)
    tagline: str = ""
    sidebar_path: Path | None = None

    def mounted_sidebars(self) -> list[str]:
        """Return the sidebar names the navbar mounts, in navbar order."""
        return [item.sidebar_id for item in self.navbar if item.mounts_sidebar]


__all__ = ["NavbarItemConfig", "SiteConfig", "SiteConfigError"]
