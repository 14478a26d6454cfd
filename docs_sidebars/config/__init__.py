"""Load and validate the docs site configuration YAML.

This subpackage parses the project's ``site.yaml`` file, reads the sidebar
definition (inline or from a separate YAML/JSON file), builds the
:class:`~docs_sidebars.models.SidebarRegistry`, and checks that every navbar
entry mounts a declared sidebar. The primary entry point is
:func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from docs_sidebars.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.mounted_sidebars()  # doctest: +SKIP
['docsSidebar', 'generatorsSidebar', 'guidesSidebar']
"""

from .helpers import load_sidebar_definition
from .loader import load_site_config
from .models import NavbarItemConfig, SiteConfig, SiteConfigError

__all__ = [
    "NavbarItemConfig",
    "SiteConfig",
    "SiteConfigError",
    "load_sidebar_definition",
    "load_site_config",
]
