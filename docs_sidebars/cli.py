"""Cyclopts CLI entrypoint for checking and exporting docs sidebars.

The ``sidebars`` console script loads the site configuration, scans the docs
directory for known document ids, and validates every sidebar before the site
is built. ``sidebars check`` reports all violations at once; ``sidebars
export`` additionally writes the validated registry as JSON for the rendering
pipeline and refuses to do so when any violation remains.

Examples
--------
Validate the default configuration:

>>> from docs_sidebars.cli import main
>>> main()  # doctest: +SKIP

Export sidebars into a custom location:

>>> from docs_sidebars.cli import app
>>> app(["export", "--output", "build/sidebars.json"])  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import SiteConfig, load_site_config
from .corpus import DocsDirectoryCorpus
from .export import encode_registry
from .validator import ValidationReport, validate_registry

DEFAULT_CONFIG = Path("config/site.yaml")
DEFAULT_OUTPUT = Path("build/sidebars.json")

app = App(name="sidebars", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _validate_site(
    config: Path, docs_dir: Path | None
) -> tuple[SiteConfig, ValidationReport]:
    site_config = load_site_config(config)
    corpus = DocsDirectoryCorpus.scan(docs_dir or site_config.docs_dir)
    return site_config, validate_registry(site_config.sidebars, corpus)


def _report_violations(report: ValidationReport) -> None:
    for violation in report.violations:
        print(f"{violation.kind.value}: {violation.describe()}", file=sys.stderr)
    count = len(report.violations)
    noun = "violation" if count == 1 else "violations"
    print(f"{count} sidebar {noun} found", file=sys.stderr)


@app.command(help="Validate every sidebar against the docs directory.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    docs_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the docs directory", env_var="INPUT_DOCS_DIR"),
    ] = None,
) -> None:
    """Validate the configured sidebars and report every violation.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    docs_dir : Path or None, optional
        Docs directory to scan instead of the configured ``docs_dir``.

    Raises
    ------
    SystemExit
        With status 1 when any violation is found.
    """
    site_config, report = _validate_site(config, docs_dir)
    if not report.ok:
        _report_violations(report)
        raise SystemExit(1)
    names = site_config.sidebars.list_tree_names()
    references = sum(1 for _ in site_config.sidebars.iter_references())
    print(f"ok: {len(names)} sidebars, {references} document references")


@app.command(help="Write the validated sidebars as JSON for the site build.")
def export(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path, Parameter(help="Where to write the JSON", env_var="INPUT_OUTPUT")
    ] = DEFAULT_OUTPUT,
    docs_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the docs directory", env_var="INPUT_DOCS_DIR"),
    ] = None,
) -> None:
    """Validate the sidebars, then write them to ``output``.

    Nothing is written when validation fails.

    Raises
    ------
    SystemExit
        With status 1 when any violation is found.
    """
    site_config, report = _validate_site(config, docs_dir)
    if not report.ok:
        _report_violations(report)
        raise SystemExit(1)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(encode_registry(site_config.sidebars))
    print(f"wrote {_format_path(output)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `sidebars` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
