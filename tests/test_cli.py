"""Unit tests for the ``sidebars`` command line.

The commands are called directly with a temporary site config and docs tree so
no subprocess is needed; output is captured with ``capsys``.
"""

from __future__ import annotations

from pathlib import Path

import msgspec.json as msgspec_json
import pytest

from docs_sidebars import cli


def _write_site(tmp_path: Path, *, with_quickstart: bool = True) -> Path:
    docs = tmp_path / "docs"
    (docs / "getting-started").mkdir(parents=True)
    (docs / "intro.md").write_text("# Intro\n", encoding="utf-8")
    (docs / "getting-started" / "install.md").write_text("# Install\n")
    if with_quickstart:
        (docs / "getting-started" / "quickstart.md").write_text("# Quickstart\n")
    config_path = tmp_path / "site.yaml"
    config_path.write_text(
        """
title: Example Docs
sidebars:
  docsSidebar:
    - intro
    - category: Getting Started
      items:
        - getting-started/install
        - getting-started/quickstart
    - category: Empty
      items: []
        """.strip()
        + "\n",
        encoding="utf-8",
    )
    return config_path


def _write_valid_site(tmp_path: Path) -> Path:
    config_path = _write_site(tmp_path)
    text = config_path.read_text(encoding="utf-8")
    config_path.write_text(
        text.replace("    - category: Empty\n      items: []\n", ""),
        encoding="utf-8",
    )
    return config_path


def test_check_reports_success(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A consistent site prints a summary and exits normally."""
    config_path = _write_valid_site(tmp_path)

    cli.check(config=config_path)

    out = capsys.readouterr().out
    assert out.strip() == "ok: 1 sidebars, 3 document references"


def test_check_lists_every_violation_and_exits_nonzero(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """All violations are printed before exiting with status 1."""
    config_path = _write_site(tmp_path, with_quickstart=False)

    with pytest.raises(SystemExit) as excinfo:
        cli.check(config=config_path)

    assert excinfo.value.code == 1
    err = capsys.readouterr().err.splitlines()
    assert err == [
        "UnknownReference: docsSidebar/1/1: unknown document "
        "'getting-started/quickstart'",
        "EmptyUnlinkedCategory: docsSidebar/2: category 'Empty' has no items "
        "and no link",
        "2 sidebar violations found",
    ]


def test_check_accepts_docs_dir_override(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``--docs-dir`` replaces the configured docs directory."""
    config_path = _write_valid_site(tmp_path)
    moved = tmp_path / "elsewhere"
    (tmp_path / "docs").rename(moved)

    cli.check(config=config_path, docs_dir=moved)

    assert capsys.readouterr().out.startswith("ok: 1 sidebars")


def test_export_writes_json(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A valid site is exported in declaration order."""
    config_path = _write_valid_site(tmp_path)
    output = tmp_path / "build" / "sidebars.json"

    cli.export(config=config_path, output=output)

    assert capsys.readouterr().out.startswith("wrote ")
    payload = msgspec_json.decode(output.read_bytes())
    assert payload == {
        "docsSidebar": [
            "intro",
            {
                "type": "category",
                "label": "Getting Started",
                "collapsed": True,
                "items": ["getting-started/install", "getting-started/quickstart"],
            },
        ]
    }


def test_export_refuses_invalid_site(tmp_path: Path) -> None:
    """Nothing is written when validation fails."""
    config_path = _write_site(tmp_path)
    output = tmp_path / "build" / "sidebars.json"

    with pytest.raises(SystemExit):
        cli.export(config=config_path, output=output)

    assert not output.exists()
