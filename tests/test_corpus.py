"""Unit tests for document corpus discovery.

Documents are discovered under a temporary docs tree built with ``tmp_path``;
ids follow the relative path with the suffix removed, and a front-matter
``id`` replaces the last segment. Ordering prefixes such as ``01-`` are
dropped and ``_``-prefixed partials are skipped.
"""

from __future__ import annotations

import typing as typ

import pytest

from docs_sidebars.corpus import (
    CorpusError,
    DocsDirectoryCorpus,
    StaticCorpus,
    as_corpus,
    doc_id_for,
    parse_front_matter,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


def _write(root: Path, relative: str, text: str = "# Title\n") -> None:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_scan_collects_markdown_and_mdx_ids(tmp_path: Path) -> None:
    """Markdown and MDX files contribute ids; other files are ignored."""
    _write(tmp_path, "intro.md")
    _write(tmp_path, "getting-started/installation.mdx")
    _write(tmp_path, "getting-started/quick-start.md", "---\nid: quickstart\n---\n")
    _write(tmp_path, "img/logo.svg", "<svg/>")

    corpus = DocsDirectoryCorpus.scan(tmp_path)

    assert list(corpus) == [
        "getting-started/installation",
        "getting-started/quickstart",
        "intro",
    ]
    assert corpus.contains_id("getting-started/quickstart")
    assert not corpus.contains_id("getting-started/quick-start")
    assert not corpus.contains_id("img/logo")


def test_scan_skips_underscore_partials(tmp_path: Path) -> None:
    """Partial files and files under partial directories are not documents."""
    _write(tmp_path, "intro.md")
    _write(tmp_path, "_snippet.mdx")
    _write(tmp_path, "_partials/shared.md")
    _write(tmp_path, "guides/_note.md")

    corpus = DocsDirectoryCorpus.scan(tmp_path)

    assert list(corpus) == ["intro"], f"unexpected ids {list(corpus)!r}"
    assert not corpus.contains_id("_snippet")
    assert not corpus.contains_id("_partials/shared")


def test_scan_strips_ordering_prefixes(tmp_path: Path) -> None:
    """Numbered files and folders are referenced without their numbers."""
    _write(tmp_path, "01-intro.md")
    _write(tmp_path, "02-guides/01-overview.mdx")

    corpus = DocsDirectoryCorpus.scan(tmp_path)

    assert list(corpus) == ["guides/overview", "intro"]


def test_scan_requires_existing_directory(tmp_path: Path) -> None:
    """A missing docs directory is reported rather than treated as empty."""
    with pytest.raises(FileNotFoundError, match="not found"):
        DocsDirectoryCorpus.scan(tmp_path / "missing")


def test_scan_reports_file_with_bad_front_matter(tmp_path: Path) -> None:
    """Front matter that is not a mapping names the offending file."""
    _write(tmp_path, "guides/overview.md", "---\n- just\n- a list\n---\n")

    with pytest.raises(CorpusError, match="guides/overview.md"):
        DocsDirectoryCorpus.scan(tmp_path)


@pytest.mark.parametrize(
    ("relative", "text", "expected"),
    [
        ("intro.md", "No front matter here.\n", "intro"),
        ("api/java-api.md", "---\ntitle: Java API\n---\nBody\n", "api/java-api"),
        ("api/java-api.md", "---\nid: java\n---\n", "api/java"),
        ("guides/how-to/streaming.mdx", "---\n---\n", "guides/how-to/streaming"),
        ("01-getting-started/02-install.md", "", "getting-started/install"),
        ("releases/2024-01-15-notes.md", "", "releases/2024-01-15-notes"),
        ("api/1.2-changes.md", "", "api/1.2-changes"),
        ("03-api/01-overview.md", "---\nid: 01-start\n---\n", "api/01-start"),
    ],
)
def test_doc_id_for(relative: str, text: str, expected: str) -> None:
    """Ids drop ordering prefixes; a front-matter ``id`` is used verbatim."""
    assert doc_id_for(relative, text) == expected


def test_doc_id_rejects_nested_front_matter_id() -> None:
    """A front-matter ``id`` may only rename the final segment."""
    with pytest.raises(CorpusError, match="plain name"):
        doc_id_for("intro.md", "---\nid: a/b\n---\n")


def test_front_matter_must_open_the_document() -> None:
    """A ``---`` block later in the file is not front matter."""
    assert parse_front_matter("# Title\n\n---\nid: nope\n---\n") == {}


def test_as_corpus_wraps_plain_collections() -> None:
    """Plain sets are wrapped; corpus objects pass through unchanged."""
    static = StaticCorpus(["a"])

    assert as_corpus(static) is static
    wrapped = as_corpus({"a", "b"})
    assert wrapped.contains_id("b")
    assert not wrapped.contains_id("c")
