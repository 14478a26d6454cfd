r"""Known document ids that sidebar references are checked against.

Two sources are supported. :class:`StaticCorpus` wraps a literal set of ids,
which suits tests and callers that already know their pages.
:class:`DocsDirectoryCorpus` scans a docs directory the way the site builder
does: each Markdown or MDX file contributes the id formed by its path relative
to the docs root with the suffix and any ``01-`` style ordering prefixes
dropped, and a front-matter ``id`` replaces the final path segment. Files
below a ``_``-prefixed name are partials and contribute nothing.

Examples
--------
>>> from docs_sidebars.corpus import StaticCorpus, doc_id_for
>>> StaticCorpus(["install"]).contains_id("install")
True
>>> doc_id_for("getting-started/quick-start.md", "---\nid: quickstart\n---\n")
'getting-started/quickstart'
"""

from __future__ import annotations

import collections.abc as cabc
import re
import typing as typ
from pathlib import Path, PurePosixPath

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ._constants import DOC_SUFFIXES
from .models import DocumentReference, SidebarError

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*$", re.DOTALL | re.MULTILINE
)
NUMBER_PREFIX_PATTERN = re.compile(
    r"^(?P<prefix>\d+)\s*[-_.]+\s*(?P<suffix>[^-_.\s].*)$"
)
# Dates (2024-01-15) and versions (1.2) are names, not ordering prefixes.
DATED_OR_VERSIONED_PATTERN = re.compile(r"^\d+[-_.]\d+")


class CorpusError(SidebarError):
    """Raised when a document's front matter cannot be interpreted."""


@typ.runtime_checkable
class DocumentCorpus(typ.Protocol):
    """Anything able to answer whether a document id exists."""

    def contains_id(self, doc_id: DocumentReference) -> bool:
        """Return ``True`` when ``doc_id`` names a known document."""
        ...


class StaticCorpus:
    """Corpus backed by a literal collection of document ids."""

    def __init__(self, ids: cabc.Iterable[DocumentReference]) -> None:
        self._ids = frozenset(ids)

    def contains_id(self, doc_id: DocumentReference) -> bool:
        return doc_id in self._ids

    def __iter__(self) -> cabc.Iterator[DocumentReference]:
        return iter(sorted(self._ids))

    def __len__(self) -> int:
        return len(self._ids)

    def __repr__(self) -> str:
        return f"StaticCorpus({sorted(self._ids)!r})"


class DocsDirectoryCorpus(StaticCorpus):
    """Corpus of the Markdown/MDX documents found under a docs directory."""

    def __init__(
        self, root: Path, ids: cabc.Iterable[DocumentReference]
    ) -> None:
        super().__init__(ids)
        self.root = root

    @classmethod
    def scan(cls, root: Path) -> DocsDirectoryCorpus:
        """Collect document ids for every ``*.md``/``*.mdx`` file below ``root``.

        Raises
        ------
        FileNotFoundError
            If ``root`` is not an existing directory.
        CorpusError
            If a document's front matter is not a YAML mapping or carries an
            invalid ``id``.
        """
        if not root.is_dir():
            msg = f"Docs directory '{root}' not found."
            raise FileNotFoundError(msg)
        ids: list[DocumentReference] = []
        for path in sorted(root.rglob("*")):
            if not path.is_file() or path.suffix not in DOC_SUFFIXES:
                continue
            relative = path.relative_to(root).as_posix()
            if is_partial(relative):
                continue
            text = path.read_text(encoding="utf-8")
            try:
                ids.append(doc_id_for(relative, text))
            except CorpusError as exc:
                msg = f"{relative}: {exc}"
                raise CorpusError(msg) from exc
        return cls(root, ids)

    def __repr__(self) -> str:
        return f"DocsDirectoryCorpus({str(self.root)!r}, {len(self)} documents)"


def is_partial(relative_path: str) -> bool:
    """Return ``True`` for ``_``-prefixed files or directories.

    Those are partials meant for inclusion in other documents and never
    become pages of their own.
    """
    return any(part.startswith("_") for part in PurePosixPath(relative_path).parts)


def strip_number_prefix(segment: str) -> str:
    """Drop an ordering prefix such as ``01-`` from a path segment.

    Date-like (``2024-01-15-notes``) and version-like (``1.2-notes``) names
    keep their prefix.

    >>> strip_number_prefix("02-getting-started")
    'getting-started'
    >>> strip_number_prefix("2024-01-15-release")
    '2024-01-15-release'
    """
    if DATED_OR_VERSIONED_PATTERN.match(segment):
        return segment
    match = NUMBER_PREFIX_PATTERN.match(segment)
    return match.group("suffix") if match else segment


def doc_id_for(relative_path: str, text: str) -> DocumentReference:
    """Return the document id for a file at ``relative_path`` with ``text``.

    Number prefixes are stripped from every segment; a front-matter ``id``
    replaces the final segment verbatim.
    """
    path = PurePosixPath(relative_path)
    front_matter = parse_front_matter(text)
    override = front_matter.get("id")
    if override is None:
        name = strip_number_prefix(path.stem)
    elif isinstance(override, str) and override.strip() and "/" not in override:
        name = override.strip()
    else:
        msg = f"front-matter 'id' must be a plain name, got {override!r}"
        raise CorpusError(msg)
    parents = [strip_number_prefix(part) for part in path.parent.parts]
    return "/".join([*parents, name])


def parse_front_matter(text: str) -> dict[str, typ.Any]:
    """Return the YAML front matter at the top of ``text`` as a mapping."""
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        return {}
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(match.group(1))
    except YAMLError as exc:
        msg = f"invalid front matter: {exc}"
        raise CorpusError(msg) from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        msg = "front matter must be a mapping"
        raise CorpusError(msg)
    return dict(loaded)


def as_corpus(
    corpus: DocumentCorpus | cabc.Iterable[DocumentReference],
) -> DocumentCorpus:
    """Wrap a bare iterable of ids so it exposes ``contains_id``."""
    if isinstance(corpus, DocumentCorpus):
        return corpus
    return StaticCorpus(corpus)


__all__ = [
    "CorpusError",
    "DocsDirectoryCorpus",
    "DocumentCorpus",
    "StaticCorpus",
    "as_corpus",
    "doc_id_for",
    "is_partial",
    "parse_front_matter",
    "strip_number_prefix",
]
