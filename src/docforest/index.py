"""Index parsed markdown pages into a forest with header outlines.

The index is suffix-agnostic: pages keep their source paths and headers
carry page-relative ``#anchor`` paths until the page is finalized.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Literal, Mapping

from docforest.config import DOCFOREST_INDEX_NAME, DOCFOREST_SOURCE_SUFFIX
from docforest.exceptions import NestingError
from docforest.reader import text_content
from docforest.tree import Forest, Tree

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
    from markdown.extensions.toc import slugify
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 and Python-Markdown are required for indexing (pip install beautifulsoup4 markdown)."
    ) from exc

logger = logging.getLogger(__name__)

_HEADING_RE = re.compile(r"^h[1-6]$")

ParsedPage = tuple[Path, str, BeautifulSoup, Mapping[str, str]]
Nesting = Literal["flat", "directory"]


@dataclass(frozen=True)
class IndexHeader:
    """Heading in a page, before the page path is resolved."""

    path: str
    label: Tag
    level: int


@dataclass(frozen=True)
class IndexPage:
    """Parsed page with its heading outline."""

    file: Path
    path: str
    markdown: BeautifulSoup
    properties: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    headers: tuple[Tree[IndexHeader], ...] = ()


def index_page(file: Path, path: str, markdown: BeautifulSoup, properties: Mapping[str, str]) -> IndexPage:
    """Index a single parsed page."""
    return IndexPage(
        file=file,
        path=path,
        markdown=markdown,
        properties=MappingProxyType(dict(properties)),
        headers=index_headers(markdown),
    )


def index_headers(markdown: BeautifulSoup) -> tuple[Tree[IndexHeader], ...]:
    """Nest the headings of a document by level, in document order."""
    roots: list[_Outline] = []
    stack: list[_Outline] = []

    for heading in markdown.find_all(_HEADING_RE):
        node = _Outline(IndexHeader(path=f"#{_anchor(heading)}", label=heading, level=int(heading.name[1])))

        while stack and stack[-1].header.level >= node.header.level:
            stack.pop()

        if stack:
            stack[-1].children.append(node)
        else:
            roots.append(node)

        stack.append(node)

    return tuple(root.freeze() for root in roots)


def index_pages(
    parsed: Iterable[ParsedPage],
    *,
    parents: Mapping[str, str | None] | None = None,
    nesting: Nesting = "flat",
    index_name: str = DOCFOREST_INDEX_NAME + DOCFOREST_SOURCE_SUFFIX,
) -> Forest[IndexPage]:
    """Index parsed pages and nest them into a forest.

    With the default ``"flat"`` nesting every page is a root, so traversal
    order is exactly the authoring order. Nested forests are walked in
    pre-order, which matches authoring order when parents are supplied
    before their children.

    Args:
        parsed: ``(file, path, markdown, properties)`` tuples in authoring order.
            A repeated path keeps its first position and its last content.
        parents: Explicit nesting from page path to parent page path. Pages
            missing from the mapping are roots. Takes precedence over
            ``nesting``.
        nesting: ``"flat"`` for roots only, or ``"directory"`` to nest each
            page under the nearest ``index_name`` page of its directory or
            of an enclosing directory.
        index_name: File name of directory index pages.

    Returns:
        Forest of index pages. Roots and siblings keep authoring order.

    Raises:
        NestingError: If explicit nesting contains a cycle.
    """
    by_path: dict[str, IndexPage] = {}
    for entry in parsed:
        page = index_page(*entry)
        if page.path in by_path:
            logger.warning("Duplicate source path %s, keeping the last page", page.path)
        by_path[page.path] = page
    pages = list(by_path.values())

    children: dict[str | None, list[str]] = {}
    for page in pages:
        if parents is None:
            parent = _directory_parent(page.path, by_path, index_name) if nesting == "directory" else None
        else:
            parent = parents.get(page.path)
            if parent is not None and parent not in by_path:
                logger.warning("Parent %s of %s is not a known page, treating it as a root", parent, page.path)
                parent = None
        children.setdefault(parent, []).append(page.path)

    visited: set[str] = set()

    def build(path: str) -> Tree[IndexPage]:
        visited.add(path)
        return Tree(by_path[path], tuple(build(child) for child in children.get(path, [])))

    forest = [build(path) for path in children.get(None, [])]

    unreachable = [page.path for page in pages if page.path not in visited]
    if unreachable:
        raise NestingError(f"Page nesting contains a cycle through: {', '.join(unreachable)}")

    return forest


def _directory_parent(path: str, by_path: Mapping[str, IndexPage], index_name: str) -> str | None:
    directory, _, name = path.rpartition("/")
    if name == index_name:
        if not directory:
            return None
        directory = directory.rpartition("/")[0]

    while True:
        candidate = f"{directory}/{index_name}" if directory else index_name
        if candidate in by_path and candidate != path:
            return candidate
        if not directory:
            return None
        directory = directory.rpartition("/")[0]


def _anchor(heading: Tag) -> str:
    return heading.get("id") or slugify(text_content(heading), "-")


@dataclass
class _Outline:
    header: IndexHeader
    children: list[_Outline] = field(default_factory=list)

    def freeze(self) -> Tree[IndexHeader]:
        return Tree(self.header, tuple(child.freeze() for child in self.children))
