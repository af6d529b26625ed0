"""Finalized pages and headers, and the page forest built from the index."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Protocol, runtime_checkable

from docforest import paths
from docforest.config import DOCFOREST_INDEX_NAME, DOCFOREST_SOURCE_SUFFIX, DOCFOREST_TARGET_SUFFIX
from docforest.index import IndexPage, Nesting, ParsedPage, index_page, index_pages
from docforest.properties import convert_to_target
from docforest.reader import text_content
from docforest.tree import Forest, Location, Tree

try:
    from bs4 import BeautifulSoup
    from bs4.element import NavigableString, PageElement
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for page labels (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)


@runtime_checkable
class Linkable(Protocol):
    """Anything a hyperlink can point to."""

    @property
    def path(self) -> str: ...

    @property
    def label(self) -> PageElement: ...


@dataclass(frozen=True)
class Header:
    """Header in a page, with anchor path and label node."""

    path: str
    label: PageElement


@dataclass(frozen=True)
class Page:
    """Markdown page with target path, parsed markdown, and headers."""

    file: Path
    path: str
    label: PageElement
    h1: Header
    headers: tuple[Tree[Header], ...]
    markdown: BeautifulSoup
    properties: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def base(self) -> str:
        """Relative path to the root of the site."""
        return paths.base_path(self.path)

    @property
    def title(self) -> str:
        """Page title from the text of the label."""
        return text_content(self.label)


def convert_page(
    convert_path: Callable[[str], str],
    page: IndexPage,
    *,
    target_suffix: str = DOCFOREST_TARGET_SUFFIX,
) -> Page:
    """Convert an index page into the final Page and Headers.

    The first root header is used for the page header and title. Its children
    and the following root headers become the page's header forest.
    """
    target_path = convert_to_target(page.properties, convert_path, page.path, target_suffix=target_suffix)

    if page.headers:
        first, *rest = page.headers
        h1 = Header(target_path + first.label.path, first.label.label)
        subheaders = [*first.children, *rest]
    else:
        logger.debug("No headings in %s, using %s as title", page.path, target_path)
        h1 = Header(target_path, NavigableString(target_path))
        subheaders = []

    headers = tuple(tree.map(lambda h: Header(target_path + h.path, h.label)) for tree in subheaders)

    return Page(
        file=page.file,
        path=target_path,
        label=h1.label,
        h1=h1,
        headers=headers,
        markdown=page.markdown,
        properties=MappingProxyType(dict(page.properties)),
    )


def page_from_markdown(
    path: str,
    markdown: BeautifulSoup,
    properties: Mapping[str, str],
    convert_path: Callable[[str], str] = lambda p: p,
    *,
    target_suffix: str = DOCFOREST_TARGET_SUFFIX,
) -> Page:
    """Create a single page from parsed markdown."""
    return convert_page(
        convert_path,
        index_page(Path(path), path, markdown, properties),
        target_suffix=target_suffix,
    )


def page_forest(
    parsed: Iterable[ParsedPage],
    convert_path: Callable[[str], str],
    *,
    parents: Mapping[str, str | None] | None = None,
    nesting: Nesting = "flat",
    index_name: str = DOCFOREST_INDEX_NAME + DOCFOREST_SOURCE_SUFFIX,
    target_suffix: str = DOCFOREST_TARGET_SUFFIX,
) -> Forest[Page]:
    """Convert parsed markdown pages into a linked forest of Page objects."""
    return [
        tree.map(lambda node: convert_page(convert_path, node, target_suffix=target_suffix))
        for tree in index_pages(parsed, parents=parents, nesting=nesting, index_name=index_name)
    ]


def all_paths(pages: Forest[Page]) -> list[str]:
    """Collect all page paths in pre-order across the forest."""
    collected: list[str] = []
    location = Location.forest(pages)
    while location is not None:
        collected.append(location.label.path)
        location = location.next
    return collected


def page_mappings(pages: Forest[Page]) -> dict[str, str]:
    """Map every source path in the forest to its target path."""
    mappings: dict[str, str] = {}
    for tree in pages:
        for page in tree.labels():
            mappings[page.file.as_posix()] = page.path
    return mappings
