"""Navigation built from a page forest for renderers.

All hrefs are relative to the page they will be rendered on, computed with
:func:`docforest.paths.ref_relative_path`.
"""

from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit

from docforest.page import Header, Page
from docforest.paths import leaf, parent_segments, ref_relative_path
from docforest.reader import text_content
from docforest.schemas import NavLink, PageNavigation, TocEntry
from docforest.tree import Forest, Location, Tree


def relative_link(from_path: str, to_path: str) -> str:
    """Shortest relative href from the page at ``from_path`` to ``to_path``.

    Any ``#fragment`` on ``to_path`` is kept.
    """
    target = urlsplit(to_path)
    href = ref_relative_path(parent_segments(from_path), parent_segments(target.path), leaf(target.path))
    return urlunsplit(("", "", href, target.query, target.fragment))


def table_of_contents(
    page: Page,
    *,
    max_depth: int | None = None,
    relative_to: str | None = None,
) -> list[TocEntry]:
    """Table of contents for the headers of a page.

    Args:
        page: Page whose headers are listed. The h1 is not included.
        max_depth: Number of header levels to keep, or None for all.
        relative_to: Path of the page the links appear on. Defaults to the
            page itself.
    """
    base = relative_to or page.path

    def entry(tree: Tree[Header], depth: int) -> TocEntry:
        children = tree.children if max_depth is None or depth < max_depth else ()
        return TocEntry(
            title=text_content(tree.label.label),
            href=relative_link(base, tree.label.path),
            children=[entry(child, depth + 1) for child in children],
        )

    if max_depth is not None and max_depth < 1:
        return []
    return [entry(tree, 1) for tree in page.headers]


def site_navigation(pages: Forest[Page], *, relative_to: str | None = None) -> list[TocEntry]:
    """Navigation tree over the whole page forest.

    Hrefs are root-relative page paths unless ``relative_to`` names the page
    the navigation is rendered on.
    """

    def entry(tree: Tree[Page]) -> TocEntry:
        page = tree.label
        href = relative_link(relative_to, page.path) if relative_to else page.path
        return TocEntry(title=page.title, href=href, children=[entry(child) for child in tree.children])

    return [entry(tree) for tree in pages]


def page_navigation(location: Location[Page]) -> PageNavigation:
    """Previous, next, parent, and breadcrumb links for the page at ``location``."""
    current = location.label.path

    def link(other: Location[Page] | None) -> NavLink | None:
        if other is None:
            return None
        return NavLink(title=other.label.title, href=relative_link(current, other.label.path))

    return PageNavigation(
        prev=link(location.prev),
        next=link(location.next),
        parent=link(location.parent),
        breadcrumbs=[link(ancestor) for ancestor in location.ancestors],
    )


def find_location(pages: Forest[Page], path: str) -> Location[Page] | None:
    """Cursor at the page with target ``path``, or None if no page has it."""
    location = Location.forest(pages)
    if location is None:
        return None
    return location.arena.find(lambda page: page.path == path)
