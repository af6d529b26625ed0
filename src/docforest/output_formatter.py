"""Format a page forest into summary and outline outputs."""

from __future__ import annotations

from typing import Iterable

from docforest.page import Page, all_paths
from docforest.schemas import SiteSummary
from docforest.tree import Forest, Tree


def format_site(pages: Forest[Page]) -> SiteSummary:
    """Create summary, page tree, and traversal order."""
    tree = "Pages:\n" + _create_pages_tree(pages)

    summary_lines = [
        f"Pages: {count_pages(pages)}",
        f"Roots: {len(pages)}",
        f"Headers: {count_headers(pages)}",
    ]

    return SiteSummary(summary="\n".join(summary_lines), pages_tree=tree, paths=all_paths(pages))


def count_pages(pages: Iterable[Tree[Page]]) -> int:
    """Count total pages in the forest."""
    total = 0
    for tree in pages:
        total += 1
        total += count_pages(tree.children)
    return total


def count_headers(pages: Iterable[Tree[Page]]) -> int:
    """Count headers below the h1 of every page in the forest."""
    total = 0
    for tree in pages:
        for page in tree.labels():
            total += sum(len(list(header.labels())) for header in page.headers)
    return total


def _create_pages_tree(pages: Iterable[Tree[Page]], indent: int = 0) -> str:
    lines: list[str] = []
    for tree in pages:
        page = tree.label
        lines.append(" " * (indent * 4) + f"{page.title} ({page.path})")
        if tree.children:
            lines.append(_create_pages_tree(tree.children, indent + 1))
    return "\n".join(lines)
