"""Build a page forest from raw markdown sources."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Mapping

from docforest.page import Page, page_forest
from docforest.reader import Reader
from docforest.schemas import SiteOptions
from docforest.tree import Forest

logger = logging.getLogger(__name__)


def build_site(
    sources: Iterable[tuple[str, str]],
    *,
    options: SiteOptions | None = None,
    parents: Mapping[str, str | None] | None = None,
    reader: Reader | None = None,
) -> Forest[Page]:
    """Read markdown sources and build the site's page forest.

    Args:
        sources: ``(path, text)`` pairs in authoring order. Paths are
            root-relative and ``/`` separated.
        options: Suffix and index conventions. Uses defaults if None.
        parents: Explicit nesting from source path to parent source path.
            Takes precedence over ``options.nesting``.
        reader: Markdown reader. Defaults to one using the option's extensions.

    Returns:
        The page forest, in authoring order.

    Raises:
        ParseError: If a source has unreadable front matter.
        NestingError: If explicit nesting contains a cycle.
    """
    opts = options or SiteOptions()
    markdown_reader = reader or Reader(opts.markdown_extensions)

    parsed = []
    for path, text in sources:
        markdown, properties = markdown_reader.read_document(text)
        parsed.append((Path(path), path, markdown, properties))

    pages = page_forest(
        parsed,
        opts.convert_path,
        parents=parents,
        nesting=opts.nesting,
        index_name=opts.index_file,
        target_suffix=opts.target_suffix,
    )
    logger.info("Built %d page trees from %d sources", len(pages), len(parsed))
    return pages
