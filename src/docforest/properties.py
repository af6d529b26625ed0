"""Resolve a page's output path from its front matter properties."""

from __future__ import annotations

import logging
from typing import Callable, Mapping

from docforest.config import DOCFOREST_TARGET_SUFFIX, OUT_PROPERTY

logger = logging.getLogger(__name__)


def convert_to_target(
    properties: Mapping[str, str],
    convert_path: Callable[[str], str],
    source_path: str,
    *,
    target_suffix: str = DOCFOREST_TARGET_SUFFIX,
) -> str:
    """Return the target path for a source page.

    An ``out`` property is used verbatim when it ends with ``target_suffix``.
    Otherwise the source path goes through ``convert_path``, and an
    inconsistent ``out`` value is dropped.

    Args:
        properties: Front matter properties of the page.
        convert_path: Default source to target path conversion.
        source_path: Root-relative source path of the page.
        target_suffix: Suffix every explicit output path must carry.

    Returns:
        The root-relative target path.
    """
    out = properties.get(OUT_PROPERTY)
    if out is not None:
        if out.endswith(target_suffix):
            return out
        logger.debug(
            "Dropping %r property %r of %s: expected suffix %r",
            OUT_PROPERTY,
            out,
            source_path,
            target_suffix,
        )
    return convert_path(source_path)
