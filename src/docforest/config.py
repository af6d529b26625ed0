"""Local configuration for docforest."""

from __future__ import annotations

import os


DEFAULT_SOURCE_SUFFIX = ".md"
DEFAULT_TARGET_SUFFIX = ".html"
DEFAULT_INDEX_NAME = "index"
DEFAULT_MARKDOWN_EXTENSIONS = "extra,toc"

# Reserved front matter key for overriding a page's output path.
OUT_PROPERTY = "out"

DOCFOREST_SOURCE_SUFFIX = os.getenv("DOCFOREST_SOURCE_SUFFIX", DEFAULT_SOURCE_SUFFIX)
DOCFOREST_TARGET_SUFFIX = os.getenv("DOCFOREST_TARGET_SUFFIX", DEFAULT_TARGET_SUFFIX)
DOCFOREST_INDEX_NAME = os.getenv("DOCFOREST_INDEX_NAME", DEFAULT_INDEX_NAME)
DOCFOREST_MARKDOWN_EXTENSIONS = [
    name.strip()
    for name in os.getenv("DOCFOREST_MARKDOWN_EXTENSIONS", DEFAULT_MARKDOWN_EXTENSIONS).split(",")
    if name.strip()
]
