"""Read markdown sources into parsed trees and front matter properties."""

from __future__ import annotations

import re
from typing import Iterable

from docforest.config import DOCFOREST_MARKDOWN_EXTENSIONS
from docforest.exceptions import ParseError

try:
    import markdown
    import yaml
    from bs4 import BeautifulSoup
    from bs4.element import NavigableString, PageElement, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "Python-Markdown, PyYAML, and BeautifulSoup4 are required for reading pages "
        "(pip install markdown pyyaml beautifulsoup4 lxml)."
    ) from exc


_FRONT_MATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE)


def split_front_matter(text: str) -> tuple[dict[str, str], str]:
    """Split a leading ``---`` YAML block from the markdown body.

    Values are converted to strings: nulls read as empty strings, booleans
    as ``true`` or ``false``, and lists or mappings as flow-style YAML.

    Raises:
        ParseError: If the block is not valid YAML or not a mapping.
    """
    match = _FRONT_MATTER_RE.match(text)
    if not match:
        return {}, text

    try:
        loaded = yaml.safe_load(match.group(1))
    except yaml.YAMLError as exc:
        raise ParseError(f"Invalid front matter: {exc}") from exc

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ParseError(f"Front matter must be a mapping, got {type(loaded).__name__}")

    properties = {str(key): _property_value(value) for key, value in loaded.items()}
    return properties, text[match.end() :]


class Reader:
    """Markdown reader producing BeautifulSoup trees.

    Headings keep the ids assigned by the ``toc`` extension, which the
    document index uses as anchors.
    """

    def __init__(self, extensions: Iterable[str] | None = None) -> None:
        self.extensions = list(DOCFOREST_MARKDOWN_EXTENSIONS if extensions is None else extensions)

    def read(self, text: str) -> BeautifulSoup:
        """Parse markdown text into a BeautifulSoup root."""
        html = markdown.markdown(text, extensions=self.extensions)
        return BeautifulSoup(html, "lxml")

    def read_document(self, text: str) -> tuple[BeautifulSoup, dict[str, str]]:
        """Parse a source with front matter into its tree and properties."""
        properties, body = split_front_matter(text)
        return self.read(body), properties


def text_content(node: PageElement) -> str:
    """Concatenated text of a label node."""
    if isinstance(node, NavigableString):
        return str(node)
    if isinstance(node, Tag):
        return node.get_text()
    return ""


def _property_value(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, dict)):
        return yaml.safe_dump(value, default_flow_style=True).strip()
    return str(value)
