"""Test setup for docforest."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from docforest.page import Page  # noqa: E402
from docforest.reader import Reader  # noqa: E402
from docforest.site import build_site  # noqa: E402
from docforest.tree import Forest  # noqa: E402


@pytest.fixture
def reader() -> Reader:
    """Markdown reader with the default extensions."""
    return Reader()


@pytest.fixture
def pages() -> Callable[..., Forest[Page]]:
    """Build a page forest from ``(path, text)`` pairs."""

    def build(*mappings: tuple[str, str], **kwargs) -> Forest[Page]:
        return build_site(mappings, **kwargs)

    return build
