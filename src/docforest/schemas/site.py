"""Site outline output model."""

from __future__ import annotations

from pydantic import BaseModel


class SiteSummary(BaseModel):
    """Summary, outline, and traversal order of a page forest."""

    summary: str
    pages_tree: str
    paths: list[str]
