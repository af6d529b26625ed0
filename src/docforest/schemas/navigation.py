"""Navigation models handed to renderers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class NavLink(BaseModel):
    """A titled link, with ``href`` relative to the page it appears on."""

    model_config = ConfigDict(frozen=True)

    title: str
    href: str


class TocEntry(BaseModel):
    """A hierarchical table of contents entry."""

    model_config = ConfigDict(frozen=True)

    title: str
    href: str
    children: list["TocEntry"] = Field(default_factory=list)


class PageNavigation(BaseModel):
    """Links around a page in site traversal order."""

    model_config = ConfigDict(frozen=True)

    prev: NavLink | None = None
    next: NavLink | None = None
    parent: NavLink | None = None
    breadcrumbs: list[NavLink] = Field(default_factory=list)
