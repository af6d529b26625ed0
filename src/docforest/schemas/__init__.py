"""Shared schemas for docforest."""

from docforest.schemas.navigation import NavLink, PageNavigation, TocEntry
from docforest.schemas.options import SiteOptions
from docforest.schemas.site import SiteSummary

__all__ = ["NavLink", "PageNavigation", "SiteOptions", "SiteSummary", "TocEntry"]
