"""docforest: build linked page forests from markdown sources."""

from docforest.exceptions import DocforestError, NestingError, OptionsError, ParseError
from docforest.navigation import find_location, page_navigation, relative_link, site_navigation, table_of_contents
from docforest.output_formatter import format_site
from docforest.page import Header, Linkable, Page, all_paths, convert_page, page_forest, page_from_markdown, page_mappings
from docforest.reader import Reader
from docforest.schemas import NavLink, PageNavigation, SiteOptions, SiteSummary, TocEntry
from docforest.site import build_site
from docforest.tree import Forest, Location, Tree

__all__ = [
    "DocforestError",
    "Forest",
    "Header",
    "Linkable",
    "Location",
    "NavLink",
    "NestingError",
    "OptionsError",
    "Page",
    "PageNavigation",
    "ParseError",
    "Reader",
    "SiteOptions",
    "SiteSummary",
    "TocEntry",
    "Tree",
    "all_paths",
    "build_site",
    "convert_page",
    "find_location",
    "format_site",
    "page_forest",
    "page_from_markdown",
    "page_mappings",
    "page_navigation",
    "relative_link",
    "site_navigation",
    "table_of_contents",
]
