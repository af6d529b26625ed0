"""Tests for page finalization and the page forest."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from docforest.index import IndexPage, index_page
from docforest.page import Header, Linkable, all_paths, convert_page, page_from_markdown, page_mappings
from docforest.paths import suffix_converter
from docforest.reader import Reader
from docforest.schemas import SiteOptions

convert_path = suffix_converter(".md", ".html")


def _convert(reader: Reader, path: str, text: str, properties: dict[str, str] | None = None):
    node = index_page(Path(path), path, reader.read(text), properties or {})
    return convert_page(convert_path, node)


def _paths(trees) -> list:
    return [(tree.label.path, _paths(tree.children)) for tree in trees]


class TestConvertPage:
    """Tests for convert_page."""

    def test_first_heading_becomes_title(self, reader: Reader) -> None:
        page = _convert(reader, "a/page.md", "# Title\n\n## One\n\n### Sub\n\n## Two\n")

        assert page.path == "a/page.html"
        assert page.title == "Title"
        assert page.h1.path == "a/page.html#title"
        assert page.label is page.h1.label
        assert _paths(page.headers) == [
            ("a/page.html#one", [("a/page.html#sub", [])]),
            ("a/page.html#two", []),
        ]

    def test_following_roots_join_promoted_children(self, reader: Reader) -> None:
        page = _convert(reader, "p.md", "# Title\n\n## One\n\n# Second\n\n## Three\n")

        assert _paths(page.headers) == [
            ("p.html#one", []),
            ("p.html#second", [("p.html#three", [])]),
        ]

    def test_headers_never_include_h1(self, reader: Reader) -> None:
        page = _convert(reader, "p.md", "# Title\n\n## Other\n")

        assert page.h1.path not in [tree.label.path for tree in page.headers]

    def test_synthesizes_h1_without_headings(self, reader: Reader) -> None:
        page = _convert(reader, "docs/notes.md", "Just some text.\n")

        assert page.h1.path == page.path == "docs/notes.html"
        assert "#" not in page.h1.path
        assert page.title == "docs/notes.html"
        assert page.headers == ()

    def test_uses_out_property(self, reader: Reader) -> None:
        page = _convert(reader, "index.md", "# Home\n\n## Intro\n", {"out": "home/start.html"})

        assert page.path == "home/start.html"
        assert page.h1.path == "home/start.html#home"
        assert page.headers[0].label.path == "home/start.html#intro"

    def test_keeps_markdown_and_file(self, reader: Reader) -> None:
        soup = reader.read("# Title\n")

        page = convert_page(convert_path, index_page(Path("src/a.md"), "a.md", soup, {"k": "v"}))

        assert page.markdown is soup
        assert page.file == Path("src/a.md")
        assert dict(page.properties) == {"k": "v"}

    def test_base(self, reader: Reader) -> None:
        assert _convert(reader, "a/b/c.md", "# C\n").base == "../../"
        assert _convert(reader, "c.md", "# C\n").base == ""


class TestPageImmutability:
    """Pages and headers are frozen after construction."""

    def test_page_is_frozen(self, reader: Reader) -> None:
        page = _convert(reader, "a.md", "# A\n")

        with pytest.raises(dataclasses.FrozenInstanceError):
            page.path = "b.html"  # type: ignore[misc]

    def test_properties_are_read_only(self, reader: Reader) -> None:
        page = _convert(reader, "a.md", "# A\n", {"k": "v"})

        with pytest.raises(TypeError):
            page.properties["k"] = "w"  # type: ignore[index]

    def test_properties_from_plain_dict_are_read_only(self, reader: Reader) -> None:
        node = IndexPage(file=Path("a.md"), path="a.md", markdown=reader.read("# A\n"), properties={"k": "v"})

        page = convert_page(convert_path, node)

        assert page.properties == {"k": "v"}
        with pytest.raises(TypeError):
            page.properties["k"] = "w"  # type: ignore[index]

    def test_pages_and_headers_are_linkable(self, reader: Reader) -> None:
        page = _convert(reader, "a.md", "# A\n")

        assert isinstance(page, Linkable)
        assert isinstance(page.h1, Linkable)
        assert isinstance(Header("x.html#y", page.label), Linkable)


def test_page_from_markdown_keeps_path_by_default(reader: Reader) -> None:
    page = page_from_markdown("index.md", reader.read("# Home\n"), {})

    assert page.path == "index.md"
    assert page.file == Path("index.md")


class TestForest:
    """Tests for page_forest, all_paths, and page_mappings."""

    def test_all_paths_in_authoring_order(self, pages) -> None:
        forest = pages(("b.md", "# B\n"), ("a.md", "# A\n"), ("c/d.md", "# D\n"))

        assert all_paths(forest) == ["b.html", "a.html", "c/d.html"]

    def test_all_paths_with_index_page_supplied_last(self, pages) -> None:
        forest = pages(("a.md", "# A\n"), ("b/c.md", "# C\n"), ("index.md", "# Home\n"))

        assert all_paths(forest) == ["a.html", "b/c.html", "index.html"]

    def test_repeated_source_path_is_one_page(self, pages) -> None:
        forest = pages(("index.md", "# Old\n"), ("a.md", "# A\n"), ("index.md", "# New\n"))

        assert all_paths(forest) == ["index.html", "a.html"]
        assert forest[0].label.title == "New"

    def test_all_paths_across_nested_trees(self, pages) -> None:
        forest = pages(
            ("index.md", "# Home\n"),
            ("a/index.md", "# A\n"),
            ("a/one.md", "# One\n"),
            ("b.md", "# B\n"),
            ("other/x.md", "# X\n"),
            options=SiteOptions(nesting="directory"),
        )

        paths = all_paths(forest)

        assert paths == ["index.html", "a/index.html", "a/one.html", "b.html", "other/x.html"]
        assert len(paths) == len(set(paths))

    def test_all_paths_is_restartable(self, pages) -> None:
        forest = pages(("index.md", "# Home\n"), ("a.md", "# A\n"))

        assert all_paths(forest) == all_paths(forest)

    def test_all_paths_of_empty_forest(self) -> None:
        assert all_paths([]) == []

    def test_forest_keeps_index_shape(self, pages) -> None:
        forest = pages(
            ("index.md", "# Home\n"),
            ("a/index.md", "# A\n"),
            ("a/one.md", "# One\n"),
            options=SiteOptions(nesting="directory"),
        )

        assert _paths(forest) == [("index.html", [("a/index.html", [("a/one.html", [])])])]

    def test_page_mappings(self, pages) -> None:
        forest = pages(("index.md", "---\nout: start.html\n---\n# Home\n"), ("a/b.md", "# B\n"))

        assert page_mappings(forest) == {"index.md": "start.html", "a/b.md": "a/b.html"}
