"""Tests for the markdown reader and front matter parsing."""

from __future__ import annotations

import importlib
import sys

import pytest
from bs4.element import NavigableString

from docforest.exceptions import ParseError
from docforest import reader as reader_module
from docforest.reader import Reader, split_front_matter, text_content


class TestSplitFrontMatter:
    """Tests for split_front_matter."""

    def test_reads_properties_as_strings(self) -> None:
        text = "---\nout: page.html\nweight: 3\ndraft:\n---\n# Title\n"

        properties, body = split_front_matter(text)

        assert properties == {"out": "page.html", "weight": "3", "draft": ""}
        assert body == "# Title\n"

    def test_non_string_values_read_as_yaml(self) -> None:
        text = "---\nflag: true\nhidden: false\ntags: [a, b]\nmeta: {k: v}\n---\nbody"

        properties, _ = split_front_matter(text)

        assert properties == {"flag": "true", "hidden": "false", "tags": "[a, b]", "meta": "{k: v}"}

    def test_without_front_matter(self) -> None:
        text = "# Title\n\n---\n\nmore\n"

        assert split_front_matter(text) == ({}, text)

    def test_empty_block(self) -> None:
        assert split_front_matter("---\n---\nbody") == ({}, "body")

    def test_rejects_non_mapping(self) -> None:
        with pytest.raises(ParseError, match="must be a mapping"):
            split_front_matter("---\n- a\n- b\n---\nbody")

    def test_rejects_invalid_yaml(self) -> None:
        with pytest.raises(ParseError, match="Invalid front matter"):
            split_front_matter("---\nkey: [unclosed\n---\nbody")


class TestReader:
    """Tests for Reader."""

    def test_assigns_heading_ids(self, reader: Reader) -> None:
        soup = reader.read("# Hello World\n\nSome text.\n\n## Next Step\n")

        assert soup.find("h1")["id"] == "hello-world"
        assert soup.find("h2")["id"] == "next-step"

    def test_read_document_splits_properties(self, reader: Reader) -> None:
        soup, properties = reader.read_document("---\nout: custom.html\n---\n# Title\n")

        assert properties == {"out": "custom.html"}
        assert soup.find("h1").get_text() == "Title"

    def test_without_extensions_headings_have_no_ids(self) -> None:
        soup = Reader(extensions=[]).read("# Title\n")

        assert soup.find("h1").get("id") is None


def test_text_content(reader: Reader) -> None:
    heading = reader.read("# Using *emphasis* here\n").find("h1")

    assert text_content(heading) == "Using emphasis here"
    assert text_content(NavigableString("plain.html")) == "plain.html"


def test_missing_parser_dependency_raises_runtime_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "yaml", None)

    with pytest.raises(RuntimeError, match="PyYAML"):
        importlib.reload(reader_module)

    monkeypatch.undo()
    importlib.reload(reader_module)
