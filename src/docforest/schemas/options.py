"""Site build options."""

from __future__ import annotations

from typing import Callable, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from docforest.config import (
    DOCFOREST_INDEX_NAME,
    DOCFOREST_MARKDOWN_EXTENSIONS,
    DOCFOREST_SOURCE_SUFFIX,
    DOCFOREST_TARGET_SUFFIX,
)
from docforest.exceptions import OptionsError
from docforest.paths import suffix_converter


class SiteOptions(BaseModel):
    """Options threaded through a site build.

    Attributes:
        source_suffix: Suffix of markdown sources (e.g., ".md").
        target_suffix: Suffix of generated pages (e.g., ".html"). Explicit
            ``out`` properties must end with it.
        nesting: "flat" keeps every page a root in authoring order;
            "directory" nests pages under directory index pages.
        index_name: Base name of directory index pages, without suffix.
        markdown_extensions: Python-Markdown extensions used by the reader.
    """

    model_config = ConfigDict(frozen=True)

    source_suffix: str = DOCFOREST_SOURCE_SUFFIX
    target_suffix: str = DOCFOREST_TARGET_SUFFIX
    nesting: Literal["flat", "directory"] = "flat"
    index_name: str = DOCFOREST_INDEX_NAME
    markdown_extensions: list[str] = Field(default_factory=lambda: list(DOCFOREST_MARKDOWN_EXTENSIONS))

    @field_validator("source_suffix", "target_suffix")
    @classmethod
    def _check_suffix(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise OptionsError(f"Suffix must start with '.' and name an extension, got {value!r}")
        return value

    @field_validator("index_name")
    @classmethod
    def _check_index_name(cls, value: str) -> str:
        if not value or "/" in value:
            raise OptionsError(f"Index name must be a plain file name, got {value!r}")
        return value

    @model_validator(mode="after")
    def _check_distinct_suffixes(self) -> SiteOptions:
        if self.source_suffix == self.target_suffix:
            raise OptionsError("Source and target suffixes must differ")
        return self

    @property
    def convert_path(self) -> Callable[[str], str]:
        """Default source to target path conversion."""
        return suffix_converter(self.source_suffix, self.target_suffix)

    @property
    def index_file(self) -> str:
        """File name of directory index sources."""
        return self.index_name + self.source_suffix
