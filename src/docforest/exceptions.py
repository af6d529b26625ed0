"""Custom exceptions for docforest."""


class DocforestError(Exception):
    """Base exception for docforest operations."""


class ParseError(DocforestError):
    """Error while reading a markdown source or its front matter."""


class NestingError(DocforestError):
    """Explicit page nesting does not form a forest."""


class OptionsError(DocforestError, ValueError):
    """Invalid site options."""
