"""Path algebra over root-relative, forward-slash separated page paths.

Every function here is pure string manipulation. Nothing touches the host
filesystem, so paths keep ``/`` separators on every platform.
"""

from __future__ import annotations

import posixpath
from functools import partial
from typing import Callable, Mapping, Sequence
from urllib.parse import urljoin, urlsplit, urlunsplit


def replace_suffix(from_: str, to: str, path: str) -> str:
    """Replace the suffix of a path, or return it unchanged if it does not match."""
    if path.endswith(from_):
        return path[: len(path) - len(from_)] + to
    return path


def suffix_converter(from_: str, to: str) -> Callable[[str], str]:
    """Bind a (from, to) suffix pair into a single-argument path converter."""
    return partial(replace_suffix, from_, to)


def replace_extension(from_: str, to: str, link: str) -> str:
    """Replace the file extension of a link, keeping any ``#fragment`` verbatim."""
    reference, separator, fragment = link.partition("#")
    path, query_separator, query = reference.partition("?")
    return replace_suffix(from_, to, path) + query_separator + query + separator + fragment


def base_path(path: str) -> str:
    """Form a relative path to the site root from the number of directories in a path.

    The path is not canonicalized: ``.`` or ``..`` segments are counted like any
    other directory.
    """
    return "../" * path.count("/")


def resolve(base: str, path: str) -> str:
    """Resolve a relative path against a base path."""
    return urlsplit(urljoin(base, path)).path


def leaf(path: str) -> str:
    """Return the leaf (file) segment of a path."""
    return path.rsplit("/", 1)[-1]


def parent_segments(path: str) -> list[str]:
    """Return the directory segments of a path, without its leaf."""
    return path.split("/")[:-1]


def relative_root_path(full_path: str, local_path: str) -> str:
    """Recover the root prefix of ``full_path`` given its known local suffix."""
    if full_path.endswith(local_path):
        return full_path[: len(full_path) - len(local_path)]
    return full_path


def relative_local_path(root_path: str, full_path: str) -> str:
    """Relativize ``full_path`` against ``root_path`` with URI semantics.

    Mirrors ``java.net.URI.relativize``: when the two differ in scheme or
    authority, or the root path is not a directory prefix of the full path,
    ``full_path`` is returned as is.
    """
    root = urlsplit(root_path)
    full = urlsplit(full_path)
    if root.scheme.lower() != full.scheme.lower() or root.netloc != full.netloc:
        return full_path

    root_dir = _normalize(root.path)
    full_dir = _normalize(full.path)
    if root_dir != full_dir:
        if not root_dir.endswith("/"):
            root_dir += "/"
        if not full_dir.startswith(root_dir):
            return full_path

    return urlunsplit(("", "", full_dir[len(root_dir) :], full.query, full.fragment))


def relative_mapping(local_path: str, global_page_mappings: Mapping[str, str]) -> dict[str, str]:
    """Rewrite a site-wide source to target mapping relative to ``local_path``.

    Keys and values are relativized independently, so sources and targets may
    sit at different depths.
    """
    root = parent_segments(local_path)
    return {
        ref_relative_path(root, parent_segments(source), leaf(source)): ref_relative_path(
            root, parent_segments(target), leaf(target)
        )
        for source, target in global_page_mappings.items()
    }


def ref_relative_path(root: Sequence[str], path: Sequence[str], leaf_file: str) -> str:
    """Compute the shortest relative path between two directory segment lists.

    Leading segments shared by ``root`` and ``path`` are dropped, one ``..``
    is emitted per remaining ``root`` segment, then the remaining ``path``
    segments and finally ``leaf_file``.
    """
    common = 0
    for root_segment, path_segment in zip(root, path):
        if root_segment != path_segment:
            break
        common += 1
    segments = [".."] * (len(root) - common) + list(path[common:]) + [leaf_file]
    return "/".join(segments)


def _normalize(path: str) -> str:
    if not path:
        return path
    normalized = posixpath.normpath(path)
    if normalized == ".":
        normalized = ""
    if path.endswith("/") and normalized and not normalized.endswith("/"):
        normalized += "/"
    return normalized
