"""Composable predicates used to filter directory listings."""

from __future__ import annotations

import os
from typing import Any, Callable

ReadDirFilter = Callable[[Any], bool]


def _base(path: Any) -> str:
    text = str(path)
    if text == "":
        return "."
    stripped = text.rstrip("/")
    if stripped == "":
        return "/"
    return stripped.rsplit("/", 1)[-1]


def _is_dir(path: Any) -> bool:
    return os.path.isdir(str(path))


def filter_directories() -> ReadDirFilter:
    """Accept only directories."""
    return _is_dir


def filter_out_directories() -> ReadDirFilter:
    """Reject every directory."""
    return lambda path: not _is_dir(path)


def filter_names(*args: str) -> ReadDirFilter:
    """Accept only entries whose base name is one of the given names."""
    names = frozenset(args)
    return lambda path: _base(path) in names


def filter_out_names(*args: str) -> ReadDirFilter:
    """Reject entries whose base name is one of the given names."""
    names = frozenset(args)
    return lambda path: _base(path) not in names


def filter_suffixes(*args: str) -> ReadDirFilter:
    """Accept only entries whose full path ends with one of the suffixes."""
    return lambda path: any(str(path).endswith(suffix) for suffix in args)


def filter_out_suffixes(*args: str) -> ReadDirFilter:
    """Reject entries whose full path ends with one of the suffixes."""
    return lambda path: not any(str(path).endswith(suffix) for suffix in args)


def filter_prefixes(*args: str) -> ReadDirFilter:
    """Accept only entries whose base name starts with one of the prefixes."""
    return lambda path: any(_base(path).startswith(prefix) for prefix in args)


def filter_out_prefixes(*args: str) -> ReadDirFilter:
    """Reject entries whose base name starts with one of the prefixes."""
    return lambda path: not any(_base(path).startswith(prefix) for prefix in args)


def or_filter(*args: ReadDirFilter) -> ReadDirFilter:
    """Accept entries accepted by at least one of the filters."""
    return lambda path: any(accept(path) for accept in args)


def and_filter(*args: ReadDirFilter) -> ReadDirFilter:
    """Accept entries accepted by all of the filters."""
    return lambda path: all(accept(path) for accept in args)


def not_filter(accept: ReadDirFilter) -> ReadDirFilter:
    """Invert a filter."""
    return lambda path: not accept(path)