"""A list of Path objects with in-place filtering helpers."""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from aatools.paths import Path, new_path


class PathList(list):
    """A list of :class:`Path` objects."""

    def clone(self) -> "PathList":
        """Return a copy of the list holding copies of every path."""
        return PathList(path.clone() for path in self)

    def as_strings(self) -> list[str]:
        """Return the paths as strings."""
        return [str(path) for path in self]

    def filter(self, accept: Callable[[Path], bool]) -> None:
        """Keep only the paths accepted by ``accept``."""
        self[:] = [path for path in self if accept(path)]

    def filter_dirs(self) -> None:
        """Keep only directories."""
        self.filter(lambda path: path.is_dir())

    def filter_out_dirs(self) -> None:
        """Remove every directory."""
        self.filter(lambda path: not path.is_dir())

    def filter_out_hidden_files(self) -> None:
        """Remove entries whose name starts with a dot."""
        self.filter_out_prefix(".")

    def filter_out_prefix(self, *args: str) -> None:
        """Remove entries whose base name has one of the prefixes."""
        self.filter(lambda path: not path.has_prefix(*args))

    def filter_prefix(self, *args: str) -> None:
        """Keep only entries whose base name has one of the prefixes."""
        self.filter(lambda path: path.has_prefix(*args))

    def filter_out_suffix(self, *args: str) -> None:
        """Remove entries whose path ends with one of the suffixes."""
        self.filter(lambda path: not path.has_suffix(*args))

    def filter_suffix(self, *args: str) -> None:
        """Keep only entries whose path ends with one of the suffixes."""
        self.filter(lambda path: path.has_suffix(*args))

    def add_if_missing(self, path: Path) -> None:
        """Append ``path`` unless an equal path is already present."""
        if not self.contains(path):
            self.append(path)

    def add_all_missing(self, paths: Iterable[Path]) -> None:
        """Append every path that is not already present."""
        for path in paths:
            self.add_if_missing(path)

    def to_abs(self) -> None:
        """Turn every path into its absolute version, in place."""
        for path in self:
            path.to_abs()

    def contains(self, path: Path) -> bool:
        """True if the list holds a path with exactly the same string."""
        return any(item.equals_to(path) for item in self)

    def contains_equivalent_to(self, path: Path) -> bool:
        """True if the list holds a path pointing to the same file."""
        return any(item.equivalent_to(path) for item in self)

    def sort_paths(self) -> None:
        """Sort the paths by their string value."""
        self.sort(key=str)


def new_path_list(*args: str) -> PathList:
    """Build a PathList from path strings."""
    result: PathList = PathList()
    for text in args:
        path: Optional[Path] = new_path(text)
        result.append(path)
    return result