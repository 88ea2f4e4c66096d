"""A small path object with lexical helpers and file-system queries."""

from __future__ import annotations

import os
import shutil
import stat as _stat
from datetime import datetime
from typing import IO, Callable, Optional

ReadDirFilter = Callable[["Path"], bool]


class SymlinkLoopError(OSError):
    """Raised when a recursive listing walks into a directory symlink loop."""


def _clean(path: str) -> str:
    """Return the shortest equivalent path by purely lexical processing."""
    if path == "":
        return "."
    rooted = path.startswith("/")
    parts: list[str] = []
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if parts and parts[-1] != "..":
                parts.pop()
            elif not rooted:
                parts.append("..")
            continue
        parts.append(segment)
    result = "/".join(parts)
    if rooted:
        result = "/" + result
    return result or "."


def _join(*elements: str) -> str:
    """Join non-empty elements with separators and clean the result."""
    kept = [element for element in elements if element]
    if not kept:
        return ""
    return _clean("/".join(kept))


def _base(path: str) -> str:
    if path == "":
        return "."
    stripped = path.rstrip("/")
    if stripped == "":
        return "/"
    return stripped.rsplit("/", 1)[-1]


def _ext(path: str) -> str:
    for index in range(len(path) - 1, -1, -1):
        char = path[index]
        if char == "/":
            break
        if char == ".":
            return path[index:]
    return ""


def _dir(path: str) -> str:
    return _clean(path[: path.rfind("/") + 1])


def _rel(base: str, target: str) -> str:
    """Return a path lexically equivalent to ``target`` relative to ``base``."""
    base_clean = _clean(base)
    target_clean = _clean(target)
    if base_clean == target_clean:
        return "."
    base_abs = base_clean.startswith("/")
    if base_abs != target_clean.startswith("/"):
        raise ValueError(f"Rel: can't make {target} relative to {base}")

    def split(text: str) -> list[str]:
        if text in (".", "/"):
            return []
        return text.lstrip("/").split("/")

    base_parts = split(base_clean)
    target_parts = split(target_clean)
    common = 0
    for left, right in zip(base_parts, target_parts):
        if left != right:
            break
        common += 1
    remaining = base_parts[common:]
    if ".." in remaining:
        raise ValueError(f"Rel: can't make {target} relative to {base}")
    parts = [".."] * len(remaining) + target_parts[common:]
    return "/".join(parts) or "."


def new_path(*args: str) -> Optional["Path"]:
    """Build a Path from one or more elements; None when given nothing or ''."""
    if not args or (len(args) == 1 and args[0] == ""):
        return None
    result = Path(args[0])
    if len(args) > 1:
        return result.join(*args[1:])
    return result


def _timestamp(value) -> float:
    if isinstance(value, datetime):
        return value.timestamp()
    return float(value)


class Path:
    """A file-system path with lexical operations and convenience I/O."""

    __slots__ = ("_path",)

    def __init__(self, path: str) -> None:
        self._path = os.fspath(path)

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"Path({self._path!r})"

    def __fspath__(self) -> str:
        return self._path

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Path):
            return self._path == other._path
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._path)

    # Lexical operations

    def stat(self) -> os.stat_result:
        """Return the status of the file, following symlinks."""
        return os.stat(self._path)

    def lstat(self) -> os.stat_result:
        """Return the status of the file without following symlinks."""
        return os.lstat(self._path)

    def clone(self) -> Optional["Path"]:
        """Return a copy of this path."""
        return new_path(self._path)

    def join(self, *args: str) -> Optional["Path"]:
        """Return a new cleaned path made by joining the given elements."""
        return new_path(_join(self._path, _join(*args)))

    def join_path(self, *args: "Path") -> Optional["Path"]:
        """Join other Path objects onto this one."""
        result = self.clone()
        for path in args:
            result = result.join(path._path)
        return result

    def base(self) -> str:
        """Return the last element of the path."""
        return _base(self._path)

    def ext(self) -> str:
        """Return the file name extension, dot included."""
        return _ext(self._path)

    def has_prefix(self, *args: str) -> bool:
        """True if the base name starts with one of the prefixes."""
        name = self.base()
        return any(name.startswith(prefix) for prefix in args)

    def has_suffix(self, *args: str) -> bool:
        """True if the full path ends with one of the suffixes."""
        return any(self._path.endswith(suffix) for suffix in args)

    def rel_to(self, other: "Path") -> Optional["Path"]:
        """Return the path that, joined to this one, leads to ``other``."""
        return new_path(_rel(self._path, other._path))

    def rel_from(self, other: "Path") -> Optional["Path"]:
        """Return the path that, joined to ``other``, leads to this one."""
        return new_path(_rel(other._path, self._path))

    def abs(self) -> Optional["Path"]:
        """Return the absolute version of this path."""
        return new_path(_clean(os.path.abspath(self._path)))

    def is_abs(self) -> bool:
        """True if the path is absolute."""
        return self._path.startswith("/")

    def to_abs(self) -> None:
        """Turn this path into its absolute version in place."""
        self._path = _clean(os.path.abspath(self._path))

    def clean(self) -> Optional["Path"]:
        """Return the shortest lexically equivalent path."""
        return new_path(_clean(self._path))

    def is_inside_dir(self, directory: "Path") -> bool:
        """True if this path lies strictly inside ``directory``."""
        try:
            rel = _rel(directory._path, self._path)
        except ValueError:
            return False
        return "../" not in rel and rel != ".." and rel != "."

    def parent(self) -> Optional["Path"]:
        """Return all but the last element of the path."""
        return new_path(_dir(self._path))

    # File-system operations

    def mkdir(self) -> None:
        """Create this directory."""
        os.mkdir(self._path, 0o755)

    def mkdir_all(self) -> None:
        """Create this directory and any missing parents."""
        os.makedirs(self._path, 0o755, exist_ok=True)

    def remove(self) -> None:
        """Remove the file or empty directory."""
        if os.path.isdir(self._path) and not os.path.islink(self._path):
            os.rmdir(self._path)
        else:
            os.remove(self._path)

    def remove_all(self) -> None:
        """Remove the path and everything under it; missing paths are fine."""
        if os.path.isdir(self._path) and not os.path.islink(self._path):
            shutil.rmtree(self._path)
        elif os.path.lexists(self._path):
            os.remove(self._path)

    def rename(self, new_path: "Path") -> None:
        """Move this path to ``new_path``."""
        os.rename(self._path, new_path._path)

    def follow_symlink(self) -> None:
        """Replace this path with the one it resolves to through symlinks."""
        self._path = os.path.realpath(self._path, strict=True)

    def exists(self) -> bool:
        """True if the path exists; False on any error."""
        try:
            return self.exist_check()
        except OSError:
            return False

    def not_exists(self) -> bool:
        """True only if the path is known not to exist."""
        try:
            return not self.exist_check()
        except OSError:
            return False

    def exist_check(self) -> bool:
        """Return whether the path exists; raise if the check itself fails."""
        try:
            self.stat()
        except (FileNotFoundError, NotADirectoryError):
            return False
        return True

    def is_dir(self) -> bool:
        """True if the path exists and is a directory."""
        try:
            return self.is_dir_check()
        except OSError:
            return False

    def is_not_dir(self) -> bool:
        """True if the path exists and is not a directory."""
        try:
            return not self.is_dir_check()
        except OSError:
            return False

    def is_dir_check(self) -> bool:
        """Return whether the existing path is a directory; raise on error."""
        return _stat.S_ISDIR(self.stat().st_mode)

    def chmod(self, mode: int) -> None:
        """Change the permission bits of the file."""
        os.chmod(self._path, mode)

    def chtimes(self, atime, mtime) -> None:
        """Set access and modification times (datetimes or epoch seconds)."""
        os.utime(self._path, (_timestamp(atime), _timestamp(mtime)))

    def read_file(self) -> bytes:
        """Return the file contents."""
        with open(self._path, "rb") as handle:
            return handle.read()

    def write_file(self, data: bytes | str) -> None:
        """Write data to the file, creating it with mode 0644 or truncating it."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        fd = os.open(self._path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)

    def read_text(self) -> str:
        """Return the file contents as text."""
        return self.read_file().decode("utf-8")

    def read_lines(self) -> list[str]:
        """Return the file split into lines, whatever the newline encoding."""
        return self.read_text().replace("\r\n", "\n").split("\n")

    def truncate(self) -> None:
        """Create an empty file or empty an existing one."""
        self.write_file(b"")

    def open(self) -> IO[bytes]:
        """Open the file for reading."""
        return open(self._path, "rb")

    def create(self) -> IO[bytes]:
        """Create or truncate the file and open it for reading and writing."""
        return open(self._path, "w+b")

    def append(self) -> IO[bytes]:
        """Open the file for appending, creating it if needed."""
        return open(self._path, "ab")

    def equals_to(self, other: "Path") -> bool:
        """True if both paths are the same string."""
        return self._path == other._path

    def equivalent_to(self, other: "Path") -> bool:
        """True if both paths point to the same file."""
        if _clean(self._path) == _clean(other._path):
            return True
        try:
            if os.path.samestat(self.stat(), other.stat()):
                return True
        except OSError:
            pass
        try:
            return os.path.abspath(self._path) == os.path.abspath(other._path)
        except OSError:
            return False

    def parents(self) -> list["Path"]:
        """Return this path and all its parents up to the root or '.'."""
        result = []
        current = self
        while True:
            result.append(current)
            parent = current.parent()
            if parent.equivalent_to(current):
                break
            current = parent
        return result

    def canonical(self) -> Optional["Path"]:
        """Return the absolute path with symlinks resolved, or None on error."""
        result = self.clone()
        try:
            result.follow_symlink()
        except OSError:
            return None
        return result.abs() or result

    # Directory listings

    def read_dir(self, *args: ReadDirFilter) -> list["Path"]:
        """List the directory, keeping entries accepted by every filter."""
        names = sorted(os.listdir(self._path))
        entries = (self.join(name) for name in names)
        return [path for path in entries if all(accept(path) for accept in args)]

    def read_dir_recursive(self) -> list["Path"]:
        """List the directory and all its subdirectories."""
        return self.read_dir_recursive_filtered(None)

    def read_dir_recursive_filtered(
        self, recursion_filter: Optional[ReadDirFilter], *args: ReadDirFilter
    ) -> list["Path"]:
        """List recursively.

        ``recursion_filter`` decides which subdirectories are entered;
        the other filters decide which entries are returned.
        """
        explored: set[str] = set()

        def search(current: Path) -> list[Path]:
            canonical = current.canonical()
            key = str(canonical) if canonical is not None else str(current)
            if key in explored:
                raise SymlinkLoopError("directories symlink loop detected")
            explored.add(key)
            try:
                found: list[Path] = []
                for name in sorted(os.listdir(current._path)):
                    path = current.join(name)
                    if all(accept(path) for accept in args):
                        found.append(path)
                    if recursion_filter is None or recursion_filter(path):
                        if path.is_dir():
                            found.extend(search(path))
                return found
            finally:
                explored.discard(key)

        return search(self)