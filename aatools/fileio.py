"""File copying, temporary files and directories, and well-known paths."""

from __future__ import annotations

import os
import shutil
import stat as _stat
import tempfile
from typing import IO, Optional, Union

from aatools.filters import filter_out_directories, filter_out_names
from aatools.paths import Path, new_path

PathLike = Union[Path, str]


def _as_path(value: PathLike) -> Path:
    return value if isinstance(value, Path) else Path(value)


def _dir_arg(directory: Optional[PathLike]) -> Optional[str]:
    if directory is None:
        return None
    text = str(directory)
    return text or None


def copy_file(src: PathLike, dst: PathLike) -> None:
    """Copy the contents and permission bits of ``src`` to ``dst``.

    The destination is created or truncated, and its data is flushed to
    stable storage before the mode is copied.
    """
    src, dst = _as_path(src), _as_path(dst)
    if src.equals_to(dst):
        raise shutil.SameFileError(f"{src} and {dst} are the same file")

    with open(str(src), "rb") as source:
        fd = os.open(str(dst), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o666)
        with os.fdopen(fd, "wb") as target:
            shutil.copyfileobj(source, target)
            target.flush()
            os.fsync(target.fileno())

    os.chmod(str(dst), _stat.S_IMODE(src.stat().st_mode))


def copy_tree(src: PathLike, dst: PathLike) -> None:
    """Copy every file under ``src`` into ``dst``, skipping README.md files."""
    src, dst = _as_path(src), _as_path(dst)
    files = src.read_dir_recursive_filtered(
        None, filter_out_directories(), filter_out_names("README.md")
    )
    for file in files:
        destination = dst.join_path(file.rel_from(src))
        destination.parent().mkdir_all()
        copy_file(file, destination)


def _copy_fs_tree(source: str, target: str) -> None:
    os.makedirs(target, 0o777, exist_ok=True)
    with os.scandir(source) as iterator:
        entries = sorted(iterator, key=lambda entry: entry.name)
    for entry in entries:
        destination = os.path.join(target, entry.name)
        if entry.is_symlink():
            raise OSError(f"copy {entry.path}: symbolic links are not supported")
        if entry.is_dir(follow_symlinks=False):
            _copy_fs_tree(entry.path, destination)
            continue
        if not entry.is_file(follow_symlinks=False):
            raise OSError(f"copy {entry.path}: not a regular file")
        mode = 0o666 | _stat.S_IMODE(entry.stat(follow_symlinks=False).st_mode)
        with open(entry.path, "rb") as reader:
            fd = os.open(destination, os.O_WRONLY | os.O_CREAT | os.O_EXCL, mode)
            with os.fdopen(fd, "wb") as writer:
                shutil.copyfileobj(reader, writer)


def copy_fs(src: PathLike, dst: PathLike) -> None:
    """Copy the tree rooted at ``src`` into ``dst``, creating ``dst`` if needed.

    Existing destination files and symbolic links in the source are errors.
    """
    src, dst = _as_path(src), _as_path(dst)
    try:
        _copy_fs_tree(str(src), str(dst))
    except OSError as err:
        raise OSError(f"copying {src} to {dst}: {err}") from err


def copy_dir(src: PathLike, dst: PathLike) -> None:
    """Recursively copy directory ``src`` to ``dst``, which must not exist."""
    src = _as_path(src).clean()
    dst = _as_path(dst).clean()

    try:
        src_files = src.read_dir()
    except OSError as err:
        raise OSError(f"error reading source dir {src}: {err}") from err

    try:
        exists = dst.exist_check()
    except OSError as err:
        raise OSError(f"checking if {dst} exists: {err}") from err
    if exists:
        raise FileExistsError(f"destination {dst} already exists")

    try:
        dst.mkdir_all()
    except OSError as err:
        raise OSError(f"creating destination dir {dst}: {err}") from err

    try:
        src_info = src.stat()
    except OSError as err:
        raise OSError(f"getting stat info for {src}: {err}") from err
    try:
        os.chmod(str(dst), _stat.S_IMODE(src_info.st_mode))
    except OSError as err:
        raise OSError(f"setting permission for dir {dst}: {err}") from err

    for src_path in src_files:
        try:
            info = src_path.stat()
        except OSError as err:
            raise OSError(f"getting stat info for {src_path}: {err}") from err
        dst_path = dst.join(src_path.base())

        if _stat.S_ISDIR(info.st_mode):
            try:
                copy_dir(src_path, dst_path)
            except OSError as err:
                raise OSError(f"copying {src_path} to {dst_path}: {err}") from err
            continue

        if _stat.S_ISLNK(info.st_mode):
            continue

        try:
            copy_file(src_path, dst_path)
        except OSError as err:
            raise OSError(f"copying {src_path} to {dst_path}: {err}") from err


def null_path() -> Path:
    """Return the path of the null device."""
    return Path("/dev/null")


def temp_dir() -> Optional[Path]:
    """Return the canonical default directory for temporary files."""
    return Path(tempfile.gettempdir()).canonical()


def mk_temp_dir(directory: Optional[PathLike], prefix: str) -> Optional[Path]:
    """Create a new temporary directory whose name starts with ``prefix``."""
    created = tempfile.mkdtemp(prefix=prefix, dir=_dir_arg(directory))
    return Path(created).canonical()


def mk_temp_file(directory: Optional[PathLike], prefix: str) -> IO[bytes]:
    """Create and open a new temporary file for reading and writing.

    The file is kept after closing; removing it is up to the caller.
    """
    return tempfile.NamedTemporaryFile(
        mode="w+b", prefix=prefix, dir=_dir_arg(directory), delete=False
    )


def write_to_temp_file(
    data: bytes | str, directory: Optional[PathLike], prefix: str
) -> Optional[Path]:
    """Write ``data`` to a new temporary file and return its path."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    with mk_temp_file(directory, prefix) as handle:
        written = handle.write(data)
        if written < len(data):
            raise OSError(
                f"could not write all data (written {written} bytes out of {len(data)})"
            )
        name = handle.name
    return new_path(name)


def getwd() -> Optional[Path]:
    """Return the current working directory."""
    return new_path(os.getcwd())