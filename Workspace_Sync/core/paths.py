import os
import posixpath
import re
from pathlib import PurePosixPath

from Workspace_Sync.core.errors import PathEscapeError


ROOT_PARENT = "./"

_LEADING_DOT_SLASH = re.compile(r"^(\./+)+")

_NATIVE_SEPARATORS = tuple(sep for sep in (os.sep, os.altsep) if sep and sep != "/")


def to_posix(path: str) -> str:
    """Replace the platform's own separators with "/"; other characters are kept."""
    for sep in _NATIVE_SEPARATORS:
        path = path.replace(sep, "/")
    return path


def resolve_relative(full_path, base_path) -> str:
    """
    Return the canonical relative path from base_path to full_path.

    The result uses forward slashes, has no leading "./" or "/", and is ""
    when both paths point at the same location. Raises PathEscapeError when
    full_path is not under base_path. Pure: the filesystem is never touched.
    """
    full_str = os.fspath(full_path)
    base_str = os.fspath(base_path)

    relative = os.path.relpath(os.path.abspath(full_str), os.path.abspath(base_str))
    relative = to_posix(relative)

    if relative == ".." or relative.startswith("../"):
        raise PathEscapeError(full_str, base_str)

    normalized = posixpath.normpath(relative)
    if normalized == ".":
        return ""
    return _LEADING_DOT_SLASH.sub("", normalized).lstrip("/")


def canonical_parent(parent_path) -> str:
    """
    Canonicalize a record's parent directory to "./" or "./<rel>".

    Absolute paths and ".." segments are rejected with PathEscapeError.
    """
    raw = to_posix(os.fspath(parent_path))
    if raw.startswith("/"):
        raise PathEscapeError(raw)

    parts = [p for p in PurePosixPath(raw).parts if p not in (".", "")]
    if ".." in parts:
        raise PathEscapeError(raw)

    if not parts:
        return ROOT_PARENT
    return ROOT_PARENT + "/".join(parts)


def join_parent(parent_path: str, name: str) -> str:
    """'./' + 'a.txt' -> './a.txt', './sub' + 'b.txt' -> './sub/b.txt'"""
    return posixpath.join(canonical_parent(parent_path), name)
