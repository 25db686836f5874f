import asyncio
import os
import stat
from collections import Counter
from pathlib import Path
from typing import Iterable, List

from Workspace_Sync.core.buffers import normalize_buffer
from Workspace_Sync.core.errors import FilesystemError
from Workspace_Sync.core.models import DEFAULT_FILE_MODE, FileRecord, WriteOptions
from Workspace_Sync.core.fingerprint import compute_fingerprint
from Workspace_Sync.core.paths import resolve_relative


_OPEN_FLAGS = {
    "w": os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
    "a": os.O_WRONLY | os.O_CREAT | os.O_APPEND,
    "x": os.O_WRONLY | os.O_CREAT | os.O_EXCL,
}


def ensure_directory(path: Path) -> bool:
    """
    True if `path` exists and is a directory, False if it does not exist.

    Anything else (a file in the way, permission denied, ...) raises
    FilesystemError so callers never mistake it for "missing".
    """
    path = Path(path)
    try:
        st = path.stat()
    except FileNotFoundError:
        return False
    except OSError as err:
        raise FilesystemError(path, "stat", err.strerror or str(err)) from err

    if not stat.S_ISDIR(st.st_mode):
        raise FilesystemError(path, "stat", "exists but is not a directory")
    return True


def _make_directory(path: Path):
    if ensure_directory(path):
        return
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        raise FilesystemError(path, "mkdir", err.strerror or str(err)) from err


def _write_record(target: Path, data: bytes, options: WriteOptions | None):
    options = options or WriteOptions()
    mode = DEFAULT_FILE_MODE if options.mode is None else options.mode
    flags = _OPEN_FLAGS[options.flag] | getattr(os, "O_BINARY", 0)

    try:
        fd = os.open(target, flags, mode)
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
    except OSError as err:
        raise FilesystemError(target, "write", err.strerror or str(err)) from err


def _warn_duplicates(files: List[FileRecord]):
    from akinus.utils.logger import log

    counts = Counter(f.path for f in files)
    for path, count in counts.items():
        if count > 1:
            log(
                "WARNING",
                "writer",
                f"{path} appears {count} times; the last record wins",
            )


# ============================================================
# ASYNC IMPLEMENTATION (single source of truth)
# ============================================================

async def write_files_async(
    work_directory: Path,
    files: Iterable[FileRecord],
) -> bytes:
    """
    Materialize a file-set under `work_directory` and return its fingerprint.

    - missing directories are created (recursively)
    - records are written in input order, one at a time
    - NOT transactional: on failure, files already written stay on disk
    - the fingerprint covers the in-memory records, not a re-read of disk
    """
    from akinus.utils.logger import log

    work_directory = Path(work_directory)
    files = list(files)

    _warn_duplicates(files)
    _make_directory(work_directory)

    for record in files:
        target_dir = work_directory / record.parent_path
        target = target_dir / record.name
        # raises PathEscapeError before anything is created for this record
        resolve_relative(target, work_directory)

        _make_directory(target_dir)
        _write_record(target, normalize_buffer(record.data), record.options)

        log("DEBUG", "writer", f"Wrote {record.path} ({len(record.data)} bytes)")
        # yield to the loop between records
        await asyncio.sleep(0)

    digest = compute_fingerprint(files)
    log(
        "INFO",
        "writer",
        f"Wrote {len(files)} file(s) to {work_directory} (fingerprint {digest.hex()})",
    )
    return digest


# ============================================================
# SYNC WRAPPER
# ============================================================

def write_files(work_directory: Path, files: Iterable[FileRecord]):
    """
    Sync wrapper for write_files_async.
    Safe under pytest-asyncio: inside a running loop a Task is returned.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(write_files_async(work_directory, files))
    else:
        return loop.create_task(write_files_async(work_directory, files))
