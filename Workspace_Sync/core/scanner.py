import asyncio
import stat
from pathlib import Path
from typing import List

from Workspace_Sync.core.errors import FilesystemError
from Workspace_Sync.core.models import FileRecord
from Workspace_Sync.core.paths import resolve_relative


# ============================================================
# ASYNC IMPLEMENTATION (single source of truth)
# ============================================================

async def _walk(directory: Path, root: Path) -> List[FileRecord]:
    try:
        entries = list(directory.iterdir())
    except OSError as err:
        raise FilesystemError(directory, "scandir", err.strerror or str(err)) from err

    files: List[FileRecord] = []
    subdirs: List[Path] = []

    relative_parent = resolve_relative(directory, root)

    for entry in entries:
        try:
            mode = entry.lstat().st_mode
        except OSError as err:
            raise FilesystemError(entry, "stat", err.strerror or str(err)) from err

        # symlinks and special files are never treated as files
        if stat.S_ISDIR(mode):
            subdirs.append(entry)
            continue
        if not stat.S_ISREG(mode):
            continue

        try:
            data = entry.read_bytes()
        except OSError as err:
            raise FilesystemError(entry, "read", err.strerror or str(err)) from err

        files.append(
            FileRecord(
                name=entry.name,
                parent_path="./" + relative_parent,
                path="./" + resolve_relative(entry, root),
                data=data,
            )
        )

    if subdirs:
        nested = await asyncio.gather(*(_walk(sub, root) for sub in subdirs))
        for sub_files in nested:
            files.extend(sub_files)

    return files


async def walk_directory_async(directory: Path) -> List[FileRecord]:
    """
    Recursively read every regular file under `directory`.

    - parent_path / path are relative to `directory` ("./", "./sub", ...)
    - symlinks and other non-regular entries are skipped
    - result order follows directory enumeration and is NOT stable;
      use compute_fingerprint for order-independent comparison
    - any I/O error aborts the walk with FilesystemError
    """
    from akinus.utils.logger import log

    root = Path(directory).resolve()
    files = await _walk(root, root)

    log(
        "INFO",
        "scanner",
        f"Read {len(files)} file(s) from {root}",
    )
    return files


# ============================================================
# SYNC WRAPPER
# ============================================================

def walk_directory(directory: Path):
    """
    Sync wrapper for walk_directory_async.
    Safe under pytest-asyncio: inside a running loop a Task is returned.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        # No running loop → safe to create one
        return asyncio.run(walk_directory_async(directory))
    else:
        # Running loop → must create a task
        return loop.create_task(walk_directory_async(directory))
