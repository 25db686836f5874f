import asyncio
from pathlib import Path
from typing import Any, Iterable, List, Optional

from Workspace_Sync.core.models import FileRecord
from Workspace_Sync.core.scanner import walk_directory_async
from Workspace_Sync.core.writer import write_files_async
from Workspace_Sync.generators.inventory import Generator, create_inventory


async def prepare_workspace(
    source_dir: Path,
    work_dir: Path,
    *,
    generator: Optional[Generator] = None,
    context: Any = None,
    extra_files: Iterable[FileRecord] = (),
) -> bytes:
    """
    Copy `source_dir` into `work_dir`, adding generated files on the way.

    1. read every file under source_dir
    2. append generator(context) as inventory.json (if a generator is given)
    3. append extra_files
    4. write the combined set and return its fingerprint

    The fingerprint only changes when a path or a file's content changes,
    so callers can use it to decide whether to re-run downstream work.
    """
    from akinus.utils.logger import log

    files: List[FileRecord] = await walk_directory_async(source_dir)

    if generator is not None:
        files.append(create_inventory(generator, context))

    files.extend(extra_files)

    digest = await write_files_async(work_dir, files)

    log(
        "INFO",
        "workspace",
        f"Prepared {work_dir} from {source_dir}: {len(files)} file(s), fingerprint {digest.hex()}",
    )
    return digest


def prepare_workspace_sync(source_dir: Path, work_dir: Path, **kwargs):
    """
    Sync wrapper for prepare_workspace.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(prepare_workspace(source_dir, work_dir, **kwargs))
    else:
        return loop.create_task(prepare_workspace(source_dir, work_dir, **kwargs))
