import hashlib
import locale
from pathlib import Path
from typing import Iterable, List

from Workspace_Sync.core.buffers import normalize_buffer
from Workspace_Sync.core.models import FileRecord
from Workspace_Sync.core.scanner import walk_directory_async


# ============================================================
# Fingerprint utilities
# ============================================================

def _ordering(record: FileRecord):
    key = record.sort_key
    # strxfrm may map distinct keys to the same value; the raw key keeps
    # the order total
    return locale.strxfrm(key), key


def compute_fingerprint(files: Iterable[FileRecord]) -> bytes:
    """
    SHA-256 digest of a file-set, independent of its order.

    Records are sorted by "parent_path/name"; each contributes
    "parent_path:name:" + content + "\\n". Write options are ignored.
    """
    h = hashlib.sha256()

    for record in sorted(list(files), key=_ordering):
        # names read from disk may carry surrogate escapes for undecodable bytes
        h.update(f"{record.parent_path}:{record.name}:".encode("utf-8", "surrogateescape"))
        h.update(normalize_buffer(record.data))
        h.update(b"\n")

    return h.digest()


def fingerprint_hex(files: Iterable[FileRecord]) -> str:
    return compute_fingerprint(files).hex()


async def directory_fingerprint(path: Path) -> bytes:
    """
    Fingerprint of everything currently on disk under `path`.
    """
    from akinus.utils.logger import log

    files: List[FileRecord] = await walk_directory_async(path)
    digest = compute_fingerprint(files)

    log("DEBUG", "fingerprint", f"{path}: {len(files)} file(s) -> {digest.hex()}")
    return digest
