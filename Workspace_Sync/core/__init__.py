# Auto-generated __init__.py

from . import errors
from .errors import FilesystemError
from .errors import GeneratorError
from .errors import GeneratorStage
from .errors import PathEscapeError
from .errors import UnsupportedDataFormatError
from .errors import WorkspaceSyncError
from . import paths
from .paths import ROOT_PARENT
from .paths import canonical_parent
from .paths import join_parent
from .paths import resolve_relative
from . import buffers
from .buffers import normalize_buffer
from . import models
from .models import DockerConfig
from .models import FileRecord
from .models import Host
from .models import InventoryContext
from .models import WriteOptions
from . import scanner
from .scanner import walk_directory
from .scanner import walk_directory_async
from . import fingerprint
from .fingerprint import compute_fingerprint
from .fingerprint import directory_fingerprint
from .fingerprint import fingerprint_hex
from . import writer
from .writer import ensure_directory
from .writer import write_files
from .writer import write_files_async

__all__ = [
    "buffers",
    "errors",
    "fingerprint",
    "models",
    "paths",
    "scanner",
    "writer",
    "DockerConfig",
    "FileRecord",
    "FilesystemError",
    "GeneratorError",
    "GeneratorStage",
    "Host",
    "InventoryContext",
    "PathEscapeError",
    "ROOT_PARENT",
    "UnsupportedDataFormatError",
    "WorkspaceSyncError",
    "WriteOptions",
    "canonical_parent",
    "compute_fingerprint",
    "directory_fingerprint",
    "ensure_directory",
    "fingerprint_hex",
    "join_parent",
    "normalize_buffer",
    "resolve_relative",
    "walk_directory",
    "walk_directory_async",
    "write_files",
    "write_files_async",
]
