from dataclasses import dataclass, field
from typing import Optional, List

from Workspace_Sync.core.buffers import normalize_buffer
from Workspace_Sync.core.paths import canonical_parent, join_parent, to_posix


DEFAULT_FILE_MODE = 0o666
WRITE_FLAGS = ("w", "a", "x")


@dataclass(frozen=True)
class WriteOptions:
    """
    Write-time directives for a single file.

    mode: permission bits used when the file is created
          (None -> DEFAULT_FILE_MODE filtered by the process umask)
    flag: "w" truncate+create, "a" append+create, "x" exclusive create
    """
    mode: Optional[int] = None
    flag: str = "w"

    def __post_init__(self):
        if self.flag not in WRITE_FLAGS:
            raise ValueError(
                f"Unsupported write flag {self.flag!r}; expected one of {WRITE_FLAGS}"
            )


@dataclass(frozen=True)
class FileRecord:
    """
    One file of a file-set: where it lives (relative to some root) and
    what it contains.

    parent_path is canonical ("./" or "./sub/dir") and path is always
    parent_path joined with name. data is always bytes. Records are
    frozen; build a new record to move a file.
    options only affect how the file is written, never its identity.
    """
    name: str
    parent_path: str = "./"
    data: bytes = b""
    path: Optional[str] = None
    options: Optional[WriteOptions] = None

    def __post_init__(self):
        if (
            not self.name
            or "/" in to_posix(self.name)
            or self.name in (".", "..")
        ):
            raise ValueError(f"Invalid file name: {self.name!r}")

        parent_path = canonical_parent(self.parent_path)
        derived = join_parent(parent_path, self.name)

        if self.path is not None and join_parent(*_split(str(self.path))) != derived:
            raise ValueError(
                f"path {self.path!r} disagrees with parent_path/name {derived!r}"
            )
        object.__setattr__(self, "parent_path", parent_path)
        object.__setattr__(self, "path", derived)
        object.__setattr__(self, "data", normalize_buffer(self.data))

    @property
    def sort_key(self) -> str:
        return f"{self.parent_path}/{self.name}"


def _split(path: str):
    head, _, tail = to_posix(path).rpartition("/")
    return head or ".", tail


@dataclass
class Host:
    """A remote machine reachable over SSH."""
    name: str
    ip: str
    username: str
    password: str = ""


@dataclass
class DockerConfig:
    images: List[str] = field(default_factory=list)
    registry_url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None


@dataclass
class InventoryContext:
    """
    Context handed to an inventory generator.
    """
    hosts: List[Host] = field(default_factory=list)
    docker: DockerConfig = field(default_factory=DockerConfig)
