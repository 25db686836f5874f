from enum import Enum
from typing import Optional


class WorkspaceSyncError(Exception):
    """Base class for every error raised by Workspace_Sync."""


class PathEscapeError(WorkspaceSyncError, ValueError):
    """A computed relative path would leave its declared base directory."""

    def __init__(self, path, base=None):
        self.path = str(path)
        self.base = None if base is None else str(base)
        if self.base is None:
            message = f'Path "{self.path}" escapes its base directory'
        else:
            message = f'Path "{self.path}" is not under base path "{self.base}"'
        super().__init__(message)


class UnsupportedDataFormatError(WorkspaceSyncError, TypeError):
    """File content could not be coerced into bytes."""


class FilesystemError(WorkspaceSyncError):
    """
    Wraps an underlying OSError together with the path and the
    operation ("stat", "mkdir", "scandir", "read", "write") that failed.
    """

    def __init__(self, path, operation: str, reason: Optional[str] = None):
        self.path = str(path)
        self.operation = operation
        self.reason = reason
        message = f"{operation} failed for {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class GeneratorStage(str, Enum):
    INVALID_ARGUMENT = "invalid_argument"
    LOAD = "load"
    MISSING_CALLABLE = "missing_callable"
    EXECUTION = "execution"
    INVALID_RESULT = "invalid_result"
    SERIALIZATION = "serialization"


class GeneratorError(WorkspaceSyncError):
    """Failure while producing a generated file (e.g. inventory.json)."""

    def __init__(self, stage: GeneratorStage, message: str):
        self.stage = stage
        super().__init__(f"[{stage.value}] {message}")
