"""Exception hierarchy for crcf.

Every failure the scaffolder reports to the user derives from
``ScaffoldError``.  Each subclass carries the process exit code the CLI uses
when that failure ends a run, so callers can tell validation problems,
collisions and I/O failures apart without inspecting messages.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""

    exit_code: int = 1


class UsageError(ScaffoldError):
    """Raised for invalid arguments: reserved or missing names, bad paths."""

    exit_code = 2


class DirectoryExistsError(ScaffoldError):
    """Raised when a component directory is already present on disk."""

    exit_code = 3

    def __init__(self, path: str | Path, message: str = "") -> None:
        self.path = Path(path)
        super().__init__(message or f"Folder already exists at {self.path}")


class IndexExistsError(DirectoryExistsError):
    """Raised when the aggregate ``index.js`` already exists."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(path, f"index.js already exists at {path}")


class WriteFailureError(ScaffoldError):
    """Raised when a file could not be written after the directory was created.

    The component directory may hold a partial file set; it is left in place
    and must be removed by hand before retrying.
    """

    exit_code = 4

    def __init__(self, path: str | Path, cause: BaseException) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Error creating files in {self.path}: {cause}")


class PathNotFoundError(ScaffoldError):
    """Raised when the directory handed to the aggregator does not exist."""

    exit_code = 4

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"No such file or directory {self.path}")
