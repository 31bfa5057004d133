"""Filesystem access for manifest and changelog reads.

FileAccess is the seam the release flow reads through; tests pass an
in-memory implementation instead of touching disk.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from autorelease.core.result import Err, Ok, Result

__all__ = ["FileAccess", "FileReadError", "LocalFiles"]


@dataclass(frozen=True, slots=True)
class FileReadError:
    """A file exists (or was expected) but could not be read."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"failed to read {self.path}: {self.message}"


@runtime_checkable
class FileAccess(Protocol):
    """Read-only file access used by the release flow."""

    def exists(self, path: str) -> bool:
        """Return True if a regular file exists at path."""
        ...

    def read_text(self, path: str) -> Result[str, FileReadError]:
        """Read a UTF-8 text file."""
        ...


class LocalFiles:
    """FileAccess backed by the local filesystem.

    Relative paths are resolved against `root` (the repository checkout).
    """

    def __init__(self, root: Path) -> None:
        self.root = root

    def _resolve(self, path: str) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self.root / p

    def exists(self, path: str) -> bool:
        return self._resolve(path).is_file()

    def read_text(self, path: str) -> Result[str, FileReadError]:
        try:
            return Ok(self._resolve(path).read_text(encoding="utf-8"))
        except FileNotFoundError:
            return Err(FileReadError(path=path, message="file not found"))
        except PermissionError:
            return Err(FileReadError(path=path, message="permission denied"))
        except UnicodeDecodeError as e:
            return Err(FileReadError(path=path, message=f"invalid UTF-8: {e}"))
        except OSError as e:
            return Err(FileReadError(path=path, message=str(e)))
