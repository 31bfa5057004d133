"""Process and filesystem access."""

from .files import FileAccess, FileReadError, LocalFiles
from .process import ProcessError, run

__all__ = [
    "FileAccess",
    "FileReadError",
    "LocalFiles",
    "ProcessError",
    "run",
]
