"""Error types for a release run.

Each step returns one of these payloads in an Err; RunError is the union the
orchestration hands back to the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from autorelease.core.config import ConfigError
from autorelease.git.repository import GitError
from autorelease.hosting.github import ApiError
from autorelease.platform.files import FileReadError

__all__ = [
    "ApiError",
    "ConfigError",
    "FileReadError",
    "GitError",
    "ParseError",
    "RunError",
]


@dataclass(frozen=True, slots=True)
class ParseError:
    """Manifest content is not valid JSON."""

    message: str
    path: str | None = None


RunError: TypeAlias = ParseError | ConfigError | FileReadError | GitError | ApiError
