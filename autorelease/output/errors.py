"""Error presentation for a failed release run.

A failed run reports a single terminal message and exits with the code of
its failure category.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from autorelease.core.config import ConfigError
from autorelease.core.errors import ErrorCode
from autorelease.git.repository import GitError
from autorelease.hosting.github import ApiError
from autorelease.output.console import Style
from autorelease.platform.files import FileReadError
from autorelease.release.errors import ParseError

if TYPE_CHECKING:
    from autorelease.output.console import ConsoleProtocol
    from autorelease.release.errors import RunError

__all__ = ["format_run_error", "print_run_error", "run_error_exit_code"]


def format_run_error(error: RunError) -> str:
    match error:
        case ConfigError(message=message):
            return message
        case ParseError(message=message):
            return message
        case FileReadError():
            return str(error)
        case GitError(command=command, message=message):
            return f"git {command} failed: {message}"
        case ApiError(message=message):
            return message


def print_run_error(error: RunError, console: ConsoleProtocol) -> None:
    console.error(format_run_error(error))
    hint = getattr(error, "hint", None)
    if hint:
        console.print(f"hint: {hint}", Style.DIM)


def run_error_exit_code(error: RunError) -> int:
    match error:
        case ConfigError():
            return int(ErrorCode.CONFIG_ERROR)
        case ParseError():
            return int(ErrorCode.PARSE_ERROR)
        case FileReadError():
            return int(ErrorCode.IO_ERROR)
        case GitError():
            return int(ErrorCode.GIT_ERROR)
        case ApiError():
            return int(ErrorCode.API_ERROR)
