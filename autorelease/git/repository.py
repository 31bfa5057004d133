"""Git repository access for the release flow.

Repository wraps the `git` binary for the handful of operations a release
needs: listing version tags, checking whether a tag exists, creating and
pushing an annotated tag, and reading a file as of a tag.

Usage:
    repo = Repository(Path("."), console)

    tags = repo.list_tags("v")            # newest first
    if not repo.tag_exists("v1.2.0"):
        match repo.create_tag("v1.2.0", "Release v1.2.0"):
            case Ok(_):
                print("tagged")
            case Err(e):
                print(f"git failed: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from autorelease.core.result import Err, Ok, Result
from autorelease.output.console import ConsoleProtocol
from autorelease.platform.process import ProcessError
from autorelease.platform.process import run as run_process

__all__ = [
    "BOT_EMAIL",
    "BOT_NAME",
    "GitError",
    "Repository",
    "VcsProtocol",
    "parse_tag_list",
]

BOT_NAME = "github-actions[bot]"
BOT_EMAIL = "github-actions[bot]@users.noreply.github.com"


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git command that failed
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


class VcsProtocol(Protocol):
    """Version-control operations consumed by the release flow."""

    def list_tags(self, prefix: str) -> list[str]:
        """Tags starting with prefix, newest version first ([] on failure)."""
        ...

    def tag_exists(self, name: str) -> bool:
        ...

    def create_tag(self, name: str, message: str) -> Result[None, GitError]:
        """Create an annotated tag and push it to origin."""
        ...

    def read_file_at_tag(self, tag: str, path: str) -> Result[str, GitError]:
        ...


def parse_tag_list(output: str) -> list[str]:
    """Split `git tag -l` output into tag names, dropping blank lines."""
    return [line.strip() for line in output.strip().splitlines() if line.strip()]


class Repository:
    """Git repository backed by the `git` binary.

    Attributes:
        path: Path to the repository root
    """

    def __init__(self, path: Path, console: ConsoleProtocol) -> None:
        self.path = path
        self._console = console

    def list_tags(self, prefix: str) -> list[str]:
        """List tags matching `prefix*`, sorted by descending version.

        A failing `git tag` is not fatal: it is reported as a warning and
        treated as "no prior tags".
        """
        result = self._run(["tag", "-l", f"{prefix}*", "--sort=-v:refname"])
        match result:
            case Err(e):
                self._console.warning(f"git tag command failed: {e.stderr.strip()}")
                return []
            case Ok(stdout):
                return parse_tag_list(stdout)

    def tag_exists(self, name: str) -> bool:
        return isinstance(self._run(["rev-parse", name]), Ok)

    def create_tag(self, name: str, message: str) -> Result[None, GitError]:
        """Create an annotated tag as the Actions bot and push it to origin.

        Fails if the tag already exists locally or on the remote.

        Returns:
            Ok(None) on success
            Err(GitError) from the first step that failed
        """
        steps: list[tuple[str, list[str]]] = [
            ("config user.name", ["config", "user.name", BOT_NAME]),
            ("config user.email", ["config", "user.email", BOT_EMAIL]),
            ("tag -a", ["tag", "-a", name, "-m", message]),
            ("push origin", ["push", "origin", name]),
        ]
        for command, args in steps:
            result = self._run(args)
            if isinstance(result, Err):
                return Err(_git_error(command, result.error, f"git {command} failed"))

        self._console.info(f"created and pushed tag: {name}")
        return Ok(None)

    def read_file_at_tag(self, tag: str, path: str) -> Result[str, GitError]:
        result = self._run(["show", f"{tag}:{path}"])
        match result:
            case Err(e):
                return Err(
                    GitError(
                        command="show",
                        message=f"failed to get {path} from tag {tag}: {e.stderr.strip()}",
                        returncode=e.returncode,
                    )
                )
            case Ok(stdout):
                return Ok(stdout)

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        return run_process(["git", "-C", str(self.path), *args], cwd=self.path)


def _git_error(command: str, error: ProcessError, fallback: str) -> GitError:
    return GitError(
        command=command,
        message=error.stderr.strip() or error.stdout.strip() or fallback,
        returncode=error.returncode,
    )
