"""Typed configuration for a release run.

Options are read once at start from the process environment. Inputs follow
the GitHub Actions convention: an input named `tag-prefix` arrives as the
environment variable `INPUT_TAG-PREFIX`. Empty inputs fall back to their
defaults.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from .result import Err, Ok, Result

__all__ = [
    "ConfigError",
    "DEFAULT_API_URL",
    "DEFAULT_CHANGELOG_PATH",
    "DEFAULT_MANIFEST_PATH",
    "DEFAULT_TAG_PREFIX",
    "ReleaseConfig",
    "RepoRef",
    "get_input",
    "load_config",
]

DEFAULT_MANIFEST_PATH = "package.json"
DEFAULT_CHANGELOG_PATH = "CHANGELOG.md"
DEFAULT_TAG_PREFIX = "v"
DEFAULT_API_URL = "https://api.github.com"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Missing or invalid configuration, or a manifest without a usable version."""

    message: str
    path: str | None = None


@dataclass(frozen=True, slots=True)
class RepoRef:
    """Hosting repository coordinates (`owner/name`)."""

    owner: str
    name: str

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.name}"

    @classmethod
    def parse(cls, value: str) -> RepoRef | None:
        owner, sep, name = value.strip().partition("/")
        if not sep or not owner or not name or "/" in name:
            return None
        return cls(owner=owner, name=name)


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Options for one release run.

    Attributes:
        github_token: Credential for hosting-API calls (may be empty for dry runs)
        manifest_path: Location of the version-declaration file
        changelog_path: Location of the changelog document
        tag_prefix: Prepended to the version to form tag names
        create_draft: Mark the created release as a draft
        create_prerelease: Mark the created release as a prerelease
        repo: Repository the release is published to
        api_url: Hosting API base URL
        output_file: File receiving machine-readable outputs (GITHUB_OUTPUT)
        in_actions: True when running inside a GitHub Actions job
    """

    github_token: str = ""
    manifest_path: str = DEFAULT_MANIFEST_PATH
    changelog_path: str = DEFAULT_CHANGELOG_PATH
    tag_prefix: str = DEFAULT_TAG_PREFIX
    create_draft: bool = False
    create_prerelease: bool = False
    repo: RepoRef | None = None
    api_url: str = DEFAULT_API_URL
    output_file: Path | None = None
    in_actions: bool = False

    def with_overrides(
        self,
        *,
        github_token: str | None = None,
        manifest_path: str | None = None,
        changelog_path: str | None = None,
        tag_prefix: str | None = None,
        create_draft: bool | None = None,
        create_prerelease: bool | None = None,
        repo: RepoRef | None = None,
    ) -> ReleaseConfig:
        """Return a copy with every non-None argument applied."""
        changes: dict[str, object] = {
            "github_token": github_token,
            "manifest_path": manifest_path,
            "changelog_path": changelog_path,
            "tag_prefix": tag_prefix,
            "create_draft": create_draft,
            "create_prerelease": create_prerelease,
            "repo": repo,
        }
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def get_input(env: Mapping[str, str], name: str) -> str:
    """Read an action input the way the Actions toolkit does (trimmed, "" if unset)."""
    key = f"INPUT_{name.replace(' ', '_').upper()}"
    return env.get(key, "").strip()


def _get_bool_input(env: Mapping[str, str], name: str) -> bool:
    return get_input(env, name) == "true"


def load_config(
    env: Mapping[str, str] | None = None,
    *,
    require_token: bool = True,
) -> Result[ReleaseConfig, ConfigError]:
    """Build the run configuration from environment variables.

    Args:
        env: Environment mapping (defaults to os.environ)
        require_token: Fail when no auth token is configured

    Returns:
        Ok(ReleaseConfig) on success, Err(ConfigError) on failure
    """
    if env is None:
        env = os.environ

    token = get_input(env, "github-token") or env.get("GITHUB_TOKEN", "").strip()
    if require_token and not token:
        return Err(ConfigError("input required: github-token"))

    repo: RepoRef | None = None
    slug = env.get("GITHUB_REPOSITORY", "").strip()
    if slug:
        repo = RepoRef.parse(slug)
        if repo is None:
            return Err(ConfigError(f"invalid GITHUB_REPOSITORY (expected owner/repo): {slug}"))

    output = env.get("GITHUB_OUTPUT", "").strip()

    return Ok(
        ReleaseConfig(
            github_token=token,
            manifest_path=get_input(env, "package-json-path") or DEFAULT_MANIFEST_PATH,
            changelog_path=get_input(env, "changelog-path") or DEFAULT_CHANGELOG_PATH,
            tag_prefix=get_input(env, "tag-prefix") or DEFAULT_TAG_PREFIX,
            create_draft=_get_bool_input(env, "create-draft"),
            create_prerelease=_get_bool_input(env, "create-prerelease"),
            repo=repo,
            api_url=(env.get("GITHUB_API_URL", "").strip() or DEFAULT_API_URL).rstrip("/"),
            output_file=Path(output) if output else None,
            in_actions=env.get("GITHUB_ACTIONS", "").strip() == "true",
        )
    )
