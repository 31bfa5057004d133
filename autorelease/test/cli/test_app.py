from __future__ import annotations

import json
import os
from pathlib import Path

import pytest
from typer.testing import CliRunner

import autorelease.cli.app as app_mod
import autorelease.cli.context as context_mod
from autorelease import __version__
from autorelease.core.errors import ErrorCode
from autorelease.git.repository import GitError
from autorelease.hosting.github import ApiError, CreatedRelease
from autorelease.test.fakes import FakeReleases, FakeVcs

runner = CliRunner()

CHANGELOG = """# Changelog

## [1.1.0] - 2024-05-01

### Added
- Dark mode

## [1.0.0] - 2024-01-01

- Initial release
"""


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    for key in list(os.environ):
        if key.startswith("INPUT_") or key.startswith("GITHUB_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("GITHUB_OUTPUT", str(tmp_path / "github_output"))

    root = tmp_path / "repo"
    root.mkdir()
    (root / "package.json").write_text(json.dumps({"version": "1.1.0"}), encoding="utf-8")
    (root / "CHANGELOG.md").write_text(CHANGELOG, encoding="utf-8")
    return root


@pytest.fixture
def vcs(monkeypatch: pytest.MonkeyPatch) -> FakeVcs:
    fake = FakeVcs(tags=["v1.0.0"])

    def fake_repository(root: Path, console: object) -> FakeVcs:
        del root, console
        return fake

    monkeypatch.setattr(context_mod, "Repository", fake_repository)
    return fake


class RecordingReleases(FakeReleases):
    token: str = ""
    api_url: str = ""


@pytest.fixture
def releases(monkeypatch: pytest.MonkeyPatch) -> RecordingReleases:
    fake = RecordingReleases()

    def fake_github_releases(http: object, *, token: str, api_url: str) -> RecordingReleases:
        del http
        fake.token = token
        fake.api_url = api_url
        return fake

    monkeypatch.setattr(app_mod, "GitHubReleases", fake_github_releases)
    return fake


def _outputs(workspace: Path) -> dict[str, str]:
    path = workspace.parent / "github_output"
    if not path.exists():
        return {}
    pairs = (line.split("=", 1) for line in path.read_text(encoding="utf-8").splitlines())
    return {k: v for k, v in pairs}


# =============================================================================
# --version
# =============================================================================


def test_version_flag() -> None:
    result = runner.invoke(app_mod.app, ["--version"])

    assert result.exit_code == 0
    assert result.stdout.strip() == __version__


# =============================================================================
# changelog
# =============================================================================


def test_changelog_prints_section(workspace: Path) -> None:
    result = runner.invoke(app_mod.app, ["changelog", "v1.0.0", "--cwd", str(workspace)])

    assert result.exit_code == 0
    assert "- Initial release" in result.stdout
    assert "Dark mode" not in result.stdout


def test_changelog_missing_version_uses_fallback(workspace: Path) -> None:
    result = runner.invoke(app_mod.app, ["changelog", "9.9.9", "--cwd", str(workspace)])

    assert result.exit_code == 0
    assert "Release 9.9.9" in result.stdout


def test_changelog_custom_path(workspace: Path) -> None:
    (workspace / "docs").mkdir()
    (workspace / "docs" / "CHANGES.md").write_text("## 2.0.0\nBig one\n", encoding="utf-8")

    result = runner.invoke(
        app_mod.app,
        ["changelog", "2.0.0", "--changelog", "docs/CHANGES.md", "--cwd", str(workspace)],
    )

    assert result.exit_code == 0
    assert "Big one" in result.stdout


# =============================================================================
# decide
# =============================================================================


def test_decide_reports_without_side_effects(workspace: Path, vcs: FakeVcs) -> None:
    result = runner.invoke(app_mod.app, ["decide", "--cwd", str(workspace)])

    assert result.exit_code == 0, result.output
    assert _outputs(workspace) == {"version-changed": "true", "version": "1.1.0"}
    assert vcs.created == []


def test_decide_unchanged(workspace: Path, vcs: FakeVcs) -> None:
    vcs.tags = ["v1.1.0", "v1.0.0"]

    result = runner.invoke(app_mod.app, ["decide", "--cwd", str(workspace)])

    assert result.exit_code == 0
    assert _outputs(workspace)["version-changed"] == "false"


def test_decide_missing_manifest_is_config_error(workspace: Path, vcs: FakeVcs) -> None:
    result = runner.invoke(
        app_mod.app, ["decide", "--manifest", "nope.json", "--cwd", str(workspace)]
    )

    assert result.exit_code == ErrorCode.CONFIG_ERROR


def test_decide_invalid_manifest_is_parse_error(workspace: Path, vcs: FakeVcs) -> None:
    (workspace / "package.json").write_text("{not json", encoding="utf-8")

    result = runner.invoke(app_mod.app, ["decide", "--cwd", str(workspace)])

    assert result.exit_code == ErrorCode.PARSE_ERROR


def test_decide_tag_prefix_option(workspace: Path, vcs: FakeVcs) -> None:
    vcs.tags = ["release-1.1.0"]

    result = runner.invoke(
        app_mod.app, ["decide", "--tag-prefix", "release-", "--cwd", str(workspace)]
    )

    assert result.exit_code == 0
    assert vcs.listed_prefixes == ["release-"]
    assert _outputs(workspace)["version-changed"] == "false"


# =============================================================================
# run
# =============================================================================


def test_run_without_token_fails(workspace: Path, vcs: FakeVcs) -> None:
    result = runner.invoke(app_mod.app, ["run", "--cwd", str(workspace)])

    assert result.exit_code == ErrorCode.CONFIG_ERROR
    assert vcs.created == []


def test_run_invalid_repo_option(workspace: Path, vcs: FakeVcs) -> None:
    result = runner.invoke(
        app_mod.app, ["run", "--token", "t", "--repo", "nope", "--cwd", str(workspace)]
    )

    assert result.exit_code == ErrorCode.CONFIG_ERROR


def test_run_creates_tag_and_release(
    workspace: Path,
    vcs: FakeVcs,
    releases: RecordingReleases,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("INPUT_GITHUB-TOKEN", "s3cret")
    monkeypatch.setenv("GITHUB_REPOSITORY", "octo/widgets")

    result = runner.invoke(app_mod.app, ["run", "--prerelease", "--cwd", str(workspace)])

    assert result.exit_code == 0, result.output
    assert vcs.created == [("v1.1.0", "Release v1.1.0")]
    assert releases.token == "s3cret"
    assert releases.api_url == "https://api.github.com"
    call = releases.calls[0]
    assert call["owner"] == "octo"
    assert call["repo"] == "widgets"
    assert call["tag_name"] == "v1.1.0"
    assert call["prerelease"] is True
    assert call["draft"] is False
    assert "Dark mode" in str(call["body"])
    assert _outputs(workspace) == {
        "version-changed": "true",
        "version": "1.1.0",
        "release-created": "true",
        "release-id": "42",
        "release-url": "https://github.com/o/r/releases/42",
        "tag-name": "v1.1.0",
    }


def test_run_no_change_creates_nothing(
    workspace: Path,
    vcs: FakeVcs,
    releases: RecordingReleases,
) -> None:
    vcs.tags = ["v1.1.0"]

    result = runner.invoke(
        app_mod.app,
        ["run", "--token", "t", "--repo", "octo/widgets", "--cwd", str(workspace)],
    )

    assert result.exit_code == 0, result.output
    assert vcs.created == []
    assert releases.calls == []
    assert _outputs(workspace) == {
        "version-changed": "false",
        "version": "1.1.0",
        "release-created": "false",
    }


def test_run_git_failure_exit_code(
    workspace: Path,
    vcs: FakeVcs,
    releases: RecordingReleases,
) -> None:
    vcs.create_error = GitError(command="push origin", message="rejected")

    result = runner.invoke(
        app_mod.app,
        ["run", "--token", "t", "--repo", "octo/widgets", "--cwd", str(workspace)],
    )

    assert result.exit_code == ErrorCode.GIT_ERROR
    assert releases.calls == []
    assert _outputs(workspace) == {}


def test_run_api_failure_exit_code(
    workspace: Path,
    vcs: FakeVcs,
    releases: RecordingReleases,
) -> None:
    releases.result = ApiError(message="failed to create release v1.1.0", status=422)

    result = runner.invoke(
        app_mod.app,
        ["run", "--token", "t", "--repo", "octo/widgets", "--cwd", str(workspace)],
    )

    assert result.exit_code == ErrorCode.API_ERROR
    assert vcs.created == [("v1.1.0", "Release v1.1.0")]


def test_run_outside_actions_prints_unwrapped_outputs(
    workspace: Path,
    vcs: FakeVcs,
    releases: RecordingReleases,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("GITHUB_OUTPUT")
    url = "https://github.com/some-organisation/some-long-repository-name/releases/tag/v1.1.0"
    releases.result = CreatedRelease(id=7, url=url)

    result = runner.invoke(
        app_mod.app,
        ["run", "--token", "t", "--repo", "octo/widgets", "--cwd", str(workspace)],
    )

    assert result.exit_code == 0, result.output
    lines = result.stdout.splitlines()
    assert f"release-url={url}" in lines
    assert "release-id=7" in lines
