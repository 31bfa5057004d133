"""Release run orchestration.

Wires the collaborators (files, git, hosting API) to the pure release core.
Steps run strictly in order:

    read manifest -> list tags -> check tag -> decide
        -> (if creating) read changelog -> create tag -> create release

Any Err aborts the run. Nothing is rolled back: if the release call fails
after the tag was pushed, the tag stays.
"""

from __future__ import annotations

from dataclasses import dataclass

from autorelease.core.config import ConfigError, ReleaseConfig
from autorelease.core.result import Err, Ok, Result
from autorelease.git.repository import VcsProtocol
from autorelease.hosting.github import CreatedRelease, ReleasesApi
from autorelease.output.console import ConsoleProtocol, Style
from autorelease.platform.files import FileAccess
from autorelease.release.changelog import changelog_with_fallback, extract_changelog, is_blank
from autorelease.release.decision import ReleaseDecision, decide_release
from autorelease.release.errors import RunError
from autorelease.release.manifest import read_current_version
from autorelease.release.tags import build_tag_name

__all__ = ["ReleaseService", "RunOutcome"]


def _bool_output(value: bool) -> str:
    return "true" if value else "false"


@dataclass(frozen=True, slots=True)
class RunOutcome:
    decision: ReleaseDecision
    release: CreatedRelease | None = None

    @property
    def release_created(self) -> bool:
        return self.release is not None

    def outputs(self) -> dict[str, str]:
        """Machine-readable outputs; release fields only when one was created."""
        out = {
            "version-changed": _bool_output(self.decision.version_changed),
            "version": self.decision.current_version,
            "release-created": _bool_output(self.release_created),
        }
        if self.release is not None:
            out["release-id"] = str(self.release.id)
            out["release-url"] = self.release.url
            out["tag-name"] = self.decision.new_tag_name
        return out


class ReleaseService:
    """Runs one release attempt.

    Args:
        config: Run configuration
        files: File access for the manifest and changelog
        vcs: Git access (tags)
        releases: Hosting API (None for dry runs)
        console: Progress output
    """

    def __init__(
        self,
        *,
        config: ReleaseConfig,
        files: FileAccess,
        vcs: VcsProtocol,
        releases: ReleasesApi | None,
        console: ConsoleProtocol,
    ) -> None:
        self._config = config
        self._files = files
        self._vcs = vcs
        self._releases = releases
        self._console = console

    def decide(self) -> Result[ReleaseDecision, RunError]:
        """Gather the facts and run the release gate, without side effects."""
        cfg = self._config
        console = self._console

        version = read_current_version(self._files, cfg.manifest_path)
        if isinstance(version, Err):
            return version
        current_version = version.value
        console.info(f"current version: {current_version}")

        tags = self._vcs.list_tags(cfg.tag_prefix)
        latest_tag = tags[0] if tags else None

        new_tag_name = build_tag_name(cfg.tag_prefix, current_version)
        tag_already_exists = self._vcs.tag_exists(new_tag_name)

        decision = decide_release(current_version, latest_tag, cfg.tag_prefix, tag_already_exists)
        self._report_decision(decision, tag_already_exists=tag_already_exists)
        return Ok(decision)

    def run(self) -> Result[RunOutcome, RunError]:
        cfg = self._config
        console = self._console

        console.header("Auto release")
        console.print(f"manifest: {cfg.manifest_path}", Style.DIM)
        console.print(f"changelog: {cfg.changelog_path}", Style.DIM)
        console.print(f"tag prefix: {cfg.tag_prefix}", Style.DIM)

        decided = self.decide()
        if isinstance(decided, Err):
            return decided
        decision = decided.value

        if not decision.should_create_release:
            console.success("done (no release created)")
            return Ok(RunOutcome(decision=decision))

        created = self._create(decision)
        if isinstance(created, Err):
            return created

        console.success("release created")
        console.info(f"release URL: {created.value.url}")
        return Ok(RunOutcome(decision=decision, release=created.value))

    def _create(self, decision: ReleaseDecision) -> Result[CreatedRelease, RunError]:
        cfg = self._config
        console = self._console

        if cfg.repo is None:
            return Err(ConfigError("repository not configured (set GITHUB_REPOSITORY or --repo)"))
        if self._releases is None:
            return Err(ConfigError("release API not configured"))

        version = decision.current_version
        console.info(f"extracting changelog for version {version}...")
        raw = extract_changelog(self._files, cfg.changelog_path, version, console)
        if isinstance(raw, Err):
            return raw
        body = changelog_with_fallback(raw.value, version)
        if is_blank(raw.value):
            console.warning("no changelog content found, using default message")

        tag = decision.new_tag_name
        console.info(f"creating tag: {tag}")
        tagged = self._vcs.create_tag(tag, f"Release {tag}")
        if isinstance(tagged, Err):
            return tagged

        console.info("creating GitHub release...")
        return self._releases.create_release(
            owner=cfg.repo.owner,
            repo=cfg.repo.name,
            tag_name=tag,
            title=tag,
            body=body,
            draft=cfg.create_draft,
            prerelease=cfg.create_prerelease,
        )

    def _report_decision(self, decision: ReleaseDecision, *, tag_already_exists: bool) -> None:
        console = self._console
        if decision.latest_version is None:
            console.info("no previous tags found, this will be the first release")
            return
        if not decision.latest_version:
            # tag equal to the prefix
            return

        console.info(f"latest tagged version: {decision.latest_version}")
        if not decision.version_changed:
            console.info("version unchanged, no release needed")
            return

        console.info(
            f"version changed from {decision.latest_version} to {decision.current_version}"
        )
        if tag_already_exists:
            console.warning(f"tag {decision.new_tag_name} already exists, skipping release")
