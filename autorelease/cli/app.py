from __future__ import annotations

from pathlib import Path

import typer

from autorelease import __version__
from autorelease.cli.context import CLIContext, build_context
from autorelease.core.config import ConfigError, ReleaseConfig, RepoRef
from autorelease.core.errors import ErrorCode
from autorelease.core.result import Err
from autorelease.hosting.github import GitHubReleases
from autorelease.hosting.http import RealHttpClient
from autorelease.output.errors import print_run_error, run_error_exit_code
from autorelease.output.outputs import write_outputs
from autorelease.release.changelog import changelog_with_fallback, extract_changelog
from autorelease.release.errors import RunError
from autorelease.services.release import ReleaseService

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def _fail(ctx: CLIContext, error: RunError) -> typer.Exit:
    print_run_error(error, ctx.console)
    return typer.Exit(code=run_error_exit_code(error))


def _apply_options(
    ctx: CLIContext,
    *,
    token: str | None = None,
    manifest: str | None = None,
    changelog: str | None = None,
    tag_prefix: str | None = None,
    draft: bool | None = None,
    prerelease: bool | None = None,
    repo: str | None = None,
) -> ReleaseConfig:
    repo_ref: RepoRef | None = None
    if repo is not None:
        repo_ref = RepoRef.parse(repo)
        if repo_ref is None:
            raise _fail(ctx, ConfigError(f"invalid --repo (expected owner/repo): {repo}"))

    return ctx.config.with_overrides(
        github_token=token,
        manifest_path=manifest,
        changelog_path=changelog,
        tag_prefix=tag_prefix,
        create_draft=draft,
        create_prerelease=prerelease,
        repo=repo_ref,
    )


@app.command()
def run(
    token: str | None = typer.Option(None, "--token", help="Auth token for the hosting API."),
    manifest: str | None = typer.Option(None, "--manifest", help="Manifest path."),
    changelog: str | None = typer.Option(None, "--changelog", help="Changelog path."),
    tag_prefix: str | None = typer.Option(None, "--tag-prefix", help="Tag prefix."),
    draft: bool | None = typer.Option(None, "--draft/--no-draft", help="Create a draft."),
    prerelease: bool | None = typer.Option(
        None, "--prerelease/--no-prerelease", help="Mark as prerelease."
    ),
    repo: str | None = typer.Option(None, "--repo", help="Repository (owner/repo)."),
    cwd: Path | None = typer.Option(None, "--cwd", help="Repository checkout root."),
) -> None:
    """Create a tag and release when the manifest version changed."""
    ctx = build_context(cwd)
    config = _apply_options(
        ctx,
        token=token,
        manifest=manifest,
        changelog=changelog,
        tag_prefix=tag_prefix,
        draft=draft,
        prerelease=prerelease,
        repo=repo,
    )
    if not config.github_token:
        raise _fail(ctx, ConfigError("input required: github-token"))

    releases = GitHubReleases(
        RealHttpClient(),
        token=config.github_token,
        api_url=config.api_url,
    )
    service = ReleaseService(
        config=config,
        files=ctx.files,
        vcs=ctx.repo,
        releases=releases,
        console=ctx.console,
    )
    result = service.run()
    if isinstance(result, Err):
        raise _fail(ctx, result.error)

    write_outputs(ctx.outputs, result.value.outputs())


@app.command()
def decide(
    manifest: str | None = typer.Option(None, "--manifest", help="Manifest path."),
    tag_prefix: str | None = typer.Option(None, "--tag-prefix", help="Tag prefix."),
    cwd: Path | None = typer.Option(None, "--cwd", help="Repository checkout root."),
) -> None:
    """Show whether a release would be created (no tag, no release)."""
    ctx = build_context(cwd)
    config = _apply_options(ctx, manifest=manifest, tag_prefix=tag_prefix)

    service = ReleaseService(
        config=config,
        files=ctx.files,
        vcs=ctx.repo,
        releases=None,
        console=ctx.console,
    )
    result = service.decide()
    if isinstance(result, Err):
        raise _fail(ctx, result.error)

    decision = result.value
    ctx.console.info(f"tag: {decision.new_tag_name}")
    would_create = "yes" if decision.should_create_release else "no"
    ctx.console.info(f"would create release: {would_create}")
    write_outputs(
        ctx.outputs,
        {
            "version-changed": "true" if decision.version_changed else "false",
            "version": decision.current_version,
        },
    )


@app.command("changelog")
def changelog_cmd(
    version: str = typer.Argument(..., help="Version to extract (leading 'v' ignored)."),
    changelog: str | None = typer.Option(None, "--changelog", help="Changelog path."),
    cwd: Path | None = typer.Option(None, "--cwd", help="Repository checkout root."),
) -> None:
    """Print the changelog section for VERSION."""
    ctx = build_context(cwd)
    config = _apply_options(ctx, changelog=changelog)

    result = extract_changelog(ctx.files, config.changelog_path, version, ctx.console)
    if isinstance(result, Err):
        raise _fail(ctx, result.error)
    typer.echo(changelog_with_fallback(result.value, version))


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=int(ErrorCode.OK))


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    del version


def main() -> None:
    app()
