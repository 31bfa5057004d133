from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from autorelease.core.config import ReleaseConfig, load_config
from autorelease.core.errors import ErrorCode
from autorelease.core.result import Err
from autorelease.git.repository import Repository
from autorelease.output.console import ActionsConsole, ConsoleProtocol, RichConsole
from autorelease.output.outputs import GithubOutputFile, OutputSink, StdoutOutputs
from autorelease.platform.files import LocalFiles


@dataclass(frozen=True, slots=True)
class CLIContext:
    root: Path
    config: ReleaseConfig
    console: ConsoleProtocol
    files: LocalFiles
    repo: Repository
    outputs: OutputSink


def build_context(root: Path | None = None) -> CLIContext:
    """Load configuration from the environment and construct the collaborators."""
    config_result = load_config(require_token=False)
    if isinstance(config_result, Err):
        typer.echo(f"error: {config_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))
    config = config_result.value

    root = (root or Path.cwd()).resolve()
    console: ConsoleProtocol = ActionsConsole() if config.in_actions else RichConsole(stderr=True)
    outputs: OutputSink = (
        GithubOutputFile(config.output_file)
        if config.output_file is not None
        else StdoutOutputs()
    )

    return CLIContext(
        root=root,
        config=config,
        console=console,
        files=LocalFiles(root),
        repo=Repository(root, console),
        outputs=outputs,
    )
