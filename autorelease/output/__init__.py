"""User-facing output: console lines and machine-readable run outputs."""

from autorelease.output.console import (
    ActionsConsole,
    ConsoleProtocol,
    MockConsole,
    RichConsole,
    Style,
)
from autorelease.output.outputs import GithubOutputFile, MockOutputs, OutputSink

__all__ = [
    "ActionsConsole",
    "ConsoleProtocol",
    "GithubOutputFile",
    "MockConsole",
    "MockOutputs",
    "OutputSink",
    "RichConsole",
    "Style",
]
