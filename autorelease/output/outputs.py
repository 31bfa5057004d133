"""Machine-readable run outputs (key/value).

Inside GitHub Actions outputs are appended to the file named by
GITHUB_OUTPUT; elsewhere they are printed as `name=value` lines.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

import typer

__all__ = [
    "GithubOutputFile",
    "MockOutputs",
    "OutputSink",
    "StdoutOutputs",
    "write_outputs",
]


class OutputSink(Protocol):
    def set_output(self, name: str, value: str) -> None:
        ...


def _make_delimiter(value: str) -> str:
    delimiter = f"ghadelimiter_{uuid.uuid4().hex}"
    while delimiter in value:
        delimiter = f"ghadelimiter_{uuid.uuid4().hex}"
    return delimiter


class GithubOutputFile:
    """Append outputs to a GITHUB_OUTPUT file.

    Multi-line values use the heredoc form (`name<<DELIM`).
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def set_output(self, name: str, value: str) -> None:
        with self.path.open("a", encoding="utf-8") as out:
            if "\n" in value or "\r" in value:
                delimiter = _make_delimiter(value)
                out.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
            else:
                out.write(f"{name}={value}\n")


class StdoutOutputs:
    """Print outputs as `name=value` lines on stdout, one per output, never wrapped."""

    def set_output(self, name: str, value: str) -> None:
        typer.echo(f"{name}={value}")


def _empty_values() -> dict[str, str]:
    return {}


@dataclass
class MockOutputs:
    """Captures outputs for tests."""

    values: dict[str, str] = field(default_factory=_empty_values)

    def set_output(self, name: str, value: str) -> None:
        self.values[name] = value


def write_outputs(sink: OutputSink, outputs: Mapping[str, str]) -> None:
    for name, value in outputs.items():
        sink.set_output(name, value)
