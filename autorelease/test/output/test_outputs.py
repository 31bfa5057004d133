from __future__ import annotations

from pathlib import Path

import pytest

from autorelease.output.outputs import (
    GithubOutputFile,
    MockOutputs,
    StdoutOutputs,
    write_outputs,
)


def test_github_output_file_appends(tmp_path: Path) -> None:
    path = tmp_path / "github_output"
    path.write_text("existing=1\n", encoding="utf-8")
    sink = GithubOutputFile(path)

    sink.set_output("version-changed", "true")
    sink.set_output("version", "1.2.0")

    assert path.read_text(encoding="utf-8") == "existing=1\nversion-changed=true\nversion=1.2.0\n"


def test_github_output_file_multiline_uses_heredoc(tmp_path: Path) -> None:
    path = tmp_path / "github_output"
    sink = GithubOutputFile(path)

    sink.set_output("notes", "line one\nline two")

    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("notes<<ghadelimiter_")
    delimiter = lines[0].split("<<", 1)[1]
    assert lines[1:] == ["line one", "line two", delimiter]


def test_github_output_file_creates_missing_file(tmp_path: Path) -> None:
    path = tmp_path / "out"
    GithubOutputFile(path).set_output("release-created", "false")
    assert path.read_text(encoding="utf-8") == "release-created=false\n"


def test_stdout_outputs(capsys: pytest.CaptureFixture[str]) -> None:
    StdoutOutputs().set_output("version", "2.0.0")
    assert capsys.readouterr().out == "version=2.0.0\n"


def test_stdout_outputs_long_value_stays_on_one_line(capsys: pytest.CaptureFixture[str]) -> None:
    url = (
        "https://github.com/some-organisation/some-long-repository-name"
        "/releases/tag/v1.2.3-beta.4"
    )

    StdoutOutputs().set_output("release-url", url)

    assert capsys.readouterr().out.splitlines() == [f"release-url={url}"]


def test_write_outputs_preserves_order(capsys: pytest.CaptureFixture[str]) -> None:
    write_outputs(StdoutOutputs(), {"version-changed": "true", "version": "2.0.0"})

    assert capsys.readouterr().out == "version-changed=true\nversion=2.0.0\n"


def test_mock_outputs() -> None:
    sink = MockOutputs()
    write_outputs(sink, {"a": "1", "b": "2"})
    assert sink.values == {"a": "1", "b": "2"}
