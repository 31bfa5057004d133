from __future__ import annotations

from pathlib import Path

from autorelease.core.result import Err, Ok
from autorelease.platform.files import FileAccess, FileReadError, LocalFiles


def test_relative_paths_resolve_against_root(tmp_path: Path) -> None:
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pkg" / "package.json").write_text('{"version": "1.0.0"}', encoding="utf-8")
    files = LocalFiles(tmp_path)

    assert files.exists("pkg/package.json") is True
    assert files.read_text("pkg/package.json") == Ok('{"version": "1.0.0"}')


def test_absolute_paths_are_used_as_is(tmp_path: Path) -> None:
    target = tmp_path / "CHANGELOG.md"
    target.write_text("## 1.0.0\n", encoding="utf-8")
    files = LocalFiles(tmp_path / "elsewhere")

    assert files.exists(str(target)) is True
    assert files.read_text(str(target)) == Ok("## 1.0.0\n")


def test_missing_file(tmp_path: Path) -> None:
    files = LocalFiles(tmp_path)

    assert files.exists("nope.json") is False
    result = files.read_text("nope.json")
    assert result == Err(FileReadError(path="nope.json", message="file not found"))


def test_directory_is_not_a_file(tmp_path: Path) -> None:
    (tmp_path / "CHANGELOG.md").mkdir()
    files = LocalFiles(tmp_path)

    assert files.exists("CHANGELOG.md") is False
    assert isinstance(files.read_text("CHANGELOG.md"), Err)


def test_invalid_utf8(tmp_path: Path) -> None:
    (tmp_path / "bad.md").write_bytes(b"\xff\xfe\xfa")

    result = LocalFiles(tmp_path).read_text("bad.md")

    assert isinstance(result, Err)
    assert "invalid UTF-8" in result.error.message


def test_read_error_str() -> None:
    error = FileReadError(path="a.json", message="permission denied")
    assert str(error) == "failed to read a.json: permission denied"


def test_local_files_satisfies_protocol(tmp_path: Path) -> None:
    assert isinstance(LocalFiles(tmp_path), FileAccess)
