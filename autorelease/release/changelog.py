"""Changelog section extraction.

A changelog is addressed by level-2 headings. The section for a version runs
from its heading to the next `## ` line (or the end of the document). The
heading match is deliberately loose so the usual styles all work:

    ## [1.2.3] - 2025-01-01
    ## 1.2.3 - 2025-01-01
    ## [1.2.3]
    ## 1.2.3

Known limitation: the version may appear anywhere after `## `, so a heading
that merely mentions the version in its text (e.g. `## Notes on 1.2.3`)
matches too. The first matching heading wins.
"""

from __future__ import annotations

import re

from autorelease.core.result import Err, Ok, Result
from autorelease.output.console import ConsoleProtocol
from autorelease.platform.files import FileAccess, FileReadError

__all__ = [
    "changelog_with_fallback",
    "extract_changelog",
    "is_blank",
    "parse_changelog_section",
    "replace_tabs",
    "trim_blank_edges",
]

_HEADING_PREFIX = "## "
_TAB_SIZE = 4


def is_blank(value: str | None) -> bool:
    """True for None, "" and whitespace-only strings."""
    return not value or not value.strip()


def replace_tabs(line: str, tab_size: int = _TAB_SIZE) -> str:
    return line.replace("\t", " " * tab_size)


def trim_blank_edges(lines: list[str]) -> list[str]:
    """Drop blank lines from both ends; interior blank lines are kept."""
    start = 0
    end = len(lines)
    while start < end and is_blank(lines[start]):
        start += 1
    while end > start and is_blank(lines[end - 1]):
        end -= 1
    return lines[start:end]


def _heading_pattern(version: str) -> re.Pattern[str]:
    return re.compile(rf"^{re.escape(_HEADING_PREFIX)}.*\[?{re.escape(version)}\]?")


def _find_heading(lines: list[str], version: str) -> int | None:
    heading = _heading_pattern(version.removeprefix("v"))
    return next((i for i, line in enumerate(lines) if heading.match(line)), None)


def parse_changelog_section(content: str, version: str) -> str:
    """Return the changelog body for version, or "" if there is no heading for it.

    Args:
        content: Full changelog document
        version: Version to look up; one leading "v" is ignored

    Returns:
        Section lines between the version heading and the next heading, with
        blank edge lines trimmed and tabs expanded to four spaces
    """
    lines = content.split("\n")
    start = _find_heading(lines, version)
    if start is None:
        return ""
    return _section_body(lines, start)


def _section_body(lines: list[str], start: int) -> str:
    end = next(
        (i for i in range(start + 1, len(lines)) if lines[i].startswith(_HEADING_PREFIX)),
        len(lines),
    )

    body = trim_blank_edges(lines[start + 1 : end])
    return "\n".join(replace_tabs(line) for line in body)


def changelog_with_fallback(content: str, version: str) -> str:
    """Use content unless it is exactly "", else a default release body.

    Whitespace-only content is kept as is.
    """
    if content == "":
        return f"Release {version}"
    return content


def extract_changelog(
    files: FileAccess,
    path: str,
    version: str,
    console: ConsoleProtocol,
) -> Result[str, FileReadError]:
    """Read the changelog at path and return the section for version.

    A missing changelog file or a missing version heading is not an error:
    both are reported as warnings and yield "".
    """
    if not files.exists(path):
        console.warning(f"changelog not found at {path}")
        return Ok("")

    content = files.read_text(path)
    if isinstance(content, Err):
        return content

    lines = content.value.split("\n")
    start = _find_heading(lines, version)
    if start is None:
        console.warning(f"version {version.removeprefix('v')} not found in {path}")
        return Ok("")
    return Ok(_section_body(lines, start))
