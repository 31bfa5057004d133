"""Release decision core: manifest and changelog parsing, tag names, the release gate.

Everything here is pure except the `read_*` / `extract_*` helpers, which go
through an injected FileAccess.
"""

from autorelease.release.changelog import (
    changelog_with_fallback,
    extract_changelog,
    parse_changelog_section,
)
from autorelease.release.decision import ReleaseDecision, decide_release
from autorelease.release.manifest import parse_manifest_version, read_current_version
from autorelease.release.tags import build_tag_name, extract_version_from_tag

__all__ = [
    "ReleaseDecision",
    "build_tag_name",
    "changelog_with_fallback",
    "decide_release",
    "extract_changelog",
    "extract_version_from_tag",
    "parse_changelog_section",
    "parse_manifest_version",
    "read_current_version",
]
