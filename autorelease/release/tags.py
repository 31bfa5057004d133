"""Tag names: `prefix + version`, nothing in between."""

from __future__ import annotations

__all__ = ["build_tag_name", "extract_version_from_tag"]


def build_tag_name(prefix: str, version: str) -> str:
    return f"{prefix}{version}"


def extract_version_from_tag(tag: str, prefix: str) -> str:
    """Strip prefix from tag; a tag without the prefix is returned unchanged."""
    if tag.startswith(prefix):
        return tag[len(prefix) :]
    return tag
