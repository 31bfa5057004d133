"""Release decision: should this run cut a new release?

The decision is a pure function of three facts gathered beforehand: the
current manifest version, the newest existing tag, and whether the tag for
the current version already exists.

    latest tag | same version | tag exists | changed | create
    -----------+--------------+------------+---------+-------
    none       | -            | -          | yes     | yes
    present    | yes          | -          | no      | no
    present    | no           | yes        | yes     | no
    present    | no           | no         | yes     | yes

Versions are compared as exact strings: `1.0.0` and `1.0.0+build.1` differ.
"""

from __future__ import annotations

from dataclasses import dataclass

from autorelease.release.tags import build_tag_name, extract_version_from_tag

__all__ = ["ReleaseDecision", "decide_release"]


@dataclass(frozen=True, slots=True)
class ReleaseDecision:
    """Outcome of the release gate.

    Attributes:
        version_changed: Current version differs from the latest tagged one
        should_create_release: A tag and release must be created
        new_tag_name: Tag for the current version (always set)
        current_version: Version read from the manifest
        latest_version: Version of the newest tag, None when there was no tag
    """

    version_changed: bool
    should_create_release: bool
    new_tag_name: str
    current_version: str
    latest_version: str | None = None

    def __post_init__(self) -> None:
        if self.should_create_release and not self.version_changed:
            raise ValueError("a release requires a version change")

    @property
    def is_first_release(self) -> bool:
        return self.latest_version is None


def decide_release(
    current_version: str,
    latest_tag: str | None,
    tag_prefix: str,
    tag_already_exists: bool,
) -> ReleaseDecision:
    """Decide whether to create a release.

    Args:
        current_version: Version from the manifest (non-empty)
        latest_tag: Newest existing tag, or None/"" when there is none
        tag_prefix: Tag prefix (may be empty)
        tag_already_exists: Whether the tag for current_version already exists

    Returns:
        The decision; new_tag_name is prefix + current_version in every case
    """
    new_tag_name = build_tag_name(tag_prefix, current_version)

    if not latest_tag:
        return ReleaseDecision(
            version_changed=True,
            should_create_release=True,
            new_tag_name=new_tag_name,
            current_version=current_version,
        )

    latest_version = extract_version_from_tag(latest_tag, tag_prefix)

    if current_version == latest_version:
        return ReleaseDecision(
            version_changed=False,
            should_create_release=False,
            new_tag_name=new_tag_name,
            current_version=current_version,
            latest_version=latest_version,
        )

    return ReleaseDecision(
        version_changed=True,
        should_create_release=not tag_already_exists,
        new_tag_name=new_tag_name,
        current_version=current_version,
        latest_version=latest_version,
    )
