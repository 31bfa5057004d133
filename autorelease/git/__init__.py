"""Git operations used to tag releases.

Usage:
    from autorelease.git import Repository

    repo = Repository(Path("."), console)
    latest = next(iter(repo.list_tags("v")), None)
"""

from autorelease.git.repository import GitError, Repository, VcsProtocol, parse_tag_list

__all__ = [
    "GitError",
    "Repository",
    "VcsProtocol",
    "parse_tag_list",
]
