"""GitHub Releases API.

Creates the release record for a freshly pushed tag through the REST API
(`POST /repos/{owner}/{repo}/releases`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from autorelease.core.result import Err, Ok, Result
from autorelease.core.structured import get_int, get_str
from autorelease.hosting.http import HttpClient

__all__ = ["ApiError", "CreatedRelease", "GitHubReleases", "ReleasesApi"]

_ACCEPT = "application/vnd.github+json"
_API_VERSION = "2022-11-28"


@dataclass(frozen=True, slots=True)
class ApiError:
    """Hosting-platform call failure (auth, rate limiting, network, payload)."""

    message: str
    status: int = 0
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class CreatedRelease:
    id: int
    url: str


class ReleasesApi(Protocol):
    def create_release(
        self,
        *,
        owner: str,
        repo: str,
        tag_name: str,
        title: str,
        body: str,
        draft: bool,
        prerelease: bool,
    ) -> Result[CreatedRelease, ApiError]:
        ...


class GitHubReleases:
    """ReleasesApi backed by the GitHub REST API."""

    def __init__(self, http: HttpClient, *, token: str, api_url: str) -> None:
        self._http = http
        self._token = token
        self._api_url = api_url.rstrip("/")

    def create_release(
        self,
        *,
        owner: str,
        repo: str,
        tag_name: str,
        title: str,
        body: str,
        draft: bool,
        prerelease: bool,
    ) -> Result[CreatedRelease, ApiError]:
        endpoint = f"{self._api_url}/repos/{owner}/{repo}/releases"
        result = self._http.post_json(
            endpoint,
            {
                "tag_name": tag_name,
                "name": title,
                "body": body,
                "draft": draft,
                "prerelease": prerelease,
            },
            headers={
                "Accept": _ACCEPT,
                "Authorization": f"Bearer {self._token}",
                "X-GitHub-Api-Version": _API_VERSION,
            },
        )
        if isinstance(result, Err):
            e = result.error
            return Err(
                ApiError(
                    message=f"failed to create release {tag_name}: {e}",
                    status=e.status,
                    hint=_hint_for_status(e.status),
                )
            )

        data = result.value
        release_id = get_int(data, "id")
        url = get_str(data, "html_url")
        if release_id is None or url is None:
            return Err(
                ApiError(
                    message=f"unexpected release payload for {tag_name} (missing id or html_url)",
                    hint=endpoint,
                )
            )

        return Ok(CreatedRelease(id=release_id, url=url))


def _hint_for_status(status: int) -> str | None:
    match status:
        case 401:
            return "check the github-token input"
        case 403:
            return "token lacks contents: write permission, or rate limited"
        case 404:
            return "repository not found or not visible to the token"
        case 422:
            return "release for this tag may already exist"
        case _:
            return None
