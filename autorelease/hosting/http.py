"""HTTP client abstraction for hosting-API calls.

- HttpClient: Protocol for HTTP operations (injectable for tests)
- RealHttpClient: Real implementation using urllib
- MockHttpClient: Mock implementation for testing
"""

from __future__ import annotations

import json
import ssl
import urllib.error
import urllib.request
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol, cast, runtime_checkable

from autorelease import __version__
from autorelease.core.result import Err, Ok, Result
from autorelease.core.structured import as_str_dict

__all__ = [
    "HttpClient",
    "HttpError",
    "MockHttpClient",
    "RealHttpClient",
]


@dataclass(frozen=True, slots=True)
class HttpError:
    """HTTP error details.

    Attributes:
        url: The URL that failed
        status: HTTP status code (0 for network errors)
        message: Human-readable error message
    """

    url: str
    status: int
    message: str

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status}: {self.message} ({self.url})"
        return f"{self.message} ({self.url})"


@runtime_checkable
class HttpClient(Protocol):
    def post_json(
        self,
        url: str,
        payload: Mapping[str, object],
        headers: Mapping[str, str] | None = None,
    ) -> Result[dict[str, Any], HttpError]:
        """POST a JSON body and parse the JSON object response.

        Args:
            url: URL to post to
            payload: JSON-serializable body
            headers: Extra request headers

        Returns:
            Ok with parsed JSON dict, or Err with HttpError
        """
        ...


class RealHttpClient:
    """HTTP client using urllib with system certificates.

    No retries: a failed request is reported once.
    """

    def __init__(self, user_agent: str = f"autorelease/{__version__}") -> None:
        self.user_agent = user_agent
        self._ssl_context = ssl.create_default_context()

    def post_json(
        self,
        url: str,
        payload: Mapping[str, object],
        headers: Mapping[str, str] | None = None,
    ) -> Result[dict[str, Any], HttpError]:
        req = urllib.request.Request(
            url,
            data=json.dumps(payload).encode("utf-8"),
            method="POST",
            headers={
                "User-Agent": self.user_agent,
                "Content-Type": "application/json",
                **(headers or {}),
            },
        )
        try:
            with urllib.request.urlopen(req, context=self._ssl_context) as response:
                raw: bytes = response.read()
        except urllib.error.HTTPError as e:
            return Err(HttpError(url=url, status=e.code, message=_http_error_message(e)))
        except urllib.error.URLError as e:
            return Err(HttpError(url=url, status=0, message=str(e.reason)))
        except TimeoutError:
            return Err(HttpError(url=url, status=0, message="Request timed out"))
        except ValueError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))
        except OSError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))

        try:
            data_obj: object = json.loads(raw.decode("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return Err(HttpError(url=url, status=0, message=f"JSON parse error: {e}"))

        data = as_str_dict(data_obj)
        if data is None:
            return Err(HttpError(url=url, status=0, message="Expected JSON object"))
        return Ok(cast(dict[str, Any], data))


def _http_error_message(error: urllib.error.HTTPError) -> str:
    # GitHub puts the useful explanation in the JSON body.
    try:
        body: object = json.loads(error.read().decode("utf-8"))
    except (OSError, ValueError):
        return str(error.reason)
    data = as_str_dict(body)
    if data is not None and isinstance(data.get("message"), str):
        return f"{error.reason}: {data['message']}"
    return str(error.reason)


class MockHttpClient:
    """Mock HTTP client for testing.

    Usage:
        client = MockHttpClient()
        client.set_json("https://api.example.com/releases", {"id": 1})
        result = client.post_json("https://api.example.com/releases", {})
        assert result == Ok({"id": 1})
    """

    def __init__(self) -> None:
        self._json_responses: dict[str, dict[str, Any] | HttpError] = {}
        self.calls: list[tuple[str, dict[str, object], dict[str, str]]] = []

    def set_json(self, url: str, response: dict[str, Any] | HttpError) -> None:
        self._json_responses[url] = response

    def post_json(
        self,
        url: str,
        payload: Mapping[str, object],
        headers: Mapping[str, str] | None = None,
    ) -> Result[dict[str, Any], HttpError]:
        self.calls.append((url, dict(payload), dict(headers or {})))

        if url not in self._json_responses:
            return Err(HttpError(url=url, status=404, message="Not found (mock)"))

        response = self._json_responses[url]
        if isinstance(response, HttpError):
            return Err(response)
        return Ok(response)
