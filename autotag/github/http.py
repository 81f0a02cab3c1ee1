"""HTTP client abstraction for the GitHub REST API.

This module provides:
- HttpClient: Protocol for HTTP operations (injectable for tests)
- RealHttpClient: Real implementation using urllib
- MockHttpClient: Mock implementation for testing

Responses keep the parsed ``Link`` header so callers can follow pagination.
"""

from __future__ import annotations

import json
import re
import ssl
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from autotag import __version__
from autotag.core.result import Err, Ok, Result
from autotag.core.structured import as_str_dict, get_str

__all__ = [
    "HttpClient",
    "HttpError",
    "HttpResponse",
    "MockHttpClient",
    "RealHttpClient",
    "parse_link_header",
]

GITHUB_API_VERSION = "2022-11-28"

_LINK_RE = re.compile(r'<([^>]+)>\s*;\s*rel="([^"]+)"')


@dataclass(frozen=True, slots=True)
class HttpError:
    """HTTP error details.

    Attributes:
        url: The URL that failed
        status: HTTP status code (0 for network and decode errors)
        message: Human-readable error message
    """

    url: str
    status: int
    message: str

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status}: {self.message} ({self.url})"
        return f"{self.message} ({self.url})"


def _empty_links() -> dict[str, str]:
    return {}


@dataclass(frozen=True, slots=True)
class HttpResponse:
    """Parsed JSON body plus pagination links (rel -> url)."""

    data: object
    links: dict[str, str] = field(default_factory=_empty_links)

    @property
    def next_url(self) -> str | None:
        return self.links.get("next")


def parse_link_header(value: str | None) -> dict[str, str]:
    """Parse an RFC 8288 ``Link`` header into a rel -> url mapping."""
    if not value:
        return {}
    return {rel: url for url, rel in _LINK_RE.findall(value)}


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for JSON HTTP operations."""

    def get_json(self, url: str) -> Result[HttpResponse, HttpError]:
        """GET url and parse the body as JSON."""
        ...

    def post_json(self, url: str, body: dict[str, object]) -> Result[HttpResponse, HttpError]:
        """POST a JSON body to url and parse the JSON response."""
        ...


class RealHttpClient:
    """Real HTTP client using urllib.

    Handles:
    - HTTPS with system certificates
    - Bearer token authentication
    - JSON encoding and decoding
    - Timeout handling
    """

    def __init__(
        self,
        token: str | None = None,
        timeout: float = 30.0,
        user_agent: str = f"autotag/{__version__}",
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._token = token
        self._ssl_context = ssl.create_default_context()

    def _headers(self, *, has_body: bool) -> dict[str, str]:
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _request(
        self,
        url: str,
        *,
        method: str,
        body: dict[str, object] | None = None,
    ) -> Result[HttpResponse, HttpError]:
        payload = json.dumps(body).encode("utf-8") if body is not None else None
        try:
            req = urllib.request.Request(
                url,
                data=payload,
                method=method,
                headers=self._headers(has_body=payload is not None),
            )
            with urllib.request.urlopen(
                req,
                timeout=self.timeout,
                context=self._ssl_context,
            ) as response:
                raw = response.read()
                links = parse_link_header(response.headers.get("Link"))
        except urllib.error.HTTPError as e:
            return Err(HttpError(url=url, status=e.code, message=_error_message(e)))
        except urllib.error.URLError as e:
            return Err(HttpError(url=url, status=0, message=str(e.reason)))
        except TimeoutError:
            return Err(HttpError(url=url, status=0, message="Request timed out"))
        except ValueError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))
        except OSError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))

        if not raw.strip():
            return Ok(HttpResponse(data=None, links=links))
        try:
            data: object = json.loads(raw.decode("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return Err(HttpError(url=url, status=0, message=f"JSON parse error: {e}"))
        return Ok(HttpResponse(data=data, links=links))

    def get_json(self, url: str) -> Result[HttpResponse, HttpError]:
        return self._request(url, method="GET")

    def post_json(self, url: str, body: dict[str, object]) -> Result[HttpResponse, HttpError]:
        return self._request(url, method="POST", body=body)


def _error_message(error: urllib.error.HTTPError) -> str:
    """Prefer GitHub's JSON ``message`` over the bare HTTP reason."""
    try:
        body = error.read()
    except OSError:
        return str(error.reason)
    try:
        parsed = as_str_dict(json.loads(body.decode("utf-8")))
    except (json.JSONDecodeError, UnicodeDecodeError):
        return str(error.reason)
    if parsed is None:
        return str(error.reason)
    return get_str(parsed, "message") or str(error.reason)


@dataclass(frozen=True, slots=True)
class RecordedCall:
    method: str
    url: str
    body: dict[str, object] | None = None


class MockHttpClient:
    """Mock HTTP client for testing.

    Usage:
        client = MockHttpClient()
        client.set_json(url, {"tag_name": "1.4.2"})
        client.set_json(page1, {"commits": [...]}, next_url=page2)
        client.set_post(url, {"id": 1})
    """

    def __init__(self) -> None:
        self._get_responses: dict[str, HttpResponse | HttpError] = {}
        self._post_responses: dict[str, HttpResponse | HttpError] = {}
        self.calls: list[RecordedCall] = []

    def set_json(
        self,
        url: str,
        response: object | HttpError,
        *,
        next_url: str | None = None,
    ) -> None:
        if isinstance(response, HttpError):
            self._get_responses[url] = response
            return
        links = {"next": next_url} if next_url else {}
        self._get_responses[url] = HttpResponse(data=response, links=links)

    def set_post(self, url: str, response: object | HttpError) -> None:
        if isinstance(response, HttpError):
            self._post_responses[url] = response
            return
        self._post_responses[url] = HttpResponse(data=response)

    def get_json(self, url: str) -> Result[HttpResponse, HttpError]:
        self.calls.append(RecordedCall("GET", url))
        return self._lookup(self._get_responses, url)

    def post_json(self, url: str, body: dict[str, object]) -> Result[HttpResponse, HttpError]:
        self.calls.append(RecordedCall("POST", url, body))
        return self._lookup(self._post_responses, url)

    @staticmethod
    def _lookup(
        table: dict[str, HttpResponse | HttpError], url: str
    ) -> Result[HttpResponse, HttpError]:
        if url not in table:
            return Err(HttpError(url=url, status=404, message="Not Found (mock)"))
        response = table[url]
        if isinstance(response, HttpError):
            return Err(response)
        return Ok(response)

    def urls(self, method: str) -> list[str]:
        return [c.url for c in self.calls if c.method == method]
