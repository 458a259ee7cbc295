"""HTTP client wrapper around httpx."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from ai_content_writer.errors import (
    NetworkError,
    RequestTimeoutError,
    TransportError,
    error_from_status_code,
)


@dataclass(frozen=True)
class HttpResponse:
    """Parsed HTTP response."""

    status_code: int
    body: dict[str, Any]
    headers: dict[str, str]
    raw_text: str = ""


def _retry_after(headers: httpx.Headers) -> float | None:
    value = headers.get("retry-after")
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def translate_error(resp: httpx.Response, provider: str = "") -> TransportError:
    """Map a non-2xx response to a :class:`TransportError` subclass.

    The provider's own message is kept verbatim; ``code``/``type`` and
    ``param`` are lifted from an OpenAI-style ``{"error": {...}}`` body.
    """
    raw_text = resp.text
    try:
        body = resp.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    error = body.get("error")
    if isinstance(error, dict):
        message = error.get("message") or raw_text
        error_code = error.get("code") or error.get("type")
        param = error.get("param")
    else:
        message = error if isinstance(error, str) and error else raw_text
        error_code = None
        param = None

    return error_from_status_code(
        resp.status_code,
        message or f"HTTP {resp.status_code}",
        provider=provider,
        error_code=error_code,
        param=param,
        raw=body,
        retry_after=_retry_after(resp.headers),
    )


class HttpClient:
    """Thin wrapper around :mod:`httpx` that maps errors into ai_content_writer exceptions."""

    def __init__(
        self,
        base_url: str,
        headers: dict[str, str],
        timeout: float = 60.0,
        provider: str = "",
    ) -> None:
        self._provider = provider
        self._client = httpx.Client(
            base_url=base_url,
            headers=headers,
            timeout=httpx.Timeout(timeout),
        )

    def request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
    ) -> HttpResponse:
        """Send a request and return the parsed response.

        Raises an ai_content_writer error on non-2xx status or transport failure.
        """
        try:
            resp = self._client.request(method, path, json=json)
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(str(exc), provider=self._provider, cause=exc) from exc
        except httpx.HTTPError as exc:
            raise NetworkError(str(exc), provider=self._provider, cause=exc) from exc

        if resp.status_code >= 300:
            raise translate_error(resp, provider=self._provider)

        try:
            body = resp.json()
        except ValueError:
            body = {}

        return HttpResponse(
            status_code=resp.status_code,
            body=body if isinstance(body, dict) else {},
            headers=dict(resp.headers),
            raw_text=resp.text,
        )

    def post(self, path: str, json: dict[str, Any]) -> HttpResponse:
        return self.request("POST", path, json=json)

    def get(self, path: str) -> HttpResponse:
        return self.request("GET", path)

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()
