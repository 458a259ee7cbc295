"""Error hierarchy for the AI content writer."""
from __future__ import annotations

from typing import Any


class ContentWriterError(Exception):
    """Base error for all ai_content_writer errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Catalog and parameter errors
# ---------------------------------------------------------------------------


class ModelNotFoundError(ContentWriterError):
    """The requested model id is not in the catalog."""

    def __init__(self, model_id: str) -> None:
        super().__init__(f"Model configuration not found: {model_id}")
        self.model_id = model_id


class ConfigurationError(ContentWriterError):
    """A descriptor or settings value is missing or malformed."""


class InvalidParameterError(ContentWriterError):
    """A resolved request parameter cannot be sent to the provider."""


# ---------------------------------------------------------------------------
# Transport errors
# ---------------------------------------------------------------------------


class TransportError(ContentWriterError):
    """A remote call failed (network, rate limit or provider rejection).

    ``param`` names the request parameter the provider objected to, when
    the error body says so.
    """

    def __init__(
        self,
        message: str,
        *,
        provider: str = "",
        status_code: int | None = None,
        error_code: str | None = None,
        param: str | None = None,
        retry_after: float | None = None,
        raw: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.provider = provider
        self.status_code = status_code
        self.error_code = error_code
        self.param = param
        self.retry_after = retry_after
        self.raw = raw


class AuthenticationError(TransportError):
    """The API key was rejected."""


class AccessDeniedError(TransportError):
    """The key may not use this model or endpoint."""


class InvalidRequestError(TransportError):
    """The provider rejected the request body."""


class ContextLengthError(TransportError):
    """Prompt plus output would not fit the model's context window."""


class RateLimitError(TransportError):
    """Too many requests."""


class ServerError(TransportError):
    """5xx from the provider."""


class RequestTimeoutError(TransportError):
    """No response within the configured timeout."""


class NetworkError(TransportError):
    """Connection-level failure before any HTTP status."""


_STATUS_ERRORS: dict[int, type[TransportError]] = {
    400: InvalidRequestError,
    401: AuthenticationError,
    403: AccessDeniedError,
    408: RequestTimeoutError,
    413: ContextLengthError,
    422: InvalidRequestError,
    429: RateLimitError,
}


def error_from_status_code(
    status_code: int,
    message: str,
    *,
    provider: str = "",
    error_code: str | None = None,
    param: str | None = None,
    raw: dict[str, Any] | None = None,
    retry_after: float | None = None,
) -> TransportError:
    """Pick the error class for an HTTP status; unknown codes get the base class."""
    cls = _STATUS_ERRORS.get(status_code)
    if cls is None:
        cls = ServerError if 500 <= status_code <= 599 else TransportError
    return cls(
        message,
        provider=provider,
        status_code=status_code,
        error_code=error_code,
        param=param,
        raw=raw,
        retry_after=retry_after,
    )
