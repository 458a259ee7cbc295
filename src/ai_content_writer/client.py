"""Remote API client interface."""
from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

from ai_content_writer.types.response import ChatCompletion


@runtime_checkable
class ChatClient(Protocol):
    """Protocol every Chat Completions client must satisfy."""

    def complete(self, body: dict[str, Any]) -> ChatCompletion:
        """Send a request body and return the parsed completion.

        Raises a :class:`~ai_content_writer.errors.TransportError` (or any
        other exception) when the call fails.
        """
        ...


class StubChatClient:
    """In-memory client for testing.

    Replays *script* in order, one entry per call: a
    :class:`ChatCompletion` is returned, an exception is raised. The last
    entry repeats once the script runs out. Every request body is recorded
    in :attr:`requests`.
    """

    def __init__(self, script: Sequence[ChatCompletion | BaseException] | None = None) -> None:
        self._script = list(script or [])
        self._idx = 0
        self.requests: list[dict[str, Any]] = []
        self.closed = False

    @property
    def calls(self) -> int:
        return len(self.requests)

    def complete(self, body: dict[str, Any]) -> ChatCompletion:
        self.requests.append(body)
        if not self._script:
            return ChatCompletion()
        item = self._script[min(self._idx, len(self._script) - 1)]
        self._idx += 1
        if isinstance(item, BaseException):
            raise item
        return item

    def list_models(self) -> list[str]:
        return []

    def close(self) -> None:
        self.closed = True
