"""OpenAI Chat Completions client."""
from __future__ import annotations

from typing import Any

from ai_content_writer._http import HttpClient
from ai_content_writer.types.response import ChatCompletion


class OpenAIChatClient:
    """Client for ``/v1/chat/completions`` on OpenAI-compatible APIs."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.openai.com",
        org_id: str | None = None,
        timeout: float = 60.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

        headers: dict[str, str] = {
            "authorization": f"Bearer {api_key}",
            "content-type": "application/json",
        }
        if org_id:
            headers["openai-organization"] = org_id

        self._http = HttpClient(
            base_url=self._base_url,
            headers=headers,
            timeout=timeout,
            provider="openai",
        )

    @property
    def name(self) -> str:
        return "openai"

    @property
    def timeout(self) -> float:
        return self._timeout

    def complete(self, body: dict[str, Any]) -> ChatCompletion:
        """Send a Chat Completions request and parse the response."""
        response = self._http.post("/v1/chat/completions", json=body)
        return ChatCompletion.from_dict(response.body)

    def list_models(self) -> list[str]:
        """Ids of the models the API key can use."""
        response = self._http.get("/v1/models")
        if response.body.get("object") != "list":
            return []
        return [item.get("id", "") for item in response.body.get("data") or []]

    def close(self) -> None:
        self._http.close()
