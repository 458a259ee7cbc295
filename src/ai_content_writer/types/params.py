"""Resolved request parameters."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Sequence

from ai_content_writer.types.enums import TokenParameter
from ai_content_writer.types.messages import Message


@dataclass(frozen=True)
class ResolvedParameters:
    """Concrete parameters for one Chat Completions call."""

    model: str
    token_parameter: TokenParameter
    token_value: int
    temperature: float | None = None
    reasoning_effort: str | None = None
    token_source: str = "default"
    """``"override"`` when the settings supplied the token value."""

    def to_request_body(self, messages: Sequence[Message]) -> dict[str, Any]:
        """Render the Chat Completions request body."""
        body: dict[str, Any] = {
            "model": self.model,
            "messages": [m.to_dict() for m in messages],
            str(self.token_parameter): self.token_value,
        }
        if self.temperature is not None:
            body["temperature"] = self.temperature
        if self.reasoning_effort is not None:
            body["reasoning_effort"] = self.reasoning_effort
        return body

    def with_token_parameter(self, token_parameter: TokenParameter) -> ResolvedParameters:
        return dataclasses.replace(self, token_parameter=token_parameter)

    def without_temperature(self) -> ResolvedParameters:
        return dataclasses.replace(self, temperature=None)

    def describe(self) -> str:
        """One-line summary for logs."""
        info = f"{self.token_parameter}={self.token_value}"
        if self.temperature is not None:
            info += f" temperature={self.temperature}"
        else:
            info += " (default temperature)"
        if self.reasoning_effort is not None:
            info += f" reasoning_effort={self.reasoning_effort}"
        return f"{info} (tokens from {self.token_source})"
