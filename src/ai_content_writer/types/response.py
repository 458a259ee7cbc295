"""Chat Completions response types."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ai_content_writer.types.enums import FinishReason


@dataclass(frozen=True)
class Usage:
    """Token usage statistics."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Usage:
        data = data or {}
        prompt = int(data.get("prompt_tokens") or 0)
        completion = int(data.get("completion_tokens") or 0)
        return cls(
            prompt_tokens=prompt,
            completion_tokens=completion,
            total_tokens=int(data.get("total_tokens") or prompt + completion),
        )

    def to_dict(self) -> dict[str, int]:
        return {
            "prompt_tokens": self.prompt_tokens,
            "completion_tokens": self.completion_tokens,
            "total_tokens": self.total_tokens,
        }


@dataclass(frozen=True)
class Choice:
    """One completion choice."""

    content: str = ""
    finish_reason: str | None = None


@dataclass(frozen=True)
class ChatCompletion:
    """A parsed Chat Completions response."""

    choices: tuple[Choice, ...] = ()
    usage: Usage = field(default_factory=Usage)
    model: str = ""
    raw: dict[str, Any] | None = None

    # --- Convenience properties ---

    @property
    def content(self) -> str:
        """Text of the first choice, or ``""`` when there is none."""
        if not self.choices:
            return ""
        return self.choices[0].content

    @property
    def finish_reason(self) -> str:
        """Finish reason of the first choice, ``"unknown"`` when absent."""
        if not self.choices:
            return FinishReason.UNKNOWN
        return self.choices[0].finish_reason or FinishReason.UNKNOWN

    @classmethod
    def of_text(
        cls, text: str, *, finish_reason: str = FinishReason.STOP, model: str = ""
    ) -> ChatCompletion:
        """Build a single-choice completion."""
        return cls(choices=(Choice(content=text, finish_reason=finish_reason),), model=model)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> ChatCompletion:
        """Parse a ``/v1/chat/completions`` response body."""
        choices: list[Choice] = []
        for item in raw.get("choices") or []:
            message = item.get("message") or {}
            content = message.get("content")
            choices.append(
                Choice(
                    content=content if isinstance(content, str) else "",
                    finish_reason=item.get("finish_reason"),
                )
            )
        return cls(
            choices=tuple(choices),
            usage=Usage.from_dict(raw.get("usage")),
            model=raw.get("model", ""),
            raw=raw,
        )
