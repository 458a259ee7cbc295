"""Enumeration types for the AI content writer."""
from __future__ import annotations

from enum import StrEnum


class Role(StrEnum):
    """Role of a chat message participant."""

    SYSTEM = "system"
    USER = "user"


class ContentFormat(StrEnum):
    """Target format of the generated content."""

    PLAIN = "plain"
    HTML = "html"
    MARKDOWN = "markdown"

    @classmethod
    def parse(cls, value: str | ContentFormat | None) -> ContentFormat:
        """Coerce *value* to a format. Unrecognized values become ``PLAIN``."""
        if isinstance(value, ContentFormat):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.PLAIN


class TokenParameter(StrEnum):
    """Name under which the provider expects the output token limit."""

    MAX_TOKENS = "max_tokens"
    MAX_COMPLETION_TOKENS = "max_completion_tokens"

    @property
    def alternate(self) -> TokenParameter:
        """The other of the two token parameter names."""
        if self is TokenParameter.MAX_TOKENS:
            return TokenParameter.MAX_COMPLETION_TOKENS
        return TokenParameter.MAX_TOKENS


class ReasoningEffort(StrEnum):
    """Allowed values for ``reasoning_effort``."""

    MINIMAL = "minimal"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class FinishReason(StrEnum):
    """Why the model stopped generating."""

    STOP = "stop"
    LENGTH = "length"
    CONTENT_FILTER = "content_filter"
    TOOL_CALLS = "tool_calls"
    UNKNOWN = "unknown"
