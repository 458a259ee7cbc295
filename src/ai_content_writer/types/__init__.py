"""AI content writer type definitions."""
from __future__ import annotations

from ai_content_writer.types.enums import (
    ContentFormat,
    FinishReason,
    ReasoningEffort,
    Role,
    TokenParameter,
)
from ai_content_writer.types.messages import Message
from ai_content_writer.types.context import GenerationContext
from ai_content_writer.types.params import ResolvedParameters
from ai_content_writer.types.response import ChatCompletion, Choice, Usage
from ai_content_writer.types.results import ConnectionResult, GenerationResult

__all__ = [
    "ContentFormat",
    "FinishReason",
    "ReasoningEffort",
    "Role",
    "TokenParameter",
    "Message",
    "GenerationContext",
    "ResolvedParameters",
    "ChatCompletion",
    "Choice",
    "Usage",
    "ConnectionResult",
    "GenerationResult",
]
