"""Remote API client implementations."""
from __future__ import annotations

from ai_content_writer.providers.openai import OpenAIChatClient

__all__ = ["OpenAIChatClient"]
