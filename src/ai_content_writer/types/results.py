"""Generation result types."""
from __future__ import annotations

from dataclasses import dataclass, field

from ai_content_writer.types.response import Usage


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of a single model check (see ``GenerationPipeline.generate_with_model``)."""

    model: str
    success: bool
    content: str = ""
    duration: float = 0.0
    """Wall-clock seconds, rounded to hundredths."""
    usage: Usage = field(default_factory=Usage)
    error: str | None = None


@dataclass(frozen=True)
class ConnectionResult:
    """Outcome of a provider connectivity check."""

    success: bool
    message: str
