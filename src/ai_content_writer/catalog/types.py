"""Model catalog types."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping


@dataclass(frozen=True)
class ModelCapabilities:
    """What a model can accept as input."""

    supports_vision: bool = False


@dataclass(frozen=True)
class ApiParameters:
    """How a model expects its request parameters."""

    token_parameter: str | None = None
    """``max_tokens`` or ``max_completion_tokens``."""

    default_token_limit: int | None = None
    """Output token limit used when settings do not override it."""

    supports_temperature: bool = True
    default_temperature: float | None = 0.1

    supports_reasoning_effort: bool = False
    default_reasoning_effort: str | None = None


@dataclass(frozen=True)
class VersionInfo:
    """Version-specific limits."""

    max_context_tokens: int | None = None


@dataclass(frozen=True)
class UiDisplay:
    """Presentation hints for model pickers."""

    show_in_dropdown: bool = True
    priority: float = 0
    badge: str | None = None
    recommended: bool = False


@dataclass(frozen=True)
class ModelDescriptor:
    """Declarative record of one model's capabilities and API quirks."""

    id: str
    """API identifier (e.g., "gpt-4o")."""

    display_name: str = ""
    description: str = ""
    capabilities: ModelCapabilities = field(default_factory=ModelCapabilities)
    api_parameters: ApiParameters = field(default_factory=ApiParameters)
    version_info: VersionInfo = field(default_factory=VersionInfo)
    ui_display: UiDisplay = field(default_factory=UiDisplay)

    source: Path | None = field(default=None, compare=False)
    """File the descriptor was loaded from."""

    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, hash=False, repr=False)
    """The parsed source document, kept for validation."""

    @property
    def name(self) -> str:
        """Human-readable name, falling back to the id."""
        return self.display_name or self.id
