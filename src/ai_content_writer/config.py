"""Settings consumed by the generation pipeline."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping

from ai_content_writer.errors import ConfigurationError
from ai_content_writer.fields import DEFAULT_FIELD_SUPPORT, FieldKind
from ai_content_writer.prompts import DEFAULT_SYSTEM_PROMPT

DEFAULT_MODEL = "gpt-5"
FALLBACK_MODEL = "gpt-4o"

MAX_RETRIES_RANGE = (1, 10)
API_TIMEOUT_RANGE = (10, 120)
MAX_TOKENS_RANGE = (100, 4000)


def parse_env(value: str) -> str:
    """Expand a ``$NAME`` reference to the environment variable's value.

    Anything that is not a bare ``$NAME`` reference is returned unchanged.
    An unset variable expands to ``""``.
    """
    if value.startswith("$") and len(value) > 1 and value[1:].replace("_", "").isalnum():
        return os.environ.get(value[1:], "")
    return value


@dataclass(frozen=True)
class Settings:
    api_key: str = ""
    """API key, or a ``$ENV_VAR`` reference to one."""
    model: str = DEFAULT_MODEL
    max_retries: int = 3
    api_timeout: int = 60
    """Per-attempt deadline in seconds."""
    max_tokens: int = 2000
    """Output token override; ``0`` keeps each model's own default."""
    prompt_override: str = ""
    field_type_support: Mapping[FieldKind, bool] = field(
        default_factory=lambda: dict(DEFAULT_FIELD_SUPPORT)
    )
    base_url: str = "https://api.openai.com"

    @property
    def parsed_api_key(self) -> str:
        return parse_env(self.api_key)

    @property
    def parsed_model(self) -> str:
        """Configured model, falling back to ``gpt-4o`` when empty."""
        return parse_env(self.model) or FALLBACK_MODEL

    @property
    def system_prompt(self) -> str:
        return self.prompt_override or DEFAULT_SYSTEM_PROMPT

    def supports_field(self, kind: FieldKind) -> bool:
        return bool(self.field_type_support.get(kind, False))

    def validate(self) -> list[str]:
        """Return every out-of-range setting as a human-readable issue."""
        issues: list[str] = []
        checks = (
            ("max_retries", self.max_retries, MAX_RETRIES_RANGE),
            ("api_timeout", self.api_timeout, API_TIMEOUT_RANGE),
            ("max_tokens", self.max_tokens, MAX_TOKENS_RANGE),
        )
        for name, value, (low, high) in checks:
            if name == "max_tokens" and value == 0:
                continue
            if not low <= value <= high:
                issues.append(f"'{name}' must be between {low} and {high}, got {value}")
        if not self.parsed_api_key:
            issues.append("API key is required")
        return issues

    @classmethod
    def from_env(
        cls,
        prefix: str = "AI_CONTENT_WRITER_",
        environ: Mapping[str, str] | None = None,
    ) -> Settings:
        """Create settings from environment variables.

        Reads ``{prefix}API_KEY`` (falling back to ``OPENAI_API_KEY``),
        ``{prefix}MODEL``, ``{prefix}MAX_RETRIES``, ``{prefix}API_TIMEOUT``,
        ``{prefix}MAX_TOKENS``, ``{prefix}PROMPT_OVERRIDE`` and
        ``{prefix}BASE_URL`` (falling back to ``OPENAI_BASE_URL``).
        Unset variables keep the dataclass defaults.
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}

        api_key = env.get(f"{prefix}API_KEY") or env.get("OPENAI_API_KEY")
        if api_key:
            kwargs["api_key"] = api_key
        base_url = env.get(f"{prefix}BASE_URL") or env.get("OPENAI_BASE_URL")
        if base_url:
            kwargs["base_url"] = base_url
        for name in ("model", "prompt_override"):
            value = env.get(f"{prefix}{name.upper()}")
            if value is not None:
                kwargs[name] = value
        for name in ("max_retries", "api_timeout", "max_tokens"):
            value = env.get(f"{prefix}{name.upper()}")
            if value is None or value == "":
                continue
            try:
                kwargs[name] = int(value)
            except ValueError as exc:
                raise ConfigurationError(
                    f"{prefix}{name.upper()} must be an integer, got {value!r}",
                    cause=exc,
                ) from exc

        return cls(**kwargs)  # type: ignore[arg-type]
