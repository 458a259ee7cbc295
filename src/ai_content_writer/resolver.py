"""Per-model request parameter resolution."""
from __future__ import annotations

import logging

from ai_content_writer.catalog import ModelCatalog, ModelDescriptor
from ai_content_writer.config import MAX_TOKENS_RANGE, Settings
from ai_content_writer.errors import ConfigurationError, ModelNotFoundError
from ai_content_writer.types.enums import TokenParameter
from ai_content_writer.types.params import ResolvedParameters

logger = logging.getLogger(__name__)

DEFAULT_TEMPERATURE = 0.1
DEFAULT_REASONING_EFFORT = "medium"


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


class ParameterResolver:
    """Computes the concrete API parameters for a model."""

    def __init__(self, catalog: ModelCatalog) -> None:
        self._catalog = catalog

    def _descriptor(self, model_id: str) -> ModelDescriptor:
        descriptor = self._catalog.get_model(model_id)
        if descriptor is None:
            raise ModelNotFoundError(model_id)
        return descriptor

    def resolve(self, model_id: str, settings: Settings | None = None) -> ResolvedParameters:
        """Resolve parameters for *model_id*, applying *settings* overrides.

        Token value: the model default, replaced by ``settings.max_tokens``
        (clamped to 100..4000) when that is non-zero, then capped at the
        model's context window.
        """
        descriptor = self._descriptor(model_id)
        api = descriptor.api_parameters

        try:
            token_parameter = TokenParameter(api.token_parameter)
        except ValueError as exc:
            raise ConfigurationError(
                f"Model {model_id}: invalid token_parameter {api.token_parameter!r}",
                cause=exc,
            ) from exc

        token_value = api.default_token_limit or 0
        token_source = "default"

        if settings is not None and settings.max_tokens:
            override = clamp(settings.max_tokens, *MAX_TOKENS_RANGE)
            logger.info(
                "Token limit overridden by settings for model '%s': %d (default was %d)",
                model_id,
                override,
                token_value,
            )
            token_value = override
            token_source = "override"

        max_context = descriptor.version_info.max_context_tokens
        if max_context is not None and token_value > max_context:
            logger.warning(
                "Token limit %d exceeds model %s max context %d, using model maximum",
                token_value,
                model_id,
                max_context,
            )
            token_value = max_context

        temperature = None
        if api.supports_temperature:
            temperature = (
                api.default_temperature
                if api.default_temperature is not None
                else DEFAULT_TEMPERATURE
            )

        reasoning_effort = None
        if api.supports_reasoning_effort:
            reasoning_effort = api.default_reasoning_effort or DEFAULT_REASONING_EFFORT

        return ResolvedParameters(
            model=model_id,
            token_parameter=token_parameter,
            token_value=token_value,
            temperature=temperature,
            reasoning_effort=reasoning_effort,
            token_source=token_source,
        )

    def effective_max_tokens(self, model_id: str, settings: Settings) -> int:
        """The settings token limit, capped by the model's context window.

        Unknown models fall back to the settings value.
        """
        descriptor = self._catalog.get_model(model_id)
        if descriptor is None:
            logger.warning("Could not get model limits for %s", model_id)
            return settings.max_tokens
        max_context = descriptor.version_info.max_context_tokens
        if max_context is None:
            return settings.max_tokens
        return min(settings.max_tokens, max_context)
