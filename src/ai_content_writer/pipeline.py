"""Resilient content generation pipeline."""
from __future__ import annotations

import logging
import threading
import time
from typing import Sequence

from ai_content_writer._retry import RetryPolicy, with_retry
from ai_content_writer.catalog import ModelCatalog
from ai_content_writer.client import ChatClient
from ai_content_writer.compat import Rejection, adjust_for, classify_rejection
from ai_content_writer.config import MAX_TOKENS_RANGE, Settings
from ai_content_writer.errors import ConfigurationError, InvalidParameterError
from ai_content_writer.formatter import ContentFormatter
from ai_content_writer.prompts import PromptComposer
from ai_content_writer.resolver import ParameterResolver
from ai_content_writer.types.context import GenerationContext
from ai_content_writer.types.enums import FinishReason
from ai_content_writer.types.messages import Message
from ai_content_writer.types.params import ResolvedParameters
from ai_content_writer.types.response import ChatCompletion
from ai_content_writer.types.results import ConnectionResult, GenerationResult

logger = logging.getLogger(__name__)


class GenerationPipeline:
    """Prompt -> parameters -> remote call (with retries) -> formatted content.

    One pipeline may serve many concurrent ``generate`` calls; the only
    shared state is the catalog and the lazily created HTTP client.
    """

    def __init__(
        self,
        catalog: ModelCatalog,
        client: ChatClient | None = None,
        *,
        composer: PromptComposer | None = None,
        formatter: ContentFormatter | None = None,
    ) -> None:
        self._catalog = catalog
        self._resolver = ParameterResolver(catalog)
        self._composer = composer or PromptComposer()
        self._formatter = formatter or ContentFormatter()
        self._client = client
        self._owns_client = client is None
        self._client_config: tuple[str, str, int] | None = None
        self._client_lock = threading.Lock()

    @property
    def catalog(self) -> ModelCatalog:
        return self._catalog

    @property
    def resolver(self) -> ParameterResolver:
        return self._resolver

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def generate(
        self,
        prompt: str,
        model_id: str | None = None,
        context: GenerationContext | None = None,
        settings: Settings | None = None,
    ) -> str:
        """Generate content for *prompt* and format it for ``context.format``.

        Raises :class:`ModelNotFoundError` for an unknown model,
        :class:`InvalidParameterError` for a non-positive token limit and,
        once every attempt has failed, the last attempt's error unchanged.
        """
        context = context or GenerationContext()
        completion = self.complete(prompt, model_id, context, settings)
        return self._formatter.format(completion.content, context.target_format)

    def complete(
        self,
        prompt: str,
        model_id: str | None = None,
        context: GenerationContext | None = None,
        settings: Settings | None = None,
    ) -> ChatCompletion:
        """Like :meth:`generate` but returns the unformatted completion."""
        settings = settings or Settings()
        model = model_id or settings.parsed_model

        messages = self._composer.build_messages(prompt, settings.system_prompt, context)
        params = self._resolver.resolve(model, settings)

        if params.token_value <= 0:
            raise InvalidParameterError(f"Invalid token limit: {params.token_value}")
        if params.token_value > MAX_TOKENS_RANGE[1]:
            logger.warning(
                "Token limit %d is very high and may cause API errors or high costs",
                params.token_value,
            )
        logger.info("Parameters for model '%s': %s", model, params.describe())
        logger.debug(
            "Prompt (%d chars): %s%s",
            len(prompt),
            prompt[:100],
            "..." if len(prompt) > 100 else "",
        )

        client = self._get_client(settings)
        policy = RetryPolicy(max_attempts=settings.max_retries)
        return with_retry(
            lambda attempt: self._attempt(client, params, messages, attempt, policy.max_attempts),
            policy,
        )

    def generate_with_model(
        self,
        model_id: str,
        prompt: str,
        context: GenerationContext | None = None,
        settings: Settings | None = None,
    ) -> GenerationResult:
        """Run one generation against *model_id* and report how it went.

        Failures are returned in the result rather than raised.
        """
        context = context or GenerationContext()
        start = time.monotonic()
        try:
            completion = self.complete(prompt, model_id, context, settings)
        except Exception as exc:
            logger.error("Generation with model %s failed: %s", model_id, exc)
            return GenerationResult(
                model=model_id,
                success=False,
                duration=round(time.monotonic() - start, 2),
                error=str(exc),
            )
        return GenerationResult(
            model=model_id,
            success=True,
            content=self._formatter.format(completion.content, context.target_format),
            duration=round(time.monotonic() - start, 2),
            usage=completion.usage,
        )

    def test_connection(self, settings: Settings | None = None) -> ConnectionResult:
        """Check that the API is reachable and the key is accepted."""
        try:
            client = self._get_client(settings or Settings())
            list_models = getattr(client, "list_models", None)
            if list_models is None:
                return ConnectionResult(False, "Client cannot list models")
            if list_models():
                return ConnectionResult(True, "Successfully connected to OpenAI API")
            return ConnectionResult(False, "Unexpected response from OpenAI API")
        except Exception as exc:
            return ConnectionResult(False, f"Connection failed: {exc}")

    def close(self) -> None:
        """Close the HTTP client if this pipeline created it."""
        with self._client_lock:
            client, self._client = self._client, None
            self._client_config = None
        if client is not None and self._owns_client and hasattr(client, "close"):
            client.close()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _get_client(self, settings: Settings) -> ChatClient:
        """The injected client, or an owned one built for these settings."""
        stale = None
        with self._client_lock:
            if self._client is not None and not self._owns_client:
                return self._client
            api_key = settings.parsed_api_key
            if not api_key:
                raise ConfigurationError("OpenAI API key is not configured")
            client_config = (api_key, settings.base_url, settings.api_timeout)
            if self._client is not None and client_config == self._client_config:
                return self._client
            from ai_content_writer.providers.openai import OpenAIChatClient

            stale = self._client
            self._client = OpenAIChatClient(
                api_key=api_key,
                base_url=settings.base_url,
                timeout=settings.api_timeout,
            )
            self._client_config = client_config
            self._owns_client = True
            client = self._client
        if stale is not None:
            logger.info("Client settings changed, replacing the API client")
            stale.close()
        return client

    def _attempt(
        self,
        client: ChatClient,
        params: ResolvedParameters,
        messages: Sequence[Message],
        attempt: int,
        attempts: int,
    ) -> ChatCompletion:
        logger.info("API attempt %d/%d for model %s", attempt, attempts, params.model)
        try:
            completion = client.complete(params.to_request_body(messages))
        except Exception as exc:
            completion = self._fallback(client, exc, params, messages)
            if completion is None:
                raise
        self._log_completion(completion, params, attempt)
        return completion

    def _fallback(
        self,
        client: ChatClient,
        error: Exception,
        params: ResolvedParameters,
        messages: Sequence[Message],
    ) -> ChatCompletion | None:
        """One out-of-band call with adjusted parameters, or ``None``."""
        rejection = classify_rejection(error, params)
        adjusted = adjust_for(rejection, params)
        if adjusted is None:
            return None

        if rejection is Rejection.TOKEN_PARAM_REJECTED:
            logger.info("Retrying with alternative token parameter: %s", adjusted.token_parameter)
        else:
            logger.info("Retrying without temperature parameter (using model default)")
        try:
            return client.complete(adjusted.to_request_body(messages))
        except Exception as retry_exc:
            logger.error("Retry with alternative parameters also failed: %s", retry_exc)
            return None

    @staticmethod
    def _log_completion(
        completion: ChatCompletion, params: ResolvedParameters, attempt: int
    ) -> None:
        logger.debug(
            "Response: content_length=%d finish_reason=%s usage=%s model=%s choices=%d attempt=%d",
            len(completion.content),
            completion.finish_reason,
            completion.usage.to_dict(),
            completion.model or params.model,
            len(completion.choices),
            attempt,
        )
        if completion.content:
            return
        if completion.finish_reason == FinishReason.LENGTH:
            logger.error(
                "Response truncated due to token limit (%s=%d). Usage: %s",
                params.token_parameter,
                params.token_value,
                completion.usage.to_dict(),
            )
        else:
            logger.warning(
                "Model returned empty content. Finish reason: %s, choices: %d, usage: %s",
                completion.finish_reason if completion.choices else "no choices",
                len(completion.choices),
                completion.usage.to_dict(),
            )
