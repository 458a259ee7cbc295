"""Tests for per-model parameter resolution."""
from __future__ import annotations

import logging

import pytest

from ai_content_writer.catalog import ModelCatalog
from ai_content_writer.config import Settings
from ai_content_writer.errors import ConfigurationError, ModelNotFoundError
from ai_content_writer.resolver import ParameterResolver, clamp
from ai_content_writer.types.enums import TokenParameter


@pytest.fixture
def resolver(catalog: ModelCatalog) -> ParameterResolver:
    return ParameterResolver(catalog)


# ---------------------------------------------------------------------------
# clamp
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "value, expected",
    [(50, 100), (100, 100), (2500, 2500), (4000, 4000), (9000, 4000), (-3, 100)],
)
def test_clamp(value: int, expected: int) -> None:
    assert clamp(value, 100, 4000) == expected


# ---------------------------------------------------------------------------
# Token parameter and value
# ---------------------------------------------------------------------------


def test_uses_model_default_without_settings(resolver: ParameterResolver, write_model) -> None:
    write_model("m", api_parameters={"default_token_limit": 1500})
    params = resolver.resolve("m")
    assert params.token_parameter is TokenParameter.MAX_TOKENS
    assert params.token_value == 1500
    assert params.token_source == "default"


def test_zero_override_keeps_model_default(resolver: ParameterResolver, write_model) -> None:
    write_model("m", api_parameters={"default_token_limit": 1500})
    params = resolver.resolve("m", Settings(max_tokens=0))
    assert params.token_value == 1500
    assert params.token_source == "default"


def test_completion_token_parameter(resolver: ParameterResolver, write_model) -> None:
    write_model("m", api_parameters={"token_parameter": "max_completion_tokens"})
    assert resolver.resolve("m").token_parameter is TokenParameter.MAX_COMPLETION_TOKENS


@pytest.mark.parametrize(
    "override, expected",
    [(50, 100), (100, 100), (1234, 1234), (4000, 4000), (9000, 4000)],
)
def test_override_is_clamped(
    resolver: ParameterResolver, write_model, override: int, expected: int
) -> None:
    write_model("m", api_parameters={"default_token_limit": 2000})
    params = resolver.resolve("m", Settings(max_tokens=override))
    assert params.token_value == expected
    assert params.token_source == "override"


def test_override_is_logged(
    resolver: ParameterResolver, write_model, caplog: pytest.LogCaptureFixture
) -> None:
    write_model("m")
    with caplog.at_level(logging.INFO, logger="ai_content_writer.resolver"):
        resolver.resolve("m", Settings(max_tokens=3000))
    assert any("overridden" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize(
    "default, override, context, expected",
    [
        (2000, 0, 1000, 1000),
        (5000, 0, 3000, 3000),
        (2000, 4000, 1000, 1000),
        (2000, 4000, 8000, 4000),
        (2000, 50, 80, 80),
    ],
)
def test_context_window_caps_token_value(
    resolver: ParameterResolver,
    write_model,
    default: int,
    override: int,
    context: int,
    expected: int,
) -> None:
    write_model(
        "m",
        api_parameters={"default_token_limit": default},
        version_info={"max_context_tokens": context},
    )
    params = resolver.resolve("m", Settings(max_tokens=override))
    assert params.token_value == expected
    assert params.token_value <= context


def test_context_cap_is_logged(
    resolver: ParameterResolver, write_model, caplog: pytest.LogCaptureFixture
) -> None:
    write_model("m", version_info={"max_context_tokens": 500})
    with caplog.at_level(logging.WARNING, logger="ai_content_writer.resolver"):
        resolver.resolve("m")
    assert any("exceeds model m max context 500" in r.getMessage() for r in caplog.records)


def test_missing_default_limit_resolves_to_zero(
    resolver: ParameterResolver, write_model
) -> None:
    write_model("m", drop=("api_parameters.default_token_limit",))
    assert resolver.resolve("m").token_value == 0


# ---------------------------------------------------------------------------
# Temperature and reasoning effort
# ---------------------------------------------------------------------------


def test_temperature_present_only_when_supported(
    resolver: ParameterResolver, write_model
) -> None:
    write_model("warm", api_parameters={"default_temperature": 0.7})
    write_model("cold", api_parameters={"supports_temperature": False, "default_temperature": 0.7})
    assert resolver.resolve("warm").temperature == 0.7
    assert resolver.resolve("cold").temperature is None


def test_temperature_defaults_to_point_one(resolver: ParameterResolver, write_model) -> None:
    write_model("m", api_parameters={"supports_temperature": True})
    assert resolver.resolve("m").temperature == 0.1


def test_reasoning_effort(resolver: ParameterResolver, write_model) -> None:
    write_model(
        "r",
        api_parameters={"supports_reasoning_effort": True, "default_reasoning_effort": "low"},
    )
    write_model("plain")
    assert resolver.resolve("r").reasoning_effort == "low"
    assert resolver.resolve("plain").reasoning_effort is None


def test_reasoning_effort_defaults_to_medium(resolver: ParameterResolver, write_model) -> None:
    write_model("r", api_parameters={"supports_reasoning_effort": True})
    assert resolver.resolve("r").reasoning_effort == "medium"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


def test_unknown_model(resolver: ParameterResolver) -> None:
    with pytest.raises(ModelNotFoundError) as exc_info:
        resolver.resolve("missing")
    assert exc_info.value.model_id == "missing"
    assert str(exc_info.value) == "Model configuration not found: missing"


def test_invalid_token_parameter(resolver: ParameterResolver, write_model) -> None:
    write_model("m", api_parameters={"token_parameter": "max_token"})
    with pytest.raises(ConfigurationError, match="max_token"):
        resolver.resolve("m")


def test_missing_token_parameter(resolver: ParameterResolver, write_model) -> None:
    write_model("m", drop=("api_parameters.token_parameter",))
    with pytest.raises(ConfigurationError):
        resolver.resolve("m")


# ---------------------------------------------------------------------------
# effective_max_tokens
# ---------------------------------------------------------------------------


def test_effective_max_tokens(resolver: ParameterResolver, write_model) -> None:
    write_model("small", version_info={"max_context_tokens": 1000})
    write_model("open")
    settings = Settings(max_tokens=2000)
    assert resolver.effective_max_tokens("small", settings) == 1000
    assert resolver.effective_max_tokens("open", settings) == 2000
    assert resolver.effective_max_tokens("unknown", settings) == 2000


# ---------------------------------------------------------------------------
# Request body
# ---------------------------------------------------------------------------


def test_request_body_shape(resolver: ParameterResolver, write_model) -> None:
    from ai_content_writer.types.messages import Message

    write_model(
        "r",
        api_parameters={
            "token_parameter": "max_completion_tokens",
            "default_token_limit": 3000,
            "supports_temperature": False,
            "supports_reasoning_effort": True,
        },
    )
    body = resolver.resolve("r").to_request_body([Message.user("hi")])
    assert body == {
        "model": "r",
        "messages": [{"role": "user", "content": "hi"}],
        "max_completion_tokens": 3000,
        "reasoning_effort": "medium",
    }
