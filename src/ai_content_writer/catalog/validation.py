"""Descriptor validation rules."""
from __future__ import annotations

from typing import Any, Mapping

from ai_content_writer.catalog._parse import get_path, has_path, is_number
from ai_content_writer.catalog.types import ModelDescriptor
from ai_content_writer.types.enums import ReasoningEffort, TokenParameter

REQUIRED_FIELDS = (
    "model.id",
    "capabilities.vision",
    "api_parameters.token_parameter",
)

BOOLEAN_FIELDS = (
    "capabilities.vision",
    "api_parameters.supports_temperature",
    "api_parameters.supports_reasoning_effort",
    "ui_display.show_in_dropdown",
    "ui_display.recommended",
)

POSITIVE_INT_FIELDS = (
    "api_parameters.default_token_limit",
    "version_info.max_context_tokens",
)

PRIORITY_FIELDS = ("ui_display.priority", "metadata.priority")

_TOKEN_PARAMETERS = [p.value for p in TokenParameter]
_REASONING_EFFORTS = [e.value for e in ReasoningEffort]


def _leaf(dotted: str) -> str:
    return dotted.rsplit(".", 1)[-1]


def validate_document(model_id: str, doc: Mapping[str, Any]) -> list[str]:
    """Return every rule *doc* violates. Never stops at the first."""
    issues: list[str] = []
    prefix = f"Model {model_id}:"

    for dotted in REQUIRED_FIELDS:
        if not has_path(doc, dotted):
            issues.append(f"{prefix} Missing required field '{dotted}'")

    token_param = get_path(doc, "api_parameters.token_parameter")
    if token_param is not None and token_param not in _TOKEN_PARAMETERS:
        issues.append(
            f"{prefix} Invalid token_parameter '{token_param}'. "
            f"Must be one of: {', '.join(_TOKEN_PARAMETERS)}"
        )

    for dotted in BOOLEAN_FIELDS:
        if has_path(doc, dotted) and not isinstance(get_path(doc, dotted), bool):
            issues.append(f"{prefix} '{_leaf(dotted)}' must be boolean")

    for dotted in POSITIVE_INT_FIELDS:
        if not has_path(doc, dotted):
            continue
        value = get_path(doc, dotted)
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            issues.append(f"{prefix} '{_leaf(dotted)}' must be a positive integer")

    if get_path(doc, "api_parameters.supports_reasoning_effort") is True:
        effort = get_path(doc, "api_parameters.default_reasoning_effort")
        if effort is not None and effort not in _REASONING_EFFORTS:
            issues.append(
                f"{prefix} 'default_reasoning_effort' must be one of: "
                f"{', '.join(_REASONING_EFFORTS)}"
            )

    for dotted in PRIORITY_FIELDS:
        if has_path(doc, dotted) and not is_number(get_path(doc, dotted)):
            issues.append(f"{prefix} 'priority' must be numeric")

    return issues


def validate_descriptor(descriptor: ModelDescriptor) -> list[str]:
    return validate_document(descriptor.id, descriptor.raw)
