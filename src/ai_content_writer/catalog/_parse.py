"""Translate parsed YAML documents into :class:`ModelDescriptor` records."""
from __future__ import annotations

import math
from pathlib import Path
from typing import Any, Mapping

from ai_content_writer.catalog.types import (
    ApiParameters,
    ModelCapabilities,
    ModelDescriptor,
    UiDisplay,
    VersionInfo,
)

_MISSING = object()


def get_path(doc: Mapping[str, Any], dotted: str, default: Any = None) -> Any:
    """Return ``doc["a"]["b"]`` for ``"a.b"``, or *default* when absent."""
    current: Any = doc
    for key in dotted.split("."):
        if not isinstance(current, Mapping) or key not in current:
            return default
        current = current[key]
    return current


def has_path(doc: Mapping[str, Any], dotted: str) -> bool:
    return get_path(doc, dotted, _MISSING) is not _MISSING


def is_number(value: Any) -> bool:
    """Finite ints, floats and numeric strings. ``nan`` and ``inf`` are not numbers."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, str):
        try:
            return math.isfinite(float(value))
        except ValueError:
            return False
    return False


def _as_int(value: Any) -> int | None:
    if is_number(value):
        return int(float(value))
    return None


def _as_float(value: Any) -> float | None:
    if is_number(value):
        return float(value)
    return None


def _as_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def model_id_of(doc: Any) -> str | None:
    """The ``model.id`` of a document, or ``None`` if it has none."""
    if not isinstance(doc, Mapping):
        return None
    model_id = get_path(doc, "model.id")
    if model_id is None or model_id == "":
        return None
    return str(model_id)


def parse_descriptor(doc: Mapping[str, Any], source: Path | None = None) -> ModelDescriptor:
    """Build a descriptor from a parsed document.

    Booleans only count as true when they are literally ``true``. Values of
    the wrong type fall back to the field default here and are reported by
    :func:`ai_content_writer.catalog.validation.validate_descriptor`.
    """
    model_id = model_id_of(doc)
    if model_id is None:
        raise ValueError("descriptor is missing 'model.id'")

    supports_temperature = get_path(doc, "api_parameters.supports_temperature", True) is True
    supports_reasoning = get_path(doc, "api_parameters.supports_reasoning_effort", False) is True

    temperature = _as_float(get_path(doc, "api_parameters.default_temperature"))
    if supports_temperature and temperature is None:
        temperature = 0.1

    effort = _as_str(get_path(doc, "api_parameters.default_reasoning_effort"))
    if supports_reasoning and effort is None:
        effort = "medium"

    priority = get_path(doc, "ui_display.priority", _MISSING)
    if priority is _MISSING:
        priority = get_path(doc, "metadata.priority", 0)

    return ModelDescriptor(
        id=model_id,
        display_name=str(
            get_path(doc, "model.friendly_name")
            or get_path(doc, "model.name")
            or model_id
        ),
        description=str(get_path(doc, "model.description") or ""),
        capabilities=ModelCapabilities(
            supports_vision=get_path(doc, "capabilities.vision", False) is True,
        ),
        api_parameters=ApiParameters(
            token_parameter=_as_str(get_path(doc, "api_parameters.token_parameter")),
            default_token_limit=_as_int(get_path(doc, "api_parameters.default_token_limit")),
            supports_temperature=supports_temperature,
            default_temperature=temperature if supports_temperature else None,
            supports_reasoning_effort=supports_reasoning,
            default_reasoning_effort=effort if supports_reasoning else None,
        ),
        version_info=VersionInfo(
            max_context_tokens=_as_int(get_path(doc, "version_info.max_context_tokens")),
        ),
        ui_display=UiDisplay(
            show_in_dropdown=get_path(doc, "ui_display.show_in_dropdown", True) is True,
            priority=_as_float(priority) or 0,
            badge=_as_str(get_path(doc, "ui_display.badge")),
            recommended=get_path(doc, "ui_display.recommended", False) is True,
        ),
        source=source,
        raw=doc,
    )
