"""Shared fixtures for ai_content_writer tests."""
from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Callable

import pytest
import yaml

from ai_content_writer.catalog import ModelCatalog


def _base_doc(model_id: str) -> dict[str, Any]:
    return {
        "model": {"id": model_id, "name": model_id.upper()},
        "capabilities": {"vision": True},
        "api_parameters": {
            "token_parameter": "max_tokens",
            "default_token_limit": 2000,
        },
        "ui_display": {"show_in_dropdown": True, "priority": 0},
    }


def _merge(base: dict[str, Any], extra: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in extra.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _drop(doc: dict[str, Any], dotted: str) -> None:
    *parents, leaf = dotted.split(".")
    current = doc
    for key in parents:
        current = current[key]
    current.pop(leaf, None)


@pytest.fixture
def models_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "models"
    directory.mkdir()
    return directory


@pytest.fixture
def write_model(models_dir: Path) -> Callable[..., Path]:
    """Write a descriptor file; keyword sections are deep-merged into a valid base."""

    def _write(
        model_id: str,
        filename: str | None = None,
        drop: tuple[str, ...] = (),
        **sections: Any,
    ) -> Path:
        doc = _merge(_base_doc(model_id), sections)
        for dotted in drop:
            _drop(doc, dotted)
        path = models_dir / (filename or f"{model_id}.yaml")
        path.write_text(yaml.safe_dump(doc, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def catalog(models_dir: Path) -> ModelCatalog:
    return ModelCatalog(models_dir)
