"""Model catalog backed by a directory of YAML descriptors."""
from __future__ import annotations

import hashlib
import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from ai_content_writer.catalog._parse import model_id_of, parse_descriptor
from ai_content_writer.catalog.types import (
    ApiParameters,
    ModelCapabilities,
    ModelDescriptor,
    UiDisplay,
    VersionInfo,
)
from ai_content_writer.catalog.validation import validate_descriptor

logger = logging.getLogger(__name__)

DEFAULT_MODELS_DIR = Path(__file__).parent / "models"
SOURCE_PATTERNS = ("*.yaml", "*.yml")


@dataclass(frozen=True)
class _Snapshot:
    """An immutable, fully built index. Replaced wholesale on reload."""

    models: dict[str, ModelDescriptor] = field(default_factory=dict)
    fingerprints: dict[Path, str] = field(default_factory=dict)


def fingerprint(data: bytes) -> str:
    return hashlib.md5(data).hexdigest()


class ModelCatalog:
    """Loads model descriptors and answers capability questions.

    Every lookup first calls :meth:`load`, which re-reads the directory,
    compares content hashes with the previous load and only rebuilds the
    index when something changed. Readers always see a complete index.
    """

    def __init__(self, config_dir: str | Path = DEFAULT_MODELS_DIR) -> None:
        self._config_dir = Path(config_dir)
        self._snapshot: _Snapshot | None = None
        self._lock = threading.Lock()

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self) -> bool:
        """Bring the index up to date. Returns ``True`` if it was rebuilt."""
        sources = self._read_sources()
        fingerprints = {path: fingerprint(data) for path, data in sources.items()}
        current = self._snapshot
        if current is not None and current.fingerprints == fingerprints:
            return False

        with self._lock:
            current = self._snapshot
            if current is not None and current.fingerprints == fingerprints:
                return False
            if current is not None:
                self._log_change(current.fingerprints, fingerprints)
            self._snapshot = self._build(sources, fingerprints)
        logger.info(
            "Loaded %d model configuration(s) from %s",
            len(self._snapshot.models),
            self._config_dir,
        )
        return True

    ensure_fresh = load

    def reload(self) -> None:
        """Discard the index and rebuild it from disk."""
        with self._lock:
            self._snapshot = None
        self.load()

    def _read_sources(self) -> dict[Path, bytes]:
        if not self._config_dir.is_dir():
            if self._snapshot is None or self._snapshot.fingerprints:
                logger.warning(
                    "Model configuration directory not found: %s", self._config_dir
                )
            return {}

        paths = sorted(
            {p for pattern in SOURCE_PATTERNS for p in self._config_dir.rglob(pattern)}
        )
        sources: dict[Path, bytes] = {}
        for path in paths:
            if not path.is_file():
                continue
            try:
                sources[path] = path.read_bytes()
            except OSError as exc:
                logger.error("Failed to read model configuration file %s: %s", path, exc)
        return sources

    def _build(self, sources: dict[Path, bytes], fingerprints: dict[Path, str]) -> _Snapshot:
        models: dict[str, ModelDescriptor] = {}
        for path, data in sources.items():
            try:
                doc = yaml.safe_load(data)
            except yaml.YAMLError as exc:
                logger.error("Failed to parse model configuration file %s: %s", path, exc)
                continue

            model_id = model_id_of(doc)
            if model_id is None:
                logger.warning("Model configuration missing 'model.id' in file: %s", path)
                continue
            try:
                descriptor = parse_descriptor(doc, source=path)
            except (ValueError, TypeError, OverflowError) as exc:
                logger.error("Invalid model configuration in file %s: %s", path, exc)
                continue
            if model_id in models:
                logger.warning(
                    "Duplicate model id '%s' in %s overrides %s",
                    model_id,
                    path,
                    models[model_id].source,
                )
            models[model_id] = descriptor
        return _Snapshot(models=models, fingerprints=fingerprints)

    @staticmethod
    def _log_change(old: dict[Path, str], new: dict[Path, str]) -> None:
        for path, digest in new.items():
            if old.get(path) != digest:
                logger.info("Configuration change detected in file: %s", path)
        if len(old) != len(new):
            logger.info(
                "Configuration file count changed: %d files found, %d previously loaded",
                len(new),
                len(old),
            )

    def _models(self) -> dict[str, ModelDescriptor]:
        self.load()
        snapshot = self._snapshot
        return snapshot.models if snapshot is not None else {}

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_model(self, model_id: str) -> ModelDescriptor | None:
        return self._models().get(model_id)

    def list_all(self) -> list[ModelDescriptor]:
        """All descriptors in source order."""
        return list(self._models().values())

    def list_vision_capable(self) -> list[ModelDescriptor]:
        """Vision models shown in pickers, highest priority first."""
        visible = [
            m
            for m in self._models().values()
            if m.capabilities.supports_vision and m.ui_display.show_in_dropdown
        ]
        return sorted(visible, key=lambda m: m.ui_display.priority, reverse=True)

    def validate(self) -> list[str]:
        """Return every rule violation across all loaded descriptors."""
        issues: list[str] = []
        for descriptor in self._models().values():
            issues.extend(validate_descriptor(descriptor))
        return issues

    def supports_vision(self, model_id: str) -> bool:
        model = self.get_model(model_id)
        return model is not None and model.capabilities.supports_vision

    def supports_temperature(self, model_id: str) -> bool:
        model = self.get_model(model_id)
        return model is not None and model.api_parameters.supports_temperature

    def supports_reasoning_effort(self, model_id: str) -> bool:
        model = self.get_model(model_id)
        return model is not None and model.api_parameters.supports_reasoning_effort

    def friendly_name(self, model_id: str) -> str:
        model = self.get_model(model_id)
        return model.name if model is not None else model_id

    def __len__(self) -> int:
        return len(self._models())

    def __contains__(self, model_id: object) -> bool:
        return isinstance(model_id, str) and model_id in self._models()


__all__ = [
    "ApiParameters",
    "DEFAULT_MODELS_DIR",
    "ModelCapabilities",
    "ModelCatalog",
    "ModelDescriptor",
    "UiDisplay",
    "VersionInfo",
]
