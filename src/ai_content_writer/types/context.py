"""Per-call generation context."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ai_content_writer.types.enums import ContentFormat


@dataclass(frozen=True)
class GenerationContext:
    """Where the generated content is going."""

    entry_type_handle: str | None = None
    section_handle: str | None = None
    field_handle: str | None = None
    format: ContentFormat | None = None
    existing_content: str | None = None
    entry_title: str | None = None

    @property
    def target_format(self) -> ContentFormat:
        """The format to produce; plain text when none was given."""
        return self.format or ContentFormat.PLAIN

    @property
    def is_empty(self) -> bool:
        return (
            self.entry_type_handle is None
            and self.field_handle is None
            and self.format is None
            and not self.existing_content
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GenerationContext:
        """Build a context from the camelCase keys host adapters send."""
        fmt = data.get("format")
        existing = data.get("existingContent")
        return cls(
            entry_type_handle=data.get("entryType"),
            section_handle=data.get("section"),
            field_handle=data.get("field"),
            format=ContentFormat.parse(fmt) if fmt is not None else None,
            existing_content=str(existing) if existing is not None else None,
            entry_title=data.get("entryTitle"),
        )
