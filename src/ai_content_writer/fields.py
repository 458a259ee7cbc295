"""Supported field kinds and how content is delivered to them.

Host adapters map their own field classes onto :class:`FieldKind`; the
rest of the package only ever sees the closed enumeration.
"""
from __future__ import annotations

from enum import StrEnum

from ai_content_writer.types.enums import ContentFormat


class FieldKind(StrEnum):
    """Kinds of field that can receive generated content."""

    PLAIN_TEXT = "plain_text"
    TABLE = "table"
    MATRIX = "matrix"
    RICH_TEXT = "rich_text"
    ENTRY_TITLE = "entry_title"


class InsertionMethod(StrEnum):
    """How the editor UI writes content into a field."""

    DIRECT = "direct"
    API = "api"
    SPECIAL = "special"


_FORMATS: dict[FieldKind, ContentFormat] = {
    FieldKind.PLAIN_TEXT: ContentFormat.PLAIN,
    FieldKind.TABLE: ContentFormat.PLAIN,
    FieldKind.MATRIX: ContentFormat.HTML,
    FieldKind.RICH_TEXT: ContentFormat.HTML,
    FieldKind.ENTRY_TITLE: ContentFormat.PLAIN,
}

_INSERTION: dict[FieldKind, InsertionMethod] = {
    FieldKind.PLAIN_TEXT: InsertionMethod.DIRECT,
    FieldKind.TABLE: InsertionMethod.SPECIAL,
    FieldKind.MATRIX: InsertionMethod.SPECIAL,
    FieldKind.RICH_TEXT: InsertionMethod.API,
    FieldKind.ENTRY_TITLE: InsertionMethod.DIRECT,
}

DEFAULT_FIELD_SUPPORT: dict[FieldKind, bool] = {kind: True for kind in FieldKind}


def format_for(kind: FieldKind) -> ContentFormat:
    """Content format a field of *kind* stores."""
    return _FORMATS[kind]


def insertion_method(kind: FieldKind) -> InsertionMethod:
    """How content is written into a field of *kind*."""
    return _INSERTION[kind]
