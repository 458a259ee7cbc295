"""Tests for field kinds."""
from __future__ import annotations

import pytest

from ai_content_writer.fields import (
    DEFAULT_FIELD_SUPPORT,
    FieldKind,
    InsertionMethod,
    format_for,
    insertion_method,
)
from ai_content_writer.types.enums import ContentFormat


@pytest.mark.parametrize(
    "kind, fmt",
    [
        (FieldKind.PLAIN_TEXT, ContentFormat.PLAIN),
        (FieldKind.TABLE, ContentFormat.PLAIN),
        (FieldKind.ENTRY_TITLE, ContentFormat.PLAIN),
        (FieldKind.RICH_TEXT, ContentFormat.HTML),
        (FieldKind.MATRIX, ContentFormat.HTML),
    ],
)
def test_format_for(kind: FieldKind, fmt: ContentFormat) -> None:
    assert format_for(kind) is fmt


@pytest.mark.parametrize(
    "kind, method",
    [
        (FieldKind.PLAIN_TEXT, InsertionMethod.DIRECT),
        (FieldKind.ENTRY_TITLE, InsertionMethod.DIRECT),
        (FieldKind.RICH_TEXT, InsertionMethod.API),
        (FieldKind.TABLE, InsertionMethod.SPECIAL),
        (FieldKind.MATRIX, InsertionMethod.SPECIAL),
    ],
)
def test_insertion_method(kind: FieldKind, method: InsertionMethod) -> None:
    assert insertion_method(kind) is method


def test_every_kind_supported_by_default() -> None:
    assert set(DEFAULT_FIELD_SUPPORT) == set(FieldKind)
    assert all(DEFAULT_FIELD_SUPPORT.values())


def test_kinds_are_strings() -> None:
    assert FieldKind("rich_text") is FieldKind.RICH_TEXT
    assert str(FieldKind.ENTRY_TITLE) == "entry_title"
