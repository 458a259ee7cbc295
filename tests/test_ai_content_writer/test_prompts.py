"""Tests for system prompt composition."""
from __future__ import annotations

import pytest

from ai_content_writer.prompts import DEFAULT_SYSTEM_PROMPT, PromptComposer
from ai_content_writer.types.context import GenerationContext
from ai_content_writer.types.enums import ContentFormat, Role

BASE = "You are a writer."


@pytest.fixture
def composer() -> PromptComposer:
    return PromptComposer()


def test_empty_context_returns_base_unchanged(composer: PromptComposer) -> None:
    assert composer.build_system_prompt(BASE, GenerationContext()) == BASE
    assert composer.build_system_prompt(BASE) == BASE


def test_full_context(composer: PromptComposer) -> None:
    context = GenerationContext(
        entry_type_handle="blogPost",
        field_handle="summary",
        format=ContentFormat.HTML,
        existing_content="Earlier draft",
    )
    assert composer.build_system_prompt(BASE, context) == (
        "You are a writer.\n\n"
        "Additional context:\n"
        "This content is for a blogPost entry type.\n"
        "The content will be inserted into the 'summary' field.\n"
        "Format the content as clean HTML with appropriate tags.\n"
        "Consider the existing content context when generating new content."
    )


@pytest.mark.parametrize(
    "fmt, line",
    [
        (ContentFormat.HTML, "Format the content as clean HTML with appropriate tags."),
        (ContentFormat.MARKDOWN, "Format the content as Markdown."),
        (ContentFormat.PLAIN, "Format the content as plain text."),
    ],
)
def test_format_line(composer: PromptComposer, fmt: ContentFormat, line: str) -> None:
    prompt = composer.build_system_prompt(BASE, GenerationContext(format=fmt))
    assert prompt.endswith(line)


def test_only_present_fields_emit_lines(composer: PromptComposer) -> None:
    lines = composer.context_instructions(GenerationContext(field_handle="title"))
    assert lines == ["The content will be inserted into the 'title' field."]


def test_no_format_line_without_format(composer: PromptComposer) -> None:
    lines = composer.context_instructions(GenerationContext(entry_type_handle="page"))
    assert not any(line.startswith("Format the content") for line in lines)


def test_empty_existing_content_is_ignored(composer: PromptComposer) -> None:
    assert composer.context_instructions(GenerationContext(existing_content="")) == []


def test_build_messages(composer: PromptComposer) -> None:
    system, user = composer.build_messages(
        "Write a tagline", BASE, GenerationContext(format=ContentFormat.PLAIN)
    )
    assert system.role is Role.SYSTEM
    assert system.content.startswith(BASE)
    assert user.role is Role.USER
    assert user.content == "Write a tagline"


def test_default_system_prompt() -> None:
    assert DEFAULT_SYSTEM_PROMPT.startswith("You are a professional content writer")
    assert DEFAULT_SYSTEM_PROMPT.endswith("based on the following prompt:")
