"""Normalization of raw model output per target format."""
from __future__ import annotations

import html
import re

from bs4 import BeautifulSoup

from ai_content_writer.types.enums import ContentFormat

_QUOTES = ("\"", "'")
_WHITESPACE_RE = re.compile(r"\s+")
_NEWLINE_RE = re.compile(r"(\r\n|\n\r|\n|\r)")


def strip_quotes(text: str) -> str:
    """Remove one leading and one trailing quote character, independently."""
    if text[:1] in _QUOTES:
        text = text[1:]
    if text[-1:] in _QUOTES:
        text = text[:-1]
    return text


def nl2br(text: str) -> str:
    """Insert ``<br />`` before every line break."""
    return _NEWLINE_RE.sub(r"<br />\1", text)


def strip_tags(text: str) -> str:
    return BeautifulSoup(text, "html.parser").get_text()


class ContentFormatter:
    """Turns raw model output into field-ready content."""

    def format(self, raw_content: str, target_format: ContentFormat | str | None) -> str:
        content = strip_quotes(raw_content.strip())
        fmt = ContentFormat.parse(target_format)

        if fmt is ContentFormat.HTML:
            return self.to_html(content)
        if fmt is ContentFormat.MARKDOWN:
            return content
        return self.to_plain(content)

    @staticmethod
    def to_html(content: str) -> str:
        """Wrap tag-free text in a paragraph; leave model-supplied markup alone."""
        if not content.strip() or "<" in content:
            return content
        return f"<p>{nl2br(html.escape(content))}</p>"

    @staticmethod
    def to_plain(content: str) -> str:
        return _WHITESPACE_RE.sub(" ", strip_tags(content)).strip()
