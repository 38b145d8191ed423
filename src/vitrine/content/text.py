"""Render raw rich-text field values into their processed form."""

from __future__ import annotations

import html
import re

from bs4 import BeautifulSoup


PLAIN_TEXT = "plain_text"
BASIC_HTML = "basic_html"
FULL_HTML = "full_html"

_BLOCKED_TAGS = ["script", "style", "iframe", "object", "embed"]
_PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")


def _render_plain_text(value: str) -> str:
    paragraphs: list[str] = []
    for chunk in _PARAGRAPH_SPLIT_RE.split(value.strip()):
        if not chunk.strip():
            continue
        lines = [html.escape(line.strip()) for line in chunk.splitlines()]
        paragraphs.append("<p>" + "<br>\n".join(lines) + "</p>")
    return "\n".join(paragraphs)


def _render_basic_html(value: str) -> str:
    soup = BeautifulSoup(value, "html.parser")
    for node in soup.find_all(_BLOCKED_TAGS):
        node.decompose()

    for node in soup.find_all(True):
        for attr in list(node.attrs):
            attr_value = node.attrs[attr]
            if isinstance(attr_value, list):
                attr_value = " ".join(attr_value)
            if attr.lower().startswith("on"):
                del node.attrs[attr]
            elif attr.lower() in ("href", "src") and str(attr_value).strip().lower().startswith("javascript:"):
                del node.attrs[attr]
    return str(soup).strip()


def process_text(value: str | None, text_format: str | None = None) -> str:
    """Return the processed form of a stored text value.

    Unknown formats are rendered as plain text.
    """
    if not value:
        return ""
    if text_format == FULL_HTML:
        return value
    if text_format == BASIC_HTML:
        return _render_basic_html(value)
    return _render_plain_text(value)
