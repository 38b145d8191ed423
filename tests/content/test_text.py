from __future__ import annotations

from vitrine.content.text import BASIC_HTML, FULL_HTML, PLAIN_TEXT, process_text


def test_plain_text_is_escaped_and_wrapped_in_paragraphs() -> None:
    rendered = process_text("Fish & chips\nwith <salt>\n\nSecond paragraph", PLAIN_TEXT)

    assert rendered == "<p>Fish &amp; chips<br>\nwith &lt;salt&gt;</p>\n<p>Second paragraph</p>"


def test_basic_html_drops_scripts_and_event_handlers() -> None:
    raw = '<p onclick="steal()">Hi <a href="javascript:alert(1)">there</a></p><script>x()</script>'

    rendered = process_text(raw, BASIC_HTML)

    assert rendered == "<p>Hi <a>there</a></p>"


def test_full_html_passes_through() -> None:
    raw = "<div><iframe src='https://example.com'></iframe></div>"

    assert process_text(raw, FULL_HTML) == raw


def test_unknown_format_falls_back_to_plain_text() -> None:
    assert process_text("<b>bold</b>", "markdown") == "<p>&lt;b&gt;bold&lt;/b&gt;</p>"


def test_empty_values_render_empty() -> None:
    assert process_text(None, BASIC_HTML) == ""
    assert process_text("", PLAIN_TEXT) == ""
