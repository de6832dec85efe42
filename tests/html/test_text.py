"""Tests for escaping, autolinking and summaries."""

from __future__ import annotations

from markupsafe import Markup

from docsite.html.text import escape, format_doc, linkify, summarize


def test_escape_handles_missing_text() -> None:
    assert escape(None) == Markup("")
    assert escape("a < b & c") == Markup("a &lt; b &amp; c")


def test_linkify_wraps_supported_schemes() -> None:
    text = "See http://a.io/x, https://b.io/y?q=1 and ftp://c.io/z."
    linked = str(linkify(text))
    assert '<a href="http://a.io/x">http://a.io/x</a>,' in linked
    assert '<a href="https://b.io/y?q=1">https://b.io/y?q=1</a>' in linked
    assert '<a href="ftp://c.io/z">ftp://c.io/z</a>.' in linked


def test_linkify_ignores_unknown_schemes() -> None:
    assert str(linkify("mailto:me@example.com gopher://x")) == (
        "mailto:me@example.com gopher://x"
    )


def test_format_doc_escapes_text_around_links() -> None:
    html = str(format_doc("<tag> file:///tmp/a.txt"))
    assert html == '&lt;tag&gt; <a href="file:///tmp/a.txt">file:///tmp/a.txt</a>'


def test_summarize_takes_first_sentence_of_first_paragraph() -> None:
    assert summarize("Does things. Then more.\n\nSecond paragraph.") == "Does things."
    assert summarize("  Line one\nline two\n\nrest") == "Line one\nline two"
    assert summarize("Version 1.2 is out") == "Version 1.2 is out"
    assert summarize(None) is None


def test_linkify_stops_urls_at_quotes_and_angle_brackets() -> None:
    html = str(format_doc("See 'http://example.com/a' or \"https://b.io/x\"."))
    assert html == (
        "See &#39;<a href=\"http://example.com/a\">http://example.com/a</a>&#39; or "
        "&#34;<a href=\"https://b.io/x\">https://b.io/x</a>&#34;."
    )

    bracketed = str(format_doc("See <http://example.com/a>."))
    assert bracketed == 'See &lt;<a href="http://example.com/a">http://example.com/a</a>&gt;.'


def test_linkify_escapes_ampersands_inside_urls() -> None:
    html = str(linkify("https://b.io/y?a=1&b=2 <x>"))
    assert html == (
        '<a href="https://b.io/y?a=1&amp;b=2">https://b.io/y?a=1&amp;b=2</a> &lt;x&gt;'
    )
    assert linkify(None) == Markup("")
