"""Text helpers: HTML escaping, URL autolinking and doc summaries."""

from __future__ import annotations

import re
from typing import List, Optional

import markupsafe
from markupsafe import Markup

URL_PATTERN = re.compile(
    r"((?:https?|ftp|file)://[-A-Za-z0-9+&@#/%?=~_|!:,.;]+[-A-Za-z0-9+&@#/%=~_|])"
)

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
_SENTENCE_END = re.compile(r"\.(?=\s|$)")
_ANCHOR = Markup('<a href="{0}">{0}</a>')


def escape(text: Optional[str]) -> Markup:
    if text is None:
        return Markup("")
    return markupsafe.escape(text)


def linkify(text: Optional[str]) -> Markup:
    """Escape ``text``, wrapping bare URLs in anchors.

    URLs are matched in the raw text so the entities produced by escaping never
    end up inside a link.
    """
    if text is None:
        return Markup("")
    parts: List[Markup] = []
    position = 0
    for match in URL_PATTERN.finditer(text):
        parts.append(escape(text[position : match.start()]))
        parts.append(_ANCHOR.format(match.group(0)))
        position = match.end()
    parts.append(escape(text[position:]))
    return Markup("").join(parts)


def summarize(text: Optional[str]) -> Optional[str]:
    """Return the first sentence of the first paragraph of ``text``."""
    if text is None:
        return None
    paragraph = _PARAGRAPH_BREAK.split(text.strip(), maxsplit=1)[0]
    match = _SENTENCE_END.search(paragraph)
    if match:
        return paragraph[: match.end()]
    return paragraph


def format_doc(text: Optional[str]) -> Markup:
    return linkify(text)


__all__ = ["URL_PATTERN", "escape", "format_doc", "linkify", "summarize"]
