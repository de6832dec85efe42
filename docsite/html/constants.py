"""Shared constants for page composition and asset output."""

from __future__ import annotations

INDEX_FILENAME = "index.html"
PAGE_EXTENSION = ".html"
VAR_ID_PREFIX = "var-"

STYLESHEET = "css/default.css"
SCRIPTS: tuple[str, ...] = ("js/page_effects.js",)
ASSET_DIRS: tuple[str, ...] = ("css", "js")

PROJECT_TITLE_SUFFIX = "API documentation"
NAMESPACE_TITLE_SUFFIX = "documentation"


__all__ = [
    "ASSET_DIRS",
    "INDEX_FILENAME",
    "NAMESPACE_TITLE_SUFFIX",
    "PAGE_EXTENSION",
    "PROJECT_TITLE_SUFFIX",
    "SCRIPTS",
    "STYLESHEET",
    "VAR_ID_PREFIX",
]
