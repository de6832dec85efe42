"""Core data models for the documentation site renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

DEFAULT_OUTPUT_DIR = "doc"


@dataclass(frozen=True)
class Deprecation:
    """Marks a var as deprecated, optionally since a given version."""

    since: Optional[str] = None

    @classmethod
    def from_value(cls, value: Any) -> Optional["Deprecation"]:
        """Map a raw model value (bool, version string or None) to a marker."""
        if value is None or value is False:
            return None
        if value is True:
            return cls()
        return cls(since=str(value))


@dataclass(frozen=True)
class Var:
    """A public symbol documented inside a namespace."""

    name: str
    doc: Optional[str] = None
    arglists: Tuple[Tuple[str, ...], ...] = ()
    macro: bool = False
    added: Optional[str] = None
    deprecated: Optional[Deprecation] = None
    path: Optional[str] = None
    line: Optional[int] = None


@dataclass(frozen=True)
class Namespace:
    """A dotted namespace and the public vars it exposes."""

    name: str
    doc: Optional[str] = None
    publics: Tuple[Var, ...] = ()


@dataclass(frozen=True)
class Project:
    """Everything needed to render a documentation site."""

    name: str
    version: str
    description: str = ""
    output_dir: str = DEFAULT_OUTPUT_DIR
    src_dir_uri: Optional[str] = None
    src_linenum_anchor_prefix: Optional[str] = None
    namespaces: Tuple[Namespace, ...] = ()


__all__ = ["DEFAULT_OUTPUT_DIR", "Deprecation", "Namespace", "Project", "Var"]
