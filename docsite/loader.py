"""Builds a Project from an extracted documentation model file."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Set, Tuple

import yaml

from .config import DocSiteConfig
from .logging import get_logger
from .models import DEFAULT_OUTPUT_DIR, Deprecation, Namespace, Project, Var

logger = get_logger("loader")


class ModelError(ValueError):
    """Raised when a documentation model is malformed."""


def load_project(path: Path, *, config: DocSiteConfig | None = None) -> Project:
    """Read a YAML or JSON model file and return the Project it describes."""
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ModelError(f"Failed to parse {Path(path).name}: {exc}") from exc
    if not isinstance(data, Mapping):
        raise ModelError(f"{Path(path).name} must contain a mapping at the root")
    return project_from_dict(data, config=config)


def project_from_dict(
    data: Mapping[str, Any], *, config: DocSiteConfig | None = None
) -> Project:
    """Build a Project from a mapping, applying config overrides."""
    name = _require_name(data, "project")
    namespaces = tuple(
        _namespace_from_dict(item) for item in _as_mappings(data.get("namespaces"), "namespaces")
    )
    _ensure_unique((namespace.name for namespace in namespaces), f"namespace in {name}")

    output_dir = _as_str(data.get("output_dir")) or DEFAULT_OUTPUT_DIR
    src_dir_uri = _as_str(data.get("src_dir_uri"))
    anchor_prefix = _as_str(data.get("src_linenum_anchor_prefix"))
    if config is not None:
        if config.output_dir is not None:
            output_dir = str(config.output_dir)
        src_dir_uri = config.src_dir_uri or src_dir_uri
        anchor_prefix = config.src_linenum_anchor_prefix or anchor_prefix

    logger.debug(
        "Loaded %d namespaces with %d public vars",
        len(namespaces),
        sum(len(namespace.publics) for namespace in namespaces),
    )
    return Project(
        name=name,
        version=_as_str(data.get("version")) or "",
        description=_as_str(data.get("description")) or "",
        output_dir=output_dir,
        src_dir_uri=src_dir_uri,
        src_linenum_anchor_prefix=anchor_prefix,
        namespaces=namespaces,
    )


def _namespace_from_dict(data: Mapping[str, Any]) -> Namespace:
    name = _require_name(data, "namespace")
    publics = tuple(_var_from_dict(item) for item in _as_mappings(data.get("publics"), name))
    _ensure_unique((var.name for var in publics), f"var in {name}")
    return Namespace(name=name, doc=_as_str(data.get("doc")), publics=publics)


def _var_from_dict(data: Mapping[str, Any]) -> Var:
    return Var(
        name=_require_name(data, "var"),
        doc=_as_str(data.get("doc")),
        arglists=_as_arglists(data.get("arglists")),
        macro=bool(data.get("macro", False)),
        added=_as_str(data.get("added")),
        deprecated=Deprecation.from_value(data.get("deprecated")),
        path=_as_str(data.get("path")),
        line=_as_line(data.get("line")),
    )


def _require_name(data: Mapping[str, Any], kind: str) -> str:
    name = _as_str(data.get("name"))
    if not name:
        raise ModelError(f"Every {kind} requires a name")
    return name


def _ensure_unique(names: Iterable[str], kind: str) -> None:
    seen: Set[str] = set()
    for name in names:
        if name in seen:
            raise ModelError(f"Duplicate {kind}: {name}")
        seen.add(name)


def _as_mappings(value: Any, owner: str) -> List[Mapping[str, Any]]:
    if value is None:
        return []
    if not isinstance(value, Sequence) or isinstance(value, str):
        raise ModelError(f"Expected a list of entries under {owner}")
    items: List[Mapping[str, Any]] = []
    for item in value:
        if not isinstance(item, Mapping):
            raise ModelError(f"Expected a mapping entry under {owner}, got {item!r}")
        items.append(item)
    return items


def _as_arglists(value: Any) -> Tuple[Tuple[str, ...], ...]:
    if not value:
        return ()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ModelError(f"Expected a list of arglists, got {value!r}")
    arglists: List[Tuple[str, ...]] = []
    for arglist in value:
        if isinstance(arglist, str) or not isinstance(arglist, Sequence):
            raise ModelError(f"Expected each arglist to be a list, got {arglist!r}")
        arglists.append(tuple(_format_token(token) for token in arglist))
    return tuple(arglists)


def _format_token(token: Any) -> str:
    """Print a parameter token in reader syntax: lists as ``[a b]``, maps as ``{k v}``."""
    if isinstance(token, Mapping):
        return "{" + " ".join(f"{_format_token(k)} {_format_token(v)}" for k, v in token.items()) + "}"
    if isinstance(token, Sequence) and not isinstance(token, str):
        return "[" + " ".join(_format_token(item) for item in token) + "]"
    if isinstance(token, bool):
        return "true" if token else "false"
    if token is None:
        return "nil"
    return str(token)


def _as_line(value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ModelError(f"Invalid line number: {value!r}") from exc


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


__all__ = ["ModelError", "load_project", "project_from_dict"]
