"""Navigation tree rows derived from flat, dotted namespace names."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from ..models import Namespace


@dataclass(frozen=True)
class HierarchyNode:
    """One row of the namespace navigation tree."""

    name: str
    depth: int
    branch: bool
    namespace: Optional[Namespace] = None

    @property
    def short_name(self) -> str:
        return split_namespace(self.name)[-1]

    @property
    def linkable(self) -> bool:
        return self.namespace is not None


def split_namespace(name: str) -> List[str]:
    return name.split(".")


def namespace_depth(name: str) -> int:
    return len(split_namespace(name))


def namespace_parts(name: str) -> List[str]:
    """Return every non-empty dot-prefix of ``name``, shortest first."""
    segments = split_namespace(name)
    return [".".join(segments[: index + 1]) for index in range(len(segments))]


def namespace_hierarchy(namespaces: Iterable[Namespace]) -> List[HierarchyNode]:
    """Return tree rows for ``namespaces``, including synthetic ancestors.

    Rows follow sorted-name order with each prefix kept at its first
    occurrence. A row is a branch when the next row sits at the same depth.
    """
    by_name: Dict[str, Namespace] = {namespace.name: namespace for namespace in namespaces}
    parts = [part for name in sorted(by_name) for part in namespace_parts(name)]
    names = list(dict.fromkeys(parts))
    depths = [namespace_depth(name) for name in names]
    following: List[Optional[int]] = [*depths[1:], None]

    return [
        HierarchyNode(
            name=name,
            depth=depth,
            branch=depth == next_depth,
            namespace=by_name.get(name),
        )
        for name, depth, next_depth in zip(names, depths, following)
    ]


__all__ = [
    "HierarchyNode",
    "namespace_depth",
    "namespace_hierarchy",
    "namespace_parts",
    "split_namespace",
]
