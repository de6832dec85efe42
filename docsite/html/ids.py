"""Stable identifiers and link targets for namespaces and vars."""

from __future__ import annotations

from pathlib import Path
from typing import Optional
from urllib.parse import quote

from ..models import Namespace, Var
from .constants import PAGE_EXTENSION, VAR_ID_PREFIX


def namespace_filename(namespace: Namespace) -> str:
    return f"{namespace.name}{PAGE_EXTENSION}"


def namespace_filepath(output_dir: Path | str, namespace: Namespace) -> Path:
    return Path(output_dir) / namespace_filename(namespace)


def var_id(var: Var) -> str:
    """Return an HTML id for the var that is unique within its namespace page.

    The name is percent-encoded with no safe characters and every ``%`` is
    then swapped for ``.``. Literal dots are encoded first so the mapping stays
    injective.
    """
    # Dots are escaped too, so "a.b" becomes "var-a.2Eb" and "a " cannot collide with "a.20".
    encoded = quote(var.name, safe="").replace(".", "%2E")
    return VAR_ID_PREFIX + encoded.replace("%", ".")


def var_uri(namespace: Namespace, var: Var) -> str:
    return f"{namespace_filename(namespace)}#{var_id(var)}"


def var_source_uri(
    src_dir_uri: Optional[str], var: Var, anchor_prefix: Optional[str] = None
) -> Optional[str]:
    """Return the external source location of ``var``, if one can be built."""
    if not src_dir_uri or var.path is None:
        return None
    uri = f"{src_dir_uri}{var.path}"
    if anchor_prefix and var.line is not None:
        uri += f"#{anchor_prefix}{var.line}"
    return uri


__all__ = [
    "namespace_filename",
    "namespace_filepath",
    "var_id",
    "var_source_uri",
    "var_uri",
]
