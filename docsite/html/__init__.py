"""HTML rendering: identifiers, navigation hierarchy, markup and pages."""

from .hierarchy import HierarchyNode, namespace_hierarchy
from .ids import namespace_filename, namespace_filepath, var_id, var_source_uri, var_uri
from .markup import Element, render, render_document
from .pages import index_page, namespace_page

__all__ = [
    "Element",
    "HierarchyNode",
    "index_page",
    "namespace_filename",
    "namespace_filepath",
    "namespace_hierarchy",
    "namespace_page",
    "render",
    "render_document",
    "var_id",
    "var_source_uri",
    "var_uri",
]
