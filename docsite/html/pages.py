"""Composes the index page and per-namespace pages as markup trees."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from ..models import Namespace, Project, Var
from .constants import (
    INDEX_FILENAME,
    NAMESPACE_TITLE_SUFFIX,
    PROJECT_TITLE_SUFFIX,
    SCRIPTS,
    STYLESHEET,
)
from .hierarchy import HierarchyNode, namespace_hierarchy
from .ids import namespace_filename, var_id, var_source_uri, var_uri
from .markup import Element, document, el, include_css, include_js, link_to, unordered_list
from .text import escape, format_doc, summarize

GENERATOR_NAME = "docsite"

_TREE_PART = el("span.tree", el("span.top"), el("span.bottom"))


def project_title(project: Project) -> str:
    return f"{project.name.capitalize()} {project.version} {PROJECT_TITLE_SUFFIX}"


def namespace_title(namespace: Namespace) -> str:
    return f"{namespace.name} {NAMESPACE_TITLE_SUFFIX}"


def sorted_publics(namespace: Namespace) -> List[Var]:
    return sorted(namespace.publics, key=lambda var: var.name)


def var_usage(var: Var) -> List[str]:
    """Return one ``(name arg ...)`` form per arglist of ``var``."""
    return ["(" + " ".join([var.name, *arglist]) + ")" for arglist in var.arglists]


def index_page(project: Project) -> Element:
    """Build the site index listing every namespace and its public vars."""
    title = project_title(project)
    return document(
        _head(title),
        [
            _header(project),
            namespaces_menu(project),
            el(
                "div#content.namespace-index",
                el("h2", title),
                el("div.doc", escape(project.description)),
                [_namespace_summary(namespace) for namespace in _sorted_namespaces(project)],
            ),
        ],
    )


def namespace_page(project: Project, namespace: Namespace) -> Element:
    """Build the page documenting every public var of ``namespace``."""
    title = namespace_title(namespace)
    return document(
        _head(title),
        [
            _header(project),
            namespaces_menu(project, current=namespace),
            vars_menu(namespace),
            el(
                "div#content.namespace-docs",
                el("h2#top.anchor", title),
                _doc_block(namespace.doc),
                [_var_docs(project, var) for var in sorted_publics(namespace)],
            ),
        ],
    )


def namespaces_menu(project: Project, current: Optional[Namespace] = None) -> Element:
    """Build the namespace tree sidebar, marking ``current`` if given."""
    current_name = current.name if current is not None else None
    return el(
        "div#namespaces.sidebar",
        el("h3", link_to(INDEX_FILENAME, el("span.inner", "Namespaces"))),
        el("ul", [_tree_row(node, current_name) for node in namespace_hierarchy(project.namespaces)]),
    )


def vars_menu(namespace: Namespace) -> Element:
    return el(
        "div#vars.sidebar",
        el("h3", link_to("#top", el("span.inner", "Public Vars"))),
        var_links(namespace),
    )


def var_links(namespace: Namespace) -> Element:
    return unordered_list(
        link_to(var_uri(namespace, var), el("div.inner", el("span", var.name)))
        for var in sorted_publics(namespace)
    )


def _tree_row(node: HierarchyNode, current_name: Optional[str]) -> Element:
    classes = [f"depth-{node.depth}"]
    if node.branch:
        classes.append("branch")
    label = el("div.inner", _TREE_PART, el("span", node.short_name))
    if node.namespace is None:
        return el("li", {"class": " ".join(classes)}, el("div.no-link", label))
    if node.name == current_name:
        classes.append("current")
    return el("li", {"class": " ".join(classes)}, link_to(namespace_filename(node.namespace), label))


def _head(title: str) -> List[Element]:
    return [
        el("meta", {"charset": "UTF-8"}),
        include_css(STYLESHEET),
        [include_js(script) for script in SCRIPTS],
        el("title", title),
    ]


def _header(project: Project) -> Element:
    return el(
        "div#header",
        el("h2", f"Generated by {GENERATOR_NAME}"),
        el("h1", link_to(INDEX_FILENAME, project_title(project))),
    )


def _sorted_namespaces(project: Project) -> List[Namespace]:
    return sorted(project.namespaces, key=lambda namespace: namespace.name)


def _namespace_summary(namespace: Namespace) -> Element:
    summary = summarize(namespace.doc)
    return el(
        "div.namespace",
        el("h3", link_to(namespace_filename(namespace), namespace.name)),
        _doc_block(summary),
        el(
            "div.index",
            el("p", "Public variables and functions:"),
            var_links(namespace),
        ),
    )


def _doc_block(doc: Optional[str]) -> Optional[Element]:
    if doc is None:
        return None
    return el("pre.doc", format_doc(doc))


def _var_docs(project: Project, var: Var) -> Element:
    return el(
        "div.public.anchor",
        {"id": var_id(var)},
        el("h3", var.name),
        _var_markers(var),
        el("div.usage", [el("code", form) for form in var_usage(var)]),
        _doc_block(var.doc),
        _source_link(project, var),
    )


def _var_markers(var: Var) -> Iterable[Any]:
    if var.macro:
        yield el("h4.macro", "macro")
    if var.added is not None:
        yield el("h4.added", f"added in {var.added}")
    if var.deprecated is not None:
        if var.deprecated.since is not None:
            yield el("h4.deprecated", f"deprecated in {var.deprecated.since}")
        else:
            yield el("h4.deprecated", "deprecated")


def _source_link(project: Project, var: Var) -> Optional[Element]:
    uri = var_source_uri(project.src_dir_uri, var, project.src_linenum_anchor_prefix)
    if uri is None:
        return None
    return el("div.src-link", link_to(uri, "Source"))


__all__ = [
    "GENERATOR_NAME",
    "index_page",
    "namespace_page",
    "namespace_title",
    "namespaces_menu",
    "project_title",
    "var_links",
    "var_usage",
    "vars_menu",
]
