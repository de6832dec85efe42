"""Tests for the markup tree and serializer."""

from __future__ import annotations

from markupsafe import Markup

from docsite.html.markup import (
    document,
    el,
    include_css,
    link_to,
    render,
    render_document,
    unordered_list,
)


def test_selector_sets_id_and_classes() -> None:
    node = el("div#content.namespace-docs.wide", "x")
    assert node.tag == "div"
    assert node.attr("id") == "content"
    assert node.classes == ["namespace-docs", "wide"]
    assert render(node) == '<div id="content" class="namespace-docs wide">x</div>'


def test_attribute_mapping_merges_classes() -> None:
    node = el("li.depth-1", {"class": "branch", "title": None})
    assert render(node) == '<li class="depth-1 branch"></li>'


def test_text_children_are_escaped_but_markup_is_not() -> None:
    node = el("pre", "<b>&</b>", Markup("<i>ok</i>"))
    assert render(node) == "<pre>&lt;b&gt;&amp;&lt;/b&gt;<i>ok</i></pre>"


def test_attribute_values_are_escaped() -> None:
    assert render(link_to('a"b.html', "x")) == '<a href="a&#34;b.html">x</a>'


def test_nested_iterables_and_none_are_flattened() -> None:
    node = el("div", [el("p", "a"), None, (el("p", "b") for _ in range(1))])
    assert render(node) == "<div><p>a</p><p>b</p></div>"


def test_void_elements_have_no_closing_tag() -> None:
    assert render(el("meta", {"charset": "UTF-8"})) == '<meta charset="UTF-8">'
    assert render(include_css("css/default.css")).startswith("<link ")


def test_unordered_list_wraps_items() -> None:
    assert render(unordered_list(["a", "b"])) == "<ul><li>a</li><li>b</li></ul>"
    assert render(unordered_list([])) == "<ul></ul>"


def test_render_document_emits_doctype() -> None:
    html = render_document(document([el("title", "T")], [el("p", "body")]))
    assert html == "<!DOCTYPE html>\n<html><head><title>T</title></head><body><p>body</p></body></html>\n"


def test_find_all_and_text_walk_descendants() -> None:
    root = el("div", el("h4.added", "added in ", "1.0"), el("p", el("h4.macro", "macro")))
    assert [node.text() for node in root.find_all("h4")] == ["added in 1.0", "macro"]
    assert [node.text() for node in root.find_all("h4", "macro")] == ["macro"]


def test_text_decodes_markup_children() -> None:
    node = el("pre", "a < b ", Markup('&lt;x&gt; <a href="u">link</a>'))
    assert node.text() == "a < b <x> link"
