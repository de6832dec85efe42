"""Minimal markup tree for building HTML pages programmatically."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from markupsafe import Markup, escape

VOID_TAGS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "wbr"}
)

_SELECTOR_PATTERN = re.compile(r"([#.])([^#.]+)")
_TAG_PATTERN = re.compile(r"<[^>]*>")

Child = Union["Element", str, Markup, None, Iterable[Any]]


@dataclass(frozen=True)
class Element:
    """A tag with ordered attributes and children."""

    tag: str
    attrs: Tuple[Tuple[str, str], ...] = ()
    children: Tuple[Union["Element", str], ...] = ()

    def attr(self, name: str) -> Optional[str]:
        for key, value in self.attrs:
            if key == name:
                return value
        return None

    @property
    def classes(self) -> List[str]:
        return (self.attr("class") or "").split()

    def iter(self) -> Iterable["Element"]:
        """Yield this element and every descendant element, depth first."""
        yield self
        for child in self.children:
            if isinstance(child, Element):
                yield from child.iter()

    def find_all(self, tag: str, class_: str | None = None) -> List["Element"]:
        return [
            node
            for node in self.iter()
            if node.tag == tag and (class_ is None or class_ in node.classes)
        ]

    def text(self) -> str:
        """Return the text content with entities decoded and inline tags dropped."""
        parts: List[str] = []
        for child in self.children:
            if isinstance(child, Element):
                parts.append(child.text())
            elif isinstance(child, Markup):
                parts.append(Markup(_TAG_PATTERN.sub("", child)).unescape())
            else:
                parts.append(child)
        return "".join(parts)


def el(selector: str, *children: Any) -> Element:
    """Build an element from a ``tag#id.class`` selector.

    A mapping passed as the first child is merged into the attributes.
    Children may be strings, ``Markup``, elements, ``None`` or iterables of
    those.
    """
    tag, attrs = _parse_selector(selector)
    if children and isinstance(children[0], Mapping):
        for key, value in children[0].items():
            if value is None:
                continue
            if key == "class" and "class" in attrs:
                attrs["class"] = f"{attrs['class']} {value}"
            else:
                attrs[key] = str(value)
        children = children[1:]
    return Element(tag=tag, attrs=tuple(attrs.items()), children=tuple(_flatten(children)))


def link_to(href: str, *children: Any) -> Element:
    return el("a", {"href": href}, *children)


def unordered_list(items: Iterable[Any]) -> Element:
    return el("ul", [el("li", item) for item in items])


def include_css(href: str) -> Element:
    return el("link", {"type": "text/css", "href": href, "rel": "stylesheet"})


def include_js(src: str) -> Element:
    return el("script", {"type": "text/javascript", "src": src})


def render(node: Child) -> str:
    """Serialize a node; plain strings are escaped, ``Markup`` is emitted as-is."""
    if node is None:
        return ""
    if isinstance(node, Element):
        return _render_element(node)
    if isinstance(node, str):
        return str(escape(node))
    return "".join(render(child) for child in node)


def document(head: Iterable[Any], body: Iterable[Any]) -> Element:
    return el("html", el("head", head), el("body", body))


def render_document(root: Element) -> str:
    """Serialize a complete HTML5 document."""
    return "<!DOCTYPE html>\n" + render(root) + "\n"


def _render_element(node: Element) -> str:
    attrs = "".join(f' {key}="{escape(value)}"' for key, value in node.attrs)
    if node.tag in VOID_TAGS:
        return f"<{node.tag}{attrs}>"
    inner = "".join(render(child) for child in node.children)
    return f"<{node.tag}{attrs}>{inner}</{node.tag}>"


def _parse_selector(selector: str) -> Tuple[str, Dict[str, str]]:
    match = re.match(r"[^#.]+", selector)
    if match is None:
        raise ValueError(f"Selector must start with a tag name: {selector!r}")
    tag = match.group(0)
    attrs: Dict[str, str] = {}
    classes: List[str] = []
    for marker, value in _SELECTOR_PATTERN.findall(selector[match.end():]):
        if marker == "#":
            attrs["id"] = value
        else:
            classes.append(value)
    if classes:
        attrs["class"] = " ".join(classes)
    return tag, attrs


def _flatten(children: Iterable[Any]) -> Iterable[Union[Element, str]]:
    for child in children:
        if child is None:
            continue
        if isinstance(child, (Element, str)):
            yield child
        else:
            yield from _flatten(child)


__all__ = [
    "Element",
    "el",
    "document",
    "include_css",
    "include_js",
    "link_to",
    "render",
    "render_document",
    "unordered_list",
]
