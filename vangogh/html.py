"""A small HTML element tree and the page fragments built from it."""

from __future__ import annotations

from collections.abc import Iterable
from html import escape as _escape

from vangogh.navigation import (
    APP_NAV_ICONS,
    APP_NAV_LINKS,
    APP_NAV_ORDER,
    SEARCH_ORDER,
    SECTION_STYLES,
    SECTION_TITLES,
    search_scopes,
)
from vangogh.properties import REP_IMAGE_COLOR
from vangogh.redux import Redux

STYLES_PATH = "/styles/"

_VOID_TAGS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "wbr"}
)


class _Raw:
    """Markup written out verbatim."""

    def __init__(self, value: str):
        self.value = value

    def render(self) -> str:
        return self.value


def _attr_name(key: str) -> str:
    return key.rstrip("_").replace("_", "-")


class Element:
    """An HTML element with attributes, classes and children."""

    def __init__(self, tag: str, *args, **kwargs):
        self.tag = tag
        self.children: list = []
        self.classes: list[str] = []
        self.attributes: dict[str, object] = {}
        for key, value in kwargs.items():
            self.set_attribute(_attr_name(key), value)
        self.append(*args)

    def append(self, *args) -> Element:
        """Append children: elements, markup nodes or text (escaped)."""
        self.children.extend(child for child in args if child is not None)
        return self

    def add_class(self, *args: str) -> Element:
        for name in args:
            if name and name not in self.classes:
                self.classes.append(name)
        return self

    def set_attribute(self, name: str, value) -> Element:
        if name == "class":
            self.add_class(*str(value).split())
        else:
            self.attributes[name] = value
        return self

    def _render_attributes(self) -> str:
        parts = []
        if self.classes:
            parts.append(f' class="{_escape(" ".join(self.classes))}"')
        for name, value in self.attributes.items():
            if value is None or value is False:
                continue
            if value is True:
                parts.append(f" {name}")
            else:
                parts.append(f' {name}="{_escape(str(value))}"')
        return "".join(parts)

    def render(self) -> str:
        """Return the element as HTML text."""
        opening = f"<{self.tag}{self._render_attributes()}>"
        if self.tag in _VOID_TAGS:
            return opening
        inner = "".join(
            child if False else (_escape(child) if isinstance(child, str) else child.render())
            for child in self.children
        )
        markup = f"{opening}{inner}</{self.tag}>"
        if self.tag == "html":
            return "<!DOCTYPE html>" + markup
        return markup

    def __str__(self) -> str:
        return self.render()


def text(value: str) -> _Raw:
    """Return a node that renders value verbatim as markup."""
    return _Raw(value)


def _stylesheet(name: str) -> Element:
    return Element("link", rel="stylesheet", href=STYLES_PATH + name)


def _document(title: str, styles: Iterable[str]) -> tuple[Element, Element]:
    head = Element(
        "head",
        Element("meta", charset="utf-8"),
        Element("meta", name="viewport", content="width=device-width, initial-scale=1"),
        Element("title", title),
    )
    for style in styles:
        head.append(_stylesheet(style))
    body = Element("body")
    return Element("html", head, body, lang="en"), body


def page(title: str, styles: Iterable[str] = ()) -> tuple[Element, Element]:
    """Return an application page and the column stack to fill it with."""
    document, body = _document(title, ("product-labels.css", *styles))
    head = document.children[0]
    head.append(
        Element("link", rel="icon", href="/icon.png"),
        Element("link", rel="manifest", href="/manifest.json"),
    )
    stack = Element("div").add_class("flex-items", "column")
    body.append(stack)
    return document, stack


def _symbol(name: str) -> Element:
    return Element("svg", Element("use", href="#" + name)).add_class("icon")


def _nav_links(links: dict[str, str], current: str, order: Iterable[str], icons=None) -> Element:
    nav = Element("nav").add_class("nav-links")
    for title in order:
        link = Element("a", href=links.get(title, ""))
        if title == current:
            link.add_class("selected")
        if icons and title in icons:
            link.append(_symbol(icons[title]))
        link.append(Element("span", title))
        nav.append(link)
    return nav


def app_nav_links(current: str) -> Element:
    """Return the application navigation with current marked as selected."""
    return _nav_links(APP_NAV_LINKS, current, APP_NAV_ORDER, APP_NAV_ICONS)


def search_links(current: str) -> Element:
    """Return the search scope shortcuts with current marked as selected."""
    links = {scope: "/search?" + query for scope, query in search_scopes().items()}
    return _nav_links(links, current, SEARCH_ORDER)


def _center(*children) -> Element:
    return Element("div", *children).add_class("flex-items", "center")


def button(title: str, href: str) -> Element:
    """Return a centred link styled as a submit button."""
    link = Element("a", Element("input", type="submit", value=title), href=href)
    return _center(link)


def updated(value: str) -> Element:
    """Return the centred "Updated: value" line."""
    label = Element("span", "Updated: ").add_class("fg-gray")
    return _center(label, Element("span", value)).add_class("small")


def product_section(section: str) -> tuple[Element, Element]:
    """Return a product section document and its body."""
    title = SECTION_TITLES.get(section, "")
    style = SECTION_STYLES.get(section, "")
    document, body = _document(title, [style] if style else [])
    body.set_attribute("id", section).add_class("iframe-expand-content")
    return document, body


def product_sections_links(sections: Iterable[str]) -> Element:
    """Return shortcuts to the given product sections."""
    row = Element("div").add_class("flex-items", "row", "center", "small", "bolder")
    for section in sections:
        title = SECTION_TITLES.get(section, "")
        row.append(Element("a", Element("span", title), href="#" + title))
    return _center(row).set_attribute("id", "product-sections-links")


def tint_style(id: str, rdx: Redux) -> str | None:
    """Return a background tint style for a product's colour, if known."""
    rep_color = rdx.get_last_val(REP_IMAGE_COLOR, id)
    if rep_color is None:
        return None
    return (
        "background-color:color-mix(in display-p3,"
        + rep_color
        + " var(--cma),var(--c-background))"
    )