"""Product cards and the lists of them shown in search and updates."""

from __future__ import annotations

from collections.abc import Sequence
from html import escape

from vangogh.labels import format_labels
from vangogh.properties import (
    DEHYDRATED_VERTICAL_IMAGE,
    DEVELOPERS,
    OPERATING_SYSTEMS,
    PUBLISHERS,
    REP_IMAGE_COLOR,
    REP_VERTICAL_IMAGE_COLOR,
    TITLE,
    VERTICAL_IMAGE,
    OperatingSystem,
    parse_operating_systems,
    property_title,
)
from vangogh.redux import Redux

DEHYDRATED_COUNT = 3

_OS_ORDER = (
    OperatingSystem.WINDOWS,
    OperatingSystem.MACOS,
    OperatingSystem.LINUX,
    OperatingSystem.ANY,
)
_SUMMARY_PROPERTIES = (OPERATING_SYSTEMS, DEVELOPERS, PUBLISHERS)


def summarize_product_properties(id: str, rdx: Redux) -> tuple[list[str], dict[str, list[str]]]:
    """Return the summary properties a product has, and their values."""
    properties: list[str] = []
    values: dict[str, list[str]] = {}
    for prop in _SUMMARY_PROPERTIES:
        found = rdx.get_all_values(prop, id)
        if found is not None:
            properties.append(prop)
            values[prop] = found
    return properties, values


def _tint(id: str, rdx: Redux) -> str | None:
    rep_color = rdx.get_last_val(REP_IMAGE_COLOR, id)
    if rep_color is None:
        return None
    return (
        "background-color:color-mix(in display-p3,"
        + rep_color
        + " var(--cma),var(--c-background))"
    )


def _symbol(os: OperatingSystem) -> str:
    return f'<svg class="icon"><use href="#{escape(str(os).lower())}"></use></svg>'


def _poster(id: str, hydrated: bool, rdx: Redux) -> str:
    source = rdx.get_last_val(VERTICAL_IMAGE, id)
    if source is None:
        return ""
    placeholder = rdx.get_last_val(DEHYDRATED_VERTICAL_IMAGE, id) or ""
    rep_color = rdx.get_last_val(REP_VERTICAL_IMAGE_COLOR, id) or ""
    attrs = [
        'class="poster"',
        f'src="{escape("/image?id=" + source)}"',
        f'data-color="{escape(rep_color)}"',
        f'loading="{"eager" if hydrated else "lazy"}"',
        'width="85.5"',
        'height="120.5"',
    ]
    if hydrated and placeholder:
        attrs.append(f'data-dehydrated="{escape(placeholder)}"')
    return f"<img {' '.join(attrs)}>"


def _labels(id: str, rdx: Redux) -> str:
    items = "".join(
        f'<li class="{escape(" ".join(filter(None, ("label", label.property, label.css_class))))}">'
        f"{escape(label.title)}</li>"
        for label in format_labels(id, rdx)
        if label.title
    )
    return f'<ul class="labels xsmall">{items}</ul>'


def _summary_property(prop: str, values: list[str]) -> str:
    if prop == OPERATING_SYSTEMS:
        parsed = parse_operating_systems(values)
        content = "".join(_symbol(os) for os in _OS_ORDER if os in parsed)
    else:
        content = escape(", ".join(values))
    return (
        f'<li><span class="property-title">{escape(property_title(prop))}</span>'
        f'<span class="property-values">{content}</span></li>'
    )


def product_card(id: str, hydrated: bool, rdx: Redux) -> str:
    """Return the HTML card of a product."""
    attrs = [f'class="card"', f'id="{escape(id)}"']
    style = _tint(id, rdx)
    if style is not None:
        attrs.append(f'style="{escape(style)}"')

    parts = [_poster(id, hydrated, rdx)]
    title = rdx.get_last_val(TITLE, id)
    if title is not None:
        parts.append(f"<h3>{escape(title)}</h3>")
    parts.append(_labels(id, rdx))

    properties, values = summarize_product_properties(id, rdx)
    summary = "".join(_summary_property(prop, values[prop]) for prop in properties)
    parts.append(f'<ul class="properties">{summary}</ul>')

    return f"<div {' '.join(attrs)}>{''.join(parts)}</div>"


def products_list(ids: Sequence[str], start: int, end: int, rdx: Redux) -> str:
    """Return the HTML grid of cards for ids[start:end].

    The first few cards are hydrated; the range must lie within ids.
    """
    if start < 0 or end > len(ids) or start > end:
        raise IndexError(f"range {start}:{end} outside of {len(ids)} ids")
    cards = "".join(
        f'<a href="{escape("/product?id=" + id)}">'
        f"{product_card(id, position < DEHYDRATED_COUNT, rdx)}</a>"
        for position, id in enumerate(ids[start:end])
    )
    return f'<div class="grid-items center">{cards}</div>'