"""Product search: query parsing, result paging and the search page."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from html import escape
from urllib.parse import urlencode

from vangogh.config import SEARCH_RESULTS_LIMIT
from vangogh.labels import format_query
from vangogh.product_card import products_list
from vangogh.properties import (
    DISCOUNT_PERCENTAGE,
    FALSE_VALUE,
    GOG_ORDER_DATE,
    IS_DISCOUNTED,
    OWNED,
    PRODUCT_TYPE,
    SEARCH_PROPERTIES,
    STORE_TAGS,
    TITLE,
    TRUE_VALUE,
    TYPES,
    WISHLISTED,
    property_title,
)
from vangogh.redux import Redux

SORT = "sort"
DESCENDING = "desc"
FROM = "from"

FILTER_SEARCH_TITLE = "Filter & search"

_GOG_RELEASE_DATE = "gog-release-date"
_CATALOG_PRODUCTS = "catalog-products"

_INT_PATTERN = re.compile(r"[+-]?\d+")
_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1

_APP_NAV = (("Updates", "/updates", "sparkle"), ("Search", "/search", "search"))
_SEARCH_ORDER = ("New", "Own", "Wish", "Sale", "GOG", "All")


@dataclass
class SearchResult:
    """Outcome of a search: matched ids and the page range, or a redirect."""

    query: dict[str, list[str]] = field(default_factory=dict)
    ids: list[str] = field(default_factory=list)
    start: int = 0
    end: int = 0
    redirect: str | None = None


def _encode(pairs: Mapping[str, str]) -> str:
    return urlencode(sorted(pairs.items()))


def _encode_query(query: Mapping[str, Sequence[str]]) -> str:
    return _encode({prop: ", ".join(values) for prop, values in query.items()})


def _search_scopes() -> dict[str, str]:
    return {
        "New": "",
        "Own": _encode({OWNED: TRUE_VALUE, SORT: GOG_ORDER_DATE, DESCENDING: TRUE_VALUE}),
        "Wish": _encode(
            {WISHLISTED: TRUE_VALUE, SORT: _GOG_RELEASE_DATE, DESCENDING: TRUE_VALUE}
        ),
        "Sale": _encode(
            {
                TYPES: _CATALOG_PRODUCTS,
                OWNED: FALSE_VALUE,
                IS_DISCOUNTED: TRUE_VALUE,
                SORT: DISCOUNT_PERCENTAGE,
                DESCENDING: TRUE_VALUE,
            }
        ),
        "GOG": _encode({STORE_TAGS: "Good Old Game", SORT: TITLE}),
        "All": _encode(
            {TYPES: _CATALOG_PRODUCTS, SORT: _GOG_RELEASE_DATE, DESCENDING: TRUE_VALUE}
        ),
    }


def _search_scope(query: Mapping[str, Sequence[str]]) -> str:
    encoded = _encode_query(query)
    for scope, scope_query in _search_scopes().items():
        if scope != "New" and scope_query == encoded:
            return scope
    return "New"


def _parse_int32(value: str) -> int:
    if not _INT_PATTERN.fullmatch(value):
        raise ValueError(f"invalid number {value!r}")
    number = int(value)
    if not _INT32_MIN <= number <= _INT32_MAX:
        raise ValueError(f"number {value!r} out of range")
    return number


def parse_search_query(params: Mapping[str, str]) -> tuple[dict[str, list[str]], dict[str, str]]:
    """Split search parameters into a query and the parameters to keep.

    Search properties with values go into the query, split on commas; those
    present without a value are dropped from the kept parameters.
    """
    query: dict[str, list[str]] = {}
    kept = dict(params)
    for prop in SEARCH_PROPERTIES:
        value = params.get(prop, "")
        if value:
            query[prop] = value.split(",")
        elif prop in kept:
            del kept[prop]
    return query, kept


def search(params: Mapping[str, str], rdx: Redux) -> SearchResult:
    """Run a search and work out the page of results to show.

    Raises ValueError when "from" is not a non-negative 32-bit number.
    """
    start = 0
    if FROM in params:
        start = _parse_int32(params[FROM])
        if start < 0:
            raise ValueError(f"negative start {start}")

    query, kept = parse_search_query(params)
    if len(kept) != len(params):
        encoded = _encode(kept)
        return SearchResult(query=query, redirect="/search" + ("?" + encoded if encoded else ""))

    if not query:
        return SearchResult(query=query)

    sort = params.get(SORT) or TITLE
    desc = params.get(DESCENDING) == TRUE_VALUE
    match_query = {p: v for p, v in query.items() if p not in (SORT, DESCENDING)}
    found = rdx.match(match_query, False)
    ids = list(rdx.sort(list(found), desc, sort, TITLE, PRODUCT_TYPE))

    if start > len(ids) - 1:
        start = 0
    end = start + SEARCH_RESULTS_LIMIT
    if end > len(ids) or end + SEARCH_RESULTS_LIMIT > len(ids):
        end = len(ids)

    return SearchResult(query=query, ids=ids, start=start, end=end)


def _nav(links: Sequence[tuple[str, str, str | None]], current: str) -> str:
    items = []
    for title, href, icon in links:
        selected = ' class="selected"' if title == current else ""
        symbol = f'<svg class="icon"><use href="#{escape(icon)}"></use></svg>' if icon else ""
        items.append(f'<a href="{escape(href)}"{selected}>{symbol}<span>{escape(title)}</span></a>')
    return f'<nav class="nav-links">{"".join(items)}</nav>'


def _center(inner: str) -> str:
    return f'<div class="flex-items center">{inner}</div>'


def _button(title: str, href: str) -> str:
    return _center(
        f'<a href="{escape(href)}"><input type="submit" value="{escape(title)}"></a>'
    )


def _count_title(start: int, end: int, total: int) -> str:
    if total == 1:
        return "1 item"
    if start == 0 and end == total:
        return f"{total} items"
    return f"{start + 1}-{end} out of {total} items"


def _search_form(query: Mapping[str, Sequence[str]], query_row: str) -> str:
    submit = '<div class="flex-items row center"><input type="submit" value="Submit Query"></div>'
    inputs = []
    for index, prop in enumerate(SEARCH_PROPERTIES):
        value = ", ".join(query.get(prop, []))
        autofocus = " autofocus" if index == 0 else ""
        inputs.append(
            f'<label class="title-input"><span>{escape(property_title(prop))}</span>'
            f'<input type="search" name="{escape(prop)}" value="{escape(value)}"{autofocus}>'
            "</label>"
        )
    parts = [_center(query_row)] if query_row else []
    parts += [submit, f'<div class="grid-items center">{"".join(inputs)}</div>', submit]
    return f'<form action="/search" method="GET"><div class="flex-items column">{"".join(parts)}</div></form>'


def search_page(
    query: Mapping[str, Sequence[str]],
    ids: Sequence[str],
    start: int,
    end: int,
    rdx: Redux,
) -> str:
    """Return the search page for a query and the results ids[start:end]."""
    current = "Search"
    scope_links = [
        (scope, "/search?" + q, None)
        for scope, q in sorted(_search_scopes().items(), key=lambda s: _SEARCH_ORDER.index(s[0]))
    ]
    parts = [_center(_nav(_APP_NAV, current) + _nav(scope_links, _search_scope(query)))]

    summary = f"<h2>{escape(FILTER_SEARCH_TITLE)}</h2>"
    query_row = ""
    if query:
        summary += f'<span class="count">{escape(_count_title(start, end, len(ids)))}</span>'
        formatted = format_query(query, rdx)
        props = "".join(
            f'<span class="prop">{escape(property_title(p))}</span>'
            f'<span class="val">{escape(", ".join(formatted.get(p, [])))}</span>'
            for p in sorted(query)
        )
        query_row = (
            f'<div class="frow small">{props}'
            '<a href="/search" target="_top" class="fg-blue">Clear</a></div>'
        )

    opened = "" if query else " open"
    parts.append(
        f"<details{opened}><summary>{summary}</summary>{_search_form(query, query_row)}</details>"
    )
    if query_row:
        parts.append(_center(query_row))

    if ids:
        parts.append(products_list(ids, start, end, rdx))

    if end < len(ids):
        next_query = {**{p: list(v) for p, v in query.items()}, FROM: [str(end)]}
        parts.append(_button("Next page", "/search?" + _encode_query(next_query)))

    return (
        '<!DOCTYPE html><html lang="en"><head><meta charset="utf-8">'
        f"<title>{current}</title>"
        '<link rel="stylesheet" href="/styles/product-labels.css">'
        '<link rel="stylesheet" href="/styles/product-card.css">'
        '<link rel="icon" href="/icon.png"><link rel="manifest" href="/manifest.json">'
        f'</head><body><div class="flex-items column">{"".join(parts)}</div></body></html>'
    )