"""Recently updated products and the updates page."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from datetime import datetime
from html import escape

from vangogh.product_card import products_list
from vangogh.redux import Redux

LAST_SYNC_UPDATES = "last-sync-updates"
SYNC_EVENTS = "sync-events"
SYNC_COMPLETE_KEY = "sync-complete"

UPDATED_PRODUCTS_LIMIT = 24  # divisible by 2,3,4,6

SECTION_TITLES = {
    "new in store": "Store additions",
    "new in account": "Purchased recently",
    "new in wishlist": "Wishlist additions",
    "released today": "Today's releases",
    "updates in account": "Updated installers",
    "updates in news": "Steam news",
}

_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_INT_PATTERN = re.compile(r"[+-]?\d+")


def _rfc1123(seconds: int) -> str:
    moment = datetime.fromtimestamp(seconds).astimezone()
    return (
        f"{_DAYS[moment.weekday()]}, {moment.day:02d} {_MONTHS[moment.month - 1]} "
        f"{moment.year} {moment:%H:%M:%S} {moment.tzname()}"
    )


def _last_updated(rdx: Redux) -> str:
    value = rdx.get_last_val(SYNC_EVENTS, SYNC_COMPLETE_KEY)
    if value is not None and _INT_PATTERN.fullmatch(value):
        try:
            return _rfc1123(int(value))
        except (OverflowError, OSError, ValueError):
            pass
    return "recently"


def collect_updates(
    rdx: Redux, show_all: bool
) -> tuple[list[str], dict[str, list[str]], dict[str, int], str]:
    """Return sorted sections, their ids, their totals and the last sync time.

    Sections of more than twice the limit are cut to the limit unless
    show_all is set; sections without ids are left out.
    """
    updates: dict[str, list[str]] = {}
    totals: dict[str, int] = {}
    for section in rdx.keys(LAST_SYNC_UPDATES):
        ids = list(rdx.get_all_values(LAST_SYNC_UPDATES, section) or [])
        totals[section] = len(ids)
        paginate = len(ids) > UPDATED_PRODUCTS_LIMIT * 2
        if paginate and not show_all:
            ids = ids[:UPDATED_PRODUCTS_LIMIT]
        if ids:
            updates[section] = ids
    return sorted(updates), updates, totals, _last_updated(rdx)


def has_more_items(
    sections: Sequence[str],
    updates: Mapping[str, Sequence[str]],
    totals: Mapping[str, int],
) -> bool:
    """Return whether any section shows fewer ids than it has."""
    return any(len(updates.get(s, ())) < totals.get(s, 0) for s in sections)


def _count_title(shown: int, total: int) -> str:
    if total == 1:
        return "1 item"
    if shown == total:
        return f"{total} items"
    return f"1-{shown} out of {total} items"


def _center(inner: str) -> str:
    return f'<div class="flex-items center">{inner}</div>'


def updates_page(
    sections: Sequence[str],
    updates: Mapping[str, Sequence[str]],
    totals: Mapping[str, int],
    updated_at: str,
    rdx: Redux,
) -> str:
    """Return the updates page listing each section's products."""
    app_nav = (
        '<nav class="nav-links">'
        '<a href="/updates" class="selected"><svg class="icon"><use href="#sparkle"></use></svg>'
        "<span>Updates</span></a>"
        '<a href="/search"><svg class="icon"><use href="#search"></use></svg>'
        "<span>Search</span></a></nav>"
    )
    section_nav = "".join(
        f'<a href="{escape("#" + SECTION_TITLES.get(s, ""))}"><span>'
        f"{escape(SECTION_TITLES.get(s, ''))}</span></a>"
        for s in sections
    )
    parts = [_center(app_nav + f'<nav class="nav-links">{section_nav}</nav>')]

    show_all = ""
    if has_more_items(sections, updates, totals):
        show_all = _center(
            '<a href="?show-all=true"><input type="submit" value="Show all"></a>'
        )
        parts.append(show_all)

    for section in sections:
        ids = list(updates.get(section, ()))
        title = SECTION_TITLES.get(section, "")
        count = _count_title(len(ids), totals.get(section, len(ids)))
        parts.append(
            f'<details open id="{escape(title)}"><summary><h2>{escape(title)}</h2>'
            f'<span class="count">{escape(count)}</span></summary>'
            f'<div class="flex-items column">{products_list(ids, 0, len(ids), rdx)}</div>'
            "</details>"
        )

    if show_all:
        parts.append(show_all)

    parts.append("<br>")
    parts.append(
        _center(
            f'<span class="fg-gray">Updated: </span><span>{escape(updated_at)}</span>'
        )
    )

    return (
        '<!DOCTYPE html><html lang="en"><head><meta charset="utf-8">'
        "<title>Updates</title>"
        '<link rel="stylesheet" href="/styles/product-labels.css">'
        '<link rel="stylesheet" href="/styles/product-card.css">'
        '<link rel="icon" href="/icon.png"><link rel="manifest" href="/manifest.json">'
        f'</head><body><div class="flex-items column">{"".join(parts)}</div></body></html>'
    )