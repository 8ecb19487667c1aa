"""Formatting of product properties into titled value lists."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from html import escape

from vangogh.languages import format_language
from vangogh.properties import (
    BASE_PRICE,
    DEVELOPERS,
    DISCOUNT_PERCENTAGE,
    ENGINES_BUILDS,
    FALSE_VALUE,
    GOG_ORDER_DATE,
    HLTB_HOURS_TO_COMPLETE_100,
    HLTB_HOURS_TO_COMPLETE_MAIN,
    HLTB_HOURS_TO_COMPLETE_PLUS,
    HLTB_REVIEW_SCORE,
    INCLUDES_GAMES,
    IS_DISCOUNTED,
    IS_FREE,
    IS_INCLUDED_BY_GAMES,
    IS_REQUIRED_BY_GAMES,
    LANGUAGE_CODE,
    LOCAL_TAGS,
    OPERATING_SYSTEMS,
    OWNED,
    PRICE,
    PRODUCT_PROPERTIES,
    PUBLISHERS,
    RATING,
    REQUIRES_GAMES,
    STEAM_DECK_APP_COMPATIBILITY_CATEGORY,
    STEAM_REVIEW_SCORE_DESC,
    TAG_ID,
    TAG_NAME,
    TITLE,
    TRUE_VALUE,
    WISHLISTED,
    parse_operating_systems,
    property_title,
)
from vangogh.redux import Redux

_INT_PATTERN = re.compile(r"[+-]?\d+")
_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1

_RELATED_GAMES = (INCLUDES_GAMES, IS_INCLUDED_BY_GAMES, REQUIRES_GAMES, IS_REQUIRED_BY_GAMES)
_HLTB_HOURS = (
    HLTB_HOURS_TO_COMPLETE_MAIN,
    HLTB_HOURS_TO_COMPLETE_PLUS,
    HLTB_HOURS_TO_COMPLETE_100,
)
_SUMMARY_THRESHOLD = 4


@dataclass
class FormattedProperty:
    """Display values (title -> link), a CSS class and actions (title -> link)."""

    values: dict[str, str] = field(default_factory=dict)
    css_class: str = ""
    actions: dict[str, str] = field(default_factory=dict)


def _search_href(property: str, value: str) -> str:
    return f"/search?{property}={value}"


def _grd_sorted_search_href(property: str, value: str) -> str:
    return f"/search?{property}={value}&sort=global-release-date&desc=true"


def _parse_int32(value: str) -> int | None:
    if not _INT_PATTERN.fullmatch(value):
        return None
    number = int(value)
    if not _INT32_MIN <= number <= _INT32_MAX:
        return None
    return number


def rating_desc(value: int) -> str:
    """Return the review description for a 0-100 rating."""
    if value >= 95:
        return "Overwhelming Positive"
    if value >= 85:
        return "Very Positive"
    if value >= 80:
        return "Positive"
    if value >= 70:
        return "Mostly Positive"
    if value >= 40:
        return "Mixed"
    if value >= 20:
        return "Mostly Negative"
    if value > 0:
        return "Negative"
    return "Not Rated"


def fmt_gog_rating(value: str) -> str:
    """Describe a GOG rating (0-50); empty if it is not a number."""
    rating = _parse_int32(value)
    if rating is None:
        return ""
    desc = rating_desc(rating * 2)
    if rating > 0:
        desc += f" ({rating / 10.0:.1f})"
    return desc


def fmt_hltb_rating(value: str) -> str:
    """Describe an HLTB review score (0-100); empty if it is not a number."""
    rating = _parse_int32(value)
    if rating is None:
        return ""
    desc = rating_desc(rating)
    if rating > 0:
        desc += f" ({rating})"
    return desc


def review_class(text: str) -> str:
    """Return the CSS class for a review description."""
    if "Positive" in text:
        return "positive"
    if "Negative" in text:
        return "negative"
    return "neutral"


def just_the_date(value: str) -> str:
    """Return the part of a timestamp before the first space."""
    return value.split(" ")[0]


def format_property(id: str, property: str, rdx: Redux) -> FormattedProperty:
    """Return the display values, class and actions of a product property."""
    fmt = FormattedProperty()

    owned = rdx.get_last_val(OWNED, id) == TRUE_VALUE
    is_free = rdx.get_last_val(IS_FREE, id) == TRUE_VALUE
    is_discounted = rdx.get_last_val(IS_DISCOUNTED, id) == TRUE_VALUE

    values = rdx.get_all_values(property, id) or []
    first_value = values[0] if values else ""

    for value in values:
        if property == WISHLISTED:
            if owned:
                continue
            title = "Yes" if value == TRUE_VALUE else "No"
            fmt.values[title] = _search_href(property, value)
        elif property in _RELATED_GAMES:
            ref_title = rdx.get_last_val(TITLE, value)
            fmt.values[ref_title if ref_title is not None else value] = "/product?id=" + value
        elif property == GOG_ORDER_DATE:
            date = just_the_date(value)
            fmt.values[date] = _search_href(property, date)
        elif property == LANGUAGE_CODE:
            fmt.values[format_language(value)] = _search_href(property, value)
        elif property == RATING:
            fmt.values[fmt_gog_rating(value)] = ""
        elif property == TAG_ID:
            tag_name = rdx.get_last_val(TAG_NAME, value)
            fmt.values[tag_name if tag_name is not None else value] = _search_href(property, value)
        elif property == PRICE:
            if is_free:
                continue
            if is_discounted and not owned:
                base_price = rdx.get_last_val(BASE_PRICE, id)
                if base_price is not None:
                    fmt.values["Base: " + base_price] = ""
                fmt.values["Sale: " + value] = ""
            else:
                fmt.values[value] = ""
        elif property in _HLTB_HOURS:
            fmt.values[value.lstrip("0") + " hrs"] = ""
        elif property == HLTB_REVIEW_SCORE:
            if value != "0":
                fmt.values[fmt_hltb_rating(value)] = ""
        elif property in (DISCOUNT_PERCENTAGE, ENGINES_BUILDS):
            fmt.values[value] = ""
        elif property in (PUBLISHERS, DEVELOPERS):
            fmt.values[value] = _grd_sorted_search_href(property, value)
        else:
            fmt.values[value] = _search_href(property, value)

    if property == WISHLISTED:
        if not owned:
            if first_value == TRUE_VALUE:
                fmt.actions["Remove"] = "/wishlist/remove?id=" + id
            elif first_value == FALSE_VALUE:
                fmt.actions["Add"] = "/wishlist/add?id=" + id
    elif property == TAG_ID:
        if owned:
            fmt.actions["Edit"] = "/tags/edit?id=" + id
    elif property == LOCAL_TAGS:
        fmt.actions["Edit"] = "/local-tags/edit?id=" + id
    elif property == STEAM_REVIEW_SCORE_DESC:
        fmt.css_class = review_class(first_value)
    elif property == RATING:
        fmt.css_class = review_class(fmt_gog_rating(first_value))
    elif property == HLTB_REVIEW_SCORE:
        fmt.css_class = review_class(fmt_hltb_rating(first_value))
    elif property == STEAM_DECK_APP_COMPATIBILITY_CATEGORY:
        fmt.css_class = first_value
        if first_value:
            fmt.actions["&darr;"] = "#Steam Deck"

    return fmt


def _link(title: str, href: str) -> str:
    if not href:
        return f"<span>{escape(title)}</span>"
    return f'<a href="{escape(href)}" target="_top">{escape(title)}</a>'


def _title_values(title: str, body: str, css_class: str = "") -> str:
    classes = "title-values" + (" " + css_class if css_class else "")
    return (
        f'<div class="{escape(classes)}"><h3>{escape(title)}</h3>'
        f'<div class="values">{body}</div></div>'
    )


def _operating_systems_title_values(id: str, rdx: Redux) -> str:
    values = rdx.get_all_values(OPERATING_SYSTEMS, id) or []
    links = "".join(
        f'<a href="{escape(_search_href(OPERATING_SYSTEMS, str(os)))}" target="_top">'
        f'<svg class="icon"><use href="#{escape(str(os).lower())}"></use></svg></a>'
        for os in parse_operating_systems(values)
    )
    row = f'<div class="flex-items row start">{links}</div>'
    return _title_values(property_title(OPERATING_SYSTEMS), row)


def _property_title_values(property: str, fmt: FormattedProperty) -> str | None:
    if not fmt.values and not fmt.actions:
        return None

    parts: list[str] = []
    css_class = ""
    if fmt.values:
        ordered = sorted(fmt.values)
        if len(fmt.values) < _SUMMARY_THRESHOLD:
            parts.extend(_link(title, fmt.values[title]) for title in ordered)
        else:
            anchors = "".join(_link(title, fmt.values[title]) for title in ordered)
            parts.append(
                f"<details><summary><span>{len(fmt.values)} values</span></summary>"
                f'<div class="flex-items row start">{anchors}</div></details>'
            )
        css_class = fmt.css_class

    for action, href in fmt.actions.items():
        # action titles are fixed markup such as "&darr;"
        parts.append(
            f'<a href="{escape(href)}" target="_top"><span class="fg-blue">{action}</span></a>'
        )

    return _title_values(property_title(property), "".join(parts), css_class)


def product_properties(id: str, rdx: Redux) -> str:
    """Return the HTML grid of all product properties that have values."""
    items: list[str] = []
    for prop in PRODUCT_PROPERTIES:
        if prop == OPERATING_SYSTEMS:
            items.append(_operating_systems_title_values(id, rdx))
            continue
        rendered = _property_title_values(prop, format_property(id, prop, rdx))
        if rendered is not None:
            items.append(rendered)
    return f'<div class="grid-items center">{"".join(items)}</div>'