"""Product labels and human-readable search queries."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from vangogh.properties import (
    BINARY_DIGEST_PROPERTIES,
    BINARY_TITLES,
    COMING_SOON,
    DEHYDRATED_IMAGE,
    DEHYDRATED_VERTICAL_IMAGE,
    DISCOUNT_PERCENTAGE,
    IN_DEVELOPMENT,
    IS_FREE,
    LABEL_PROPERTIES,
    LABEL_TITLES,
    OPERATING_SYSTEM_TITLES,
    OPERATING_SYSTEMS,
    OWNED,
    PRE_ORDER,
    PRODUCT_TYPE,
    PRODUCT_VALIDATION_RESULT,
    PROPERTY_TITLES,
    STORE_TAGS,
    TAG_ID,
    TAG_NAME,
    TRUE_VALUE,
    TYPES,
    TYPES_TITLES,
    WISHLISTED,
)
from vangogh.redux import Redux

_FLAG_PROPERTIES = (OWNED, WISHLISTED, PRE_ORDER, COMING_SOON, IN_DEVELOPMENT, IS_FREE)
_GOOD_OLD_GAME = "Good Old Game"


@dataclass
class FormattedLabel:
    """A label shown on a product: its property, title and CSS class."""

    property: str
    title: str = ""
    css_class: str = ""


def format_labels(id: str, rdx: Redux) -> list[FormattedLabel]:
    """Return the labels of a product in label order."""
    owned = rdx.get_last_val(OWNED, id) == TRUE_VALUE
    return [format_label(id, prop, owned, rdx) for prop in LABEL_PROPERTIES]


def format_label(id: str, property: str, owned: bool, rdx: Redux) -> FormattedLabel:
    """Return the label of one property of a product."""
    label = FormattedLabel(property=property, title=rdx.get_last_val(property, id) or "")

    if property == OWNED:
        validation = rdx.get_last_val(PRODUCT_VALIDATION_RESULT, id)
        if validation is not None:
            label.css_class = validation

    if property in _FLAG_PROPERTIES:
        label.title = LABEL_TITLES[property] if label.title == TRUE_VALUE else ""
    elif property == PRODUCT_TYPE:
        if label.title == "GAME":
            label.title = ""
    elif property == DISCOUNT_PERCENTAGE:
        if not owned and label.title not in ("", "0"):
            label.title = f"-{label.title}%"
        else:
            label.title = ""
    elif property == TAG_ID:
        tag_name = rdx.get_last_val(TAG_NAME, label.title)
        if tag_name is not None:
            label.title = tag_name
    elif property in (DEHYDRATED_IMAGE, DEHYDRATED_VERTICAL_IMAGE):
        label.title = property
    elif property == STORE_TAGS:
        if rdx.has_value(STORE_TAGS, id, _GOOD_OLD_GAME):
            label.title = "GOG"
            label.css_class = "good-old-game"
        else:
            label.title = ""
    return label


def format_query(query: Mapping[str, Sequence[str]], rdx: Redux) -> dict[str, list[str]]:
    """Return the query with values replaced by their display titles."""
    formatted: dict[str, list[str]] = {}
    for prop, values in query.items():
        for value in values:
            formatted.setdefault(prop, []).append(_format_query_value(prop, value, rdx))
    return formatted


def _format_query_value(prop: str, value: str, rdx: Redux) -> str:
    if value in PROPERTY_TITLES:
        return PROPERTY_TITLES[value]
    if prop in BINARY_DIGEST_PROPERTIES:
        return BINARY_TITLES.get(value, "")
    if prop == TYPES:
        return TYPES_TITLES.get(value, "")
    if prop == OPERATING_SYSTEMS:
        return OPERATING_SYSTEM_TITLES.get(value, "")
    if prop == TAG_ID:
        tag_name = rdx.get_last_val(TAG_NAME, value)
        return tag_name if tag_name is not None else value
    return value