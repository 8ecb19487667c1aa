"""Navigation targets, section names and search scopes."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from urllib.parse import urlencode

from vangogh.properties import (
    FALSE_VALUE,
    TITLE,
    TRUE_VALUE,
    OperatingSystem,
    ProductType,
)

_OWNED = "owned"
_WISHLISTED = "wishlisted"
_SORT = "sort"
_DESCENDING = "desc"
_TYPES = "types"
_IS_DISCOUNTED = "is-discounted"
_DISCOUNT_PERCENTAGE = "discount-percentage"
_GOG_ORDER_DATE = "gog-order-date"
_GOG_RELEASE_DATE = "gog-release-date"
_STORE_TAGS = "store-tags"

# Application navigation

APP_NAV_UPDATES = "Updates"
APP_NAV_SEARCH = "Search"

APP_NAV_ORDER = [APP_NAV_UPDATES, APP_NAV_SEARCH]

APP_NAV_ICONS = {
    APP_NAV_UPDATES: "sparkle",
    APP_NAV_SEARCH: "search",
}

APP_NAV_LINKS = {
    APP_NAV_UPDATES: "/updates",
    APP_NAV_SEARCH: "/search",
}

# Item count templates

SINGLE_ITEM_TEMPLATE = "1 item"
MANY_ITEMS_SINGLE_PAGE_TEMPLATE = "{total} items"
MANY_ITEMS_MANY_PAGES_TEMPLATE = "{from}-{to} out of {total} items"

# Product page sections

PROPERTIES_SECTION = "properties"
EXTERNAL_LINKS_SECTION = "external-links"
DESCRIPTION_SECTION = "description"
CHANGELOG_SECTION = "changelog"
SCREENSHOTS_SECTION = "screenshots"
VIDEOS_SECTION = "videos"
STEAM_NEWS_SECTION = "steam-news"
STEAM_REVIEWS_SECTION = "steam-reviews"
STEAM_DECK_SECTION = "steam-deck"
DOWNLOADS_SECTION = "downloads"

SECTION_TITLES = {
    CHANGELOG_SECTION: "Changelog",
    DESCRIPTION_SECTION: "Description",
    DOWNLOADS_SECTION: "Manual Downloads",
    EXTERNAL_LINKS_SECTION: "External Links",
    PROPERTIES_SECTION: "Properties",
    SCREENSHOTS_SECTION: "Screenshots",
    STEAM_NEWS_SECTION: "Steam News",
    STEAM_REVIEWS_SECTION: "Steam Reviews",
    STEAM_DECK_SECTION: "Steam Deck",
    VIDEOS_SECTION: "Videos",
}

SECTION_STYLES = {
    PROPERTIES_SECTION: "properties.css",
    EXTERNAL_LINKS_SECTION: "external-links.css",
    DESCRIPTION_SECTION: "description.css",
    SCREENSHOTS_SECTION: "screenshots.css",
    VIDEOS_SECTION: "",
    CHANGELOG_SECTION: "changelog.css",
    STEAM_NEWS_SECTION: "steam-news.css",
    STEAM_REVIEWS_SECTION: "steam-reviews.css",
    STEAM_DECK_SECTION: "steam-deck.css",
    DOWNLOADS_SECTION: "downloads.css",
}

# Operating systems

OS_ORDER = [
    OperatingSystem.WINDOWS,
    OperatingSystem.MACOS,
    OperatingSystem.LINUX,
    OperatingSystem.ANY,
]

OPERATING_SYSTEM_SYMBOLS = {
    OperatingSystem.WINDOWS: "windows",
    OperatingSystem.MACOS: "macos",
    OperatingSystem.LINUX: "linux",
}

# Steam news

FEED_TYPE_COMMUNITY_ANNOUNCEMENT = 1
FEED_TYPE_OTHER = 0

STEAM_NEWS_TAGS = {
    "halloween": "Halloween",
    "workshop": "Workshop",
    "patchnotes": "Patch",
}

# Search scopes

SEARCH_NEW = "New"
SEARCH_OWNED = "Own"
SEARCH_WISHLIST = "Wish"
SEARCH_SALE = "Sale"
SEARCH_GOG = "GOG"
SEARCH_ALL = "All"

SEARCH_ORDER = [
    SEARCH_NEW,
    SEARCH_OWNED,
    SEARCH_WISHLIST,
    SEARCH_SALE,
    SEARCH_GOG,
    SEARCH_ALL,
]


def _encode(params: Mapping[str, str]) -> str:
    return urlencode(sorted(params.items()))


def search_scopes() -> dict[str, str]:
    """Return the encoded query string of every predefined search scope."""
    catalog = str(ProductType.CATALOG_PRODUCTS)
    return {
        SEARCH_NEW: "",
        SEARCH_OWNED: _encode(
            {_OWNED: TRUE_VALUE, _SORT: _GOG_ORDER_DATE, _DESCENDING: TRUE_VALUE}
        ),
        SEARCH_WISHLIST: _encode(
            {_WISHLISTED: TRUE_VALUE, _SORT: _GOG_RELEASE_DATE, _DESCENDING: TRUE_VALUE}
        ),
        SEARCH_SALE: _encode(
            {
                _TYPES: catalog,
                _OWNED: FALSE_VALUE,
                _IS_DISCOUNTED: TRUE_VALUE,
                _SORT: _DISCOUNT_PERCENTAGE,
                _DESCENDING: TRUE_VALUE,
            }
        ),
        SEARCH_ALL: _encode(
            {_TYPES: catalog, _SORT: _GOG_RELEASE_DATE, _DESCENDING: TRUE_VALUE}
        ),
        SEARCH_GOG: _encode({_STORE_TAGS: "Good Old Game", _SORT: TITLE}),
    }


def encode_query(query: Mapping[str, Sequence[str]]) -> str:
    """Encode a query, joining each property's values with a comma and space."""
    return _encode({prop: ", ".join(values) for prop, values in query.items()})


def search_scope_from_query(query: Mapping[str, Sequence[str]]) -> str:
    """Return the search scope a query corresponds to, defaulting to New."""
    encoded = encode_query(query)
    scope = SEARCH_NEW
    for name, scope_query in search_scopes().items():
        if scope_query == encoded:
            scope = name
    return scope