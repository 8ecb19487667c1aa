"""Property names, value constants and the titles shown for them."""

from __future__ import annotations

import enum
from collections.abc import Iterable

TRUE_VALUE = "true"
FALSE_VALUE = "false"

ID = "id"
SLUG = "slug"
TITLE = "title"
DESCRIPTION_OVERVIEW = "description-overview"
DESCRIPTION_FEATURES = "description-features"
COPYRIGHTS = "copyrights"
ADDITIONAL_REQUIREMENTS = "additional-requirements"
TAG_ID = "tag"
TAG_NAME = "tag-name"
LOCAL_TAGS = "local-tags"
STORE_TAGS = "store-tags"
STEAM_TAGS = "steam-tags"
OPERATING_SYSTEMS = "os"
DEVELOPERS = "developers"
PUBLISHERS = "publishers"
ENGINES = "engines"
ENGINES_BUILDS = "engines-builds"
SERIES = "series"
GENRES = "genres"
FEATURES = "features"
LANGUAGE_CODE = "lang-code"
NATIVE_LANGUAGE_NAME = "native-language-name"
INCLUDES_GAMES = "includes-games"
IS_INCLUDED_BY_GAMES = "is-included-by-games"
REQUIRES_GAMES = "requires-games"
IS_REQUIRED_BY_GAMES = "is-required-by-games"
PRODUCT_TYPE = "product-type"
WISHLISTED = "wishlisted"
OWNED = "owned"
IS_FREE = "is-free"
IS_DISCOUNTED = "is-discounted"
PRE_ORDER = "pre-order"
COMING_SOON = "coming-soon"
IN_DEVELOPMENT = "in-development"
TYPES = "types"
STEAM_REVIEW_SCORE_DESC = "steam-review-score-desc"
STEAM_DECK_APP_COMPATIBILITY_CATEGORY = "steam-deck-app-compatibility-category"
PROTONDB_TIER = "protondb-tier"
PROTONDB_CONFIDENCE = "protondb-confidence"
SORT = "sort"
DESCENDING = "desc"
GLOBAL_RELEASE_DATE = "global-release-date"
GOG_RELEASE_DATE = "gog-release-date"
GOG_ORDER_DATE = "gog-order-date"
PRODUCT_VALIDATION_RESULT = "product-validation-result"
RATING = "rating"
PRICE = "price"
BASE_PRICE = "base-price"
DISCOUNT_PERCENTAGE = "discount-percentage"
HLTB_HOURS_TO_COMPLETE_MAIN = "hltb-hours-to-complete-main"
HLTB_HOURS_TO_COMPLETE_PLUS = "hltb-hours-to-complete-plus"
HLTB_HOURS_TO_COMPLETE_100 = "hltb-hours-to-complete-100"
HLTB_GENRES = "hltb-genres"
HLTB_PLATFORMS = "hltb-platforms"
HLTB_REVIEW_SCORE = "hltb-review-score"
FORUM_URL = "forum-url"
STORE_URL = "store-url"
SUPPORT_URL = "support-url"
IMAGE = "image"
VERTICAL_IMAGE = "vertical-image"
DEHYDRATED_IMAGE = "dehydrated-image"
DEHYDRATED_VERTICAL_IMAGE = "dehydrated-vertical-image"
REP_IMAGE_COLOR = "rep-image-color"
REP_VERTICAL_IMAGE_COLOR = "rep-vertical-image-color"
SCREENSHOTS = "screenshots"
VIDEO_ID = "video-id"
VIDEO_TITLE = "video-title"
VIDEO_DURATION = "video-duration"
CHANGELOG = "changelog"
LAST_SYNC_UPDATES = "last-sync-updates"
SYNC_EVENTS = "sync-events"
SYNC_COMPLETE_KEY = "sync-complete"
LOCAL_MANUAL_URL = "local-manual-url"
MANUAL_URL_STATUS = "manual-url-status"
MANUAL_URL_VALIDATION_RESULT = "manual-url-validation-result"
STEAM_APP_ID = "steam-app-id"

GAUGIN_GOG_LINKS = "gog-links"
GAUGIN_STEAM_LINKS = "steam-links"
GAUGIN_OTHER_LINKS = "other-links"
GAUGIN_STEAM_COMMUNITY_URL = "steam-community-url"
GAUGIN_PCGAMINGWIKI_URL = "pcgamingwiki-url"
GAUGIN_GOGDB_URL = "gogdb-url"
GAUGIN_PROTONDB_URL = "protondb-url"
GAUGIN_HLTB_URL = "hltb-url"
GAUGIN_IGDB_URL = "igdb-url"
GAUGIN_STRATEGY_WIKI_URL = "strategy-wiki-url"
GAUGIN_MOBY_GAMES_URL = "moby-games-url"
GAUGIN_WIKIPEDIA_URL = "wikipedia-url"
GAUGIN_WINEHQ_URL = "winehq-url"
GAUGIN_VNDB_URL = "vndb-url"
GAUGIN_IGN_WIKI_URL = "ign-wiki-url"


class OperatingSystem(str, enum.Enum):
    """Operating systems that downloads are built for."""

    WINDOWS = "Windows"
    MACOS = "macOS"
    LINUX = "Linux"
    ANY = "Any"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> OperatingSystem | None:
        """Return the operating system named by value, or None."""
        normalized = value.strip().lower()
        aliases = {"mac": cls.MACOS, "osx": cls.MACOS, "mac-os-x": cls.MACOS}
        if normalized in aliases:
            return aliases[normalized]
        for member in cls:
            if normalized in (member.value.lower(), member.name.lower()):
                return member
        return None


class ProductType(str, enum.Enum):
    """Kinds of product data held locally."""

    ACCOUNT_PRODUCTS = "account-products"
    API_PRODUCTS_V1 = "api-products-v1"
    API_PRODUCTS_V2 = "api-products-v2"
    CATALOG_PRODUCTS = "catalog-products"
    DETAILS = "details"
    HLTB_DATA = "hltb-data"
    HLTB_ROOT_PAGE = "hltb-root-page"
    LICENCE_PRODUCTS = "licence-products"
    ORDERS = "orders"
    PCGW_ENGINE = "pcgw-engine"
    PCGW_EXTERNAL_LINKS = "pcgw-external-links"
    PCGW_PAGE_ID = "pcgw-page-id"
    STEAM_APP_NEWS = "steam-app-news"
    STEAM_REVIEWS = "steam-reviews"
    STEAM_STORE_PAGE = "steam-store-page"
    STEAM_DECK_COMPATIBILITY_REPORT = "steam-deck-compatibility-report"
    PROTONDB_SUMMARY = "protondb-summary"
    USER_WISHLIST_PRODUCTS = "user-wishlist-products"

    def __str__(self) -> str:
        return self.value


def parse_operating_systems(values: Iterable[str]) -> list[OperatingSystem]:
    """Parse operating system names, keeping order and skipping unknown ones."""
    parsed: list[OperatingSystem] = []
    for value in values:
        os = OperatingSystem.parse(value)
        if os is not None and os not in parsed:
            parsed.append(os)
    return parsed


DIGEST_PROPERTIES = (
    TAG_ID,
    LOCAL_TAGS,
    STEAM_DECK_APP_COMPATIBILITY_CATEGORY,
    OPERATING_SYSTEMS,
    LANGUAGE_CODE,
    PRODUCT_TYPE,
    TYPES,
    STEAM_REVIEW_SCORE_DESC,
    PRODUCT_VALIDATION_RESULT,
    SORT,
)

BINARY_DIGEST_PROPERTIES = (
    WISHLISTED,
    OWNED,
    IS_FREE,
    IS_DISCOUNTED,
    PRE_ORDER,
    COMING_SOON,
    IN_DEVELOPMENT,
    DESCENDING,
)

SEARCH_PROPERTIES = (
    TITLE,
    DESCRIPTION_OVERVIEW,
    LOCAL_TAGS,
    TAG_ID,
    OPERATING_SYSTEMS,
    HLTB_PLATFORMS,
    DEVELOPERS,
    PUBLISHERS,
    ENGINES,
    ENGINES_BUILDS,
    SERIES,
    GENRES,
    HLTB_GENRES,
    STORE_TAGS,
    STEAM_TAGS,
    STEAM_DECK_APP_COMPATIBILITY_CATEGORY,
    PROTONDB_TIER,
    PROTONDB_CONFIDENCE,
    FEATURES,
    LANGUAGE_CODE,
    INCLUDES_GAMES,
    IS_INCLUDED_BY_GAMES,
    REQUIRES_GAMES,
    IS_REQUIRED_BY_GAMES,
    PRODUCT_TYPE,
    WISHLISTED,
    OWNED,
    IS_FREE,
    IS_DISCOUNTED,
    PRE_ORDER,
    COMING_SOON,
    IN_DEVELOPMENT,
    TYPES,
    STEAM_REVIEW_SCORE_DESC,
    GOG_RELEASE_DATE,
    GLOBAL_RELEASE_DATE,
    GOG_ORDER_DATE,
    PRODUCT_VALIDATION_RESULT,
    SORT,
    DESCENDING,
)

PRODUCT_PROPERTIES = (
    TAG_ID,
    LOCAL_TAGS,
    WISHLISTED,
    PRICE,
    OPERATING_SYSTEMS,
    HLTB_PLATFORMS,
    RATING,
    STEAM_REVIEW_SCORE_DESC,
    HLTB_REVIEW_SCORE,
    STEAM_DECK_APP_COMPATIBILITY_CATEGORY,
    PROTONDB_TIER,
    PROTONDB_CONFIDENCE,
    DEVELOPERS,
    PUBLISHERS,
    ENGINES,
    ENGINES_BUILDS,
    SERIES,
    GENRES,
    HLTB_GENRES,
    STORE_TAGS,
    STEAM_TAGS,
    FEATURES,
    LANGUAGE_CODE,
    GLOBAL_RELEASE_DATE,
    GOG_RELEASE_DATE,
    GOG_ORDER_DATE,
    INCLUDES_GAMES,
    IS_INCLUDED_BY_GAMES,
    REQUIRES_GAMES,
    IS_REQUIRED_BY_GAMES,
    HLTB_HOURS_TO_COMPLETE_MAIN,
    HLTB_HOURS_TO_COMPLETE_PLUS,
    HLTB_HOURS_TO_COMPLETE_100,
)

PRODUCT_EXTERNAL_LINKS_PROPERTIES = (
    GAUGIN_GOG_LINKS,
    GAUGIN_STEAM_LINKS,
    GAUGIN_OTHER_LINKS,
)

PRODUCTS_PROPERTIES = (
    TITLE,
    DEHYDRATED_VERTICAL_IMAGE,
    VERTICAL_IMAGE,
    OWNED,
    PRODUCT_TYPE,
    WISHLISTED,
    COMING_SOON,
    PRE_ORDER,
    IN_DEVELOPMENT,
    TAG_ID,
    LOCAL_TAGS,
    IS_FREE,
    IS_DISCOUNTED,
    DISCOUNT_PERCENTAGE,
    OPERATING_SYSTEMS,
    DEVELOPERS,
    PUBLISHERS,
)

LABEL_PROPERTIES = (
    STORE_TAGS,
    OWNED,
    PRODUCT_TYPE,
    COMING_SOON,
    PRE_ORDER,
    IN_DEVELOPMENT,
    IS_FREE,
    DISCOUNT_PERCENTAGE,
    TAG_ID,
    LOCAL_TAGS,
    WISHLISTED,
)

LABEL_TITLES = {
    OWNED: "Own",
    COMING_SOON: "Soon",
    PRE_ORDER: "PO",
    IN_DEVELOPMENT: "In Dev",
    IS_FREE: "Free",
    WISHLISTED: "Wish",
}

PROPERTY_TITLES = {
    TITLE: "Title",
    DESCRIPTION_OVERVIEW: "Description",
    TAG_ID: "Account Tags",
    LOCAL_TAGS: "Local Tags",
    STEAM_TAGS: "Steam Tags",
    OPERATING_SYSTEMS: "OS",
    DEVELOPERS: "Developers",
    PUBLISHERS: "Publishers",
    ENGINES: "Engine",
    ENGINES_BUILDS: "Engine Build",
    SERIES: "Series",
    GENRES: "Genres",
    STORE_TAGS: "Store Tags",
    FEATURES: "Features",
    LANGUAGE_CODE: "Language",
    INCLUDES_GAMES: "Includes",
    IS_INCLUDED_BY_GAMES: "Included By",
    REQUIRES_GAMES: "Requires",
    IS_REQUIRED_BY_GAMES: "Required By",
    PRODUCT_TYPE: "Product Type",
    WISHLISTED: "Wishlisted",
    OWNED: "Owned",
    IS_FREE: "Free",
    IS_DISCOUNTED: "On Sale",
    PRE_ORDER: "Pre-order",
    COMING_SOON: "Coming Soon",
    IN_DEVELOPMENT: "In Development",
    TYPES: "Data Type",
    STEAM_REVIEW_SCORE_DESC: "Steam Reviews",
    STEAM_DECK_APP_COMPATIBILITY_CATEGORY: "Steam Deck",
    PROTONDB_TIER: "ProtonDB Tier",
    PROTONDB_CONFIDENCE: "ProtonDB Confidence",
    SORT: "Sort",
    DESCENDING: "Descending",
    GLOBAL_RELEASE_DATE: "Global Release",
    GOG_RELEASE_DATE: "GOG.com Release",
    GOG_ORDER_DATE: "GOG.com Order",
    PRODUCT_VALIDATION_RESULT: "Validation Result",
    RATING: "Rating",
    PRICE: "Price",
    BASE_PRICE: "Base Price",
    DISCOUNT_PERCENTAGE: "Discount",
    HLTB_HOURS_TO_COMPLETE_MAIN: "HLTB Main Story",
    HLTB_HOURS_TO_COMPLETE_PLUS: "HLTB Story + Extras",
    HLTB_HOURS_TO_COMPLETE_100: "HLTB Completionist",
    HLTB_GENRES: "HLTB Genres",
    HLTB_PLATFORMS: "HLTB Platforms",
    HLTB_REVIEW_SCORE: "HLTB Review Score",
    GAUGIN_GOG_LINKS: "GOG.com Links",
    GAUGIN_OTHER_LINKS: "Other Links",
    GAUGIN_STEAM_LINKS: "Steam Links",
    FORUM_URL: "Forum",
    STORE_URL: "Store",
    SUPPORT_URL: "Support",
    GAUGIN_STEAM_COMMUNITY_URL: "Community",
    GAUGIN_GOGDB_URL: "GOGDB",
    GAUGIN_IGDB_URL: "IGDB",
    GAUGIN_HLTB_URL: "HLTB",
    GAUGIN_MOBY_GAMES_URL: "MobyGames",
    GAUGIN_PCGAMINGWIKI_URL: "PCGamingWiki",
    GAUGIN_PROTONDB_URL: "ProtonDB",
    GAUGIN_STRATEGY_WIKI_URL: "StrategyWiki",
    GAUGIN_WIKIPEDIA_URL: "Wikipedia",
    GAUGIN_WINEHQ_URL: "WineHQ",
    GAUGIN_VNDB_URL: "VNDB",
    GAUGIN_IGN_WIKI_URL: "IGN Wiki",
}

BINARY_TITLES = {
    TRUE_VALUE: "Yes",
    FALSE_VALUE: "No",
}

TYPES_TITLES = {
    str(ProductType.ACCOUNT_PRODUCTS): "Account Products",
    str(ProductType.API_PRODUCTS_V1): "API Products v1",
    str(ProductType.API_PRODUCTS_V2): "API Products v2",
    str(ProductType.CATALOG_PRODUCTS): "Catalog Products",
    str(ProductType.DETAILS): "Details",
    str(ProductType.HLTB_DATA): "HowLongToBeat Data",
    str(ProductType.HLTB_ROOT_PAGE): "HowLongToBeat Root Page",
    str(ProductType.LICENCE_PRODUCTS): "Licence Products",
    str(ProductType.ORDERS): "Orders",
    str(ProductType.PCGW_ENGINE): "PCGamingWiki Engine",
    str(ProductType.PCGW_EXTERNAL_LINKS): "PCGamingWiki External Links",
    str(ProductType.PCGW_PAGE_ID): "PCGamingWiki PageId",
    str(ProductType.STEAM_APP_NEWS): "Steam App News",
    str(ProductType.STEAM_REVIEWS): "Steam Reviews",
    str(ProductType.STEAM_STORE_PAGE): "Steam Store Page",
    str(ProductType.PROTONDB_SUMMARY): "ProtonDB Summary",
    str(ProductType.USER_WISHLIST_PRODUCTS): "User Wishlist Products",
}

OPERATING_SYSTEM_TITLES = {
    str(OperatingSystem.MACOS): "macOS",
    str(OperatingSystem.LINUX): "Linux",
    str(OperatingSystem.WINDOWS): "Windows",
}


def property_title(property: str) -> str:
    """Return the display title of a property, or an empty string."""
    return PROPERTY_TITLES.get(property, "")