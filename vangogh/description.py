"""The product description section and the rewriting of its markup."""

from __future__ import annotations

from collections.abc import Iterable
from html import escape
from urllib.parse import urlparse

from vangogh.properties import (
    ADDITIONAL_REQUIREMENTS,
    COPYRIGHTS,
    DESCRIPTION_FEATURES,
    DESCRIPTION_OVERVIEW,
)
from vangogh.redux import Redux

_SECTION = "description"
_SECTION_TITLE = "Description"
_SECTION_STYLE = "description.css"

_DOUBLE_NEW_LINE = "\n\n"
_NEW_LINE = "\n"
_EM_DASH = "\u2013"


def rewrite_items_links(desc: str, item_urls: Iterable[str]) -> str:
    """Point links to description items at the local /items endpoint."""
    for item_url in item_urls:
        try:
            path = urlparse(item_url).path
        except ValueError:
            continue
        desc = desc.replace(item_url, "/items" + path)
    return desc


def rewrite_game_links(desc: str, game_links: Iterable[str]) -> str:
    """Point store game links at the local product page, by slug."""
    for game_link in game_links:
        try:
            path = urlparse(game_link).path
        except ValueError:
            continue
        slug = path.rsplit("/", 1)[-1]
        desc = desc.replace(game_link, "/product?slug=" + slug)
    return desc


def rewrite_links_as_target_top(desc: str) -> str:
    """Make every link open in the top-level browsing context."""
    return desc.replace("<a ", "<a target='_top' ")


def rewrite_video_as_inline(desc: str) -> str:
    """Make every video play inline."""
    return desc.replace("<video ", "<video playsinline ")


def fix_quotes(desc: str) -> str:
    """Replace closing typographic double quotes with plain ones."""
    return desc.replace("\u201d", '"')


def replace_data_fallback_urls(desc: str) -> str:
    """Use data-fallbackurl attributes as video posters."""
    return desc.replace("data-fallbackurl", "poster")


def implicit_to_explicit_list(text: str) -> str:
    """Turn text separated by blank lines, new lines or en dashes into a <ul>.

    Separators are tried in that order; text with none is returned unchanged.
    """
    for separator in (_DOUBLE_NEW_LINE, _NEW_LINE, _EM_DASH):
        if separator in text:
            items = text.split(separator)
            return "<ul>" + "".join(f"<li>{item}</li>" for item in items) + "</ul>"
    return text


def _not_available(message: str) -> str:
    return (
        '<div class="flex-items center">'
        f'<span class="fg-gray text-center">{escape(message)}</span></div>'
    )


def description_section(
    id: str,
    rdx: Redux,
    item_urls: Iterable[str] = (),
    game_links: Iterable[str] = (),
) -> str:
    """Return the description section document of a product.

    item_urls and game_links are the item and store game URLs found in the
    description; they are rewritten to local endpoints.
    """
    desc = rdx.get_last_val(DESCRIPTION_OVERVIEW, id) or ""

    parts: list[str] = []
    if not desc:
        parts.append(_not_available("Description is not available for this product"))
    else:
        desc = rewrite_items_links(desc, item_urls)
        desc = rewrite_game_links(desc, game_links)
        desc = rewrite_links_as_target_top(desc)
        desc = fix_quotes(desc)
        desc = replace_data_fallback_urls(desc)
        desc = rewrite_video_as_inline(desc)
        parts.append(desc)

    features = rdx.get_last_val(DESCRIPTION_FEATURES, id)
    features_html = implicit_to_explicit_list(features) if features is not None else ""
    parts.append(f'<div class="description__features">{features_html}</div>')

    copyrights: list[str] = []
    for prop in (COPYRIGHTS, ADDITIONAL_REQUIREMENTS):
        value = rdx.get_last_val(prop, id) or ""
        if value:
            copyrights.append(f"<div>{escape(value)}</div>")
    parts.append(f'<div class="description__copyrights">{"".join(copyrights)}</div>')

    return (
        '<!DOCTYPE html><html lang="en"><head><meta charset="utf-8">'
        f"<title>{_SECTION_TITLE}</title>"
        f'<link rel="stylesheet" href="/styles/{_SECTION_STYLE}"></head>'
        f'<body id="{_SECTION}" class="iframe-expand-content">'
        f'<div class="description">{"".join(parts)}</div></body></html>'
    )