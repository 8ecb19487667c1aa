"""Steam reviews and news: items and their product sections."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from html import escape

FEED_TYPE_COMMUNITY_ANNOUNCEMENT = 1
FEED_TYPE_OTHER = 0

STEAM_NEWS_TAGS = {
    "halloween": "Halloween",
    "workshop": "Workshop",
    "patchnotes": "Patch",
}

LONG_REVIEW_THRESHOLD = 750

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


@dataclass
class NewsItem:
    """A Steam news item of an app."""

    title: str = ""
    url: str = ""
    author: str = ""
    contents: str = ""
    feed_label: str = ""
    date: int = 0
    feed_type: int = FEED_TYPE_OTHER
    tags: list[str] = field(default_factory=list)


@dataclass
class ReviewAuthor:
    """The author of a Steam review."""

    num_games_owned: int = 0
    num_reviews: int = 0
    playtime_forever: int = 0
    playtime_last_two_weeks: int = 0
    playtime_at_review: int = 0
    deck_playtime_at_review: int = 0


@dataclass
class Review:
    """A Steam user review."""

    author: ReviewAuthor = field(default_factory=ReviewAuthor)
    review: str = ""
    timestamp_created: int = 0
    timestamp_updated: int = 0
    voted_up: bool = False
    votes_up: int = 0
    votes_funny: int = 0
    steam_purchase: bool = False
    received_for_free: bool = False
    written_during_early_access: bool = False
    primarily_steam_deck: bool = False


def epoch_date(epoch: int) -> str:
    """Format Unix seconds as a short local date, e.g. "Jan 2, '06"."""
    moment = datetime.fromtimestamp(epoch)
    return f"{_MONTHS[moment.month - 1]} {moment.day}, '{moment.year % 100:02d}"


def minutes_to_hours(minutes: int) -> str:
    """Return whole hours in minutes, suffixed with "h"."""
    return f"{int(minutes / 60)}h"


class _Frow:
    """A small-font row of headings, property values and highlights."""

    def __init__(self) -> None:
        self.parts: list[str] = []

    def icon_color(self, symbol: str, color: str) -> _Frow:
        self.parts.append(
            f'<span class="svg fg-{escape(color)}"><svg class="icon">'
            f'<use href="#{escape(symbol)}"></use></svg></span>'
        )
        return self

    def heading(self, title: str) -> _Frow:
        self.parts.append(f'<span class="heading">{escape(title)}</span>')
        return self

    def prop_val(self, prop: str, value: str) -> _Frow:
        self.parts.append(
            f'<span class="prop">{escape(prop)}</span><span class="val">{escape(value)}</span>'
        )
        return self

    def highlight(self, value: str) -> _Frow:
        self.parts.append(f'<span class="highlight">{escape(value)}</span>')
        return self

    def link_color(self, title: str, href: str, color: str) -> _Frow:
        self.parts.append(
            f'<a href="{escape(href)}" target="_top" class="fg-{escape(color)}">{escape(title)}</a>'
        )
        return self

    def render(self) -> str:
        return f'<div class="frow small">{"".join(self.parts)}</div>'


def _details(summary: str, content: str, open: bool) -> str:
    opened = " open" if open else ""
    return (
        f'<details{opened}><summary><span class="small">{escape(summary)}</span></summary>'
        f"{content}</details>"
    )


def _column(parts: Iterable[str]) -> str:
    return f'<div class="flex-items column">{"".join(parts)}</div>'


def steam_review(review: Review) -> str:
    """Return the HTML of one Steam review."""
    voted_title, voted_color = (
        ("Recommended", "green") if review.voted_up else ("Not Recommended", "red")
    )
    author = review.author

    top = _Frow().icon_color("circle", voted_color).heading("Author")
    if author.num_games_owned > 0:
        top.prop_val("Games", str(author.num_games_owned))
    if author.num_reviews > 0:
        top.prop_val("Reviews", str(author.num_reviews))

    top.heading("Review")
    if review.timestamp_created > 0:
        top.prop_val("Cr", epoch_date(review.timestamp_created))
    if review.timestamp_updated > 0:
        top.prop_val("Upd", epoch_date(review.timestamp_updated))

    top.heading("Playtime")
    for title, minutes in (
        ("At review", author.playtime_at_review),
        ("Last 2w", author.playtime_last_two_weeks),
        ("Total", author.playtime_forever),
        ("Steam Deck", author.deck_playtime_at_review),
    ):
        if minutes > 0:
            top.prop_val(title, minutes_to_hours(minutes))

    if review.primarily_steam_deck:
        top.highlight("Primarily Steam Deck")
    if not review.steam_purchase:
        top.highlight("Not Steam purchase")
    if review.received_for_free:
        top.highlight("Received for free")
    if review.written_during_early_access:
        top.highlight("Written during Early Access")

    parts = [f"<h3>{escape(voted_title)}</h3>", top.render()]

    text = f"<pre>{escape(review.review)}</pre>"
    length = len(review.review.encode("utf-8"))
    if length > LONG_REVIEW_THRESHOLD:
        parts.append(_details(f"Full review ({length} chars)", text, False))
    else:
        parts.append(text)

    if review.votes_up > 0 or review.votes_funny > 0:
        votes = _Frow().heading("Votes")
        if review.votes_up > 0:
            votes.prop_val("Helpful", str(review.votes_up))
        if review.votes_funny > 0:
            votes.prop_val("Funny", str(review.votes_funny))
        parts.append(votes.render())

    return _column(parts)


def steam_news_item(item: NewsItem, open: bool) -> str:
    """Return the HTML of one news item; open shows its contents expanded."""
    title = next((STEAM_NEWS_TAGS[tag] for tag in item.tags if tag in STEAM_NEWS_TAGS), "News")

    row = _Frow().heading(title).prop_val("Posted", epoch_date(item.date))
    if item.author:
        row.prop_val("Author", item.author)
    if item.feed_type != FEED_TYPE_COMMUNITY_ANNOUNCEMENT:
        # only feeds other than community announcements are labelled
        row.prop_val("Feed", item.feed_label)
    row.link_color("Source", item.url, "cyan")

    contents = f'<pre class="steam-news-item">{escape(item.contents)}</pre>'
    return _column(
        [f"<h3>{escape(item.title)}</h3>", row.render(), _details("News item", contents, open)]
    )


def _button(title: str, href: str) -> str:
    return (
        f'<div class="flex-items center"><a href="{escape(href)}">'
        f'<input type="submit" value="{escape(title)}"></a></div>'
    )


def _not_available(message: str) -> str:
    return (
        '<div class="flex-items center">'
        f'<span class="fg-gray text-center">{escape(message)}</span></div>'
    )


def _section_document(section: str, title: str, style: str, parts: Iterable[str]) -> str:
    return (
        '<!DOCTYPE html><html lang="en"><head><meta charset="utf-8">'
        f"<title>{escape(title)}</title>"
        f'<link rel="stylesheet" href="/styles/{escape(style)}"></head>'
        f'<body id="{escape(section)}" class="iframe-expand-content">'
        f"{_column(parts)}</body></html>"
    )


def steam_news_section(id: str, news_items: Sequence[NewsItem], show_all: bool) -> str:
    """Return the Steam news section of a product.

    Only community announcements are shown unless show_all is set.
    """
    announcements = [
        item for item in news_items if item.feed_type == FEED_TYPE_COMMUNITY_ANNOUNCEMENT
    ]
    parts: list[str] = []

    if news_items and len(announcements) < len(news_items):
        if show_all:
            parts.append(_button("Show only community announcements", "/steam-news?id=" + id))
        else:
            parts.append(_button("Show all news items types", "/steam-news?id=" + id + "&all"))

    shown = list(news_items) if show_all else announcements
    if not shown:
        parts.append(
            _not_available(
                "Steam news are not available for this product"
                if show_all
                else "Community announcements are not available for this product"
            )
        )

    parts.append("<hr>".join(
        steam_news_item(item, index == 0) for index, item in enumerate(shown)
    ))
    return _section_document("steam-news", "Steam News", "steam-news.css", parts)


def steam_reviews_section(reviews: Sequence[Review]) -> str:
    """Return the Steam reviews section of a product."""
    parts: list[str] = []
    if not reviews:
        parts.append(_not_available("Steam reviews are not available for this product"))
    parts.append("<hr>".join(steam_review(review) for review in reviews))
    return _section_document("steam-reviews", "Steam Reviews", "steam-reviews.css", parts)