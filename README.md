# vangogh

`vangogh` builds the HTML pages and data views for a local game library
index: product cards and properties, search, recent updates, downloads and
their metadata, descriptions, Steam news and reviews, and videos. It uses
the standard library only.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The data index

All views read from a `vangogh.redux.Redux`, an in-memory index in which
each property maps keys (usually product ids) to lists of values:

```python
from vangogh.redux import Redux

rdx = Redux({
    "title": {"1": ["Example Game"]},
    "owned": {"1": ["true"]},
    "os": {"1": ["windows", "linux"]},
})

rdx.get_last_val("title", "1")       # "Example Game", or None when absent
rdx.get_all_values("os", "1")        # ["windows", "linux"]
rdx.has_value("owned", "1", "true")  # True
rdx.match({"title": "example"})      # ["1"]: case-insensitive substring match
rdx.sort(["1"], False, "title")      # ids ordered by property values
```

`must_have(*properties)` and `sort(...)` raise `vangogh.redux.ReduxError`
when the index does not hold a property they need. Property names and their
display titles live in `vangogh.properties` (for example
`property_title("os")` gives `"OS"`).

## Views

Section and page functions return HTML text as `str`.

- `vangogh.search.search(params, rdx)` takes the query parameters as a
  mapping of strings and returns a `SearchResult`: the parsed query, the
  matched and sorted ids, and the `start`/`end` range of the page to show,
  or a `redirect` URL when empty search properties were dropped. A `"from"`
  that is not a non-negative 32-bit number raises `ValueError`.
  `search_page(query, ids, start, end, rdx)` renders the filter form,
  result cards and a "Next page" link.
- `vangogh.updates.collect_updates(rdx, show_all)` returns the sorted
  update sections, their ids, their totals and the time of the last sync;
  `updates_page(sections, updates, totals, updated_at, rdx)` renders them.
- `vangogh.product_properties.product_properties(id, rdx)` renders the
  property grid of a product; `format_property`, `fmt_gog_rating`,
  `fmt_hltb_rating` and `rating_desc` give the formatted values.
- `vangogh.product_card.product_card(id, hydrated, rdx)` and
  `products_list(ids, start, end, rdx)` render summary cards.
- `vangogh.labels.format_labels(id, rdx)` and `format_query(query, rdx)`
  give the labels of a product and a readable form of a search query.
- `vangogh.downloads.get_downloads(id, filters, rdx, details)` returns a
  product's `Download`s filtered by a `vangogh.config.DownloadFilters`;
  `details` maps product ids to their downloads, and packs and DLCs without
  their own entry combine those of their included or required games.
  `downloads_section(id, dls, rdx)` groups downloads by operating system,
  product title and variant, with a validation summary; `fmt_bytes`
  formats sizes in 1000-based units.
- `vangogh.downloads_metadata.download_metadata(id, dls, rdx, checksums_dir)`
  builds a `DownloadMetadata`, reading md5 checksums from XML validation
  files under `checksums_dir`; `DownloadMetadata.to_json()` serialises it.
- `vangogh.description.description_section(id, rdx, item_urls, game_links)`,
  `vangogh.steam.steam_news_section(id, news_items, show_all)`,
  `vangogh.steam.steam_reviews_section(reviews)` and
  `vangogh.videos.videos_section(video_ids, titles, durations)` render the
  remaining product sections; `vangogh.videos.video_details(id, rdx)`
  gathers a product's video ids, titles and durations.

`vangogh.html` holds a small `Element` tree (call `render()` for its HTML)
and fragments built on it: `page`, `app_nav_links`, `search_links`,
`button`, `updated`, `product_section`, `product_sections_links` and
`tint_style`.

## Credentials and filters

`vangogh.config.Credentials` keeps SHA-256 digests of a username and
password per role (`set_username`, `set_password`) and checks them with
`check(role, username, password)`. `vangogh.config.DownloadFilters` holds
the operating systems, language codes and patch preference applied when
listing downloads.

## What this package does not do

It has no HTTP server, routes or command-line entry point: it produces
page text and data, and serving it is left to the caller. It does not load
the index or product details from disk or fetch anything from stores; the
caller builds the `Redux` and the downloads mapping. It has no pages for
the product overview, external links, screenshots, changelog, Steam Deck
report or tag editing, and does not change wishlists or tags.