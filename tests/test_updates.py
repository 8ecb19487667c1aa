from vangogh.properties import TITLE
from vangogh.redux import Redux
from vangogh.updates import (
    LAST_SYNC_UPDATES,
    SYNC_COMPLETE_KEY,
    SYNC_EVENTS,
    UPDATED_PRODUCTS_LIMIT,
    collect_updates,
    has_more_items,
    updates_page,
)


def _ids(count, prefix="1"):
    return [f"{prefix}{n:04d}" for n in range(count)]


def _rdx(sections, sync=None):
    data = {
        LAST_SYNC_UPDATES: sections,
        TITLE: {i: [f"Game {i}"] for ids in sections.values() for i in ids},
    }
    if sync is not None:
        data[SYNC_EVENTS] = {SYNC_COMPLETE_KEY: [sync]}
    return Redux(data)


def test_large_section_is_limited():
    rdx = _rdx({"new in store": _ids(50)})
    sections, updates, totals, _ = collect_updates(rdx, False)
    assert sections == ["new in store"]
    assert len(updates["new in store"]) == UPDATED_PRODUCTS_LIMIT
    assert totals["new in store"] == 50


def test_show_all_keeps_every_id():
    rdx = _rdx({"new in store": _ids(50)})
    _, updates, _, _ = collect_updates(rdx, True)
    assert updates["new in store"] == _ids(50)


def test_section_up_to_twice_the_limit_is_not_cut():
    rdx = _rdx({"new in store": _ids(UPDATED_PRODUCTS_LIMIT * 2)})
    _, updates, _, _ = collect_updates(rdx, False)
    assert len(updates["new in store"]) == UPDATED_PRODUCTS_LIMIT * 2


def test_sections_are_sorted():
    rdx = _rdx({"updates in news": _ids(1, "2"), "new in account": _ids(1, "3")})
    sections, _, _, _ = collect_updates(rdx, False)
    assert sections == ["new in account", "updates in news"]


def test_updated_defaults_to_recently():
    _, _, _, updated = collect_updates(_rdx({"new in store": _ids(1)}), False)
    assert updated == "recently"


def test_updated_from_sync_event():
    _, _, _, updated = collect_updates(_rdx({"new in store": _ids(1)}, "1700000000"), False)
    assert "2023" in updated
    assert "Nov" in updated


def test_has_more_items():
    assert has_more_items(["a"], {"a": ["1"]}, {"a": 2})
    assert not has_more_items(["a"], {"a": ["1", "2"]}, {"a": 2})


def test_updates_page_shows_titles_and_show_all():
    rdx = _rdx({"new in store": _ids(50)})
    sections, updates, totals, updated = collect_updates(rdx, False)
    html = updates_page(sections, updates, totals, updated, rdx)
    assert "Store additions" in html
    assert "Show all" in html
    assert "Updated: " in html


def test_updates_page_without_more_items():
    rdx = _rdx({"new in wishlist": _ids(2)})
    sections, updates, totals, updated = collect_updates(rdx, False)
    html = updates_page(sections, updates, totals, updated, rdx)
    assert "Wishlist additions" in html
    assert "Show all" not in html
    assert "/product?id=10001" in html