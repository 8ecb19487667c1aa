import pytest

from vangogh.properties import OWNED, PRODUCT_TYPE, TITLE
from vangogh.redux import Redux
from vangogh.search import (
    FROM,
    SearchResult,
    parse_search_query,
    search,
    search_page,
)


def _rdx(count):
    ids = [str(1000 + n) for n in range(count)]
    return Redux(
        {
            TITLE: {i: [f"Game {i}"] for i in ids},
            PRODUCT_TYPE: {i: ["GAME"] for i in ids},
        }
    )


def test_parse_search_query_splits_values():
    query, kept = parse_search_query({TITLE: "a,b", FROM: "3"})
    assert query == {TITLE: ["a", "b"]}
    assert kept == {TITLE: "a,b", FROM: "3"}


def test_parse_search_query_drops_empty_properties():
    query, kept = parse_search_query({TITLE: "", OWNED: "true"})
    assert query == {OWNED: ["true"]}
    assert TITLE not in kept


def test_search_redirects_to_shorter_url():
    result = search({TITLE: "", OWNED: "true"}, _rdx(1))
    assert result.redirect == f"/search?{OWNED}=true"


def test_search_redirect_without_params():
    result = search({TITLE: ""}, _rdx(1))
    assert result.redirect == "/search"


def test_search_without_query_has_no_ids():
    result = search({}, _rdx(3))
    assert result == SearchResult()


@pytest.mark.parametrize("value", ["abc", "1.5", "99999999999"])
def test_search_rejects_invalid_from(value):
    with pytest.raises(ValueError):
        search({FROM: value, PRODUCT_TYPE: "GAME"}, _rdx(1))


def test_search_first_page_pagination():
    result = search({PRODUCT_TYPE: "GAME"}, _rdx(130))
    assert len(result.ids) == 130
    assert (result.start, result.end) == (0, 60)


def test_search_last_page_absorbs_remainder():
    result = search({PRODUCT_TYPE: "GAME", FROM: "60"}, _rdx(130))
    assert (result.start, result.end) == (60, 130)


def test_search_from_beyond_results_resets():
    result = search({PRODUCT_TYPE: "GAME", FROM: "500"}, _rdx(5))
    assert (result.start, result.end) == (0, 5)


def test_search_sorts_by_title():
    result = search({PRODUCT_TYPE: "GAME"}, _rdx(5))
    titles = [f"Game {i}" for i in result.ids]
    assert titles == sorted(titles)


def test_search_page_has_next_page_link():
    rdx = _rdx(130)
    query = {PRODUCT_TYPE: ["GAME"]}
    result = search({PRODUCT_TYPE: "GAME"}, rdx)
    html = search_page(query, result.ids, result.start, result.end, rdx)
    assert "Next page" in html
    assert "from=60" in html
    assert FROM not in query


def test_search_page_without_more_results():
    rdx = _rdx(3)
    result = search({PRODUCT_TYPE: "GAME"}, rdx)
    html = search_page(result.query, result.ids, result.start, result.end, rdx)
    assert "Next page" not in html
    assert "/product?id=1000" in html
    assert "Filter &amp; search" in html