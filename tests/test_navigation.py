from urllib.parse import parse_qs

from vangogh.navigation import (
    SEARCH_NEW,
    SEARCH_ORDER,
    SEARCH_OWNED,
    SEARCH_SALE,
    encode_query,
    search_scope_from_query,
    search_scopes,
)
from vangogh.properties import (
    DESCENDING,
    GOG_ORDER_DATE,
    IS_DISCOUNTED,
    OWNED,
    SORT,
    TRUE_VALUE,
    FALSE_VALUE,
    TYPES,
    ProductType,
)


def test_scopes_cover_search_order():
    assert set(search_scopes()) == set(SEARCH_ORDER)


def test_new_scope_is_empty_query():
    assert search_scopes()[SEARCH_NEW] == ""


def test_owned_scope_query():
    parsed = parse_qs(search_scopes()[SEARCH_OWNED])
    assert parsed == {
        OWNED: [TRUE_VALUE],
        SORT: [GOG_ORDER_DATE],
        DESCENDING: [TRUE_VALUE],
    }


def test_sale_scope_query():
    parsed = parse_qs(search_scopes()[SEARCH_SALE])
    assert parsed[TYPES] == [str(ProductType.CATALOG_PRODUCTS)]
    assert parsed[OWNED] == [FALSE_VALUE]
    assert parsed[IS_DISCOUNTED] == [TRUE_VALUE]


def test_encode_query_joins_values():
    encoded = encode_query({"title": ["a", "b"]})
    assert parse_qs(encoded) == {"title": ["a, b"]}


def test_encode_query_sorts_keys():
    encoded = encode_query({"zeta": ["1"], "alpha": ["2"], "mid": ["3"]})
    keys = [part.split("=")[0] for part in encoded.split("&")]
    assert keys == sorted(keys)


def test_empty_query_is_new_scope():
    assert search_scope_from_query({}) == SEARCH_NEW


def test_scope_round_trip():
    for scope, encoded in search_scopes().items():
        if not encoded:
            continue
        query = parse_qs(encoded)
        assert search_scope_from_query(query) == scope


def test_unknown_query_is_new_scope():
    assert search_scope_from_query({"title": ["anything"]}) == SEARCH_NEW