import pytest

from vangogh import properties as p


def test_property_title_known():
    assert p.property_title(p.TITLE) == "Title"
    assert p.property_title(p.GAUGIN_IGN_WIKI_URL) == "IGN Wiki"
    assert p.property_title(p.HLTB_HOURS_TO_COMPLETE_PLUS) == "HLTB Story + Extras"


def test_property_title_unknown_is_empty():
    assert p.property_title("no-such-property") == ""


@pytest.mark.parametrize(
    "group", [p.SEARCH_PROPERTIES, p.PRODUCT_PROPERTIES, p.DIGEST_PROPERTIES]
)
def test_every_listed_property_has_a_title(group):
    assert all(p.property_title(prop) for prop in group)


def test_binary_digest_properties_have_titles():
    titles = [p.property_title(prop) for prop in p.BINARY_DIGEST_PROPERTIES]
    assert "Owned" in titles
    assert "Wishlisted" in titles
    assert all(titles)


def test_label_properties_with_short_titles_have_full_titles():
    assert all(p.property_title(prop) for prop in p.LABEL_TITLES)


def test_operating_system_title_of_parsed_value():
    parsed = p.parse_operating_systems([str(p.OperatingSystem.MACOS)])
    assert parsed == [p.OperatingSystem.MACOS]
    assert p.OPERATING_SYSTEM_TITLES[str(parsed[0])] == "macOS"


def test_parse_operating_systems_keeps_order_and_skips_unknown():
    parsed = p.parse_operating_systems(["linux", "bogus", "WINDOWS", "Linux"])
    assert parsed == [p.OperatingSystem.LINUX, p.OperatingSystem.WINDOWS]


def test_parse_operating_systems_empty():
    assert p.parse_operating_systems([]) == []


def test_operating_system_round_trip():
    for os in p.OperatingSystem:
        assert p.OperatingSystem.parse(str(os)) is os


def test_parse_unknown_operating_system():
    assert p.OperatingSystem.parse("plan9") is None