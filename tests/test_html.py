from vangogh.html import (
    Element,
    app_nav_links,
    button,
    page,
    product_section,
    product_sections_links,
    search_links,
    text,
    tint_style,
    updated,
)
from vangogh.navigation import (
    APP_NAV_LINKS,
    APP_NAV_ORDER,
    APP_NAV_SEARCH,
    SEARCH_ORDER,
    SEARCH_OWNED,
    SECTION_TITLES,
    SECTION_STYLES,
    search_scopes,
)
from vangogh.properties import REP_IMAGE_COLOR
from vangogh.redux import Redux


def test_text_children_are_escaped():
    assert Element("p", "a<b").render() == "<p>a&lt;b</p>"


def test_raw_text_is_verbatim():
    assert Element("div", text("<b>x</b>")).render() == "<div><b>x</b></div>"


def test_void_element():
    assert Element("br").render() == "<br>"


def test_attribute_values_escaped():
    rendered = Element("a", href='x"y').render()
    assert "&quot;" in rendered
    assert 'x"y' not in rendered


def test_add_class_deduplicates():
    element = Element("div").add_class("a", "b").add_class("a")
    assert element.classes == ["a", "b"]


def test_page_document():
    document, stack = page("Search", ["product-card.css"])
    stack.append(Element("p", "hello"))
    rendered = document.render()
    assert rendered.startswith("<!DOCTYPE html>")
    assert "<title>Search</title>" in rendered
    assert "product-labels.css" in rendered
    assert "product-card.css" in rendered
    assert "<p>hello</p>" in rendered


def test_app_nav_links_selected():
    nav = app_nav_links(APP_NAV_SEARCH)
    hrefs = [link.attributes["href"] for link in nav.children]
    assert hrefs == [APP_NAV_LINKS[t] for t in APP_NAV_ORDER]
    for title, link in zip(APP_NAV_ORDER, nav.children):
        assert ("selected" in link.classes) == (title == APP_NAV_SEARCH)


def test_search_links_hrefs():
    nav = search_links(SEARCH_OWNED)
    scopes = search_scopes()
    hrefs = [link.attributes["href"] for link in nav.children]
    assert hrefs == ["/search?" + scopes[s] for s in SEARCH_ORDER]
    selected = [t for t, link in zip(SEARCH_ORDER, nav.children) if "selected" in link.classes]
    assert selected == [SEARCH_OWNED]


def test_button():
    element = button("Next page", "/search?from=60")
    link = element.children[0]
    assert link.attributes["href"] == "/search?from=60"
    assert link.children[0].attributes["value"] == "Next page"


def test_updated_contains_value():
    rendered = updated("recently").render()
    assert "Updated: " in rendered
    assert "recently" in rendered


def test_product_section_styles():
    for section, style in SECTION_STYLES.items():
        document, body = product_section(section)
        rendered = document.render()
        assert body.attributes["id"] == section
        if style:
            assert style in rendered
        else:
            assert "stylesheet" not in rendered


def test_product_sections_links():
    sections = list(SECTION_TITLES)[:3]
    element = product_sections_links(sections)
    assert element.attributes["id"] == "product-sections-links"
    row = element.children[0]
    assert [a.attributes["href"] for a in row.children] == [
        "#" + SECTION_TITLES[s] for s in sections
    ]


def test_tint_style():
    rdx = Redux({REP_IMAGE_COLOR: {"1": ["#123456"]}})
    assert tint_style("2", rdx) is None
    style = tint_style("1", rdx)
    assert style.startswith("background-color:color-mix(in display-p3,#123456 ")