from vangogh.description import (
    description_section,
    fix_quotes,
    implicit_to_explicit_list,
    replace_data_fallback_urls,
    rewrite_game_links,
    rewrite_items_links,
    rewrite_links_as_target_top,
    rewrite_video_as_inline,
)
from vangogh.properties import (
    ADDITIONAL_REQUIREMENTS,
    COPYRIGHTS,
    DESCRIPTION_FEATURES,
    DESCRIPTION_OVERVIEW,
)
from vangogh.redux import Redux


def test_rewrite_items_links_uses_local_items_path():
    url = "https://items.example.com/images/cover.png"
    desc = f'<img src="{url}">'
    result = rewrite_items_links(desc, [url])
    assert url not in result
    assert '"/items/images/cover.png"' in result


def test_rewrite_items_links_without_urls_keeps_text():
    desc = "<p>plain</p>"
    assert rewrite_items_links(desc, []) == desc


def test_rewrite_game_links_uses_slug():
    link = "https://store.example.com/en/game/witcher"
    result = rewrite_game_links(f'<a href="{link}">x</a>', [link])
    assert link not in result
    assert "/product?slug=" + "witcher" in result


def test_rewrite_links_as_target_top():
    result = rewrite_links_as_target_top("<a href='x'>one</a><a href='y'>two</a>")
    assert result.startswith("<a target='_top' ")
    assert result.count("target='_top'") == 2


def test_rewrite_video_as_inline():
    result = rewrite_video_as_inline("<video src='v.mp4'></video>")
    assert result.startswith("<video playsinline ")


def test_fix_quotes_replaces_typographic_quote():
    result = fix_quotes("say \u201dhi\u201d")
    assert "\u201d" not in result
    assert result.count('"') == 2


def test_replace_data_fallback_urls():
    result = replace_data_fallback_urls("<video data-fallbackurl='p.jpg'>")
    assert "data-fallbackurl" not in result
    assert "poster='p.jpg'" in result


def test_implicit_list_double_new_line_wins():
    assert implicit_to_explicit_list("a\n\nb") == "<ul><li>a</li><li>b</li></ul>"


def test_implicit_list_new_line_and_dash():
    assert implicit_to_explicit_list("a\nb\nc").count("<li>") == 3
    assert implicit_to_explicit_list("a\u2013b").count("<li>") == 2


def test_implicit_list_without_separators_is_unchanged():
    assert implicit_to_explicit_list("single feature") == "single feature"


def test_description_section_without_description():
    doc = description_section("1", Redux({}))
    assert "Description is not available for this product" in doc
    assert 'class="description__features"' in doc


def test_description_section_rewrites_and_lists():
    rdx = Redux(
        {
            DESCRIPTION_OVERVIEW: {"1": ["<a href='x'>link</a>"]},
            DESCRIPTION_FEATURES: {"1": ["one\ntwo"]},
            COPYRIGHTS: {"1": ["(c) Studio & Co"]},
            ADDITIONAL_REQUIREMENTS: {"1": ["needs online"]},
        }
    )
    doc = description_section("1", rdx)
    assert "<a target='_top' href='x'>" in doc
    assert "<li>one</li><li>two</li>" in doc
    assert "Studio &amp; Co" in doc
    assert "needs online" in doc
    assert "is not available" not in doc