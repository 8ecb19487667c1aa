from vangogh.labels import FormattedLabel, format_label, format_labels, format_query
from vangogh.properties import (
    DISCOUNT_PERCENTAGE,
    IS_FREE,
    LABEL_PROPERTIES,
    LABEL_TITLES,
    OPERATING_SYSTEM_TITLES,
    OPERATING_SYSTEMS,
    OWNED,
    PRODUCT_TYPE,
    PRODUCT_VALIDATION_RESULT,
    PROPERTY_TITLES,
    SORT,
    STORE_TAGS,
    TAG_ID,
    TAG_NAME,
    TITLE,
    TYPES,
    TYPES_TITLES,
    ProductType,
)
from vangogh.redux import Redux


def make_rdx():
    return Redux(
        {
            OWNED: {"1": ["true"], "2": ["false"]},
            PRODUCT_VALIDATION_RESULT: {"1": ["validated"]},
            PRODUCT_TYPE: {"1": ["GAME"], "2": ["DLC"]},
            DISCOUNT_PERCENTAGE: {"1": ["25"], "2": ["25"], "3": ["0"]},
            TAG_ID: {"1": ["t1"]},
            TAG_NAME: {"t1": ["Favourites"]},
            STORE_TAGS: {"1": ["Good Old Game"], "2": ["Indie"]},
            IS_FREE: {"2": ["true"]},
        }
    )


def test_owned_label_with_validation_class():
    label = format_label("1", OWNED, True, make_rdx())
    assert label == FormattedLabel(OWNED, LABEL_TITLES[OWNED], "validated")


def test_not_owned_label_is_empty():
    assert format_label("2", OWNED, False, make_rdx()).title == ""


def test_flag_label():
    assert format_label("2", IS_FREE, False, make_rdx()).title == LABEL_TITLES[IS_FREE]


def test_product_type_labels():
    rdx = make_rdx()
    assert format_label("1", PRODUCT_TYPE, True, rdx).title == ""
    assert format_label("2", PRODUCT_TYPE, False, rdx).title == "DLC"


def test_discount_labels():
    rdx = make_rdx()
    assert format_label("2", DISCOUNT_PERCENTAGE, False, rdx).title == "-25%"
    assert format_label("1", DISCOUNT_PERCENTAGE, True, rdx).title == ""
    assert format_label("3", DISCOUNT_PERCENTAGE, False, rdx).title == ""


def test_tag_label_resolves_name():
    assert format_label("1", TAG_ID, True, make_rdx()).title == "Favourites"


def test_store_tags_label():
    rdx = make_rdx()
    label = format_label("1", STORE_TAGS, True, rdx)
    assert (label.title, label.css_class) == ("GOG", "good-old-game")
    assert format_label("2", STORE_TAGS, False, rdx).title == ""


def test_format_labels_order():
    labels = format_labels("1", make_rdx())
    assert [label.property for label in labels] == list(LABEL_PROPERTIES)


def test_format_labels_discount_hidden_when_owned():
    labels = {label.property: label for label in format_labels("1", make_rdx())}
    assert labels[DISCOUNT_PERCENTAGE].title == ""


def test_format_query():
    catalog = str(ProductType.CATALOG_PRODUCTS)
    query = {
        OWNED: ["true"],
        TYPES: [catalog],
        OPERATING_SYSTEMS: ["Linux"],
        TAG_ID: ["t1", "t2"],
        SORT: [TITLE],
        "developers": ["Someone"],
    }
    formatted = format_query(query, make_rdx())
    assert formatted[OWNED] == ["Yes"]
    assert formatted[TYPES] == [TYPES_TITLES[catalog]]
    assert formatted[OPERATING_SYSTEMS] == [OPERATING_SYSTEM_TITLES["Linux"]]
    assert formatted[TAG_ID] == ["Favourites", "t2"]
    assert formatted[SORT] == [PROPERTY_TITLES[TITLE]]
    assert formatted["developers"] == ["Someone"]


def test_format_empty_query():
    assert format_query({}, make_rdx()) == {}