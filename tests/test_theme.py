import pytest

from event_grid.config import category_style, country_label, industry_label
from event_grid.domain import Country, EventCategory, Industry


@pytest.mark.parametrize("category", list(EventCategory))
def test_every_category_has_a_style(category):
    style = category_style(category)
    assert style.label
    assert style.background.startswith("#")
    assert style.text.startswith("#") and style.border.startswith("#")


def test_category_styles_are_distinct():
    labels = {category_style(category).label for category in EventCategory}
    assert len(labels) == len(EventCategory)


def test_category_style_accepts_raw_values():
    assert category_style("foreign") == category_style(EventCategory.FOREIGN)


def test_unknown_category_is_an_error_not_a_fallback():
    with pytest.raises(ValueError):
        category_style("meeting")


def test_industry_and_country_labels_are_total():
    assert all(industry_label(industry) for industry in Industry)
    assert all(country_label(country) for country in Country)
    assert country_label(None) is None
