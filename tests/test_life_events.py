import pytest

from portfolio_advisor.tools.life_events import extract_life_events, has_life_events


def test_house_and_kids_sentence():
    ev = extract_life_events("We're planning to buy a house in 3 years and have kids in 5 years")
    assert ev == {"marriage_years": None, "retirement_years": None, "house_years": 3, "kids_years": 5}


@pytest.mark.parametrize("text,field,years", [
    ("Getting MARRIED in 2 years", "marriage_years", 2),
    ("2 years until our marriage", "marriage_years", 2),
    ("I want to retire in 25 years", "retirement_years", 25),
    ("about 8 years before retirement", "retirement_years", 8),
    ("retiring in 1 year", "retirement_years", 1),
    ("purchase a house in 4 yrs", "house_years", 4),
    ("new house maybe 6 years out", "house_years", 6),
    ("first baby in 2 years", "kids_years", 2),
    ("3 years until children", "kids_years", 3),
])
def test_single_event_phrasings(text, field, years):
    assert extract_life_events(text)[field] == years


def test_no_match_and_empty_text():
    assert not has_life_events(extract_life_events("Saving for a rainy day."))
    assert extract_life_events("") == extract_life_events(None)
    assert not has_life_events(extract_life_events(None))


def test_match_does_not_cross_sentences():
    ev = extract_life_events("We love our house. Kids in 5 years.")
    assert ev["house_years"] is None
    assert ev["kids_years"] == 5


def test_categories_are_independent():
    ev = extract_life_events("Get married and buy a house in 2 years")
    assert ev["marriage_years"] == 2
    assert ev["house_years"] == 2
