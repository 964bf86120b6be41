"""
Tests for founder and business name extraction.
"""

import pytest

from yt_insights.core.entities import RegexEntityExtractor, UNKNOWN


@pytest.fixture
def extractor():
    return RegexEntityExtractor()


def test_self_introduction(extractor):
    """The captured name stops at the first lower-case word."""
    entities = extractor.extract(
        title="My story",
        channel_title="Some Channel",
        transcript="My name is Jane Smith and I am the founder of Acme. We sell tools.",
    )

    assert entities.founder_name == "Jane Smith"
    assert entities.business_name == "Acme"


def test_contraction_and_from(extractor):
    entities = extractor.extract("", "", "I'm Bob Lee from Widget Works and this is my story")

    assert entities.founder_name == "Bob Lee"
    assert entities.business_name == "Widget Works"


def test_first_business_pattern_wins(extractor):
    entities = extractor.extract("", "Founder Channel", "I work at Acme Labs and came from Globex")

    assert entities.business_name == "Acme Labs"
    assert entities.founder_name == "Founder Channel"


def test_founder_patterns_are_ordered(extractor):
    entities = extractor.extract("", "", "I am Alice Wong. My name is Jane Doe.")

    assert entities.founder_name == "Jane Doe"


def test_company_called(extractor):
    entities = extractor.extract("", "", "We run a company called Bright Path Media today")

    assert entities.business_name == "Bright Path Media"


def test_channel_and_title_fallbacks(extractor):
    """Without pattern matches the channel and second title segment are used."""
    entities = extractor.extract(
        title="How I grew |  Acme  | 2024",
        channel_title="FooChannel",
        transcript="nothing useful here",
    )

    assert entities.founder_name == "FooChannel"
    assert entities.business_name == "Acme"


def test_nothing_found(extractor):
    entities = extractor.extract("Plain title", "", "")

    assert entities.founder_name == UNKNOWN
    assert entities.business_name == UNKNOWN


def test_extraction_is_deterministic(extractor):
    args = ("A | B", "Chan", "I'm Bob Lee from Widget Works")
    assert extractor.extract(*args) == extractor.extract(*args)
