"""
Unit tests for the Keyword Extractor.
"""

import pytest
from reviewpulse.agents.keywords import KeywordExtractor, extract_keywords
from reviewpulse.lexicons import STOP_WORDS


def test_extract_keywords_basic():
    """Stop-words and short tokens are dropped."""
    keywords = extract_keywords("The interface is beautiful and intuitive")
    assert keywords == ("interface", "beautiful", "intuitive")


def test_length_must_exceed_three():
    """'fix' and 'bug' are three characters long and are dropped."""
    assert extract_keywords("fix bug now okay") == ("okay",)


def test_app_is_a_stop_word():
    assert extract_keywords("app apps") == ("apps",)


def test_duplicates_collapse_to_one():
    assert extract_keywords("crash Crash CRASH") == ("crash",)


def test_absent_text_returns_empty():
    assert extract_keywords(None) == ()
    assert extract_keywords("") == ()


def test_word_characters_include_digits_and_underscore():
    assert extract_keywords("build_2024 v2") == ("build_2024",)


def test_never_returns_short_or_stop_words():
    texts = [
        "Should have been about those things, really!",
        "The best thing about this app is the offline mode",
        "Waited for hours and then it just crashed",
    ]
    for text in texts:
        for keyword in extract_keywords(text):
            assert len(keyword) > 3
            assert keyword not in STOP_WORDS


def test_custom_min_length():
    extractor = KeywordExtractor(min_length=5)
    assert extractor.extract("crash crashes") == ("crashes",)


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
