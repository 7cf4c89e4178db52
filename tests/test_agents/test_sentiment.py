"""
Unit tests for the Sentiment Classifier.
"""

import pytest
from reviewpulse.agents.sentiment import SentimentClassifier, classify


@pytest.fixture
def classifier():
    return SentimentClassifier()


def test_strongly_positive_review(classifier):
    """Three positive hits and no negative hits is positive."""
    assert classifier.classify("This app is great, I love it, best ever") == "positive"


def test_strongly_negative_review(classifier):
    assert classifier.classify("Terrible app, keeps crashing, worst bug ever") == "negative"


def test_no_lexicon_hits_is_neutral(classifier):
    assert classifier.classify("It's okay, works fine") == "neutral"


def test_absent_or_empty_text_is_neutral(classifier):
    assert classifier.classify(None) == "neutral"
    assert classifier.classify("") == "neutral"


def test_somewhat_positive(classifier):
    """2 positive vs 1 negative: not more than double, but still ahead."""
    assert classifier.classify("good and great but slow") == "somewhat_positive"


def test_somewhat_negative(classifier):
    assert classifier.classify("bad and slow but nice") == "somewhat_negative"


def test_tie_is_neutral(classifier):
    assert classifier.classify("good but bad") == "neutral"


def test_repeated_tokens_count_each_time(classifier):
    """3 negative vs 1 positive is more than double."""
    assert classifier.count_hits("bad bad bad good") == (1, 3)
    assert classifier.classify("bad bad bad good") == "negative"


def test_exact_token_match_not_substring(classifier):
    """'goodness' and 'crashed' are not lexicon words."""
    assert classifier.count_hits("goodness crashed") == (0, 0)
    assert classifier.classify("goodness crashed") == "neutral"


def test_case_insensitive(classifier):
    assert classifier.classify("GREAT") == "positive"


def test_custom_lexicons():
    """Classifier uses the lexicons it was built with."""
    custom = SentimentClassifier(
        positive_words=frozenset(["yay"]),
        negative_words=frozenset(["meh"])
    )
    assert custom.classify("yay yay") == "positive"
    assert custom.classify("great") == "neutral"


def test_classification_is_deterministic():
    """Same text always yields the same label."""
    text = "Nice layout but the sync is slow and annoying"
    labels = {classify(text) for _ in range(5)}
    assert len(labels) == 1


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
