"""
Sentiment Classifier.

Labels review text with one of five ordered sentiment labels
by counting positive and negative lexicon hits.
"""

import logging
from typing import FrozenSet, Optional

from reviewpulse.lexicons import NEGATIVE_WORDS, POSITIVE_WORDS
from reviewpulse.utils.text import tokenize

logger = logging.getLogger(__name__)


class SentimentClassifier:
    """
    Deterministic lexicon-based sentiment classifier.

    Decision rule (first match wins):
    1. positive hits > 2 * negative hits -> "positive"
    2. negative hits > 2 * positive hits -> "negative"
    3. positive hits > negative hits -> "somewhat_positive"
    4. negative hits > positive hits -> "somewhat_negative"
    5. otherwise -> "neutral"
    """

    def __init__(
        self,
        positive_words: FrozenSet[str] = POSITIVE_WORDS,
        negative_words: FrozenSet[str] = NEGATIVE_WORDS
    ):
        """
        Initialize sentiment classifier.

        Args:
            positive_words: Lexicon of positive terms (exact token match)
            negative_words: Lexicon of negative terms (exact token match)
        """
        self.positive_words = positive_words
        self.negative_words = negative_words

    def count_hits(self, text: Optional[str]) -> tuple:
        """
        Count lexicon hits in text.

        Returns:
            (positive_count, negative_count); repeated tokens count every time
        """
        positive_count = 0
        negative_count = 0
        for token in tokenize(text):
            if token in self.positive_words:
                positive_count += 1
            if token in self.negative_words:
                negative_count += 1
        return positive_count, negative_count

    def classify(self, text: Optional[str]) -> str:
        """
        Classify review text.

        Args:
            text: Review text, may be None or empty

        Returns:
            One of "positive", "somewhat_positive", "neutral",
            "somewhat_negative", "negative"
        """
        if not text:
            return "neutral"

        positive_count, negative_count = self.count_hits(text)

        if positive_count > negative_count * 2:
            sentiment = "positive"
        elif negative_count > positive_count * 2:
            sentiment = "negative"
        elif positive_count > negative_count:
            sentiment = "somewhat_positive"
        elif negative_count > positive_count:
            sentiment = "somewhat_negative"
        else:
            sentiment = "neutral"

        logger.debug(
            f"Classified text as {sentiment} "
            f"(positive={positive_count}, negative={negative_count})"
        )
        return sentiment


_default_classifier = SentimentClassifier()


def classify(text: Optional[str]) -> str:
    """Classify text with the default lexicons."""
    return _default_classifier.classify(text)


# Design Rationale and Trade-offs:
#
# 1. Why a 2:1 ratio for the strong labels?
#    - One stray positive word should not cancel a rant
#    - Mixed reviews fall into the "somewhat" labels
#    - Trade-off: Thresholds are fixed, not learned
#
# 2. Why exact token matches instead of substrings?
#    - "unbearable" should not count as "bearable"
#    - Trade-off: Inflections ("crashes", "loved") are missed
#
# 3. Why a module-level classify()?
#    - Most callers want the default lexicons
#    - Trade-off: Shared default instance, harmless since it holds no state
