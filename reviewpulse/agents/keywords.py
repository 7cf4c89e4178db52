"""
Keyword Extractor.

Reduces review text to its significant tokens.
"""

from typing import FrozenSet, Optional, Tuple

from reviewpulse.lexicons import STOP_WORDS
from reviewpulse.utils.text import tokenize
import config.settings as settings


class KeywordExtractor:
    """
    Keeps tokens that are not stop-words and are longer than
    the minimum keyword length.
    """

    def __init__(
        self,
        stop_words: FrozenSet[str] = STOP_WORDS,
        min_length: int = settings.MIN_KEYWORD_LENGTH
    ):
        self.stop_words = stop_words
        self.min_length = min_length

    def is_keyword(self, token: str) -> bool:
        return token not in self.stop_words and len(token) > self.min_length

    def extract(self, text: Optional[str]) -> Tuple[str, ...]:
        """
        Extract the keyword set of a text.

        Args:
            text: Review text, may be None or empty

        Returns:
            Unique keywords in order of first occurrence
        """
        if not text:
            return ()
        # dict.fromkeys de-duplicates while keeping first-seen order
        return tuple(dict.fromkeys(t for t in tokenize(text) if self.is_keyword(t)))


_default_extractor = KeywordExtractor()


def extract_keywords(text: Optional[str]) -> Tuple[str, ...]:
    """Extract keywords with the default stop-words."""
    return _default_extractor.extract(text)


# Design Rationale and Trade-offs:
#
# 1. Why a set of keywords per review instead of every occurrence?
#    - Frequency then means "reviews mentioning X"
#    - One long rant cannot dominate the table
#    - Trade-off: Repetition within a review is not weighted
#
# 2. Why a minimum length of 3?
#    - Drops fragments like "s" and "ok" left by tokenization
#    - Trade-off: Short meaningful words ("ui", "ad") are lost
#
# 3. Why first-seen order?
#    - Later top-N ties resolve in reading order
#    - Trade-off: None observed
