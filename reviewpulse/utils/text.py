"""
Text utility.

Word tokenization shared by sentiment classification and keyword extraction.
"""

import re
from typing import Iterator, Optional

# Maximal runs of ASCII word characters (letters, digits, underscore)
_WORD_PATTERN = re.compile(r"\w+", re.ASCII)


def tokenize(text: Optional[str]) -> Iterator[str]:
    """
    Lazily split text into lowercase word tokens.

    Args:
        text: Free text, may be None or empty

    Yields:
        Lowercase tokens in order of appearance
    """
    if not text:
        return
    for match in _WORD_PATTERN.finditer(text.lower()):
        yield match.group(0)


# Design Rationale and Trade-offs:
#
# 1. Why a generator?
#    - Callers usually filter tokens immediately
#    - No intermediate list for long reviews
#    - Trade-off: Callers needing len() must wrap it in list()
#
# 2. Why ASCII \w instead of Unicode word characters?
#    - Lexicons and stop-words are English ASCII words
#    - Trade-off: Accented words split ("café" -> "caf")
