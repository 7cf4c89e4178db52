"""
Review data model.

Represents a platform-independent review after normalization.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple

# Ordered from most favourable to least favourable
SENTIMENT_LABELS = (
    "positive",
    "somewhat_positive",
    "neutral",
    "somewhat_negative",
    "negative",
)

NEGATIVE_LABELS = ("negative", "somewhat_negative")


@dataclass(frozen=True)
class CanonicalReview:
    """
    Canonical review produced by the normalization agent.
    Sentiment and keywords are derived from text alone.
    """
    review_id: Optional[str]  # Opaque identifier from the store
    text: Optional[str]  # Original review text (None if user only rated)
    score: Optional[float]  # Star rating, passed through unclamped
    sentiment: str  # One of SENTIMENT_LABELS
    keywords: Tuple[str, ...] = field(default_factory=tuple)  # Unique, first-seen order
    date: Optional[datetime] = None  # Naive UTC timestamp, None if unknown

    def __post_init__(self):
        # Validate sentiment
        if self.sentiment not in SENTIMENT_LABELS:
            raise ValueError(
                f"Invalid sentiment: {self.sentiment}. Must be one of {', '.join(SENTIMENT_LABELS)}"
            )

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "id": self.review_id,
            "text": self.text,
            "score": self.score,
            "sentiment": self.sentiment,
            "keywords": list(self.keywords),
            "date": self.date.isoformat() if self.date else None,
        }


# Design Rationale and Trade-offs:
#
# 1. Why frozen?
#    - Aggregation reads reviews from several passes
#    - Nothing downstream can mutate a review's keywords or label
#    - Trade-off: Corrections require dataclasses.replace()
#
# 2. Why store keywords as a tuple?
#    - Hashable and ordered by first occurrence
#    - Keeps top-N tie order deterministic
#    - Trade-off: Membership test is linear, but keyword sets are small
#
# 3. Why keep the score untouched?
#    - Scrapers occasionally deliver strings or nulls
#    - Aggregation decides which scores are usable
#    - Trade-off: Score type is Any
