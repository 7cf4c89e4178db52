"""
Review Aggregator.

Reduces a batch of canonical reviews into sentiment, keyword,
rating and recent-issue statistics.
"""

import logging
import math
from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional, Set

from reviewpulse.models.report import ReviewAnalysis
from reviewpulse.models.review import CanonicalReview, NEGATIVE_LABELS, SENTIMENT_LABELS
from reviewpulse.utils.numbers import round_half_up
import config.settings as settings

logger = logging.getLogger(__name__)

RATING_BUCKETS = (1, 2, 3, 4, 5)


def top_n(counts: Dict[str, int], n: int) -> Dict[str, int]:
    """
    Take the n most frequent entries.

    Sorting is stable, so entries with equal counts keep the order
    in which they were first counted.
    """
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return dict(ranked[:n])


def count_keywords(reviews: Iterable[CanonicalReview]) -> Counter:
    """Multiset union of every review's keyword set, in discovery order."""
    counts = Counter()
    for review in reviews:
        counts.update(review.keywords)
    return counts


def rating_bucket(score) -> Optional[int]:
    """Floor a score into a 1-5 star bucket, or None if it falls outside."""
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        return None
    if not math.isfinite(score):
        return None
    stars = math.floor(score)
    if stars < 1 or stars > 5:
        return None
    return stars


class ReviewAggregator:
    """
    Computes the analysis tables for one batch of reviews.

    Every call builds its own counters; nothing is retained between calls.
    """

    def __init__(
        self,
        top_keywords_limit: int = settings.TOP_KEYWORDS_LIMIT,
        top_sentiment_keywords_limit: int = settings.TOP_SENTIMENT_KEYWORDS_LIMIT,
        recent_issues_limit: int = settings.RECENT_ISSUES_LIMIT,
        recent_window_days: int = settings.RECENT_WINDOW_DAYS
    ):
        """
        Initialize review aggregator.

        Args:
            top_keywords_limit: Size of the keyword frequency table
            top_sentiment_keywords_limit: Size of the positive/negative keyword tables
            recent_issues_limit: Size of the recent issues table
            recent_window_days: Trailing days counted as "recent"
        """
        self.top_keywords_limit = top_keywords_limit
        self.top_sentiment_keywords_limit = top_sentiment_keywords_limit
        self.recent_issues_limit = recent_issues_limit
        self.recent_window_days = recent_window_days

    def aggregate(
        self,
        reviews: List[CanonicalReview],
        now: Optional[datetime] = None
    ) -> ReviewAnalysis:
        """
        Aggregate a batch of canonical reviews.

        Args:
            reviews: Normalized reviews for one app
            now: Reference time for the recency window (naive UTC).
                 Defaults to the current time.

        Returns:
            ReviewAnalysis without themes (see ThemeDetector)
        """
        if now is None:
            now = datetime.now(timezone.utc).replace(tzinfo=None)
        elif now.tzinfo is not None:
            now = now.astimezone(timezone.utc).replace(tzinfo=None)

        keyword_counts = count_keywords(reviews)

        analysis = ReviewAnalysis(
            sentiment_breakdown=self.sentiment_breakdown(reviews),
            keyword_frequency=top_n(keyword_counts, self.top_keywords_limit),
            rating_distribution=self.rating_distribution(reviews),
            recent_issues=self.recent_issues(reviews, now),
            top_positive_keywords=self.sentiment_keywords(reviews, keyword_counts, "positive"),
            top_negative_keywords=self.sentiment_keywords(reviews, keyword_counts, "negative"),
        )

        logger.info(
            f"Aggregated {len(reviews)} reviews: "
            f"{len(keyword_counts)} distinct keywords, "
            f"{sum(analysis.rating_distribution.values())} rated"
        )
        return analysis

    def sentiment_breakdown(self, reviews: List[CanonicalReview]) -> Dict[str, float]:
        """Percentage of reviews per sentiment label, all labels present."""
        total = len(reviews)
        counts = Counter(review.sentiment for review in reviews)
        return {
            label: round_half_up(counts[label] / total * 100) if total else 0.0
            for label in SENTIMENT_LABELS
        }

    def rating_distribution(self, reviews: List[CanonicalReview]) -> Dict[int, int]:
        """Histogram over star buckets 1-5; out-of-range scores are skipped."""
        counts = Counter(
            stars for stars in (rating_bucket(review.score) for review in reviews)
            if stars is not None
        )
        return {stars: counts[stars] for stars in RATING_BUCKETS}

    def sentiment_keywords(
        self,
        reviews: List[CanonicalReview],
        keyword_counts: Dict[str, int],
        sentiment: str
    ) -> Dict[str, int]:
        """
        Rank globally counted keywords that occur in at least one
        review with exactly the given sentiment.
        """
        seen: Set[str] = set()
        for review in reviews:
            if review.sentiment == sentiment:
                seen.update(review.keywords)

        filtered = {kw: count for kw, count in keyword_counts.items() if kw in seen}
        return top_n(filtered, self.top_sentiment_keywords_limit)

    def recent_issues(
        self,
        reviews: List[CanonicalReview],
        now: datetime
    ) -> Dict[str, int]:
        """Keyword counts from negative reviews inside the recency window."""
        cutoff = now - timedelta(days=self.recent_window_days)

        recent_negative = [
            review for review in reviews
            if review.date is not None
            and review.date >= cutoff
            and review.sentiment in NEGATIVE_LABELS
        ]

        logger.debug(
            f"{len(recent_negative)} negative reviews since {cutoff.isoformat()}"
        )
        return top_n(count_keywords(recent_negative), self.recent_issues_limit)


# Design Rationale and Trade-offs:
#
# 1. Why is the recency cutoff inclusive?
#    - A review exactly seven days old is still "this week"
#    - Trade-off: The window spans seven days plus one instant
#
# 2. Why count both negative labels as issues?
#    - Mixed reviews often name the concrete problem
#    - Trade-off: Some praise words from mixed reviews appear in the table
#
# 3. Why rank positive/negative keywords by global counts?
#    - The tables show how common a word is overall
#    - Membership only requires one review with that label
#    - Trade-off: A word mostly used positively can still be listed as negative
#
# 4. Why round half up?
#    - Percentages match what readers compute by hand
#    - Trade-off: Sum of percentages can drift slightly from 100
