"""
Review Normalization Agent.

Converts platform-specific raw reviews into canonical reviews
with sentiment and keywords attached.
"""

import logging
from datetime import date, datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Union

from reviewpulse.agents.keywords import KeywordExtractor
from reviewpulse.agents.sentiment import SentimentClassifier
from reviewpulse.models.raw_review import RawReview, parse_raw_review
from reviewpulse.models.review import CanonicalReview

logger = logging.getLogger(__name__)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse a review timestamp into a naive UTC datetime.

    Accepts ISO-8601 strings (a trailing "Z" is allowed), datetime
    and date objects, and numbers as epoch milliseconds. Aware values
    are converted to UTC.

    Returns:
        Parsed datetime, or None if the value cannot be interpreted
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            parsed = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            logger.warning(f"Epoch timestamp out of range: {value!r}")
            return None
    elif isinstance(value, str):
        raw = value.strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            logger.warning(f"Unparseable review timestamp: {value!r}")
            return None
    else:
        logger.warning(f"Unsupported review timestamp type: {type(value).__name__}")
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


class ReviewNormalizationAgent:
    """
    Maps raw store reviews onto CanonicalReview.

    For each review:
    1. Select the platform variant (android / ios field mapping)
    2. Classify sentiment from text
    3. Extract keywords from text
    4. Parse the timestamp used for recency filtering
    """

    def __init__(
        self,
        classifier: Optional[SentimentClassifier] = None,
        extractor: Optional[KeywordExtractor] = None
    ):
        """
        Initialize normalization agent.

        Args:
            classifier: Sentiment classifier (default lexicons if None)
            extractor: Keyword extractor (default stop-words if None)
        """
        self.classifier = classifier or SentimentClassifier()
        self.extractor = extractor or KeywordExtractor()

    def normalize(
        self,
        raw: Union[Dict, RawReview],
        platform: Optional[str] = None
    ) -> CanonicalReview:
        """
        Convert one raw review into a canonical review.

        Args:
            raw: Raw review dict, or an already parsed platform variant
            platform: "android" or "ios" (required when raw is a dict)

        Returns:
            CanonicalReview

        Raises:
            ValueError: If a dict is given with an unsupported platform
        """
        if not isinstance(raw, RawReview):
            raw = parse_raw_review(raw, platform)

        text = raw.text if isinstance(raw.text, str) else None

        review = CanonicalReview(
            review_id=raw.review_id,
            text=text,
            score=raw.score,
            sentiment=self.classifier.classify(text),
            keywords=self.extractor.extract(text),
            date=parse_timestamp(raw.timestamp),
        )

        logger.debug(
            f"Normalized {raw.platform} review {review.review_id}: "
            f"{review.sentiment}, {len(review.keywords)} keywords"
        )
        return review

    def normalize_batch(
        self,
        raws: Iterable[Union[Dict, RawReview]],
        platform: str
    ) -> List[CanonicalReview]:
        """
        Normalize a sequence of raw reviews, preserving order.

        Args:
            raws: Raw review records for one app
            platform: "android" or "ios"

        Returns:
            List of CanonicalReview
        """
        reviews = [self.normalize(raw, platform) for raw in raws]
        logger.info(f"Normalized {len(reviews)} {platform} reviews")
        return reviews


# Design Rationale and Trade-offs:
#
# 1. Why naive UTC datetimes?
#    - Store timestamps arrive with mixed offsets
#    - Recency comparisons need one clock
#    - Trade-off: Local review time is lost
#
# 2. Why None instead of an exception for bad timestamps?
#    - One malformed record should not abort a batch
#    - The review still counts everywhere except recent issues
#    - Trade-off: Bad dates only surface as warnings in the log
#
# 3. Why read numbers as epoch milliseconds?
#    - JavaScript scrapers serialize dates that way
#    - Trade-off: Epoch seconds would land in January 1970
