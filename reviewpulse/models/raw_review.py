"""
Raw review data models.

Platform-specific review records as delivered by store scrapers.
Each variant maps its own field names onto the same four attributes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class RawReview(ABC):
    """
    Common shape of a store review before normalization.
    Values are kept exactly as received.
    """
    review_id: Optional[str]
    text: Optional[str]
    score: Any
    timestamp: Any  # ISO string, datetime, epoch milliseconds, or None

    platform = ""

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict) -> "RawReview":
        """Map a scraper record onto the common fields."""


@dataclass
class AndroidReview(RawReview):
    """Google Play review (timestamp field is "date")."""

    platform = "android"

    @classmethod
    def from_dict(cls, data: Dict) -> "AndroidReview":
        """
        Create from a Google Play scraper record.

        Accepts both the node scraper keys (id, text, date) and the
        google-play-scraper Python keys (reviewId, content, at).
        """
        return cls(
            review_id=data.get("id", data.get("reviewId")),
            text=data.get("text", data.get("content")),
            score=data.get("score"),
            timestamp=data.get("date", data.get("at")),
        )


@dataclass
class IosReview(RawReview):
    """App Store review (timestamp field is "updated")."""

    platform = "ios"

    @classmethod
    def from_dict(cls, data: Dict) -> "IosReview":
        """Create from an App Store scraper record."""
        return cls(
            review_id=data.get("id"),
            text=data.get("text"),
            score=data.get("score"),
            timestamp=data.get("updated"),
        )


RAW_REVIEW_TYPES = {
    "android": AndroidReview,
    "ios": IosReview,
}


def parse_raw_review(data: Dict, platform: str) -> RawReview:
    """
    Build the platform variant for a raw record.

    Args:
        data: Raw review dict from the store scraper
        platform: "android" or "ios"

    Returns:
        AndroidReview or IosReview

    Raises:
        ValueError: If platform is not supported
    """
    try:
        review_type = RAW_REVIEW_TYPES[platform]
    except KeyError:
        raise ValueError(
            f"Invalid platform: {platform}. Must be one of {', '.join(RAW_REVIEW_TYPES)}"
        ) from None
    return review_type.from_dict(data)


# Design Rationale and Trade-offs:
#
# 1. Why one class per platform?
#    - Each store names its fields differently
#    - The mapping lives next to the type, not in the normalizer
#    - Trade-off: A new store means a new class and a registry entry
#
# 2. Why an abstract base?
#    - The base has no field mapping of its own
#    - Instantiating it directly is a programming error
#    - Trade-off: Slightly more boilerplate than a plain dataclass
#
# 3. Why accept both node and Python scraper keys on Android?
#    - Raw files from either scraper can be analyzed unchanged
#    - Trade-off: Node keys win when a record carries both
