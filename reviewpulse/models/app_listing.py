"""
App listing data model.

Standardized app record from a store search result, used for
keyword market analysis.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class AppListing:
    """
    One app returned by a store keyword search.
    Both stores are mapped onto the same fields.
    """
    app_id: Optional[str]
    title: Optional[str]
    developer: Optional[str]
    developer_id: Optional[str] = None
    score: Optional[float] = None
    ratings: Optional[int] = None
    free: bool = True
    price: Optional[float] = None
    currency: Optional[str] = None
    category: Optional[str] = None
    installs: Optional[str] = None  # Android only
    url: Optional[str] = None
    icon: Optional[str] = None
    platform: str = "android"

    @classmethod
    def from_android(cls, data: dict) -> "AppListing":
        """Create from a Google Play search result."""
        return cls(
            app_id=data.get("appId"),
            title=data.get("title"),
            developer=data.get("developer"),
            developer_id=data.get("developerId"),
            score=data.get("score"),
            ratings=data.get("ratings"),
            free=bool(data.get("free", False)),
            price=data.get("price"),
            currency=data.get("currency"),
            category=data.get("genre"),
            installs=data.get("installs"),
            url=data.get("url"),
            icon=data.get("icon"),
            platform="android",
        )

    @classmethod
    def from_ios(cls, data: dict) -> "AppListing":
        """Create from an App Store search result."""
        return cls(
            app_id=data.get("appId"),
            title=data.get("title"),
            developer=data.get("developer"),
            developer_id=data.get("developerId"),
            score=data.get("score"),
            ratings=data.get("ratings") or 0,
            # App Store results only count as free when flagged explicitly
            free=data.get("free") is True,
            price=data.get("price"),
            currency=data.get("currency"),
            category=data.get("primaryGenre"),
            url=data.get("url"),
            icon=data.get("icon"),
            platform="ios",
        )

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "app_id": self.app_id,
            "title": self.title,
            "developer": self.developer,
            "developer_id": self.developer_id,
            "score": self.score,
            "ratings": self.ratings,
            "free": self.free,
            "price": self.price,
            "currency": self.currency,
            "category": self.category,
            "installs": self.installs,
            "url": self.url,
            "icon": self.icon,
            "platform": self.platform,
        }


# Design Rationale and Trade-offs:
#
# 1. Why normalize both stores into one listing type?
#    - Market metrics are computed once for either store
#    - Trade-off: Store-specific fields are dropped
#
# 2. Why treat a missing "free" flag as paid on iOS?
#    - The App Store scraper only sets free=True for free apps
#    - Trade-off: Incomplete records count towards the paid share
