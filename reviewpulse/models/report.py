"""
Report data models.

Themes, per-batch review analysis, and the final analysis report.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Theme:
    """A rule-detected topic cluster among observed keywords."""
    name: str
    description: str

    def to_dict(self) -> dict:
        return {"theme": self.name, "description": self.description}


@dataclass
class ReviewAnalysis:
    """
    Aggregated statistics over one batch of canonical reviews.
    Output of the ReviewAggregator plus detected themes.
    """
    sentiment_breakdown: Dict[str, float]  # Label -> percentage (2 decimals)
    keyword_frequency: Dict[str, int]  # Top keywords -> count
    rating_distribution: Dict[int, int]  # Star bucket 1-5 -> count
    recent_issues: Dict[str, int]  # Keywords from recent negative reviews
    top_positive_keywords: Dict[str, int]
    top_negative_keywords: Dict[str, int]
    common_themes: List[Theme] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "sentiment_breakdown": dict(self.sentiment_breakdown),
            "keyword_frequency": dict(self.keyword_frequency),
            "rating_distribution": {
                str(stars): count for stars, count in self.rating_distribution.items()
            },
            "common_themes": [theme.to_dict() for theme in self.common_themes],
            "recent_issues": dict(self.recent_issues),
            "top_positive_keywords": dict(self.top_positive_keywords),
            "top_negative_keywords": dict(self.top_negative_keywords),
        }


@dataclass
class AnalysisReport:
    """
    Final review analysis for one app.
    Created once per call and returned to the caller.
    """
    app_id: str
    platform: str  # "android" or "ios"
    total_reviews_analyzed: int
    analysis: ReviewAnalysis
    country: Optional[str] = None  # store country the reviews were scraped from
    generated_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    )

    def __post_init__(self):
        if self.platform not in ("android", "ios"):
            raise ValueError(f"Invalid platform: {self.platform}. Must be 'android' or 'ios'")

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "app_id": self.app_id,
            "platform": self.platform,
            "country": self.country,
            "total_reviews_analyzed": self.total_reviews_analyzed,
            "generated_at": self.generated_at,
            "analysis": self.analysis.to_dict(),
        }


# Design Rationale and Trade-offs:
#
# 1. Why int rating keys in memory and str keys in to_dict()?
#    - Code compares star buckets numerically
#    - JSON object keys are always strings
#    - Trade-off: Readers of the JSON must convert back
#
# 2. Why generated_at as a UTC string?
#    - Reports from different machines sort consistently
#    - Trade-off: Second precision only
#
# 3. Why is country optional?
#    - Reports built directly from raw records may not know the store country
#    - Trade-off: Consumers must handle null
