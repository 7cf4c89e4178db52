"""
Keyword Market Analyzer.

Summarizes the apps returned for a store keyword search:
brand presence, competition level, ratings and categories.
"""

import logging
from collections import Counter
from typing import Dict, List

from reviewpulse.models.app_listing import AppListing
from reviewpulse.utils.numbers import round_half_up
import config.settings as settings

logger = logging.getLogger(__name__)


def competition_level(brand_dominance: float) -> str:
    """Describe competition from the share of apps owned by the top brands."""
    if brand_dominance > settings.LOW_COMPETITION_DOMINANCE:
        return "Low - dominated by major brands"
    if brand_dominance > settings.MEDIUM_COMPETITION_DOMINANCE:
        return "Medium - mix of major brands and independents"
    return "High - diverse set of developers"


class KeywordMarketAnalyzer:
    """
    Computes market metrics for a keyword's search results.
    Developers with the most apps in the results are treated as the major brands.
    """

    def __init__(self, top_brands_count: int = settings.TOP_BRANDS_COUNT):
        self.top_brands_count = top_brands_count

    def parse_listings(self, records: List[Dict], platform: str) -> List[AppListing]:
        """
        Standardize raw search results for one platform.

        Raises:
            ValueError: If platform is not supported
        """
        if platform == "android":
            return [AppListing.from_android(r) for r in records]
        if platform == "ios":
            return [AppListing.from_ios(r) for r in records]
        raise ValueError(f"Invalid platform: {platform}. Must be 'android' or 'ios'")

    def analyze(self, keyword: str, platform: str, apps: List[AppListing]) -> Dict:
        """
        Analyze the apps ranking for a keyword.

        Args:
            keyword: Search keyword the apps were found for
            platform: "android" or "ios"
            apps: Standardized search results

        Returns:
            Market report dict with top apps, brand presence and metrics
        """
        total_apps = len(apps)

        developer_counts = Counter(app.developer for app in apps)
        # Stable sort keeps first-seen order among equal counts
        sorted_developers = [
            dev for dev, _ in sorted(developer_counts.items(), key=lambda item: item[1], reverse=True)
        ]
        top_brands = sorted_developers[:self.top_brands_count]
        top_brand_apps = sum(developer_counts[brand] for brand in top_brands)

        if total_apps:
            brand_dominance = top_brand_apps / total_apps
            average_rating = sum(app.score or 0 for app in apps) / total_apps
            paid_percentage = sum(1 for app in apps if not app.free) / total_apps * 100
        else:
            logger.warning(f"No apps to analyze for keyword '{keyword}'")
            brand_dominance = 0.0
            average_rating = 0.0
            paid_percentage = 0.0

        category_distribution = Counter(app.category for app in apps if app.category)

        logger.info(
            f"Analyzed {total_apps} {platform} apps for '{keyword}': "
            f"dominance={brand_dominance:.2f}"
        )

        return {
            "keyword": keyword,
            "platform": platform,
            "top_apps": [app.to_dict() for app in apps],
            "brand_presence": {
                "top_brands": top_brands,
                "brand_dominance": round_half_up(brand_dominance),
                "competition_level": competition_level(brand_dominance),
            },
            "metrics": {
                "total_apps": total_apps,
                "average_rating": round_half_up(average_rating),
                "paid_apps_percentage": round_half_up(paid_percentage),
                "category_distribution": dict(category_distribution),
            },
        }


# Design Rationale and Trade-offs:
#
# 1. Why use developer app counts as brand presence?
#    - Search results do not carry brand data
#    - A developer with many results usually is a major brand
#    - Trade-off: Prolific indie developers look like brands
#
# 2. Why strict thresholds for competition level?
#    - Exactly 0.4 or 0.7 falls into the more competitive bucket
#    - Trade-off: Boundaries are arbitrary but documented in settings
#
# 3. Why zeros instead of an error for empty results?
#    - An obscure keyword with no apps is a valid finding
#    - Trade-off: Zero average rating reads like bad apps
