"""
Ingestion Agent.

Supplies raw store reviews to the pipeline.
Loads previously scraped records from disk, or generates mock data for testing.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional
import uuid

from reviewpulse.utils.storage import StorageManager

logger = logging.getLogger(__name__)

# Timestamp field per platform in raw scraper records
TIMESTAMP_FIELDS = {
    "android": "date",
    "ios": "updated",
}

# Mock review templates (text, score)
MOCK_TEMPLATES = [
    # Stability complaints
    ("App keeps crashing on login, terrible experience", 1),
    ("Constant crash after the update. Please fix this bug", 1),
    ("Screen frozen every time I open settings. Worst update ever", 1),
    ("Stuck on the loading screen, error every time", 2),

    # Pricing complaints
    ("Subscription is too expensive for what you get", 2),
    ("Payment failed twice and I was still charged", 1),
    ("Great features but the price keeps going up", 3),

    # UX feedback
    ("Beautiful design and easy to navigate", 5),
    ("Confusing layout, hard to find anything", 2),
    ("The new interface is difficult to use", 2),

    # Positive reviews
    ("Great app, love it, best in its category", 5),
    ("Amazing and helpful, would recommend to friends", 5),
    ("Works nicely, useful reminders", 4),

    # Neutral / no text
    ("It's okay, works fine", 3),
    ("", 4),
]


class IngestionAgent:
    """
    Supplies raw review records for one app.

    Raw records keep the store scraper's field names
    ("date" on Android, "updated" on iOS) so the normalization
    agent sees exactly what a scraper would deliver.
    """

    def __init__(
        self,
        storage: StorageManager,
        use_mock_data: bool = False,
        mock_days_spread: int = 14
    ):
        """
        Initialize ingestion agent.

        Args:
            storage: Storage manager for reading raw review files
            use_mock_data: If True, generate mock reviews when no file exists
            mock_days_spread: Mock review dates span this many trailing days
        """
        self.storage = storage
        self.use_mock_data = use_mock_data
        self.mock_days_spread = mock_days_spread

        if use_mock_data:
            logger.info("Initialized IngestionAgent in MOCK mode")
        else:
            logger.info("Initialized IngestionAgent in FILE mode")

    def fetch_reviews(
        self,
        app_id: str,
        platform: str,
        input_path: Optional[str] = None,
        limit: int = 100
    ) -> List[Dict]:
        """
        Fetch raw reviews for an app.

        Args:
            app_id: Store app identifier (e.g., "com.spotify.music")
            platform: "android" or "ios"
            input_path: JSON file of raw reviews (defaults to data/raw/<app_id>_<platform>.json)
            limit: Maximum number of reviews to return

        Returns:
            List of raw review dicts, in stored order

        Raises:
            FileNotFoundError: If an explicit input_path cannot be loaded
        """
        if input_path is not None:
            reviews = self.storage.load_raw_reviews(input_path)
            if reviews is None:
                raise FileNotFoundError(f"Could not load raw reviews from {input_path}")
        else:
            path = self.storage.raw_reviews_path(app_id, platform)
            reviews = self.storage.load_raw_reviews(path)

            if reviews is None:
                if not self.use_mock_data:
                    logger.warning(f"No raw reviews available for {app_id} ({platform})")
                    return []
                logger.info(f"No raw reviews at {path}, generating mock data")
                reviews = self._generate_mock_reviews(platform, limit)

        if len(reviews) > limit:
            logger.info(f"Limiting {len(reviews)} reviews to {limit}")
            reviews = reviews[:limit]

        logger.info(f"Ingested {len(reviews)} {platform} reviews for {app_id}")
        return reviews

    def _generate_mock_reviews(
        self,
        platform: str,
        count: int,
        now: Optional[datetime] = None
    ) -> List[Dict]:
        """
        Generate synthetic reviews in the platform's raw shape.

        Cycles through the templates and spreads dates over the
        trailing mock_days_spread days, newest first.
        """
        if now is None:
            now = datetime.now(timezone.utc)
        date_field = TIMESTAMP_FIELDS[platform]

        reviews = []
        for i in range(count):
            text, score = MOCK_TEMPLATES[i % len(MOCK_TEMPLATES)]
            review_date = now - timedelta(days=i % max(self.mock_days_spread, 1))

            reviews.append({
                "id": str(uuid.uuid4()),
                "text": text or None,
                "score": score,
                date_field: review_date.isoformat(),
            })

        logger.info(f"Generated {len(reviews)} mock {platform} reviews")
        return reviews


# Design Rationale and Trade-offs:
#
# 1. Why fall back to mock data only for the default path?
#    - A missing default file just means nothing was scraped yet
#    - An explicit input path that cannot be read is a user error
#    - Trade-off: Mock runs produce reports for the real app id
#
# 2. Why keep raw scraper field names in mock data?
#    - Normalization is exercised on the same shape as real data
#    - Trade-off: Mock records differ per platform
#
# 3. Why limit after loading?
#    - Raw files are stored newest first
#    - Trade-off: Whole file is read even for small limits
