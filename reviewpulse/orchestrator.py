"""
Pipeline Orchestrator.

Coordinates ingestion, normalization, aggregation and theme detection
for one app's reviews, plus keyword market analysis.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional

from reviewpulse.agents.aggregation import ReviewAggregator, count_keywords
from reviewpulse.agents.ingestion import IngestionAgent
from reviewpulse.agents.market import KeywordMarketAnalyzer
from reviewpulse.agents.normalization import ReviewNormalizationAgent
from reviewpulse.agents.themes import ThemeDetector
from reviewpulse.models.report import AnalysisReport
from reviewpulse.utils.storage import StorageManager
import config.settings as settings

logger = logging.getLogger(__name__)


class PipelineOrchestrator:
    """
    Orchestrates the review analysis pipeline.

    Coordinates:
    1. Ingestion → 2. Normalization → 3. Aggregation
    → 4. Theme Detection → 5. Report Export

    The analysis stages hold no per-call state, so analyze_reviews()
    can run concurrently on independent inputs.
    """

    def __init__(self, data_root: str, output_root: str, use_mock_data: bool = False):
        """
        Initialize pipeline orchestrator.

        Args:
            data_root: Root directory for raw input data
            output_root: Directory for generated reports
            use_mock_data: Generate mock reviews when no input file exists
        """
        logger.info("Initializing pipeline components...")

        self.storage = StorageManager(data_root, output_root)

        self.ingestion_agent = IngestionAgent(
            storage=self.storage,
            use_mock_data=use_mock_data,
            mock_days_spread=settings.MOCK_DAYS_SPREAD
        )

        self.normalization_agent = ReviewNormalizationAgent()

        self.aggregator = ReviewAggregator(
            top_keywords_limit=settings.TOP_KEYWORDS_LIMIT,
            top_sentiment_keywords_limit=settings.TOP_SENTIMENT_KEYWORDS_LIMIT,
            recent_issues_limit=settings.RECENT_ISSUES_LIMIT,
            recent_window_days=settings.RECENT_WINDOW_DAYS
        )

        self.theme_detector = ThemeDetector()

        self.market_analyzer = KeywordMarketAnalyzer(
            top_brands_count=settings.TOP_BRANDS_COUNT
        )

        logger.info("Pipeline initialized successfully")

    def analyze_reviews(
        self,
        app_id: str,
        platform: str,
        raw_reviews: List[Dict],
        now: Optional[datetime] = None,
        country: Optional[str] = None
    ) -> AnalysisReport:
        """
        Build the analysis report for a batch of raw reviews.

        Args:
            app_id: Store app identifier
            platform: "android" or "ios"
            raw_reviews: Raw review records from the store scraper
            now: Reference time for the recency window (defaults to now)
            country: Store country recorded in the report (optional)

        Returns:
            AnalysisReport
        """
        # STAGE 2: Normalization
        reviews = self.normalization_agent.normalize_batch(raw_reviews, platform)

        # STAGE 3: Aggregation
        analysis = self.aggregator.aggregate(reviews, now=now)

        # STAGE 4: Theme Detection (over all observed keywords, not just the top table)
        analysis.common_themes = self.theme_detector.detect(count_keywords(reviews))

        return AnalysisReport(
            app_id=app_id,
            platform=platform,
            total_reviews_analyzed=len(reviews),
            analysis=analysis,
            country=country
        )

    def run(
        self,
        app_id: str,
        platform: str,
        input_path: Optional[str] = None,
        limit: int = settings.DEFAULT_REVIEW_LIMIT,
        country: Optional[str] = None
    ) -> str:
        """
        Run the complete review pipeline for one app.

        Args:
            app_id: Store app identifier
            platform: "android" or "ios"
            input_path: JSON file of raw reviews (optional)
            limit: Maximum number of reviews to analyze
            country: Store country recorded in the report (optional)

        Returns:
            Path to the generated JSON report
        """
        start_time = datetime.now()
        logger.info(f"Starting pipeline for {app_id} ({platform})")

        # STAGE 1: Ingestion
        raw_reviews = self.ingestion_agent.fetch_reviews(
            app_id=app_id,
            platform=platform,
            input_path=input_path,
            limit=limit
        )

        if not raw_reviews:
            logger.warning(f"No reviews found for {app_id}, report will be empty")

        report = self.analyze_reviews(app_id, platform, raw_reviews, country=country)

        # STAGE 5: Report Export
        report_dict = report.to_dict()
        name = f"reviews_{platform}_{app_id}"
        output_path = self.storage.save_report(report_dict, name)
        self.storage.save_keyword_table(report_dict, name)

        processing_time = (datetime.now() - start_time).total_seconds()
        logger.info(
            f"Pipeline complete in {processing_time:.2f}s: "
            f"{report.total_reviews_analyzed} reviews → {output_path}"
        )
        return output_path

    def analyze_market(self, keyword: str, platform: str, input_path: str) -> str:
        """
        Analyze stored search results for a keyword.

        Args:
            keyword: Search keyword the results belong to
            platform: "android" or "ios"
            input_path: JSON file with the store's search results

        Returns:
            Path to the generated JSON market report

        Raises:
            FileNotFoundError: If the search results cannot be loaded
        """
        records = self.storage.load_app_listings(input_path)
        if records is None:
            raise FileNotFoundError(f"Could not load app listings from {input_path}")

        apps = self.market_analyzer.parse_listings(records, platform)
        market_report = self.market_analyzer.analyze(keyword, platform, apps)

        safe_keyword = "_".join(keyword.split())
        return self.storage.save_report(market_report, f"market_{platform}_{safe_keyword}")


# Design Rationale and Trade-offs:
#
# 1. Why split analyze_reviews() from run()?
#    - analyze_reviews() is pure: raw records in, report out
#    - run() adds ingestion and file export around it
#    - Trade-off: Two entry points to keep in sync
#
# 2. Why detect themes from the full keyword counts?
#    - A rare keyword outside the top 20 still signals its theme
#    - Trade-off: Themes can mention issues absent from the top table
#
# 3. Why raise when market input cannot be loaded?
#    - An explicit input file is a user request, not an optional cache
#    - The CLI turns the exception into an error document
#    - Trade-off: No partial report for a typo in the path
