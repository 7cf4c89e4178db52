"""
Configuration settings for ReviewPulse.

Centralized configuration for all agents and pipeline parameters.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_ROOT = Path(os.getenv("REVIEWPULSE_DATA_ROOT", str(PROJECT_ROOT / "data")))
OUTPUT_ROOT = PROJECT_ROOT / "output"

# Supported store platforms
PLATFORMS = ("android", "ios")

# Keyword Extraction
MIN_KEYWORD_LENGTH = 3  # Keywords must be strictly longer than this

# Aggregation limits
TOP_KEYWORDS_LIMIT = 20
TOP_SENTIMENT_KEYWORDS_LIMIT = 10
RECENT_ISSUES_LIMIT = 10
RECENT_WINDOW_DAYS = 7  # Trailing window for "recent issues"

# Market analysis
TOP_BRANDS_COUNT = 2
LOW_COMPETITION_DOMINANCE = 0.7  # Above this: dominated by major brands
MEDIUM_COMPETITION_DOMINANCE = 0.4

# CLI input limits
DEFAULT_REVIEW_LIMIT = 100
MAX_REVIEW_LIMIT = 1000
DEFAULT_COUNTRY = "us"

# Ingestion
USE_MOCK_DATA = os.getenv("REVIEWPULSE_USE_MOCK_DATA", "true").lower() in ("1", "true", "yes")
MOCK_REVIEW_COUNT = 50  # Number of mock reviews to generate
MOCK_DAYS_SPREAD = 14  # Mock review dates span this many trailing days

# Logging
LOG_LEVEL = os.getenv("REVIEWPULSE_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "reviewpulse.log"


# Design Rationale and Trade-offs:
#
# 1. Why module-level constants instead of a config object?
#    - Imported the same way from agents, orchestrator and CLI
#    - Defaults of agent constructors read straight from here
#    - Trade-off: Tests override through constructor args, not by patching
#
# 2. Why environment overrides only for paths, log level and mock mode?
#    - Those differ per machine or per run
#    - Limits and thresholds define the report format and stay fixed
#    - Trade-off: Changing a top-N size means editing this file
#
# 3. Why default to mock data?
#    - The pipeline runs end to end on a fresh checkout
#    - Mock data is only used when no raw file exists at the default path
#    - Trade-off: A real run needs scraped files in data/raw first
