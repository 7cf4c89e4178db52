"""
Storage utility.

File I/O helpers for raw review inputs, app listings, and report exports.
"""

import json
import os
import logging
from typing import Dict, List, Optional

import pandas as pd

logger = logging.getLogger(__name__)

KEYWORD_TABLE_COLUMNS = ["Keyword", "Count", "Positive", "Negative", "Recent Issues"]


class StorageManager:
    """
    Manages file I/O for pipeline inputs and outputs.

    Handles:
    - Raw reviews (data/raw/<app_id>_<platform>.json)
    - App listings for market analysis (any JSON list)
    - Reports (output/<name>.json) and keyword tables (output/<name>_keywords.csv)
    """

    def __init__(self, data_root: str, output_root: str):
        """
        Initialize storage manager.

        Args:
            data_root: Root data directory (e.g., /path/to/data)
            output_root: Directory for generated reports
        """
        self.data_root = data_root
        self.raw_dir = os.path.join(data_root, "raw")
        self.output_root = output_root

        # Create directories if they don't exist
        os.makedirs(self.raw_dir, exist_ok=True)
        os.makedirs(self.output_root, exist_ok=True)

        logger.info(f"Initialized StorageManager with data_root={data_root}, output_root={output_root}")

    def raw_reviews_path(self, app_id: str, platform: str) -> str:
        """Default location of raw reviews for an app."""
        return os.path.join(self.raw_dir, f"{app_id}_{platform}.json")

    def load_raw_reviews(self, path: str) -> Optional[List[Dict]]:
        """
        Load raw review records.

        Args:
            path: JSON file containing a list of review dicts

        Returns:
            List of review dicts, or None if the file is missing or unreadable
        """
        return self._load_json_list(path, "raw reviews")

    def load_app_listings(self, path: str) -> Optional[List[Dict]]:
        """
        Load store search results for market analysis.

        Returns:
            List of app dicts, or None if the file is missing or unreadable
        """
        return self._load_json_list(path, "app listings")

    def _load_json_list(self, path: str, label: str) -> Optional[List[Dict]]:
        if not os.path.exists(path):
            logger.warning(f"No {label} found at {path}")
            return None

        try:
            with open(path, 'r') as f:
                records = json.load(f)
        except Exception as e:
            logger.error(f"Failed to load {label} from {path}: {e}")
            return None

        if not isinstance(records, list):
            logger.error(f"Expected a JSON list of {label} in {path}, got {type(records).__name__}")
            return None

        logger.debug(f"Loaded {len(records)} {label} from {path}")
        return records

    def save_report(self, report: Dict, name: str) -> str:
        """
        Save a report document as JSON.

        Args:
            report: JSON-serializable report dict
            name: File name without extension

        Returns:
            Path to the written file
        """
        filepath = os.path.join(self.output_root, f"{name}.json")

        try:
            with open(filepath, 'w') as f:
                json.dump(report, f, indent=2)
            logger.info(f"Saved report to {filepath}")
        except Exception as e:
            logger.error(f"Failed to save report {name}: {e}")
            raise

        return filepath

    def save_keyword_table(self, report: Dict, name: str) -> str:
        """
        Export the report's keyword tables as one CSV.

        One row per keyword in the frequency table, flagged with
        its membership in the positive/negative tables and its
        recent-issue count.

        Args:
            report: Report dict as produced by AnalysisReport.to_dict()
            name: File name without extension

        Returns:
            Path to the written CSV
        """
        analysis = report["analysis"]
        positive = analysis["top_positive_keywords"]
        negative = analysis["top_negative_keywords"]
        recent = analysis["recent_issues"]

        rows = [
            {
                "Keyword": keyword,
                "Count": count,
                "Positive": keyword in positive,
                "Negative": keyword in negative,
                "Recent Issues": recent.get(keyword, 0),
            }
            for keyword, count in analysis["keyword_frequency"].items()
        ]

        df = pd.DataFrame(rows, columns=KEYWORD_TABLE_COLUMNS)
        if not df.empty:
            # Stable sort keeps the report's tie order
            df = df.sort_values("Count", ascending=False, kind="stable")

        filepath = os.path.join(self.output_root, f"{name}_keywords.csv")
        df.to_csv(filepath, index=False)

        logger.info(f"Keyword table saved to {filepath} ({len(df)} keywords)")
        return filepath


# Design Rationale and Trade-offs:
#
# 1. Why return None instead of raising on missing inputs?
#    - The default raw path may legitimately not exist yet
#    - Caller decides between mock data, an empty report or an error
#    - Trade-off: Caller must check for None
#
# 2. Why pandas for the keyword table?
#    - DataFrame.to_csv handles quoting and headers
#    - Stable sort_values keeps the report's tie order
#    - Trade-off: pandas is heavy for a single CSV
#
# 3. Why log and re-raise on write failures?
#    - A report that was not written must fail the run
#    - The log names the file that could not be written
#    - Trade-off: No retry
