"""
Theme Detector.

Flags fixed review themes when trigger terms appear inside
observed keywords.
"""

import logging
from typing import Dict, Iterable, List, Tuple

from reviewpulse.lexicons import PRICING_TRIGGERS, STABILITY_TRIGGERS, UX_TRIGGERS
from reviewpulse.models.report import Theme

logger = logging.getLogger(__name__)


# (theme, triggers), evaluated in this order
THEME_RULES: Tuple[Tuple[Theme, Tuple[str, ...]], ...] = (
    (
        Theme("Stability Issues", "Users are reporting crashes, bugs, or freezes"),
        STABILITY_TRIGGERS,
    ),
    (
        Theme("Pricing Concerns", "Users are discussing price or subscription costs"),
        PRICING_TRIGGERS,
    ),
    (
        Theme("User Experience", "Users are commenting on the app's design or usability"),
        UX_TRIGGERS,
    ),
)


def _matches(keywords: List[str], triggers: Iterable[str]) -> bool:
    # Substring containment, not exact token match
    return any(trigger in keyword for trigger in triggers for keyword in keywords)


class ThemeDetector:
    """
    Rule-based theme detection over a keyword frequency table.
    Each rule contributes at most one theme.
    """

    def __init__(self, rules=THEME_RULES):
        self.rules = rules

    def detect(self, keyword_frequency: Dict[str, int]) -> List[Theme]:
        """
        Detect themes present among observed keywords.

        Args:
            keyword_frequency: Keyword -> count (only the keys are inspected)

        Returns:
            Matching themes in rule order
        """
        keywords = list(keyword_frequency)
        themes = [theme for theme, triggers in self.rules if _matches(keywords, triggers)]

        if themes:
            logger.info(f"Detected themes: {', '.join(t.name for t in themes)}")
        return themes


_default_detector = ThemeDetector()


def detect_themes(keyword_frequency: Dict[str, int]) -> List[Theme]:
    return _default_detector.detect(keyword_frequency)


# Design Rationale and Trade-offs:
#
# 1. Why substring triggers?
#    - "crashed" and "crashes" trigger Stability without a stemmer
#    - Trade-off: False positives such as "carefree" for Pricing
#
# 2. Why a fixed rule table?
#    - Three themes cover the common complaint areas
#    - Output order is stable across runs
#    - Trade-off: New themes need a code change
