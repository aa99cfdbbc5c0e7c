from typing import Any, List, Tuple
from app.schemas import CategoryMetrics, InsightResponse, RetailDataset
import logging

logger = logging.getLogger(__name__)

INSIGHT_SHOES = (
    "Sales for Shoes dropped significantly week-over-week. "
    "Inventory is low, indicating possible stockout risk."
)
INSIGHT_INVENTORY = (
    "Inventory levels for certain products are below optimal levels. "
    "Consider restocking fast-moving items."
)
INSIGHT_SALES = (
    "Overall sales show mixed trends. "
    "Some categories are growing while others are declining."
)
INSIGHT_DEFAULT = "Please ask about sales, inventory, or specific product."

# Checked in order, first match wins
INSIGHT_RULES: List[Tuple[str, str]] = [
    ("shoes", INSIGHT_SHOES),
    ("inventory", INSIGHT_INVENTORY),
    ("sales", INSIGHT_SALES),
]


def normalize_question(raw: Any) -> str:
    """Lowercase the question; anything that is not a string becomes empty"""
    if not isinstance(raw, str):
        return ""
    return raw.lower()


def build_retail_dataset() -> RetailDataset:
    """Build the static weekly figures for the tracked categories"""
    return RetailDataset(
        categories={
            "shoes": CategoryMetrics(
                sales_last_week=120,
                sales_previous_week=200,
                inventory=40,
            ),
            "tshirts": CategoryMetrics(
                sales_last_week=300,
                sales_previous_week=250,
                inventory=500,
            ),
        }
    )


class SalesAnalyzer:
    def __init__(self):
        self.rules = INSIGHT_RULES
        self.default_insight = INSIGHT_DEFAULT

    def _match_insight(self, question: str) -> str:
        for keyword, insight in self.rules:
            if keyword in question:
                logger.debug(f"Question matched keyword: {keyword}")
                return insight
        logger.debug("Question matched no keyword, using default insight")
        return self.default_insight

    def analyze_sales_question(self, question: Any) -> InsightResponse:
        """
        Pick the canned insight for a retail question

        Args:
            question: Raw question value; missing or non-string input is
                treated as an empty question

        Returns:
            InsightResponse with the lowercased question and its insight
        """
        normalized = normalize_question(question)
        # The figures are not consulted when choosing the insight text
        build_retail_dataset()

        return InsightResponse(
            question=normalized,
            insight=self._match_insight(normalized),
        )
