"""
Insight entry point for an HTTP-triggered function.

Deployed on its own, separately from the health entry point, so that
each function exports exactly one ``handler``.
"""
import json
import logging
from typing import Any, Dict, Optional

from app.core.logging import configure_logging
from app.services.sales_analyzer import SalesAnalyzer

configure_logging()
logger = logging.getLogger(__name__)

analyzer = SalesAnalyzer()


def _question_from_event(event: Optional[Dict[str, Any]]) -> Any:
    if not isinstance(event, dict):
        return None
    params = event.get("queryStringParameters")
    if not isinstance(params, dict):
        return None
    return params.get("question")


def handler(event: Optional[Dict[str, Any]], context: Any = None) -> Dict[str, Any]:
    """
    GET /sales-insights?question=...

    Always answers 200 with the echoed question and its insight.
    """
    result = analyzer.analyze_sales_question(_question_from_event(event))
    logger.info(f"Insight requested for question: {result.question!r}")

    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(result.model_dump()),
    }
