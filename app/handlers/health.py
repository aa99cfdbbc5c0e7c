"""Health check entry point for an HTTP-triggered function."""
import json
import logging
from typing import Any, Dict

from app.core.logging import configure_logging
from app.services.health import build_health_status

configure_logging()
logger = logging.getLogger(__name__)


def handler(event: Any, context: Any = None) -> Dict[str, Any]:
    """Return a simple 200 response to verify the function is alive."""
    status = build_health_status()
    logger.info("Health check requested")

    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(status.model_dump()),
    }
