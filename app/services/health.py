from datetime import datetime, timezone
from typing import Optional

from app.core.config import HEALTH_MESSAGE, REGION
from app.schemas import HealthResponse


def build_health_status(now: Optional[datetime] = None) -> HealthResponse:
    """Service status with the current UTC timestamp"""
    now = now or datetime.now(timezone.utc)
    return HealthResponse(
        message=HEALTH_MESSAGE,
        timestamp=now.isoformat(),
        region=REGION,
    )
