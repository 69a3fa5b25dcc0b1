"""Wall clock used for audit timestamps."""

from datetime import datetime

import pytz

from app.config import get_settings

settings = get_settings()
tz = pytz.timezone(settings.TIMEZONE)


def get_current_datetime() -> datetime:
    """Get current datetime in the configured timezone."""
    return datetime.now(tz)
