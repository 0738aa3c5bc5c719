"""Calendar helpers.

Day counts are always taken between calendar dates, never between
timestamps, so time-of-day jitter cannot shift a result by one day.
"""

import logging
from datetime import date, datetime
from typing import Optional, Union

import pytz

from app.config import get_settings

logger = logging.getLogger(__name__)


def app_timezone():
    """The configured application timezone. Falls back to UTC if unknown."""
    tz_name = get_settings().APP_TIMEZONE
    try:
        return pytz.timezone(tz_name)
    except pytz.exceptions.UnknownTimeZoneError:
        logger.warning(f"Unknown APP_TIMEZONE {tz_name!r}, using UTC")
        return pytz.UTC


def local_today() -> date:
    """Today's date in the configured application timezone."""
    return datetime.now(pytz.UTC).astimezone(app_timezone()).date()


def to_date(value: Union[date, datetime]) -> date:
    """Strip the time component from a datetime; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def days_between(earlier: Optional[Union[date, datetime]], later: Union[date, datetime]) -> Optional[int]:
    """Whole calendar days from ``earlier`` to ``later``, or None if ``earlier`` is None."""
    if earlier is None:
        return None
    return (to_date(later) - to_date(earlier)).days
