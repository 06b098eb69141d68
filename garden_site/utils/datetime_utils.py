"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
All datetime operations use the timezone configured in garden_site.core.config.

Functions:
- now(): Returns timezone-aware datetime object
- parse_iso(): Safely parse ISO 8601 string to datetime
- ensure_aware(): Attach the application timezone to naive datetimes
"""
import logging
import zoneinfo
from datetime import datetime, timezone as dt_timezone
from typing import Optional

from garden_site.core.config import get_settings

logger = logging.getLogger(__name__)


def _get_app_timezone() -> dt_timezone:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    tz_str = get_settings().timezone

    if tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning("Invalid timezone '%s', falling back to UTC", tz_str)
        return dt_timezone.utc


def now() -> datetime:
    """
    Get current datetime with application-configured timezone.

    Returns:
        timezone-aware datetime object
    """
    return datetime.now(_get_app_timezone())


def ensure_aware(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Attach the application timezone to a naive datetime.

    BSON dates come back naive unless the client is tz-aware, and pydantic
    accepts naive datetimes from forms, so comparisons go through here.
    """
    if dt is None or dt.tzinfo is not None:
        return dt
    return dt.replace(tzinfo=_get_app_timezone())


def parse_iso(dt_str: Optional[str]) -> Optional[datetime]:
    """
    Parse ISO 8601 string to datetime object.
    If string is naive, assumes application timezone.

    Args:
        dt_str: ISO 8601 string (e.g., "2025-12-24T10:30:00Z" or "2025-12-24")

    Returns:
        timezone-aware datetime object, or None if parsing fails
    """
    if not dt_str:
        return None

    try:
        dt = datetime.fromisoformat(dt_str.replace("Z", "+00:00"))
    except ValueError:
        return None
    return ensure_aware(dt)
