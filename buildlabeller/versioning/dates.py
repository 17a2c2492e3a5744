"""Clock-derived label values: elapsed days and half-seconds since midnight."""

import logging
from datetime import datetime, time, timedelta
from typing import Optional

import dateutil.parser

logger = logging.getLogger(__name__)


class SystemClock:
    """Clock backed by the local system time."""

    def now(self) -> datetime:
        return datetime.now()

    def today(self) -> datetime:
        return midnight(self.now())


def midnight(moment: datetime) -> datetime:
    """Start of the day containing ``moment``."""
    return datetime.combine(moment.date(), time.min, tzinfo=moment.tzinfo)


def parse_start_date(
    start_date: Optional[str], day_first: bool = True
) -> Optional[datetime]:
    """
    Parse a configured start date.

    Args:
        start_date: Date string, e.g. ``"20/08/2010"`` or ``"2010-08-20"``
        day_first: Read ambiguous dates as day/month/year

    Returns:
        The parsed datetime (naive), or None if empty or unparsable
    """
    if not start_date or not start_date.strip():
        return None

    try:
        parsed = dateutil.parser.parse(start_date, dayfirst=day_first)
    except (ValueError, OverflowError) as e:
        logger.debug(f"Could not parse start date '{start_date}': {e}")
        return None

    return parsed.replace(tzinfo=None)


def elapsed_days(
    start_date: Optional[str], now: datetime, day_first: bool = True
) -> int:
    """
    Whole days elapsed between ``start_date`` and ``now``.

    Returns 0 when the start date is empty or cannot be parsed.
    """
    start = parse_start_date(start_date, day_first=day_first)
    if start is None:
        return 0
    return int((now.replace(tzinfo=None) - start) / timedelta(days=1))


def ms_revision(now: datetime) -> int:
    """
    Seconds since midnight divided by two, truncated.

    This is the revision number Microsoft tooling generates for ``1.0.*``
    versions; it stays below 43200 for any time of day.
    """
    return int((now - midnight(now)).total_seconds() / 2)
