from __future__ import annotations

import calendar
from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from ..core.constants import DEFAULT_TIMEZONE, MONTH_NAMES


def now_local(tz_name: str = DEFAULT_TIMEZONE) -> datetime:
    """Current wall-clock time in the given IANA timezone."""
    return datetime.now(ZoneInfo(tz_name))


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of a month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def month_name(month: int) -> str:
    return MONTH_NAMES[month - 1]


def utc_isoformat(value: Optional[datetime]) -> Optional[str]:
    """ISO 8601 with an explicit offset; naive values are read as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()
