"""Timezone utilities. Ledger timestamps are always UTC."""

from datetime import datetime
from typing import Optional

import pytz

UTC = pytz.UTC


def now_utc() -> datetime:
    """Return current time in UTC."""
    return datetime.now(UTC)


def to_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Convert a datetime to UTC.

    Naive datetimes are assumed to already be UTC (SQLite drops tzinfo).
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return UTC.localize(dt)
    return dt.astimezone(UTC)
