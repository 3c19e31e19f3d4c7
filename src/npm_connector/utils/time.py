from __future__ import annotations

from datetime import date, datetime, timedelta, timezone


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def latest_completed_day(reference: date | None = None) -> date:
    today = reference or utc_now().date()
    return today - timedelta(days=1)


def to_date_key(day: str) -> str:
    # Host YEAR_MONTH_DAY fields expect YYYYMMDD.
    return day.replace("-", "")
