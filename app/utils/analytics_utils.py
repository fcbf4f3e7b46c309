# app/utils/analytics_utils.py
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Tuple

MONTH_NAMES = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
HISTOGRAM_MONTHS = 12


def _as_utc(now: datetime) -> datetime:
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def start_of_month(now: datetime) -> datetime:
    now = _as_utc(now)
    return datetime(now.year, now.month, 1, tzinfo=timezone.utc)


def seven_days_ago(now: datetime) -> datetime:
    return _as_utc(now) - timedelta(days=7)


def trailing_months(now: datetime, months: int = HISTOGRAM_MONTHS) -> List[Tuple[int, int]]:
    """(year, month) pairs, oldest first, ending with the month containing `now`."""
    now = _as_utc(now)
    return [shift_month(now.year, now.month, offset) for offset in range(-(months - 1), 1)]


def histogram_window_start(now: datetime, months: int = HISTOGRAM_MONTHS) -> datetime:
    year, month = trailing_months(now, months)[0]
    return datetime(year, month, 1, tzinfo=timezone.utc)


def month_label(year: int, month: int) -> str:
    return f"{MONTH_NAMES[month - 1]} {year}"


def build_monthly_signups(rows: Iterable[dict], now: datetime, months: int = HISTOGRAM_MONTHS) -> List[dict]:
    """
    Zero-fill aggregation rows into a fixed-length monthly histogram.

    `rows` are `$group` results shaped like
    ``{"_id": {"year": 2025, "month": 3}, "count": 4}``. Rows outside the
    trailing window are dropped.
    """
    counts = {}
    for row in rows:
        key = (int(row["_id"]["year"]), int(row["_id"]["month"]))
        counts[key] = counts.get(key, 0) + int(row.get("count", 0))

    return [
        {"label": month_label(year, month), "count": counts.get((year, month), 0)}
        for year, month in trailing_months(now, months)
    ]
