"""Tests for the monthly signup histogram."""

from datetime import datetime, timezone

from app.utils.analytics_utils import (
    build_monthly_signups,
    histogram_window_start,
    seven_days_ago,
    shift_month,
    start_of_month,
    trailing_months,
)

NOW = datetime(2026, 3, 15, 12, 30, tzinfo=timezone.utc)


def row(year, month, count):
    return {"_id": {"year": year, "month": month}, "count": count}


class TestMonthArithmetic:

    def test_shift_across_year_boundary(self):
        assert shift_month(2026, 1, -1) == (2025, 12)
        assert shift_month(2026, 3, -11) == (2025, 4)
        assert shift_month(2025, 12, 1) == (2026, 1)

    def test_trailing_months_end_with_current(self):
        months = trailing_months(NOW)
        assert len(months) == 12
        assert months[0] == (2025, 4)
        assert months[-1] == (2026, 3)

    def test_window_boundaries(self):
        assert start_of_month(NOW) == datetime(2026, 3, 1, tzinfo=timezone.utc)
        assert histogram_window_start(NOW) == datetime(2025, 4, 1, tzinfo=timezone.utc)
        assert seven_days_ago(NOW) == datetime(2026, 3, 8, 12, 30, tzinfo=timezone.utc)

    def test_naive_now_is_utc(self):
        assert start_of_month(datetime(2026, 3, 15)) == datetime(2026, 3, 1, tzinfo=timezone.utc)


class TestBuildMonthlySignups:

    def test_empty_rows_zero_filled(self):
        histogram = build_monthly_signups([], NOW)
        assert len(histogram) == 12
        assert all(entry["count"] == 0 for entry in histogram)
        assert histogram[0]["label"] == "Apr 2025"
        assert histogram[-1]["label"] == "Mar 2026"

    def test_counts_land_in_their_month(self):
        rows = [row(2025, 4, 2), row(2025, 12, 5), row(2026, 3, 1)]
        histogram = build_monthly_signups(rows, NOW)
        by_label = {entry["label"]: entry["count"] for entry in histogram}
        assert by_label["Apr 2025"] == 2
        assert by_label["Dec 2025"] == 5
        assert by_label["Mar 2026"] == 1
        assert by_label["Jan 2026"] == 0

    def test_sum_matches_trailing_window(self):
        rows = [row(2025, 3, 9), row(2025, 6, 3), row(2026, 2, 4), row(2026, 4, 7)]
        histogram = build_monthly_signups(rows, NOW)
        assert len(histogram) == 12
        # March 2025 and April 2026 fall outside the window
        assert sum(entry["count"] for entry in histogram) == 7

    def test_duplicate_rows_accumulate(self):
        histogram = build_monthly_signups([row(2026, 3, 1), row(2026, 3, 2)], NOW)
        assert histogram[-1]["count"] == 3
