"""Tests for month arithmetic (15-day rule) and calendar helpers."""

from datetime import date

import pytest

from rescisao.sdk.dates import add_years, month_starts, months_between


class TestMonthsBetween:
    """The 15-day rule decides whether a partial month counts."""

    @pytest.mark.parametrize("start,end,expected", [
        # Same day of month: whole months only
        (date(2020, 1, 10), date(2023, 1, 10), 36),
        # 15 days past the start day counts the partial month
        (date(2024, 1, 1), date(2024, 1, 16), 1),
        # 14 days does not
        (date(2024, 1, 1), date(2024, 1, 15), 0),
        # Borrow: Feb 2024 has 29 days, 29 - 15 = 14 -> drop a month
        (date(2024, 1, 20), date(2024, 3, 5), 1),
        (date(2024, 1, 31), date(2024, 3, 16), 1),
        # Borrow: 29 - 9 = 20 -> keep the month
        (date(2024, 1, 10), date(2024, 3, 1), 2),
        # Borrow across the year boundary uses December (31 days)
        (date(2023, 12, 20), date(2024, 1, 5), 1),
    ])
    def test_month_count(self, start, end, expected):
        assert months_between(start, end) == expected

    def test_never_negative(self):
        assert months_between(date(2024, 5, 1), date(2024, 1, 1)) == 0


def test_add_years_rolls_leap_day_to_march_first():
    assert add_years(date(2020, 2, 29), 1) == date(2021, 3, 1)
    assert add_years(date(2020, 2, 29), 4) == date(2024, 2, 29)
    assert add_years(date(2021, 6, 15), 2) == date(2023, 6, 15)


def test_month_starts_inclusive_across_year():
    starts = list(month_starts(date(2023, 11, 20), date(2024, 2, 3)))
    assert starts == [
        date(2023, 11, 1),
        date(2023, 12, 1),
        date(2024, 1, 1),
        date(2024, 2, 1),
    ]
