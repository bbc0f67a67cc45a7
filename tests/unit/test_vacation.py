"""Tests for vacation period classification and the last-vacation estimate."""

from datetime import date

from rescisao.sdk.schemas import PeriodOverrides
from rescisao.sdk.vacation import classify_vacation_periods, estimate_periods_from_last_vacation


class TestClassifyVacationPeriods:

    def test_three_years_one_doubled(self):
        """2020-01-10 to 2023-01-10: the first period's deadline (2022-01-10) has passed."""
        periods = classify_vacation_periods(date(2020, 1, 10), date(2023, 1, 10))
        assert periods.doubled == 1
        assert periods.pending == 2
        assert periods.remainder_months == 0

    def test_termination_on_concessive_deadline_is_pending(self):
        """Deadline for the first period is 2022-01-10; terminating that day does not double it."""
        periods = classify_vacation_periods(date(2020, 1, 10), date(2022, 1, 10))
        assert (periods.pending, periods.doubled) == (2, 0)

    def test_day_after_concessive_deadline_is_doubled(self):
        periods = classify_vacation_periods(date(2020, 1, 10), date(2022, 1, 11))
        assert (periods.pending, periods.doubled) == (1, 1)

    def test_long_tenure(self):
        periods = classify_vacation_periods(date(2015, 3, 1), date(2020, 3, 1))
        assert (periods.pending, periods.doubled) == (2, 3)

    def test_partial_year_only(self):
        periods = classify_vacation_periods(date(2023, 1, 1), date(2023, 8, 20))
        assert (periods.pending, periods.doubled) == (0, 0)
        assert periods.remainder_months == 8

    def test_overrides_replace_counts_but_not_remainder(self):
        overrides = PeriodOverrides(pending=1)
        periods = classify_vacation_periods(date(2020, 1, 10), date(2023, 7, 10), overrides)
        assert periods.pending == 1
        assert periods.doubled == 0  # omitted count is zero, not the computed 1
        assert periods.remainder_months == 6


class TestEstimateFromLastVacation:

    def test_recent_vacation_owes_nothing(self):
        assert estimate_periods_from_last_vacation(date(2024, 1, 1), date(2024, 10, 1)) is None

    def test_one_pending_period(self):
        # 517 days -> 16 months
        result = estimate_periods_from_last_vacation(date(2023, 1, 1), date(2024, 6, 1))
        assert result == PeriodOverrides(pending=1, doubled=0)

    def test_doubled_after_two_years(self):
        # 882 days -> 28 months: 2 periods, 1 of them doubled
        result = estimate_periods_from_last_vacation(date(2022, 1, 1), date(2024, 6, 1))
        assert (result.pending, result.doubled) == (1, 1)
