"""Tests for salary progression (salary_at / full_trace)."""

from datetime import date

from rescisao.sdk.salary import full_trace, salary_at
from rescisao.sdk.schemas import Raise


def make_raise(effective: date, kind: str, magnitude: float) -> Raise:
    return Raise(effective_date=effective, kind=kind, magnitude=magnitude)


class TestSalaryAt:

    def test_no_raises_returns_initial(self):
        for ref in (date(2000, 1, 1), date(2024, 2, 29), date(2099, 12, 31)):
            assert salary_at(2345.67, [], ref) == 2345.67

    def test_percentage_raise(self):
        raises = [make_raise(date(2021, 6, 1), "percentage", 10)]
        assert salary_at(2000.00, raises, date(2022, 1, 1)) == 2200.00

    def test_raise_applies_on_its_effective_date(self):
        raises = [make_raise(date(2021, 6, 1), "fixed", 300)]
        assert salary_at(2000.00, raises, date(2021, 5, 31)) == 2000.00
        assert salary_at(2000.00, raises, date(2021, 6, 1)) == 2300.00

    def test_unordered_input_applied_by_date(self):
        raises = [
            make_raise(date(2022, 1, 1), "fixed", 100),
            make_raise(date(2021, 1, 1), "percentage", 10),
        ]
        # 1000 * 1.10 + 100, not (1000 + 100) * 1.10
        assert salary_at(1000.00, raises, date(2023, 1, 1)) == 1200.00

    def test_same_date_raises_keep_input_order(self):
        fixed = make_raise(date(2021, 1, 1), "fixed", 100)
        pct = make_raise(date(2021, 1, 1), "percentage", 10)
        assert salary_at(1000.00, [fixed, pct], date(2021, 1, 1)) == 1210.00
        assert salary_at(1000.00, [pct, fixed], date(2021, 1, 1)) == 1200.00

    def test_rounds_once_after_all_raises(self):
        raises = [make_raise(date(2030 + i, 1, 1), "percentage", 3.33) for i in range(10)]
        assert salary_at(1234.57, raises, date(2040, 1, 1)) == 1713.09


class TestFullTrace:

    def test_single_snapshot(self):
        raises = [make_raise(date(2021, 6, 1), "percentage", 10)]
        trace = full_trace(2000.00, raises)

        assert len(trace) == 1
        assert trace[0].effective_date == date(2021, 6, 1)
        assert trace[0].kind == "percentage"
        assert trace[0].magnitude == 10
        assert trace[0].resulting_salary == 2200.00

    def test_snapshot_per_raise_in_date_order(self):
        raises = [
            make_raise(date(2023, 3, 1), "fixed", 250),
            make_raise(date(2022, 3, 1), "percentage", 5),
        ]
        trace = full_trace(3000.00, raises)

        assert [s.effective_date for s in trace] == [date(2022, 3, 1), date(2023, 3, 1)]
        assert [s.resulting_salary for s in trace] == [3150.00, 3400.00]

    def test_empty(self):
        assert full_trace(3000.00, []) == []

    def test_fresh_list_each_call(self):
        raises = [make_raise(date(2021, 6, 1), "percentage", 10)]
        first = full_trace(2000.00, raises)
        second = full_trace(2000.00, raises)
        assert first == second
        assert first is not second

    def test_rounds_after_each_raise(self):
        raises = [make_raise(date(2030 + i, 1, 1), "percentage", 3.33) for i in range(10)]
        trace = full_trace(1234.57, raises)

        # Per-step rounding drifts one cent above the single-rounding path
        assert trace[-1].resulting_salary == 1713.10
        assert trace[-1].resulting_salary != salary_at(1234.57, raises, date(2040, 1, 1))
