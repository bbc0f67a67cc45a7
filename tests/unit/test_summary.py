"""Tests for the gross-to-net termination summary."""

from datetime import date

from rescisao.sdk.schemas import TerminationCase
from rescisao.sdk.severance import compute_severance
from rescisao.sdk.summary import deduction_base, summarize_termination


def scenario_a(cause: str = "without_cause") -> TerminationCase:
    return TerminationCase(
        salary=3000.00,
        admission_date=date(2020, 1, 10),
        termination_date=date(2023, 1, 10),
        cause=cause,
    )


def test_deductions_on_balance_notice_and_bonus():
    case = scenario_a()
    result = compute_severance(case)
    summary = summarize_termination(result, case.cause, case.salary)

    # 1000 balance + 3900 notice + 0 bonus
    assert deduction_base(result) == 4900.00
    assert summary.contribution_base == 4900.00
    assert summary.contribution == 504.82
    # 4900 - 504.82 = 4395.18 at 22.5% - 662.77
    assert summary.withholding_base == 4395.18
    assert summary.withholding == 326.15
    assert summary.withholding_bracket == "22.5%"
    assert summary.gross_total == 24356.00
    assert summary.total_deductions == 830.97
    assert summary.net_total == 23525.03


def test_unemployment_insurance_only_without_cause():
    case = scenario_a()
    summary = summarize_termination(compute_severance(case), case.cause, case.salary)
    assert summary.unemployment_insurance is not None
    assert summary.unemployment_insurance.installments == 5

    for cause in ("resignation", "for_cause"):
        case = scenario_a(cause)
        summary = summarize_termination(compute_severance(case), case.cause, case.salary)
        assert summary.unemployment_insurance is None


def test_dependents_reduce_withholding():
    case = scenario_a()
    result = compute_severance(case)
    without = summarize_termination(result, case.cause, case.salary, dependents=0)
    with_two = summarize_termination(result, case.cause, case.salary, dependents=2)
    assert with_two.withholding < without.withholding
    assert with_two.net_total > without.net_total
    assert with_two.dependents == 2
