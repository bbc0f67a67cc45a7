"""Severance (verbas rescisórias) calculation.

Pure function of a TerminationCase. Composes month arithmetic, vacation
classification and salary resolution, then prices each line item.

Every line item is rounded to cents as soon as it is computed and totals
are summed from the rounded items; rounding only at the end produces
different cents.

Which items are owed depends on the cause:

    item                    without_cause  resignation  for_cause
    balance of salary       yes            yes          yes
    pending/doubled vac.    yes            yes          yes
    proportional vacation   yes            yes          no
    year-end bonus (13º)    yes            yes          no
    notice in lieu          yes            no           no
    FGTS 40% penalty        yes            no           no
"""

import logging
from datetime import date
from typing import List

from .dates import month_starts, months_between
from .money import round_cents
from .salary import full_trace, salary_at
from .schemas import Raise, SeveranceResult, TerminationCase
from .vacation import classify_vacation_periods

logger = logging.getLogger(__name__)

FGTS_RATE = 0.08
FGTS_PENALTY_RATE = 0.4
NOTICE_BASE_DAYS = 30
NOTICE_DAYS_PER_YEAR = 3
NOTICE_MAX_DAYS = 90


def notice_days(whole_years: int) -> int:
    """Aviso prévio days: 30 plus 3 per completed year, capped at 90."""
    return min(NOTICE_BASE_DAYS + NOTICE_DAYS_PER_YEAR * whole_years, NOTICE_MAX_DAYS)


def year_end_bonus_months(admission: date, termination: date) -> int:
    """Months counted toward the 13º salary in the termination year (max 12)."""
    year_start = date(termination.year, 1, 1)
    reference = admission if admission > year_start else year_start
    return min(months_between(reference, termination), 12)


def accumulate_fund(
    initial: float,
    raises: List[Raise],
    admission: date,
    termination: date,
) -> float:
    """Estimate the FGTS balance month by month when the salary varied.

    Deposits 8% of the salary in effect on the first day of each month,
    from the admission month through the termination month. Rounded once.
    """
    total = 0.0
    for month_start in month_starts(admission, termination):
        total += salary_at(initial, raises, month_start) * FGTS_RATE
    return round_cents(total)


def compute_severance(case: TerminationCase) -> SeveranceResult:
    """Compute every severance line item for a termination.

    Args:
        case: Pre-validated termination facts

    Returns:
        SeveranceResult. Items the cause does not grant are 0.
    """
    cause = case.cause
    admission = case.admission_date
    termination = case.termination_date
    has_raises = len(case.raises) > 0

    final_salary = (
        salary_at(case.salary, case.raises, termination) if has_raises else case.salary
    )

    total_months = months_between(admission, termination)
    whole_years = total_months // 12
    remainder_months = total_months % 12
    days_worked = termination.day

    # 1. Saldo de salário
    balance = round_cents(final_salary / 30 * days_worked)

    # 2. Férias (+1/3 constitucional)
    periods = classify_vacation_periods(admission, termination, case.period_overrides)
    one_period = final_salary + final_salary / 3

    pending_vacation = round_cents(periods.pending * one_period)
    doubled_vacation = round_cents(periods.doubled * one_period * 2)
    proportional_vacation = 0.0
    if cause != "for_cause" and remainder_months > 0:
        base = final_salary / 12 * remainder_months
        proportional_vacation = round_cents(base + base / 3)

    vacation_total = round_cents(pending_vacation + doubled_vacation + proportional_vacation)

    # 3. 13º proporcional
    bonus = 0.0
    if cause != "for_cause":
        bonus = round_cents(final_salary / 12 * year_end_bonus_months(admission, termination))

    # 4. Aviso prévio indenizado
    days_notice = 0
    notice = 0.0
    if cause == "without_cause":
        days_notice = notice_days(whole_years)
        notice = round_cents(final_salary / 30 * days_notice)

    # 5. FGTS
    if case.fund_balance is not None:
        fund = round_cents(case.fund_balance)
    elif has_raises:
        fund = accumulate_fund(case.salary, case.raises, admission, termination)
    else:
        fund = round_cents(case.salary * FGTS_RATE * total_months)

    # 6. Multa 40% FGTS
    penalty = 0.0
    if cause == "without_cause":
        penalty = round_cents(fund * FGTS_PENALTY_RATE)

    if cause == "without_cause":
        grand_total = round_cents(balance + vacation_total + bonus + notice + penalty)
    elif cause == "resignation":
        grand_total = round_cents(balance + vacation_total + bonus)
    else:
        grand_total = round_cents(balance + pending_vacation + doubled_vacation)

    logger.debug(
        f"severance: cause={cause} months={total_months} final_salary={final_salary:.2f} "
        f"total={grand_total:.2f}"
    )

    return SeveranceResult(
        balance_of_salary=balance,
        pending_vacation=pending_vacation,
        doubled_vacation=doubled_vacation,
        proportional_vacation=proportional_vacation,
        vacation_total=vacation_total,
        year_end_bonus=bonus,
        notice_in_lieu=notice,
        fund_balance=fund,
        fund_penalty=penalty,
        grand_total=grand_total,
        notice_days=days_notice,
        total_months=total_months,
        whole_years=whole_years,
        remainder_months=remainder_months,
        days_worked_in_termination_month=days_worked,
        pending_periods=periods.pending,
        doubled_periods=periods.doubled,
        final_salary=final_salary,
        salary_trace=full_trace(case.salary, case.raises) if has_raises else None,
    )
