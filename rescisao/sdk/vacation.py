"""Vacation period classification (férias vencidas / em dobro / proporcionais).

SDK layer - pure logic, no I/O.

Each completed year of service vests one vacation period. The employer
then has one more year (the concessive period) to grant it; a period still
unused after that deadline is owed in double.
"""

import math
from datetime import date
from typing import Optional

from .dates import add_years, months_between
from .schemas import PeriodOverrides, VacationPeriods

# Average month length used when only a last-vacation date is known
AVERAGE_MONTH_DAYS = 30.44


def classify_vacation_periods(
    admission: date,
    termination: date,
    overrides: Optional[PeriodOverrides] = None,
) -> VacationPeriods:
    """Split completed service years into pending and doubled periods.

    Args:
        admission: Admission date
        termination: Termination date
        overrides: Known counts; when given they replace the computed
            pending/doubled counts entirely

    Returns:
        VacationPeriods with the counts and the remainder months
        (service months mod 12) used for proportional vacation.

    Note:
        A termination falling exactly on the concessive deadline is still
        pending; only a termination strictly after it doubles the period.
    """
    total_months = months_between(admission, termination)
    whole_years = total_months // 12
    remainder = total_months % 12

    if overrides is not None:
        return VacationPeriods(
            pending=overrides.pending,
            doubled=overrides.doubled,
            remainder_months=remainder,
        )

    pending = 0
    doubled = 0
    for year in range(whole_years):
        acquisition_end = add_years(admission, year + 1)
        concessive_deadline = add_years(acquisition_end, 1)
        if termination > concessive_deadline:
            doubled += 1
        else:
            pending += 1

    return VacationPeriods(pending=pending, doubled=doubled, remainder_months=remainder)


def estimate_periods_from_last_vacation(
    last_vacation: date,
    termination: date,
) -> Optional[PeriodOverrides]:
    """Estimate owed periods for a worker who only remembers their last vacation.

    Months since the last vacation are approximated with a 30.44-day month.
    Beyond 12 months one period is owed per full year; beyond 24 months the
    periods older than the most recent year are doubled.

    Returns:
        PeriodOverrides, or None when nothing is owed (the computed
        classification then applies).
    """
    elapsed_days = (termination - last_vacation).days
    months_since = math.floor(elapsed_days / AVERAGE_MONTH_DAYS)

    pending = 0
    doubled = 0
    if months_since > 12:
        periods = months_since // 12
        if months_since > 24:
            doubled = (months_since - 12) // 12
            pending = max(0, periods - doubled)
        else:
            pending = periods

    if pending == 0 and doubled == 0:
        return None
    return PeriodOverrides(pending=pending, doubled=doubled)
