"""Resolve salary progression from a timeline of raises.

SDK layer - pure logic, returns salaries. No CLI or presentation.

Two resolvers with deliberately different rounding:

- salary_at() folds every applicable raise at full precision and rounds
  once at the end.
- full_trace() rounds after every raise so each snapshot shows the amount
  that would have appeared on a payslip.

On long percentage chains the two can differ by a cent. Both behaviors are
relied on (final salary vs. displayed history), so they are not unified.
"""

from datetime import date
from typing import Iterable, List

from .money import round_cents
from .schemas import Raise, SalarySnapshot


def sort_raises(raises: Iterable[Raise]) -> List[Raise]:
    """Order raises by effective date. Same-date raises keep input order."""
    return sorted(raises, key=lambda r: r.effective_date)


def apply_raise(salary: float, raise_: Raise) -> float:
    """Apply one raise without rounding."""
    if raise_.kind == "percentage":
        return salary * (1 + raise_.magnitude / 100)
    return salary + raise_.magnitude


def salary_at(initial: float, raises: Iterable[Raise], reference: date) -> float:
    """Salary in effect on a reference date.

    Args:
        initial: Salary at admission
        raises: Raises in any order
        reference: Raises dated on or before this date apply

    Returns:
        Salary rounded to cents
    """
    salary = initial
    for raise_ in sort_raises(raises):
        if raise_.effective_date <= reference:
            salary = apply_raise(salary, raise_)
    return round_cents(salary)


def full_trace(initial: float, raises: Iterable[Raise]) -> List[SalarySnapshot]:
    """Chronological salary history, one snapshot per raise.

    Returns:
        List of SalarySnapshot, rounded to cents after every step:
        [
            SalarySnapshot(effective_date=2021-06-01, kind="percentage",
                           magnitude=10, resulting_salary=2200.00),
            ...
        ]
    """
    trace = []
    salary = initial
    for raise_ in sort_raises(raises):
        salary = round_cents(apply_raise(salary, raise_))
        trace.append(SalarySnapshot(
            effective_date=raise_.effective_date,
            kind=raise_.kind,
            magnitude=raise_.magnitude,
            resulting_salary=salary,
        ))
    return trace
