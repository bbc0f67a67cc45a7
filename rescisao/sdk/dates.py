"""Calendar arithmetic shared by every duration-dependent entitlement.

SDK layer - pure logic. No I/O.
"""

import calendar
from datetime import date
from typing import Iterator


def months_between(start: date, end: date) -> int:
    """Count service months between two dates, with the 15-day rule.

    Whole calendar months are counted from the year/month difference, then
    the day-of-month difference adjusts the count:

    - 15 or more days past the start day: the partial month counts (+1)
    - negative (end day before start day): borrow the days of the month
      preceding ``end``; if the borrowed remainder is 15 or more, the
      partial month still counts (no change), otherwise subtract one

    Never returns less than zero.

    Examples:
        months_between(date(2020, 1, 10), date(2023, 1, 10))  # 36
        months_between(date(2024, 1, 1), date(2024, 1, 20))    # 1
        months_between(date(2024, 1, 20), date(2024, 3, 5))    # 1 (29 + (5 - 20) = 14)
    """
    years = end.year - start.year
    months = end.month - start.month
    days = end.day - start.day

    total = years * 12 + months

    if days >= 15:
        total += 1
    elif days < 0:
        borrowed = last_day_of_previous_month(end) + days
        if borrowed < 15:
            total -= 1

    return max(0, total)


def last_day_of_previous_month(d: date) -> int:
    """Number of days in the calendar month before ``d``'s month."""
    if d.month == 1:
        return 31
    return calendar.monthrange(d.year, d.month - 1)[1]


def add_years(d: date, years: int) -> date:
    """Shift a date by whole years. 29 February rolls to 1 March."""
    try:
        return d.replace(year=d.year + years)
    except ValueError:
        return date(d.year + years, 3, 1)


def month_starts(start: date, end: date) -> Iterator[date]:
    """Yield the first day of every month from ``start``'s month to ``end``'s, inclusive."""
    current = date(start.year, start.month, 1)
    last = date(end.year, end.month, 1)
    while current <= last:
        yield current
        if current.month == 12:
            current = date(current.year + 1, 1, 1)
        else:
            current = date(current.year, current.month + 1, 1)
