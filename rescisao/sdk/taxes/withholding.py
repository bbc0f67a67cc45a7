"""INSS contribution and IRRF withholding calculations.

Implements the progressive INSS table (each salary slice pays its own
rate) and the IRRF table (one bracket applies to the whole base, minus
that bracket's fixed deduction).
"""

import logging
from typing import List, Optional

from ..money import round_cents
from .schemas import (
    ContributionBracket,
    ContributionResult,
    WithholdingBracket,
    WithholdingResult,
)
from .tables import DEPENDENT_DEDUCTION, load_contribution_table, load_withholding_table

logger = logging.getLogger(__name__)

EXEMPT_LABEL = "Isento"


def compute_contribution(
    base: float,
    brackets: Optional[List[ContributionBracket]] = None,
) -> ContributionResult:
    """Calculate progressive INSS on a base.

    Each bracket charges its rate on the slice between the previous
    ceiling and min(base, ceiling). A base exactly on a ceiling is charged
    nothing from the next bracket. Income above the top ceiling is not
    charged.

    Args:
        base: Contribution base (R$)
        brackets: Ascending table; None or empty uses the table in effect

    Returns:
        ContributionResult with:
            - amount: INSS due, rounded to cents
            - base: base capped at the top bracket ceiling
    """
    table = brackets or load_contribution_table()

    total = 0.0
    previous = 0.0
    for bracket in table:
        if base <= previous:
            break
        upper = min(base, bracket.ceiling)
        total += (upper - previous) * (bracket.rate / 100)
        previous = bracket.ceiling

    return ContributionResult(
        amount=round_cents(total),
        base=min(base, table[-1].ceiling),
    )


def compute_withholding(
    base: float,
    contribution: float,
    dependents: int = 0,
    brackets: Optional[List[WithholdingBracket]] = None,
) -> WithholdingResult:
    """Calculate IRRF withholding.

    Args:
        base: Gross taxable amount (R$)
        contribution: INSS already due on the same base
        dependents: Number of declared dependents
        brackets: Ascending table; None or empty uses the table in effect. The last
            bracket is unbounded whatever its ceiling says.

    Returns:
        WithholdingResult with:
            - amount: IRRF due, rounded to cents, never negative
            - base: base after INSS and dependent deductions
            - bracket_label: "Isento" or the applied rate ("15%")
    """
    table = brackets or load_withholding_table()

    taxable = base - contribution - dependents * DEPENDENT_DEDUCTION
    if taxable <= 0:
        return WithholdingResult(amount=0.0, base=0.0, bracket_label=EXEMPT_LABEL)

    label = EXEMPT_LABEL
    tax = 0.0
    last = len(table) - 1
    for index, bracket in enumerate(table):
        if index == last or bracket.unbounded or taxable <= bracket.ceiling:
            tax = taxable * (bracket.rate / 100) - bracket.deduction
            label = bracket.label
            break

    logger.debug(f"IRRF: taxable={taxable:.2f} bracket={label} tax={tax:.2f}")

    return WithholdingResult(
        amount=max(0.0, round_cents(tax)),
        base=round_cents(taxable),
        bracket_label=label,
    )
