"""Net payout summary: gross severance minus INSS and IRRF.

The severance engine only prices entitlements; this module applies the
deductions the way a termination statement (TRCT) shows them. INSS and
IRRF are charged on balance of salary + notice in lieu + 13º; vacation
and FGTS are not part of that base.
"""

from typing import List, Optional

from .money import round_cents
from .schemas import SeveranceResult, TerminationCause, TerminationSummary
from .taxes import (
    ContributionBracket,
    WithholdingBracket,
    compute_contribution,
    compute_withholding,
)
from .unemployment import compute_unemployment_insurance


def deduction_base(result: SeveranceResult) -> float:
    """Base for INSS/IRRF: saldo de salário + aviso prévio + 13º."""
    return result.balance_of_salary + result.notice_in_lieu + result.year_end_bonus


def summarize_termination(
    result: SeveranceResult,
    cause: TerminationCause,
    average_salary: float,
    dependents: int = 0,
    contribution_table: Optional[List[ContributionBracket]] = None,
    withholding_table: Optional[List[WithholdingBracket]] = None,
) -> TerminationSummary:
    """Apply deductions to a severance result.

    Args:
        result: Output of compute_severance()
        cause: Termination cause (unemployment insurance only for without_cause)
        average_salary: Salary used for the unemployment insurance estimate
        dependents: IRRF dependents
        contribution_table: INSS table (defaults to the table in effect)
        withholding_table: IRRF table (defaults to the table in effect)

    Returns:
        TerminationSummary
    """
    base = deduction_base(result)
    inss = compute_contribution(base, contribution_table)
    irrf = compute_withholding(base, inss.amount, dependents, withholding_table)

    gross = result.grand_total
    deductions = round_cents(inss.amount + irrf.amount)

    insurance = None
    if cause == "without_cause":
        insurance = compute_unemployment_insurance(average_salary, result.total_months)

    return TerminationSummary(
        contribution_base=inss.base,
        contribution=inss.amount,
        withholding_base=irrf.base,
        withholding=irrf.amount,
        withholding_bracket=irrf.bracket_label,
        gross_total=gross,
        total_deductions=deductions,
        net_total=round_cents(gross - deductions),
        dependents=dependents,
        unemployment_insurance=insurance,
    )
