"""Seguro-desemprego (unemployment insurance) estimate.

Simplified first-request rules: at least 6 months worked, installment
value from the 2024 salary bands, installment count by tenure.
"""

from typing import Optional

from .money import round_cents
from .schemas import UnemploymentInsuranceResult

MIN_MONTHS_WORKED = 6

# Average salary bands (R$)
FIRST_BAND_CEILING = 2041.39
SECOND_BAND_CEILING = 3402.65
FIRST_BAND_FACTOR = 0.8
SECOND_BAND_FACTOR = 0.5
SECOND_BAND_ADDEND = 1633.10

# Highest installment value, whatever the band
INSTALLMENT_CAP = 2313.74


def installment_value(average_salary: float) -> float:
    """Value of one installment for an average salary, rounded to cents."""
    if average_salary <= FIRST_BAND_CEILING:
        value = average_salary * FIRST_BAND_FACTOR
    elif average_salary <= SECOND_BAND_CEILING:
        value = (average_salary - FIRST_BAND_CEILING) * SECOND_BAND_FACTOR + SECOND_BAND_ADDEND
    else:
        value = INSTALLMENT_CAP
    return round_cents(min(value, INSTALLMENT_CAP))


def installment_count(months_worked: int) -> int:
    """3 installments under 12 months, 4 from 12 to 23, 5 from 24."""
    if months_worked >= 24:
        return 5
    if months_worked >= 12:
        return 4
    return 3


def compute_unemployment_insurance(
    average_salary: float,
    months_worked: int,
) -> Optional[UnemploymentInsuranceResult]:
    """Estimate unemployment insurance installments.

    Args:
        average_salary: Average of the last salaries (R$)
        months_worked: Months of employment

    Returns:
        UnemploymentInsuranceResult, or None when months_worked < 6
        (not eligible).
    """
    if months_worked < MIN_MONTHS_WORKED:
        return None

    per_installment = installment_value(average_salary)
    installments = installment_count(months_worked)

    return UnemploymentInsuranceResult(
        per_installment=per_installment,
        installments=installments,
        total=round_cents(per_installment * installments),
    )
