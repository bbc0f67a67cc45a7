"""Pydantic value records for termination calculations.

All schemas use extra='forbid' and frozen=True: every record is built
fresh per calculation and never mutated afterwards.
"""

from datetime import date, datetime
from typing import List, Literal, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator


TerminationCause = Literal["without_cause", "for_cause", "resignation"]
RaiseKind = Literal["percentage", "fixed"]

CAUSE_LABELS = {
    "without_cause": "Sem Justa Causa",
    "for_cause": "Justa Causa",
    "resignation": "Pedido de Demissão",
}


def cause_label(cause: TerminationCause) -> str:
    """Display label for a termination cause."""
    return CAUSE_LABELS[cause]


# =============================================================================
# Inputs
# =============================================================================


class Raise(BaseModel):
    """A dated salary raise (aumento salarial)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex[:8], description="Opaque identifier")
    effective_date: date = Field(..., description="Date the raise takes effect")
    kind: RaiseKind = Field(..., description="'percentage' (5 means 5%) or 'fixed' (R$ added)")
    magnitude: float = Field(..., gt=0)


class PeriodOverrides(BaseModel):
    """Manually known vacation-period counts.

    When present on a case, both counts replace the computed
    classification (an omitted count is zero, not the computed value).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    pending: int = Field(default=0, ge=0, description="Vested, not yet forfeited periods")
    doubled: int = Field(default=0, ge=0, description="Periods past the concessive deadline")


class TerminationCase(BaseModel):
    """Facts of one termination (dados da rescisão)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    salary: float = Field(..., gt=0, description="Initial monthly salary")
    admission_date: date
    termination_date: date
    cause: TerminationCause
    fund_balance: Optional[float] = Field(
        default=None, ge=0,
        description="Known FGTS balance; replaces the estimate when given",
    )
    period_overrides: Optional[PeriodOverrides] = None
    raises: List[Raise] = Field(default_factory=list)
    employee_name: Optional[str] = Field(default=None, description="Display only")

    @model_validator(mode="after")
    def check_dates(self) -> "TerminationCase":
        if self.termination_date < self.admission_date:
            raise ValueError(
                f"termination_date ({self.termination_date}) precedes "
                f"admission_date ({self.admission_date})"
            )
        return self


# =============================================================================
# Derived records
# =============================================================================


class SalarySnapshot(BaseModel):
    """Salary right after one raise was applied."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    effective_date: date
    kind: RaiseKind
    magnitude: float
    resulting_salary: float


class VacationPeriods(BaseModel):
    """Vacation classification for a span of service."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    pending: int = Field(..., ge=0)
    doubled: int = Field(..., ge=0)
    remainder_months: int = Field(..., ge=0, le=11)


class SeveranceResult(BaseModel):
    """All severance line items plus the durations they were derived from."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Line items (R$, rounded to cents)
    balance_of_salary: float
    pending_vacation: float
    doubled_vacation: float
    proportional_vacation: float
    vacation_total: float
    year_end_bonus: float
    notice_in_lieu: float
    fund_balance: float
    fund_penalty: float
    grand_total: float

    # Supporting figures
    notice_days: int
    total_months: int
    whole_years: int
    remainder_months: int
    days_worked_in_termination_month: int
    pending_periods: int
    doubled_periods: int
    final_salary: float
    salary_trace: Optional[List[SalarySnapshot]] = None


class UnemploymentInsuranceResult(BaseModel):
    """Seguro-desemprego installments."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    per_installment: float
    installments: int = Field(..., ge=3, le=5)
    total: float


class TerminationSummary(BaseModel):
    """Gross line items, statutory deductions and the net payout."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    contribution_base: float
    contribution: float
    withholding_base: float
    withholding: float
    withholding_bracket: str
    gross_total: float
    total_deductions: float
    net_total: float
    dependents: int = Field(default=0, ge=0)
    unemployment_insurance: Optional[UnemploymentInsuranceResult] = None


class HistoryItem(BaseModel):
    """One saved calculation (input + result pair)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    saved_at: datetime
    case: TerminationCase
    result: SeveranceResult
