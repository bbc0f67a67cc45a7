"""Pydantic schemas for INSS/IRRF bracket tables.

These schemas validate tables.yaml overrides and the built-in defaults.
Rates are percentages (7.5 means 7.5%). The top IRRF bracket has no upper
limit: its ceiling is None rather than a float infinity, so the table
survives YAML/JSON round trips.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ContributionBracket(BaseModel):
    """One INSS bracket: the slice of salary up to ``ceiling`` pays ``rate``."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    ceiling: float = Field(..., gt=0, description="Upper bound of the slice (R$)")
    rate: float = Field(..., ge=0, le=100, description="Rate as a percentage")


class WithholdingBracket(BaseModel):
    """One IRRF bracket: base * rate - deduction."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    ceiling: Optional[float] = Field(default=None, gt=0, description="Upper bound (None = no upper limit)")
    rate: float = Field(..., ge=0, le=100, description="Rate as a percentage")
    deduction: float = Field(default=0, ge=0, description="Fixed amount subtracted (parcela a deduzir)")

    @property
    def unbounded(self) -> bool:
        return self.ceiling is None

    @property
    def label(self) -> str:
        """'Isento' for the zero-rate bracket, else the rate (e.g. '7.5%')."""
        if self.rate == 0:
            return "Isento"
        return f"{self.rate:g}%"


def _check_ascending(ceilings: List[Optional[float]], name: str) -> None:
    bounded = [c for c in ceilings if c is not None]
    if any(c is None for c in ceilings[:-1]):
        raise ValueError(f"{name}: only the last bracket may have no ceiling")
    for prev, curr in zip(bounded, bounded[1:]):
        if curr <= prev:
            raise ValueError(f"{name}: ceilings must ascend ({prev} then {curr})")


class BracketTables(BaseModel):
    """Contents of tables.yaml. Either table may be omitted."""
    model_config = ConfigDict(extra="forbid")

    contribution: Optional[List[ContributionBracket]] = Field(default=None, min_length=1)
    withholding: Optional[List[WithholdingBracket]] = Field(default=None, min_length=1)

    @model_validator(mode="after")
    def check_order(self) -> "BracketTables":
        if self.contribution:
            _check_ascending([b.ceiling for b in self.contribution], "contribution")
        if self.withholding:
            _check_ascending([b.ceiling for b in self.withholding], "withholding")
        return self


class ContributionResult(BaseModel):
    """INSS due and the base it was charged on."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    amount: float
    base: float = Field(..., description="Base capped at the top bracket ceiling")


class WithholdingResult(BaseModel):
    """IRRF due, its taxable base and the bracket that applied."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    amount: float
    base: float
    bracket_label: str
