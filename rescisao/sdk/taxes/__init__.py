"""taxes - INSS and IRRF deductions on termination payouts.

Scope:
- Progressive INSS contribution (slice by slice)
- IRRF withholding (single bracket with fixed deduction, dependents)
- Bracket tables: 2024 defaults plus user overrides in tables.yaml

Constraints:
- Pure calculation once a table is supplied
- Tables are read, never mutated; callers may pass their own

Usage:
    from rescisao.sdk.taxes import compute_contribution, compute_withholding

    inss = compute_contribution(5000)
    irrf = compute_withholding(5000, inss.amount, dependents=1)
"""

from .schemas import (
    BracketTables,
    ContributionBracket,
    ContributionResult,
    WithholdingBracket,
    WithholdingResult,
)

from .tables import (
    DEFAULT_CONTRIBUTION_TABLE,
    DEFAULT_WITHHOLDING_TABLE,
    DEPENDENT_DEDUCTION,
    TableConfigError,
    load_bracket_tables,
    load_contribution_table,
    load_withholding_table,
    save_contribution_table,
    save_withholding_table,
    reset_tables,
)

from .withholding import (
    compute_contribution,
    compute_withholding,
)

__all__ = [
    # Schemas
    "BracketTables",
    "ContributionBracket",
    "ContributionResult",
    "WithholdingBracket",
    "WithholdingResult",
    # Tables
    "DEFAULT_CONTRIBUTION_TABLE",
    "DEFAULT_WITHHOLDING_TABLE",
    "DEPENDENT_DEDUCTION",
    "TableConfigError",
    "load_bracket_tables",
    "load_contribution_table",
    "load_withholding_table",
    "save_contribution_table",
    "save_withholding_table",
    "reset_tables",
    # Calculations
    "compute_contribution",
    "compute_withholding",
]
