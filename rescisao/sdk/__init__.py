"""Rescisao Calc SDK - Core functionality for termination calculations."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    has_seen_first_open,
    mark_first_open_done,
    get_profile_path,
    load_profile,
    save_profile,
    ProfileNotFoundError,
    get_tables_path,
    get_data_path,
)

from .schemas import (
    TerminationCause,
    RaiseKind,
    Raise,
    PeriodOverrides,
    TerminationCase,
    SalarySnapshot,
    VacationPeriods,
    SeveranceResult,
    UnemploymentInsuranceResult,
    TerminationSummary,
    HistoryItem,
    cause_label,
)

from .money import round_cents, format_brl
from .dates import months_between, add_years, month_starts
from .salary import salary_at, full_trace
from .vacation import classify_vacation_periods, estimate_periods_from_last_vacation
from .severance import compute_severance, notice_days
from .unemployment import compute_unemployment_insurance
from .summary import summarize_termination

from .taxes import (
    compute_contribution,
    compute_withholding,
    ContributionBracket,
    WithholdingBracket,
    TableConfigError,
)

from . import history
from . import profile

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "has_seen_first_open",
    "mark_first_open_done",
    "get_profile_path",
    "load_profile",
    "save_profile",
    "ProfileNotFoundError",
    "get_tables_path",
    "get_data_path",
    # Schemas
    "TerminationCause",
    "RaiseKind",
    "Raise",
    "PeriodOverrides",
    "TerminationCase",
    "SalarySnapshot",
    "VacationPeriods",
    "SeveranceResult",
    "UnemploymentInsuranceResult",
    "TerminationSummary",
    "HistoryItem",
    "cause_label",
    # Engine
    "round_cents",
    "format_brl",
    "months_between",
    "add_years",
    "month_starts",
    "salary_at",
    "full_trace",
    "classify_vacation_periods",
    "estimate_periods_from_last_vacation",
    "compute_severance",
    "notice_days",
    "compute_unemployment_insurance",
    "summarize_termination",
    # Taxes
    "compute_contribution",
    "compute_withholding",
    "ContributionBracket",
    "WithholdingBracket",
    "TableConfigError",
    # Modules
    "history",
    "profile",
]
