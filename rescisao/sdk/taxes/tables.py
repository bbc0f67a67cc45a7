"""INSS/IRRF bracket tables: built-in defaults and stored overrides.

Defaults are the 2024 tables. Users may edit them (e.g. when a new year's
table is published); edits are stored in tables.yaml in the config
directory and take precedence over the defaults.
"""

import logging
from typing import List

import yaml
from pydantic import ValidationError

from ..config import get_tables_path
from .schemas import BracketTables, ContributionBracket, WithholdingBracket

logger = logging.getLogger(__name__)


class TableConfigError(Exception):
    """Raised when tables.yaml exists but is not a valid bracket table."""
    pass


DEFAULT_CONTRIBUTION_TABLE = [
    ContributionBracket(ceiling=1412.00, rate=7.5),
    ContributionBracket(ceiling=2666.68, rate=9),
    ContributionBracket(ceiling=4000.03, rate=12),
    ContributionBracket(ceiling=7786.02, rate=14),
]

DEFAULT_WITHHOLDING_TABLE = [
    WithholdingBracket(ceiling=2259.20, rate=0, deduction=0),
    WithholdingBracket(ceiling=2826.65, rate=7.5, deduction=169.44),
    WithholdingBracket(ceiling=3751.05, rate=15, deduction=381.44),
    WithholdingBracket(ceiling=4664.68, rate=22.5, deduction=662.77),
    WithholdingBracket(ceiling=None, rate=27.5, deduction=896.00),
]

# IRRF deduction per dependent (R$)
DEPENDENT_DEDUCTION = 189.59


def load_bracket_tables() -> BracketTables:
    """Load tables.yaml overrides.

    Returns:
        BracketTables (both tables None if the file doesn't exist)

    Raises:
        TableConfigError: If the file is not valid YAML or fails validation
    """
    path = get_tables_path()
    if not path.exists():
        return BracketTables()

    try:
        with open(path, "r") as f:
            raw = yaml.safe_load(f) or {}
        return BracketTables.model_validate(raw)
    except (yaml.YAMLError, ValidationError) as e:
        raise TableConfigError(f"Invalid bracket tables in {path}: {e}")


def save_bracket_tables(tables: BracketTables) -> None:
    path = get_tables_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(
            tables.model_dump(exclude_none=False),
            f,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.debug(f"saved bracket tables to {path}")


def load_contribution_table() -> List[ContributionBracket]:
    """INSS table in effect: the stored override, else the default."""
    stored = load_bracket_tables().contribution
    if stored:
        return stored
    return list(DEFAULT_CONTRIBUTION_TABLE)


def load_withholding_table() -> List[WithholdingBracket]:
    """IRRF table in effect: the stored override, else the default.

    The last bracket of an override is always treated as unbounded.
    """
    stored = load_bracket_tables().withholding
    if not stored:
        return list(DEFAULT_WITHHOLDING_TABLE)
    top = stored[-1]
    if top.ceiling is not None:
        stored[-1] = top.model_copy(update={"ceiling": None})
    return stored


def save_contribution_table(table: List[ContributionBracket]) -> None:
    current = load_bracket_tables()
    save_bracket_tables(BracketTables(contribution=table, withholding=current.withholding))


def save_withholding_table(table: List[WithholdingBracket]) -> None:
    current = load_bracket_tables()
    save_bracket_tables(BracketTables(contribution=current.contribution, withholding=table))


def reset_tables() -> bool:
    """Remove stored overrides. Returns True if anything was removed."""
    path = get_tables_path()
    if path.exists():
        path.unlink()
        return True
    return False
