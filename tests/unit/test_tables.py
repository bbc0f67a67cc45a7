"""Tests for bracket table overrides stored in tables.yaml."""

import pytest

from rescisao.sdk.config import get_tables_path
from rescisao.sdk.taxes import (
    DEFAULT_CONTRIBUTION_TABLE,
    DEFAULT_WITHHOLDING_TABLE,
    ContributionBracket,
    TableConfigError,
    WithholdingBracket,
    compute_contribution,
    load_contribution_table,
    load_withholding_table,
    reset_tables,
    save_contribution_table,
    save_withholding_table,
)


def test_defaults_when_no_overrides():
    assert load_contribution_table() == DEFAULT_CONTRIBUTION_TABLE
    assert load_withholding_table() == DEFAULT_WITHHOLDING_TABLE
    assert DEFAULT_WITHHOLDING_TABLE[-1].unbounded


def test_contribution_override_used_by_default():
    custom = [ContributionBracket(ceiling=1000, rate=10), ContributionBracket(ceiling=5000, rate=20)]
    save_contribution_table(custom)

    assert load_contribution_table() == custom
    assert compute_contribution(2000.00).amount == 300.00
    # The other table is untouched
    assert load_withholding_table() == DEFAULT_WITHHOLDING_TABLE


def test_withholding_override_top_bracket_is_unbounded():
    save_withholding_table([
        WithholdingBracket(ceiling=2000, rate=0),
        WithholdingBracket(ceiling=4000, rate=15, deduction=300),
    ])
    table = load_withholding_table()
    assert table[0].ceiling == 2000
    assert table[-1].ceiling is None
    assert table[-1].rate == 15


def test_both_overrides_survive_each_other():
    save_contribution_table([ContributionBracket(ceiling=1000, rate=10)])
    save_withholding_table([WithholdingBracket(ceiling=None, rate=10)])
    assert len(load_contribution_table()) == 1
    assert len(load_withholding_table()) == 1


def test_reset():
    save_contribution_table([ContributionBracket(ceiling=1000, rate=10)])
    assert reset_tables() is True
    assert load_contribution_table() == DEFAULT_CONTRIBUTION_TABLE
    assert reset_tables() is False


def test_descending_ceilings_rejected():
    get_tables_path().write_text(
        "contribution:\n"
        "  - {ceiling: 2000, rate: 9}\n"
        "  - {ceiling: 1000, rate: 7.5}\n"
    )
    with pytest.raises(TableConfigError, match="ascend"):
        load_contribution_table()


def test_unknown_field_rejected():
    get_tables_path().write_text("contribution:\n  - {ate: 1412, aliquota: 7.5}\n")
    with pytest.raises(TableConfigError):
        load_contribution_table()


def test_invalid_yaml_rejected():
    get_tables_path().write_text("contribution: [unclosed\n")
    with pytest.raises(TableConfigError):
        load_withholding_table()
