"""Tests for seguro-desemprego estimates."""

import pytest

from rescisao.sdk.unemployment import compute_unemployment_insurance


def test_first_band():
    result = compute_unemployment_insurance(1800.00, 10)
    assert result.per_installment == 1440.00
    assert result.installments == 3
    assert result.total == 4320.00


def test_ineligible_under_six_months():
    assert compute_unemployment_insurance(1800.00, 5) is None
    assert compute_unemployment_insurance(1800.00, 0) is None


def test_second_band():
    # (2541.39 - 2041.39) * 0.5 + 1633.10
    result = compute_unemployment_insurance(2541.39, 18)
    assert result.per_installment == 1883.10
    assert result.installments == 4


def test_above_second_band_is_capped():
    result = compute_unemployment_insurance(9000.00, 30)
    assert result.per_installment == 2313.74
    assert result.installments == 5
    assert result.total == 11568.70


@pytest.mark.parametrize("months,installments", [(6, 3), (11, 3), (12, 4), (23, 4), (24, 5), (120, 5)])
def test_installment_count(months, installments):
    assert compute_unemployment_insurance(1500.00, months).installments == installments
