"""Tests for cent rounding and BRL formatting."""

from rescisao.sdk.money import format_brl, round_cents


def test_round_cents_half_up():
    assert round_cents(0.125) == 0.13  # round() gives 0.12
    assert round_cents(36.1485) == 36.15
    assert round_cents(1000.0) == 1000.0


def test_round_cents_keeps_two_decimal_inputs():
    for value in (1234.56, 0.01, 3000.0, 2200.0, 7786.02):
        assert round_cents(value) == value


def test_format_brl():
    assert format_brl(1234.56) == "R$ 1.234,56"
    assert format_brl(0) == "R$ 0,00"
    assert format_brl(1000000) == "R$ 1.000.000,00"
    assert format_brl(-15.5) == "-R$ 15,50"
