"""Monetary rounding and display helpers.

Every line item is rounded to cents at the point it is computed, so the
rounding rule here decides whether totals reproduce to the cent.
"""

import math


def round_cents(amount: float) -> float:
    """Round to 2 decimal places, half up.

    Python's round() uses banker's rounding on binary floats, which
    disagrees with payroll statements on exact half cents. This rounds
    half toward +inf instead.

    Example: 105.905 -> 105.91 (round() gives 105.9 or 105.91 depending on
    the binary representation)
    """
    return math.floor(amount * 100 + 0.5) / 100


def format_brl(amount: float) -> str:
    """Format an amount as Brazilian currency (R$ 1.234,56)."""
    sign = "-" if amount < 0 else ""
    whole = f"{abs(amount):,.2f}"
    # Swap US separators to pt-BR: 1,234.56 -> 1.234,56
    whole = whole.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {whole}"
