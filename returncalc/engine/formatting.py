from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Whole-unit rounding with halves away from zero (12.5 -> 13)."""
    rounded = math.floor(abs(value) + 0.5)
    return -rounded if value < 0 else rounded


def format_euro(value: float) -> str:
    """Render a whole-euro amount in German notation, e.g. ``10.875.000\u00a0€``.

    NaN and infinities render as ``€0``.
    """
    if value is None or not math.isfinite(value):
        return "€0"
    amount = round_half_up(value)
    digits = f"{abs(amount):,}".replace(",", ".")
    sign = "-" if amount < 0 else ""
    return f"{sign}{digits}\u00a0€"
