"""Return-cost metrics for the savings calculator.

Every function here is pure and total: inputs are coerced and clamped rather
than rejected, so a recompute can run on every keystroke without raising.
Rates are expressed in percent (0-100), money in the input currency.
"""

from __future__ import annotations

import math
from typing import Any, Union

from returncalc.models.calculator import CalculatorInputs, DerivedMetrics, InputsSnapshot


def to_number(value: Any) -> float:
    """Coerce a raw input to a float; missing or non-numeric becomes 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number):
        return 0.0
    return number


def clamp(value: Any, low: float, high: float) -> float:
    return min(max(to_number(value), low), high)


def normalize_inputs(inputs: CalculatorInputs) -> InputsSnapshot:
    """Return a frozen numeric copy of inputs. Rates are left unclamped."""
    return InputsSnapshot(
        unit_price=to_number(inputs.unit_price),
        annual_volume=to_number(inputs.annual_volume),
        current_return_rate_pct=to_number(inputs.current_return_rate_pct),
        expected_reduction_pct=to_number(inputs.expected_reduction_pct),
        handling_cost_per_return=to_number(inputs.handling_cost_per_return),
    )


def compute_metrics(inputs: Union[CalculatorInputs, InputsSnapshot]) -> DerivedMetrics:
    """Current vs. reduced return cost and the resulting annual savings.

    The reduction is subtracted in percentage points (25% - 20% = 5%), not
    applied as a relative factor. Savings are floored at zero.
    """
    rate = clamp(inputs.current_return_rate_pct, 0, 100)
    reduction = clamp(inputs.expected_reduction_pct, 0, 100)
    new_rate = max(0.0, rate - reduction)

    volume = to_number(inputs.annual_volume)
    current_returns = volume * (rate / 100)
    new_returns = volume * (new_rate / 100)

    unit_return_cost = to_number(inputs.unit_price) + to_number(
        inputs.handling_cost_per_return
    )
    current_cost = current_returns * unit_return_cost
    new_cost = new_returns * unit_return_cost

    return DerivedMetrics(
        current_rate_pct=rate,
        reduction_pct=reduction,
        new_rate_pct=new_rate,
        current_returns=current_returns,
        new_returns=new_returns,
        unit_return_cost=unit_return_cost,
        current_cost=current_cost,
        new_cost=new_cost,
        savings=max(0.0, current_cost - new_cost),
    )
