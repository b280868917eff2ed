from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class CalculatorInputs:
    """Visitor-editable calculator inputs.

    Values are kept as entered; the metrics engine normalises and clamps
    them on every recompute.
    """

    unit_price: Any = 75.0
    annual_volume: Any = 500_000
    current_return_rate_pct: Any = 25.0
    expected_reduction_pct: Any = 20.0
    handling_cost_per_return: Any = 12.0


@dataclass(frozen=True)
class InputsSnapshot:
    """Numeric, immutable copy of CalculatorInputs taken at submission."""

    unit_price: float
    annual_volume: float
    current_return_rate_pct: float
    expected_reduction_pct: float
    handling_cost_per_return: float


@dataclass(frozen=True)
class DerivedMetrics:
    """Cost and savings figures derived from a CalculatorInputs snapshot."""

    current_rate_pct: float
    reduction_pct: float
    new_rate_pct: float
    current_returns: float
    new_returns: float
    unit_return_cost: float
    current_cost: float
    new_cost: float
    savings: float

    def to_dict(self) -> dict[str, float]:
        return asdict(self)
