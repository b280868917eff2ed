from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .calculator import DerivedMetrics, InputsSnapshot

LEAD_SOURCE = "return-rate-calculator"


@dataclass(frozen=True)
class LeadContact:
    """Contact fields as typed by the visitor."""

    name: str = ""
    email: str = ""
    company: Optional[str] = None


@dataclass(frozen=True)
class LeadRecord:
    """A consented lead bundled with the calculator state at submission."""

    contact: LeadContact
    consent: bool
    inputs: InputsSnapshot
    metrics: DerivedMetrics
    source: str = LEAD_SOURCE

    def __post_init__(self) -> None:
        if self.consent is not True:
            raise ValueError("A lead requires consent")
        if not (self.contact.email or "").strip():
            raise ValueError("A lead requires a non-empty email")
        if not isinstance(self.inputs, InputsSnapshot):
            raise TypeError("'inputs' must be an InputsSnapshot")

    def to_payload(self) -> dict[str, Any]:
        """Flatten into the JSON object posted to the forwarding proxy.

        Rates are the clamped values the metrics were computed from, so the
        payload is self-consistent even when the visitor typed e.g. 140%.
        """
        return {
            "name": self.contact.name,
            "email": self.contact.email,
            "company": self.contact.company or "",
            "price": self.inputs.unit_price,
            "volume": self.inputs.annual_volume,
            "currentReturnRate": self.metrics.current_rate_pct,
            "expectedReduction": self.metrics.reduction_pct,
            "handlingCost": self.inputs.handling_cost_per_return or 0,
            "newReturnRate": self.metrics.new_rate_pct,
            "currentReturns": self.metrics.current_returns,
            "newReturns": self.metrics.new_returns,
            "currentCost": self.metrics.current_cost,
            "newCost": self.metrics.new_cost,
            "savings": self.metrics.savings,
            "source": self.source,
        }
