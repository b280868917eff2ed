"""Visitor calculator session: input edits, recompute, lead submission."""

from __future__ import annotations

import logging
from dataclasses import fields, replace
from typing import Any, Awaitable, Callable, Optional

from returncalc.engine.metrics import compute_metrics
from returncalc.leads.builder import build_lead
from returncalc.models.calculator import CalculatorInputs, DerivedMetrics
from returncalc.models.lead import LeadContact, LeadRecord

logger = logging.getLogger(__name__)

LeadSender = Callable[[dict[str, Any]], Awaitable[bool]]

_INPUT_FIELDS = {f.name for f in fields(CalculatorInputs)}


class CalculatorSession:
    """One visitor's calculator state.

    Metrics are recomputed synchronously on every input change; there is no
    subscription graph, just ``update`` followed by ``compute_metrics``.
    """

    def __init__(self, inputs: Optional[CalculatorInputs] = None):
        self._inputs = inputs or CalculatorInputs()
        self._metrics = compute_metrics(self._inputs)
        self.submitted = False
        self.last_lead: Optional[LeadRecord] = None

    @property
    def inputs(self) -> CalculatorInputs:
        return replace(self._inputs)

    @property
    def metrics(self) -> DerivedMetrics:
        return self._metrics

    def update(self, **changes: Any) -> DerivedMetrics:
        unknown = set(changes) - _INPUT_FIELDS
        if unknown:
            raise TypeError(f"Unknown calculator inputs: {sorted(unknown)}")
        self._inputs = replace(self._inputs, **changes)
        self._metrics = compute_metrics(self._inputs)
        return self._metrics

    async def submit(
        self, contact: LeadContact, consent: bool, sender: LeadSender
    ) -> bool:
        """Build and send a lead. Returns True when the thank-you state applies.

        A delivery failure still returns True: it is logged for operators but
        the visitor is told the submission was received.
        """
        lead = build_lead(contact, consent, self._inputs, self._metrics)
        if lead is None:
            return False

        self.last_lead = lead
        try:
            delivered = await sender(lead.to_payload())
        except Exception:
            logger.exception("Lead sender raised")
            delivered = False
        if not delivered:
            logger.warning("Lead was not delivered to the CRM; visitor shown thank-you state")

        self.submitted = True
        return True
