"""Assembles consented lead records from contact fields and calculator state."""

from __future__ import annotations

import logging
from typing import Optional

from returncalc.engine.metrics import normalize_inputs
from returncalc.models.calculator import CalculatorInputs, DerivedMetrics
from returncalc.models.lead import LEAD_SOURCE, LeadContact, LeadRecord

logger = logging.getLogger(__name__)


def build_lead(
    contact: LeadContact,
    consent: bool,
    inputs: CalculatorInputs,
    metrics: DerivedMetrics,
    source: str = LEAD_SOURCE,
) -> Optional[LeadRecord]:
    """Snapshot a lead, or return None when consent or email is missing.

    Rejection is a precondition check rather than an error: the form is
    expected to keep its submit button disabled in those states.
    """
    if consent is not True:
        logger.debug("Lead not built: consent not given")
        return None
    if not (contact.email or "").strip():
        logger.debug("Lead not built: email is empty")
        return None

    # Copy so later edits to the session's inputs cannot leak into the record.
    return LeadRecord(
        contact=contact,
        consent=True,
        inputs=normalize_inputs(inputs),
        metrics=metrics,
        source=source,
    )
