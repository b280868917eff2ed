"""Audit hooks: logs relay outcomes so failed deliveries stay visible to operators."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional
from urllib.parse import urlsplit

from returncalc.models.enums import ForwardOutcome

logger = logging.getLogger(__name__)


def _host_only(url: Optional[str]) -> Optional[str]:
    # The path or query of a webhook URL often embeds a secret.
    if not url:
        return None
    return urlsplit(url).hostname


def log_relay(
    outcome: ForwardOutcome,
    status_code: int,
    destination: Optional[str] = None,
    detail: Any = None,
) -> dict[str, Any]:
    """Record a relay attempt in the audit log.

    Returns the audit entry dict for downstream persistence.
    """
    entry = {
        "outcome": outcome.value,
        "status_code": status_code,
        "destination_host": _host_only(destination),
        "timestamp": datetime.now(tz=timezone.utc).isoformat(),
        "detail": str(detail)[:500] if detail is not None else None,
    }
    if outcome.is_failure:
        logger.warning(
            "Lead relay failed: %s (status %s, host %s): %s",
            outcome.value,
            status_code,
            entry["destination_host"],
            entry["detail"],
        )
    else:
        logger.info("Lead relayed → %s", entry["destination_host"])
    return entry
