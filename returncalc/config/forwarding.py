from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from returncalc.config.settings import Settings
from returncalc.models.lead import LEAD_SOURCE


@dataclass(frozen=True)
class ForwardingConfig:
    """Relay destination and credential, injected into the proxy at startup."""

    destination_url: Optional[str] = None
    auth_token: Optional[str] = None
    source: str = LEAD_SOURCE
    timeout_seconds: float = 10.0
    reject_malformed_json: bool = False

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> ForwardingConfig:
        settings = settings or Settings()
        return cls(
            destination_url=settings.crm_webhook_url.strip() or None,
            auth_token=settings.crm_auth_bearer.strip() or None,
            source=settings.lead_source,
            timeout_seconds=settings.relay_timeout_seconds,
            reject_malformed_json=settings.reject_malformed_json,
        )

    def auth_headers(self) -> dict[str, str]:
        if not self.auth_token:
            return {}
        return {"Authorization": f"Bearer {self.auth_token}"}
