"""Lead forwarding proxy -- relays lead payloads to the CRM webhook.

This is the only network egress of the calculator. The destination URL and
bearer token come from an injected ForwardingConfig and are never echoed back
to the caller.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from returncalc.config.forwarding import ForwardingConfig
from returncalc.hooks.audit_hooks import log_relay
from returncalc.models.enums import ForwardOutcome

logger = logging.getLogger(__name__)

TEXT_PLAIN = "text/plain"
APPLICATION_JSON = "application/json"


class MalformedBodyError(ValueError):
    """Raised when a request body is not a JSON object."""


@dataclass(frozen=True)
class ProxyResponse:
    """What the proxy hands back to the HTTP layer."""

    status_code: int
    body: str
    outcome: ForwardOutcome
    media_type: str = TEXT_PLAIN


def parse_lead_body(raw_body: Optional[bytes]) -> dict[str, Any]:
    """Decode a request body into a JSON object.

    An empty body is an empty object. Anything that does not decode to a
    JSON object raises MalformedBodyError.
    """
    if not raw_body or not raw_body.strip():
        return {}
    try:
        payload = json.loads(raw_body)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedBodyError(f"Malformed JSON body: {e}") from e
    if not isinstance(payload, dict):
        raise MalformedBodyError(
            f"Expected a JSON object, got {type(payload).__name__}"
        )
    return payload


class LeadForwarder:
    """Stateless relay from the visitor-facing form to the CRM webhook."""

    def __init__(
        self,
        config: ForwardingConfig,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._config = config
        self._client = client

    @property
    def config(self) -> ForwardingConfig:
        return self._config

    async def forward(self, method: str, raw_body: Optional[bytes]) -> ProxyResponse:
        if method.upper() != "POST":
            return self._finish(405, "Method Not Allowed", ForwardOutcome.METHOD_NOT_ALLOWED)

        try:
            payload = self._parse(raw_body)
            if payload is None:
                return self._finish(400, "Malformed JSON body", ForwardOutcome.MALFORMED_REQUEST)

            if not self._config.destination_url:
                return self._finish(
                    500, "CRM_WEBHOOK_URL is not set", ForwardOutcome.CONFIGURATION_MISSING
                )

            resp = await self._relay(payload)
        except Exception as e:
            logger.exception("Lead relay raised")
            return self._finish(500, str(e) or "Server error", ForwardOutcome.INTERNAL_ERROR)

        if not resp.is_success:
            return self._finish(
                resp.status_code,
                resp.text or "CRM webhook error",
                ForwardOutcome.PASSTHROUGH_ERROR,
                media_type=resp.headers.get("content-type", TEXT_PLAIN),
            )

        return self._finish(
            200, json.dumps({"ok": True}), ForwardOutcome.SUCCESS, media_type=APPLICATION_JSON
        )

    def _parse(self, raw_body: Optional[bytes]) -> Optional[dict[str, Any]]:
        """Return the payload, {} for lenient fallback, or None to reject."""
        try:
            return parse_lead_body(raw_body)
        except MalformedBodyError as e:
            if self._config.reject_malformed_json:
                return None
            logger.warning(f"Forwarding empty lead, body was unusable: {e}")
            return {}

    def _build_outbound(self, payload: dict[str, Any]) -> tuple[dict[str, str], bytes]:
        headers = {"Content-Type": APPLICATION_JSON, **self._config.auth_headers()}
        body = {"source": self._config.source, **payload}
        return headers, json.dumps(body).encode("utf-8")

    async def _relay(self, payload: dict[str, Any]) -> httpx.Response:
        headers, content = self._build_outbound(payload)
        url = self._config.destination_url
        if self._client is not None:
            return await self._client.post(
                url, headers=headers, content=content, follow_redirects=True
            )
        async with httpx.AsyncClient(timeout=self._config.timeout_seconds) as client:
            return await client.post(
                url, headers=headers, content=content, follow_redirects=True
            )

    def _finish(
        self,
        status_code: int,
        body: str,
        outcome: ForwardOutcome,
        media_type: str = TEXT_PLAIN,
    ) -> ProxyResponse:
        detail = body if outcome.is_failure else None
        log_relay(outcome, status_code, self._config.destination_url, detail)
        return ProxyResponse(
            status_code=status_code, body=body, outcome=outcome, media_type=media_type
        )
