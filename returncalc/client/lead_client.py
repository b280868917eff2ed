"""HTTP client the calculator front end uses to submit leads to the proxy."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_PROXY_PATH = "/.netlify/functions/lead"


class LeadClient:
    """Posts lead payloads to the forwarding proxy.

    ``proxy_url`` may be relative when ``base_url`` is given or an injected
    ``client`` carries its own base URL. Delivery failures are logged and
    reported as ``False``; they never raise, because the visitor is shown the
    thank-you state either way.
    """

    def __init__(
        self,
        proxy_url: str = DEFAULT_PROXY_PATH,
        client: Optional[httpx.AsyncClient] = None,
        base_url: str = "",
        timeout: float = 15.0,
    ):
        if client is None and not base_url and not httpx.URL(proxy_url).is_absolute_url:
            raise ValueError(
                f"Relative proxy_url {proxy_url!r} needs a base_url or an injected client"
            )
        self.proxy_url = proxy_url
        self.base_url = base_url
        self._client = client
        self._timeout = timeout

    async def submit(self, payload: dict[str, Any]) -> bool:
        try:
            if self._client is not None:
                resp = await self._client.post(self.proxy_url, json=payload)
            else:
                async with httpx.AsyncClient(
                    base_url=self.base_url, timeout=self._timeout
                ) as client:
                    resp = await client.post(self.proxy_url, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"Lead submit failed: {e!r}")
            return False

        if not resp.is_success:
            logger.error(f"Lead submit failed: proxy returned {resp.status_code}")
            return False
        return True
