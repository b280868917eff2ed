"""FastAPI application for the return-rate calculator: lead relay and metrics."""

from __future__ import annotations

import logging
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from pydantic import BaseModel, ConfigDict, Field

from returncalc.config.forwarding import ForwardingConfig
from returncalc.config.settings import Settings
from returncalc.engine.formatting import format_euro
from returncalc.engine.metrics import compute_metrics
from returncalc.models.calculator import CalculatorInputs
from returncalc.proxy.forwarder import LeadForwarder

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

LEAD_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


class MetricsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    unit_price: float = Field(75.0, alias="unitPrice")
    annual_volume: float = Field(500_000, alias="annualVolume")
    current_return_rate_pct: float = Field(25.0, alias="currentReturnRatePct")
    expected_reduction_pct: float = Field(20.0, alias="expectedReductionPct")
    handling_cost_per_return: Optional[float] = Field(12.0, alias="handlingCostPerReturn")


class MetricsResponse(BaseModel):
    current_rate_pct: float
    reduction_pct: float
    new_rate_pct: float
    current_returns: float
    new_returns: float
    current_cost: float
    new_cost: float
    savings: float
    display: dict[str, str]


def create_app(
    config: Optional[ForwardingConfig] = None,
    http_client: Optional[httpx.AsyncClient] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Build the app with an explicit relay config (read from Settings if omitted)."""
    settings = settings or Settings()
    config = config or ForwardingConfig.from_settings(settings)
    forwarder = LeadForwarder(config, client=http_client)

    if not config.destination_url:
        logger.warning("CRM_WEBHOOK_URL is not set; lead submissions will fail with 500")

    app = FastAPI(title="Return Rate Calculator API", version="0.1.0")
    app.state.forwarder = forwarder

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    async def relay_lead(request: Request) -> Response:
        """Relay a lead to the CRM webhook."""
        body = await request.body()
        result = await request.app.state.forwarder.forward(request.method, body)
        return Response(
            content=result.body,
            status_code=result.status_code,
            media_type=result.media_type,
        )

    # Same handler under the path the static front end already posts to.
    app.add_api_route("/api/lead", relay_lead, methods=LEAD_METHODS)
    app.add_api_route("/.netlify/functions/lead", relay_lead, methods=LEAD_METHODS)

    @app.post("/api/metrics", response_model=MetricsResponse)
    async def metrics(body: MetricsRequest):
        """Compute savings figures server-side for a set of calculator inputs."""
        derived = compute_metrics(CalculatorInputs(**body.model_dump()))
        return MetricsResponse(
            current_rate_pct=derived.current_rate_pct,
            reduction_pct=derived.reduction_pct,
            new_rate_pct=derived.new_rate_pct,
            current_returns=derived.current_returns,
            new_returns=derived.new_returns,
            current_cost=derived.current_cost,
            new_cost=derived.new_cost,
            savings=derived.savings,
            display={
                "savings": format_euro(derived.savings),
                "current_cost": format_euro(derived.current_cost),
                "new_cost": format_euro(derived.new_cost),
            },
        )

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


app = create_app()


def run(settings: Optional[Settings] = None) -> None:
    """Serve the app with uvicorn on the configured host and port."""
    settings = settings or Settings()
    uvicorn.run(app, host=settings.server_host, port=settings.server_port)


if __name__ == "__main__":
    run()
