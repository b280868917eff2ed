"""Shared test fixtures for the return-rate calculator test suite."""

import json

import httpx
import pytest

from returncalc.config.forwarding import ForwardingConfig
from returncalc.models.calculator import CalculatorInputs

WEBHOOK_URL = "https://crm.example.com/hooks/leads?key=s3cret"


class FakeCRM:
    """Records outbound relay requests and answers with a canned response."""

    def __init__(self, status_code: int = 200, text: str = "", headers=None):
        self.status_code = status_code
        self.text = text
        self.headers = headers or {}
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.text, headers=self.headers)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def reference_inputs() -> CalculatorInputs:
    """The calculator card's default scenario: €75 x 500k units, 25% -> 5%."""
    return CalculatorInputs(
        unit_price=75,
        annual_volume=500_000,
        current_return_rate_pct=25,
        expected_reduction_pct=20,
        handling_cost_per_return=12,
    )


@pytest.fixture
def fake_crm() -> FakeCRM:
    return FakeCRM()


@pytest.fixture
def config() -> ForwardingConfig:
    return ForwardingConfig(destination_url=WEBHOOK_URL, auth_token="sk_test_123")


@pytest.fixture
def make_crm():
    """Factory for FakeCRM instances with a chosen response."""
    return FakeCRM
