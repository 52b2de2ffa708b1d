"""Testes do app FastAPI montado (middleware, handlers de erro e rotas)."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.app import app
from app.bootstrap.dependencies import get_error_reporter
from app.domain.results import GatewayOk
from config.settings import AsaasSettings, get_asaas_settings
from tests.fakes.fake_asaas_gateway import FakeAsaasGateway, FakeErrorReporter


@pytest.fixture
def gateway(monkeypatch: pytest.MonkeyPatch) -> FakeAsaasGateway:
    fake = FakeAsaasGateway({"list_customers": GatewayOk({"data": [{"id": "cus_1"}]})})
    monkeypatch.setattr(app.state, "asaas_gateway", fake, raising=False)
    monkeypatch.setitem(app.dependency_overrides, get_error_reporter, FakeErrorReporter)
    monkeypatch.setitem(
        app.dependency_overrides, get_asaas_settings, lambda: AsaasSettings(access_token="x")
    )
    return fake


@pytest.fixture
def client() -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


def test_correlation_id_is_echoed(gateway: FakeAsaasGateway, client: TestClient) -> None:
    response = client.get("/customer", headers={"x-correlation-id": "corr-123"})

    assert response.status_code == 200
    assert response.headers["x-correlation-id"] == "corr-123"
    assert response.json() == {"success": True, "data": {"data": [{"id": "cus_1"}]}}


def test_correlation_id_is_generated_when_absent(
    gateway: FakeAsaasGateway, client: TestClient
) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.headers["x-correlation-id"]


def test_non_object_body_returns_400_envelope(gateway: FakeAsaasGateway, client: TestClient) -> None:
    response = client.post("/customer", json=["not", "an", "object"])

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "invalid request payload"
    assert "error" in body
    assert gateway.call_count == 0


def test_missing_gateway_returns_500_envelope(
    monkeypatch: pytest.MonkeyPatch, client: TestClient
) -> None:
    monkeypatch.setattr(app.state, "asaas_gateway", None, raising=False)

    response = client.get("/subscription")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "message": "internal server error",
        "error": "RuntimeError",
    }


def test_customer_subscriptions_without_customer_returns_400(
    gateway: FakeAsaasGateway, client: TestClient
) -> None:
    response = client.get("/subscription/customer/")

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "customer id is required"}
    assert gateway.call_count == 0


def test_customer_subscriptions_route_filters_by_customer(
    gateway: FakeAsaasGateway, client: TestClient
) -> None:
    response = client.get("/subscription/customer/cus_1")

    assert response.status_code == 200
    assert gateway.calls_to("list_subscriptions") == [({"customer": "cus_1"},)]
    assert gateway.calls_to("get_subscription") == []


def test_webhook_receive_always_acknowledges(gateway: FakeAsaasGateway, client: TestClient) -> None:
    response = client.post(
        "/webhook/receive",
        json={"event": "PAYMENT_CONFIRMED", "payment": {"id": "pay_7", "customer": "cus_1"}},
    )

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "processed": True,
        "message": "payment pay_7 marked as RECEIVED",
        "paymentId": "pay_7",
        "event": "PAYMENT_CONFIRMED",
    }


def test_webhook_receive_with_broken_body_still_returns_200(
    gateway: FakeAsaasGateway, client: TestClient
) -> None:
    response = client.post(
        "/webhook/receive",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 200
    assert response.json()["processed"] is False


def test_shopper_subscription_end_to_end(gateway: FakeAsaasGateway, client: TestClient) -> None:
    response = client.post(
        "/shoppers/subscription",
        json={"customer": "cus_1", "billingType": "PIX", "value": 10},
    )

    assert response.status_code == 201
    (sent,) = gateway.calls_to("create_subscription")[0]
    assert sent["cycle"] == "MONTHLY"
