"""Testes dos endpoints de webhook (cadastro e recebimento)."""

from __future__ import annotations

import json
from typing import Any

import pytest

from api.routes.asaas import webhook
from app.domain.results import GatewayErr, GatewayOk
from app.protocols import WebhookProcessingResult
from app.services.asaas import WebhookService
from app.services.webhook_events import WebhookEventProcessor
from config.settings import AsaasSettings
from tests.api.routes.asaas._helpers import build_request, response_json
from tests.fakes.fake_asaas_gateway import FakeAsaasGateway, FakeErrorReporter

PAYMENT_CREATED = {
    "event": "PAYMENT_CREATED",
    "payment": {"id": "pay_1", "customer": "cus_1", "status": "PENDING", "value": 49.9},
}


class _RaisingProcessor:
    async def process(self, payload: dict[str, Any]) -> WebhookProcessingResult:
        raise RuntimeError("database unavailable")


class _StaticProcessor:
    def __init__(self, result: Any) -> None:
        self.result = result
        self.calls: list[dict[str, Any]] = []

    async def process(self, payload: dict[str, Any]) -> Any:
        self.calls.append(payload)
        return self.result


def _receive_request(payload: Any, headers: dict[str, str] | None = None) -> Any:
    body = payload if isinstance(payload, bytes) else json.dumps(payload).encode("utf-8")
    return build_request(method="POST", path="/webhook/receive", body=body, headers=headers)


# ──────────────────────────────────────────────────────────────────────────────
# Recebimento
# ──────────────────────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_receive_acknowledges_with_200_when_processing_raises() -> None:
    payload = {"event": "PAYMENT_CREATED", "payment": {"id": "pay_1"}}

    response = await webhook.receive_webhook(
        _receive_request(payload), processor=_RaisingProcessor(), settings=AsaasSettings()
    )

    assert response.status_code == 200
    assert response_json(response) == {
        "success": False,
        "processed": False,
        "message": "database unavailable",
        "paymentId": "pay_1",
        "event": "PAYMENT_CREATED",
    }


@pytest.mark.asyncio
async def test_receive_marks_processed_when_processing_succeeds() -> None:
    response = await webhook.receive_webhook(
        _receive_request(PAYMENT_CREATED),
        processor=WebhookEventProcessor(),
        settings=AsaasSettings(),
    )

    body = response_json(response)
    assert response.status_code == 200
    assert body["success"] is True
    assert body["processed"] is True
    assert body["paymentId"] == "pay_1"
    assert body["event"] == "PAYMENT_CREATED"
    assert set(body) == {"success", "processed", "message", "paymentId", "event"}


@pytest.mark.asyncio
async def test_receive_business_failure_still_returns_200() -> None:
    processor = _StaticProcessor(
        WebhookProcessingResult(success=False, message="no matching subscription", event="X")
    )

    response = await webhook.receive_webhook(
        _receive_request(PAYMENT_CREATED), processor=processor, settings=AsaasSettings()
    )

    assert response.status_code == 200
    assert response_json(response)["processed"] is False
    assert response_json(response)["message"] == "no matching subscription"


@pytest.mark.asyncio
async def test_receive_accepts_mapping_results_from_processor() -> None:
    processor = _StaticProcessor({"success": True, "message": "done"})

    response = await webhook.receive_webhook(
        _receive_request(PAYMENT_CREATED), processor=processor, settings=AsaasSettings()
    )

    assert response_json(response)["processed"] is True
    assert response_json(response)["message"] == "done"


@pytest.mark.asyncio
async def test_receive_invalid_json_is_acknowledged() -> None:
    processor = _StaticProcessor({"success": True, "message": "done"})

    response = await webhook.receive_webhook(
        _receive_request(b"{not json"), processor=processor, settings=AsaasSettings()
    )

    assert response.status_code == 200
    assert response_json(response) == {
        "success": False,
        "processed": False,
        "message": "invalid webhook payload",
        "paymentId": None,
        "event": None,
    }
    assert processor.calls == []


@pytest.mark.asyncio
async def test_receive_with_wrong_token_is_acknowledged_but_not_processed() -> None:
    processor = _StaticProcessor({"success": True, "message": "done"})
    settings = AsaasSettings(webhook_auth_token="expected-token")

    response = await webhook.receive_webhook(
        _receive_request(PAYMENT_CREATED, headers={"asaas-access-token": "wrong"}),
        processor=processor,
        settings=settings,
    )

    assert response.status_code == 200
    assert response_json(response)["success"] is False
    assert response_json(response)["processed"] is False
    assert response_json(response)["paymentId"] == "pay_1"
    assert processor.calls == []


@pytest.mark.asyncio
async def test_receive_with_matching_token_is_processed() -> None:
    processor = _StaticProcessor({"success": True, "message": "done"})
    settings = AsaasSettings(webhook_auth_token="expected-token")

    response = await webhook.receive_webhook(
        _receive_request(PAYMENT_CREATED, headers={"asaas-access-token": "expected-token"}),
        processor=processor,
        settings=settings,
    )

    assert response_json(response)["processed"] is True
    assert processor.calls == [PAYMENT_CREATED]


# ──────────────────────────────────────────────────────────────────────────────
# Cadastro
# ──────────────────────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_register_applies_defaults_and_returns_201() -> None:
    created = {"id": "wh_1", "url": "https://example.com/hook"}
    gateway = FakeAsaasGateway({"create_webhook": GatewayOk(created)})

    response = await webhook.register_webhook(
        {"url": "https://example.com/hook", "events": ["PAYMENT_CREATED"]},
        service=WebhookService(gateway),
        reporter=FakeErrorReporter(),
    )

    assert response.status_code == 201
    assert response_json(response) == {"success": True, "data": created}
    (sent,) = gateway.calls_to("create_webhook")[0]
    assert sent["name"] == "Assinaturas App Webhook"
    assert sent["enabled"] is True
    assert sent["interrupted"] is False
    assert sent["sendType"] == "SEQUENTIALLY"
    assert sent["authToken"] is None


@pytest.mark.asyncio
async def test_register_keeps_explicit_false_flags() -> None:
    gateway = FakeAsaasGateway()

    await webhook.register_webhook(
        {"url": "https://example.com/hook", "events": ["PAYMENT_CREATED"], "enabled": False},
        service=WebhookService(gateway),
        reporter=FakeErrorReporter(),
    )

    (sent,) = gateway.calls_to("create_webhook")[0]
    assert sent["enabled"] is False


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"events": ["PAYMENT_CREATED"]},
        {"url": "https://example.com/hook"},
        {"url": "https://example.com/hook", "events": []},
    ],
)
async def test_register_invalid_payload_returns_400_without_gateway_call(
    payload: dict[str, Any],
) -> None:
    gateway = FakeAsaasGateway()

    response = await webhook.register_webhook(
        payload, service=WebhookService(gateway), reporter=FakeErrorReporter()
    )

    assert response.status_code == 400
    assert response_json(response)["success"] is False
    assert gateway.call_count == 0


@pytest.mark.asyncio
async def test_blank_webhook_id_returns_400_without_gateway_call() -> None:
    gateway = FakeAsaasGateway()
    service = WebhookService(gateway)

    get_response = await webhook.get_webhook("", service=service, reporter=FakeErrorReporter())
    put_response = await webhook.update_webhook(
        " ", {"enabled": False}, service=service, reporter=FakeErrorReporter()
    )
    delete_response = await webhook.delete_webhook(
        "", service=service, reporter=FakeErrorReporter()
    )

    assert get_response.status_code == 400
    assert put_response.status_code == 400
    assert delete_response.status_code == 400
    assert response_json(get_response) == {"success": False, "message": "webhook id is required"}
    assert gateway.call_count == 0


@pytest.mark.asyncio
async def test_get_webhook_not_found_mirrors_upstream() -> None:
    gateway = FakeAsaasGateway(
        {"get_webhook": GatewayErr(status_code=404, message="Not Found", upstream=True)}
    )
    reporter = FakeErrorReporter()

    response = await webhook.get_webhook("wh_x", service=WebhookService(gateway), reporter=reporter)

    assert response.status_code == 404
    assert response_json(response) == {"success": False, "message": "Not Found", "status": 404}
    assert reporter.reports[0]["context"] == {"webhook_id": "wh_x"}


@pytest.mark.asyncio
async def test_list_webhooks_wraps_page() -> None:
    page = {"object": "list", "totalCount": 1, "data": [{"id": "wh_1"}]}
    gateway = FakeAsaasGateway({"list_webhooks": GatewayOk(page)})

    response = await webhook.list_webhooks(
        service=WebhookService(gateway), reporter=FakeErrorReporter()
    )

    assert response.status_code == 200
    assert response_json(response) == {"success": True, "data": page}


@pytest.mark.asyncio
async def test_receive_echoes_non_text_event_as_string() -> None:
    body = b'{"event": NaN, "payment": {"id": "pay_3"}}'

    response = await webhook.receive_webhook(
        _receive_request(body), processor=WebhookEventProcessor(), settings=AsaasSettings()
    )

    assert response.status_code == 200
    payload = response_json(response)
    assert payload["event"] == "nan"
    assert payload["paymentId"] == "pay_3"
    assert payload["processed"] is True
