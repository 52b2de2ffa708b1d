"""Testes dos endpoints de subcontas."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.routes import create_api_router
from api.routes.asaas import subaccount
from app.bootstrap.dependencies import get_error_reporter
from app.domain.results import GatewayErr, GatewayOk
from app.services.asaas import SubAccountService
from tests.api.routes.asaas._helpers import response_json
from tests.fakes.fake_asaas_gateway import FakeAsaasGateway, FakeErrorReporter

ACCOUNT = {"id": "acc_1", "name": "Loja Ana", "cpfCnpj": "12345678900", "walletId": "w_1"}


def _client(gateway: FakeAsaasGateway, reporter: FakeErrorReporter) -> TestClient:
    app = FastAPI()
    app.include_router(create_api_router())
    app.state.asaas_gateway = gateway
    app.dependency_overrides[get_error_reporter] = lambda: reporter
    return TestClient(app)


@pytest.mark.asyncio
async def test_find_by_blank_tax_id_returns_400_without_gateway_call() -> None:
    gateway = FakeAsaasGateway()

    response = await subaccount.find_subaccount_by_cpf_cnpj(
        "", service=SubAccountService(gateway), reporter=FakeErrorReporter()
    )

    assert response.status_code == 400
    assert response_json(response) == {"success": False, "message": "tax ID is required"}
    assert gateway.call_count == 0


def test_find_route_without_tax_id_returns_400() -> None:
    gateway = FakeAsaasGateway()
    reporter = FakeErrorReporter()

    response = _client(gateway, reporter).get("/subaccount/bycpfcnpj/")

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "tax ID is required"}
    assert gateway.call_count == 0
    assert reporter.reports[0]["operation"] == "find_subaccount"


def test_find_route_returns_matching_subaccount() -> None:
    gateway = FakeAsaasGateway(
        {"list_subaccounts": GatewayOk({"totalCount": 1, "data": [ACCOUNT]})}
    )

    response = _client(gateway, FakeErrorReporter()).get("/subaccount/bycpfcnpj/12345678900")

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": ACCOUNT}
    assert gateway.calls_to("list_subaccounts") == [({"cpfCnpj": "12345678900"},)]


@pytest.mark.asyncio
async def test_find_by_tax_id_not_found_returns_404() -> None:
    gateway = FakeAsaasGateway({"list_subaccounts": GatewayOk({"totalCount": 0, "data": []})})

    response = await subaccount.find_subaccount_by_cpf_cnpj(
        "98765432100", service=SubAccountService(gateway), reporter=FakeErrorReporter()
    )

    assert response.status_code == 404
    assert response_json(response) == {"success": False, "message": "sub-account not found"}


@pytest.mark.asyncio
async def test_create_returns_existing_subaccount_instead_of_duplicating() -> None:
    gateway = FakeAsaasGateway(
        {"list_subaccounts": GatewayOk({"totalCount": 1, "data": [ACCOUNT]})}
    )
    payload = {"name": "Loja Ana", "email": "ana@example.com", "cpfCnpj": "12345678900"}

    response = await subaccount.create_subaccount(
        payload, service=SubAccountService(gateway), reporter=FakeErrorReporter()
    )

    assert response.status_code == 200
    assert response_json(response) == {"success": True, "data": ACCOUNT}
    assert gateway.calls_to("create_subaccount") == []


@pytest.mark.asyncio
async def test_create_forwards_payload_when_no_subaccount_exists() -> None:
    created = {**ACCOUNT, "apiKey": "$aact_secret"}
    gateway = FakeAsaasGateway(
        {
            "list_subaccounts": GatewayOk({"totalCount": 0, "data": []}),
            "create_subaccount": GatewayOk(created),
        }
    )
    payload = {"name": "Loja Ana", "email": "ana@example.com", "cpfCnpj": "12345678900"}

    response = await subaccount.create_subaccount(
        payload, service=SubAccountService(gateway), reporter=FakeErrorReporter()
    )

    assert response.status_code == 200
    assert response_json(response) == {"success": True, "data": created}
    assert gateway.calls_to("create_subaccount") == [(payload,)]


@pytest.mark.asyncio
async def test_create_validation_failure_returns_400_without_gateway_call() -> None:
    gateway = FakeAsaasGateway()

    response = await subaccount.create_subaccount(
        {"name": "Loja"}, service=SubAccountService(gateway), reporter=FakeErrorReporter()
    )

    assert response.status_code == 400
    assert response_json(response) == {"success": False, "message": "email is required"}
    assert gateway.call_count == 0


@pytest.mark.asyncio
async def test_create_mirrors_upstream_failure_body_and_status() -> None:
    gateway = FakeAsaasGateway(
        {
            "list_subaccounts": GatewayOk({"totalCount": 0, "data": []}),
            "create_subaccount": GatewayErr(
                status_code=400,
                message="O CPF/CNPJ informado é inválido.",
                errors=({"code": "invalid_cpfCnpj", "description": "O CPF/CNPJ informado é inválido."},),
                upstream=True,
            ),
        }
    )
    payload = {"name": "Loja Ana", "email": "ana@example.com", "cpfCnpj": "000"}

    response = await subaccount.create_subaccount(
        payload, service=SubAccountService(gateway), reporter=FakeErrorReporter()
    )

    assert response.status_code == 400
    assert response_json(response) == {
        "success": False,
        "message": "O CPF/CNPJ informado é inválido.",
        "status": 400,
    }


@pytest.mark.asyncio
async def test_list_subaccounts_returns_items_only() -> None:
    gateway = FakeAsaasGateway(
        {"list_subaccounts": GatewayOk({"object": "list", "totalCount": 1, "data": [ACCOUNT]})}
    )

    response = await subaccount.list_subaccounts(
        service=SubAccountService(gateway), reporter=FakeErrorReporter()
    )

    assert response.status_code == 200
    assert response_json(response) == {"success": True, "data": [ACCOUNT]}
