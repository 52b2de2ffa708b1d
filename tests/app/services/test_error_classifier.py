"""Testes do classificador de falhas."""

from __future__ import annotations

import pytest

from app.domain.results import GatewayErr
from app.services.error_classifier import (
    classify_exception,
    classify_gateway_error,
    extract_upstream_status,
    safe_error_status,
)
from tests.fakes.fake_asaas_gateway import UpstreamError


class _StatusCodeError(Exception):
    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class _HttpxLikeResponse:
    status_code = 429


class _HttpxLikeError(Exception):
    response = _HttpxLikeResponse()


@pytest.mark.parametrize(
    ("candidate", "expected"),
    [
        (400, 400),
        (404, 404),
        (599, 599),
        ("422", 422),
        (399, 500),
        (600, 500),
        (200, 500),
        (302, 500),
        (None, 500),
        ("abc", 500),
        (True, 500),
    ],
)
def test_safe_error_status_accepts_only_error_range(candidate: object, expected: int) -> None:
    assert safe_error_status(candidate, 500) == expected


def test_extract_upstream_status_prefers_response_status() -> None:
    exc = UpstreamError("not found", 404)
    exc.status_code = 418  # type: ignore[attr-defined]

    assert extract_upstream_status(exc) == 404


def test_extract_upstream_status_reads_response_status_code() -> None:
    assert extract_upstream_status(_HttpxLikeError("slow down")) == 429


def test_extract_upstream_status_falls_back_to_exception_attribute() -> None:
    assert extract_upstream_status(_StatusCodeError("conflict", 409)) == 409
    assert extract_upstream_status(RuntimeError("boom")) is None


def test_classify_exception_keeps_generic_message() -> None:
    classified = classify_exception(UpstreamError("Customer not found", 404), "Failed to update customer")

    assert classified.status_code == 404
    assert classified.message == "Failed to update customer"
    assert classified.error == "Customer not found"
    assert classified.expose_status is False


def test_classify_exception_without_status_defaults_to_500() -> None:
    classified = classify_exception(RuntimeError(), "Failed to list customers")

    assert classified.status_code == 500
    assert classified.error == "RuntimeError"


def test_classify_gateway_error_uses_result_message_and_exposes_upstream_status() -> None:
    result = GatewayErr(status_code=409, message="cpfCnpj already in use", upstream=True)

    classified = classify_gateway_error(result, "Failed to create subaccount")

    assert classified.status_code == 409
    assert classified.message == "cpfCnpj already in use"
    assert classified.expose_status is True


def test_classify_gateway_error_local_validation_hides_status() -> None:
    classified = classify_gateway_error(
        GatewayErr(status_code=400, message="name is required"), "Failed to create subaccount"
    )

    assert classified.expose_status is False
    assert classified.error is None


def test_classify_gateway_error_generic_mode() -> None:
    result = GatewayErr(status_code=302, message="moved", upstream=True)

    classified = classify_gateway_error(
        result, "Failed to get customer", default_status=500, keep_generic_message=True
    )

    assert classified.status_code == 500
    assert classified.message == "Failed to get customer"
    assert classified.error == "moved"
    assert classified.expose_status is False
