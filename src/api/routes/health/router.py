"""Endpoints de health check (liveness e readiness)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import AsaasSettings, get_asaas_settings

router = APIRouter()

SERVICE_NAME = "integra-asaas"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed"]
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "error": self.error}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(
    request: Request,
    settings: AsaasSettings = Depends(get_asaas_settings),
) -> JSONResponse:
    """Readiness probe: configuração do Asaas e cliente HTTP aberto.

    Não faz chamada ao Asaas para não consumir cota da API a cada probe.
    """
    config_check = _check_asaas_settings(settings)
    client_check = _check_gateway(getattr(request.app.state, "asaas_gateway", None))
    ready = config_check.status == "ok" and client_check.status == "ok"

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "asaas_settings": config_check.as_dict(),
            "asaas_client": client_check.as_dict(),
        },
        "sandbox": settings.is_sandbox,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_asaas_settings(settings: AsaasSettings) -> DependencyCheck:
    errors = settings.validate()
    if errors:
        return DependencyCheck(status="failed", error="; ".join(errors))
    return DependencyCheck(status="ok")


def _check_gateway(gateway: Any | None) -> DependencyCheck:
    if gateway is None:
        return DependencyCheck(status="failed", error="not_configured")
    client = getattr(gateway, "client", None)
    if client is not None and getattr(client, "is_closed", False):
        return DependencyCheck(status="failed", error="client_closed")
    return DependencyCheck(status="ok")
