"""Entrypoint da aplicação Integra Asaas.

Este módulo é o ponto de entrada principal do serviço.
Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.clients import close_asaas_gateway, create_asaas_gateway
from app.domain.envelope import ResponseEnvelope
from app.observability import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.services.webhook_events import WebhookEventProcessor
from config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from starlette.responses import Response

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)

INVALID_PAYLOAD_MESSAGE = "invalid request payload"
INTERNAL_ERROR_MESSAGE = "internal server error"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Cria o gateway Asaas (um httpx.AsyncClient por processo)

    Shutdown:
    - Fecha o cliente HTTP
    """
    logger.info("app_starting", extra={"component": "lifespan"})
    validate_runtime_settings()
    if getattr(app.state, "asaas_gateway", None) is None:
        app.state.asaas_gateway = create_asaas_gateway()
    if getattr(app.state, "webhook_processor", None) is None:
        app.state.webhook_processor = WebhookEventProcessor()

    yield

    logger.info("app_shutting_down", extra={"component": "lifespan"})
    await close_asaas_gateway(getattr(app.state, "asaas_gateway", None))


async def correlation_id_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Define correlation_id por request e devolve no header da resposta."""
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    try:
        response = await call_next(request)
        response.headers[CORRELATION_ID_HEADER] = get_correlation_id()
        return response
    finally:
        reset_correlation_id(token)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Body/params inválidos viram 400 no envelope padrão."""
    logger.warning(
        "request_validation_failed",
        extra={"path": request.url.path, "error_count": len(exc.errors())},
    )
    envelope = ResponseEnvelope.fail(INVALID_PAYLOAD_MESSAGE, error=str(exc.errors()))
    return JSONResponse(content=envelope.to_content(), status_code=400)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Última barreira: o cliente sempre recebe JSON."""
    logger.exception(
        "unhandled_exception",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    envelope = ResponseEnvelope.fail(INTERNAL_ERROR_MESSAGE, error=type(exc).__name__)
    return JSONResponse(content=envelope.to_content(), status_code=500)


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="Integra Asaas",
        description="Camada de integração com a API de pagamentos Asaas",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    fastapi_app.middleware("http")(correlation_id_middleware)

    fastapi_app.add_exception_handler(RequestValidationError, request_validation_handler)
    fastapi_app.add_exception_handler(Exception, unhandled_exception_handler)

    # Registra todas as rotas
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"component": "create_app"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting Integra Asaas in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
