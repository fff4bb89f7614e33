from __future__ import annotations

from contextlib import asynccontextmanager

import httpx
from azure.core.credentials_async import AsyncTokenCredential
from fastapi import FastAPI

from storefront_chat.api.exception_handlers import register_exception_handlers
from storefront_chat.api.schemas import HealthOut
from storefront_chat.chat.router import router as chat_router
from storefront_chat.core.llm.credentials import build_default_credential
from storefront_chat.core.logging import setup_logging
from storefront_chat.core.metrics import PrometheusMetricsMiddleware, metrics_router
from storefront_chat.core.middleware.http_logging import HttpLoggingMiddleware
from storefront_chat.core.settings import get_settings

setup_logging()


def create_app(
    *,
    http_transport: httpx.AsyncBaseTransport | None = None,
    credential: AsyncTokenCredential | None = None,
) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Shared across requests; both are safe for concurrent use and hold no per-call state.
        settings = get_settings()
        app.state.http_client = httpx.AsyncClient(transport=http_transport)
        app.state.azure_credential = credential or build_default_credential(
            tenant_id=settings.azure_tenant_id
        )
        try:
            yield
        finally:
            await app.state.azure_credential.close()
            await app.state.http_client.aclose()

    app = FastAPI(
        title="Storefront Chat API",
        description=(
            "Chat assistant for the Zava storefront.\n\n"
            "Each message is forwarded as a single-turn chat completion to an Azure AI "
            "deployment. There is no conversation state: every request stands alone.\n\n"
            "Logs and metrics carry metadata only; message text is never recorded."
        ),
        lifespan=lifespan,
        docs_url="/swagger",
        redoc_url="/docs",
        openapi_tags=[
            {
                "name": "health",
                "description": "Basic uptime check for load balancers and monitoring.",
            },
            {
                "name": "chat",
                "description": "Chat page and single-message chat completions.",
            },
            {
                "name": "monitoring",
                "description": "Prometheus-compatible metrics endpoint.",
            },
        ],
    )

    app.add_middleware(PrometheusMetricsMiddleware)
    app.add_middleware(HttpLoggingMiddleware)

    register_exception_handlers(app)

    @app.get(
        "/health",
        response_model=HealthOut,
        tags=["health"],
        summary="Health check",
        description=(
            "Reports that the process is up. Does not call Azure AI or the identity provider."
        ),
    )
    async def health() -> HealthOut:
        return HealthOut(status="ok", service=get_settings().app_name)

    app.include_router(metrics_router)
    app.include_router(chat_router)
    return app


app = create_app()
