"""FastAPI application factory.

``create_application()`` builds a fully wired app around a service
container. Each call gets its own container unless one is passed in, so
tests run against isolated in-memory stores.

Run with uvicorn's factory mode::

    uvicorn retailops.infrastructure.http.app:create_application --factory
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from retailops.infrastructure.bootstrap import Container, build_container
from retailops.infrastructure.config import Settings, get_settings
from retailops.infrastructure.http import order_routes, product_routes
from retailops.infrastructure.http.exception_handlers import configure_exception_handlers

logger = logging.getLogger(__name__)


def create_application(
    container: Container | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    if container is None:
        container = build_container(seed=settings.SEED_SAMPLE_DATA)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Retail back office: products, stock and orders",
        version=settings.APP_VERSION,
    )
    app.state.container = container
    app.state.settings = settings
    app.state.started_at = time.monotonic()

    _configure_middleware(app, settings)
    configure_exception_handlers(app)
    _configure_routes(app, settings)

    logger.info(
        "%s %s ready (%s, %d products loaded)",
        settings.APP_NAME, settings.APP_VERSION, settings.ENVIRONMENT,
        len(container.product_repo.list_all()),
    )
    return app


def _configure_middleware(app: FastAPI, settings: Settings) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Process-Time"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        logger.info(
            "%s %s %d %.1fms",
            request.method, request.url.path, response.status_code, elapsed * 1000,
        )
        return response


def _configure_routes(app: FastAPI, settings: Settings) -> None:
    app.include_router(product_routes.router)
    app.include_router(order_routes.router)

    def api_info() -> dict:
        return {
            "message": f"Welcome to {settings.APP_NAME}",
            "version": settings.APP_VERSION,
            "endpoints": {
                "health": "/health",
                "products": "/api/products",
                "orders": "/api/orders",
                "stats": "/api/orders/stats",
            },
        }

    app.add_api_route("/", api_info, methods=["GET"], include_in_schema=False)
    app.add_api_route("/api/info", api_info, methods=["GET"], tags=["meta"])

    @app.get("/health", tags=["meta"])
    def health(request: Request) -> dict:
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uptime": round(time.monotonic() - request.app.state.started_at, 3),
            "environment": settings.ENVIRONMENT,
        }
