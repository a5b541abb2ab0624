"""FastAPI application factory"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from atm_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from atm_gateway.api.v1 import withdrawal, deposit, history
from atm_gateway.infrastructure.database.models import Base
from atm_gateway.infrastructure.database.session import engine
from atm_gateway.infrastructure.observability.logging import setup_logging
from atm_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create journal tables on startup"""
    Base.metadata.create_all(bind=engine)
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        lifespan=lifespan,
        title="ATM Gateway",
        description="Cash withdrawal service for an automated teller machine",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(withdrawal.router, prefix="/v1", tags=["withdrawals"])
    app.include_router(deposit.router, prefix="/v1", tags=["deposit"])
    app.include_router(history.router, prefix="/v1", tags=["history"])

    return app


app = create_app()
