"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from digital_world_frontend.api.middleware import RequestIDMiddleware, MetricsMiddleware
from digital_world_frontend.api import views
from digital_world_frontend.infrastructure.observability.logging import setup_logging
from digital_world_frontend.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Digital World",
        description="Greeting, purchase and sale-claim page for the Digital World backend",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
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

    app.include_router(views.router, tags=["pages"])

    return app


app = create_app()
