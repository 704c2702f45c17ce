"""FastAPI application factory: wires config, roles and metrics together."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from panelsim import __version__
from panelsim.config import PanelSimConfig
from panelsim.gateway.http_api import router as api_router
from panelsim.observability.metrics import MetricsCollector
from panelsim.schematic.presets import PRESETS

logger = logging.getLogger(__name__)


def create_app(config: PanelSimConfig | None = None) -> FastAPI:
    """Build and return the FastAPI application."""
    if config is None:
        config = PanelSimConfig.from_yaml()

    app = FastAPI(title="panelsim", version=__version__, docs_url="/docs")
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

    roles = config.role_table()
    metrics = MetricsCollector()

    # Shared, read-only per request; metrics is the only mutable piece
    app.state.config = config
    app.state.roles = roles
    app.state.metrics = metrics

    app.include_router(api_router)

    @app.get("/health")
    async def health():
        return {"status": "healthy", "version": __version__}

    @app.get("/metrics")
    async def get_metrics():
        return metrics.summary()

    @app.get("/")
    async def root():
        return {
            "name": "panelsim",
            "version": __version__,
            "proximity_threshold": config.proximity_threshold,
            "presets": list(PRESETS.keys()),
            "auth": config.http_api_require_auth and bool(config.api_key),
        }

    logger.info("panelsim %s app created (proximity %.1f)", __version__, config.proximity_threshold)
    return app
