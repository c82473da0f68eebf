"""Factory for constructing the FastAPI application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from users_backend.api.errors import register_exception_handlers
from users_backend.api.routers import users_router
from users_backend.settings import BackendSettings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: BackendSettings) -> None:
    """Configure root logging from the settings' log level."""
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)


def create_api(settings: BackendSettings | None = None) -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    config = settings or get_settings()
    configure_logging(config)

    app = FastAPI(title="Users API", docs_url="/api-docs")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(users_router)
    return app
