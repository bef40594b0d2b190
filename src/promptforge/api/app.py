"""FastAPI application factory."""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import (
    enhancement_router,
    prompts_router,
    health_router,
)
from ..control import PromptStore, create_store
from ..core.config import get_settings
from ..core.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app(
    title: str = "PromptForge API",
    description: str = "Rewrite instructions into structured, framework-driven prompts",
    version: str = "1.0.0",
    store: Optional[PromptStore] = None,
    enable_cors: bool = True,
    cors_origins: list = None
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        title: API title
        description: API description
        version: API version
        store: Prompt library (default: built from settings)
        enable_cors: Whether to enable CORS
        cors_origins: Allowed CORS origins (default: from settings)

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()

    app = FastAPI(
        title=title,
        description=description,
        version=version,
        debug=settings.api.debug,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    if store is None:
        store = create_store(settings.storage.backend, settings.storage.path)
        logger.info("Using %s prompt library", settings.storage.backend)
    app.state.store = store

    # Configure CORS
    if enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins or settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(enhancement_router, prefix="/api/v1")
    app.include_router(prompts_router, prefix="/api/v1")

    return app


def run_server(
    host: Optional[str] = None,
    port: Optional[int] = None,
    reload: bool = False,
    workers: int = 1
) -> None:
    """
    Run the API server.

    Args:
        host: Host to bind to (default: from settings)
        port: Port to listen on (default: from settings)
        reload: Enable auto-reload
        workers: Number of worker processes
    """
    import uvicorn

    settings = get_settings()
    configure_logging(settings.logging)

    uvicorn.run(
        "promptforge.api.app:create_app",
        factory=True,
        host=host or settings.api.host,
        port=port or settings.api.port,
        reload=reload,
        workers=workers
    )


if __name__ == "__main__":
    run_server()
