"""
FastAPI Application
==================
Main entry point for the greeting Responder.

Run with:
    python -m hello_fullstack.web_api.main
    hello-fullstack serve [--port PORT]
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hello_fullstack.config import Settings, settings as default_settings
from hello_fullstack.utils.log import configure_logging, ensure_logging
from hello_fullstack.web_api.routers import greeting

_logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build a Responder application bound to *settings*."""
    cfg = settings or default_settings

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        ensure_logging(cfg.LOG_LEVEL)
        _logger.info("Server is running on %s", cfg.public_url)
        yield

    application = FastAPI(
        title="Greeting API",
        description="Answers the root path with a fixed greeting",
        version="0.1.0",
        docs_url="/docs" if cfg.DEBUG else None,
        redoc_url="/redoc" if cfg.DEBUG else None,
        openapi_url="/openapi.json" if cfg.DEBUG else None,
        lifespan=lifespan,
    )

    # CORS middleware: any origin, no credentials
    application.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(greeting.router, tags=["Greeting"])
    return application


app = create_app()


# For running directly: python -m hello_fullstack.web_api.main
if __name__ == "__main__":
    import uvicorn
    configure_logging(default_settings.LOG_LEVEL)
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)
