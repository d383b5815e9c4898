# app/application.py

import logging
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from app.core.config import Settings, get_settings
from app.api.main import build_api_router
from app.core.error_handlers import setup_error_handlers, add_request_id_middleware, log_requests_middleware
from app.database.core import get_database
from app.services.pricing_engine import PricingEngine
from app.storage import LocalDiskStorage, PUBLIC_UPLOADS_PATH, create_storage_backend

# Import models to ensure they are registered with SQLAlchemy
from app.database.models import Order  # noqa: F401

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    if app.state.create_tables:
        try:
            logger.info("Starting database initialization...")
            get_database(app.state.settings).create_tables()
            logger.info("Database tables created successfully")
        except Exception as e:
            # Quotes still work without a database; only saves will fail
            logger.warning(f"Database initialization warning: {e}")

    logger.info(f"Application startup completed (storage: {app.state.storage.name})")
    yield
    logger.info("Application shutdown")


def create_app(settings: Optional[Settings] = None, s3_client: Any = None, create_tables: bool = True) -> FastAPI:
    """
    Build the application for a fixed configuration.

    The storage backend is chosen here, once, and kept on app.state for the
    lifetime of the process.
    """
    settings = settings or get_settings()
    storage = create_storage_backend(settings, s3_client=s3_client)

    app = FastAPI(
        title=settings.API_TITLE,
        description=settings.API_DESCRIPTION,
        version=settings.API_VERSION,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.storage = storage
    app.state.pricing_engine = PricingEngine(exchange_rate=settings.USD_TO_INR_RATE)
    app.state.create_tables = create_tables

    # Set up error handlers
    setup_error_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add request ID middleware for better error tracking
    app.middleware("http")(add_request_id_middleware)
    app.middleware("http")(log_requests_middleware)

    app.include_router(build_api_router(storage), prefix="/api")

    # Local uploads are served directly; S3 objects go through /api/presign
    if isinstance(storage, LocalDiskStorage):
        app.mount(PUBLIC_UPLOADS_PATH, StaticFiles(directory=storage.upload_dir), name="uploads")

    @app.get("/", response_class=PlainTextResponse, tags=["Root"])
    async def read_root():
        """A simple liveness endpoint."""
        return "Server is running!"

    @app.get("/health", tags=["Root"])
    async def health_check():
        """Health check reporting the active storage backend."""
        return {"status": "ok", "storage": storage.name}

    return app
