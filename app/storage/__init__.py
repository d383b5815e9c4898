"""Storage backends for uploaded models: local disk or S3."""
import logging
from typing import Any

from fastapi import Request

from app.core.config import Settings
from .base import StorageBackend, StoredFile
from .local import LocalDiskStorage, PUBLIC_UPLOADS_PATH
from .s3 import S3Storage

logger = logging.getLogger(__name__)


def create_storage_backend(settings: Settings, s3_client: Any = None) -> StorageBackend:
    """
    Pick the backend from configuration alone: S3 when all four object-store
    credentials are set, local disk otherwise.
    """
    if settings.use_s3:
        logger.info(f"S3 enabled: {settings.S3_BUCKET}")
        return S3Storage.from_settings(settings, client=s3_client)

    logger.info("S3 not configured, falling back to local disk uploads.")
    return LocalDiskStorage(settings.upload_dir)


def get_storage(request: Request) -> StorageBackend:
    return request.app.state.storage


__all__ = [
    "StorageBackend",
    "StoredFile",
    "LocalDiskStorage",
    "S3Storage",
    "PUBLIC_UPLOADS_PATH",
    "create_storage_backend",
    "get_storage",
]
