# app/api/main.py

from fastapi import APIRouter

from app.orders import router as orders_router
from app.storage import StorageBackend
from .endpoints import presign, upload


def build_api_router(storage: StorageBackend) -> APIRouter:
    """Assemble the /api routes for the active storage backend."""
    api_router = APIRouter()

    api_router.include_router(upload.router, tags=["Uploads"])
    api_router.include_router(orders_router, tags=["Orders"])

    # Presigned URLs only make sense for object storage
    if storage.supports_presign:
        api_router.include_router(presign.router, tags=["Uploads"])

    return api_router
