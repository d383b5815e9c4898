# app/api/endpoints/upload.py

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.concurrency import run_in_threadpool

from app.core.exceptions import ErrorCode, UploadError, raise_file_too_large, raise_no_file
from app.schemas.upload import UploadResponse
from app.storage import StorageBackend, get_storage

logger = logging.getLogger(__name__)

router = APIRouter()

CHUNK_SIZE = 1024 * 1024


async def read_limited(file: UploadFile, limit_bytes: int) -> bytes:
    """Read an upload in chunks, stopping as soon as it passes the size limit."""
    chunks = []
    total = 0
    while True:
        chunk = await file.read(CHUNK_SIZE)
        if not chunk:
            break
        total += len(chunk)
        if total > limit_bytes:
            raise_file_too_large(file.filename, limit_bytes)
        chunks.append(chunk)
    return b"".join(chunks)


@router.post(
    "/upload",
    response_model=UploadResponse,
    response_model_exclude_none=True,
    summary="Upload a 3D model",
)
async def upload_model(
    request: Request,
    model: Optional[UploadFile] = File(None, description="The 3D model file."),
    storage: StorageBackend = Depends(get_storage),
):
    """Store one model file on the active backend and return where it lives."""
    if model is None or not model.filename:
        raise_no_file()

    settings = request.app.state.settings
    data = await read_limited(model, settings.MAX_UPLOAD_BYTES)

    try:
        stored = await run_in_threadpool(storage.store, data, model.filename, model.content_type)
    except Exception as e:
        logger.exception(f"Upload of {model.filename!r} failed")
        raise UploadError(
            ErrorCode.STORAGE_FAILED,
            "Upload failed",
            filename=model.filename,
            technical_details=f"{type(e).__name__}: {e}",
        ) from e

    if stored.key is not None:
        return UploadResponse(
            file_url=stored.url,
            s3_key=stored.key,
            original_name=stored.original_name,
            storage=stored.storage,
        )

    return UploadResponse(
        file_url=str(request.url_for("uploads", path=stored.filename)),
        file_path=stored.path,
        original_name=stored.original_name,
        storage=stored.storage,
    )
