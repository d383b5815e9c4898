# app/api/endpoints/presign.py

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.core.exceptions import ErrorCode, PresignError, raise_missing_key
from app.schemas.upload import PresignResponse
from app.storage import StorageBackend, get_storage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/presign", response_model=PresignResponse)
def presign(
    key: Optional[str] = Query(None, description="Object key, e.g. uploads/1694_part.stl"),
    storage: StorageBackend = Depends(get_storage),
):
    """Return a time-limited signed GET URL for a stored object."""
    if not key:
        raise_missing_key()

    try:
        url = storage.presign(key)
    except Exception as e:
        logger.exception("Presign error", extra={"key": key})
        raise PresignError(
            ErrorCode.PRESIGN_FAILED,
            "Unable to presign",
            technical_details=f"{type(e).__name__}: {e}",
            context={"key": key},
        ) from e

    return PresignResponse(url=url)
