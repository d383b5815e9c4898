import logging
from pathlib import Path
from typing import Optional

from .base import StorageBackend, StoredFile, timestamp_ms

logger = logging.getLogger(__name__)

# Public path the upload directory is served under
PUBLIC_UPLOADS_PATH = "/uploads"


class LocalDiskStorage(StorageBackend):
    """Writes uploads into a single directory that is served as static files."""

    name = "disk"

    def __init__(self, upload_dir: Path):
        self.upload_dir = Path(upload_dir).resolve()
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    def _make_filename(self, original_name: str) -> str:
        return f"{timestamp_ms()}{Path(original_name).suffix}"

    def store(self, data: bytes, original_name: str, content_type: Optional[str] = None) -> StoredFile:
        filename = self._make_filename(original_name)
        file_path = self.upload_dir / filename

        with open(file_path, "wb") as buffer:
            buffer.write(data)

        logger.info(f"Stored upload {original_name!r} at {file_path}", extra={"size_bytes": len(data)})
        return StoredFile(
            storage=self.name,
            original_name=original_name,
            url=f"{PUBLIC_UPLOADS_PATH}/{filename}",
            path=str(file_path),
            filename=filename,
        )
