import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


def timestamp_ms() -> int:
    """Current time in epoch milliseconds, used to name stored files."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class StoredFile:
    """Where an uploaded model ended up."""
    storage: str
    original_name: str
    url: str
    path: Optional[str] = None
    key: Optional[str] = None
    filename: Optional[str] = None


class StorageBackend(ABC):
    """Persists raw upload bytes and returns an addressable reference."""

    name: str = ""

    @abstractmethod
    def store(self, data: bytes, original_name: str, content_type: Optional[str] = None) -> StoredFile:
        """Persist `data` and describe where it was stored."""

    def presign(self, key: str) -> str:
        """Signed, time-limited retrieval URL. Only object stores support this."""
        raise NotImplementedError(f"{type(self).__name__} does not issue presigned URLs")

    @property
    def supports_presign(self) -> bool:
        return False
