import logging
import mimetypes
from typing import Any, Optional
from urllib.parse import quote

import boto3

from app.core.config import Settings
from .base import StorageBackend, StoredFile, timestamp_ms

logger = logging.getLogger(__name__)

# Keeps user uploads apart from anything else in the bucket
KEY_PREFIX = "uploads/"
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def create_s3_client(settings: Settings) -> Any:
    return boto3.client(
        "s3",
        aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
        aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
        region_name=settings.AWS_REGION,
    )


class S3Storage(StorageBackend):
    """Writes uploads to an S3 bucket under the `uploads/` prefix."""

    name = "s3"

    def __init__(self, client: Any, bucket: str, region: str, acl: str = "private", presign_expires: int = 60):
        self.client = client
        self.bucket = bucket
        self.region = region
        self.acl = acl
        self.presign_expires = presign_expires

    @classmethod
    def from_settings(cls, settings: Settings, client: Any = None) -> "S3Storage":
        return cls(
            client=client if client is not None else create_s3_client(settings),
            bucket=settings.S3_BUCKET,
            region=settings.AWS_REGION,
            acl=settings.S3_ACL,
            presign_expires=settings.PRESIGN_EXPIRES,
        )

    @property
    def supports_presign(self) -> bool:
        return True

    def make_key(self, original_name: str) -> str:
        return f"{KEY_PREFIX}{timestamp_ms()}_{original_name}"

    def object_url(self, key: str) -> str:
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{quote(key)}"

    def store(self, data: bytes, original_name: str, content_type: Optional[str] = None) -> StoredFile:
        key = self.make_key(original_name)
        guessed, _ = mimetypes.guess_type(original_name)

        self.client.put_object(
            Bucket=self.bucket,
            Key=key,
            Body=data,
            ContentType=guessed or content_type or DEFAULT_CONTENT_TYPE,
            ACL=self.acl,
        )

        logger.info(f"Uploaded {original_name!r} to s3://{self.bucket}/{key}", extra={"size_bytes": len(data)})
        return StoredFile(
            storage=self.name,
            original_name=original_name,
            url=self.object_url(key),
            key=key,
        )

    def presign(self, key: str) -> str:
        return self.client.generate_presigned_url(
            "get_object",
            Params={"Bucket": self.bucket, "Key": key},
            ExpiresIn=self.presign_expires,
        )
