"""
Object store backends — S3/MinIO for deployments, in-memory for local runs.

boto3 is synchronous, so S3 calls run in a worker thread to keep the
event loop free.
"""

from __future__ import annotations

import asyncio
import hashlib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from findora.core.config import Settings
from findora.core.errors import StorageError
from findora.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class StoredObject:
    """Durable reference to an object written by an ObjectStore."""

    key: str
    content_type: str
    size_bytes: int
    sha256: str


def content_digest(data: bytes) -> str:
    """Hex SHA-256 of an object's content."""
    return hashlib.sha256(data).hexdigest()


class ObjectStore(ABC):
    """Storage contract used by the document upload service."""

    @abstractmethod
    async def put(self, key: str, data: bytes, content_type: str) -> StoredObject:
        """Store `data` under `key`, overwriting any existing object."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove `key`.  Deleting a missing key is not an error."""
        ...


class S3ObjectStore(ObjectStore):
    """S3-compatible store (AWS S3 or MinIO)."""

    def __init__(self, client: Any, bucket: str) -> None:
        self._client = client
        self._bucket = bucket

    @classmethod
    def from_settings(cls, settings: Settings) -> "S3ObjectStore":
        client = boto3.client(
            "s3",
            endpoint_url=settings.STORAGE_ENDPOINT,
            aws_access_key_id=settings.STORAGE_ACCESS_KEY,
            aws_secret_access_key=settings.STORAGE_SECRET_KEY,
            region_name=settings.STORAGE_REGION,
        )
        return cls(client, settings.STORAGE_BUCKET_NAME)

    async def put(self, key: str, data: bytes, content_type: str) -> StoredObject:
        digest = content_digest(data)
        try:
            await asyncio.to_thread(
                self._client.put_object,
                Bucket=self._bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
                Metadata={"sha256": digest},
            )
        except (BotoCoreError, ClientError) as exc:
            logger.error("Object upload failed", bucket=self._bucket, key=key, error=str(exc))
            raise StorageError() from exc

        logger.info("Object stored", bucket=self._bucket, key=key, size_bytes=len(data))
        return StoredObject(key=key, content_type=content_type, size_bytes=len(data), sha256=digest)

    async def delete(self, key: str) -> None:
        try:
            await asyncio.to_thread(self._client.delete_object, Bucket=self._bucket, Key=key)
        except (BotoCoreError, ClientError) as exc:
            logger.error("Object delete failed", bucket=self._bucket, key=key, error=str(exc))
            raise StorageError() from exc
        logger.info("Object deleted", bucket=self._bucket, key=key)


class InMemoryObjectStore(ObjectStore):
    """Process-local store for development without MinIO."""

    def __init__(self) -> None:
        self.objects: dict[str, tuple[bytes, str]] = {}

    async def put(self, key: str, data: bytes, content_type: str) -> StoredObject:
        self.objects[key] = (data, content_type)
        return StoredObject(
            key=key,
            content_type=content_type,
            size_bytes=len(data),
            sha256=content_digest(data),
        )

    async def delete(self, key: str) -> None:
        self.objects.pop(key, None)
