"""S3-compatible binding on the MinIO client.

The MinIO client is blocking, so every call runs in the default executor.
Bodies returned by ``get`` are the live HTTP response: read them, then
``close()`` to hand the connection back to the pool.
"""

from __future__ import annotations

import asyncio
import inspect
import io
import logging
from functools import partial
from typing import Any

from minio import Minio
from minio.error import S3Error

from bucket_facade.protocols import ObjectMetadata, StoredObject
from bucket_facade.settings import MinIOSettings
from bucket_facade.storage import read_body

logger = logging.getLogger(__name__)

_NOT_FOUND_CODES = frozenset({"NoSuchKey", "NoSuchObject"})


def _is_not_found(exc: S3Error) -> bool:
    return getattr(exc, "code", None) in _NOT_FOUND_CODES


class MinIOObjectBody:
    """Streaming body over a MinIO ``get_object`` response."""

    def __init__(self, response: Any) -> None:
        self._response = response

    def read(self, amt: int | None = None) -> bytes:
        return self._response.read(amt)

    def __iter__(self):
        return iter(self._response.stream(32 * 1024))

    def close(self) -> None:
        self._response.close()
        self._response.release_conn()


class MinIOBinding:
    """Object binding over one MinIO/S3 bucket.

    Example:
        binding = MinIOBinding(MinIOSettings(bucket="pkg-artifacts"))
        await binding.ensure_bucket()
        environment = BindingEnvironment(registry={"CR_BUCKET": binding})

    Put options: ``content_type`` and ``metadata``.
    Get options: ``range`` as ``{"offset": int, "length": int}``.
    """

    def __init__(self, settings: MinIOSettings | None = None, client: Minio | None = None) -> None:
        self._settings = settings or MinIOSettings()
        self._bucket = self._settings.bucket
        self._client = client or Minio(
            endpoint=self._settings.endpoint,
            access_key=self._settings.access_key,
            secret_key=self._settings.secret_key,
            secure=self._settings.secure,
        )

    @property
    def bucket(self) -> str:
        return self._bucket

    async def _run(self, func: Any, /, **kwargs: Any) -> Any:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, partial(func, **kwargs))

    # ── Bucket lifecycle ─────────────────────────────────────

    async def ensure_bucket(self) -> None:
        """Create the configured bucket if it does not exist."""
        exists = await self._run(self._client.bucket_exists, bucket_name=self._bucket)
        if not exists:
            await self._run(self._client.make_bucket, bucket_name=self._bucket)
            logger.info("Created MinIO bucket: %s", self._bucket)

    # ── Object operations ────────────────────────────────────

    async def get(self, key: str, options: Any = None) -> StoredObject | None:
        byte_range = (options or {}).get("range") or {}
        try:
            response = await self._run(
                self._client.get_object,
                bucket_name=self._bucket,
                object_name=key,
                offset=byte_range.get("offset", 0),
                length=byte_range.get("length", 0),
            )
        except S3Error as exc:
            if _is_not_found(exc):
                return None
            raise

        headers = response.headers
        size = headers.get("Content-Length")
        metadata = ObjectMetadata(
            key=key,
            size=int(size) if size is not None else None,
            content_type=headers.get("Content-Type"),
            etag=(headers.get("ETag") or "").strip('"') or None,
        )
        return StoredObject(metadata=metadata, body=MinIOObjectBody(response))

    async def put(self, key: str, stream: Any, options: Any = None) -> ObjectMetadata:
        options = options or {}
        if callable(getattr(stream, "read", None)) and not inspect.iscoroutinefunction(stream.read):
            data, length, part_size = stream, -1, self._settings.part_size
        else:
            payload = await read_body(stream)
            data, length, part_size = io.BytesIO(payload), len(payload), 0

        result = await self._run(
            self._client.put_object,
            bucket_name=self._bucket,
            object_name=key,
            data=data,
            length=length,
            content_type=options.get("content_type") or "application/octet-stream",
            metadata=options.get("metadata"),
            part_size=part_size,
        )
        return ObjectMetadata(
            key=key,
            content_type=options.get("content_type"),
            etag=result.etag,
            custom_metadata=dict(options.get("metadata") or {}),
        )

    async def delete(self, key: str) -> None:
        try:
            await self._run(self._client.remove_object, bucket_name=self._bucket, object_name=key)
        except S3Error as exc:
            if not _is_not_found(exc):
                raise

    async def head(self, key: str) -> ObjectMetadata | None:
        try:
            stat = await self._run(self._client.stat_object, bucket_name=self._bucket, object_name=key)
        except S3Error as exc:
            if _is_not_found(exc):
                return None
            raise
        return ObjectMetadata(
            key=key,
            size=stat.size,
            content_type=stat.content_type,
            etag=stat.etag,
            custom_metadata={str(k): str(v) for k, v in (stat.metadata or {}).items()},
        )

    async def list(self, prefix: str = "") -> list[str]:
        objects = await self._run(
            lambda **kwargs: list(self._client.list_objects(**kwargs)),
            bucket_name=self._bucket,
            prefix=prefix,
            recursive=True,
        )
        return [obj.object_name for obj in objects]


__all__ = ["MinIOBinding", "MinIOObjectBody"]
