"""In-process binding backed by a dict, for local development and tests."""

from __future__ import annotations

import hashlib
import io
from typing import Any

from bucket_facade.protocols import ObjectMetadata, StoredObject
from bucket_facade.storage import read_body


class MemoryBinding:
    """Dict-backed object binding implementing get/put/delete/head/list.

    Put options: ``content_type`` and ``metadata`` (custom string metadata).
    Get options: ``range`` as ``{"offset": int, "length": int}``.
    """

    def __init__(self) -> None:
        self._objects: dict[str, tuple[bytes, ObjectMetadata]] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._objects

    def __len__(self) -> int:
        return len(self._objects)

    def keys(self) -> list[str]:
        return list(self._objects)

    async def put(self, key: str, stream: Any, options: Any = None) -> ObjectMetadata:
        options = options or {}
        data = await read_body(stream)
        metadata = ObjectMetadata(
            key=key,
            size=len(data),
            content_type=options.get("content_type"),
            etag=hashlib.md5(data, usedforsecurity=False).hexdigest(),
            custom_metadata=dict(options.get("metadata") or {}),
        )
        self._objects[key] = (data, metadata)
        return metadata

    async def get(self, key: str, options: Any = None) -> StoredObject | None:
        stored = self._objects.get(key)
        if stored is None:
            return None
        data, metadata = stored

        byte_range = (options or {}).get("range")
        if byte_range:
            offset = byte_range.get("offset", 0)
            length = byte_range.get("length")
            data = data[offset:] if length is None else data[offset : offset + length]

        return StoredObject(metadata=metadata, body=io.BytesIO(data))

    async def delete(self, key: str) -> None:
        self._objects.pop(key, None)

    async def head(self, key: str) -> ObjectMetadata | None:
        stored = self._objects.get(key)
        return stored[1] if stored else None

    async def list(self, prefix: str = "") -> list[str]:
        return sorted(key for key in self._objects if key.startswith(prefix))


__all__ = ["MemoryBinding"]
