"""Key-value view of one bucket over a resolved binding.

``BucketStorage`` scopes every key under its base and adds convenience
reads and writes (whole values, existence checks, key listing) on top of the
stream operations.
"""

from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING, Any

from bucket_facade.exceptions import create_storage_error
from bucket_facade.keys import KEY_SEPARATOR, join_key, relative_key
from bucket_facade.streams import delete_item, get_item_stream, set_item_stream

if TYPE_CHECKING:
    from bucket_facade.protocols import Binding

logger = logging.getLogger(__name__)


async def read_body(body: Any) -> bytes:
    """Read a body stream to the end: file-like, async iterable, or iterable of chunks."""
    if isinstance(body, (bytes, bytearray)):
        return bytes(body)
    if hasattr(body, "read"):
        data = body.read()
        if hasattr(data, "__await__"):
            data = await data
        return bytes(data)
    if hasattr(body, "__aiter__"):
        return b"".join([bytes(chunk) async for chunk in body])
    return b"".join(bytes(chunk) for chunk in body)


async def close_body(body: Any) -> None:
    """Close a body stream if it can be closed, releasing any held connection."""
    close = getattr(body, "close", None)
    if not callable(close):
        return
    result = close()
    if hasattr(result, "__await__"):
        await result


class BucketStorage:
    """A bucket's key space on one binding.

    Example:
        storage = BucketStorage(binding, "bucket:cursor")
        await storage.set_item("owner/repo", "2024-06-01T00:00:00Z")
        cursor = await storage.get_item("owner/repo")
    """

    def __init__(self, binding: Binding, base: str) -> None:
        self.binding = binding
        self.base = base

    def __repr__(self) -> str:
        return f"BucketStorage(base={self.base!r})"

    async def get_item_stream(self, key: str, options: Any = None) -> Any | None:
        return await get_item_stream(self.binding, self.base, key, options)

    async def set_item_stream(self, key: str, stream: Any, options: Any = None) -> None:
        await set_item_stream(self.binding, self.base, key, stream, options)

    async def remove_item(self, key: str) -> None:
        await delete_item(self.binding, self.base, key)

    async def get_item(self, key: str, options: Any = None) -> bytes | None:
        """Return the whole value stored at *key*, or None if absent."""
        body = await self.get_item_stream(key, options)
        if body is None:
            return None
        try:
            return await read_body(body)
        finally:
            await close_body(body)

    async def set_item(self, key: str, value: bytes | str, options: Any = None) -> None:
        """Store *value* at *key*; strings are UTF-8 encoded."""
        data = value.encode("utf-8") if isinstance(value, str) else value
        await self.set_item_stream(key, io.BytesIO(data), options)

    async def has_item(self, key: str) -> bool:
        full_key = join_key(self.base, key)
        head = getattr(self.binding, "head", None)
        if callable(head):
            return await head(full_key) is not None
        result = await self.binding.get(full_key)
        if result is None:
            return False
        await close_body(result.body)
        return True

    async def get_keys(self) -> list[str]:
        """List keys in this bucket, relative to its base.

        Raises:
            StorageError: If the binding has no ``list`` capability
        """
        list_keys = getattr(self.binding, "list", None)
        if not callable(list_keys):
            raise create_storage_error("bucket", f"Cannot list `{self.base}`: `list` key is missing")
        prefix = f"{self.base}{KEY_SEPARATOR}" if self.base else ""
        keys = await list_keys(prefix)
        logger.debug("Listed %d keys under %s", len(keys), self.base)
        return [relative_key(self.base, key) for key in keys]


__all__ = ["BucketStorage", "close_body", "read_body"]
