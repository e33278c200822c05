"""Streaming get/put/delete against a resolved binding.

Each call resolves the binding, composes ``join_key(base, key)`` and performs
one backend operation. Streams and options pass through untouched. A missing
object reads as ``None``; backend exceptions propagate unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from bucket_facade.keys import join_key
from bucket_facade.resolver import BindingEnvironment, get_binding

logger = logging.getLogger(__name__)


async def set_item_stream(
    binding_ref: Any,
    base: str,
    key: str,
    stream: Any,
    options: Any = None,
    *,
    environment: BindingEnvironment | Mapping[str, Any] | None = None,
) -> None:
    """Write *stream* to ``base:key``.

    Args:
        binding_ref: Binding handle or binding name
        base: Bucket base prefix (e.g., "bucket:package")
        key: Caller key within the bucket
        stream: Byte stream handed to the backend as-is
        options: Backend put options (content type, metadata), forwarded unmodified
        environment: Where binding names are looked up

    Raises:
        StorageError: If the binding cannot be resolved or validated
    """
    binding = get_binding(binding_ref, environment)
    full_key = join_key(base, key)
    logger.debug("put %s", full_key)
    await binding.put(full_key, stream, options)


async def get_item_stream(
    binding_ref: Any,
    base: str,
    key: str,
    options: Any = None,
    *,
    environment: BindingEnvironment | Mapping[str, Any] | None = None,
) -> Any | None:
    """Return the body stream stored at ``base:key``, or None if there is no object.

    Metadata is dropped; call ``binding.get`` directly when it is needed.
    """
    binding = get_binding(binding_ref, environment)
    full_key = join_key(base, key)
    logger.debug("get %s", full_key)
    result = await binding.get(full_key, options)
    if result is None:
        return None
    return result.body


async def delete_item(
    binding_ref: Any,
    base: str,
    key: str,
    *,
    environment: BindingEnvironment | Mapping[str, Any] | None = None,
) -> None:
    """Delete ``base:key``. Deleting a missing key is not an error."""
    binding = get_binding(binding_ref, environment)
    full_key = join_key(base, key)
    logger.debug("delete %s", full_key)
    await binding.delete(full_key)


__all__ = ["delete_item", "get_item_stream", "set_item_stream"]
