"""Shared fixtures for bucket-facade tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from bucket_facade.bindings.memory import MemoryBinding
from bucket_facade.protocols import ObjectMetadata, StoredObject


@pytest.fixture()
def memory_binding() -> MemoryBinding:
    return MemoryBinding()


@pytest.fixture()
def mock_binding() -> MagicMock:
    """A binding exposing exactly get/put/delete as awaitables; get misses by default."""
    binding = MagicMock(spec=["get", "put", "delete"])
    binding.get = AsyncMock(return_value=None)
    binding.put = AsyncMock(return_value=None)
    binding.delete = AsyncMock(return_value=None)
    return binding


@pytest.fixture()
def stored_object() -> StoredObject:
    return StoredObject(metadata=ObjectMetadata(key="base:key"), body=MagicMock(name="body"))
