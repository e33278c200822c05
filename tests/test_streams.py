"""Tests for bucket_facade.streams."""

from __future__ import annotations

import io
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from bucket_facade.bindings.memory import MemoryBinding
from bucket_facade.exceptions import StorageError
from bucket_facade.protocols import StoredObject
from bucket_facade.resolver import BindingEnvironment
from bucket_facade.streams import delete_item, get_item_stream, set_item_stream

# ──── set_item_stream ────────────────────────────────────────


class TestSetItemStream:
    async def test_puts_composed_key_without_options(self, mock_binding: MagicMock) -> None:
        stream = io.BytesIO(b"data")
        await set_item_stream(mock_binding, "base", "key", stream)
        mock_binding.put.assert_awaited_once_with("base:key", stream, None)

    async def test_forwards_options_unmodified(self, mock_binding: MagicMock) -> None:
        stream = io.BytesIO(b"{}")
        options = {"content_type": "application/json", "metadata": {"sha": "abc"}}
        await set_item_stream(mock_binding, "base", "key", stream, options)
        mock_binding.put.assert_awaited_once_with("base:key", stream, options)
        assert mock_binding.put.await_args.args[2] is options

    async def test_empty_base(self, mock_binding: MagicMock) -> None:
        await set_item_stream(mock_binding, "", "key", io.BytesIO())
        mock_binding.put.assert_awaited_once()
        assert mock_binding.put.await_args.args[0] == "key"

    async def test_special_characters_in_key(self, mock_binding: MagicMock) -> None:
        await set_item_stream(mock_binding, "base", "key/with/slashes@special", io.BytesIO())
        assert mock_binding.put.await_args.args[0] == "base:key/with/slashes@special"

    async def test_resolves_named_binding(self, mock_binding: MagicMock) -> None:
        environment = BindingEnvironment(env={"CR_BUCKET": mock_binding})
        await set_item_stream("CR_BUCKET", "bucket:template", "t1", b"x", environment=environment)
        mock_binding.put.assert_awaited_once_with("bucket:template:t1", b"x", None)

    async def test_backend_error_propagates_unwrapped(self, mock_binding: MagicMock) -> None:
        mock_binding.put.side_effect = ConnectionError("network down")
        with pytest.raises(ConnectionError, match="network down"):
            await set_item_stream(mock_binding, "base", "key", io.BytesIO())

    async def test_invalid_binding_raises_storage_error(self) -> None:
        with pytest.raises(StorageError, match="`put` key is missing"):
            await set_item_stream(SimpleNamespace(get=AsyncMock()), "base", "key", io.BytesIO())


# ──── get_item_stream ────────────────────────────────────────


class TestGetItemStream:
    async def test_returns_body(self, mock_binding: MagicMock, stored_object: StoredObject) -> None:
        mock_binding.get.return_value = stored_object
        result = await get_item_stream(mock_binding, "base", "key")
        mock_binding.get.assert_awaited_once_with("base:key", None)
        assert result is stored_object.body

    async def test_absent_when_backend_has_no_object(self, mock_binding: MagicMock) -> None:
        mock_binding.get.return_value = None
        assert await get_item_stream(mock_binding, "base", "key") is None

    async def test_forwards_range_options(self, mock_binding: MagicMock, stored_object: StoredObject) -> None:
        mock_binding.get.return_value = stored_object
        options = {"range": {"offset": 0, "length": 100}}
        await get_item_stream(mock_binding, "base", "key", options)
        mock_binding.get.assert_awaited_once_with("base:key", options)

    async def test_unknown_binding_name(self) -> None:
        with pytest.raises(StorageError, match="MISSING"):
            await get_item_stream("MISSING", "base", "key", environment={})

    async def test_backend_error_propagates_unwrapped(self, mock_binding: MagicMock) -> None:
        error = RuntimeError("backend fault")
        mock_binding.get.side_effect = error
        with pytest.raises(RuntimeError) as exc_info:
            await get_item_stream(mock_binding, "base", "key")
        assert exc_info.value is error


# ──── delete_item ────────────────────────────────────────────


class TestDeleteItem:
    async def test_deletes_composed_key(self, mock_binding: MagicMock) -> None:
        await delete_item(mock_binding, "bucket:cursor", "owner/repo")
        mock_binding.delete.assert_awaited_once_with("bucket:cursor:owner/repo")

    async def test_missing_key_is_not_an_error(self, memory_binding: MemoryBinding) -> None:
        await delete_item(memory_binding, "base", "never-written")
        assert len(memory_binding) == 0

    async def test_invalid_binding(self) -> None:
        with pytest.raises(StorageError, match="`delete` key is missing"):
            await delete_item(SimpleNamespace(get=AsyncMock(), put=AsyncMock()), "base", "key")


# ──── End-to-end ─────────────────────────────────────────────


class TestPackageRoundTrip:
    async def test_set_get_delete(self, memory_binding: MemoryBinding) -> None:
        tarball = b"\x1f\x8b package tarball bytes"
        base = "bucket:package"

        await set_item_stream(memory_binding, base, "my-lib@1.0.0", io.BytesIO(tarball))
        assert memory_binding.keys() == ["bucket:package:my-lib@1.0.0"]

        body = await get_item_stream(memory_binding, base, "my-lib@1.0.0")
        assert body is not None
        assert body.read() == tarball

        await delete_item(memory_binding, base, "my-lib@1.0.0")
        assert await get_item_stream(memory_binding, base, "my-lib@1.0.0") is None
