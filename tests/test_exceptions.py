"""Tests for bucket_facade.exceptions."""

from __future__ import annotations

import pytest

from bucket_facade.exceptions import BucketFacadeError, StorageError, create_storage_error


class TestCreateStorageError:
    def test_message_format(self) -> None:
        error = create_storage_error("test-driver", "test message")
        assert isinstance(error, StorageError)
        assert str(error) == "[bucket-facade] [test-driver] test message"

    def test_keeps_driver_and_message(self) -> None:
        error = create_storage_error("minio", "connection failed")
        assert error.driver_name == "minio"
        assert error.message == "connection failed"

    def test_empty_message_keeps_trailing_space(self) -> None:
        error = create_storage_error("driver", "")
        assert str(error) == "[bucket-facade] [driver] "

    def test_special_characters_preserved(self) -> None:
        error = create_storage_error("driver", "Error: Invalid key `test@key`")
        assert "Invalid key `test@key`" in str(error)

    def test_cause_attached_not_stringified(self) -> None:
        cause = ValueError("original error")
        error = create_storage_error("driver", "wrapped error", cause=cause)
        assert error.cause is cause
        assert error.__cause__ is cause
        assert "original error" not in str(error)

    def test_no_cause_by_default(self) -> None:
        error = create_storage_error("driver", "test")
        assert error.cause is None
        assert error.__cause__ is None

    def test_is_package_error(self) -> None:
        with pytest.raises(BucketFacadeError):
            raise create_storage_error("driver", "boom")
