"""bucket-facade exceptions."""

from __future__ import annotations

STORAGE_NAMESPACE = "bucket-facade"


class BucketFacadeError(Exception):
    """Base exception for all bucket-facade errors."""


class StorageError(BucketFacadeError):
    """Binding resolution or capability validation failed.

    The rendered message is ``[bucket-facade] [<driver_name>] <message>``.
    Never raised for a missing object: reads report absence as ``None``.
    """

    def __init__(self, driver_name: str, message: str, cause: BaseException | None = None) -> None:
        super().__init__(f"[{STORAGE_NAMESPACE}] [{driver_name}] {message}")
        self.driver_name = driver_name
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


def create_storage_error(driver_name: str, message: str, *, cause: BaseException | None = None) -> StorageError:
    """Build a StorageError tagged with the originating driver name."""
    return StorageError(driver_name, message, cause=cause)
