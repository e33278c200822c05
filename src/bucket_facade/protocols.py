"""Binding protocols and shared object models.

A binding is any object exposing awaitable ``get``, ``put`` and ``delete``;
classes satisfy these protocols structurally, no inheritance needed. The
resolver re-checks the three capabilities at runtime because binding
references may arrive untyped (by name, from an environment mapping).
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, Field

REQUIRED_CAPABILITIES: tuple[str, ...] = ("get", "put", "delete")


class ObjectMetadata(BaseModel):
    """Metadata reported by a binding for one stored object."""

    key: str
    size: int | None = None
    content_type: str | None = None
    etag: str | None = None
    custom_metadata: dict[str, str] = Field(default_factory=dict)


class StoredObject(BaseModel):
    """A hit returned by ``Binding.get``: metadata plus a readable body."""

    metadata: ObjectMetadata
    body: Any


@runtime_checkable
class Binding(Protocol):
    """Minimal key-value binding: the capability set every binding must offer."""

    async def get(self, key: str, options: Any = None) -> StoredObject | None: ...

    async def put(self, key: str, stream: Any, options: Any = None) -> Any: ...

    async def delete(self, key: str) -> None: ...


@runtime_checkable
class ObjectBinding(Binding, Protocol):
    """Object-storage bucket binding, with metadata lookup and prefix listing."""

    async def head(self, key: str) -> ObjectMetadata | None: ...

    async def list(self, prefix: str = "") -> list[str]: ...


__all__ = ["REQUIRED_CAPABILITIES", "Binding", "ObjectBinding", "ObjectMetadata", "StoredObject"]
