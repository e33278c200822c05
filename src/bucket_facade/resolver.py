"""Binding resolution and capability validation.

A binding reference is either a concrete handle or a binding name. Names are
looked up in an explicit ``BindingEnvironment`` by two ordered strategies:

1. ``GlobalLookup`` - the flat registry keyed by the exact binding name
2. ``EnvLookup`` - the nested ``__env__`` mapping

The first strategy that yields a value wins; sources are never merged. The
resolved handle must expose callable ``get``, ``put`` and ``delete``.

Example:
    environment = BindingEnvironment.from_scope({"__env__": {"CR_BUCKET": bucket}})
    binding = get_binding("CR_BUCKET", environment)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from bucket_facade.exceptions import create_storage_error
from bucket_facade.protocols import REQUIRED_CAPABILITIES

if TYPE_CHECKING:
    from bucket_facade.protocols import Binding, ObjectBinding

logger = logging.getLogger(__name__)

DRIVER_NAME = "binding"
DEFAULT_BINDING_NAME = "BUCKET"
ENV_KEY = "__env__"

# Name used in error messages when the reference was a handle, not a name.
DIRECT_BINDING_NAME = "[binding]"


class BindingEnvironment:
    """Explicit handle on the places bindings can be looked up by name."""

    def __init__(
        self,
        registry: Mapping[str, Any] | None = None,
        env: Mapping[str, Any] | None = None,
    ) -> None:
        self.registry: Mapping[str, Any] = registry or {}
        self.env: Mapping[str, Any] = env or {}

    @classmethod
    def from_scope(cls, scope: Mapping[str, Any]) -> BindingEnvironment:
        """Build an environment from a global-scope-shaped mapping with an optional ``__env__`` entry."""
        env = scope.get(ENV_KEY) or {}
        registry = {name: value for name, value in scope.items() if name != ENV_KEY}
        return cls(registry=registry, env=env)

    @classmethod
    def coerce(cls, environment: BindingEnvironment | Mapping[str, Any] | None) -> BindingEnvironment:
        if environment is None:
            return cls()
        if isinstance(environment, BindingEnvironment):
            return environment
        return cls.from_scope(environment)

    def __repr__(self) -> str:
        return f"BindingEnvironment(registry={sorted(self.registry)!r}, env={sorted(self.env)!r})"


class BindingLookup(Protocol):
    """One named source a binding name can be found in."""

    name: str

    def find(self, binding_name: str, environment: BindingEnvironment) -> Any | None: ...


class GlobalLookup:
    name = "registry"

    def find(self, binding_name: str, environment: BindingEnvironment) -> Any | None:
        return environment.registry.get(binding_name)


class EnvLookup:
    name = ENV_KEY

    def find(self, binding_name: str, environment: BindingEnvironment) -> Any | None:
        return environment.env.get(binding_name)


class BindingResolver:
    """Turns binding references into validated binding handles."""

    lookups: tuple[BindingLookup, ...] = (GlobalLookup(), EnvLookup())

    def __init__(
        self,
        environment: BindingEnvironment | Mapping[str, Any] | None = None,
        driver_name: str = DRIVER_NAME,
    ) -> None:
        self.environment = BindingEnvironment.coerce(environment)
        self.driver_name = driver_name

    def lookup(self, binding_name: str) -> Any | None:
        """Return the first value found for *binding_name*, or None."""
        for strategy in self.lookups:
            found = strategy.find(binding_name, self.environment)
            if found is not None:
                logger.debug("Binding %s found via %s lookup", binding_name, strategy.name)
                return found
        return None

    def resolve(self, ref: Any) -> Binding:
        """Resolve *ref* to a binding exposing ``get``, ``put`` and ``delete``.

        Args:
            ref: A binding handle (returned as-is after validation) or a binding name

        Returns:
            The validated binding handle

        Raises:
            StorageError: If the name resolves to nothing or a capability is missing
        """
        binding_name = DIRECT_BINDING_NAME
        binding = ref
        if isinstance(ref, str):
            binding_name = ref
            binding = self.lookup(ref)

        if binding is None:
            logger.warning("Binding %s could not be resolved", binding_name)
            raise create_storage_error(self.driver_name, f"Invalid binding `{binding_name}`: not found")

        for capability in REQUIRED_CAPABILITIES:
            if not callable(getattr(binding, capability, None)):
                logger.warning("Binding %s rejected: missing %s", binding_name, capability)
                raise create_storage_error(
                    self.driver_name,
                    f"Invalid binding `{binding_name}`: `{capability}` key is missing",
                )

        return binding

    def resolve_object_binding(self, ref: Any = DEFAULT_BINDING_NAME) -> ObjectBinding:
        """Resolve an object-storage bucket binding; ``BUCKET`` unless named otherwise."""
        return self.resolve(ref)  # type: ignore[return-value]


def get_binding(ref: Any, environment: BindingEnvironment | Mapping[str, Any] | None = None) -> Binding:
    """Resolve *ref* against *environment* (see ``BindingResolver.resolve``)."""
    return BindingResolver(environment).resolve(ref)


def get_object_binding(
    ref: Any = DEFAULT_BINDING_NAME,
    environment: BindingEnvironment | Mapping[str, Any] | None = None,
) -> ObjectBinding:
    """Resolve an object-storage bucket binding, ``BUCKET`` by default."""
    return BindingResolver(environment).resolve_object_binding(ref)


__all__ = [
    "DEFAULT_BINDING_NAME",
    "DRIVER_NAME",
    "BindingEnvironment",
    "BindingLookup",
    "BindingResolver",
    "EnvLookup",
    "GlobalLookup",
    "get_binding",
    "get_object_binding",
]
