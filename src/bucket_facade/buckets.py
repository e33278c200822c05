"""Bucket registry: named key prefixes over one environment-selected binding.

Every bucket family hangs off the root ``bucket`` prefix and shares its
binding-selection rule, so there is one physical binding per family:

    use_bucket               -> bucket
    use_workflows_bucket     -> bucket:workflow
    use_packages_bucket      -> bucket:package
    use_templates_bucket     -> bucket:template
    use_cursors_bucket       -> bucket:cursor
    use_downloaded_at_bucket -> bucket:downloaded-at

Descriptors are created at import time and are immutable. Calling one with an
environment tag and a binding environment yields a ``BucketStorage`` view:

    packages = use_packages_bucket("production", environment)
    await packages.set_item_stream("my-lib@1.0.0", tarball)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from bucket_facade.keys import join_key
from bucket_facade.resolver import BindingEnvironment, BindingResolver
from bucket_facade.settings import BucketSettings
from bucket_facade.storage import BucketStorage

if TYPE_CHECKING:
    from bucket_facade.protocols import ObjectBinding

logger = logging.getLogger(__name__)

BASE_KEY = "bucket"


class BindingRule(BaseModel):
    """Two-tier binding-name selection: production vs everything else."""

    model_config = ConfigDict(frozen=True)

    production_name: str = "PROD_CR_BUCKET"
    development_name: str = "CR_BUCKET"
    production_marker: str = "production"

    @classmethod
    def from_settings(cls, settings: BucketSettings | None = None) -> BindingRule:
        settings = settings or BucketSettings()
        return cls(
            production_name=settings.production_binding,
            development_name=settings.development_binding,
            production_marker=settings.production_marker,
        )

    def pick_binding_name(self, environment_tag: str) -> str:
        """Return the production binding name only when the tag is the production marker."""
        if environment_tag == self.production_marker:
            return self.production_name
        return self.development_name


class BucketDescriptor(BaseModel):
    """A named storage domain: short key, fully composed base, binding rule."""

    model_config = ConfigDict(frozen=True)

    key: str
    base: str
    binding_rule: BindingRule = BindingRule()

    def child(self, key: str) -> BucketDescriptor:
        """Declare a nested bucket extending this base and sharing its binding rule."""
        return BucketDescriptor(key=key, base=join_key(self.base, key), binding_rule=self.binding_rule)

    def pick_binding_name(self, environment_tag: str) -> str:
        return self.binding_rule.pick_binding_name(environment_tag)

    def resolve_binding(
        self,
        environment_tag: str | None = None,
        environment: BindingEnvironment | Mapping[str, Any] | None = None,
    ) -> ObjectBinding:
        """Resolve this bucket's binding for *environment_tag* (``BUCKET_ENVIRONMENT`` by default)."""
        if environment_tag is None:
            environment_tag = BucketSettings().environment
        binding_name = self.pick_binding_name(environment_tag)
        logger.debug("Bucket %s uses binding %s (environment %s)", self.base, binding_name, environment_tag)
        return BindingResolver(environment).resolve_object_binding(binding_name)

    def __call__(
        self,
        environment_tag: str | None = None,
        environment: BindingEnvironment | Mapping[str, Any] | None = None,
    ) -> BucketStorage:
        return BucketStorage(self.resolve_binding(environment_tag, environment), self.base)


use_bucket = BucketDescriptor(key=BASE_KEY, base=BASE_KEY, binding_rule=BindingRule.from_settings())
use_workflows_bucket = use_bucket.child("workflow")
use_packages_bucket = use_bucket.child("package")
use_templates_bucket = use_bucket.child("template")
use_cursors_bucket = use_bucket.child("cursor")
use_downloaded_at_bucket = use_bucket.child("downloaded-at")


def use_binding(
    environment_tag: str | None = None,
    environment: BindingEnvironment | Mapping[str, Any] | None = None,
) -> ObjectBinding:
    """Return the root bucket binding for the given environment tag."""
    return use_bucket.resolve_binding(environment_tag, environment)


__all__ = [
    "BASE_KEY",
    "BindingRule",
    "BucketDescriptor",
    "use_binding",
    "use_bucket",
    "use_cursors_bucket",
    "use_downloaded_at_bucket",
    "use_packages_bucket",
    "use_templates_bucket",
    "use_workflows_bucket",
]
