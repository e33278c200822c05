"""bucket-facade: key-value object storage over environment-resolved bindings.

Resolves a bucket binding by name or handle, scopes keys under short semantic
buckets (workflows, packages, templates, cursors, downloaded-at) and streams
objects through get/put/delete.
"""

from __future__ import annotations

from bucket_facade.buckets import (
    BASE_KEY,
    BindingRule,
    BucketDescriptor,
    use_binding,
    use_bucket,
    use_cursors_bucket,
    use_downloaded_at_bucket,
    use_packages_bucket,
    use_templates_bucket,
    use_workflows_bucket,
)
from bucket_facade.exceptions import BucketFacadeError, StorageError, create_storage_error
from bucket_facade.keys import KEY_SEPARATOR, join_key
from bucket_facade.protocols import Binding, ObjectBinding, ObjectMetadata, StoredObject
from bucket_facade.resolver import BindingEnvironment, BindingResolver, get_binding, get_object_binding
from bucket_facade.storage import BucketStorage
from bucket_facade.streams import delete_item, get_item_stream, set_item_stream

__version__ = "0.1.0"

__all__ = [
    "BASE_KEY",
    "KEY_SEPARATOR",
    "Binding",
    "BindingEnvironment",
    "BindingResolver",
    "BindingRule",
    "BucketDescriptor",
    "BucketFacadeError",
    "BucketStorage",
    "ObjectBinding",
    "ObjectMetadata",
    "StorageError",
    "StoredObject",
    "create_storage_error",
    "delete_item",
    "get_binding",
    "get_item_stream",
    "get_object_binding",
    "join_key",
    "set_item_stream",
    "use_binding",
    "use_bucket",
    "use_cursors_bucket",
    "use_downloaded_at_bucket",
    "use_packages_bucket",
    "use_templates_bucket",
    "use_workflows_bucket",
]
