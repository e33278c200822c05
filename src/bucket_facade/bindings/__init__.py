"""Concrete bindings.

- ``MemoryBinding`` keeps objects in process memory
- ``MinIOBinding`` talks to an S3-compatible MinIO bucket
"""

from bucket_facade.bindings.memory import MemoryBinding
from bucket_facade.bindings.minio import MinIOBinding

__all__ = ["MemoryBinding", "MinIOBinding"]
