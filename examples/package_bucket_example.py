"""Package Bucket Example - Storing and Reading Package Tarballs.

This example demonstrates:
1. Wiring bindings into an explicit binding environment
2. Picking the binding for the current environment tag
3. Streaming a tarball into the package bucket and back
4. Tracking a cursor and a download timestamp
"""

import asyncio
import io
from datetime import UTC, datetime

from bucket_facade import (
    BindingEnvironment,
    delete_item,
    get_item_stream,
    set_item_stream,
    use_binding,
    use_cursors_bucket,
    use_downloaded_at_bucket,
    use_packages_bucket,
)
from bucket_facade.bindings import MemoryBinding
from bucket_facade.settings import configure_logging


async def example_1_stream_tarball(environment: BindingEnvironment):
    """Put, read back and delete a package tarball."""
    binding = use_binding("development", environment)
    base = use_packages_bucket.base

    await set_item_stream(binding, base, "my-lib@1.0.0", io.BytesIO(b"tarball bytes"))
    body = await get_item_stream(binding, base, "my-lib@1.0.0")
    print(f"Read back: {body.read()!r}")

    await delete_item(binding, base, "my-lib@1.0.0")
    print(f"After delete: {await get_item_stream(binding, base, 'my-lib@1.0.0')}")


async def example_2_cursor_and_timestamp(environment: BindingEnvironment):
    """Store small values through bucket views."""
    cursors = use_cursors_bucket("development", environment)
    await cursors.set_item("owner/repo", "evt_000123")

    downloaded_at = use_downloaded_at_bucket("development", environment)
    await downloaded_at.set_item("my-lib@1.0.0", datetime.now(UTC).isoformat())

    print(f"Cursor: {await cursors.get_item('owner/repo')!r}")
    print(f"Downloaded keys: {await downloaded_at.get_keys()}")


async def main():
    """Run all examples."""
    configure_logging()
    environment = BindingEnvironment(env={"CR_BUCKET": MemoryBinding(), "PROD_CR_BUCKET": MemoryBinding()})

    await example_1_stream_tarball(environment)
    await example_2_cursor_and_timestamp(environment)


if __name__ == "__main__":
    asyncio.run(main())
