"""Colon-joined storage key composition.

Keys are hierarchical: a bucket base such as ``bucket:package`` followed by
the caller's key, e.g. ``bucket:package:my-lib@1.0.0``.
"""

from __future__ import annotations

KEY_SEPARATOR = ":"


def join_key(*segments: str | None) -> str:
    """Join key segments with ``:``, dropping ``None`` and empty segments.

    Example:
        >>> join_key("bucket", None, "package", "", "my-lib@1.0.0")
        'bucket:package:my-lib@1.0.0'
    """
    return KEY_SEPARATOR.join(segment for segment in segments if segment)


def relative_key(base: str, key: str) -> str:
    """Strip ``base:`` from the front of *key*; keys outside *base* are returned unchanged."""
    if not base:
        return key
    prefix = base + KEY_SEPARATOR
    if key.startswith(prefix):
        return key[len(prefix) :]
    return key


__all__ = ["KEY_SEPARATOR", "join_key", "relative_key"]
