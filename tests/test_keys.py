"""Tests for bucket_facade.keys."""

from __future__ import annotations

import pytest

from bucket_facade.keys import KEY_SEPARATOR, join_key, relative_key


class TestJoinKey:
    def test_two_segments(self) -> None:
        assert join_key("bucket", "package") == "bucket:package"

    def test_single_segment(self) -> None:
        assert join_key("bucket") == "bucket"

    def test_no_segments(self) -> None:
        assert join_key() == ""

    def test_many_segments_keep_order(self) -> None:
        assert join_key("bucket", "package", "my-lib@1.0.0") == "bucket:package:my-lib@1.0.0"

    @pytest.mark.parametrize(
        "segments",
        [
            ("a",),
            ("a", "b"),
            ("a", "b", "c", "d"),
            ("x" * 50, "y", "z"),
        ],
    )
    def test_separator_count(self, segments: tuple[str, ...]) -> None:
        result = join_key(*segments)
        assert result.count(KEY_SEPARATOR) == len(segments) - 1
        assert result.split(KEY_SEPARATOR) == list(segments)

    def test_drops_none_and_empty(self) -> None:
        assert join_key(None, "a", "", "b", None, "c", "") == "a:b:c"

    def test_empty_base(self) -> None:
        assert join_key("", "key") == "key"

    def test_only_empty_segments(self) -> None:
        assert join_key(None, "", None) == ""

    def test_special_characters_untouched(self) -> None:
        assert join_key("base", "key/with/slashes@special") == "base:key/with/slashes@special"

    def test_deterministic(self) -> None:
        assert join_key("a", None, "b") == join_key("a", None, "b")


class TestRelativeKey:
    def test_strips_base(self) -> None:
        assert relative_key("bucket:package", "bucket:package:my-lib@1.0.0") == "my-lib@1.0.0"

    def test_keeps_nested_separators(self) -> None:
        assert relative_key("bucket", "bucket:cursor:owner") == "cursor:owner"

    def test_outside_base_unchanged(self) -> None:
        assert relative_key("bucket:package", "bucket:template:x") == "bucket:template:x"

    def test_base_must_match_whole_segment(self) -> None:
        assert relative_key("bucket:pack", "bucket:package:x") == "bucket:package:x"

    def test_empty_base(self) -> None:
        assert relative_key("", "a:b") == "a:b"
