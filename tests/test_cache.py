"""Unit tests for PreviewCache.

Tests cover:
- Cache hits (repeated previews bypass the exporter)
- Keys distinguish source, target and max_lines
- Error previews are cached like any other
- LRU eviction at max_size
- Instance isolation (separate caches do not share state)
- clear() and the size/hit/miss properties
"""

from __future__ import annotations

from typing import Any

import pytest

from json_export.cache import PreviewCache
from json_export.config import ExportConfig
from json_export.exporter import Exporter

# ---------------------------------------------------------------------------
# Spy helper
# ---------------------------------------------------------------------------


def _make_spy_exporter(exporter: Exporter) -> tuple[Exporter, list[tuple[Any, ...]]]:
    """Wrap *exporter.preview* with a spy that records call arguments.

    Returns (exporter, call_log). The spy delegates to the original
    implementation so results are unchanged.
    """
    call_log: list[tuple[Any, ...]] = []
    original_preview = exporter.preview

    def spy_preview(source: Any, target: Any, max_lines: int | None = None) -> str:
        call_log.append((source, target, max_lines))
        return original_preview(source, target, max_lines=max_lines)

    exporter.preview = spy_preview  # type: ignore[method-assign]
    return exporter, call_log


@pytest.fixture
def spy() -> tuple[Exporter, list[tuple[Any, ...]]]:
    return _make_spy_exporter(Exporter())


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestHits:
    def test_second_call_served_from_cache(self, spy: Any) -> None:
        exporter, call_log = spy
        cache = PreviewCache(exporter)
        first = cache.preview('{"a": 1}', "yaml")
        second = cache.preview('{"a": 1}', "yaml")
        assert first == second == "a: 1\n"
        assert len(call_log) == 1
        assert cache.hits == 1
        assert cache.misses == 1

    def test_target_name_and_member_share_entry(self, spy: Any) -> None:
        exporter, call_log = spy
        cache = PreviewCache(exporter)
        cache.preview("[1]", "csv")
        cache.preview("[1]", "CSV")
        assert len(call_log) == 1

    def test_bytearray_source_is_cacheable(self, spy: Any) -> None:
        exporter, call_log = spy
        cache = PreviewCache(exporter)
        cache.preview(bytearray(b"[1]"), "json")
        cache.preview(bytearray(b"[1]"), "json")
        assert len(call_log) == 1


class TestKeys:
    def test_different_targets_miss(self, spy: Any) -> None:
        exporter, call_log = spy
        cache = PreviewCache(exporter)
        cache.preview("[1]", "csv")
        cache.preview("[1]", "yaml")
        assert len(call_log) == 2

    def test_different_max_lines_miss(self, spy: Any) -> None:
        exporter, call_log = spy
        cache = PreviewCache(exporter)
        cache.preview("[1, 2, 3]", "csv", max_lines=1)
        cache.preview("[1, 2, 3]", "csv", max_lines=2)
        assert len(call_log) == 2

    def test_default_max_lines_comes_from_config(self) -> None:
        cache = PreviewCache(Exporter(ExportConfig(preview_max_lines=1)))
        assert cache.preview("[1, 2]", "csv") == "Index,Value\n... (truncated)"

    def test_error_previews_cached(self, spy: Any) -> None:
        exporter, call_log = spy
        cache = PreviewCache(exporter)
        first = cache.preview("{", "xml")
        second = cache.preview("{", "xml")
        assert first.startswith("Error: ")
        assert first == second
        assert len(call_log) == 1


class TestEviction:
    def test_lru_eviction(self, spy: Any) -> None:
        exporter, call_log = spy
        cache = PreviewCache(exporter, max_size=2)
        cache.preview("1", "json")
        cache.preview("2", "json")
        cache.preview("3", "json")  # evicts "1"
        assert cache.curr_size == 2
        cache.preview("1", "json")
        assert len(call_log) == 4


class TestIsolationAndProperties:
    def test_instances_do_not_share_state(self, spy: Any) -> None:
        exporter, call_log = spy
        PreviewCache(exporter).preview("[1]", "csv")
        PreviewCache(exporter).preview("[1]", "csv")
        assert len(call_log) == 2

    def test_properties(self) -> None:
        cache = PreviewCache(max_size=8)
        assert cache.max_size == 8
        assert cache.curr_size == 0
        cache.preview("[]", "json")
        assert cache.curr_size == 1

    def test_clear(self) -> None:
        cache = PreviewCache()
        cache.preview("[]", "json")
        cache.preview("[]", "json")
        cache.clear()
        assert cache.curr_size == 0
        assert cache.hits == 0
        assert cache.misses == 0
