"""PreviewCache: LRU-backed memo in front of ``Exporter.preview``.

The export engine itself never memoizes. A presentation layer that
re-renders a preview on every keystroke can opt in to this cache so that
flipping back and forth between targets, or re-rendering unchanged input,
does not re-run a conversion.

Each ``PreviewCache`` instance owns its own ``LRUCache``; there is no
class-level shared state. Eviction is silent.

Example::

    from json_export.cache import PreviewCache

    cache = PreviewCache(max_size=64)
    cache.preview('{"a": 1}', "yaml")   # converts
    cache.preview('{"a": 1}', "yaml")   # served from memory
"""

from __future__ import annotations

from cachetools import LRUCache

from json_export.exporter import Exporter
from json_export.targets import ConversionTarget
from json_export.values import JsonSource

__all__ = ["PreviewCache"]

_CacheKey = tuple[JsonSource, ConversionTarget, int]


class PreviewCache:
    """LRU cache of preview strings keyed on ``(source, target, max_lines)``.

    Args:
        exporter: The exporter that produces previews on a miss. Defaults to
            ``Exporter()``.
        max_size: Maximum number of previews held. Defaults to 128.
    """

    def __init__(self, exporter: Exporter | None = None, max_size: int = 128) -> None:
        self._exporter: Exporter = exporter if exporter is not None else Exporter()
        self._cache: LRUCache[_CacheKey, str] = LRUCache(maxsize=max_size)
        self._hits = 0
        self._misses = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    @property
    def hits(self) -> int:
        return self._hits

    @property
    def misses(self) -> int:
        return self._misses

    # ------------------------------------------------------------------
    # Preview surface
    # ------------------------------------------------------------------

    def preview(
        self,
        source: JsonSource,
        target: ConversionTarget | str,
        max_lines: int | None = None,
    ) -> str:
        """Return ``Exporter.preview(source, target, max_lines)``, memoized.

        Error previews are cached too: the same invalid text always yields
        the same message.
        """
        resolved = ConversionTarget.parse(target)
        limit = (
            max_lines
            if max_lines is not None
            else self._exporter.config.preview_max_lines
        )
        # bytearray is unhashable; key on an immutable copy.
        key_source = bytes(source) if isinstance(source, bytearray) else source
        key: _CacheKey = (key_source, resolved, limit)

        cached = self._cache.get(key)
        if cached is not None:
            self._hits += 1
            return cached

        self._misses += 1
        text = self._exporter.preview(source, resolved, max_lines=limit)
        self._cache[key] = text
        return text

    def clear(self) -> None:
        """Drop every cached preview and reset the hit/miss counters."""
        self._cache.clear()
        self._hits = 0
        self._misses = 0
