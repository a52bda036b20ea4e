"""
Injectable result cache for pure engine calls.

Every engine operation is a pure function of its inputs, so results can be
memoized by a hash of those inputs without changing observable behavior. The
cache is never global: callers create a ResultCache and pass it in.

Usage:
    from atsift.utils.cache import ResultCache

    cache = ResultCache(max_entries=128)
    analysis = analyze_resume_keywords(resume, cache=cache)
"""

import hashlib
import json
import threading
from collections import OrderedDict
from typing import Any, Callable, TypeVar

T = TypeVar("T")


class ResultCache:
    """
    Bounded LRU cache keyed by a SHA-256 hash of an operation and its inputs.

    Thread-safe: a lock guards the entry table so one cache can be shared by
    concurrent callers. Computation happens outside the lock; two callers
    racing on the same key both compute and the later result is stored.

    Attributes:
        max_entries: Maximum number of cached results before eviction
        hits: Number of lookups served from the cache
        misses: Number of lookups that required computation
    """

    def __init__(self, max_entries: int = 256):
        if max_entries < 1:
            raise ValueError(f"max_entries must be positive, got: {max_entries}")
        self.max_entries = max_entries
        self.hits = 0
        self.misses = 0
        self._entries: "OrderedDict[str, Any]" = OrderedDict()
        self._lock = threading.Lock()

    @staticmethod
    def make_key(operation: str, *inputs: Any) -> str:
        """
        Build a cache key from an operation name and JSON-compatible inputs.

        Args:
            operation: Operation identifier (e.g., "analyze_resume_keywords")
            *inputs: JSON-serializable inputs (dicts are hashed with sorted keys)

        Returns:
            Hex digest identifying the call
        """
        canonical = json.dumps([operation, *inputs], sort_keys=True, default=str)
        return hashlib.sha256(canonical.encode("utf-8")).hexdigest()

    def get_or_compute(self, key: str, compute: Callable[[], T]) -> T:
        """
        Return the cached value for key, computing and storing it on a miss.

        Args:
            key: Key from make_key()
            compute: Zero-argument callable producing the value

        Returns:
            Cached or freshly computed value
        """
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
                self.hits += 1
                return self._entries[key]
            self.misses += 1

        value = compute()

        with self._lock:
            self._entries[key] = value
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)
        return value

    def clear(self) -> None:
        """Drop all entries and reset statistics."""
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
