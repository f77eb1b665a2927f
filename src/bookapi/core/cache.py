"""
Tag-aware read-through cache for the Book API.

Entries live in a cachetools `TTLCache` (bounded size, time-based expiry) and every
entry is filed under one or more tags. Writers never delete individual keys: they
invalidate a whole tag, which drops every read filed under it.

Usage:
    cache = TagAwareCache(maxsize=1024, ttl=3600)
    books = cache.get("books_list_all", compute=load_books, tags=[BOOKS_TAG])
    cache.invalidate_tags([BOOKS_TAG])
"""

import logging
import threading
import time
from collections import defaultdict
from typing import Any, Callable, Dict, Iterable, Set, Tuple

from cachetools import TTLCache

logger = logging.getLogger(__name__)

BOOKS_TAG = "booksCache"
AUTHORS_TAG = "authorsCache"

_MISSING = object()


class _EvictionAwareTTLCache(TTLCache):
    """TTLCache that reports keys dropped by size eviction or expiry."""

    def __init__(self, maxsize, ttl, timer, on_evict: Callable[[str], None]):
        super().__init__(maxsize=maxsize, ttl=ttl, timer=timer)
        self._on_evict = on_evict

    def popitem(self):
        key, value = super().popitem()
        self._on_evict(key)
        return key, value

    def expire(self, time=None):
        expired = super().expire(time)
        for key, _ in expired:
            self._on_evict(key)
        return expired


class _KeyLock:
    """Per-key lock that stays registered while any caller still uses it."""

    def __init__(self):
        self.lock = threading.Lock()
        self.users = 0


class TagAwareCache:
    """
    Key/value cache with bulk invalidation by tag.

    The tag index only ever lists keys present in the store, so it is bounded by
    `maxsize` like the store itself.

    Attributes:
        maxsize (int): Maximum number of entries before least recently used eviction.
        ttl (float): Seconds an entry stays valid.
    """

    def __init__(self, maxsize: int = 1024, ttl: float = 3600, timer: Callable[[], float] = time.monotonic):
        self.maxsize = maxsize
        self.ttl = ttl
        self._store = _EvictionAwareTTLCache(maxsize, ttl, timer, on_evict=self._untag)
        self._tags: Dict[str, Set[str]] = defaultdict(set)
        self._key_tags: Dict[str, Tuple[str, ...]] = {}
        # Bumped on every invalidation; a computation started under an older
        # version is returned to its caller but never stored.
        self._tag_versions: Dict[str, int] = defaultdict(int)
        self._lock = threading.Lock()
        self._key_locks: Dict[str, _KeyLock] = {}

    def _untag(self, key: str) -> None:
        # Called with self._lock held.
        for tag in self._key_tags.pop(key, ()):
            keys = self._tags.get(tag)
            if keys is not None:
                keys.discard(key)
                if not keys:
                    del self._tags[tag]

    def get(self, key: str, compute: Callable[[], Any], tags: Iterable[str] = ()) -> Any:
        """
        Returns the cached value for `key`, computing and storing it on a miss.

        Misses on the same key are serialised: while one caller computes, the others
        wait and then read the stored value. Exceptions raised by `compute` propagate
        and nothing is stored.

        Args:
            key (str): Cache key.
            compute (Callable[[], Any]): Produces the value on a miss.
            tags (Iterable[str]): Tags the new entry is filed under.

        Returns:
            Any: The cached or freshly computed value.
        """
        tags = tuple(tags)
        with self._lock:
            value = self._store.get(key, _MISSING)
            if value is not _MISSING:
                logger.debug(f"Cache hit: {key}")
                return value
            key_lock = self._key_locks.get(key)
            if key_lock is None:
                key_lock = self._key_locks[key] = _KeyLock()
            key_lock.users += 1

        try:
            with key_lock.lock:
                with self._lock:
                    value = self._store.get(key, _MISSING)
                    if value is not _MISSING:
                        logger.debug(f"Cache hit after wait: {key}")
                        return value
                    versions = {tag: self._tag_versions[tag] for tag in tags}

                logger.debug(f"Cache miss: {key}")
                value = compute()
                with self._lock:
                    if all(self._tag_versions[tag] == version for tag, version in versions.items()):
                        self._untag(key)
                        self._store[key] = value
                        if key in self._store:
                            self._key_tags[key] = tags
                            for tag in tags:
                                self._tags[tag].add(key)
                    else:
                        logger.debug(f"Tags of {key} invalidated during computation, result not stored")
                return value
        finally:
            with self._lock:
                key_lock.users -= 1
                if key_lock.users == 0:
                    del self._key_locks[key]

    def invalidate_tags(self, tags: Iterable[str]) -> int:
        """
        Drops every entry filed under any of the given tags.

        Args:
            tags (Iterable[str]): Tags to invalidate.

        Returns:
            int: Number of live entries removed.
        """
        tags = list(tags)
        removed = 0
        with self._lock:
            for tag in tags:
                self._tag_versions[tag] += 1
                for key in list(self._tags.get(tag, ())):
                    self._untag(key)
                    if self._store.pop(key, _MISSING) is not _MISSING:
                        removed += 1
        logger.info(f"Cache tags {tags} invalidated ({removed} entries dropped)")
        return removed

    def keys_for_tag(self, tag: str) -> Set[str]:
        """Snapshot of the keys currently filed under `tag`."""
        with self._lock:
            return set(self._tags.get(tag, ()))

    def clear(self) -> None:
        """Empties the cache and its tag index."""
        with self._lock:
            self._store.clear()
            self._tags.clear()
            self._key_tags.clear()
            for tag in list(self._tag_versions):
                self._tag_versions[tag] += 1

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._store

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)
