"""Expiring key-value cache with optional persistence.

Entries carry their own expiry and are evicted lazily on access. A sweep
thread can evict them eagerly, and the whole store can be mirrored to a
PersistenceAdapter as a JSON snapshot.
"""

from __future__ import annotations

import json
import logging
import math
import threading
import time
import weakref
from collections.abc import Hashable
from typing import Any, Generic, TypeVar

from banjo_utils.adapters.base import PersistenceAdapter
from banjo_utils.duration import parse_duration
from banjo_utils.result import ResultType, err, from_throwable, ok
from banjo_utils.types import CacheEntry, OptionalDuration

T = TypeVar("T")

log = logging.getLogger(__name__)

DEFAULT_TTL = "5m"
DEFAULT_KEY = "banjo-cache"

_loads = from_throwable(json.loads)


def _now_ms() -> int:
    return int(time.time() * 1000)


def _parse_optional_duration(duration: OptionalDuration) -> int | None:
    """Milliseconds, or None when the duration is switched off with False."""
    if duration is False:
        return None
    return parse_duration(duration)


def _parse_ttl(ttl: OptionalDuration) -> int | None:
    ttl_ms = _parse_optional_duration(ttl)
    if ttl_ms is not None and ttl_ms < 0:
        raise ValueError("ttl must be non-negative")
    return ttl_ms


def _decode_snapshot(raw: str) -> ResultType[dict[Hashable, CacheEntry[Any]], str]:
    """Decode a snapshot into a store, rejecting anything of the wrong shape."""
    parsed = _loads(raw)
    if parsed.is_err():
        return err(f"invalid JSON: {parsed.error}")

    pairs = parsed.data
    if not isinstance(pairs, list):
        return err("snapshot is not a list")

    store: dict[Hashable, CacheEntry[Any]] = {}
    for pair in pairs:
        if not isinstance(pair, list) or len(pair) != 2:
            return err(f"malformed pair: {pair!r}")
        key, entry = pair
        if not isinstance(key, str) or not isinstance(entry, dict):
            return err(f"malformed pair: {pair!r}")
        if "data" not in entry:
            return err(f"entry {key!r} has no data")
        expires_at = entry.get("expires_at")
        if expires_at is not None and (
            isinstance(expires_at, bool)
            or not isinstance(expires_at, int | float)
            or not math.isfinite(expires_at)
        ):
            return err(f"entry {key!r} has invalid expires_at")
        store[key] = CacheEntry(
            data=entry["data"],
            expires_at=int(expires_at) if expires_at is not None else None,
        )
    return ok(store)


def _encode_snapshot(store: dict[Hashable, CacheEntry[Any]]) -> str:
    """Encode string-keyed entries as a JSON list of [key, entry] pairs."""
    return json.dumps(
        [
            [key, {"data": entry.data, "expires_at": entry.expires_at}]
            for key, entry in store.items()
            if isinstance(key, str)
        ]
    )


class ExpiringCache(Generic[T]):
    """In-memory cache with per-entry TTL.

    Keys can be any hashable; only string keys are written to the
    persisted snapshot. All store access goes through one re-entrant lock,
    so the sweep thread and direct calls never interleave a read-evict-write.
    """

    def __init__(
        self,
        *,
        ttl: OptionalDuration = DEFAULT_TTL,
        persistent: bool = False,
        key: str = DEFAULT_KEY,
        clean_interval: OptionalDuration = False,
        adapter: PersistenceAdapter | None = None,
    ) -> None:
        self._ttl = _parse_ttl(ttl)
        self._key = key
        self._adapter = adapter
        self._persistent = persistent
        if persistent and adapter is None:
            log.debug("No persistence adapter for cache %r, running in memory", key)
        self._lock = threading.RLock()
        self._store: dict[Hashable, CacheEntry[T]] = self._hydrate()

        self._stop_event = threading.Event()
        self._sweeper: threading.Thread | None = None
        interval = _parse_optional_duration(clean_interval)
        if interval is not None and interval > 0:
            self._sweeper = threading.Thread(
                target=_sweep_loop,
                args=(weakref.ref(self), self._stop_event, interval, key),
                name=f"banjo-cache-sweep:{key}",
                daemon=True,
            )
            self._sweeper.start()
            # Dropping the cache stops its sweep
            weakref.finalize(self, self._stop_event.set)

    def __enter__(self) -> ExpiringCache[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop_cleanup()

    @property
    def has_active_cleanup(self) -> bool:
        """True while the background sweep is running."""
        return self._sweeper is not None and not self._stop_event.is_set()

    def get(self, key: Hashable) -> T | None:
        """Get a value, or None when absent or expired."""
        with self._lock:
            entry = self._lookup(key)
            return entry.data if entry is not None else None

    def set(
        self,
        key: Hashable,
        value: T,
        *,
        ttl: OptionalDuration | None = None,
        persist: bool | None = None,
    ) -> None:
        """Store a value.

        Args:
            key: Cache key
            value: Value to store
            ttl: Lifetime for this entry, False for no expiry (default: cache ttl)
            persist: Write the snapshot for this call (default: cache setting)
        """
        ttl_ms = self._ttl if ttl is None else _parse_ttl(ttl)
        with self._lock:
            self._store[key] = CacheEntry(
                data=value,
                expires_at=_now_ms() + ttl_ms if ttl_ms is not None else None,
            )
            self._persist(self._persistent if persist is None else persist)

    def has(self, key: Hashable) -> bool:
        """Check whether a live entry exists for key."""
        with self._lock:
            return self._lookup(key) is not None

    def delete(self, key: Hashable) -> bool:
        """Remove an entry. Always returns True, absent keys included."""
        with self._lock:
            if self._store.pop(key, None) is not None:
                self._persist(self._persistent)
            return True

    def clear(self) -> None:
        """Remove all entries."""
        with self._lock:
            self._store.clear()
            self._persist(self._persistent)

    def stop_cleanup(self) -> None:
        """Stop the background sweep. Safe to call more than once."""
        if self._sweeper is None or self._stop_event.is_set():
            return
        self._stop_event.set()
        if self._sweeper is not threading.current_thread():
            self._sweeper.join()
        log.debug("Stopped sweep for cache %r", self._key)

    def clean_expired(self) -> int:
        """Evict every expired entry now. Returns the number evicted."""
        now = _now_ms()
        with self._lock:
            expired = [
                key for key, entry in self._store.items() if self._is_expired(entry, now)
            ]
            for key in expired:
                del self._store[key]
            if expired:
                self._persist(self._persistent)
        return len(expired)

    # -------------------------------------------------------------------------
    # Internal helpers
    # -------------------------------------------------------------------------

    def _lookup(self, key: Hashable) -> CacheEntry[T] | None:
        """Find a live entry, evicting it first if it has expired."""
        entry = self._store.get(key)
        if entry is None:
            return None
        if self._is_expired(entry, _now_ms()):
            del self._store[key]
            self._persist(self._persistent)
            return None
        return entry

    @staticmethod
    def _is_expired(entry: CacheEntry[Any], now: int) -> bool:
        return entry.expires_at is not None and now > entry.expires_at

    def _hydrate(self) -> dict[Hashable, CacheEntry[T]]:
        """Load the persisted snapshot, falling back to an empty store."""
        if not self._persistent or self._adapter is None:
            return {}

        try:
            raw = self._adapter.get(self._key)
        except Exception:
            log.warning("Failed to read snapshot %r", self._key, exc_info=True)
            return {}
        if raw is None:
            return {}

        return _decode_snapshot(raw).match(
            ok=lambda store: store,
            err=lambda reason: self._discard_snapshot(reason),
        )

    def _discard_snapshot(self, reason: str) -> dict[Hashable, CacheEntry[T]]:
        log.debug("Discarding snapshot %r: %s", self._key, reason)
        return {}

    def _persist(self, persist: bool) -> None:
        """Write the snapshot when persistence is in effect for this call."""
        if not persist or self._adapter is None:
            return
        try:
            self._adapter.set(self._key, _encode_snapshot(self._store))
        except Exception:
            log.warning("Failed to write snapshot %r", self._key, exc_info=True)


def _sweep_loop(
    cache_ref: weakref.ref[ExpiringCache[Any]],
    stop_event: threading.Event,
    interval_ms: int,
    key: str,
) -> None:
    """Evict expired entries every interval until stopped or the cache is gone."""
    while not stop_event.wait(interval_ms / 1000):
        cache = cache_ref()
        if cache is None:
            return
        evicted = cache.clean_expired()
        del cache
        if evicted:
            log.debug("Swept %d expired entries from %r", evicted, key)


def create_cache(
    *,
    ttl: OptionalDuration = DEFAULT_TTL,
    persistent: bool = False,
    key: str = DEFAULT_KEY,
    clean_interval: OptionalDuration = False,
    adapter: PersistenceAdapter | None = None,
) -> ExpiringCache[Any]:
    """Create an expiring cache.

    Args:
        ttl: Default entry lifetime, False for no expiry
        persistent: Mirror the store to the adapter after mutations
        key: Key the snapshot is stored under
        clean_interval: Sweep expired entries this often, False to disable
        adapter: Persistence backend used when persistent is True

    Returns:
        ExpiringCache with get, set, has, delete, clear, stop_cleanup

    Example:
        cache = create_cache(ttl="1m")
        cache.set("user", {"id": 1})
        cache.get("user")                       # {"id": 1}
        cache.set("token", "abc", ttl=False)    # never expires
    """
    return ExpiringCache(
        ttl=ttl,
        persistent=persistent,
        key=key,
        clean_interval=clean_interval,
        adapter=adapter,
    )


__all__ = ["DEFAULT_KEY", "DEFAULT_TTL", "ExpiringCache", "create_cache"]
