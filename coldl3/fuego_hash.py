"""Fuego hash function with a memoising cache."""

from __future__ import annotations

import hashlib
import threading

from coldl3.consensus_errors import HashBackendError

HASH_SIZE = 32


class FuegoHash:
    """Hashes data to 32 bytes and remembers every result it has produced."""

    def __init__(self) -> None:
        self._cache: dict[bytes, bytes] = {}
        self._lock = threading.Lock()

    def hash(self, data: bytes) -> bytes:
        """Return the 32-byte hash of ``data``, served from the cache when known."""
        key = bytes(data)
        with self._lock:
            cached = self._cache.get(key)
        if cached is not None and len(cached) == HASH_SIZE:
            return cached
        digest = hashlib.blake2b(key).digest()[:HASH_SIZE]
        if len(digest) != HASH_SIZE:
            raise HashBackendError("Invalid hash length")
        with self._lock:
            self._cache[key] = digest
        return digest

    def hash_block_header(self, header_data: bytes) -> bytes:
        """Return the 32-byte hash of serialised header data."""
        return self.hash(header_data)

    def verify(self, data: bytes, expected_hash: bytes) -> bool:
        """Return True if ``data`` hashes to ``expected_hash``."""
        return self.hash(data) == bytes(expected_hash)

    def cache_stats(self) -> tuple[int, int]:
        """Return the number of cached entries and the total bytes they hold."""
        with self._lock:
            return len(self._cache), sum(len(value) for value in self._cache.values())

    def clear_cache(self) -> None:
        """Forget every cached hash."""
        with self._lock:
            self._cache.clear()