"""A hash map built from separate-chaining buckets."""

from __future__ import annotations

_DEFAULT_BUCKETS = 10000


class HashMap:
    """Map from integer keys to integer values using chained buckets."""

    def __init__(self, num_buckets: int = _DEFAULT_BUCKETS) -> None:
        if num_buckets <= 0:
            raise ValueError("num_buckets must be positive")
        self._buckets: list[list[list[int]]] = [[] for _ in range(num_buckets)]
        self._size = 0

    def _bucket(self, key: int) -> list[list[int]]:
        return self._buckets[key % len(self._buckets)]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        bucket = self._bucket(key)
        for entry in bucket:
            if entry[0] == key:
                entry[1] = value
                return
        bucket.append([key, value])
        self._size += 1

    def get(self, key: int, default: int = -1) -> int:
        """Value stored under ``key``, or ``default`` when absent."""
        for stored_key, value in self._bucket(key):
            if stored_key == key:
                return value
        return default

    def remove(self, key: int) -> None:
        """Drop ``key`` if present."""
        bucket = self._bucket(key)
        for position, entry in enumerate(bucket):
            if entry[0] == key:
                del bucket[position]
                self._size -= 1
                return

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        return any(stored_key == key for stored_key, _ in self._bucket(key))

    def __len__(self) -> int:
        return self._size