"""A separately chained hash table with a pluggable bucket function."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

HashFunction = Callable[[Any, int], int]

_MISSING = object()


def _default_hash(key: Any, table_size: int) -> int:
    return hash(key) % table_size


class HashTable:
    """Hash table whose buckets are chains of (key, value) pairs.

    ``hash_fn(key, table_size)`` picks the bucket for a key. Inserting a
    key that is already present does not replace the old entry: the new
    pair goes in front of its bucket and shadows the older one until it
    is removed.
    """

    def __init__(self, table_size: int, hash_fn: Optional[HashFunction] = None) -> None:
        if table_size <= 0:
            raise ValueError(f"table_size must be positive, got {table_size}")
        self._table_size = table_size
        self._hash_fn: HashFunction = hash_fn if hash_fn is not None else _default_hash
        self._buckets: list[list[tuple[Any, Any]]] = [[] for _ in range(table_size)]
        self._count = 0

    @property
    def table_size(self) -> int:
        return self._table_size

    def _bucket(self, key: Any) -> list[tuple[Any, Any]]:
        index = self._hash_fn(key, self._table_size)
        if not 0 <= index < self._table_size:
            raise IndexError(
                f"hash function returned {index} for a table of size {self._table_size}"
            )
        return self._buckets[index]

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: Any) -> bool:
        return any(k == key for k, _ in self._bucket(key))

    def __iter__(self) -> Iterator[Any]:
        for bucket in self._buckets:
            for key, _ in bucket:
                yield key

    def insert(self, key: Any, value: Any) -> None:
        """Add a pair to the front of the key's bucket."""
        self._bucket(key).insert(0, (key, value))
        self._count += 1

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the most recently inserted value for ``key``, or ``default``."""
        for k, v in self._bucket(key):
            if k == key:
                return v
        return default

    def remove(self, key: Any) -> None:
        """Remove every pair stored under ``key``; absent keys are ignored."""
        bucket = self._bucket(key)
        kept = [(k, v) for k, v in bucket if k != key]
        self._count -= len(bucket) - len(kept)
        bucket[:] = kept