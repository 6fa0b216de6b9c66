from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, Iterator, TypeVar

from .hashing import bucket_index
from .shared import trace_operation


K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

Hasher = Callable[[Any], int]


_debug_trace_table = False


def set_debug_trace(b: bool):
    global _debug_trace_table
    _debug_trace_table = b


class PreconditionError(AssertionError):
    pass


@dataclass
class Entry(Generic[K, V]):
    key: K
    value: V


Bucket = list[Entry[K, V]]


class HashTable(Generic[K, V]):
    """Fixed-capacity hash table with separate chaining.

    The bucket array never grows. Lookups, updates and removals all cost
    O(bucket length). A value of None stands for "absent": reading a missing
    key gives None and `table[key] = None` removes the key.
    """

    def __init__(self, capacity: int, hasher: Hasher = hash) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise PreconditionError(f"capacity must be an int, got {capacity!r}")
        if capacity <= 0:
            raise PreconditionError(f"capacity must be positive, got {capacity}")

        self._buckets: list[Bucket[K, V]] = [[] for _ in range(capacity)]
        self._count = 0
        self._hasher = hasher
        self._version = 0

    @property
    def count(self) -> int:
        return self._count

    @property
    def capacity(self) -> int:
        return len(self._buckets)

    def index(self, key: K) -> int:
        return bucket_index(self._hasher(key), len(self._buckets))

    def value(self, key: K) -> V | None:
        index = self.index(key)
        position = find_position(self._buckets[index], key)
        if _debug_trace_table:
            trace_operation("value", key, index, "missing" if position is None else "found")
        if position is None:
            return None
        return self._buckets[index][position].value

    def update(self, value: V, key: K) -> V | None:
        index = self.index(key)
        bucket = self._buckets[index]

        position = find_position(bucket, key)
        if position is not None:
            entry = bucket[position]
            old_value = entry.value
            entry.value = value
            if _debug_trace_table:
                trace_operation("update", key, index, "replaced")
            return old_value

        bucket.append(Entry(key, value))
        self._count += 1
        self._version += 1
        if _debug_trace_table:
            trace_operation("update", key, index, "inserted")
        return None

    def remove_value(self, key: K) -> V | None:
        index = self.index(key)
        bucket = self._buckets[index]

        position = find_position(bucket, key)
        if position is None:
            if _debug_trace_table:
                trace_operation("remove", key, index, "missing")
            return None

        entry = bucket.pop(position)
        self._count -= 1
        self._version += 1
        assert self._count >= 0
        if _debug_trace_table:
            trace_operation("remove", key, index, "removed")
        return entry.value

    def __getitem__(self, key: K) -> V | None:
        return self.value(key)

    def __setitem__(self, key: K, value: V | None):
        if value is None:
            self.remove_value(key)
        else:
            self.update(value, key)

    def __delitem__(self, key: K):
        if find_position(self._buckets[self.index(key)], key) is None:
            raise KeyError(key)
        self.remove_value(key)

    def __contains__(self, key: K) -> bool:
        index = self.index(key)
        found = find_position(self._buckets[index], key) is not None
        if _debug_trace_table:
            trace_operation("in", key, index, "found" if found else "missing")
        return found

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def keys(self) -> Iterator[K]:
        for key, _ in self.items():
            yield key

    def values(self) -> Iterator[V]:
        for _, value in self.items():
            yield value

    def items(self) -> Iterator[tuple[K, V]]:
        version = self._version
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.key, entry.value
                # inserts and removals shift entries under the cursor
                if self._version != version:
                    raise RuntimeError("HashTable changed size during iteration")

    def buckets(self) -> tuple[tuple[tuple[K, V], ...], ...]:
        return tuple(
            tuple((entry.key, entry.value) for entry in bucket)
            for bucket in self._buckets
        )

    def __repr__(self) -> str:
        buckets = ", ".join(
            "[" + ", ".join(f"{e.key!r}: {e.value!r}" for e in bucket) + "]"
            for bucket in self._buckets
        )
        return f"HashTable(buckets=[{buckets}], count={self._count})"


def find_position(bucket: Bucket[K, V], key: K) -> int | None:
    for position, entry in enumerate(bucket):
        if entry.key == key:
            return position
    return None
