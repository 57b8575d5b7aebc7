"""
In-memory resource stores.

Two identity models are provided:
- `ResourceStore`: the record's position in the sequence is its id. Deleting a
  record shifts every later record down by one.
- `KeyedResourceStore`: ids are assigned once at add() time, never reused, and
  do not depend on storage position.

Both expose the same operations. Absence is signalled by `None` (reads) or
`False` (writes), never by raising. Every operation holds the store's lock, so
a snapshot returned by list() is never torn by a concurrent write.
"""

from __future__ import annotations

import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class ResourceStore(Generic[T]):
    """
    Ordered, position-identified collection of records.
    """

    def __init__(self, records: list[T] | None = None) -> None:
        self._records: list[T] = list(records or [])
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _in_bounds(self, position: int) -> bool:
        return 0 <= position < len(self._records)

    def list(self) -> list[T]:
        with self._lock:
            return list(self._records)

    def items(self) -> list[tuple[int, T]]:
        with self._lock:
            return list(enumerate(self._records))

    def get(self, position: int) -> T | None:
        with self._lock:
            if not self._in_bounds(position):
                return None
            return self._records[position]

    def add(self, record: T) -> int:
        with self._lock:
            self._records.append(record)
            return len(self._records) - 1

    def update(self, position: int, record: T) -> bool:
        with self._lock:
            if not self._in_bounds(position):
                return False
            self._records[position] = record
            return True

    def delete(self, position: int) -> bool:
        with self._lock:
            if not self._in_bounds(position):
                return False
            del self._records[position]
            return True


class KeyedResourceStore(Generic[T]):
    """
    Records indexed by a monotonically increasing integer id.

    Ids start at `first_id` and are never handed out twice, even after the
    record holding one is deleted.
    """

    def __init__(self, first_id: int = 1) -> None:
        # dicts keep insertion order, which doubles as list() order.
        self._records: dict[int, T] = {}
        self._next_id = first_id
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def list(self) -> list[T]:
        with self._lock:
            return list(self._records.values())

    def items(self) -> list[tuple[int, T]]:
        with self._lock:
            return list(self._records.items())

    def get(self, record_id: int) -> T | None:
        with self._lock:
            return self._records.get(record_id)

    def find(self, predicate: Callable[[T], bool]) -> tuple[int, T] | None:
        """
        Return the first `(id, record)` in insertion order matching `predicate`.
        """
        with self._lock:
            return self._find(predicate)

    def _find(self, predicate: Callable[[T], bool]) -> tuple[int, T] | None:
        for record_id, record in self._records.items():
            if predicate(record):
                return record_id, record
        return None

    def _add(self, record: T) -> int:
        record_id = self._next_id
        self._next_id += 1
        self._records[record_id] = record
        return record_id

    def add(self, record: T) -> int:
        with self._lock:
            return self._add(record)

    def add_unless(self, predicate: Callable[[T], bool], record: T) -> int | None:
        """
        Add `record` unless an existing record matches `predicate`.

        The lookup and the insert happen under one lock hold. Returns the new
        id, or None when a match already exists.
        """
        with self._lock:
            if self._find(predicate) is not None:
                return None
            return self._add(record)

    def update(self, record_id: int, record: T) -> bool:
        with self._lock:
            if record_id not in self._records:
                return False
            self._records[record_id] = record
            return True

    def delete(self, record_id: int) -> bool:
        with self._lock:
            if record_id not in self._records:
                return False
            del self._records[record_id]
            return True
