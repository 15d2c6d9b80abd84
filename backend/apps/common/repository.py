import threading
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class StoreError(Exception):
    """Base class for every error a repository raises on purpose."""


class NotFoundError(StoreError, LookupError):
    """No record matches the requested identifier or lookup key."""

    def __init__(self, entity: str, key: Any):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.key = key


class AlreadyExistsError(StoreError):
    """A unique field (for example a user's email) is already taken."""

    def __init__(self, entity: str, field_name: str, value: Any):
        super().__init__(f"{entity} with this {field_name} already exists")
        self.entity = entity
        self.field_name = field_name
        self.value = value


class StoreTimeoutError(StoreError):
    """The backing store did not answer within the per-call deadline."""


@dataclass
class MemoryTable(Generic[T]):
    """State owned by one in-memory repository: rows by id, id counter and lock."""

    rows: Dict[int, T] = field(default_factory=dict)
    last_id: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def next_id(self) -> int:
        self.last_id += 1
        return self.last_id


class InMemoryRepository(Generic[T]):
    """
    Dict-backed storage for dataclass records that carry an ``id`` field.

    Every public call holds the table lock for its whole duration and hands
    out copies so callers can never mutate stored rows.
    """

    entity = "Record"

    def __init__(self, table: Optional[MemoryTable[T]] = None):
        self.table: MemoryTable[T] = table if table is not None else MemoryTable()

    def _check_unique(self, record: T, *, exclude_id: Optional[int] = None) -> None:
        """Hook for subclasses enforcing unique fields. Runs under the lock."""

    def _insert(self, record: T) -> T:
        with self.table.lock:
            self._check_unique(record)
            stored = replace(record, id=self.table.next_id())
            self.table.rows[stored.id] = stored
            return replace(stored)

    def _replace(self, record: T) -> T:
        record_id = getattr(record, "id")
        with self.table.lock:
            if record_id not in self.table.rows:
                raise NotFoundError(self.entity, record_id)
            self._check_unique(record, exclude_id=record_id)
            stored = replace(record)
            self.table.rows[record_id] = stored
            return replace(stored)

    def _remove(self, record_id: int) -> None:
        with self.table.lock:
            if self.table.rows.pop(record_id, None) is None:
                raise NotFoundError(self.entity, record_id)

    def _get(self, record_id: int) -> T:
        with self.table.lock:
            stored = self.table.rows.get(record_id)
            if stored is None:
                raise NotFoundError(self.entity, record_id)
            return replace(stored)

    def _find(self, predicate: Callable[[T], bool], key: Any) -> T:
        with self.table.lock:
            for record_id in sorted(self.table.rows):
                stored = self.table.rows[record_id]
                if predicate(stored):
                    return replace(stored)
        raise NotFoundError(self.entity, key)

    def _all(self) -> List[T]:
        with self.table.lock:
            return [replace(self.table.rows[i]) for i in sorted(self.table.rows)]
