"""Abstract base class for storage backends."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from src.core.exceptions import TypeMismatchError
from src.storage.locks import ReadWriteLock

T = TypeVar("T")


class StorageBackend(ABC, Generic[T]):
    """Abstract storage backend interface.

    Entries are keyed by integer ids handed out in strictly increasing order,
    starting at ``initial_id``. The first value written fixes the value type
    for the store; the type is released again once the store becomes empty.
    Absence is never an exception: lookups return a ``(result, found)``
    pair since ``None`` and other falsy values are valid stored values.

    Every operation is atomic on its own. Two separate calls (e.g.
    ``get_by_id`` followed by ``update_by_id``) may interleave with other
    callers.
    """

    def __init__(self, initial_id: int = 1) -> None:
        self._initial_id = initial_id
        self._next_id = initial_id
        self._value_type: type | None = None
        self._lock = ReadWriteLock()

    @property
    def initial_id(self) -> int:
        """Identifier handed out first, and again after ``clear()``."""
        return self._initial_id

    @property
    def next_id(self) -> int:
        """Identifier the next ``add()`` will return."""
        with self._lock.read():
            return self._next_id

    # ==================== Type Descriptor ====================

    def _claim_type(self, value: T) -> None:
        """Fix the store's value type, or raise if ``value`` does not match it.

        Caller must hold the write lock.
        """
        if self._value_type is None:
            self._value_type = type(value)
        elif type(value) is not self._value_type:
            raise TypeMismatchError(self._value_type, type(value))

    def _same_type(self, value: T) -> bool:
        return self._value_type is not None and type(value) is self._value_type

    # ==================== Write Operations ====================

    @abstractmethod
    def add(self, value: T) -> int:
        """Store a value and return its new id.

        Raises:
            TypeMismatchError: store is non-empty and holds another type.
        """
        ...

    @abstractmethod
    def update_by_id(self, entry_id: int, value: T) -> bool:
        """Replace the value stored under ``entry_id``.

        Returns False if no such entry exists.

        Raises:
            TypeMismatchError: store is non-empty and holds another type.
        """
        ...

    @abstractmethod
    def remove_by_id(self, entry_id: int) -> None:
        """Remove an entry by id. No-op if absent."""
        ...

    @abstractmethod
    def remove_by_value(self, value: T) -> None:
        """Remove the first entry, in insertion order, equal to ``value``."""
        ...

    @abstractmethod
    def remove_all_by_value(self, value: T) -> None:
        """Remove every entry equal to ``value``."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Remove all entries and reset the id counter to ``initial_id``.

        Ids handed out before the clear will be reissued to new entries.
        """
        ...

    # ==================== Read Operations ====================

    @abstractmethod
    def get_by_id(self, entry_id: int) -> tuple[T | None, bool]:
        """Get a value by id."""
        ...

    @abstractmethod
    def get_by_value(self, value: T) -> tuple[int | None, bool]:
        """Get the id of the first entry equal to ``value``."""
        ...

    @abstractmethod
    def get_all_by_value(self, value: T) -> tuple[list[int], bool]:
        """Get the ids of all entries equal to ``value``, in insertion order."""
        ...

    @abstractmethod
    def get_all(self) -> tuple[dict[int, T], bool]:
        """Get a snapshot of every entry, keyed by id."""
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...

    @abstractmethod
    def render(self) -> str:
        """Human-readable dump of the store contents."""
        ...

    # ==================== Health Check ====================

    def health_check(self) -> bool:
        """Check if storage is healthy."""
        return True
