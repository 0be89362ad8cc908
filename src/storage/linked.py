"""Singly-linked-list storage backend."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from src.storage.base import StorageBackend, T


@dataclass(slots=True, eq=False)
class _Node:
    """One entry in the chain. Owns the reference to its successor."""

    id: int
    value: Any
    next: "_Node | None" = None


class LinkedStorage(StorageBackend[T]):
    """Storage backed by a singly linked list with head and tail references.

    Appending is O(1) through the tail reference. Lookups and removals walk
    the chain (O(n)). Head and tail are both None exactly when the store is
    empty, and point at the same node when it holds one entry.
    """

    def __init__(self, initial_id: int = 1) -> None:
        super().__init__(initial_id)
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._length = 0

    # ==================== Chain Helpers ====================

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _in_range(self, entry_id: int) -> bool:
        """Whether ``entry_id`` can ever have been handed out since the last clear."""
        return self._initial_id <= entry_id < self._next_id

    def _locate(self, match: Callable[[_Node], bool]) -> tuple[_Node | None, _Node | None]:
        """Find the first matching node and its predecessor.

        Returns ``(None, None)`` when nothing matches. A head match has no
        predecessor, so it comes back as ``(None, node)``.
        """
        prev = None
        for node in self._nodes():
            if match(node):
                return prev, node
            prev = node
        return None, None

    def _unlink(self, prev: _Node | None, node: _Node) -> None:
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        if node is self._tail:
            self._tail = prev
        node.next = None

        self._length -= 1
        if self._length == 0:
            self._value_type = None

    def _remove_first_value(self, value: T) -> bool:
        prev, node = self._locate(lambda n: n.value == value)
        if node is None:
            return False
        self._unlink(prev, node)
        return True

    # ==================== Write Operations ====================

    def add(self, value: T) -> int:
        with self._lock.write():
            self._claim_type(value)
            node = _Node(id=self._next_id, value=value)
            if self._tail is None:
                self._head = node
            else:
                self._tail.next = node
            self._tail = node
            self._next_id += 1
            self._length += 1
            return node.id

    def update_by_id(self, entry_id: int, value: T) -> bool:
        with self._lock.write():
            if self._length == 0:
                return False
            self._claim_type(value)
            if not self._in_range(entry_id):
                return False
            _, node = self._locate(lambda n: n.id == entry_id)
            if node is None:
                return False
            node.value = value
            return True

    def remove_by_id(self, entry_id: int) -> None:
        with self._lock.write():
            if not self._in_range(entry_id):
                return
            prev, node = self._locate(lambda n: n.id == entry_id)
            if node is not None:
                self._unlink(prev, node)

    def remove_by_value(self, value: T) -> None:
        with self._lock.write():
            if self._same_type(value):
                self._remove_first_value(value)

    def remove_all_by_value(self, value: T) -> None:
        with self._lock.write():
            if not self._same_type(value):
                return
            # Each pass rescans from the head
            while self._remove_first_value(value):
                pass

    def clear(self) -> None:
        with self._lock.write():
            self._head = None
            self._tail = None
            self._length = 0
            self._value_type = None
            self._next_id = self._initial_id

    # ==================== Read Operations ====================

    def get_by_id(self, entry_id: int) -> tuple[T | None, bool]:
        with self._lock.read():
            if not self._in_range(entry_id):
                return None, False
            _, node = self._locate(lambda n: n.id == entry_id)
            if node is None:
                return None, False
            return node.value, True

    def get_by_value(self, value: T) -> tuple[int | None, bool]:
        with self._lock.read():
            if not self._same_type(value):
                return None, False
            _, node = self._locate(lambda n: n.value == value)
            if node is None:
                return None, False
            return node.id, True

    def get_all_by_value(self, value: T) -> tuple[list[int], bool]:
        with self._lock.read():
            if not self._same_type(value):
                return [], False
            ids = [node.id for node in self._nodes() if node.value == value]
            return ids, bool(ids)

    def get_all(self) -> tuple[dict[int, T], bool]:
        with self._lock.read():
            snapshot = {node.id: node.value for node in self._nodes()}
            return snapshot, bool(snapshot)

    def __len__(self) -> int:
        with self._lock.read():
            return self._length

    def render(self) -> str:
        """Render the store as ``[{id: value}, ...]`` in chain order."""
        with self._lock.read():
            items = [f"{{{node.id}: {node.value}}}" for node in self._nodes()]
        return "[" + ", ".join(items) + "]"
