"""Dict-backed storage backend."""

from src.storage.base import StorageBackend, T


class HashedStorage(StorageBackend[T]):
    """Storage backed by a dict keyed by entry id.

    Id lookups are O(1) on average. Value lookups scan every entry (O(n)),
    which is fine for the small stores this serves. Dicts keep insertion
    order, so "first match" means the earliest added entry.
    """

    def __init__(self, initial_id: int = 1) -> None:
        super().__init__(initial_id)
        self._entries: dict[int, T] = {}

    def _release_type_if_empty(self) -> None:
        if not self._entries:
            self._value_type = None

    def _matching_ids(self, value: T) -> list[int]:
        if not self._same_type(value):
            return []
        return [entry_id for entry_id, stored in self._entries.items() if stored == value]

    # ==================== Write Operations ====================

    def add(self, value: T) -> int:
        with self._lock.write():
            self._claim_type(value)
            entry_id = self._next_id
            self._entries[entry_id] = value
            self._next_id += 1
            return entry_id

    def update_by_id(self, entry_id: int, value: T) -> bool:
        with self._lock.write():
            if not self._entries:
                return False
            self._claim_type(value)
            if entry_id not in self._entries:
                return False
            self._entries[entry_id] = value
            return True

    def remove_by_id(self, entry_id: int) -> None:
        with self._lock.write():
            self._entries.pop(entry_id, None)
            self._release_type_if_empty()

    def remove_by_value(self, value: T) -> None:
        with self._lock.write():
            if not self._same_type(value):
                return
            for entry_id, stored in self._entries.items():
                if stored == value:
                    del self._entries[entry_id]
                    break
            self._release_type_if_empty()

    def remove_all_by_value(self, value: T) -> None:
        with self._lock.write():
            for entry_id in self._matching_ids(value):
                del self._entries[entry_id]
            self._release_type_if_empty()

    def clear(self) -> None:
        with self._lock.write():
            self._entries = {}
            self._value_type = None
            self._next_id = self._initial_id

    # ==================== Read Operations ====================

    def get_by_id(self, entry_id: int) -> tuple[T | None, bool]:
        with self._lock.read():
            if entry_id not in self._entries:
                return None, False
            return self._entries[entry_id], True

    def get_by_value(self, value: T) -> tuple[int | None, bool]:
        with self._lock.read():
            if not self._same_type(value):
                return None, False
            for entry_id, stored in self._entries.items():
                if stored == value:
                    return entry_id, True
            return None, False

    def get_all_by_value(self, value: T) -> tuple[list[int], bool]:
        with self._lock.read():
            ids = self._matching_ids(value)
            return ids, bool(ids)

    def get_all(self) -> tuple[dict[int, T], bool]:
        with self._lock.read():
            # Copy so callers never touch the live dict after the lock is released
            return dict(self._entries), bool(self._entries)

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._entries)

    def render(self) -> str:
        """Render the store as an ``ID | Value`` table."""
        with self._lock.read():
            rows = [(str(entry_id), str(value)) for entry_id, value in self._entries.items()]
            key_width = max([len("ID"), len(str(self._next_id - 1))] + [len(k) for k, _ in rows])
            value_width = max([len("Value")] + [len(v) for _, v in rows])

        lines = [
            f"{'ID':<{key_width}} | {'Value':<{value_width}}",
            "-" * (key_width + 3 + value_width),
        ]
        lines.extend(f"{k:<{key_width}} | {v:<{value_width}}" for k, v in rows)
        return "\n".join(lines)
