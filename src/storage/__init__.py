"""Storage layer - hashed and linked in-memory implementations."""

from typing import Any

from src.core.exceptions import ConfigurationError
from src.storage.base import StorageBackend
from src.storage.hashed import HashedStorage
from src.storage.linked import LinkedStorage

BACKENDS: dict[str, type[StorageBackend[Any]]] = {
    "hashed": HashedStorage,
    "linked": LinkedStorage,
}


def create_storage(kind: str, initial_id: int = 1) -> StorageBackend[Any]:
    """Create an empty storage backend of the given kind."""
    try:
        backend_cls = BACKENDS[kind]
    except KeyError:
        raise ConfigurationError(
            f"Unknown storage backend: {kind}",
            details={"available": sorted(BACKENDS)},
        ) from None
    return backend_cls(initial_id=initial_id)


__all__ = ["BACKENDS", "StorageBackend", "HashedStorage", "LinkedStorage", "create_storage"]
