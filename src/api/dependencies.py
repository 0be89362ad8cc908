"""FastAPI dependencies for dependency injection."""

from typing import Annotated, Any

from fastapi import Depends

from src.core.config import Settings, settings
from src.storage import StorageBackend, create_storage


# Storage singleton
_storage: StorageBackend[Any] | None = None


def get_storage() -> StorageBackend[Any]:
    """Get the storage backend singleton.

    The backend kind and first id come from settings and are fixed for the
    life of the process.
    """
    global _storage
    if _storage is None:
        _storage = create_storage(settings.storage_backend, settings.storage_initial_id)
    return _storage


# Type aliases for cleaner dependency injection
StorageDep = Annotated[StorageBackend[Any], Depends(get_storage)]
SettingsDep = Annotated[Settings, Depends(lambda: settings)]
