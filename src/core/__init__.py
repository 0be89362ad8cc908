"""Core module - configuration and utilities."""

from src.core.config import settings
from src.core.exceptions import (
    AppException,
    ConfigurationError,
    InvalidNoteRequest,
    NoStoredNotes,
    NoteNotFound,
    NoteStorageError,
    StoredValueError,
    TypeMismatchError,
)

__all__ = [
    "settings",
    "AppException",
    "ConfigurationError",
    "InvalidNoteRequest",
    "NoStoredNotes",
    "NoteNotFound",
    "NoteStorageError",
    "StoredValueError",
    "TypeMismatchError",
]
