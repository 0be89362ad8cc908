"""Custom exceptions for the application."""

from typing import Any


class AppException(Exception):
    """Base exception for application errors."""

    status_code: int = 400

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class ConfigurationError(AppException):
    """Raised when there's a configuration problem."""

    status_code = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)


class TypeMismatchError(AppException):
    """Raised when a written value's type differs from the store's fixed type.

    The store is left unchanged, so the caller can recover locally.
    """

    status_code = 500

    def __init__(self, expected: type, actual: type) -> None:
        super().__init__(
            f"mismatched value type: expected {expected.__name__}, got {actual.__name__}",
            code="TYPE_MISMATCH",
            details={"expected": expected.__name__, "actual": actual.__name__},
        )
        self.expected = expected
        self.actual = actual


class InvalidNoteRequest(AppException):
    """Raised when a notes request lacks required data."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, code="INVALID_REQUEST", details=details)


class NoteNotFound(AppException):
    """Raised when a note id does not resolve to a stored note."""

    status_code = 404

    def __init__(self, message: str, note_id: int) -> None:
        super().__init__(message, code="NOTE_NOT_FOUND", details={"note_id": note_id})


class NoStoredNotes(AppException):
    """Raised when listing notes from an empty store."""

    status_code = 404

    def __init__(self) -> None:
        super().__init__("no records found", code="NO_RECORDS")


class NoteStorageError(AppException):
    """Raised when storage rejects a note write."""

    status_code = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, code="STORAGE_ERROR", details=details)


class StoredValueError(AppException):
    """Raised when a stored value cannot be converted back to a note."""

    status_code = 500

    def __init__(self, actual: type) -> None:
        super().__init__(
            "internal server error",
            code="STORED_VALUE_ERROR",
            details={"actual": actual.__name__},
        )
