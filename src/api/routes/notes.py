"""Notes endpoints.

Every response is wrapped in an :class:`APIResponse` envelope. Failures are
raised as ``AppException`` subclasses and rendered into the envelope by the
application's exception handler.
"""

from typing import Any

import structlog
from fastapi import APIRouter

from src.api.dependencies import StorageDep
from src.core.exceptions import (
    InvalidNoteRequest,
    NoStoredNotes,
    NoteNotFound,
    NoteStorageError,
    StoredValueError,
    TypeMismatchError,
)
from src.models import APIResponse, Note, PureNote

logger = structlog.get_logger()

router = APIRouter(tags=["Notes"])


def _to_note(note_id: int, stored: Any) -> Note:
    """Convert a stored value back into a note."""
    if not isinstance(stored, PureNote):
        raise StoredValueError(type(stored))
    return stored.to_note(note_id)


def _require_valid_id(note: Note) -> None:
    if note.id < 1:
        raise InvalidNoteRequest("invalid note id", details={"note_id": note.id})


def _require_content(note: Note, with_id: bool = False) -> None:
    if not note.has_content() or (with_id and note.id < 1):
        raise InvalidNoteRequest(
            "required data is missing",
            details=note.model_dump(by_alias=True),
        )


@router.post("/create", response_model=APIResponse)
async def create_note(note: Note, storage: StorageDep) -> APIResponse:
    """Store a new note and return its id."""
    _require_content(note)

    try:
        note_id = storage.add(PureNote.from_note(note))
    except TypeMismatchError as e:
        raise NoteStorageError(f"cannot add note: {e.message}", details=e.details) from e

    logger.info("Note created", note_id=note_id)
    return APIResponse.ok({"id": note_id})


@router.post("/get", response_model=APIResponse)
async def get_note(note: Note, storage: StorageDep) -> APIResponse:
    """Fetch one note by id."""
    _require_valid_id(note)

    stored, found = storage.get_by_id(note.id)
    if not found:
        raise NoteNotFound(f"cannot find note with id {note.id}", note.id)

    logger.info("Note fetched", note_id=note.id)
    return APIResponse.ok(_to_note(note.id, stored).model_dump(by_alias=True))


@router.post("/update", response_model=APIResponse)
async def update_note(note: Note, storage: StorageDep) -> APIResponse:
    """Replace the contents of an existing note."""
    _require_content(note, with_id=True)

    try:
        updated = storage.update_by_id(note.id, PureNote.from_note(note))
    except TypeMismatchError as e:
        raise NoteStorageError("internal server error", details=e.details) from e

    if not updated:
        raise NoteNotFound(f"cannot update non-existing note: {note.id}", note.id)

    logger.info("Note updated", note_id=note.id)
    return APIResponse.ok()


@router.post("/delete", response_model=APIResponse)
async def delete_note(note: Note, storage: StorageDep) -> APIResponse:
    """Delete a note by id."""
    _require_valid_id(note)

    _, found = storage.get_by_id(note.id)
    if not found:
        raise NoteNotFound(f"note with this ID doesn't exist: {note.id}", note.id)

    storage.remove_by_id(note.id)

    logger.info("Note deleted", note_id=note.id)
    return APIResponse.ok()


@router.get("/get-all", response_model=APIResponse)
async def get_all_notes(storage: StorageDep) -> APIResponse:
    """List every stored note, sorted by id."""
    snapshot, found = storage.get_all()
    if not found:
        raise NoStoredNotes()

    notes = [_to_note(note_id, stored) for note_id, stored in sorted(snapshot.items())]

    logger.info("Notes listed", count=len(notes))
    return APIResponse.ok([n.model_dump(by_alias=True) for n in notes])
