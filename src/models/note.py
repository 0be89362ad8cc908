"""Note models exchanged over HTTP and kept in storage."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class Note(BaseModel):
    """Note as sent and received by clients."""

    model_config = ConfigDict(populate_by_name=True)

    # -1 marks an id the client did not send
    id: int = -1
    name: str = ""
    last_name: str = ""
    content: str = Field(default="", alias="note")

    def has_content(self) -> bool:
        """Check that every text field is filled in."""
        return bool(self.name and self.last_name and self.content)


class PureNote(BaseModel):
    """Stored form of a note. The id lives in the storage key, not here."""

    model_config = ConfigDict(frozen=True)

    name: str
    last_name: str
    content: str

    @classmethod
    def from_note(cls, note: Note) -> "PureNote":
        return cls(name=note.name, last_name=note.last_name, content=note.content)

    def to_note(self, note_id: int) -> Note:
        return Note(id=note_id, name=self.name, last_name=self.last_name, content=self.content)


class APIResponse(BaseModel):
    """Envelope wrapping every notes endpoint response."""

    result: Literal["OK", "ERROR"] = "OK"
    data: Any = None
    error: str = ""

    @classmethod
    def ok(cls, data: Any = None) -> "APIResponse":
        return cls(result="OK", data=data)

    @classmethod
    def failure(cls, error: str) -> "APIResponse":
        return cls(result="ERROR", data=None, error=error)
