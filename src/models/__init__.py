"""Data models for the application."""

from src.models.note import APIResponse, Note, PureNote

__all__ = [
    "APIResponse",
    "Note",
    "PureNote",
]
