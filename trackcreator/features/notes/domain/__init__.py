"""
Domain layer for notes feature.

Contains:
- Note entity and NoteType
- NoteRepository interface
- NoteApiError
"""
from trackcreator.features.notes.domain.note import Note, NoteType, NEW_NOTE_ID
from trackcreator.features.notes.domain.note_repository import NoteRepository
from trackcreator.shared.errors import NoteApiError, normalize_errors

__all__ = [
    'Note',
    'NoteType',
    'NEW_NOTE_ID',
    'NoteRepository',
    'NoteApiError',
    'normalize_errors',
]
