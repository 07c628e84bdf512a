"""
Infrastructure layer for notes feature.
"""
from trackcreator.features.notes.infrastructure.note_api_client import HttpNoteRepository

__all__ = ['HttpNoteRepository']
