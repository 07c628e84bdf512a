"""
Application layer for notes feature.
"""
from trackcreator.features.notes.application.note_store import NoteStore

__all__ = ['NoteStore']
