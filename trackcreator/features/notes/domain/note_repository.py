"""
Note Repository Interface

Defines the remote persistence contract for notes.
"""
from abc import ABC, abstractmethod

from trackcreator.features.notes.domain.note import Note


class NoteRepository(ABC):
    """
    Repository interface for note persistence.

    Implementations talk to the remote API; NoteStore decides what
    happens to the local collection with the outcome.
    """

    @abstractmethod
    async def create_note(self, note: Note) -> Note:
        """
        Persist a new note.

        Args:
            note: Unsaved note (id NEW_NOTE_ID)

        Returns:
            The stored note with its server-assigned id

        Raises:
            NoteApiError: If the server rejects the note
        """
        pass

    @abstractmethod
    async def edit_note(self, note_id: str, note: Note) -> Note:
        """
        Update an existing note.

        Args:
            note_id: Id of the note to update
            note: New values

        Returns:
            The stored note as returned by the server

        Raises:
            NoteApiError: If the server rejects the update
        """
        pass

    @abstractmethod
    async def remove_note(self, note_id: str) -> None:
        """
        Delete a note.

        Raises:
            NoteApiError: If the server rejects the delete
        """
        pass
