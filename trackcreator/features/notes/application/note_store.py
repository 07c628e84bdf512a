"""
Note Store

Owns the local note collection for the song being edited.

Every mutation goes to the remote API first; the local collection changes
only after the server confirmed it. Each local change publishes a
NotesChanged event.
"""
from typing import Dict, List, Optional

import httpx

from trackcreator.application.api.result_types import CommandResult
from trackcreator.application.events import EventBus, NotesChanged
from trackcreator.features.notes.domain import Note, NoteApiError, NoteRepository
from trackcreator.utils.message import Log


class NoteStore:
    """
    Local note collection backed by a remote NoteRepository.

    Notes are keyed by id and kept in insertion order. Responses are
    applied in the order they arrive; the collection is read at apply
    time, never captured before the request. A response issued before
    clear() or replace_all() is dropped.
    """

    def __init__(self, repository: NoteRepository, event_bus: Optional[EventBus] = None):
        self._repository = repository
        self._event_bus = event_bus
        self._notes: Dict[str, Note] = {}
        # Bumped by clear()/replace_all(); responses issued before a reset are dropped
        self._generation = 0
        self.song_id: Optional[str] = None

    # =========================================================================
    # Read API
    # =========================================================================

    def get(self, note_id: str) -> Optional[Note]:
        return self._notes.get(str(note_id))

    def notes(self) -> Dict[str, Note]:
        """Snapshot of the collection (id -> Note, insertion order)."""
        return dict(self._notes)

    def notes_in_lane(self, lane: int) -> List[Note]:
        return [note for note in self._notes.values() if note.lane == lane]

    @property
    def count(self) -> int:
        return len(self._notes)

    def __len__(self) -> int:
        return len(self._notes)

    def __contains__(self, note_id) -> bool:
        return str(note_id) in self._notes

    # =========================================================================
    # Remote mutations
    # =========================================================================

    async def create(self, note: Note) -> CommandResult[Note]:
        """
        Create a note remotely and add the stored record locally.

        Args:
            note: Note to create (usually the ghost note)

        Returns:
            CommandResult with the stored note (server id) on success
        """
        generation = self._generation
        try:
            stored = await self._repository.create_note(note)
        except (NoteApiError, httpx.HTTPError, ValueError) as e:
            return self._failure("create", e)

        if self._is_stale(generation, "create", stored.id):
            return CommandResult.success_result(f"Created note {stored.id} (not applied, collection was reset)", data=stored)

        self._notes[stored.id] = stored
        self._changed("created", stored.id)
        return CommandResult.success_result(f"Created note {stored.id}", data=stored)

    async def update(self, note_id: str, note: Note) -> CommandResult[Note]:
        """
        Update a note remotely, then store the supplied note under note_id.

        Args:
            note_id: Id of the note being edited
            note: New values for the note
        """
        note_id = str(note_id)
        generation = self._generation
        try:
            await self._repository.edit_note(note_id, note)
        except (NoteApiError, httpx.HTTPError, ValueError) as e:
            return self._failure("update", e)

        if self._is_stale(generation, "update", note_id):
            return CommandResult.success_result(f"Updated note {note_id} (not applied, collection was reset)", data=note)

        self._notes[note_id] = note
        self._changed("updated", note_id)
        return CommandResult.success_result(f"Updated note {note_id}", data=note)

    async def delete(self, note_id: str) -> CommandResult[None]:
        """Delete a note remotely, then drop it locally."""
        note_id = str(note_id)
        generation = self._generation
        try:
            await self._repository.remove_note(note_id)
        except (NoteApiError, httpx.HTTPError) as e:
            return self._failure("delete", e)

        if self._is_stale(generation, "delete", note_id):
            return CommandResult.success_result(f"Deleted note {note_id}")

        if self._notes.pop(note_id, None) is not None:
            self._changed("deleted", note_id)
        return CommandResult.success_result(f"Deleted note {note_id}")

    # =========================================================================
    # Local-only mutations
    # =========================================================================

    def clear(self) -> None:
        """Empty the collection (no network)."""
        had_notes = bool(self._notes)
        self._generation += 1
        self._notes.clear()
        if had_notes:
            self._changed("cleared")

    def replace_all(self, notes: Dict[str, Note]) -> None:
        """Replace the collection wholesale (no network)."""
        self._generation += 1
        self._notes = {str(note_id): note for note_id, note in notes.items()}
        self._changed("replaced")

    # =========================================================================
    # Helpers
    # =========================================================================

    def _is_stale(self, generation: int, operation: str, note_id: str) -> bool:
        if generation == self._generation:
            return False
        Log.warning(f"NoteStore: Dropping {operation} response for note {note_id}, collection was reset meanwhile")
        return True

    def _failure(self, operation: str, error: Exception) -> CommandResult:
        if isinstance(error, NoteApiError):
            errors = error.errors
            Log.error(f"NoteStore: Failed to {operation} note (status {error.status_code}): {errors}")
        else:
            errors = [str(error)]
            Log.error(f"NoteStore: Failed to {operation} note: {error}")
        return CommandResult.error_result(f"Failed to {operation} note", errors=errors)

    def _changed(self, change_type: str, note_id: Optional[str] = None) -> None:
        Log.debug(f"NoteStore: Notes updated ({change_type}), count={len(self._notes)}")
        if self._event_bus is None:
            return
        data = {"change_type": change_type, "count": len(self._notes)}
        if note_id is not None:
            data["note_id"] = note_id
        self._event_bus.publish(NotesChanged(song_id=self.song_id, data=data))
