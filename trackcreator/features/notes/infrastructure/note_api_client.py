"""
HTTP Note Repository

NoteRepository implementation backed by the remote API.
"""
from trackcreator.features.notes.domain import Note, NoteRepository
from trackcreator.shared.infrastructure.api_client import ApiClient


class HttpNoteRepository(NoteRepository):
    """Note CRUD over /api/notes."""

    def __init__(self, client: ApiClient):
        self._client = client

    async def create_note(self, note: Note) -> Note:
        record = await self._client.request("POST", "/api/notes", json=note.to_payload())
        return Note.from_dict(record)

    async def edit_note(self, note_id: str, note: Note) -> Note:
        record = await self._client.request("PUT", f"/api/notes/{note_id}", json=note.to_payload())
        if not record:
            return note
        if not isinstance(record, dict):
            raise ValueError(f"Note record must be an object, got {type(record).__name__}")
        return Note.from_dict({**note.to_dict(), **record, "id": note_id})

    async def remove_note(self, note_id: str) -> None:
        await self._client.request("DELETE", f"/api/notes/{note_id}")
