"""
Track Service

Use cases for the song being edited:
- Loading song metadata
- Publishing the placed notes as a track

Remote failures are logged and returned as error results. Cancellation of a
pending song load is not a failure and propagates to the caller.
"""
from typing import Iterable, Optional

import httpx

from trackcreator.application.api.result_types import CommandResult
from trackcreator.application.events import EventBus, SongLoaded, TrackPublished
from trackcreator.features.notes.domain import Note, NoteApiError
from trackcreator.features.tracks.domain import Song, Track, TrackRepository
from trackcreator.utils.message import Log


class TrackService:
    """Service for song lookup and track publishing."""

    def __init__(self, repository: TrackRepository, event_bus: Optional[EventBus] = None):
        self._repository = repository
        self._event_bus = event_bus

    async def load_song(self, song_id: str) -> CommandResult[Song]:
        """
        Fetch song metadata.

        Args:
            song_id: Song to load

        Returns:
            CommandResult with the Song on success
        """
        try:
            song = await self._repository.fetch_song(song_id)
        except NoteApiError as e:
            Log.error(f"TrackService: Failed to load song {song_id} (status {e.status_code}): {e.errors}")
            return CommandResult.error_result(f"Failed to load song {song_id}", errors=e.errors)
        except (httpx.HTTPError, ValueError) as e:
            Log.error(f"TrackService: Failed to load song {song_id}: {e}")
            return CommandResult.error_result(f"Failed to load song {song_id}", errors=[str(e)])

        Log.info(f"TrackService: Loaded song '{song.song_name}' ({song.id})")
        if self._event_bus:
            self._event_bus.publish(SongLoaded(song_id=song.id, data={"song": song.to_dict()}))
        return CommandResult.success_result(f"Loaded song {song.id}", data=song)

    async def publish(self, song_id: str, notes: Iterable[Note], duration: float) -> CommandResult[Track]:
        """
        Publish the notes as a new track.

        Args:
            song_id: Song the notes belong to
            notes: Notes to publish (collection order)
            duration: Audio duration in seconds

        Returns:
            CommandResult with the stored Track on success
        """
        try:
            track = Track(song_id=str(song_id), duration=duration, notes=list(notes))
        except ValueError as e:
            Log.warning(f"TrackService: Refusing to publish: {e}")
            return CommandResult.error_result("Invalid track", errors=[str(e)])

        try:
            stored = await self._repository.create_track(track)
        except NoteApiError as e:
            Log.error(f"TrackService: Failed to publish track (status {e.status_code}): {e.errors}")
            return CommandResult.error_result("Failed to publish track", errors=e.errors)
        except (httpx.HTTPError, ValueError) as e:
            Log.error(f"TrackService: Failed to publish track: {e}")
            return CommandResult.error_result("Failed to publish track", errors=[str(e)])

        Log.info(f"TrackService: Published track {stored.id} with {len(stored.notes)} notes")
        if self._event_bus:
            self._event_bus.publish(TrackPublished(song_id=stored.song_id, data={"track_id": stored.id}))
        return CommandResult.success_result(f"Published track {stored.id}", data=stored)
