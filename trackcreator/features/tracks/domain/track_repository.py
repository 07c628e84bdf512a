"""
Track Repository Interface

Defines the remote contract for songs and tracks.
"""
from abc import ABC, abstractmethod

from trackcreator.features.tracks.domain.song import Song
from trackcreator.features.tracks.domain.track import Track


class TrackRepository(ABC):
    """Repository interface for song lookup and track publishing."""

    @abstractmethod
    async def fetch_song(self, song_id: str) -> Song:
        """
        Get song metadata by id.

        Raises:
            NoteApiError: If the song cannot be fetched
        """
        pass

    @abstractmethod
    async def create_track(self, track: Track) -> Track:
        """
        Publish a track.

        Returns:
            The stored track with its server-assigned id

        Raises:
            NoteApiError: If the server rejects the track
        """
        pass
