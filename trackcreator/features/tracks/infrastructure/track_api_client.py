"""
HTTP Track Repository

TrackRepository implementation backed by the remote API.
"""
from trackcreator.features.tracks.domain import Song, Track, TrackRepository
from trackcreator.shared.infrastructure.api_client import ApiClient


class HttpTrackRepository(TrackRepository):
    """Song lookup over /api/songs and publishing over /api/tracks."""

    def __init__(self, client: ApiClient):
        self._client = client

    async def fetch_song(self, song_id: str) -> Song:
        record = await self._client.request("GET", f"/api/songs/{song_id}")
        return Song.from_dict(record)

    async def create_track(self, track: Track) -> Track:
        record = await self._client.request("POST", "/api/tracks", json=track.to_payload())
        return Track.from_dict(record, fallback=track)
