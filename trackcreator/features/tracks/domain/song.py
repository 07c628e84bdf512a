"""
Song read model

Metadata of the song a track is being created for, as served by the backend.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Song:
    """
    Song metadata.

    Attributes:
        id: Song id (as str)
        song_name: Title
        artist_name: Artist
        image_url: Cover image URL
        song_url: Audio file URL loaded into the waveform engine
        duration: Duration in seconds as stored by the backend
    """
    id: str
    song_name: str = ""
    artist_name: str = ""
    image_url: Optional[str] = None
    song_url: Optional[str] = None
    duration: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "song_name": self.song_name,
            "artist_name": self.artist_name,
            "image_url": self.image_url,
            "song_url": self.song_url,
            "duration": self.duration,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Song":
        """
        Create from a backend record.

        Raises:
            ValueError: If the record is not an object, has no id or a bad duration
        """
        if not isinstance(data, dict):
            raise ValueError(f"Song record must be an object, got {type(data).__name__}")
        if data.get("id") is None:
            raise ValueError("Song record has no id")
        try:
            duration = float(data.get("duration") or 0.0)
        except TypeError as e:
            raise ValueError(f"Malformed song duration {data.get('duration')!r}") from e
        return cls(
            id=str(data["id"]),
            song_name=data.get("song_name") or "",
            artist_name=data.get("artist_name") or "",
            image_url=data.get("image_url"),
            song_url=data.get("song_url"),
            duration=duration,
        )
