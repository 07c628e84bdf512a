"""
Track entity

A published set of notes for a song.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from trackcreator.features.notes.domain import Note


@dataclass
class Track:
    """
    Track entity.

    Attributes:
        song_id: Song the notes were placed on
        duration: Audio duration in seconds at publish time
        notes: Notes in the track
        id: Server-assigned id (None until published)
    """
    song_id: str
    duration: float
    notes: List[Note] = field(default_factory=list)
    id: Optional[str] = None

    def __post_init__(self):
        if not self.song_id:
            raise ValueError("Track song_id cannot be empty")
        if self.duration < 0:
            raise ValueError(f"Track duration cannot be negative: {self.duration}")

    def to_payload(self) -> Dict[str, Any]:
        """Request body for POST /api/tracks."""
        return {
            "song_id": self.song_id,
            "notes": [note.to_dict() for note in self.notes],
            "duration": self.duration,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], fallback: Optional["Track"] = None) -> "Track":
        """
        Create from a backend record.

        Fields missing from the record are taken from fallback (the submitted track).

        Raises:
            ValueError: If the record is not an object or is malformed
        """
        if not isinstance(data, dict):
            raise ValueError(f"Track record must be an object, got {type(data).__name__}")
        if data.get("id") is None:
            raise ValueError("Track record has no id")
        song_id = data.get("song_id", fallback.song_id if fallback else None)
        duration = data.get("duration", fallback.duration if fallback else 0.0)
        try:
            if "notes" in data:
                notes = [Note.from_dict(note) for note in data["notes"]]
            else:
                notes = list(fallback.notes) if fallback else []
            duration = float(duration)
        except TypeError as e:
            raise ValueError(f"Malformed track record: {e}") from e
        return cls(
            id=str(data["id"]),
            song_id=str(song_id) if song_id is not None else "",
            duration=duration,
            notes=notes,
        )
