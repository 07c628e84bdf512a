"""
Note entity

A timed marker placed on one of the five lanes of a track.
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional

from trackcreator.features.timeline.constants import LANES

# Sentinel id of the ghost note: a note that has not been persisted yet.
NEW_NOTE_ID = "new"


class NoteType(Enum):
    """Kinds of notes a player can hit."""
    TAP = "tap"


@dataclass(frozen=True)
class Note:
    """
    Note placed on a lane.

    Attributes:
        id: Server-assigned id (as str) or NEW_NOTE_ID while unsaved
        time: Position on the audio timeline in seconds (>= 0)
        lane: Lane number (1-5)
        note_type: Kind of note
    """
    id: str
    time: float
    lane: int
    note_type: NoteType = NoteType.TAP

    def __post_init__(self):
        """Validate note values."""
        if self.time < 0:
            raise ValueError(f"Note time cannot be negative: {self.time}")
        if self.lane not in LANES:
            raise ValueError(f"Lane must be {LANES[0]}-{LANES[-1]}, got {self.lane}")
        if not isinstance(self.note_type, NoteType):
            raise ValueError(f"Invalid note_type: {self.note_type}")

    @property
    def is_new(self) -> bool:
        """Whether this is the unsaved ghost note."""
        return self.id == NEW_NOTE_ID

    def moved_to(self, time: float, lane: int) -> "Note":
        """Copy of this note at a new time and lane."""
        return replace(self, time=time, lane=lane)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for the remote API."""
        return {
            "id": self.id,
            "time": self.time,
            "lane": self.lane,
            "note_type": self.note_type.value,
        }

    def to_payload(self) -> Dict[str, Any]:
        """Request body for create/edit calls (the ghost id is never sent)."""
        data = self.to_dict()
        if self.is_new:
            del data["id"]
        return data

    @classmethod
    def new(cls, time: float, lane: int, note_type: NoteType = NoteType.TAP) -> "Note":
        """Create an unsaved note."""
        return cls(id=NEW_NOTE_ID, time=time, lane=lane, note_type=note_type)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Note":
        """
        Create Note from a server record.

        Raises:
            ValueError: If the record is not an object, lacks a field, or its
                id collides with the ghost sentinel
        """
        if not isinstance(data, dict):
            raise ValueError(f"Note record must be an object, got {type(data).__name__}")
        raw_id: Optional[Any] = data.get("id")
        if raw_id is None:
            raise ValueError("Note record has no id")
        note_id = str(raw_id)
        if note_id == NEW_NOTE_ID:
            raise ValueError(f"Server note id collides with the '{NEW_NOTE_ID}' sentinel")

        try:
            return cls(
                id=note_id,
                time=float(data["time"]),
                lane=int(data["lane"]),
                note_type=NoteType(data.get("note_type", NoteType.TAP.value)),
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed note record {data!r}: {e}") from e
