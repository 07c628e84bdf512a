"""
Domain Events

Events that represent significant occurrences in the editor.
Used for loose coupling between the editing core and whatever view hosts it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Optional


@dataclass
class DomainEvent:
    """Base class for all domain events"""
    name: ClassVar[str] = "DomainEvent"
    song_id: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)


# Note Events
@dataclass
class NotesChanged(DomainEvent):
    """
    Raised after every local mutation of the note collection.

    Data fields:
        - change_type: "created", "updated", "deleted", "cleared" or "replaced"
        - note_id: Affected note id (absent for bulk changes)
        - count: Number of notes after the change
    """
    name: ClassVar[str] = "NotesChanged"


# Timeline Events
@dataclass
class DurationChanged(DomainEvent):
    """
    Raised when the audio duration becomes known or changes.

    Data fields:
        - duration: Duration in seconds
    """
    name: ClassVar[str] = "DurationChanged"


@dataclass
class TimelineResized(DomainEvent):
    """
    Raised after lane widths are recomputed from the duration.

    Data fields:
        - width: Timeline width in pixels
        - lane_widths: {lane_number: width}
    """
    name: ClassVar[str] = "TimelineResized"


# Playback Events
@dataclass
class PlaybackStateChanged(DomainEvent):
    """
    Raised once per PlaybackState change.

    Data fields:
        - is_playing, current_time, duration
        - reason: "play", "pause", "restart", "ready", "tick", "seek",
          "finish" or "release"
    """
    name: ClassVar[str] = "PlaybackStateChanged"


# Editor Events
@dataclass
class SongLoaded(DomainEvent):
    """
    Raised when song metadata has been fetched.

    Data fields:
        - song: Song.to_dict()
    """
    name: ClassVar[str] = "SongLoaded"


@dataclass
class TrackPublished(DomainEvent):
    """
    Raised after a track was created from the current notes.

    Data fields:
        - track_id: Server-assigned track id
    """
    name: ClassVar[str] = "TrackPublished"
