"""Event system for application layer"""

from trackcreator.application.events.events import (
    DomainEvent,
    NotesChanged,
    DurationChanged,
    TimelineResized,
    PlaybackStateChanged,
    SongLoaded,
    TrackPublished,
)
from trackcreator.application.events.event_bus import EventBus

__all__ = [
    'DomainEvent',
    'NotesChanged',
    'DurationChanged',
    'TimelineResized',
    'PlaybackStateChanged',
    'SongLoaded',
    'TrackPublished',
    'EventBus',
]
