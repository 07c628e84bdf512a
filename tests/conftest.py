"""
Shared fixtures and fakes for trackcreator tests.
"""
import os
from typing import Any, Callable, Dict, List, Optional

import pytest

# Qt tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from trackcreator.application.events import EventBus
from trackcreator.features.notes.domain import Note, NoteApiError, NoteRepository
from trackcreator.features.tracks.domain import Song, Track, TrackRepository


class FakeNoteRepository(NoteRepository):
    """In-memory NoteRepository recording every call."""

    def __init__(self):
        self.calls: List[tuple] = []
        self.next_id = 1
        self.fail_with: Optional[Exception] = None

    async def create_note(self, note: Note) -> Note:
        self.calls.append(("create", note))
        if self.fail_with:
            raise self.fail_with
        stored = Note(id=str(self.next_id), time=note.time, lane=note.lane, note_type=note.note_type)
        self.next_id += 1
        return stored

    async def edit_note(self, note_id: str, note: Note) -> Note:
        self.calls.append(("edit", note_id, note))
        if self.fail_with:
            raise self.fail_with
        return note

    async def remove_note(self, note_id: str) -> None:
        self.calls.append(("remove", note_id))
        if self.fail_with:
            raise self.fail_with

    def count(self, kind: str) -> int:
        return sum(1 for call in self.calls if call[0] == kind)


class FakeTrackRepository(TrackRepository):
    """In-memory TrackRepository."""

    def __init__(self, songs: Optional[Dict[str, Song]] = None):
        self.songs = songs or {}
        self.published: List[Track] = []
        self.fetches: List[str] = []
        self.fail_with: Optional[Exception] = None

    async def fetch_song(self, song_id: str) -> Song:
        self.fetches.append(song_id)
        if self.fail_with:
            raise self.fail_with
        if song_id not in self.songs:
            raise NoteApiError("not found", status_code=404, errors=["Song not found"])
        return self.songs[song_id]

    async def create_track(self, track: Track) -> Track:
        if self.fail_with:
            raise self.fail_with
        self.published.append(track)
        return Track(id=str(len(self.published)), song_id=track.song_id,
                     duration=track.duration, notes=list(track.notes))


class FakeEngine:
    """WaveformEngine double that lets tests fire engine events."""

    def __init__(self, duration: float = 120.0):
        self.duration = duration
        self.current_time = 0.0
        self.handlers: Dict[str, List[Callable[..., Any]]] = {}
        self.calls: List[tuple] = []
        self.destroyed = False

    def load(self, url: str) -> None:
        self.calls.append(("load", url))

    def play(self) -> None:
        self.calls.append(("play",))

    def pause(self) -> None:
        self.calls.append(("pause",))

    def seek_to(self, progress: float) -> None:
        self.calls.append(("seek_to", progress))

    def get_duration(self) -> float:
        return self.duration

    def get_current_time(self) -> float:
        return self.current_time

    def on(self, event: str, handler: Callable[..., Any]) -> None:
        self.handlers.setdefault(event, []).append(handler)

    def destroy(self) -> None:
        self.destroyed = True
        self.calls.append(("destroy",))

    def emit(self, event: str, *args) -> None:
        for handler in self.handlers.get(event, []):
            handler(*args)

    def count(self, name: str) -> int:
        return sum(1 for call in self.calls if call[0] == name)


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def note_repo():
    return FakeNoteRepository()


@pytest.fixture
def engine():
    return FakeEngine()


@pytest.fixture
def recorded(event_bus):
    """Collect every published event by name."""
    events: Dict[str, list] = {}

    def recorder(name):
        def handler(event):
            events.setdefault(name, []).append(event)
        return handler

    for name in ("NotesChanged", "DurationChanged", "TimelineResized",
                 "PlaybackStateChanged", "SongLoaded", "TrackPublished"):
        event_bus.subscribe(name, recorder(name))
    return events


SONG = Song(
    id="7",
    song_name="Clair de Lune",
    artist_name="Debussy",
    image_url="http://cdn.test/cover.png",
    song_url="http://cdn.test/clair.mp3",
    duration=300.0,
)


@pytest.fixture
def song():
    return SONG


@pytest.fixture
def track_repo():
    return FakeTrackRepository({SONG.id: SONG})


@pytest.fixture
def engine_factory():
    """Factory creating FakeEngines; created engines are kept in .engines."""
    def factory():
        created = FakeEngine()
        factory.engines.append(created)
        return created
    factory.engines = []
    return factory
