"""
Editor Session

Scoped lifetime of the track editor for one song.

Entering the session locks page scrolling, binds the transport shortcuts,
clears the note collection and starts fetching the song. Leaving it, for
any reason, cancels the fetch, releases the waveform engine, clears the
notes, removes the shortcuts and unlocks scrolling.

Usage:
    async with EditorSession(song_id, store, tracks, clock, engine_factory) as session:
        await session.wait_until_loaded()
        ...
        result = await session.publish()
"""
import asyncio
from contextlib import AsyncExitStack, suppress
from typing import Callable, Optional, Protocol

from trackcreator.application.api.result_types import CommandResult
from trackcreator.features.notes.application.note_store import NoteStore
from trackcreator.features.playback.application.playback_clock import PlaybackClock
from trackcreator.features.playback.domain import WaveformEngine
from trackcreator.features.tracks.application.track_service import TrackService
from trackcreator.features.tracks.domain import Song, Track
from trackcreator.utils.message import Log

# Binds keyboard shortcuts for a clock and returns the matching unbind callable
ShortcutBinder = Callable[[PlaybackClock], Callable[[], None]]
EngineFactory = Callable[[], WaveformEngine]


class EditorHost(Protocol):
    """Page hosting the editor."""

    def lock_scroll(self) -> None:
        ...

    def unlock_scroll(self) -> None:
        ...


class EditorSession:
    """
    Editing session for a single song at a time.

    Owns the in-flight song fetch task. Note CRUD calls made through the
    store are never cancelled by the session.
    """

    def __init__(
        self,
        song_id: str,
        store: NoteStore,
        track_service: TrackService,
        clock: PlaybackClock,
        engine_factory: EngineFactory,
        host: Optional[EditorHost] = None,
        bind_shortcuts: Optional[ShortcutBinder] = None,
    ):
        self._song_id = str(song_id)
        self._store = store
        self._track_service = track_service
        self._clock = clock
        self._engine_factory = engine_factory
        self._host = host
        self._bind_shortcuts = bind_shortcuts

        self.song: Optional[Song] = None
        self._fetch_task: Optional[asyncio.Task] = None
        self._stack: Optional[AsyncExitStack] = None

    @property
    def song_id(self) -> str:
        return self._song_id

    @property
    def store(self) -> NoteStore:
        return self._store

    @property
    def clock(self) -> PlaybackClock:
        return self._clock

    @property
    def is_active(self) -> bool:
        return self._stack is not None

    # =========================================================================
    # Lifetime
    # =========================================================================

    async def __aenter__(self) -> "EditorSession":
        async with AsyncExitStack() as stack:
            if self._host is not None:
                self._host.lock_scroll()
                stack.callback(self._host.unlock_scroll)
            if self._bind_shortcuts is not None:
                stack.callback(self._bind_shortcuts(self._clock))

            self._store.clear()
            stack.callback(self._store.clear)
            stack.callback(self._clock.release)
            stack.push_async_callback(self._cancel_fetch)

            self._start_fetch()
            self._stack = stack.pop_all()

        Log.info(f"EditorSession: Opened for song {self._song_id}")
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        stack, self._stack = self._stack, None
        if stack is not None:
            await stack.aclose()
        self.song = None
        Log.info(f"EditorSession: Closed for song {self._song_id}")

    # =========================================================================
    # Song
    # =========================================================================

    async def change_song(self, song_id: str) -> None:
        """
        Switch to another song.

        Cancels the pending fetch, releases the engine and clears the notes
        before fetching the new song. Same id is a no-op.
        """
        song_id = str(song_id)
        if song_id == self._song_id:
            return

        Log.info(f"EditorSession: Changing song {self._song_id} -> {song_id}")
        await self._cancel_fetch()
        self._clock.release()
        self._store.clear()
        self.song = None
        self._song_id = song_id
        self._start_fetch()

    async def wait_until_loaded(self) -> Optional[CommandResult[Song]]:
        """Await the current song fetch (None if no fetch was started)."""
        if self._fetch_task is None:
            return None
        return await self._fetch_task

    def _start_fetch(self) -> None:
        self._store.song_id = self._song_id
        self._fetch_task = asyncio.create_task(self._load_song(self._song_id))

    async def _load_song(self, song_id: str) -> CommandResult[Song]:
        result = await self._track_service.load_song(song_id)
        if result.failed:
            return result

        song = result.data
        self.song = song
        if not song.song_url:
            Log.warning(f"EditorSession: Song {song.id} has no audio URL")
            return result

        engine = self._engine_factory()
        self._clock.attach(engine)
        engine.load(song.song_url)
        return result

    async def _cancel_fetch(self) -> None:
        task, self._fetch_task = self._fetch_task, None
        if task is None:
            return
        if task.done():
            if not task.cancelled() and task.exception() is not None:
                Log.error(f"EditorSession: Song fetch failed: {task.exception()!r}")
            return
        task.cancel()
        with suppress(asyncio.CancelledError):
            await task
        Log.debug("EditorSession: Song fetch cancelled")

    # =========================================================================
    # Actions
    # =========================================================================

    async def publish(self) -> CommandResult[Track]:
        """Publish the current notes as a track for the current song."""
        duration = self._clock.duration
        if duration <= 0 and self.song is not None:
            duration = self.song.duration
        return await self._track_service.publish(
            self._song_id,
            self._store.notes().values(),
            duration,
        )

    def go_home(self) -> None:
        """Leave the editor: drop the local notes. Navigation is up to the host."""
        self._store.clear()
