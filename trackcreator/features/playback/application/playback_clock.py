"""
Playback Clock

Coordinates the waveform engine with the editor's transport state.

Play and pause are idempotent. Every change of PlaybackState publishes
exactly one PlaybackStateChanged event; engine "ready" also publishes
DurationChanged so the timeline can resize.
"""
from dataclasses import replace
from typing import Optional

from trackcreator.application.events import DurationChanged, EventBus, PlaybackStateChanged
from trackcreator.features.playback.domain import PlaybackState, WaveformEngine
from trackcreator.utils.message import Log


class PlaybackClock:
    """
    Transport state bound to a WaveformEngine.

    Usage:
        clock = PlaybackClock(event_bus)
        clock.attach(engine)
        engine.load(song.song_url)
        clock.toggle()
    """

    def __init__(self, event_bus: Optional[EventBus] = None):
        self._event_bus = event_bus
        self._engine: Optional[WaveformEngine] = None
        self._state = PlaybackState()

    # =========================================================================
    # State
    # =========================================================================

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state.is_playing

    @property
    def current_time(self) -> float:
        return self._state.current_time

    @property
    def duration(self) -> float:
        return self._state.duration

    @property
    def engine(self) -> Optional[WaveformEngine]:
        return self._engine

    @property
    def can_play(self) -> bool:
        """Play button enabled."""
        return self._engine is not None and not self._state.is_playing

    @property
    def can_pause(self) -> bool:
        """Pause button enabled."""
        return self._engine is not None and self._state.is_playing

    # =========================================================================
    # Engine binding
    # =========================================================================

    def attach(self, engine: WaveformEngine) -> None:
        """
        Bind to an engine, releasing any previous one.

        Args:
            engine: Engine implementing WaveformEngine
        """
        if self._engine is not None:
            self.release()

        self._engine = engine
        engine.on("ready", lambda *args: self._on_ready(engine))
        engine.on("audioprocess", lambda *args: self._on_audioprocess(engine))
        engine.on("seek", lambda progress=0.0, *args: self._on_seek(engine, progress))
        engine.on("finish", lambda *args: self._on_finish(engine))
        engine.on("error", lambda detail=None, *args: self._on_error(engine, detail))
        Log.info("PlaybackClock: Engine attached")

    def release(self) -> None:
        """Destroy the engine and reset the transport (duration back to 0)."""
        engine = self._engine
        if engine is None:
            return

        self._engine = None
        engine.destroy()
        had_duration = self._state.duration > 0
        self._set_state(PlaybackState(), "release")
        if had_duration and self._event_bus:
            self._event_bus.publish(DurationChanged(data={"duration": 0.0}))
        Log.info("PlaybackClock: Engine released")

    # =========================================================================
    # Transport
    # =========================================================================

    def play(self) -> None:
        """Start playback (no-op while playing)."""
        if self._state.is_playing:
            return
        if self._engine is None:
            Log.warning("PlaybackClock: play() with no engine attached, ignoring")
            return

        self._engine.play()
        self._set_state(replace(self._state, is_playing=True), "play")

    def pause(self) -> None:
        """Pause playback (no-op while paused)."""
        if not self._state.is_playing:
            return
        if self._engine is not None:
            self._engine.pause()
        self._set_state(replace(self._state, is_playing=False), "pause")

    def restart(self) -> None:
        """Jump to the start and play."""
        if self._engine is None:
            Log.warning("PlaybackClock: restart() with no engine attached, ignoring")
            return

        self._engine.seek_to(0.0)
        if not self._state.is_playing:
            self._engine.play()
        self._set_state(replace(self._state, is_playing=True, current_time=0.0), "restart")

    def toggle(self) -> None:
        """Toggle between play and pause"""
        if self._state.is_playing:
            self.pause()
        else:
            self.play()

    # =========================================================================
    # Engine events
    # =========================================================================

    def _on_ready(self, engine: WaveformEngine) -> None:
        if engine is not self._engine:
            return
        duration = max(0.0, float(engine.get_duration()))
        Log.info(f"PlaybackClock: Audio ready, duration={duration:.3f}s")
        self._set_state(replace(self._state, duration=duration), "ready")
        if self._event_bus:
            self._event_bus.publish(DurationChanged(data={"duration": duration}))

    def _on_audioprocess(self, engine: WaveformEngine) -> None:
        if engine is not self._engine:
            return
        self._set_state(replace(self._state, current_time=float(engine.get_current_time())), "tick")

    def _on_seek(self, engine: WaveformEngine, progress: float) -> None:
        if engine is not self._engine:
            return
        progress = min(1.0, max(0.0, float(progress)))
        self._set_state(replace(self._state, current_time=self._state.duration * progress), "seek")

    def _on_finish(self, engine: WaveformEngine) -> None:
        if engine is not self._engine:
            return
        self._set_state(replace(self._state, is_playing=False), "finish")

    def _on_error(self, engine: WaveformEngine, detail) -> None:
        if engine is not self._engine:
            return
        Log.error(f"PlaybackClock: Engine error: {detail}")

    def _set_state(self, state: PlaybackState, reason: str) -> None:
        if state == self._state:
            return
        self._state = state
        if reason != "tick":
            Log.debug(f"PlaybackClock: {reason} -> {state}")
        if self._event_bus:
            self._event_bus.publish(PlaybackStateChanged(data={**state.to_dict(), "reason": reason}))
