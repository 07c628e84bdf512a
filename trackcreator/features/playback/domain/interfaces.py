"""
Playback Interfaces

Protocol for the waveform/audio engine the editor plays songs through.
"""
from typing import Any, Callable, Protocol, runtime_checkable

# Engine events the clock listens to
ENGINE_EVENTS = ("ready", "audioprocess", "seek", "finish", "error")


@runtime_checkable
class WaveformEngine(Protocol):
    """
    Protocol for waveform engines.

    Implement this to connect an audio player to the PlaybackClock. Events
    are delivered through handlers registered with on():

    - "ready": audio decoded, duration available
    - "audioprocess": periodic tick while playing
    - "seek": handler receives progress in [0, 1]
    - "finish": playback reached the end
    - "error": handler receives an error description
    """

    def load(self, url: str) -> None:
        """Start loading audio from url."""
        ...

    def play(self) -> None:
        ...

    def pause(self) -> None:
        ...

    def seek_to(self, progress: float) -> None:
        """
        Move the playhead.

        Args:
            progress: Position as a fraction of the duration (0.0 - 1.0)
        """
        ...

    def get_duration(self) -> float:
        ...

    def get_current_time(self) -> float:
        ...

    def on(self, event: str, handler: Callable[..., Any]) -> None:
        """Register a handler for an engine event."""
        ...

    def destroy(self) -> None:
        """Release audio resources. The engine is unusable afterwards."""
        ...
