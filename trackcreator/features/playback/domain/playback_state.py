"""
Playback state
"""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class PlaybackState:
    """
    Snapshot of the transport.

    Attributes:
        is_playing: Whether audio is currently playing
        current_time: Playhead position in seconds
        duration: Audio duration in seconds (0 until the engine is ready)
    """
    is_playing: bool = False
    current_time: float = 0.0
    duration: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_playing": self.is_playing,
            "current_time": self.current_time,
            "duration": self.duration,
        }
