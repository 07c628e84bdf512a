"""
Domain layer for playback feature.
"""
from trackcreator.features.playback.domain.playback_state import PlaybackState
from trackcreator.features.playback.domain.interfaces import WaveformEngine, ENGINE_EVENTS

__all__ = [
    'PlaybackState',
    'WaveformEngine',
    'ENGINE_EVENTS',
]
