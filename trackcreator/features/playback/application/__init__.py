"""
Application layer for playback feature.
"""
from trackcreator.features.playback.application.playback_clock import PlaybackClock

__all__ = ['PlaybackClock']
