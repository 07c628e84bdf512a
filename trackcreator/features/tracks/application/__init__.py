"""
Application layer for tracks feature.
"""
from trackcreator.features.tracks.application.track_service import TrackService

__all__ = ['TrackService']
