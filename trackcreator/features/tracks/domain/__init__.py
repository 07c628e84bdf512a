"""
Domain layer for tracks feature.
"""
from trackcreator.features.tracks.domain.song import Song
from trackcreator.features.tracks.domain.track import Track
from trackcreator.features.tracks.domain.track_repository import TrackRepository

__all__ = [
    'Song',
    'Track',
    'TrackRepository',
]
