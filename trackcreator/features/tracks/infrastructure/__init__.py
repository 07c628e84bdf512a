"""
Infrastructure layer for tracks feature.
"""
from trackcreator.features.tracks.infrastructure.track_api_client import HttpTrackRepository

__all__ = ['HttpTrackRepository']
