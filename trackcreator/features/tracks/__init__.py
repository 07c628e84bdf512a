"""
Tracks feature.

Song read model, Track entity and publishing of a finished track.
"""
