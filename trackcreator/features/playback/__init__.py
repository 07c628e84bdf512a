"""
Playback feature.

Transport state and its binding to a waveform engine.
"""
