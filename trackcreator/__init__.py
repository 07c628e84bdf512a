"""
TrackCreator - timeline note-editing engine for rhythm-game tracks.

Features:
- notes/: Note domain, NoteStore, remote note API client
- tracks/: Song metadata, track publishing
- timeline/: Pixel/time mapping, cross-lane snapping, drag state machine
- playback/: PlaybackClock wrapping the waveform engine transport
- editor/: EditorSession tying the features together for one song
"""

__version__ = "0.1.0"
