"""
Display formatting for the editor header.
"""
import math


def format_time(seconds: float) -> str:
    """Playhead time as m:ss.mmm (truncated, not rounded)."""
    seconds = max(0.0, seconds)
    minutes = int(seconds // 60)
    whole = int(math.floor(seconds % 60))
    millis = int(math.floor((seconds % 1) * 1000))
    return f"{minutes}:{whole:02d}.{millis:03d}"


def format_duration(seconds: float) -> str:
    """Song length as m:ss."""
    seconds = max(0.0, seconds)
    minutes = int(seconds // 60)
    whole = int(math.floor(seconds % 60))
    return f"{minutes}:{whole:02d}"


def note_count_label(count: int) -> str:
    # "1 note", "0 notes", "7 notes"
    return f"{count} note{'' if count == 1 else 's'}"
