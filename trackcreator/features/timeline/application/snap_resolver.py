"""
Snap Resolver

Aligns a dropped note with a note already placed in another lane, so
chords line up exactly.
"""
from typing import Mapping

from trackcreator.features.notes.domain import Note
from trackcreator.features.timeline.constants import DEFAULT_SNAP_THRESHOLD, LANES


class SnapResolver:
    """
    Snaps a candidate time onto the nearest-in-order note of another lane.

    Lanes are scanned in ascending order (the target lane is skipped) and
    notes within a lane in collection order; the first note closer than
    the threshold wins. Pure: no state besides the threshold.
    """

    def __init__(self, threshold: float = DEFAULT_SNAP_THRESHOLD):
        if threshold < 0:
            raise ValueError(f"Snap threshold cannot be negative: {threshold}")
        self.threshold = threshold

    def resolve(self, candidate_time: float, target_lane: int, notes: Mapping[str, Note]) -> float:
        """
        Snapped time for a drop.

        Args:
            candidate_time: Time under the pointer in seconds
            target_lane: Lane the note is dropped on (never snapped against)
            notes: Current note collection (id -> Note)

        Returns:
            The time of the first matching note, or candidate_time unchanged
        """
        for lane in LANES:
            if lane == target_lane:
                continue
            for note in notes.values():
                if note.lane == lane and abs(note.time - candidate_time) < self.threshold:
                    return note.time
        return candidate_time
