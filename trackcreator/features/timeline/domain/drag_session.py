"""
Drag Types

State machine states, the in-flight drag session and the typed outcome of
a drag gesture.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

from trackcreator.features.notes.domain import Note, NEW_NOTE_ID


class DragState(Enum):
    """State of the drag controller."""
    IDLE = auto()
    DRAGGING = auto()
    COMMITTED = auto()
    DISCARDED = auto()


class OutcomeKind(Enum):
    """What a finished gesture did to the note collection."""
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    DISCARDED = "discarded"  # Ghost dragged out, nothing to delete
    IGNORED = "ignored"      # Invalid gesture, or response dropped after a reset
    FAILED = "failed"        # Remote call rejected, collection unchanged


@dataclass(frozen=True)
class DragSession:
    """
    A note being dragged.

    Attributes:
        note_id: Id of the dragged note, or NEW_NOTE_ID for the ghost
        origin_lane: Lane the note started in (None for the ghost)
        origin_time: Time the note started at (None for the ghost)
    """
    note_id: str
    origin_lane: Optional[int] = None
    origin_time: Optional[float] = None

    @property
    def is_new(self) -> bool:
        return self.note_id == NEW_NOTE_ID


@dataclass
class DragOutcome:
    """Result of drop_on_lane() / end_drag()."""
    kind: OutcomeKind
    note_id: Optional[str] = None
    note: Optional[Note] = None
    errors: List[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        """Whether the collection was mutated."""
        return self.kind in (OutcomeKind.CREATED, OutcomeKind.UPDATED, OutcomeKind.DELETED)

    @classmethod
    def ignored(cls) -> "DragOutcome":
        return cls(kind=OutcomeKind.IGNORED)
