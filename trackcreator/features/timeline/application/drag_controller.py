"""
Drag Controller
===============

Handles drag-and-drop of notes between the palette and the five lanes.

State Machine:
    IDLE -> (pick_up) -> DRAGGING -> (drop_on_lane) -> COMMITTED -> IDLE
                             |
                             +----> (end_drag outside lanes) -> DISCARDED -> IDLE

The session is cleared before any remote call is awaited, so a new gesture
can start while the previous one is still in flight. The controller never
touches the note collection itself; NoteStore applies confirmed changes.
"""
from typing import Optional

from trackcreator.features.notes.application.note_store import NoteStore
from trackcreator.features.notes.domain import Note, NEW_NOTE_ID
from trackcreator.features.timeline.application.snap_resolver import SnapResolver
from trackcreator.features.timeline.application.time_axis import TimeAxisMapper, TimelineLayout
from trackcreator.features.timeline.constants import LANES
from trackcreator.features.timeline.domain import DragOutcome, DragSession, DragState, OutcomeKind
from trackcreator.utils.message import Log


class DragController:
    """
    Controls note drag gestures.

    Usage:
        controller.pick_up("new")
        outcome = await controller.drop_on_lane(3, pointer_x=900, lane_left=150)
        await controller.end_drag(pointer_y, lanes_top, lanes_bottom)  # no-op after a drop
    """

    def __init__(
        self,
        store: NoteStore,
        mapper: TimeAxisMapper,
        snap_resolver: Optional[SnapResolver] = None,
        layout: Optional[TimelineLayout] = None,
    ):
        """
        Args:
            store: Note collection the gestures apply to
            mapper: Pixel to time conversion
            snap_resolver: Cross-lane snapping (default threshold if omitted)
            layout: Source of the known audio duration used for clamping
        """
        self._store = store
        self._mapper = mapper
        self._snap = snap_resolver or SnapResolver()
        self._layout = layout

        self._state = DragState.IDLE
        self._session: Optional[DragSession] = None

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def session(self) -> Optional[DragSession]:
        return self._session

    @property
    def is_dragging(self) -> bool:
        return self._state == DragState.DRAGGING

    # =========================================================================
    # Public API
    # =========================================================================

    def pick_up(self, payload: str) -> Optional[DragSession]:
        """
        Start dragging the ghost note or an existing note.

        Args:
            payload: Drag key, NEW_NOTE_ID or an existing note id

        Returns:
            The new session, or None if the pick-up was ignored
        """
        if self._state != DragState.IDLE:
            Log.warning(f"DragController: pick_up('{payload}') while {self._state.name}, ignoring")
            return None

        note_id = str(payload)
        if note_id == NEW_NOTE_ID:
            session = DragSession(note_id=NEW_NOTE_ID)
        else:
            note = self._store.get(note_id)
            if note is None:
                Log.warning(f"DragController: Unknown note '{note_id}', ignoring pick_up")
                return None
            session = DragSession(note_id=note_id, origin_lane=note.lane, origin_time=note.time)

        self._session = session
        self._state = DragState.DRAGGING
        Log.debug(f"DragController: Picked up note '{note_id}'")
        return session

    async def drop_on_lane(self, lane: int, pointer_x: float, lane_left: float) -> DragOutcome:
        """
        Commit the dragged note onto a lane.

        Args:
            lane: Lane number under the pointer
            pointer_x: Pointer x position
            lane_left: Left edge of the lane (same coordinate space)

        Returns:
            DragOutcome describing what happened to the collection
        """
        session = self._session
        if session is None or lane not in LANES:
            return DragOutcome.ignored()

        time = self._snap.resolve(self._drop_time(pointer_x, lane_left), lane, self._store.notes())
        self._finish(DragState.COMMITTED)

        if session.is_new:
            result = await self._store.create(Note.new(time=time, lane=lane))
            if result.failed:
                return DragOutcome(kind=OutcomeKind.FAILED, note_id=NEW_NOTE_ID, errors=result.errors)
            if result.data.id not in self._store:
                return DragOutcome(kind=OutcomeKind.IGNORED, note_id=result.data.id, note=result.data)
            return DragOutcome(kind=OutcomeKind.CREATED, note_id=result.data.id, note=result.data)

        current = self._store.get(session.note_id)
        if current is None:
            Log.warning(f"DragController: Note '{session.note_id}' vanished during drag, ignoring drop")
            return DragOutcome(kind=OutcomeKind.IGNORED, note_id=session.note_id)

        result = await self._store.update(session.note_id, current.moved_to(time=time, lane=lane))
        if result.failed:
            return DragOutcome(kind=OutcomeKind.FAILED, note_id=session.note_id, errors=result.errors)
        if session.note_id not in self._store:
            return DragOutcome(kind=OutcomeKind.IGNORED, note_id=session.note_id, note=result.data)
        return DragOutcome(kind=OutcomeKind.UPDATED, note_id=session.note_id, note=result.data)

    async def end_drag(self, pointer_y: float, lanes_top: float, lanes_bottom: float) -> DragOutcome:
        """
        Finish a gesture that was not dropped on a lane.

        Outside the lanes container an existing note is deleted and the ghost
        is simply discarded. Inside it nothing happens.

        Args:
            pointer_y: Pointer y position at release
            lanes_top: Top edge of the lanes container
            lanes_bottom: Bottom edge of the lanes container
        """
        session = self._session
        if session is None:
            return DragOutcome.ignored()

        if lanes_top <= pointer_y <= lanes_bottom:
            self._finish(DragState.IDLE)
            return DragOutcome(kind=OutcomeKind.IGNORED, note_id=session.note_id)

        self._finish(DragState.DISCARDED)
        if session.is_new:
            return DragOutcome(kind=OutcomeKind.DISCARDED, note_id=NEW_NOTE_ID)

        result = await self._store.delete(session.note_id)
        if result.failed:
            return DragOutcome(kind=OutcomeKind.FAILED, note_id=session.note_id, errors=result.errors)
        return DragOutcome(kind=OutcomeKind.DELETED, note_id=session.note_id)

    def cancel(self) -> None:
        """Abandon the current gesture without touching the collection."""
        if self._session is not None:
            Log.debug(f"DragController: Cancelled drag of '{self._session.note_id}'")
        self._finish(DragState.IDLE)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _drop_time(self, pointer_x: float, lane_left: float) -> float:
        time = self._mapper.to_time(pointer_x, lane_left)
        duration = self._layout.duration if self._layout else 0.0
        if duration > 0:
            time = min(time, duration)
        return time

    def _finish(self, via: DragState) -> None:
        """Pass through a terminal state back to IDLE, dropping the session."""
        if via != DragState.IDLE:
            self._state = via
            Log.debug(f"DragController: {via.name}")
        self._session = None
        self._state = DragState.IDLE
