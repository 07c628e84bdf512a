"""
Tests for DragController.

Lane geometry used throughout: lanes start at x=100, 300 px per second,
lanes container spans y=200..700.
"""
import asyncio

import pytest

from trackcreator.application.events import DurationChanged
from trackcreator.features.notes.application import NoteStore
from trackcreator.features.notes.domain import Note, NoteApiError
from trackcreator.features.timeline.application import (
    DragController,
    SnapResolver,
    TimeAxisMapper,
    TimelineLayout,
)
from trackcreator.features.timeline.domain import DragState, OutcomeKind

LANE_LEFT = 100
TOP, BOTTOM = 200, 700


@pytest.fixture
def store(note_repo, event_bus):
    return NoteStore(note_repo, event_bus)


@pytest.fixture
def layout(event_bus):
    layout = TimelineLayout(TimeAxisMapper(300), event_bus)
    event_bus.publish(DurationChanged(data={"duration": 10.0}))
    return layout


@pytest.fixture
def controller(store, layout):
    return DragController(store, TimeAxisMapper(300), SnapResolver(0.08), layout)


def x_at(seconds):
    return LANE_LEFT + seconds * 300


# =============================================================================
# Pick up
# =============================================================================

class TestPickUp:
    """Tests for starting a drag."""

    def test_pick_up_ghost(self, controller):
        session = controller.pick_up("new")
        assert session.is_new
        assert session.origin_lane is None
        assert controller.state == DragState.DRAGGING

    def test_pick_up_existing_records_origin(self, controller, store):
        store.replace_all({"3": Note(id="3", time=2.0, lane=4)})
        session = controller.pick_up("3")
        assert session.origin_lane == 4
        assert session.origin_time == 2.0

    def test_unknown_id_ignored(self, controller):
        assert controller.pick_up("99") is None
        assert controller.state == DragState.IDLE

    def test_pick_up_while_dragging_ignored(self, controller):
        controller.pick_up("new")
        assert controller.pick_up("new") is None
        assert controller.session.is_new


# =============================================================================
# Drop on lane
# =============================================================================

class TestDropOnLane:
    """Tests for committing a drag onto a lane."""

    def test_ghost_drop_creates_one_note(self, controller, store, note_repo):
        controller.pick_up("new")

        outcome = asyncio.run(controller.drop_on_lane(3, x_at(2.0), LANE_LEFT))

        assert outcome.kind == OutcomeKind.CREATED
        assert note_repo.count("create") == 1
        created = note_repo.calls[0][1]
        assert created.lane == 3
        assert created.time == pytest.approx(2.0)
        assert store.get(outcome.note_id).lane == 3
        assert controller.state == DragState.IDLE

    def test_ghost_drop_snaps_to_other_lane(self, controller, store, note_repo):
        store.replace_all({"1": Note(id="1", time=5.00, lane=1)})
        controller.pick_up("new")

        asyncio.run(controller.drop_on_lane(2, x_at(5.03), LANE_LEFT))

        assert note_repo.calls[0][1].time == 5.00

    def test_drop_clamped_to_duration(self, controller, note_repo):
        controller.pick_up("new")
        asyncio.run(controller.drop_on_lane(1, x_at(12.0), LANE_LEFT))
        assert note_repo.calls[0][1].time == 10.0

    def test_drop_left_of_lane_clamped_to_zero(self, controller, note_repo):
        controller.pick_up("new")
        asyncio.run(controller.drop_on_lane(1, LANE_LEFT - 50, LANE_LEFT))
        assert note_repo.calls[0][1].time == 0.0

    def test_existing_note_drop_updates(self, controller, store, note_repo):
        store.replace_all({"3": Note(id="3", time=2.0, lane=4)})
        controller.pick_up("3")

        outcome = asyncio.run(controller.drop_on_lane(1, x_at(3.0), LANE_LEFT))

        assert outcome.kind == OutcomeKind.UPDATED
        assert note_repo.count("edit") == 1
        assert store.get("3").lane == 1
        assert store.get("3").time == pytest.approx(3.0)

    @pytest.mark.parametrize("lane", [0, 6])
    def test_invalid_lane_is_noop(self, controller, note_repo, lane):
        controller.pick_up("new")

        outcome = asyncio.run(controller.drop_on_lane(lane, x_at(1.0), LANE_LEFT))

        assert outcome.kind == OutcomeKind.IGNORED
        assert note_repo.calls == []

    def test_drop_without_session_is_noop(self, controller, note_repo):
        outcome = asyncio.run(controller.drop_on_lane(2, x_at(1.0), LANE_LEFT))
        assert outcome.kind == OutcomeKind.IGNORED
        assert note_repo.calls == []

    def test_failed_create_reports_errors(self, controller, store, note_repo):
        note_repo.fail_with = NoteApiError("bad", status_code=422, errors=["time is required"])
        controller.pick_up("new")

        outcome = asyncio.run(controller.drop_on_lane(2, x_at(1.0), LANE_LEFT))

        assert outcome.kind == OutcomeKind.FAILED
        assert outcome.errors == ["time is required"]
        assert store.count == 0
        assert controller.state == DragState.IDLE

    def test_end_drag_after_drop_is_noop(self, controller, note_repo):
        controller.pick_up("new")
        asyncio.run(controller.drop_on_lane(2, x_at(1.0), LANE_LEFT))

        outcome = asyncio.run(controller.end_drag(TOP - 100, TOP, BOTTOM))

        assert outcome.kind == OutcomeKind.IGNORED
        assert note_repo.count("remove") == 0

    def test_new_gesture_allowed_while_request_in_flight(self, store, layout):
        release = None

        class SlowRepo:
            async def create_note(self, note):
                await release.wait()
                return Note(id="1", time=note.time, lane=note.lane)

        async def scenario():
            nonlocal release
            release = asyncio.Event()
            slow_store = NoteStore(SlowRepo())
            controller = DragController(slow_store, TimeAxisMapper(300), SnapResolver(), layout)

            controller.pick_up("new")
            pending = asyncio.create_task(controller.drop_on_lane(1, x_at(1.0), LANE_LEFT))
            await asyncio.sleep(0)
            second = controller.pick_up("new")
            release.set()
            await pending
            return second, slow_store

        second, slow_store = asyncio.run(scenario())
        assert second is not None
        assert slow_store.count == 1

    def test_drop_ignored_when_collection_cleared_in_flight(self, layout):
        release = None

        class SlowRepo:
            async def create_note(self, note):
                await release.wait()
                return Note(id="1", time=note.time, lane=note.lane)

        async def scenario():
            nonlocal release
            release = asyncio.Event()
            slow_store = NoteStore(SlowRepo())
            controller = DragController(slow_store, TimeAxisMapper(300), SnapResolver(), layout)

            controller.pick_up("new")
            pending = asyncio.create_task(controller.drop_on_lane(2, x_at(1.0), LANE_LEFT))
            await asyncio.sleep(0)
            slow_store.clear()
            slow_store.song_id = "8"
            release.set()
            return await pending, slow_store

        outcome, slow_store = asyncio.run(scenario())
        assert outcome.kind == OutcomeKind.IGNORED
        assert slow_store.count == 0


# =============================================================================
# End drag
# =============================================================================

class TestEndDrag:
    """Tests for dragging out of the lanes."""

    def test_ghost_dragged_out_mutates_nothing(self, controller, store, note_repo):
        controller.pick_up("new")

        outcome = asyncio.run(controller.end_drag(BOTTOM + 50, TOP, BOTTOM))

        assert outcome.kind == OutcomeKind.DISCARDED
        assert note_repo.calls == []
        assert store.count == 0
        assert controller.state == DragState.IDLE

    def test_existing_dragged_out_deletes_once(self, controller, store, note_repo):
        store.replace_all({"3": Note(id="3", time=2.0, lane=4)})
        controller.pick_up("3")

        outcome = asyncio.run(controller.end_drag(TOP - 1, TOP, BOTTOM))

        assert outcome.kind == OutcomeKind.DELETED
        assert note_repo.count("remove") == 1
        assert "3" not in store

    def test_end_inside_lanes_is_noop(self, controller, store, note_repo):
        store.replace_all({"3": Note(id="3", time=2.0, lane=4)})
        controller.pick_up("3")

        outcome = asyncio.run(controller.end_drag(400, TOP, BOTTOM))

        assert outcome.kind == OutcomeKind.IGNORED
        assert note_repo.calls == []
        assert "3" in store
        assert controller.state == DragState.IDLE

    def test_failed_delete_keeps_note(self, controller, store, note_repo):
        store.replace_all({"3": Note(id="3", time=2.0, lane=4)})
        note_repo.fail_with = NoteApiError("gone", status_code=500)
        controller.pick_up("3")

        outcome = asyncio.run(controller.end_drag(BOTTOM + 1, TOP, BOTTOM))

        assert outcome.kind == OutcomeKind.FAILED
        assert "3" in store

    def test_cancel_clears_session(self, controller):
        controller.pick_up("new")
        controller.cancel()
        assert controller.session is None
        assert controller.state == DragState.IDLE
