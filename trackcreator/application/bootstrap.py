"""
Application Bootstrap

Centralized service initialization for the track editor.
Loads the editor settings and wires every component over one event bus.
"""
from pathlib import Path
from typing import Optional, Union

import httpx

from trackcreator.application.events.event_bus import EventBus
from trackcreator.application.settings.editor_settings import EditorSettings, load_editor_settings
from trackcreator.features.editor.application.editor_session import (
    EditorHost,
    EditorSession,
    EngineFactory,
    ShortcutBinder,
)
from trackcreator.features.notes.application.note_store import NoteStore
from trackcreator.features.notes.infrastructure import HttpNoteRepository
from trackcreator.features.playback.application.playback_clock import PlaybackClock
from trackcreator.features.timeline.application import (
    DragController,
    SnapResolver,
    TimeAxisMapper,
    TimelineLayout,
)
from trackcreator.features.tracks.application.track_service import TrackService
from trackcreator.features.tracks.infrastructure import HttpTrackRepository
from trackcreator.shared.infrastructure.api_client import ApiClient
from trackcreator.utils.message import Log


class ServiceContainer:
    """Container for all editor services"""

    def __init__(
        self,
        settings: EditorSettings,
        event_bus: EventBus,
        api_client: ApiClient,
        note_store: NoteStore,
        track_service: TrackService,
        mapper: TimeAxisMapper,
        snap_resolver: SnapResolver,
        layout: TimelineLayout,
        drag_controller: DragController,
        clock: PlaybackClock,
    ):
        self.settings = settings
        self.event_bus = event_bus
        self.api_client = api_client
        self.note_store = note_store
        self.track_service = track_service
        self.mapper = mapper
        self.snap_resolver = snap_resolver
        self.layout = layout
        self.drag_controller = drag_controller
        self.clock = clock

    def open_session(
        self,
        song_id: str,
        engine_factory: EngineFactory,
        host: Optional[EditorHost] = None,
        bind_shortcuts: Optional[ShortcutBinder] = None,
    ) -> EditorSession:
        """Create an editor session sharing this container's store, service and clock."""
        return EditorSession(
            song_id,
            self.note_store,
            self.track_service,
            self.clock,
            engine_factory,
            host=host,
            bind_shortcuts=bind_shortcuts,
        )

    async def cleanup(self) -> None:
        """
        Release the engine, stop layout updates and close the HTTP client.
        """
        Log.info("ServiceContainer: Starting cleanup")
        self.drag_controller.cancel()
        self.clock.release()
        self.layout.detach()
        await self.api_client.aclose()
        Log.info("ServiceContainer: Cleanup complete")


def initialize_services(
    settings: Optional[EditorSettings] = None,
    settings_path: Optional[Union[str, Path]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ServiceContainer:
    """
    Initialize all editor services.

    Args:
        settings: Settings to use. If None, they are loaded from settings_path.
        settings_path: settings.json location (defaults to the user config directory)
        transport: Optional httpx transport for the API client

    Returns:
        ServiceContainer with all initialized services
    """
    if settings is None:
        settings = load_editor_settings(settings_path)

    Log.info(f"Initializing services with backend: {settings.backend_url}")

    event_bus = EventBus()

    api_client = ApiClient(settings.backend_url, settings.request_timeout, transport=transport)
    note_store = NoteStore(HttpNoteRepository(api_client), event_bus)
    track_service = TrackService(HttpTrackRepository(api_client), event_bus)
    Log.info("Bootstrap: Remote services initialized")

    mapper = TimeAxisMapper(settings.pixels_per_second)
    snap_resolver = SnapResolver(settings.snap_threshold)
    layout = TimelineLayout(mapper, event_bus)
    drag_controller = DragController(note_store, mapper, snap_resolver, layout)
    clock = PlaybackClock(event_bus)
    Log.info("Bootstrap: Timeline and playback initialized")

    container = ServiceContainer(
        settings=settings,
        event_bus=event_bus,
        api_client=api_client,
        note_store=note_store,
        track_service=track_service,
        mapper=mapper,
        snap_resolver=snap_resolver,
        layout=layout,
        drag_controller=drag_controller,
        clock=clock,
    )
    Log.info("Service container created successfully")
    return container
