"""
Time Axis

Mapping between timeline pixels and audio seconds, and the lane layout
derived from the audio duration.

The horizontal scale (pixels per second) is fixed for an editor session.
"""
from typing import Dict, Optional

from trackcreator.application.events import DomainEvent, DurationChanged, EventBus, TimelineResized
from trackcreator.features.timeline.constants import DEFAULT_PIXELS_PER_SECOND, LANES
from trackcreator.utils.message import Log


class TimeAxisMapper:
    """
    Converts between pixels and seconds at a fixed scale.

    Usage:
        mapper = TimeAxisMapper(300)
        mapper.to_time(pixel_x=450, lane_left=150)   # 1.0
        mapper.to_pixel(2.5)                         # 750.0
    """

    def __init__(self, pixels_per_second: float = DEFAULT_PIXELS_PER_SECOND):
        if pixels_per_second <= 0:
            raise ValueError(f"pixels_per_second must be positive, got {pixels_per_second}")
        self._scale = float(pixels_per_second)

    @property
    def scale(self) -> float:
        """Pixels per second."""
        return self._scale

    def to_time(self, pixel_x: float, lane_left: float = 0.0) -> float:
        """
        Seconds at a horizontal pointer position.

        Args:
            pixel_x: Pointer x in the same coordinate space as lane_left
            lane_left: Left edge of the lane

        Returns:
            Time in seconds, never negative
        """
        return max(0.0, pixel_x - lane_left) / self._scale

    def to_pixel(self, seconds: float) -> float:
        return self._scale * seconds

    def timeline_width(self, duration: float) -> float:
        """Width in pixels of a timeline covering duration seconds."""
        return max(0.0, duration) * self._scale


class TimelineLayout:
    """
    Keeps waveform, lanes container and lane widths in sync with the duration.

    Listens for DurationChanged and publishes TimelineResized.
    """

    def __init__(self, mapper: TimeAxisMapper, event_bus: Optional[EventBus] = None):
        self._mapper = mapper
        self._event_bus = event_bus
        self._duration = 0.0
        self.waveform_width = 0.0
        self.container_width = 0.0
        self.lane_widths: Dict[int, float] = {lane: 0.0 for lane in LANES}

        if event_bus:
            event_bus.subscribe(DurationChanged, self._on_duration_changed)

    @property
    def duration(self) -> float:
        return self._duration

    def detach(self) -> None:
        """Stop listening for duration changes."""
        if self._event_bus:
            self._event_bus.unsubscribe(DurationChanged, self._on_duration_changed)

    def resize(self, duration: float) -> float:
        """
        Recompute every width for a new duration.

        Returns:
            The new timeline width in pixels
        """
        self._duration = max(0.0, duration)
        width = self._mapper.timeline_width(self._duration)
        self.waveform_width = width
        self.container_width = width
        self.lane_widths = {lane: width for lane in LANES}

        Log.debug(f"TimelineLayout: Resized to {width:.0f}px for {self._duration:.3f}s")
        if self._event_bus:
            self._event_bus.publish(TimelineResized(data={
                "width": width,
                "lane_widths": dict(self.lane_widths),
            }))
        return width

    def _on_duration_changed(self, event: DomainEvent) -> None:
        self.resize(float(event.data.get("duration", 0.0)))
