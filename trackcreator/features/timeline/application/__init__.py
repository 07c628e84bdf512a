"""
Application layer for timeline feature.
"""
from trackcreator.features.timeline.application.time_axis import TimeAxisMapper, TimelineLayout
from trackcreator.features.timeline.application.snap_resolver import SnapResolver
from trackcreator.features.timeline.application.drag_controller import DragController

__all__ = [
    'TimeAxisMapper',
    'TimelineLayout',
    'SnapResolver',
    'DragController',
]
