"""
Domain layer for timeline feature.
"""
from trackcreator.features.timeline.domain.drag_session import (
    DragState,
    DragSession,
    DragOutcome,
    OutcomeKind,
)

__all__ = [
    'DragState',
    'DragSession',
    'DragOutcome',
    'OutcomeKind',
]
