"""
Application layer for editor feature.
"""
from trackcreator.features.editor.application.editor_session import EditorSession, EditorHost
from trackcreator.features.editor.application.formatting import (
    format_time,
    format_duration,
    note_count_label,
)

__all__ = [
    'EditorSession',
    'EditorHost',
    'format_time',
    'format_duration',
    'note_count_label',
]
