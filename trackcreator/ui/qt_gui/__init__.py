"""
Qt adapters for the editor.
"""
from trackcreator.ui.qt_gui.transport_shortcuts import TransportShortcutFilter, bind_transport_shortcuts

__all__ = [
    'TransportShortcutFilter',
    'bind_transport_shortcuts',
]
