"""
Transport Shortcuts

Application-wide Space key handling for play/pause.

The filter is installed on the QApplication so Space toggles playback no
matter which widget has focus, and the key press never reaches the widget
(no button activation, no scrolling).
"""
from typing import Callable, Optional

from PyQt6.QtCore import QEvent, QObject, Qt
from PyQt6.QtWidgets import QApplication

from trackcreator.features.playback.application.playback_clock import PlaybackClock
from trackcreator.utils.message import Log


class TransportShortcutFilter(QObject):
    """Event filter mapping Space to PlaybackClock.toggle()."""

    def __init__(self, clock: PlaybackClock, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._clock = clock

    def eventFilter(self, obj, event):
        """Intercept Space so it toggles playback instead of reaching the focused widget."""
        if event.type() == QEvent.Type.KeyPress and event.key() == Qt.Key.Key_Space:
            # Held key: swallow repeats, toggle once
            if not event.isAutoRepeat():
                self._clock.toggle()
            return True
        return super().eventFilter(obj, event)


def bind_transport_shortcuts(clock: PlaybackClock, app: Optional[QApplication] = None) -> Callable[[], None]:
    """
    Install the Space filter on the application.

    Args:
        clock: Clock to toggle
        app: Application to install on (defaults to QApplication.instance())

    Returns:
        Callable removing the filter again
    """
    app = app or QApplication.instance()
    if app is None:
        raise RuntimeError("bind_transport_shortcuts requires a QApplication")

    shortcut_filter = TransportShortcutFilter(clock)
    app.installEventFilter(shortcut_filter)
    Log.debug("TransportShortcuts: Space bound to play/pause")

    def unbind() -> None:
        app.removeEventFilter(shortcut_filter)
        Log.debug("TransportShortcuts: Space unbound")

    return unbind
