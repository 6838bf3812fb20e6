import logging
from datetime import datetime

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from core.models import DisplayEntry, Timeline
from core.timeline_provider import TimelineProvider

logger = logging.getLogger(__name__)


class WidgetHost(QObject):
    """
    Drives a TimelineProvider on the Qt event loop.
    Asks for a timeline, publishes its entry and re-arms a single-shot
    timer for the declared next refresh.
    """

    entry_updated = pyqtSignal(object)  # DisplayEntry

    # Crosses from the provider's worker thread to the GUI thread
    _timeline_ready = pyqtSignal(object)

    def __init__(self, provider: TimelineProvider, parent: QObject | None = None):
        super().__init__(parent)
        self.provider = provider
        self._running = False
        self._refreshing = False
        self._current: DisplayEntry | None = None

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self.refresh)
        self._timeline_ready.connect(self._on_timeline)

    @property
    def current_entry(self) -> DisplayEntry | None:
        return self._current

    def start(self):
        """Publish the placeholder and trigger the first refresh."""
        if self._running:
            return
        self._running = True
        self._publish(self.provider.placeholder())
        self.refresh()

    def stop(self):
        self._running = False
        self._timer.stop()

    def refresh(self):
        if not self._running or self._refreshing:
            return
        self._refreshing = True
        logger.debug(f"{self.provider.widget.kind}: requesting timeline")
        self.provider.get_timeline(self._timeline_ready.emit)

    def _on_timeline(self, timeline: Timeline):
        self._refreshing = False
        if not self._running:
            return

        if timeline.entries:
            self._publish(timeline.entries[-1])
        if timeline.next_refresh is not None:
            self._schedule(timeline.next_refresh)

    def _schedule(self, next_refresh: datetime):
        delay_ms = max(0, int((next_refresh - self.provider.clock()).total_seconds() * 1000))
        logger.debug(f"{self.provider.widget.kind}: next refresh in {delay_ms} ms")
        self._timer.start(delay_ms)

    def _publish(self, entry: DisplayEntry):
        self._current = entry
        self.entry_updated.emit(entry)
