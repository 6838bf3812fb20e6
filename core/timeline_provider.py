"""
Refresh entry points called by the widget host.
"""

import logging
import threading
from datetime import datetime, timedelta
from typing import Callable, Optional

from config.settings import WidgetConfig
from core.entry_builder import build_entry
from core.models import DisplayEntry, TickerSnapshot, Timeline
from core.ticker_client import TickerClient

logger = logging.getLogger(__name__)

DEFAULT_REFRESH_INTERVAL = timedelta(minutes=15)


class TimelineProvider:
    """
    Produces display entries for one widget.

    Stateless between calls: every snapshot/timeline request is an
    independent fetch. The host decides when to ask again.
    """

    def __init__(self, client: TickerClient, widget: WidgetConfig,
                 clock: Optional[Callable[[], datetime]] = None,
                 refresh_interval: timedelta = DEFAULT_REFRESH_INTERVAL):
        self.client = client
        self.widget = widget
        self.clock = clock or datetime.now
        self.refresh_interval = refresh_interval

    def placeholder(self) -> DisplayEntry:
        """Constant preview entry. Never touches the network."""
        return DisplayEntry(date=self.clock(), data=self.widget.preview, error=False)

    def snapshot(self) -> DisplayEntry:
        """Fetch once and build an entry (Synchronous/Blocking)."""
        now = self.clock()
        return build_entry(now, self._fetch())

    def timeline(self) -> Timeline:
        """Fetch once and build a one-entry timeline (Synchronous/Blocking)."""
        now = self.clock()
        return self._timeline(now, self._fetch())

    def get_snapshot(self, completion: Callable[[DisplayEntry], None]) -> threading.Thread:
        """
        Request a snapshot entry asynchronously.
        `completion` is called exactly once, from the worker thread.
        """
        return self._dispatch(build_entry, completion)

    def get_timeline(self, completion: Callable[[Timeline], None]) -> threading.Thread:
        """
        Request a timeline asynchronously.
        `completion` is called exactly once, from the worker thread.
        """
        return self._dispatch(self._timeline, completion)

    def _fetch(self) -> Optional[TickerSnapshot]:
        try:
            return self.client.fetch(self.widget.pair)
        except Exception:
            logger.error(f"{self.widget.kind}: unexpected error fetching {self.widget.pair}",
                         exc_info=True)
            return None

    def _timeline(self, now: datetime, fetched: Optional[TickerSnapshot]) -> Timeline:
        return Timeline(entries=[build_entry(now, fetched)],
                        next_refresh=now + self.refresh_interval)

    def _dispatch(self, build: Callable, completion: Callable) -> threading.Thread:
        now = self.clock()

        def _run():
            result = build(now, self._fetch())
            logger.debug(f"{self.widget.kind}: refresh finished (error={_is_error(result)})")
            completion(result)

        thread = threading.Thread(target=_run, name=f"{self.widget.kind}-refresh", daemon=True)
        thread.start()
        return thread


def _is_error(result) -> bool:
    if isinstance(result, Timeline):
        return any(entry.error for entry in result.entries)
    return result.error
