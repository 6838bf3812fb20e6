from datetime import datetime

from core.models import ERROR_SNAPSHOT, DisplayEntry, TickerSnapshot


def build_entry(now: datetime, fetched: TickerSnapshot | None) -> DisplayEntry:
    """Combine a fetch result with the refresh time. Absent data becomes the error entry."""
    if fetched is None:
        return DisplayEntry(date=now, data=ERROR_SNAPSHOT, error=True)
    return DisplayEntry(date=now, data=fetched, error=False)
