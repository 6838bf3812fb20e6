"""
Standard data models for the widgets.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class DifferenceMode(str, Enum):
    """Direction of the 24h difference, used to pick the display color."""

    UP = "up"
    DOWN = "down"
    ERROR = "error"


@dataclass(frozen=True)
class TickerSnapshot:
    """Ticker data decoded from the exchange."""

    price_24h: float
    volume_24h: float
    last_trade_price: float

    @property
    def difference(self) -> float:
        return self.price_24h - self.last_trade_price


ERROR_SNAPSHOT = TickerSnapshot(price_24h=0, volume_24h=0, last_trade_price=0)


@dataclass(frozen=True)
class DisplayEntry:
    """A single display-ready state of a widget."""

    date: datetime
    data: TickerSnapshot
    error: bool

    @property
    def difference(self) -> float:
        return self.data.difference

    @property
    def diff_mode(self) -> DifferenceMode:
        difference = self.data.difference
        if self.error or difference == 0.0:
            return DifferenceMode.ERROR
        elif difference > 0.0:
            return DifferenceMode.UP
        else:
            return DifferenceMode.DOWN


@dataclass(frozen=True)
class Timeline:
    """Entries handed to the host together with the time of the next refresh."""

    entries: list[DisplayEntry] = field(default_factory=list)
    next_refresh: datetime | None = None
