"""
Static configuration for Crypto Track.
Holds the per-widget constants (pair, display strings, preview data)
and the shared network/refresh settings.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from core.models import TickerSnapshot

DEFAULT_API_BASE = "https://api.blockchain.com/v3/exchange/tickers"


@dataclass(frozen=True)
class WidgetConfig:
    """Configuration of a single price widget."""
    kind: str
    pair: str  # e.g. "BTC-USD"
    title: str
    subtitle: str
    description: str
    preview: TickerSnapshot

    @property
    def symbol(self) -> str:
        return self.pair.split("-")[0]


@dataclass
class TrackerSettings:
    """Settings shared by all widgets."""
    api_base: str = DEFAULT_API_BASE
    request_timeout: float = 10.0  # seconds
    refresh_interval_minutes: int = 15
    theme_mode: str = "light"  # "light" or "dark"
    widgets: Dict[str, WidgetConfig] = field(default_factory=lambda: dict(WIDGETS))


BTC_WIDGET = WidgetConfig(
    kind="BTC_Widget",
    pair="BTC-USD",
    title="BTC Track",
    subtitle="Bitcoin",
    description="Track Bitcoin Prices From Your Home Screen.",
    preview=TickerSnapshot(
        price_24h=59183.11,
        volume_24h=377.83100325,
        last_trade_price=57708.33,
    ),
)

ETH_WIDGET = WidgetConfig(
    kind="ETH_Widget",
    pair="ETH-USD",
    title="ETH Track",
    subtitle="Ethereum",
    description="Track Ethereum Prices From Your Home Screen.",
    preview=TickerSnapshot(
        price_24h=3949.7,
        volume_24h=719.13422951,
        last_trade_price=3904.73,
    ),
)

WIDGETS: Dict[str, WidgetConfig] = {
    BTC_WIDGET.symbol: BTC_WIDGET,
    ETH_WIDGET.symbol: ETH_WIDGET,
}


def get_widget_config(symbol: str, widgets: Optional[Dict[str, WidgetConfig]] = None) -> WidgetConfig:
    """
    Look up a widget by symbol.

    Args:
        symbol: Asset symbol ("BTC", "eth") or full pair ("ETH-USD").
        widgets: Widgets to search, keyed by symbol. Defaults to the built-in ones.

    Raises:
        KeyError: If no widget is configured for the symbol.
    """
    if widgets is None:
        widgets = WIDGETS
    key = symbol.strip().upper().split("-")[0]
    if key not in widgets:
        raise KeyError(f"No widget configured for symbol: {symbol}")
    return widgets[key]
