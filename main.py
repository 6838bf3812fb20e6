"""
Crypto Track - PyQt6 price widgets.
Main entry point.
"""

import argparse
import logging
import os
import sys
from datetime import timedelta

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QApplication

from config.settings import TrackerSettings, get_widget_config
from core.logger import setup_logging
from core.ticker_client import TickerClient
from core.timeline_provider import TimelineProvider
from core.widget_host import WidgetHost
from ui.widgets.ticker_widget import TickerWidget, WidgetFamily

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Track crypto prices from your desktop.")
    parser.add_argument("symbols", nargs="*", default=["BTC", "ETH"],
                        help="Widgets to show (BTC, ETH)")
    parser.add_argument("--family", choices=[f.name.lower() for f in WidgetFamily],
                        default="small", help="Widget size")
    return parser.parse_args(argv)


def main(argv=None):
    """Main application entry point."""
    args = parse_args(argv)

    log_level_env = os.environ.get("LOG_LEVEL", "INFO").upper()
    setup_logging(log_level=getattr(logging, log_level_env, logging.INFO))

    settings = TrackerSettings(theme_mode=os.environ.get("THEME_MODE", "light"))
    try:
        widget_configs = [get_widget_config(symbol, settings.widgets) for symbol in args.symbols]
    except KeyError as e:
        logger.error(e.args[0])
        sys.exit(2)

    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )
    app = QApplication(sys.argv[:1])
    app.setApplicationName("Crypto Track")

    family = WidgetFamily[args.family.upper()]
    widgets, hosts = [], []
    for config in widget_configs:
        # Each widget gets its own client: refreshes share no state
        client = TickerClient(settings.api_base, timeout=settings.request_timeout)
        provider = TimelineProvider(
            client, config,
            refresh_interval=timedelta(minutes=settings.refresh_interval_minutes),
        )
        widget = TickerWidget(config, family, settings.theme_mode)
        host = WidgetHost(provider, parent=widget)
        host.entry_updated.connect(widget.set_entry)
        widget.show()
        host.start()
        widgets.append(widget)
        hosts.append(host)

    logger.info(f"Showing widgets: {', '.join(c.kind for c in widget_configs)}")
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
