"""Pytest configuration and shared fixtures."""

import os
from datetime import datetime

import pytest

# Qt widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

FIXED_NOW = datetime(2026, 10, 19, 12, 0, 0)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def btc_payload():
    """Ticker response body for BTC-USD."""
    return {
        "symbol": "BTC-USD",
        "price_24h": 59183.11,
        "volume_24h": 377.83100325,
        "last_trade_price": 57708.33,
    }


@pytest.fixture(scope="session")
def qapp():
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
