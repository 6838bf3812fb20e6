from datetime import datetime

import pytest

from core.entry_builder import build_entry
from core.models import TickerSnapshot
from core.utils import (
    PLACEHOLDER_DASHES,
    difference_text,
    format_price,
    price_text,
    volume_text,
)

NOW = datetime(2026, 10, 19, 12, 0)


def entry_for(price_24h, last_trade_price, volume_24h=1.0):
    return build_entry(NOW, TickerSnapshot(price_24h, volume_24h, last_trade_price))


@pytest.fixture
def error_entry():
    return build_entry(NOW, None)


def test_format_price():
    assert format_price(59183.11) == "59183.1"
    assert format_price(1474.7800000000061, 2) == "1474.78"
    assert format_price(0, 2) == "0.00"


def test_price_text_shows_reference_price():
    assert price_text(entry_for(59183.11, 57708.33)) == "59183.1"


def test_difference_text_up_has_plus():
    assert difference_text(entry_for(59183.11, 57708.33)) == "+1474.78"


def test_difference_text_down():
    assert difference_text(entry_for(90, 102.5)) == "-12.50"


def test_difference_text_flat():
    assert difference_text(entry_for(100, 100)) == "0.00"


def test_volume_text():
    assert volume_text(entry_for(1, 2, volume_24h=377.83100325)) == "VOLUME: 377.83"


def test_error_entry_shows_dashes(error_entry):
    assert price_text(error_entry) == PLACEHOLDER_DASHES
    assert difference_text(error_entry) == "± ––––"
    assert volume_text(error_entry) == "VOLUME: ––––"
