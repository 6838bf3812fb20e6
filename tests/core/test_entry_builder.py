from datetime import datetime

import pytest

from core.entry_builder import build_entry
from core.models import ERROR_SNAPSHOT, DifferenceMode, TickerSnapshot


def test_present_data():
    now = datetime(2026, 10, 19, 12, 0)
    snapshot = TickerSnapshot(price_24h=59183.11, volume_24h=377.83100325, last_trade_price=57708.33)

    entry = build_entry(now, snapshot)

    assert entry.date == now
    assert entry.data is snapshot
    assert entry.error is False
    assert entry.difference == pytest.approx(1474.78)
    assert entry.diff_mode == DifferenceMode.UP


@pytest.mark.parametrize(
    "now", [datetime(1970, 1, 1), datetime(2026, 10, 19, 12, 0), datetime(2099, 12, 31, 23, 59)]
)
def test_absent_data_gives_error_entry(now):
    entry = build_entry(now, None)

    assert entry.date == now
    assert entry.error is True
    assert entry.data == ERROR_SNAPSHOT
    assert entry.diff_mode == DifferenceMode.ERROR
