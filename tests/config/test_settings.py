import pytest

from config.settings import (
    BTC_WIDGET,
    DEFAULT_API_BASE,
    ETH_WIDGET,
    TrackerSettings,
    get_widget_config,
)


class TestWidgetConfig:
    def test_btc_widget(self):
        assert BTC_WIDGET.pair == "BTC-USD"
        assert BTC_WIDGET.symbol == "BTC"
        assert BTC_WIDGET.title == "BTC Track"
        assert BTC_WIDGET.subtitle == "Bitcoin"
        assert BTC_WIDGET.preview.price_24h == 59183.11
        assert BTC_WIDGET.preview.volume_24h == 377.83100325
        assert BTC_WIDGET.preview.last_trade_price == 57708.33

    def test_eth_widget(self):
        assert ETH_WIDGET.pair == "ETH-USD"
        assert ETH_WIDGET.title == "ETH Track"
        assert ETH_WIDGET.subtitle == "Ethereum"
        assert ETH_WIDGET.preview.last_trade_price == 3904.73

    @pytest.mark.parametrize("symbol", ["BTC", "btc", " Btc ", "BTC-USD"])
    def test_lookup(self, symbol):
        assert get_widget_config(symbol) is BTC_WIDGET

    def test_lookup_unknown(self):
        with pytest.raises(KeyError):
            get_widget_config("DOGE")


class TestTrackerSettings:
    def test_defaults(self):
        settings = TrackerSettings()

        assert settings.api_base == DEFAULT_API_BASE
        assert settings.request_timeout == 10.0
        assert settings.refresh_interval_minutes == 15
        assert settings.theme_mode == "light"
        assert set(settings.widgets) == {"BTC", "ETH"}

    def test_widgets_not_shared_between_instances(self):
        first = TrackerSettings()
        second = TrackerSettings()

        first.widgets.pop("ETH")

        assert "ETH" in second.widgets

    def test_lookup_uses_given_widgets(self):
        settings = TrackerSettings()
        settings.widgets.pop("ETH")

        assert get_widget_config("btc", settings.widgets) is BTC_WIDGET
        with pytest.raises(KeyError):
            get_widget_config("ETH", settings.widgets)
