"""
Price widget displaying a single ticker entry in one of three sizes.
"""

from enum import Enum
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QBoxLayout, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from config.settings import WidgetConfig
from core.models import DisplayEntry
from core.utils import difference_text, price_text, volume_text
from ui.styles.theme import difference_color, get_stylesheet


class WidgetFamily(Enum):
    """Size variants; the value is the size index used for font scaling."""
    SMALL = 0
    MEDIUM = 1
    LARGE = 2

    @property
    def size(self):
        return {
            WidgetFamily.SMALL: (170, 170),
            WidgetFamily.MEDIUM: (364, 170),
            WidgetFamily.LARGE: (364, 382),
        }[self]


class TickerWidget(QWidget):
    """Renders DisplayEntry values: header, price, difference and (large only) volume."""

    def __init__(self, config: WidgetConfig, family: WidgetFamily = WidgetFamily.SMALL,
                 theme_mode: str = "light", parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.config = config
        self.family = family
        self.theme_mode = theme_mode
        self.entry: Optional[DisplayEntry] = None
        self._setup_ui()

    def _setup_ui(self):
        self.setObjectName("tickerWidget")
        self.setWindowTitle(self.config.title)
        self.setToolTip(self.config.description)
        self.setFixedSize(*self.family.size)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet(get_stylesheet(self.theme_mode))

        large = self.family == WidgetFamily.LARGE
        small = self.family == WidgetFamily.SMALL

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)

        # Header
        self.title_label = self._label("titleLabel", self.config.title, 40 if large else 28)
        self.subtitle_label = self._label("subtitleLabel", self.config.subtitle, 28 if large else 17)
        layout.addWidget(self.title_label)
        layout.addWidget(self.subtitle_label)
        layout.addStretch()

        # Pricing: side by side on medium, stacked otherwise
        self.price_label = self._label(
            "priceLabel", "", 17 if small else self.family.value * 25 + 14
        )
        self.difference_label = self._label("differenceLabel", "", 13 if small else 22)
        if self.family == WidgetFamily.MEDIUM:
            pricing: QBoxLayout = QHBoxLayout()
            pricing.setAlignment(Qt.AlignmentFlag.AlignBaseline | Qt.AlignmentFlag.AlignLeft)
        else:
            pricing = QVBoxLayout()
        pricing.addWidget(self.price_label)
        pricing.addWidget(self.difference_label)
        layout.addLayout(pricing)
        layout.addStretch()

        self.volume_label: Optional[QLabel] = None
        if large:
            self.volume_label = self._label("volumeLabel", "", 22)
            layout.addWidget(self.volume_label)

    def _label(self, name: str, text: str, font_size: int) -> QLabel:
        label = QLabel(text)
        label.setObjectName(name)
        font = label.font()
        font.setPixelSize(font_size)
        label.setFont(font)
        return label

    def set_entry(self, entry: DisplayEntry):
        """Update the displayed values."""
        self.entry = entry
        self.price_label.setText(price_text(entry))
        self.difference_label.setText(difference_text(entry))
        color = difference_color(entry.diff_mode, self.theme_mode)
        self.difference_label.setStyleSheet(f"color: {color};")
        if self.volume_label is not None:
            self.volume_label.setText(volume_text(entry))
