"""
Theme and stylesheet management.
"""

from core.models import DifferenceMode

# Dark theme colors
DARK_COLORS = {
    "background": "#1B2636",
    "heading": "#F5A623",
    "text": "#FFFFFF",
    "volume": "orange",
    "up": "#99FF99",
    "down": "#FF9999",
    "error": "#AAAAAA",
}

# Light theme colors
LIGHT_COLORS = {
    "background": "#F5F5F5",
    "heading": "#1B2636",
    "text": "#000000",
    "volume": "purple",
    "up": "#2E7D32",
    "down": "#C62828",
    "error": "#666666",
}


def get_theme_colors(theme_mode: str) -> dict:
    """Get color scheme based on theme mode."""
    if theme_mode == "dark":
        return DARK_COLORS
    else:  # "light" or default
        return LIGHT_COLORS


def difference_color(mode: DifferenceMode, theme_mode: str = "light") -> str:
    return get_theme_colors(theme_mode)[mode.value]


def get_stylesheet(theme_mode: str = "light") -> str:
    """Stylesheet of the ticker widget with theme support."""
    colors = get_theme_colors(theme_mode)

    return f"""
        QWidget#tickerWidget {{
            background-color: {colors['background']};
            border-radius: 16px;
        }}
        QLabel#titleLabel, QLabel#subtitleLabel {{
            color: {colors['heading']};
        }}
        QLabel#titleLabel {{
            font-weight: bold;
        }}
        QLabel#priceLabel {{
            color: {colors['text']};
            font-weight: bold;
        }}
        QLabel#differenceLabel {{
            font-weight: bold;
        }}
        QLabel#volumeLabel {{
            color: {colors['volume']};
            font-weight: bold;
        }}
    """
