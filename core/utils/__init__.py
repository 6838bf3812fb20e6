"""
Display formatting helpers for widget entries.
"""

from core.models import DifferenceMode, DisplayEntry

PLACEHOLDER_DASHES = "––––"


def format_price(price: float, precision: int = 1) -> str:
    """
    Format a number with a fixed precision.

    Args:
        price: The value to format.
        precision: Number of decimals.

    Returns:
        Formatted string, e.g. "59183.1".
    """
    return f"{float(price):.{precision}f}"


def price_text(entry: DisplayEntry) -> str:
    """Headline price: the 24h reference price with one decimal, or dashes on error."""
    if entry.error:
        return PLACEHOLDER_DASHES
    return format_price(entry.data.price_24h, 1)


def difference_text(entry: DisplayEntry) -> str:
    """
    24h difference with two decimals.

    Format rules:
    - error entry: "± ––––"
    - up: "+1474.78"
    - down: "-12.50"
    - flat (error mode but successful fetch): "0.00"
    """
    if entry.error:
        return f"± {PLACEHOLDER_DASHES}"
    sign = "+" if entry.diff_mode == DifferenceMode.UP else ""
    return f"{sign}{format_price(entry.difference, 2)}"


def volume_text(entry: DisplayEntry) -> str:
    """Volume line shown by the large widget."""
    value = PLACEHOLDER_DASHES if entry.error else format_price(entry.data.volume_24h, 2)
    return f"VOLUME: {value}"
