"""CSS color fallbacks and card style composition."""

from typing import Optional

from .html import style

DEFAULT_BACKGROUND_COLOR = "#000000"
DEFAULT_TEXT_COLOR = "#ffffff"


def resolve_color(value: Optional[str], fallback: str) -> str:
    """Return the configured color, or the fallback when unset or empty.

    Args:
        value: Color string from settings, may be None
        fallback: Color used when no value is set

    Returns:
        CSS color value
    """
    if not value:
        return fallback
    return value


def card_style(background_color: str, text_color: str) -> str:
    """Inline style for the outer card container."""
    return style(
        ("display", "flex"),
        ("align-items", "center"),
        ("justify-content", "space-between"),
        ("background-color", background_color),
        ("color", text_color),
        ("border-radius", "10px"),
        ("transition", "transform 0.3s ease"),
    )


def link_style(text_color: str) -> str:
    """Inline style for the category link."""
    return style(
        ("color", text_color),
        ("font-size", "1.5rem"),
        ("text-decoration", "none"),
    )


def image_style() -> str:
    """Inline style for the card image."""
    return style(("max-width", "130px"), ("border-radius", "10px"))
