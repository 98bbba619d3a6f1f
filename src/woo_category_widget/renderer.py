"""Main rendering pipeline for widgets."""

import re

from typing import Any, Optional

from markupsafe import Markup

from .controls import build_css, settings_for_display
from .types import RenderContext
from .utils.debug import debug_log
from .utils.html import element
from .widgets import builtin  # noqa: F401
from .widgets.registry import get_widget


def wrapper_selector(element_id: str) -> str:
    """CSS selector scoping a widget instance's rules."""
    return ".elementor-element-" + re.sub(r"[^A-Za-z0-9_-]", "", element_id)


def render_widget(
    widget_type: str, stored: Optional[dict[str, Any]], context: RenderContext
) -> Markup:
    """Render one widget instance from its stored settings.

    Args:
        widget_type: Registered widget name
        stored: Settings persisted by the host editor
        context: Render context with host and catalog services

    Returns:
        Markup fragment, empty if the widget type is unknown
    """
    widget = get_widget(widget_type)
    if not widget:
        return Markup("")

    sections = widget.get_controls(context)
    settings = settings_for_display(sections, stored)

    debug_log(f"Rendering with settings: {settings.model_dump()}", widget_type)

    fragment = widget.render(settings, context)

    if context.include_css and context.element_id:
        css = build_css(sections, settings, wrapper_selector(context.element_id))
        if css:
            fragment = element("style", None, Markup(css)) + fragment

    return fragment
