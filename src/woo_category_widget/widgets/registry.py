"""Widget registry for managing available widgets."""

from typing import Callable, Optional, Sequence

from markupsafe import Markup

from ..host import HostRuntime
from ..utils.debug import debug_log
from ..utils.html import element
from .base import Widget

# Global registry of widget name -> widget instance
_WIDGET_REGISTRY: dict[str, Widget] = {}

PLUGIN_NAME = "Woo Category Widget"


def register_widget(
    name: str,
    title: str = "",
    icon: str = "",
    categories: Sequence[str] = ("general",),
) -> Callable[[type[Widget]], type[Widget]]:
    """Decorator to register widget classes with metadata.

    Usage:
        @register_widget("category_widget", title="Category Widget",
                         icon="eicon-posts-grid")
        class CategoryWidget(Widget):
            def render(self, settings, context):
                ...

    Args:
        name: Widget identifier used by the host (e.g., "category_widget")
        title: Human-readable name for the editor panel (defaults to formatted name)
        icon: Icon class shown in the editor panel
        categories: Editor panel groups the widget appears under
    """

    def decorator(cls: type[Widget]) -> type[Widget]:
        cls.name = name
        cls.title = title or name.replace("_", " ").title()
        cls.icon = icon
        cls.categories = tuple(categories)

        _WIDGET_REGISTRY[name] = cls()
        return cls

    return decorator


def get_widget(name: str) -> Optional[Widget]:
    """Get widget instance by name.

    Args:
        name: Widget identifier

    Returns:
        Widget instance or None if not found
    """
    return _WIDGET_REGISTRY.get(name)


def get_all_widgets() -> dict[str, Widget]:
    """Get all registered widgets as instances.

    Returns:
        Dictionary mapping widget name to instance
    """
    return dict(_WIDGET_REGISTRY)


def missing_host_notice() -> Markup:
    """Admin notice shown when the page builder is not active."""
    return element(
        "div",
        {"class": "notice notice-error"},
        element(
            "p",
            None,
            element("strong", None, PLUGIN_NAME),
            " requires the page builder to be installed and activated.",
        ),
    )


def register_widgets(host: HostRuntime) -> bool:
    """Register every known widget with the host.

    Called once when the extension loads. If the host is not active, an
    admin notice is queued instead and nothing is registered.

    Args:
        host: Host runtime to register with

    Returns:
        True if widgets were registered
    """
    from . import builtin  # noqa: F401

    if not host.is_loaded():
        host.add_admin_notice(missing_host_notice())
        debug_log("Host not loaded, skipping widget registration")
        return False

    for widget in _WIDGET_REGISTRY.values():
        host.register_widget(widget)
        debug_log(f"Registered widget {widget.name}", widget.name)

    return True
