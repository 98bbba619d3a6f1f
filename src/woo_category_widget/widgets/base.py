"""Base widget interface for page-builder components."""

from abc import ABC, abstractmethod

from markupsafe import Markup

from ..config.schema import ControlSection, WidgetSettings
from ..types import RenderContext


class Widget(ABC):
    """Base widget interface - all widgets must implement this.

    Widget metadata (name, title, icon, categories) is set by the
    @register_widget decorator rather than requiring implementation of methods.
    """

    # Class attributes set by @register_widget decorator
    name: str = ""
    title: str = ""
    icon: str = ""
    categories: tuple[str, ...] = ("general",)

    @abstractmethod
    def get_controls(self, context: RenderContext) -> list[ControlSection]:
        """Declare the editor controls for this widget.

        Args:
            context: Rendering context with host and catalog services

        Returns:
            Control sections in editor order
        """
        pass

    @abstractmethod
    def render(self, settings: WidgetSettings, context: RenderContext) -> Markup:
        """Render widget markup.

        Args:
            settings: Display settings for this widget instance
            context: Rendering context with host and catalog services

        Returns:
            Escaped markup fragment
        """
        pass
