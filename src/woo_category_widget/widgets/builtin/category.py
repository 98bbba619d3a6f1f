"""Product category card widget."""

from typing import Optional

from markupsafe import Markup

from ...config.schema import ControlSection, WidgetSettings
from ...controls import build_controls
from ...host import CatalogService
from ...types import CardDisplay, Category, RenderContext
from ...utils.colors import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_TEXT_COLOR,
    card_style,
    image_style,
    link_style,
    resolve_color,
)
from ...utils.html import element
from ..base import Widget
from ..registry import register_widget

INVALID_CATEGORY_NOTICE = Markup("<p>Invalid category selected.</p>")


def category_image_url(category: Category, catalog: CatalogService) -> str:
    """Thumbnail URL for a category, or the catalog placeholder."""
    thumbnail_id = catalog.get_term_meta(category.term_id, "thumbnail_id")
    if thumbnail_id and thumbnail_id.isdigit():
        url = catalog.get_attachment_url(int(thumbnail_id))
        if url:
            return url
    return catalog.placeholder_image_src()


def resolve_card(
    settings: WidgetSettings, catalog: CatalogService
) -> Optional[CardDisplay]:
    """Resolve the display values for a category card.

    Args:
        settings: Display settings for the widget instance
        catalog: Catalog to look the category up in

    Returns:
        Resolved display values, or None if the category does not exist
    """
    if not settings.category:
        return None

    category = catalog.get_category_by_slug(settings.category)
    if category is None:
        return None

    if settings.use_category_image == "yes":
        image_url = category_image_url(category, catalog)
    else:
        image_url = settings.custom_image.url if settings.custom_image else ""

    return CardDisplay(
        title=settings.custom_title or category.name,
        count=category.count,
        link=category.link,
        image_url=image_url,
        background_color=resolve_color(
            settings.background_color, DEFAULT_BACKGROUND_COLOR
        ),
        text_color=resolve_color(settings.text_color, DEFAULT_TEXT_COLOR),
    )


@register_widget(
    "category_widget",
    title="Category Widget",
    icon="eicon-posts-grid",
    categories=("general",),
)
class CategoryWidget(Widget):
    """Card showing a product category's image, title, count and link."""

    def get_controls(self, context: RenderContext) -> list[ControlSection]:
        return build_controls(context.catalog, context.host)

    def render(self, settings: WidgetSettings, context: RenderContext) -> Markup:
        """Render the category card, or a notice if the category is missing."""
        card = resolve_card(settings, context.catalog)
        if card is None:
            return INVALID_CATEGORY_NOTICE

        info = element(
            "div",
            {"class": "category-info"},
            element("h2", None, card.title),
            element("p", None, f"{card.count} products"),
            element(
                "a",
                {
                    "href": card.link,
                    "class": "view-link",
                    "style": link_style(card.text_color),
                },
                element("span", {"class": "arrow-icon"}, "→"),
            ),
        )
        image = element(
            "div",
            {"class": "category-image"},
            element(
                "img",
                {"src": card.image_url, "alt": card.title, "style": image_style()},
            ),
        )

        return element(
            "div",
            {
                "class": "custom-category-widget",
                "style": card_style(card.background_color, card.text_color),
            },
            info,
            image,
        )
