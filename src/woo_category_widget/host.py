"""Collaborator interfaces for the page-builder host and the catalog extension.

Widgets never reach for ambient globals: the catalog and host runtime are
passed in explicitly. ``InMemoryCatalog`` and ``LocalHost`` implement the
interfaces for previews and tests.
"""

from typing import TYPE_CHECKING, Optional, Protocol

from markupsafe import Markup

from .config.schema import CatalogData, PluginConfig
from .types import Category

if TYPE_CHECKING:
    from .widgets.base import Widget


class CatalogService(Protocol):
    """Read-only access to product categories."""

    def list_categories(self, hide_empty: bool = False) -> list[Category]: ...

    def get_category_by_slug(self, slug: str) -> Optional[Category]: ...

    def get_term_meta(self, term_id: int, key: str) -> Optional[str]: ...

    def get_attachment_url(self, attachment_id: int) -> Optional[str]: ...

    def placeholder_image_src(self) -> str: ...


class HostRuntime(Protocol):
    """Services the page builder exposes to plugins."""

    def is_loaded(self) -> bool: ...

    def placeholder_image_src(self) -> str: ...

    def register_widget(self, widget: "Widget") -> None: ...

    def add_admin_notice(self, notice: Markup) -> None: ...


class InMemoryCatalog:
    """Catalog backed by a loaded ``CatalogData`` snapshot."""

    def __init__(self, data: CatalogData, placeholder_src: str = ""):
        self._categories = [
            Category(
                term_id=record.term_id,
                slug=record.slug,
                name=record.name,
                count=record.count,
                link=record.link,
                meta={key: str(value) for key, value in record.meta.items()},
            )
            for record in data.categories
        ]
        self._attachments = dict(data.attachments)
        self._placeholder_src = data.placeholder_src or placeholder_src

    def list_categories(self, hide_empty: bool = False) -> list[Category]:
        if hide_empty:
            return [c for c in self._categories if c.count > 0]
        return list(self._categories)

    def get_category_by_slug(self, slug: str) -> Optional[Category]:
        for category in self._categories:
            if category.slug == slug:
                return category
        return None

    def get_term_meta(self, term_id: int, key: str) -> Optional[str]:
        for category in self._categories:
            if category.term_id == term_id:
                return category.meta.get(key)
        return None

    def get_attachment_url(self, attachment_id: int) -> Optional[str]:
        return self._attachments.get(attachment_id)

    def placeholder_image_src(self) -> str:
        return self._placeholder_src


class LocalHost:
    """Minimal host runtime that records registrations and notices."""

    def __init__(self, placeholder_src: str = "", loaded: bool = True):
        self._placeholder_src = placeholder_src
        self._loaded = loaded
        self.widgets: dict[str, "Widget"] = {}
        self.notices: list[Markup] = []

    @classmethod
    def from_config(cls, config: PluginConfig) -> "LocalHost":
        return cls(placeholder_src=config.host_placeholder_src)

    def is_loaded(self) -> bool:
        return self._loaded

    def placeholder_image_src(self) -> str:
        return self._placeholder_src

    def register_widget(self, widget: "Widget") -> None:
        self.widgets[widget.name] = widget

    def add_admin_notice(self, notice: Markup) -> None:
        self.notices.append(notice)
