"""Data types for the category widget."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .host import CatalogService, HostRuntime


@dataclass(frozen=True)
class Category:
    """Product category record as exposed by the catalog extension."""

    term_id: int
    slug: str
    name: str
    count: int = 0
    link: str = ""
    meta: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class CardDisplay:
    """Display values resolved for one category card render."""

    title: str
    count: int
    link: str
    image_url: str
    background_color: str
    text_color: str


@dataclass
class RenderContext:
    """Collaborators passed to widgets during rendering."""

    catalog: "CatalogService"
    host: "HostRuntime"
    element_id: Optional[str] = None
    include_css: bool = False
