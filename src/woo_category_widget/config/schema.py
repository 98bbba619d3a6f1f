"""Configuration schema using Pydantic for validation."""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, Field

Number = Union[int, float, str]


class ControlType(str, Enum):
    """Editor field types understood by the host."""

    SELECT = "select"
    SWITCHER = "switcher"
    MEDIA = "media"
    TEXT = "text"
    COLOR = "color"
    SLIDER = "slider"
    DIMENSIONS = "dimensions"


class Tab(str, Enum):
    """Editor panel tab a section is shown under."""

    CONTENT = "content"
    STYLE = "style"


class ImageValue(BaseModel):
    """Value stored by a media control.

    The host stores an unset attachment id as an empty string.
    """

    url: str = ""
    id: Optional[Union[int, str]] = None


class SliderValue(BaseModel):
    """Value stored by a slider-with-units control."""

    unit: str = "px"
    size: Optional[Number] = None


class DimensionsValue(BaseModel):
    """Value stored by a box-dimensions control."""

    top: Number = ""
    right: Number = ""
    bottom: Number = ""
    left: Number = ""
    unit: str = "px"
    isLinked: bool = True


class WidgetSettings(BaseModel):
    """Persisted settings for one category widget instance."""

    category: Optional[str] = None
    use_category_image: Optional[str] = ""
    custom_image: Optional[ImageValue] = None
    custom_title: str = ""
    background_color: Optional[str] = None
    text_color: Optional[str] = None
    border_radius: Optional[SliderValue] = None
    padding: Optional[DimensionsValue] = None

    model_config = {"extra": "ignore", "frozen": True}


class ControlModel(BaseModel):
    """Declaration of a single editor control."""

    name: str
    label: str
    type: ControlType
    default: Any = None
    options: dict[str, str] = Field(default_factory=dict)
    condition: dict[str, Any] = Field(default_factory=dict)
    selectors: dict[str, str] = Field(default_factory=dict)
    size_units: list[str] = Field(default_factory=list)
    range: dict[str, dict[str, float]] = Field(default_factory=dict)
    label_on: Optional[str] = None
    label_off: Optional[str] = None
    return_value: Optional[str] = None


class ControlSection(BaseModel):
    """Group of controls rendered together in one editor tab."""

    name: str
    label: str
    tab: Tab
    controls: list[ControlModel] = Field(default_factory=list)


class CategoryRecord(BaseModel):
    """Category entry in a catalog data file."""

    term_id: int
    slug: str
    name: str
    count: int = 0
    link: str = ""
    meta: dict[str, Union[str, int]] = Field(default_factory=dict)


class CatalogData(BaseModel):
    """Catalog snapshot loaded from YAML for previews and tests."""

    categories: list[CategoryRecord] = Field(default_factory=list)
    attachments: dict[int, str] = Field(default_factory=dict)
    placeholder_src: Optional[str] = None

    model_config = {"extra": "forbid"}


class PluginConfig(BaseModel):
    """Plugin-level configuration file."""

    version: int = 1
    host_placeholder_src: str = "/assets/images/placeholder.png"
    catalog_placeholder_src: str = "/assets/images/woocommerce-placeholder.png"
    catalog_path: Optional[str] = None
    element_id: str = "category-card"

    model_config = {"extra": "forbid"}
