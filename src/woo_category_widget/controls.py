"""Editor control declarations and the settings derived from them."""

import re

from typing import Any, Optional

from pydantic import ValidationError

from .config.schema import (
    ControlModel,
    ControlSection,
    ControlType,
    Tab,
    WidgetSettings,
)
from .host import CatalogService, HostRuntime
from .utils.debug import debug_log

CARD_SELECTOR = "{{WRAPPER}} .custom-category-widget"

_PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}")
_UNSAFE_CSS_CHARS = set("{}<>;")


def category_options(catalog: CatalogService) -> dict[str, str]:
    """Map category slug to name, keeping catalog order and empty categories."""
    return {
        category.slug: category.name
        for category in catalog.list_categories(hide_empty=False)
    }


def build_controls(
    catalog: CatalogService, host: HostRuntime
) -> list[ControlSection]:
    """Declare the category widget's editor controls.

    Args:
        catalog: Catalog used to populate the category selector
        host: Host runtime providing the placeholder image

    Returns:
        Content and style sections, in editor order
    """
    options = category_options(catalog)

    content = ControlSection(
        name="content_section",
        label="Content",
        tab=Tab.CONTENT,
        controls=[
            ControlModel(
                name="category",
                label="Category",
                type=ControlType.SELECT,
                options=options,
                default=next(iter(options), None),
            ),
            ControlModel(
                name="use_category_image",
                label="Use Category Image",
                type=ControlType.SWITCHER,
                label_on="Yes",
                label_off="No",
                return_value="yes",
                default="yes",
            ),
            ControlModel(
                name="custom_image",
                label="Custom Image",
                type=ControlType.MEDIA,
                default={"url": host.placeholder_image_src()},
                condition={"use_category_image!": "yes"},
            ),
            ControlModel(
                name="custom_title",
                label="Custom Title",
                type=ControlType.TEXT,
                default="",
            ),
        ],
    )

    style = ControlSection(
        name="style_section",
        label="Style",
        tab=Tab.STYLE,
        controls=[
            ControlModel(
                name="background_color",
                label="Background Color",
                type=ControlType.COLOR,
                selectors={CARD_SELECTOR: "background-color: {{VALUE}};"},
            ),
            ControlModel(
                name="text_color",
                label="Text Color",
                type=ControlType.COLOR,
                default="#ffffff",
                selectors={CARD_SELECTOR: "color: {{VALUE}};"},
            ),
            ControlModel(
                name="border_radius",
                label="Border Radius",
                type=ControlType.SLIDER,
                size_units=["px", "%"],
                range={"px": {"min": 0, "max": 100}, "%": {"min": 0, "max": 50}},
                default={"unit": "px", "size": 10},
                selectors={CARD_SELECTOR: "border-radius: {{SIZE}}{{UNIT}};"},
            ),
            ControlModel(
                name="padding",
                label="Padding",
                type=ControlType.DIMENSIONS,
                size_units=["px", "em", "%"],
                default={"top": 0, "right": 0, "bottom": 0, "left": 0, "unit": "px"},
                selectors={
                    CARD_SELECTOR: (
                        "padding: {{TOP}}{{UNIT}} {{RIGHT}}{{UNIT}} "
                        "{{BOTTOM}}{{UNIT}} {{LEFT}}{{UNIT}};"
                    )
                },
            ),
        ],
    )

    return [content, style]


def iter_controls(sections: list[ControlSection]) -> list[ControlModel]:
    """Flatten sections into their controls."""
    return [control for section in sections for control in section.controls]


def is_control_visible(control: ControlModel, values: dict[str, Any]) -> bool:
    """Check a control's condition against the current values.

    A condition key ending in "!" negates the comparison; a list value
    matches when the current value is any of its items.

    Args:
        control: Control whose condition is evaluated
        values: Current setting values keyed by control name

    Returns:
        True if every condition term holds
    """
    for key, expected in control.condition.items():
        negate = key.endswith("!")
        name = key.rstrip("!")
        actual = values.get(name)

        if isinstance(expected, list):
            matches = actual in expected
        else:
            matches = actual == expected

        if matches == negate:
            return False

    return True


def settings_for_display(
    sections: list[ControlSection], stored: Optional[dict[str, Any]]
) -> WidgetSettings:
    """Build the settings a widget renders with.

    Control defaults fill keys missing from the stored record; stored values
    win even when empty. Controls whose condition is not met are nulled.
    Values that fail validation are dropped one field at a time; the rest of
    the record is kept.

    Args:
        sections: Control declarations for the widget
        stored: Settings persisted by the host editor

    Returns:
        Validated display settings
    """
    values: dict[str, Any] = dict(stored or {})
    controls = iter_controls(sections)

    for control in controls:
        if control.name not in values and control.default is not None:
            values[control.name] = control.default

    for control in controls:
        if control.condition and not is_control_visible(control, values):
            values[control.name] = None

    return validate_settings(values)


def validate_settings(values: dict[str, Any]) -> WidgetSettings:
    """Validate settings, discarding only the fields that do not fit the schema."""
    values = dict(values)

    while True:
        try:
            return WidgetSettings(**values)
        except ValidationError as e:
            invalid = {error["loc"][0] for error in e.errors() if error["loc"]}
            invalid &= set(values)
            if not invalid:
                raise
            debug_log(f"Dropping invalid settings: {sorted(invalid)}")
            for key in invalid:
                del values[key]


def _css_value_tokens(control: ControlModel, value: Any) -> Optional[dict[str, str]]:
    """Placeholder substitutions for one control value, or None to skip."""
    if control.type == ControlType.COLOR:
        if not value:
            return None
        return {"VALUE": str(value)}

    if control.type == ControlType.SLIDER:
        if value is None or value.size in (None, ""):
            return None
        return {"SIZE": str(value.size), "UNIT": value.unit}

    if control.type == ControlType.DIMENSIONS:
        if value is None:
            return None
        sides = [value.top, value.right, value.bottom, value.left]
        if all(side == "" for side in sides):
            return None
        tokens = {
            "TOP": value.top,
            "RIGHT": value.right,
            "BOTTOM": value.bottom,
            "LEFT": value.left,
        }
        tokens = {key: str(side) if side != "" else "0" for key, side in tokens.items()}
        tokens["UNIT"] = value.unit
        return tokens

    if value in (None, ""):
        return None
    return {"VALUE": str(value)}


def build_css(
    sections: list[ControlSection], settings: WidgetSettings, wrapper: str
) -> str:
    """Expand control selectors into scoped CSS rules.

    Args:
        sections: Control declarations carrying selector templates
        settings: Display settings supplying the values
        wrapper: Selector replacing {{WRAPPER}}

    Returns:
        CSS rules, one per line, empty when nothing applies
    """
    rules = []

    for control in iter_controls(sections):
        if not control.selectors:
            continue

        tokens = _css_value_tokens(control, getattr(settings, control.name, None))
        if tokens is None:
            continue
        if any(_UNSAFE_CSS_CHARS & set(token) for token in tokens.values()):
            continue

        for selector, template in control.selectors.items():
            declaration = _PLACEHOLDER_RE.sub(
                lambda m: tokens.get(m.group(1), m.group(0)), template
            )
            scoped = selector.replace("{{WRAPPER}}", wrapper)
            rules.append(f"{scoped}{{{declaration}}}")

    return "\n".join(rules)
