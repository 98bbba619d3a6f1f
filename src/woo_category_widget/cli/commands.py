"""CLI commands for previewing and checking the widget."""

import json
import sys

from typing import Any, Optional

import yaml

from pydantic import ValidationError

from ..config.defaults import get_default_config
from ..config.loader import (
    get_config_path,
    load_catalog_file,
    load_config,
    load_config_file,
    save_config,
)
from ..config.schema import CatalogData, PluginConfig
from ..host import InMemoryCatalog, LocalHost
from ..renderer import render_widget
from ..types import RenderContext
from ..widgets.registry import get_widget

WIDGET_NAME = "category_widget"


def build_context(
    config: PluginConfig, catalog_path: Optional[str] = None, include_css: bool = False
) -> RenderContext:
    """Create a render context backed by a catalog file.

    Args:
        config: Plugin configuration
        catalog_path: Catalog YAML path, overriding the configured one
        include_css: Whether to prepend scoped CSS to the fragment

    Raises:
        OSError, yaml.YAMLError, ValidationError: If the catalog file is unusable
    """
    path = catalog_path or config.catalog_path
    data = load_catalog_file(path) if path else CatalogData()

    return RenderContext(
        catalog=InMemoryCatalog(data, placeholder_src=config.catalog_placeholder_src),
        host=LocalHost.from_config(config),
        element_id=config.element_id,
        include_css=include_css,
    )


def cmd_schema(catalog_path: Optional[str] = None) -> int:
    """Print the widget's control sections as JSON.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        context = build_context(load_config(), catalog_path)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        print(f"✗ Failed to load catalog: {e}", file=sys.stderr)
        return 1

    widget = get_widget(WIDGET_NAME)
    sections = widget.get_controls(context)
    payload = {
        "name": widget.name,
        "title": widget.title,
        "icon": widget.icon,
        "categories": list(widget.categories),
        "sections": [section.model_dump(mode="json") for section in sections],
    }
    print(json.dumps(payload, indent=2))
    return 0


def cmd_render(
    settings: dict[str, Any],
    catalog_path: Optional[str] = None,
    include_css: bool = False,
) -> int:
    """Render the category widget for the given stored settings.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        context = build_context(load_config(), catalog_path, include_css)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        print(f"✗ Failed to load catalog: {e}", file=sys.stderr)
        return 1

    print(render_widget(WIDGET_NAME, settings, context), end="")
    return 0


def cmd_doctor() -> int:
    """Verify configuration and catalog health.

    Returns:
        Exit code (0 if healthy, 1 if issues found)
    """
    from .. import __version__

    print(f"woo-category-widget v{__version__}")
    print("\nChecking installation...\n")

    issues = 0

    config_path = get_config_path()
    print(f"[1/3] Checking config file at {config_path}")

    config = None
    if not config_path.exists():
        config = get_default_config()
        try:
            save_config(config)
            print("      ⓘ Config file not found, wrote defaults")
        except OSError as e:
            print(f"      ⚠ Config file not found and could not be written: {e}")
    else:
        try:
            config = load_config_file()
            print("      ✓ Config file is valid")
        except (OSError, yaml.YAMLError, ValidationError) as e:
            print(f"      ✗ Config file has errors: {e}")
            issues += 1

    if config is None:
        config = load_config()

    print("\n[2/3] Checking catalog file")

    context = None
    if not config.catalog_path:
        print("      ⓘ No catalog_path configured (catalog will be empty)")
        context = build_context(config)
    else:
        try:
            context = build_context(config)
            count = len(context.catalog.list_categories())
            print(f"      ✓ Loaded {count} categories from {config.catalog_path}")
        except (OSError, yaml.YAMLError, ValidationError) as e:
            print(f"      ✗ Failed to load catalog: {e}")
            issues += 1

    print("\n[3/3] Testing widget rendering")

    if context is None:
        print("      ⚠ Skipped (no usable catalog)")
    else:
        categories = context.catalog.list_categories()
        if not categories:
            print("      ⚠ Catalog has no categories to render")
        else:
            output = render_widget(
                WIDGET_NAME, {"category": categories[0].slug}, context
            )
            if "custom-category-widget" in output:
                print(f"      ✓ Rendered category '{categories[0].slug}'")
            else:
                print("      ✗ Render did not produce a category card")
                issues += 1

    print("\n" + "=" * 50)

    if issues == 0:
        print("✓ All checks passed!")
        return 0

    print(f"⚠ Found {issues} issue(s)")
    return 1
