"""CLI commands for woo-category-widget."""

from .commands import cmd_doctor, cmd_render, cmd_schema

__all__ = ["cmd_schema", "cmd_render", "cmd_doctor"]
