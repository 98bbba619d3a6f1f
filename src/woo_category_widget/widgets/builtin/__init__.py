"""Built-in widgets.

Importing this module registers all built-in widgets with the registry.
"""

from .category import CategoryWidget

__all__ = ["CategoryWidget"]
