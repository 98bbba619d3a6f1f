"""Category card widget for visual page builders."""

__version__ = "1.0.0"
