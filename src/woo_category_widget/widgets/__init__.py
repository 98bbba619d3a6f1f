"""Widget base class and registry."""
