"""Configuration schema, defaults and loading."""
