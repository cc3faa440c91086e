"""Configuration: restrack.toml discovery, settings, and logging."""
