"""Core configuration and logging for locale-engine."""
