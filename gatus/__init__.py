"""Configuration loading and validation for a health-check status page."""

__version__ = "0.1.0"

__all__ = ["config", "connectivity", "duration", "maintenance", "ui", "web"]