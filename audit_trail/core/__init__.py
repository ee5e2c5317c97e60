"""Core: config and application bootstrap (lifespan, exception handlers, wiring)."""

from audit_trail.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
