"""Core: config, exception handlers, and application lifespan."""

from access_admin.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
