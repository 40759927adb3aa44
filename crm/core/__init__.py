"""Core: config, rate limiting, lifespan and exception handlers.

Single place for settings and application bootstrap.
"""

from crm.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
