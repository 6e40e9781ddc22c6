"""Process configuration"""

from .settings import Settings, load_settings, DEFAULT_API_URL

__all__ = ["Settings", "load_settings", "DEFAULT_API_URL"]
