"""Core app configuration, database and errors."""

from showcase.core.config import get_settings, settings
from showcase.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
