"""Core app configuration, database and security."""

from wastetrack.core.config import get_settings, settings
from wastetrack.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
