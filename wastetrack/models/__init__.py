"""SQLAlchemy ORM models."""

from wastetrack.models.base import Base
from wastetrack.models.catalog import Location, WasteType
from wastetrack.models.user import User
from wastetrack.models.waste_record import WasteRecord

__all__ = ["Base", "Location", "User", "WasteRecord", "WasteType"]
